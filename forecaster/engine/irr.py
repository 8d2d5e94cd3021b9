"""Internal rate of return via scipy root finding on the NPV curve.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from scipy.optimize import brentq

from forecaster.engine.rate_math import present_value

FOUR_PLACES = Decimal("0.0001")

IRR_LOWER_BOUND = -0.5
IRR_UPPER_BOUND = 10.0


def compute_irr(cash_flows: list[Decimal]) -> Decimal:
    """Rate at which the NPV of `cash_flows` is zero.

    Returns 0 when the flows never change sign or the root lies outside
    [-50%, 1000%].
    """
    if len(cash_flows) < 2:
        return Decimal("0")
    if all(cf >= 0 for cf in cash_flows) or all(cf <= 0 for cf in cash_flows):
        return Decimal("0")

    def npv(rate: float) -> float:
        return float(present_value(Decimal(str(float(rate))), cash_flows))

    try:
        irr = brentq(npv, IRR_LOWER_BOUND, IRR_UPPER_BOUND, xtol=1e-8, maxiter=1000)
    except ValueError:
        return Decimal("0")
    return Decimal(str(float(irr))).quantize(FOUR_PLACES, ROUND_HALF_UP)
