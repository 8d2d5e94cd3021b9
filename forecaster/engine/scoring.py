"""Composite 0-100 deal score.

Each metric contributes an independently capped number of points:
cash-on-cash 40, cap rate 25, DSCR 15, NPV 15, year-1 cash flow 5.
"""

from decimal import Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")

STRONG_THRESHOLD = Decimal("75")
FAIR_THRESHOLD = Decimal("55")


def score_deal(
    cash_on_cash: Decimal,
    cap_rate: Decimal,
    dscr: Decimal,
    npv: Decimal,
    cash_flow_year1: Decimal,
) -> Decimal:
    score = min(Decimal("40"), cash_on_cash * 100 * Decimal("1.2"))
    score += min(Decimal("25"), cap_rate * 100 * Decimal("0.8"))
    score += min(Decimal("15"), max(ZERO, (dscr - 1) * 25))
    # NaN NPV (e.g. a -100% discount rate) earns no points
    if not npv.is_nan():
        score += min(Decimal("15"), max(ZERO, npv / 20000))
    score += min(Decimal("5"), max(ZERO, cash_flow_year1 / 1000))
    return max(ZERO, min(HUNDRED, score))


def score_band(score: Decimal) -> str:
    if score >= STRONG_THRESHOLD:
        return "strong"
    if score >= FAIR_THRESHOLD:
        return "fair"
    return "weak"
