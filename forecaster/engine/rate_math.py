"""Mortgage and discounting primitives.

Pure functions: Decimal in, Decimal out. No rounding, no I/O.
"""

from decimal import Decimal, DivisionByZero, InvalidOperation, localcontext
from typing import Sequence


def monthly_payment(principal: Decimal, annual_rate: Decimal, years: int) -> Decimal:
    """Fixed monthly payment on a repayment mortgage.

    A zero rate spreads the principal evenly across the term.
    """
    n = years * 12
    if annual_rate == 0:
        return principal / n

    r = annual_rate / 12
    # M = P * r / (1 - (1+r)^-n)
    return principal * r / (1 - (1 + r) ** -n)


def remaining_balance(
    principal: Decimal, annual_rate: Decimal, years: int, months_paid: int
) -> Decimal:
    """Outstanding balance after `months_paid` scheduled payments.

    `months_paid` must already be clamped to [0, years * 12].
    """
    if annual_rate == 0:
        return principal * (1 - Decimal(months_paid) / (years * 12))

    r = annual_rate / 12
    pmt = monthly_payment(principal, annual_rate, years)
    growth = (1 + r) ** months_paid
    return principal * growth - pmt * (growth - 1) / r


def present_value(rate: Decimal, cash_flows: Sequence[Decimal]) -> Decimal:
    """Sum of cf[t] / (1+rate)^t; cf[0] is undiscounted.

    A -100% rate discounts later flows to +/-Infinity (or NaN when they
    cancel) instead of raising.
    """
    if not cash_flows:
        return Decimal("0")

    total = cash_flows[0]
    with localcontext() as ctx:
        ctx.traps[DivisionByZero] = False
        ctx.traps[InvalidOperation] = False
        for t, cf in enumerate(cash_flows[1:], start=1):
            total += cf / (1 + rate) ** t
    return total
