"""Opportunity cost: property wealth vs putting the same cash in an index fund.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ReinvestmentStep:
    contribution: Decimal
    fund_balance: Decimal


@dataclass(frozen=True)
class WealthComparison:
    property_wealth: Decimal
    index_fund_value: Decimal
    delta: Decimal
    delta_pct: Decimal


def index_fund_curve(
    initial_investment: Decimal, years: int, annual_growth: Decimal
) -> list[Decimal]:
    """Year-end balances of a buy-and-hold index fund.

    Returns list of length years + 1 (year 0 = initial).
    """
    curve = [initial_investment]
    value = initial_investment
    for _ in range(years):
        value = value * (1 + annual_growth)
        curve.append(value)
    return curve


def reinvest_cash(
    fund_balance: Decimal,
    after_tax_cash: Decimal,
    reinvest_share: Decimal,
    annual_growth: Decimal,
) -> ReinvestmentStep:
    """Grow the reinvestment fund a year and add this year's contribution.

    Only positive after-tax cash is swept; a zero share disables the fund.
    """
    if reinvest_share <= 0:
        return ReinvestmentStep(contribution=Decimal("0"), fund_balance=Decimal("0"))
    contribution = max(Decimal("0"), after_tax_cash) * reinvest_share
    return ReinvestmentStep(
        contribution=contribution,
        fund_balance=fund_balance * (1 + annual_growth) + contribution,
    )


def compare_wealth(property_wealth: Decimal, index_fund_value: Decimal) -> WealthComparison:
    """Property wealth minus index fund value, absolute and relative."""
    delta = property_wealth - index_fund_value
    delta_pct = Decimal("0") if index_fund_value == 0 else delta / index_fund_value
    return WealthComparison(
        property_wealth=property_wealth,
        index_fund_value=index_fund_value,
        delta=delta,
        delta_pct=delta_pct,
    )
