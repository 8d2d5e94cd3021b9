"""Cash flow analysis: rent, operating expenses, NOI, cap rate, CoC, DSCR.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from forecaster.models.deal import DealInputs

FOUR_PLACES = Decimal("0.0001")


def scheduled_rent(inputs: DealInputs, year: int) -> Decimal:
    """Annual rent before vacancy for a given year (1-indexed).

    Compounded year on year from the first year's rent.
    """
    rent = inputs.monthly_rent * 12
    for _ in range(year - 1):
        rent *= 1 + inputs.rent_growth
    return rent


def gross_rent(inputs: DealInputs, year: int) -> Decimal:
    """Rent actually collected: scheduled rent less vacancy."""
    return scheduled_rent(inputs, year) * (1 - inputs.vacancy_pct)


def operating_expenses(inputs: DealInputs, year: int) -> dict[str, Decimal]:
    """Itemized operating expenses for a given year.

    Management and repairs are charged on scheduled (pre-vacancy) rent.
    """
    rent = scheduled_rent(inputs, year)
    variable = rent * (inputs.mgmt_pct + inputs.repairs_pct)
    fixed = inputs.insurance_per_year + inputs.other_opex_per_year
    return {
        "variable": variable,
        "fixed": fixed,
        "total": variable + fixed,
    }


def noi(inputs: DealInputs, year: int) -> Decimal:
    """Net Operating Income = gross rent - operating expenses."""
    return gross_rent(inputs, year) - operating_expenses(inputs, year)["total"]


def ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Unrounded numerator / denominator, 0 when the denominator is 0."""
    if denominator == 0:
        return Decimal("0")
    return numerator / denominator


def cap_rate(noi_amount: Decimal, purchase_price: Decimal) -> Decimal:
    """Cap rate = NOI / purchase price."""
    return ratio(noi_amount, purchase_price).quantize(FOUR_PLACES, ROUND_HALF_UP)


def cash_on_cash(cash_flow: Decimal, cash_invested: Decimal) -> Decimal:
    """Cash-on-cash return = annual pre-tax cash flow / total cash invested."""
    return ratio(cash_flow, cash_invested).quantize(FOUR_PLACES, ROUND_HALF_UP)


def dscr(noi_amount: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service (0 with no debt)."""
    return ratio(noi_amount, annual_debt_service).quantize(FOUR_PLACES, ROUND_HALF_UP)


def yield_on_cost(noi_amount: Decimal, project_cost: Decimal) -> Decimal:
    """Yield on cost = NOI / (price + closing costs + renovation)."""
    return ratio(noi_amount, project_cost).quantize(FOUR_PLACES, ROUND_HALF_UP)


def property_value(inputs: DealInputs, year: int) -> Decimal:
    """Market value at the end of a year based on appreciation."""
    if year <= 0:
        return inputs.purchase_price
    return inputs.purchase_price * (1 + inputs.annual_appreciation) ** year


def net_sale_proceeds(market_value: Decimal, selling_costs_pct: Decimal, loan_balance: Decimal) -> Decimal:
    """Cash left from a sale after selling costs and loan payoff."""
    return market_value - market_value * selling_costs_pct - loan_balance
