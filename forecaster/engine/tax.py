"""UK income tax and corporation tax on rental profit.

Income tax is used as a marginal calculator: the tax attributable to the
property is tax(base + share) - tax(base) for each owner.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from forecaster.models.deal import DealInputs

TWO_PLACES = Decimal("0.01")

PERSONAL_ALLOWANCE = Decimal("12570")
ALLOWANCE_TAPER_START = Decimal("100000")
BASIC_RATE_BAND = Decimal("37700")
ADDITIONAL_RATE_THRESHOLD = Decimal("125140")

BASIC_RATE = Decimal("0.20")
HIGHER_RATE = Decimal("0.40")
ADDITIONAL_RATE = Decimal("0.45")
CORPORATION_TAX_RATE = Decimal("0.19")


def personal_allowance(income: Decimal) -> Decimal:
    """Personal allowance, reduced by £1 for every £2 over £100,000."""
    if income <= 0:
        return Decimal("0")
    if income <= ALLOWANCE_TAPER_START:
        return PERSONAL_ALLOWANCE
    reduction = (income - ALLOWANCE_TAPER_START) / 2
    return max(Decimal("0"), PERSONAL_ALLOWANCE - reduction)


def income_tax(income: Decimal) -> Decimal:
    """Progressive income tax: 20% basic band, 40% higher, 45% additional."""
    if not income.is_finite() or income <= 0:
        return Decimal("0")

    allowance = personal_allowance(income)
    remaining = max(Decimal("0"), income - allowance)

    basic = min(remaining, BASIC_RATE_BAND)
    tax = basic * BASIC_RATE
    remaining -= basic

    if remaining > 0:
        # The additional-rate threshold is gross income, so the higher band
        # shrinks by whatever allowance is still available.
        higher_cap = max(Decimal("0"), ADDITIONAL_RATE_THRESHOLD - allowance - BASIC_RATE_BAND)
        higher = min(remaining, higher_cap)
        tax += higher * HIGHER_RATE
        remaining -= higher

    if remaining > 0:
        tax += remaining * ADDITIONAL_RATE

    return tax.quantize(TWO_PLACES, ROUND_HALF_UP)


def marginal_income_tax(base_income: Decimal, additional_income: Decimal) -> Decimal:
    """Tax attributable to an extra slice of income on top of a base income.

    Negative slices (rental losses) produce a negative result.
    """
    return income_tax(base_income + additional_income) - income_tax(base_income)


def corporation_tax(profit: Decimal) -> Decimal:
    """Flat corporation tax; losses are not relieved."""
    return (max(Decimal("0"), profit) * CORPORATION_TAX_RATE).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )


def taxable_rental_profit(noi: Decimal, interest_paid: Decimal) -> Decimal:
    """Taxable profit = NOI - mortgage interest.

    (Capital repayments are NOT deductible.)
    """
    return noi - interest_paid


def property_tax_for_year(taxable_profit: Decimal, inputs: DealInputs) -> Decimal:
    """Tax due on one year's rental profit for the deal's ownership structure."""
    if inputs.is_company:
        return corporation_tax(taxable_profit)

    base1, base2 = inputs.base_incomes
    share1, share2 = inputs.normalized_shares
    tax1 = marginal_income_tax(base1, taxable_profit * share1)
    tax2 = marginal_income_tax(base2, taxable_profit * share2)
    return (tax1 + tax2).quantize(TWO_PLACES, ROUND_HALF_UP)
