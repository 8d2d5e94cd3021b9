"""Canonical test fixtures used across the suite.

Fixture: £250K buy-to-let, 25% deposit, 5.5% repayment mortgage over 30yr,
£1,400/month rent, 10-year hold.
Owners: two individuals on £50K and £30K, 50/50 split.
"""

import pytest
from decimal import Decimal

from forecaster.models.deal import BuyerType, DealInputs, LoanType


@pytest.fixture
def canonical_inputs() -> DealInputs:
    """£250K property with standard assumptions."""
    return DealInputs(
        purchase_price=Decimal("250000"),
        deposit_pct=Decimal("0.25"),
        interest_rate=Decimal("0.055"),
        mortgage_years=30,
        monthly_rent=Decimal("1400"),
        vacancy_pct=Decimal("0.05"),
        mgmt_pct=Decimal("0.10"),
        repairs_pct=Decimal("0.08"),
        insurance_per_year=Decimal("500"),
        other_opex_per_year=Decimal("300"),
        exit_year=10,
    )


@pytest.fixture
def cash_purchase() -> DealInputs:
    """Same property bought outright: no mortgage at all."""
    return DealInputs(deposit_pct=Decimal("1"))


@pytest.fixture
def company_purchase() -> DealInputs:
    """Bought through a limited company: corporation tax and SDLT surcharge."""
    return DealInputs(buyer_type=BuyerType.COMPANY)


@pytest.fixture
def interest_only_long_hold() -> DealInputs:
    """Interest-only loan held 10 years past its 30-year term."""
    return DealInputs(loan_type=LoanType.INTEREST_ONLY, mortgage_years=30, exit_year=40)


@pytest.fixture
def reinvesting_inputs() -> DealInputs:
    """High-rent deal sweeping 50% of after-tax cash into the index fund."""
    return DealInputs(
        monthly_rent=Decimal("2200"),
        reinvest_income=True,
        reinvest_pct=Decimal("0.5"),
    )
