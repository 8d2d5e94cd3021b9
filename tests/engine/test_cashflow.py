from decimal import Decimal

from forecaster.engine.cashflow import (
    cap_rate,
    cash_on_cash,
    dscr,
    gross_rent,
    net_sale_proceeds,
    noi,
    operating_expenses,
    property_value,
    ratio,
    scheduled_rent,
    yield_on_cost,
)
from forecaster.models.deal import DealInputs


class TestRent:
    def test_year1_scheduled(self, canonical_inputs):
        assert scheduled_rent(canonical_inputs, 1) == Decimal("16800")

    def test_rent_growth(self, canonical_inputs):
        # 2% default growth
        assert scheduled_rent(canonical_inputs, 3) == Decimal("16800") * Decimal("1.02") ** 2

    def test_total_rent_collapse(self):
        inputs = DealInputs(rent_growth=Decimal("-1"))
        assert scheduled_rent(inputs, 1) == Decimal("16800")
        assert scheduled_rent(inputs, 2) == 0
        assert scheduled_rent(inputs, 5) == 0

    def test_vacancy(self, canonical_inputs):
        assert gross_rent(canonical_inputs, 1) == Decimal("15960")


class TestOperatingExpenses:
    def test_itemized(self, canonical_inputs):
        expenses = operating_expenses(canonical_inputs, 1)
        # Management + repairs on scheduled rent
        assert expenses["variable"] == Decimal("3024")
        assert expenses["fixed"] == Decimal("800")
        assert expenses["total"] == Decimal("3824")

    def test_noi(self, canonical_inputs):
        assert noi(canonical_inputs, 1) == Decimal("12136")


class TestRatios:
    def test_cap_rate(self):
        assert cap_rate(Decimal("12136"), Decimal("250000")) == Decimal("0.0485")

    def test_cash_on_cash(self):
        assert cash_on_cash(Decimal("5000"), Decimal("50000")) == Decimal("0.1000")

    def test_dscr(self):
        assert dscr(Decimal("15000"), Decimal("12000")) == Decimal("1.2500")

    def test_dscr_no_debt(self):
        assert dscr(Decimal("12136"), Decimal("0")) == 0

    def test_ratio_unrounded(self):
        assert ratio(Decimal("1"), Decimal("3")) == Decimal("1") / Decimal("3")
        assert ratio(Decimal("1"), Decimal("0")) == 0

    def test_zero_denominators(self):
        assert cap_rate(Decimal("100"), Decimal("0")) == 0
        assert cash_on_cash(Decimal("100"), Decimal("0")) == 0
        assert yield_on_cost(Decimal("100"), Decimal("0")) == 0

    def test_yield_on_cost(self):
        assert yield_on_cost(Decimal("12136"), Decimal("257500")) == Decimal("0.0471")


class TestValueAndSale:
    def test_appreciation(self, canonical_inputs):
        assert property_value(canonical_inputs, 10) == Decimal("250000") * Decimal("1.03") ** 10

    def test_year_zero_is_price(self, canonical_inputs):
        assert property_value(canonical_inputs, 0) == Decimal("250000")

    def test_net_sale(self):
        proceeds = net_sale_proceeds(Decimal("300000"), Decimal("0.02"), Decimal("150000"))
        assert proceeds == Decimal("144000")
