"""End-to-end tests for the year-by-year projection."""

from decimal import Decimal

from forecaster.engine.cashflow import ratio
from forecaster.engine.projection import run_projection
from forecaster.engine.rate_math import present_value
from forecaster.engine.scoring import score_band, score_deal
from forecaster.engine.tax import corporation_tax
from forecaster.models.deal import DealInputs


class TestCanonicalDeal:
    def test_ledger_has_baseline_plus_hold(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert len(summary.ledger) == 11
        assert [e.year for e in summary.ledger] == list(range(11))

    def test_final_value_compounds_appreciation(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        expected = Decimal("250000") * Decimal("1.03") ** 10
        assert summary.ledger[-1].property_market_value == expected
        assert summary.future_property_value == expected

    def test_metrics_are_finite(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        for value in (summary.cap_rate, summary.cash_on_cash, summary.dscr, summary.npv):
            assert value.is_finite()
        assert summary.cap_rate == Decimal("0.0485")
        assert summary.dscr > 0

    def test_acquisition_costs(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert summary.deposit == Decimal("62500")
        assert summary.stamp_duty == Decimal("2500")
        assert summary.other_closing_costs == Decimal("2500")
        assert summary.cash_invested == Decimal("67500")
        assert summary.project_cost == Decimal("255000")
        assert summary.loan_amount == Decimal("187500")

    def test_baseline_entry(self, canonical_inputs):
        baseline = run_projection(canonical_inputs).ledger[0]
        assert baseline.property_market_value == Decimal("250000")
        assert baseline.remaining_loan_balance == Decimal("187500")
        assert baseline.index_fund_balance == Decimal("67500")
        assert baseline.gross_rent == 0

    def test_cash_flow_vector(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert len(summary.cash_flows) == 11
        assert summary.cash_flows[0] == Decimal("-67500")
        assert summary.cash_flows[1] == summary.ledger[1].pre_tax_cash_flow
        assert summary.cash_flows[-1] == summary.ledger[-1].pre_tax_cash_flow + summary.net_sale_proceeds

    def test_npv_discounts_cash_flows(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert summary.npv == present_value(canonical_inputs.discount_rate, summary.cash_flows)

    def test_irr_positive(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert Decimal("0") < summary.irr < Decimal("0.5")

    def test_score_and_band(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert 0 <= summary.score <= 100
        assert summary.score_band == score_band(summary.score)

    def test_balance_falls(self, canonical_inputs):
        balances = [e.remaining_loan_balance for e in run_projection(canonical_inputs).ledger]
        assert all(later < earlier for earlier, later in zip(balances, balances[1:]))

    def test_index_fund_compounds(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        expected = Decimal("67500") * Decimal("1.07") ** 10
        assert abs(summary.index_fund_balance - expected) < Decimal("0.0001")

    def test_tax_totals(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert len(summary.property_taxes) == 10
        assert summary.total_property_tax == sum(summary.property_taxes)
        assert summary.cash_flow_year1_after_tax == summary.cash_flow_year1 - summary.property_taxes[0]

    def test_score_uses_unrounded_ratios(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        expected = score_deal(
            cash_on_cash=ratio(summary.cash_flow_year1, summary.cash_invested),
            cap_rate=ratio(summary.noi_year1, canonical_inputs.purchase_price),
            dscr=ratio(summary.noi_year1, summary.debt_service_year1),
            npv=summary.npv,
            cash_flow_year1=summary.cash_flow_year1,
        )
        assert summary.score == expected

    def test_index_fund_ledger(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert summary.ledger[-1].index_fund_balance == summary.index_fund_balance

    def test_repeatable(self, canonical_inputs):
        assert run_projection(canonical_inputs) == run_projection(canonical_inputs)


class TestCashPurchase:
    def test_dscr_zero_without_debt(self, cash_purchase):
        summary = run_projection(cash_purchase)
        assert summary.debt_service_year1 == 0
        assert summary.dscr == 0
        assert summary.loan_amount == 0
        assert summary.monthly_mortgage_payment == 0

    def test_no_loan_balance(self, cash_purchase):
        summary = run_projection(cash_purchase)
        assert all(e.remaining_loan_balance == 0 for e in summary.ledger)


class TestCompanyPurchase:
    def test_surcharge_applies(self, company_purchase):
        summary = run_projection(company_purchase)
        # 2500 banded + 5% of 250000
        assert summary.stamp_duty == Decimal("15000")

    def test_corporation_tax(self, company_purchase):
        summary = run_projection(company_purchase)
        year1 = summary.ledger[1]
        assert summary.property_taxes[0] == corporation_tax(year1.noi - year1.interest_paid)


class TestInterestOnly:
    def test_balance_never_reduces(self, interest_only_long_hold):
        summary = run_projection(interest_only_long_hold)
        assert all(e.remaining_loan_balance == summary.loan_amount for e in summary.ledger)
        assert summary.remaining_loan_balance == summary.loan_amount

    def test_interest_paid_past_term(self, interest_only_long_hold):
        summary = run_projection(interest_only_long_hold)
        annual_interest = summary.loan_amount * interest_only_long_hold.interest_rate
        year35 = summary.ledger[35]
        assert abs(year35.debt_service - annual_interest) < Decimal("0.0001")
        assert year35.interest_paid == year35.debt_service


class TestReinvestment:
    def test_disabled_keeps_fund_empty(self, canonical_inputs):
        summary = run_projection(canonical_inputs)
        assert summary.total_reinvested == 0
        assert summary.reinvestment_fund_balance == 0
        for entry in summary.ledger:
            assert entry.cumulative_reinvested == 0
            assert entry.reinvestment_fund_balance == 0

    def test_enabled_sweeps_cash(self, reinvesting_inputs):
        summary = run_projection(reinvesting_inputs)
        assert summary.total_reinvested > 0
        assert summary.reinvestment_fund_balance > summary.total_reinvested

    def test_reinvested_cash_netted_from_banked_cash(self, reinvesting_inputs):
        summary = run_projection(reinvesting_inputs)
        expected = (
            summary.ledger[-1].cumulative_pre_tax_cash
            - summary.total_reinvested
            + summary.reinvestment_fund_balance
        )
        assert summary.exit_cumulative_cash == expected


class TestDegenerateGrowth:
    def test_rent_wiped_out_after_year_one(self):
        summary = run_projection(DealInputs(rent_growth=Decimal("-1")))
        assert summary.ledger[1].gross_rent == Decimal("15960")
        assert all(e.gross_rent == 0 for e in summary.ledger[2:])
        assert 0 <= summary.score <= 100

    def test_minus_100pct_discount_rate_degrades(self):
        summary = run_projection(DealInputs(discount_rate=Decimal("-1")))
        assert not summary.npv.is_finite()
        assert 0 <= summary.score <= 100
