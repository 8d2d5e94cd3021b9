"""Projection orchestrator: composes the engine sub-modules into a DealSummary.

Pure computation. No I/O. DealInputs in, DealSummary out.
"""

from decimal import Decimal

from forecaster.models.deal import DealInputs
from forecaster.models.results import DealSummary, YearlyLedgerEntry

from forecaster.engine.debt import (
    balance_after_year,
    debt_schedule,
    yearly_debt_summary,
)
from forecaster.engine.cashflow import (
    gross_rent,
    operating_expenses,
    ratio,
    cap_rate,
    cash_on_cash,
    dscr,
    yield_on_cost,
    property_value,
    net_sale_proceeds,
)
from forecaster.engine.tax import taxable_rental_profit, property_tax_for_year
from forecaster.engine.stamp_duty import stamp_duty
from forecaster.engine.opportunity_cost import compare_wealth, index_fund_curve, reinvest_cash
from forecaster.engine.rate_math import present_value
from forecaster.engine.irr import compute_irr
from forecaster.engine.scoring import score_deal, score_band


def _baseline_entry(inputs: DealInputs, cash_invested: Decimal) -> YearlyLedgerEntry:
    """Year 0: property at cost, index fund holding the cash put in."""
    loan = inputs.loan_amount
    net_equity = net_sale_proceeds(inputs.purchase_price, inputs.selling_costs_pct, loan)
    return YearlyLedgerEntry(
        year=0,
        remaining_loan_balance=loan,
        property_market_value=inputs.purchase_price,
        net_sale_if_sold=net_equity,
        index_fund_balance=cash_invested,
        property_gross_wealth=inputs.purchase_price,
        property_net_wealth=net_equity,
        property_net_wealth_after_tax=net_equity,
    )


def run_projection(inputs: DealInputs) -> DealSummary:
    """Run the full year-by-year projection through the exit year.

    Returns a DealSummary with the yearly ledger (year 0 baseline first),
    exit/sale analysis, NPV, IRR, deal score and index-fund comparison.
    """
    loan = inputs.loan_amount
    sdlt = stamp_duty(
        inputs.purchase_price,
        inputs.buyer_type,
        inputs.properties_owned,
        inputs.first_time_buyer,
    )
    other_closing = inputs.other_closing_costs
    total_closing = other_closing + sdlt
    cash_invested = inputs.deposit + total_closing + inputs.renovation_cost
    project_cost = inputs.purchase_price + total_closing + inputs.renovation_cost

    # Debt schedule for the holding period
    schedule = debt_schedule(
        principal=loan,
        annual_rate=inputs.interest_rate,
        term_years=inputs.mortgage_years,
        hold_years=inputs.exit_year,
        loan_type=inputs.loan_type,
    )
    yearly_debt = yearly_debt_summary(schedule, inputs.exit_year)

    reinvest_share = inputs.reinvest_share
    index_curve = index_fund_curve(cash_invested, inputs.exit_year, inputs.index_growth)

    ledger: list[YearlyLedgerEntry] = [_baseline_entry(inputs, cash_invested)]
    cash_flows: list[Decimal] = [-cash_invested]
    property_taxes: list[Decimal] = []

    cumulative_pre_tax = Decimal("0")
    cumulative_after_tax = Decimal("0")
    cumulative_reinvested = Decimal("0")
    fund_balance = Decimal("0")
    exit_sale_proceeds = Decimal("0")
    exit_loan_balance = loan

    for year in range(1, inputs.exit_year + 1):
        debt_year = yearly_debt[year - 1]

        # Operations
        gr = gross_rent(inputs, year)
        expenses = operating_expenses(inputs, year)
        year_noi = gr - expenses["total"]
        cash = year_noi - debt_year.debt_service
        cumulative_pre_tax += cash

        # Tax on profit after interest
        taxable = taxable_rental_profit(year_noi, debt_year.interest)
        tax = property_tax_for_year(taxable, inputs)
        property_taxes.append(tax)
        after_tax_cash = cash - tax
        cumulative_after_tax += after_tax_cash

        # Reinvestment fund
        step = reinvest_cash(fund_balance, after_tax_cash, reinvest_share, inputs.index_growth)
        fund_balance = step.fund_balance
        cumulative_reinvested += step.contribution

        # Value & equity if sold at year end
        loan_balance = balance_after_year(
            loan, inputs.interest_rate, inputs.mortgage_years, year, inputs.loan_type
        )
        value = property_value(inputs, year)
        net_sale = net_sale_proceeds(value, inputs.selling_costs_pct, loan_balance)

        # Reinvested cash sits in the fund, so net it out of banked cash
        net_cash_pre_tax = cumulative_pre_tax - cumulative_reinvested
        net_cash_after_tax = cumulative_after_tax - cumulative_reinvested

        if year == inputs.exit_year:
            cash_flows.append(cash + net_sale)
            exit_sale_proceeds = net_sale
            exit_loan_balance = loan_balance
        else:
            cash_flows.append(cash)

        ledger.append(YearlyLedgerEntry(
            year=year,
            gross_rent=gr,
            operating_expenses=expenses["total"],
            noi=year_noi,
            debt_service=debt_year.debt_service,
            interest_paid=debt_year.interest,
            pre_tax_cash_flow=cash,
            property_tax=tax,
            after_tax_cash_flow=after_tax_cash,
            cumulative_pre_tax_cash=cumulative_pre_tax,
            cumulative_after_tax_cash=cumulative_after_tax,
            cumulative_reinvested=cumulative_reinvested,
            reinvestment_fund_balance=fund_balance,
            property_market_value=value,
            remaining_loan_balance=loan_balance,
            net_sale_if_sold=net_sale,
            index_fund_balance=index_curve[year],
            property_gross_wealth=value + net_cash_pre_tax + fund_balance,
            property_net_wealth=net_sale + net_cash_pre_tax + fund_balance,
            property_net_wealth_after_tax=net_sale + net_cash_after_tax + fund_balance,
        ))

    # Year 1 metrics
    first = ledger[1]
    year1_expenses = operating_expenses(inputs, 1)
    noi_year1 = first.noi
    debt_service_year1 = first.debt_service
    cash_flow_year1 = noi_year1 - debt_service_year1
    year1_cap = cap_rate(noi_year1, inputs.purchase_price)
    year1_coc = cash_on_cash(cash_flow_year1, cash_invested)
    year1_dscr = dscr(noi_year1, debt_service_year1)

    # Exit
    final = ledger[-1]
    index_balance = index_curve[-1]
    future_value = final.property_market_value
    exit_cash = final.cumulative_pre_tax_cash - final.cumulative_reinvested + final.reinvestment_fund_balance
    exit_cash_after_tax = (
        final.cumulative_after_tax_cash - final.cumulative_reinvested + final.reinvestment_fund_balance
    )
    net_wealth = exit_sale_proceeds + exit_cash
    net_wealth_after_tax = exit_sale_proceeds + exit_cash_after_tax
    pre_tax_vs_index = compare_wealth(net_wealth, index_balance)
    after_tax_vs_index = compare_wealth(net_wealth_after_tax, index_balance)

    npv = present_value(inputs.discount_rate, cash_flows)
    # Score on unrounded ratios; only the reported ones are rounded
    score = score_deal(
        cash_on_cash=ratio(cash_flow_year1, cash_invested),
        cap_rate=ratio(noi_year1, inputs.purchase_price),
        dscr=ratio(noi_year1, debt_service_year1),
        npv=npv,
        cash_flow_year1=cash_flow_year1,
    )
    tax_year1 = property_taxes[0] if property_taxes else Decimal("0")

    return DealSummary(
        deposit=inputs.deposit,
        stamp_duty=sdlt,
        other_closing_costs=other_closing,
        total_closing_costs=total_closing,
        loan_amount=loan,
        monthly_mortgage_payment=schedule.monthly_payment,
        cash_invested=cash_invested,
        project_cost=project_cost,
        gross_rent_year1=first.gross_rent,
        variable_opex_year1=year1_expenses["variable"],
        fixed_opex_year1=year1_expenses["fixed"],
        operating_expenses_year1=year1_expenses["total"],
        noi_year1=noi_year1,
        debt_service_year1=debt_service_year1,
        cash_flow_year1=cash_flow_year1,
        cash_flow_year1_after_tax=cash_flow_year1 - tax_year1,
        cap_rate=year1_cap,
        cash_on_cash=year1_coc,
        dscr=year1_dscr,
        yield_on_cost=yield_on_cost(noi_year1, project_cost),
        exit_year=inputs.exit_year,
        remaining_loan_balance=exit_loan_balance,
        future_property_value=future_value,
        selling_costs=future_value * inputs.selling_costs_pct,
        net_sale_proceeds=exit_sale_proceeds,
        npv=npv,
        irr=compute_irr(cash_flows),
        score=score,
        score_band=score_band(score),
        cash_flows=cash_flows,
        ledger=ledger,
        property_taxes=property_taxes,
        total_property_tax=sum(property_taxes, Decimal("0")),
        total_reinvested=cumulative_reinvested,
        reinvestment_fund_balance=fund_balance,
        index_fund_balance=index_balance,
        exit_cumulative_cash=exit_cash,
        exit_cumulative_cash_after_tax=exit_cash_after_tax,
        property_gross_wealth=future_value + exit_cash,
        property_net_wealth=net_wealth,
        property_net_wealth_after_tax=net_wealth_after_tax,
        wealth_delta=pre_tax_vs_index.delta,
        wealth_delta_pct=pre_tax_vs_index.delta_pct,
        wealth_delta_after_tax=after_tax_vs_index.delta,
        wealth_delta_after_tax_pct=after_tax_vs_index.delta_pct,
    )
