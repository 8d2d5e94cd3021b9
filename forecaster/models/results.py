from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class YearlyLedgerEntry:
    year: int

    # Operations
    gross_rent: Decimal = Decimal("0")  # After vacancy
    operating_expenses: Decimal = Decimal("0")
    noi: Decimal = Decimal("0")
    debt_service: Decimal = Decimal("0")
    interest_paid: Decimal = Decimal("0")
    pre_tax_cash_flow: Decimal = Decimal("0")
    property_tax: Decimal = Decimal("0")  # Income/corporation tax on the rental profit
    after_tax_cash_flow: Decimal = Decimal("0")

    # Running totals
    cumulative_pre_tax_cash: Decimal = Decimal("0")
    cumulative_after_tax_cash: Decimal = Decimal("0")
    cumulative_reinvested: Decimal = Decimal("0")
    reinvestment_fund_balance: Decimal = Decimal("0")

    # Value & debt
    property_market_value: Decimal = Decimal("0")
    remaining_loan_balance: Decimal = Decimal("0")
    net_sale_if_sold: Decimal = Decimal("0")

    # Wealth comparison
    index_fund_balance: Decimal = Decimal("0")
    property_gross_wealth: Decimal = Decimal("0")
    property_net_wealth: Decimal = Decimal("0")
    property_net_wealth_after_tax: Decimal = Decimal("0")


@dataclass
class DealSummary:
    # Acquisition
    deposit: Decimal = Decimal("0")
    stamp_duty: Decimal = Decimal("0")
    other_closing_costs: Decimal = Decimal("0")
    total_closing_costs: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    monthly_mortgage_payment: Decimal = Decimal("0")
    cash_invested: Decimal = Decimal("0")  # Deposit + closing + renovation
    project_cost: Decimal = Decimal("0")  # Price + closing + renovation

    # Year 1
    gross_rent_year1: Decimal = Decimal("0")
    variable_opex_year1: Decimal = Decimal("0")
    fixed_opex_year1: Decimal = Decimal("0")
    operating_expenses_year1: Decimal = Decimal("0")
    noi_year1: Decimal = Decimal("0")
    debt_service_year1: Decimal = Decimal("0")
    cash_flow_year1: Decimal = Decimal("0")
    cash_flow_year1_after_tax: Decimal = Decimal("0")
    cap_rate: Decimal = Decimal("0")
    cash_on_cash: Decimal = Decimal("0")
    dscr: Decimal = Decimal("0")
    yield_on_cost: Decimal = Decimal("0")

    # Exit
    exit_year: int = 0
    remaining_loan_balance: Decimal = Decimal("0")
    future_property_value: Decimal = Decimal("0")
    selling_costs: Decimal = Decimal("0")
    net_sale_proceeds: Decimal = Decimal("0")
    npv: Decimal = Decimal("0")
    irr: Decimal = Decimal("0")
    score: Decimal = Decimal("0")
    score_band: str = "weak"

    # Ledger
    cash_flows: list[Decimal] = field(default_factory=list)  # t=0 outlay ... exit incl. sale
    ledger: list[YearlyLedgerEntry] = field(default_factory=list)  # Year 0 baseline first
    property_taxes: list[Decimal] = field(default_factory=list)

    # Tax & reinvestment
    total_property_tax: Decimal = Decimal("0")
    total_reinvested: Decimal = Decimal("0")
    reinvestment_fund_balance: Decimal = Decimal("0")

    # Wealth vs index fund
    index_fund_balance: Decimal = Decimal("0")
    exit_cumulative_cash: Decimal = Decimal("0")
    exit_cumulative_cash_after_tax: Decimal = Decimal("0")
    property_gross_wealth: Decimal = Decimal("0")
    property_net_wealth: Decimal = Decimal("0")
    property_net_wealth_after_tax: Decimal = Decimal("0")
    wealth_delta: Decimal = Decimal("0")
    wealth_delta_pct: Decimal = Decimal("0")
    wealth_delta_after_tax: Decimal = Decimal("0")
    wealth_delta_after_tax_pct: Decimal = Decimal("0")
