"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from forecaster.models.deal import BuyerType, LoanType
from forecaster.models.signals import (
    AirQuality,
    CrimeSummary,
    FloodRisk,
    IndexReading,
    NoiseLevels,
    NuisanceReports,
    PlanningActivity,
    PricePaidSummary,
    PropertyLocation,
    SchoolQuality,
)


# ---- Request schemas ----

class AnalyzeRequest(BaseModel):
    """Partial deal inputs. Omitted fields take the standard defaults."""

    purchase_price: Decimal | None = Field(None, ge=0)
    deposit_pct: Decimal | None = None
    closing_costs_pct: Decimal | None = None
    renovation_cost: Decimal | None = None
    buyer_type: BuyerType | None = None
    properties_owned: int | None = Field(None, ge=0)
    first_time_buyer: bool | None = None

    interest_rate: Decimal | None = None
    mortgage_years: int | None = Field(None, gt=0)
    loan_type: LoanType | None = None

    monthly_rent: Decimal | None = None
    vacancy_pct: Decimal | None = None
    mgmt_pct: Decimal | None = None
    repairs_pct: Decimal | None = None
    insurance_per_year: Decimal | None = None
    other_opex_per_year: Decimal | None = None

    annual_appreciation: Decimal | None = None
    rent_growth: Decimal | None = None
    exit_year: int | None = Field(None, ge=1)
    selling_costs_pct: Decimal | None = None
    discount_rate: Decimal | None = None

    income_person1: Decimal | None = None
    income_person2: Decimal | None = None
    ownership_share1: Decimal | None = None
    ownership_share2: Decimal | None = None
    reinvest_income: bool | None = None
    reinvest_pct: Decimal | None = None
    index_fund_growth: Decimal | None = None


class StampDutyRequest(BaseModel):
    price: Decimal = Field(..., ge=0)
    buyer_type: BuyerType = BuyerType.INDIVIDUAL
    properties_owned: int = Field(0, ge=0)
    first_time_buyer: bool = False


class ScenarioCreate(BaseModel):
    # Loosely typed on purpose: the store sanitises whatever arrives
    name: Any = None
    data: Any = None
    preview: Any = None
    cashflow_columns: Any = Field(
        None, validation_alias=AliasChoices("cashflow_columns", "cashflowColumns")
    )


class ScenarioUpdate(ScenarioCreate):
    pass


# ---- Response schemas ----

class LedgerEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    gross_rent: Decimal
    operating_expenses: Decimal
    noi: Decimal
    debt_service: Decimal
    interest_paid: Decimal
    pre_tax_cash_flow: Decimal
    property_tax: Decimal
    after_tax_cash_flow: Decimal
    cumulative_pre_tax_cash: Decimal
    cumulative_after_tax_cash: Decimal
    cumulative_reinvested: Decimal
    reinvestment_fund_balance: Decimal
    property_market_value: Decimal
    remaining_loan_balance: Decimal
    net_sale_if_sold: Decimal
    index_fund_balance: Decimal
    property_gross_wealth: Decimal
    property_net_wealth: Decimal
    property_net_wealth_after_tax: Decimal


class DealSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    # Acquisition
    deposit: Decimal
    stamp_duty: Decimal
    other_closing_costs: Decimal
    total_closing_costs: Decimal
    loan_amount: Decimal
    monthly_mortgage_payment: Decimal
    cash_invested: Decimal
    project_cost: Decimal

    # Year 1
    gross_rent_year1: Decimal
    variable_opex_year1: Decimal
    fixed_opex_year1: Decimal
    operating_expenses_year1: Decimal
    noi_year1: Decimal
    debt_service_year1: Decimal
    cash_flow_year1: Decimal
    cash_flow_year1_after_tax: Decimal
    cap_rate: Decimal
    cash_on_cash: Decimal
    dscr: Decimal
    yield_on_cost: Decimal

    # Exit
    exit_year: int
    remaining_loan_balance: Decimal
    future_property_value: Decimal
    selling_costs: Decimal
    net_sale_proceeds: Decimal
    npv: Decimal
    irr: Decimal
    score: Decimal
    score_band: str

    cash_flows: list[Decimal]
    ledger: list[LedgerEntryResponse]
    property_taxes: list[Decimal]
    total_property_tax: Decimal
    total_reinvested: Decimal
    reinvestment_fund_balance: Decimal

    # Wealth vs index fund
    index_fund_balance: Decimal
    exit_cumulative_cash: Decimal
    exit_cumulative_cash_after_tax: Decimal
    property_gross_wealth: Decimal
    property_net_wealth: Decimal
    property_net_wealth_after_tax: Decimal
    wealth_delta: Decimal
    wealth_delta_pct: Decimal
    wealth_delta_after_tax: Decimal
    wealth_delta_after_tax_pct: Decimal


class StampDutyBandResponse(BaseModel):
    lower: Decimal
    upper: Decimal | None
    rate: Decimal
    taxable: Decimal
    tax: Decimal


class StampDutyResponse(BaseModel):
    price: Decimal
    total: Decimal
    effective_rate: Decimal
    first_time_buyer_relief: bool
    additional_property: bool
    surcharge: Decimal
    bands: list[StampDutyBandResponse]


class ScenarioResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    data: dict
    preview: dict
    cashflow_columns: list[str]
    created_at: datetime
    updated_at: datetime


class SignalsResponse(BaseModel):
    location: PropertyLocation
    land_registry: PricePaidSummary
    house_price_index: IndexReading
    rent_index: IndexReading
    planning: PlanningActivity
    flood: FloodRisk
    air_quality: AirQuality
    noise: NoiseLevels
    crime: CrimeSummary
    schools: SchoolQuality
    nuisance: NuisanceReports
    fallback_sources: list[str]
