from dataclasses import dataclass, fields, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

DEFAULT_INDEX_GROWTH = Decimal("0.07")
DEFAULT_OWNERSHIP_SHARE = Decimal("0.5")


class BuyerType(Enum):
    INDIVIDUAL = "individual"
    COMPANY = "company"


class LoanType(Enum):
    REPAYMENT = "repayment"
    INTEREST_ONLY = "interest_only"


@dataclass(frozen=True)
class DealInputs:
    # Acquisition
    purchase_price: Decimal = Decimal("250000")
    deposit_pct: Decimal = Decimal("0.25")
    closing_costs_pct: Decimal = Decimal("0.01")  # Legal/survey etc., excludes stamp duty
    renovation_cost: Decimal = Decimal("0")
    buyer_type: BuyerType = BuyerType.INDIVIDUAL
    properties_owned: int = 0
    first_time_buyer: bool = False

    # Financing
    interest_rate: Decimal = Decimal("0.055")  # Annual nominal
    mortgage_years: int = 30
    loan_type: LoanType = LoanType.REPAYMENT

    # Operating
    monthly_rent: Decimal = Decimal("1400")
    vacancy_pct: Decimal = Decimal("0.05")
    mgmt_pct: Decimal = Decimal("0.10")  # % of scheduled rent
    repairs_pct: Decimal = Decimal("0.08")  # % of scheduled rent
    insurance_per_year: Decimal = Decimal("500")
    other_opex_per_year: Decimal = Decimal("300")

    # Growth & exit
    annual_appreciation: Decimal = Decimal("0.03")
    rent_growth: Decimal = Decimal("0.02")
    exit_year: int = 10
    selling_costs_pct: Decimal = Decimal("0.02")
    discount_rate: Decimal = Decimal("0.07")  # NPV hurdle

    # Tax & ownership
    income_person1: Decimal | None = Decimal("50000")
    income_person2: Decimal | None = Decimal("30000")
    ownership_share1: Decimal | None = DEFAULT_OWNERSHIP_SHARE
    ownership_share2: Decimal | None = DEFAULT_OWNERSHIP_SHARE
    reinvest_income: bool = False
    reinvest_pct: Decimal | None = Decimal("0.5")
    index_fund_growth: Decimal | None = DEFAULT_INDEX_GROWTH

    @property
    def is_company(self) -> bool:
        return self.buyer_type is BuyerType.COMPANY

    @property
    def is_interest_only(self) -> bool:
        return self.loan_type is LoanType.INTEREST_ONLY

    @property
    def deposit(self) -> Decimal:
        return self.purchase_price * self.deposit_pct

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.deposit

    @property
    def other_closing_costs(self) -> Decimal:
        return self.purchase_price * self.closing_costs_pct

    @property
    def base_incomes(self) -> tuple[Decimal, Decimal]:
        """Owners' non-property income. Companies have none."""
        if self.is_company:
            return Decimal("0"), Decimal("0")
        return self.income_person1 or Decimal("0"), self.income_person2 or Decimal("0")

    @property
    def normalized_shares(self) -> tuple[Decimal, Decimal]:
        """Ownership split normalized to sum to 1; 50/50 when both are zero."""
        share1 = self.ownership_share1 if self.ownership_share1 is not None else DEFAULT_OWNERSHIP_SHARE
        share2 = self.ownership_share2 if self.ownership_share2 is not None else DEFAULT_OWNERSHIP_SHARE
        total = share1 + share2
        if total <= 0:
            return DEFAULT_OWNERSHIP_SHARE, DEFAULT_OWNERSHIP_SHARE
        return share1 / total, share2 / total

    @property
    def reinvest_share(self) -> Decimal:
        """Fraction of positive after-tax cash swept into the fund, clamped to [0, 1]."""
        if not self.reinvest_income:
            return Decimal("0")
        pct = self.reinvest_pct if self.reinvest_pct is not None else Decimal("0")
        return min(max(pct, Decimal("0")), Decimal("1"))

    @property
    def index_growth(self) -> Decimal:
        if self.index_fund_growth is None or not self.index_fund_growth.is_finite():
            return DEFAULT_INDEX_GROWTH
        return self.index_fund_growth


DEFAULT_DEAL_INPUTS = DealInputs()

_ENUM_FIELDS = {"buyer_type": BuyerType, "loan_type": LoanType}


def build_inputs(
    overrides: Mapping[str, Any] | None = None,
    defaults: DealInputs = DEFAULT_DEAL_INPUTS,
) -> DealInputs:
    """Merge a partial mapping of field values over a base set of inputs.

    Unknown keys are ignored. Enum fields accept their string values.
    """
    if not overrides:
        return defaults

    known = {f.name for f in fields(DealInputs)}
    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            continue
        enum_cls = _ENUM_FIELDS.get(key)
        if enum_cls is not None and value is not None and not isinstance(value, enum_cls):
            value = enum_cls(value)
        changes[key] = value
    return replace(defaults, **changes)
