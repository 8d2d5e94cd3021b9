"""Stamp Duty Land Tax (England & NI).

Residential bands with first-time-buyer relief and the additional-property
surcharge. The surcharge applies to the whole price, not just the excess.

Pure functions. No I/O.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

from forecaster.models.deal import BuyerType

TWO_PLACES = Decimal("0.01")

# (upper bound of band, rate); None = no upper bound
SDLT_BANDS: list[tuple[Decimal | None, Decimal]] = [
    (Decimal("125000"), Decimal("0")),
    (Decimal("250000"), Decimal("0.02")),
    (Decimal("925000"), Decimal("0.05")),
    (Decimal("1500000"), Decimal("0.10")),
    (None, Decimal("0.12")),
]

FTB_RELIEF_THRESHOLD = Decimal("300000")
FTB_RELIEF_RATE = Decimal("0.05")
FTB_MAX_PRICE = Decimal("500000")

ADDITIONAL_PROPERTY_SURCHARGE = Decimal("0.05")
ADDITIONAL_PROPERTY_MIN_OWNED = 2


@dataclass(frozen=True)
class StampDutyBand:
    lower: Decimal
    upper: Decimal | None
    rate: Decimal
    taxable: Decimal
    tax: Decimal


@dataclass(frozen=True)
class StampDutyBreakdown:
    price: Decimal
    first_time_buyer_relief: bool
    additional_property: bool
    bands: list[StampDutyBand] = field(default_factory=list)
    surcharge: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return sum((b.tax for b in self.bands), Decimal("0")) + self.surcharge

    @property
    def effective_rate(self) -> Decimal:
        if self.price <= 0:
            return Decimal("0")
        return (self.total / self.price).quantize(Decimal("0.0001"), ROUND_HALF_UP)


def qualifies_for_ftb_relief(
    price: Decimal, buyer_type: BuyerType, properties_owned: int, first_time_buyer: bool
) -> bool:
    return (
        first_time_buyer
        and buyer_type is BuyerType.INDIVIDUAL
        and properties_owned == 0
        and price <= FTB_MAX_PRICE
    )


def is_additional_property(buyer_type: BuyerType, properties_owned: int) -> bool:
    """Companies always pay the surcharge; individuals once they own 2+ properties."""
    if buyer_type is BuyerType.COMPANY:
        return True
    return properties_owned >= ADDITIONAL_PROPERTY_MIN_OWNED


def stamp_duty_breakdown(
    price: Decimal,
    buyer_type: BuyerType = BuyerType.INDIVIDUAL,
    properties_owned: int = 0,
    first_time_buyer: bool = False,
) -> StampDutyBreakdown:
    """Band-by-band SDLT calculation."""
    if price <= 0:
        return StampDutyBreakdown(price=price, first_time_buyer_relief=False, additional_property=False)

    if qualifies_for_ftb_relief(price, buyer_type, properties_owned, first_time_buyer):
        taxable = max(Decimal("0"), price - FTB_RELIEF_THRESHOLD)
        band = StampDutyBand(
            lower=FTB_RELIEF_THRESHOLD,
            upper=FTB_MAX_PRICE,
            rate=FTB_RELIEF_RATE,
            taxable=taxable,
            tax=(taxable * FTB_RELIEF_RATE).quantize(TWO_PLACES, ROUND_HALF_UP),
        )
        return StampDutyBreakdown(
            price=price, first_time_buyer_relief=True, additional_property=False, bands=[band]
        )

    bands: list[StampDutyBand] = []
    lower = Decimal("0")
    for upper, rate in SDLT_BANDS:
        if price <= lower:
            break
        top = price if upper is None else min(price, upper)
        taxable = top - lower
        bands.append(StampDutyBand(lower=lower, upper=upper, rate=rate, taxable=taxable, tax=taxable * rate))
        if upper is None:
            break
        lower = upper

    additional = is_additional_property(buyer_type, properties_owned)
    surcharge = price * ADDITIONAL_PROPERTY_SURCHARGE if additional else Decimal("0")

    return StampDutyBreakdown(
        price=price,
        first_time_buyer_relief=False,
        additional_property=additional,
        bands=bands,
        surcharge=surcharge,
    )


def stamp_duty(
    price: Decimal,
    buyer_type: BuyerType = BuyerType.INDIVIDUAL,
    properties_owned: int = 0,
    first_time_buyer: bool = False,
) -> Decimal:
    """Total SDLT payable on a purchase."""
    return stamp_duty_breakdown(price, buyer_type, properties_owned, first_time_buyer).total
