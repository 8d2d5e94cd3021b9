"""Property-signal data types returned by the enrichment adapters.

Every source result carries a `fallback` flag that is True when the value
was synthesised because the live source could not be used.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class PropertyLocation:
    postcode: str
    latitude: float | None = None
    longitude: float | None = None
    admin_district: str | None = None  # Local authority name
    region_code: str | None = None  # ONS region/NUTS/LAD code
    msoa: str | None = None
    hint_price: Decimal | None = None  # Known valuation, seeds synthetic comps


@dataclass(frozen=True)
class Transaction:
    price: int
    date: str | None
    property_type: str = "Unknown"
    tenure: str = "Unknown"


@dataclass(frozen=True)
class PricePaidSummary:
    transactions: list[Transaction] = field(default_factory=list)
    median_price: int = 0
    average_price: int = 0
    count: int = 0
    fallback: bool = False


@dataclass(frozen=True)
class IndexReading:
    latest_index: float
    yoy_change: float  # Fraction, e.g. 0.025 = +2.5%
    fallback: bool = False


@dataclass(frozen=True)
class PlanningActivity:
    pending: int = 0
    approved: int = 0
    refused: int = 0
    count: int = 0
    fallback: bool = False


@dataclass(frozen=True)
class FloodRisk:
    band: str  # low / medium / high ...
    description: str = ""
    fallback: bool = False


@dataclass(frozen=True)
class AirQuality:
    aqi: int  # DEFRA Daily Air Quality Index, 1-10
    station_name: str | None = None
    pollutants: list[str] = field(default_factory=list)
    fallback: bool = False


@dataclass(frozen=True)
class NoiseLevels:
    daytime_db: float
    night_db: float
    reference: str = ""
    fallback: bool = False


@dataclass(frozen=True)
class CrimeCategory:
    category: str
    count: int


@dataclass(frozen=True)
class CrimeSummary:
    count: int = 0
    categories: list[CrimeCategory] = field(default_factory=list)
    fallback: bool = False


@dataclass(frozen=True)
class SchoolQuality:
    outstanding_share: float = 0.0
    good_share: float = 0.0
    fallback: bool = False


@dataclass(frozen=True)
class NuisanceReports:
    complaints: int = 0
    reference_year: str = "2023/24"
    fallback: bool = False


@dataclass(frozen=True)
class PropertySignals:
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

    @property
    def fallback_sources(self) -> list[str]:
        """Names of the sources that fell back to synthetic data."""
        names = [
            "land_registry", "house_price_index", "rent_index", "planning", "flood",
            "air_quality", "noise", "crime", "schools", "nuisance",
        ]
        return [name for name in names if getattr(self, name).fallback]
