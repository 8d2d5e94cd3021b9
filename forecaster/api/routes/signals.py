"""Property-signal enrichment route."""

from decimal import Decimal

from fastapi import APIRouter, Query

from forecaster.api.schemas import SignalsResponse
from forecaster.data.base import format_postcode
from forecaster.data.signals import assemble_property_signals
from forecaster.models.signals import PropertyLocation

router = APIRouter(prefix="/api/v1", tags=["signals"])


@router.get("/signals", response_model=SignalsResponse)
async def get_signals(
    postcode: str = Query(..., min_length=2),
    lat: float | None = None,
    lon: float | None = None,
    admin_district: str | None = None,
    region_code: str | None = None,
    msoa: str | None = None,
    hint_price: Decimal | None = None,
):
    """Market, environment and neighbourhood signals for a location.

    Sources that cannot be reached are replaced by deterministic estimates
    and listed in `fallback_sources`.
    """
    location = PropertyLocation(
        postcode=format_postcode(postcode),
        latitude=lat,
        longitude=lon,
        admin_district=admin_district,
        region_code=region_code,
        msoa=msoa,
        hint_price=hint_price,
    )
    signals = await assemble_property_signals(location)
    return SignalsResponse(
        location=signals.location,
        land_registry=signals.land_registry,
        house_price_index=signals.house_price_index,
        rent_index=signals.rent_index,
        planning=signals.planning,
        flood=signals.flood,
        air_quality=signals.air_quality,
        noise=signals.noise,
        crime=signals.crime,
        schools=signals.schools,
        nuisance=signals.nuisance,
        fallback_sources=signals.fallback_sources,
    )
