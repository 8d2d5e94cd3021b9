"""Property-signal assembler: fans out to every enrichment source at once.

Flow: location → Land Registry comps + ONS indices + planning + flood
+ air quality + noise + crime + schools + nuisance → PropertySignals

Each adapter absorbs its own failures and returns a fallback-flagged
result, so one slow or broken source never blocks the others.
"""

import asyncio
import logging

from forecaster.models.signals import PropertyLocation, PropertySignals
from forecaster.data.land_registry import get_price_paid
from forecaster.data.ons import get_house_price_index, get_private_rent_index
from forecaster.data.planning import get_planning_activity
from forecaster.data.flood import get_flood_risk
from forecaster.data.air_quality import get_air_quality
from forecaster.data.noise import get_noise_levels
from forecaster.data.police import get_street_crime
from forecaster.data.schools import get_school_quality
from forecaster.data.nuisance import get_nuisance_reports

logger = logging.getLogger(__name__)


async def assemble_property_signals(location: PropertyLocation) -> PropertySignals:
    lat, lon = location.latitude, location.longitude
    (
        land_registry,
        house_price_index,
        rent_index,
        planning,
        flood,
        air_quality,
        noise,
        crime,
        schools,
        nuisance,
    ) = await asyncio.gather(
        get_price_paid(location.postcode, location.hint_price),
        get_house_price_index(location.msoa, location.region_code, location.hint_price),
        get_private_rent_index(location.region_code),
        get_planning_activity(location.postcode, location.admin_district),
        get_flood_risk(lat, lon),
        get_air_quality(lat, lon),
        get_noise_levels(lat, lon),
        get_street_crime(lat, lon),
        get_school_quality(location.postcode),
        get_nuisance_reports(location.admin_district),
    )

    signals = PropertySignals(
        location=location,
        land_registry=land_registry,
        house_price_index=house_price_index,
        rent_index=rent_index,
        planning=planning,
        flood=flood,
        air_quality=air_quality,
        noise=noise,
        crime=crime,
        schools=schools,
        nuisance=nuisance,
    )
    fallbacks = signals.fallback_sources
    if fallbacks:
        logger.info("Signals for %s used fallback data for: %s", location.postcode, ", ".join(fallbacks))
    else:
        logger.info("Signals for %s assembled from live sources", location.postcode)
    return signals
