"""DEFRA UK-AIR air quality lookup for the nearest monitoring site."""

import logging

from forecaster.data.base import FETCH_ERRORS, fetch_json, seeded_random, to_float
from forecaster.models.signals import AirQuality

logger = logging.getLogger(__name__)

AIR_QUALITY_URL = "https://uk-air.defra.gov.uk/data/api/air_quality_site_data"

DEFAULT_AQI = 3
SEARCH_RADIUS_M = 5000


async def get_air_quality(lat: float | None, lon: float | None) -> AirQuality:
    """Daily Air Quality Index at the nearest site within 5km."""
    if not lat or not lon:
        return AirQuality(aqi=DEFAULT_AQI)

    params = {"latitude": str(lat), "longitude": str(lon), "maxdistance": str(SEARCH_RADIUS_M)}
    try:
        payload = await fetch_json(AIR_QUALITY_URL, params=params)
        records = payload.get("records") if isinstance(payload, dict) else None
    except FETCH_ERRORS as e:
        logger.warning("DEFRA air quality API unavailable, using fallback data: %s", e)
        rng = seeded_random(f"air-{lat}-{lon}")
        return AirQuality(
            aqi=2 + round(rng.random() * 4),
            station_name="Fallback air quality estimate",
            fallback=True,
        )

    nearest = records[0] if isinstance(records, list) and records else {}
    pollutants = nearest.get("pollutants")
    return AirQuality(
        aqi=int(to_float(nearest.get("aqindex", nearest.get("aqi")), DEFAULT_AQI)),
        station_name=nearest.get("site") or nearest.get("station") or "Nearest monitor",
        pollutants=[str(p) for p in pollutants] if isinstance(pollutants, list) else [],
    )
