"""ONS house price index and private rent index lookups.

Both datasets are served by the ONS beta API as time-series observations;
the latest observation gives the index level and its annual change.
"""

import logging
import math
from decimal import Decimal

from forecaster.data.base import FETCH_ERRORS, fetch_json, seeded_random, to_float
from forecaster.models.signals import IndexReading

logger = logging.getLogger(__name__)

ONS_API_BASE = "https://api.beta.ons.gov.uk/v1"
HPI_OBSERVATIONS_URL = f"{ONS_API_BASE}/datasets/house-price-index/editions/time-series/versions/1/observations"
RENT_OBSERVATIONS_URL = (
    f"{ONS_API_BASE}/datasets/price-index-of-private-rents/editions/time-series/versions/1/observations"
)


async def _latest_observation(url: str, geography: str) -> tuple[float, float | None]:
    """Return (index level, YoY change as a fraction) for the newest observation."""
    payload = await fetch_json(url, params={"geography": geography, "time": "latest"})
    observations = payload.get("observations") if isinstance(payload, dict) else None
    if not isinstance(observations, list) or not observations:
        raise ValueError("No observations in ONS response")

    latest = observations[0]
    level = float(latest.get("observation") or latest.get("value"))
    if not math.isfinite(level):
        raise ValueError("Invalid ONS index value")
    change = to_float(latest.get("percentageChange", latest.get("change", 0)), float("nan"))
    return level, (change / 100 if math.isfinite(change) else None)


async def get_house_price_index(
    msoa: str | None = None,
    region_code: str | None = None,
    hint_price: Decimal | None = None,
) -> IndexReading:
    """Latest house price index for an MSOA (preferred) or region."""
    geography = msoa or region_code
    if not geography:
        rng = seeded_random(f"hpi-{hint_price}")
        return IndexReading(
            latest_index=120 + rng.random() * 15,
            yoy_change=0.02 + rng.random() * 0.03,
            fallback=True,
        )

    try:
        level, yoy = await _latest_observation(HPI_OBSERVATIONS_URL, geography)
    except FETCH_ERRORS as e:
        logger.warning("ONS HPI unavailable for %s, using fallback data: %s", geography, e)
        rng = seeded_random(f"hpi-{geography}")
        return IndexReading(
            latest_index=118 + rng.random() * 12,
            yoy_change=0.018 + rng.random() * 0.025,
            fallback=True,
        )

    return IndexReading(latest_index=level, yoy_change=yoy if yoy is not None else 0.02)


async def get_private_rent_index(region_code: str | None = None) -> IndexReading:
    """Latest Price Index of Private Rents for a region."""
    if not region_code:
        rng = seeded_random("rent-fallback")
        return IndexReading(
            latest_index=112 + rng.random() * 8,
            yoy_change=0.035 + rng.random() * 0.01,
            fallback=True,
        )

    try:
        level, yoy = await _latest_observation(RENT_OBSERVATIONS_URL, region_code)
    except FETCH_ERRORS as e:
        logger.warning("ONS rent index unavailable for %s, using fallback data: %s", region_code, e)
        rng = seeded_random(f"rent-{region_code}")
        return IndexReading(
            latest_index=110 + rng.random() * 10,
            yoy_change=0.028 + rng.random() * 0.012,
            fallback=True,
        )

    return IndexReading(latest_index=level, yoy_change=yoy if yoy is not None else 0.03)
