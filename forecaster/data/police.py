"""data.police.uk street-level crime lookup.

Returns the crime count within a one-mile radius of a point for the latest
(or given) month, with the five most common categories.
"""

import logging
from collections import Counter

from forecaster.data.base import FETCH_ERRORS, fetch_json, seeded_random
from forecaster.models.signals import CrimeCategory, CrimeSummary

logger = logging.getLogger(__name__)

STREET_CRIME_URL = "https://data.police.uk/api/crimes-street/all-crime"

TOP_CATEGORIES = 5


async def get_street_crime(lat: float | None, lon: float | None, month: str | None = None) -> CrimeSummary:
    """Street crime near a point. `month` is YYYY-MM; defaults to latest."""
    if not lat or not lon:
        return CrimeSummary()

    params = {"lat": str(lat), "lng": str(lon)}
    if month:
        params["date"] = month

    try:
        payload = await fetch_json(STREET_CRIME_URL, params=params)
        if not isinstance(payload, list):
            raise ValueError("Police API returned a non-list payload")
    except FETCH_ERRORS as e:
        logger.warning("Police API unavailable, using fallback data: %s", e)
        rng = seeded_random(f"crime-{lat}-{lon}")
        base = round(rng.random() * 70 + 20)
        return CrimeSummary(
            count=base,
            categories=[
                CrimeCategory("anti-social-behaviour", round(base * 0.32)),
                CrimeCategory("violence-and-sexual-offences", round(base * 0.28)),
                CrimeCategory("public-order", round(base * 0.12)),
            ],
            fallback=True,
        )

    counts = Counter(
        (item.get("category") if isinstance(item, dict) else None) or "other-crime"
        for item in payload
    )
    return CrimeSummary(
        count=len(payload),
        categories=[CrimeCategory(category, n) for category, n in counts.most_common(TOP_CATEGORIES)],
    )
