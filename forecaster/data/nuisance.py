"""Local authority nuisance complaint counts."""

import logging

from forecaster.data.base import FETCH_ERRORS, fetch_text, parse_csv, seeded_random, to_float
from forecaster.models.signals import NuisanceReports

logger = logging.getLogger(__name__)

NUISANCE_CSV_URL = "https://storage.googleapis.com/data-gov-uk-datasets/local-authority-nuisance-reports.csv"

DEFAULT_REFERENCE_YEAR = "2023/24"


async def get_nuisance_reports(local_authority: str | None) -> NuisanceReports:
    try:
        rows = parse_csv(await fetch_text(NUISANCE_CSV_URL))
        if not rows:
            raise ValueError("No nuisance data")
    except FETCH_ERRORS as e:
        logger.warning("Nuisance dataset unavailable, using fallback data: %s", e)
        rng = seeded_random(f"nuisance-{local_authority or 'fallback'}")
        return NuisanceReports(complaints=round(rng.random() * 400 + 120), fallback=True)

    wanted = (local_authority or "").lower()
    row = next((r for r in rows if wanted and r.get("LocalAuthority", "").lower() == wanted), None)
    if row is None:
        return NuisanceReports(complaints=0)
    return NuisanceReports(
        complaints=int(to_float(row.get("Complaints"), 0)),
        reference_year=row.get("Year") or DEFAULT_REFERENCE_YEAR,
    )
