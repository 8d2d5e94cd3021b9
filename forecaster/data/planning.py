"""Planning applications near a postcode from planning.data.gov.uk."""

import logging

from forecaster.data.base import FETCH_ERRORS, fetch_json, format_postcode, seeded_random
from forecaster.models.signals import PlanningActivity

logger = logging.getLogger(__name__)

PLANNING_URL = "https://www.planning.data.gov.uk/entity.json"

STAGE_PENDING = "in-progress"
STAGE_APPROVED = "granted"
STAGE_REFUSED = "refused"


async def get_planning_activity(postcode: str, local_authority: str | None = None) -> PlanningActivity:
    """Count pending, approved and refused applications (latest 50)."""
    formatted = format_postcode(postcode)
    params = {"entries": "application", "postcode": formatted, "_limit": "50"}
    if local_authority:
        params["local-authority"] = local_authority

    try:
        payload = await fetch_json(PLANNING_URL, params=params)
        items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise ValueError("Planning response has no items list")
    except FETCH_ERRORS as e:
        logger.warning("Planning API unavailable, using fallback data: %s", e)
        rng = seeded_random(f"planning-{formatted or local_authority or 'fallback'}")
        pending = round(rng.random() * 6)
        approved = round(rng.random() * 12 + 4)
        refused = round(rng.random() * 3)
        return PlanningActivity(
            pending=pending,
            approved=approved,
            refused=refused,
            count=pending + approved + refused,
            fallback=True,
        )

    stages = [item.get("stage") if isinstance(item, dict) else None for item in items]
    return PlanningActivity(
        pending=stages.count(STAGE_PENDING),
        approved=stages.count(STAGE_APPROVED),
        refused=stages.count(STAGE_REFUSED),
        count=len(items),
    )
