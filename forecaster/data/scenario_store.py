"""Async CRUD for saved scenarios.

Client payloads are sanitised on every write so the stored shape is always
well-formed no matter what the caller sent.
"""

import logging
import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forecaster.models.db import ScenarioRecord, utcnow

logger = logging.getLogger(__name__)

DEFAULT_SCENARIO_NAME = "Scenario"


def sanitize_name(value: Any) -> str:
    if not isinstance(value, str):
        return DEFAULT_SCENARIO_NAME
    return value.strip() or DEFAULT_SCENARIO_NAME


def sanitize_data(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def sanitize_preview(value: Any) -> dict:
    if not isinstance(value, dict):
        return {"active": False}
    return {"active": bool(value.get("active"))}


def sanitize_columns(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class ScenarioStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[ScenarioRecord]:
        """All scenarios, most recently updated first."""
        result = await self.session.execute(
            select(ScenarioRecord).order_by(ScenarioRecord.updated_at.desc())
        )
        return list(result.scalars().all())

    async def get(self, scenario_id: uuid.UUID) -> ScenarioRecord | None:
        return await self.session.get(ScenarioRecord, scenario_id)

    async def create(
        self,
        name: Any = None,
        data: Any = None,
        preview: Any = None,
        cashflow_columns: Any = None,
    ) -> ScenarioRecord:
        record = ScenarioRecord(
            name=sanitize_name(name),
            data=sanitize_data(data),
            preview=sanitize_preview(preview),
            cashflow_columns=sanitize_columns(cashflow_columns),
        )
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        logger.info("Created scenario %s (%s)", record.id, record.name)
        return record

    async def update(self, scenario_id: uuid.UUID, changes: dict[str, Any]) -> ScenarioRecord | None:
        """Merge `changes` over the stored scenario.

        Keys absent from `changes` (or set to None) keep their stored value.
        Returns None when the scenario does not exist.
        """
        record = await self.get(scenario_id)
        if record is None:
            return None

        def pick(key: str, current: Any) -> Any:
            value = changes.get(key)
            return current if value is None else value

        record.name = sanitize_name(pick("name", record.name))
        record.data = sanitize_data(pick("data", record.data))
        record.preview = sanitize_preview(pick("preview", record.preview))
        record.cashflow_columns = sanitize_columns(pick("cashflow_columns", record.cashflow_columns))
        record.updated_at = utcnow()
        await self.session.commit()
        await self.session.refresh(record)
        logger.info("Updated scenario %s", scenario_id)
        return record

    async def delete(self, scenario_id: uuid.UUID) -> bool:
        record = await self.get(scenario_id)
        if record is None:
            logger.debug("Delete requested for unknown scenario %s", scenario_id)
            return False
        await self.session.delete(record)
        await self.session.commit()
        logger.info("Deleted scenario %s", scenario_id)
        return True
