"""Saved-scenario routes. Every route here sits behind HTTP Basic auth."""

from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from forecaster.api.deps import get_scenario_store, require_auth
from forecaster.api.schemas import ScenarioCreate, ScenarioResponse, ScenarioUpdate
from forecaster.data.scenario_store import ScenarioStore

router = APIRouter(prefix="/api", tags=["scenarios"], dependencies=[Depends(require_auth)])


@router.get("/health")
async def health():
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}


@router.get("/scenarios", response_model=list[ScenarioResponse])
async def list_scenarios(store: ScenarioStore = Depends(get_scenario_store)):
    """All saved scenarios, most recently updated first."""
    return await store.list_all()


@router.post("/scenarios", response_model=ScenarioResponse, status_code=status.HTTP_201_CREATED)
async def create_scenario(req: ScenarioCreate, store: ScenarioStore = Depends(get_scenario_store)):
    return await store.create(
        name=req.name,
        data=req.data,
        preview=req.preview,
        cashflow_columns=req.cashflow_columns,
    )


async def _merge_update(scenario_id: UUID, req: ScenarioUpdate, store: ScenarioStore):
    record = await store.update(scenario_id, req.model_dump())
    if record is None:
        raise HTTPException(status_code=404, detail="Scenario not found")
    return record


@router.put("/scenarios/{scenario_id}", response_model=ScenarioResponse)
async def replace_scenario(
    scenario_id: UUID, req: ScenarioUpdate, store: ScenarioStore = Depends(get_scenario_store)
):
    return await _merge_update(scenario_id, req, store)


@router.patch("/scenarios/{scenario_id}", response_model=ScenarioResponse)
async def patch_scenario(
    scenario_id: UUID, req: ScenarioUpdate, store: ScenarioStore = Depends(get_scenario_store)
):
    return await _merge_update(scenario_id, req, store)


@router.delete("/scenarios/{scenario_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_scenario(scenario_id: UUID, store: ScenarioStore = Depends(get_scenario_store)):
    if not await store.delete(scenario_id):
        raise HTTPException(status_code=404, detail="Scenario not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
