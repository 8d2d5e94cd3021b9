"""Analysis routes: deal projection and stamp duty quotes."""

import logging

from fastapi import APIRouter, HTTPException

from forecaster.api.schemas import (
    AnalyzeRequest,
    DealSummaryResponse,
    StampDutyBandResponse,
    StampDutyRequest,
    StampDutyResponse,
)
from forecaster.engine.projection import run_projection
from forecaster.engine.stamp_duty import stamp_duty_breakdown
from forecaster.models.deal import build_inputs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


@router.post("/analyze", response_model=DealSummaryResponse)
async def analyze(req: AnalyzeRequest):
    """Partial deal inputs → full projection summary.

    Fields left out of the request take the standard defaults.
    """
    inputs = build_inputs(req.model_dump(exclude_none=True))
    try:
        summary = run_projection(inputs)
    except ArithmeticError as e:
        logger.warning("Projection failed for %s: %s", inputs, e)
        raise HTTPException(status_code=400, detail=f"Cannot project these inputs: {e}")
    return DealSummaryResponse.model_validate(summary, from_attributes=True)


@router.post("/stamp-duty", response_model=StampDutyResponse)
async def quote_stamp_duty(req: StampDutyRequest):
    breakdown = stamp_duty_breakdown(
        req.price, req.buyer_type, req.properties_owned, req.first_time_buyer
    )
    return StampDutyResponse(
        price=breakdown.price,
        total=breakdown.total,
        effective_rate=breakdown.effective_rate,
        first_time_buyer_relief=breakdown.first_time_buyer_relief,
        additional_property=breakdown.additional_property,
        surcharge=breakdown.surcharge,
        bands=[
            StampDutyBandResponse(
                lower=b.lower, upper=b.upper, rate=b.rate, taxable=b.taxable, tax=b.tax
            )
            for b in breakdown.bands
        ],
    )
