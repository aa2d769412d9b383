"""
API routes for coil performance calculations.
"""

from fastapi import APIRouter, HTTPException

from coilcalc.config import DEFAULT_INPUTS, INPUT_RANGES
from coilcalc.engine.coil_performance import calculate_coil_performance
from coilcalc.engine.result_summary import build_response, clamp_inputs
from coilcalc.models.coil_performance import (
    CoilPerformanceInput,
    CoilPerformanceRequest,
    CoilPerformanceResponse,
    InputRange,
)

router = APIRouter(prefix="/api/v1", tags=["coil-performance"])


@router.post("/coil-performance", response_model=CoilPerformanceResponse)
async def coil_performance(data: CoilPerformanceRequest) -> CoilPerformanceResponse:
    """
    Calculate heating/cooling coil performance.

    Derives sensible, latent and total power, water flow, leaving humidity,
    dew point, efficiency and a recommended pipe diameter. Water flow and
    pipe diameter are null when supply and return temperatures are equal.
    """
    inp = data.to_input()
    if data.clamp_inputs:
        inp = clamp_inputs(inp)

    try:
        result = calculate_coil_performance(inp)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")

    if result is None:
        raise HTTPException(
            status_code=422,
            detail="Calculation produced no result for the given inputs",
        )
    return build_response(inp, result)


@router.get("/coil-performance/defaults", response_model=CoilPerformanceInput)
async def coil_performance_defaults() -> CoilPerformanceInput:
    """Default input snapshot (heating case)."""
    return CoilPerformanceInput(**DEFAULT_INPUTS)


@router.get("/coil-performance/input-ranges", response_model=dict[str, InputRange])
async def coil_performance_input_ranges() -> dict[str, InputRange]:
    """Accepted [min, max] range, slider step and unit of every input."""
    return {
        field: InputRange(min=lo, max=hi, step=step, unit=unit)
        for field, (lo, hi, step, unit) in INPUT_RANGES.items()
    }
