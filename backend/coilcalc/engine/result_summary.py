"""
Consumer-side helpers around the coil performance engine.

  - clamp_inputs: force an input snapshot into the accepted input ranges
  - build_warnings: non-fatal notes about a result
  - summarize_result: formatted result tiles, "N/A" for non-applicable values
  - build_response: assemble the API response for an input/result pair
"""

import math

from coilcalc.config import DISPLAY_PRECISION, INPUT_RANGES, NOT_APPLICABLE
from coilcalc.engine.coil_performance import efficiency_gate_passes
from coilcalc.models.coil_performance import (
    CoilPerformanceInput,
    CoilPerformanceResponse,
    CoilPerformanceResult,
    ResultTile,
)


def clamp_inputs(inp: CoilPerformanceInput) -> CoilPerformanceInput:
    """Return a new snapshot with every field clamped into its input range."""
    clamped = {}
    for field, value in inp.model_dump().items():
        lo, hi, _step, _unit = INPUT_RANGES[field]
        clamped[field] = max(lo, min(value, hi))
    return CoilPerformanceInput(**clamped)


def build_warnings(inp: CoilPerformanceInput, result: CoilPerformanceResult) -> list[str]:
    warnings: list[str] = []

    if inp.supply_temp == inp.return_temp:
        warnings.append(
            f"Supply temperature ({inp.supply_temp:.1f} °C) equals return temperature "
            f"({inp.return_temp:.1f} °C). Water flow and pipe diameter are not applicable."
        )

    if not efficiency_gate_passes(
        inp.supply_temp - inp.outside_temp, result.is_heating
    ):
        mode = "heating" if result.is_heating else "cooling"
        warnings.append(
            f"Supply temperature ({inp.supply_temp:.1f} °C) cannot drive {mode} from "
            f"the outside temperature ({inp.outside_temp:.1f} °C). Efficiency reported as 0."
        )

    return warnings


def _format(value: float, key: str) -> str:
    if not math.isfinite(value):
        return NOT_APPLICABLE
    return f"{value:.{DISPLAY_PRECISION[key]}f}"


def summarize_result(result: CoilPerformanceResult) -> list[ResultTile]:
    """Result tiles in display order."""
    power_label = "Heating power" if result.is_heating else "Total cooling power"
    power_detail = None
    if not result.is_heating:
        power_detail = (
            f"Sensible power: {_format(result.sensible_power, 'total_power')} kW | "
            f"Latent power: {_format(result.latent_power, 'total_power')} kW"
        )

    rows = [
        ("total_power", power_label, abs(result.total_power), "kW"),
        ("water_volume_flow", "Water volume flow", result.water_volume_flow, "m³/h"),
        ("recommended_pipe_diameter", "Recommended pipe diameter",
         result.recommended_pipe_diameter, "mm"),
        ("efficiency", "Efficiency", result.efficiency * 100.0, "%"),
        ("final_humidity", "Resulting relative humidity", result.final_humidity, "%"),
        ("dew_point", "Dew point", result.dew_point, "°C"),
        ("initial_absolute_humidity", "Absolute humidity (before)",
         result.initial_absolute_humidity, "g/kg"),
        ("final_absolute_humidity", "Absolute humidity (after)",
         result.final_absolute_humidity, "g/kg"),
    ]

    tiles = [
        ResultTile(key=key, label=label, value=_format(value, key), unit=unit)
        for key, label, value, unit in rows
    ]
    tiles[0].detail = power_detail
    return tiles


def _finite_or_none(value: float):
    return value if math.isfinite(value) else None


def build_response(
    inp: CoilPerformanceInput, result: CoilPerformanceResult
) -> CoilPerformanceResponse:
    fields = result.model_dump()
    fields["water_volume_flow"] = _finite_or_none(result.water_volume_flow)
    fields["recommended_pipe_diameter"] = _finite_or_none(result.recommended_pipe_diameter)

    return CoilPerformanceResponse(
        inputs=inp,
        operation_mode="heating" if result.is_heating else "cooling",
        condensation=result.latent_power < 0,
        summary=summarize_result(result),
        warnings=build_warnings(inp, result),
        **fields,
    )
