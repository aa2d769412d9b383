"""
Coil performance engine.

Computes the steady-state performance of an air heating/cooling coil from a
single input snapshot:

  1. air mass flow from volume flow
  2. operating mode and sensible power from the air temperature change
  3-4. outside air vapor pressure, dew point and absolute humidity (Magnus)
  5. leaving humidity, with condensation when cooled below the dew point
  6. water flow and recommended pipe diameter from the total power
  7. temperature efficiency against the water supply temperature

The calculation is pure. Arithmetic faults are reported as a None result,
never raised to the caller. Infinite water flow and pipe diameter are valid
output (supply temperature equals return temperature).
"""

import logging
import math
from typing import Optional

from coilcalc.config import (
    EFFICIENCY_EPSILON,
    LATENT_HEAT_VAPORIZATION,
    RECOMMENDED_WATER_VELOCITY,
    SECONDS_PER_HOUR,
    SPECIFIC_HEAT_AIR,
    SPECIFIC_HEAT_WATER,
    WATER_DENSITY,
)
from coilcalc.engine.psychro import (
    absolute_humidity,
    air_mass_flow,
    dew_point,
    saturation_vapor_pressure,
)
from coilcalc.models.coil_performance import CoilPerformanceInput, CoilPerformanceResult

logger = logging.getLogger(__name__)

# Result fields allowed to carry the infinity "not applicable" sentinel
_SENTINEL_FIELDS = ("water_volume_flow", "recommended_pipe_diameter")


class ComputationFault(ArithmeticError):
    """An internal calculation produced a non-representable value."""


def calculate_coil_performance(
    inp: CoilPerformanceInput,
) -> Optional[CoilPerformanceResult]:
    """Main entry point. Returns None when the calculation faults."""
    try:
        result = _compute(inp)
    except ComputationFault as e:
        logger.warning("Coil performance calculation failed for %s: %s", inp, e)
        return None

    logger.debug(
        "Coil performance: mode=%s total=%.3f kW water=%.4f m³/h",
        "heating" if result.is_heating else "cooling",
        result.total_power,
        result.water_volume_flow,
    )
    return result


def _compute(inp: CoilPerformanceInput) -> CoilPerformanceResult:
    """Run the calculation, converting arithmetic errors into ComputationFault."""
    try:
        values = _calculate(inp)
    except (ValueError, ZeroDivisionError, OverflowError) as e:
        raise ComputationFault(str(e)) from e

    for name, value in values.items():
        if isinstance(value, bool):
            continue
        if math.isnan(value):
            raise ComputationFault(f"{name} is NaN")
        if math.isinf(value) and name not in _SENTINEL_FIELDS:
            raise ComputationFault(f"{name} is infinite")

    return CoilPerformanceResult(**values)


def _calculate(inp: CoilPerformanceInput) -> dict:
    m_air = air_mass_flow(inp.volume_flow)  # kg/s

    # Sensible power; zero change counts as cooling
    delta_t_air = inp.target_temp - inp.outside_temp
    is_heating = delta_t_air > 0
    sensible_power = m_air * SPECIFIC_HEAT_AIR * delta_t_air

    # Outside air state
    initial_vapor_pressure = (inp.outside_humidity / 100.0) * saturation_vapor_pressure(
        inp.outside_temp
    )
    tdp = dew_point(initial_vapor_pressure)
    initial_x = absolute_humidity(initial_vapor_pressure)

    final_humidity, final_x, latent_power = _leaving_humidity(
        inp.target_temp, is_heating, initial_vapor_pressure, tdp, initial_x, m_air
    )
    final_humidity = max(0.0, min(final_humidity, 100.0))
    total_power = sensible_power + latent_power

    water_volume_flow, pipe_diameter = _size_water_side(
        total_power, inp.supply_temp, inp.return_temp
    )

    efficiency = _efficiency(
        inp.outside_temp, inp.target_temp, inp.supply_temp, is_heating
    )

    return {
        "sensible_power": sensible_power,
        "latent_power": latent_power,
        "total_power": total_power,
        "water_volume_flow": water_volume_flow,
        "final_humidity": final_humidity,
        "is_heating": is_heating,
        "dew_point": tdp,
        "initial_absolute_humidity": initial_x,
        "final_absolute_humidity": final_x,
        "efficiency": efficiency,
        "recommended_pipe_diameter": pipe_diameter,
    }


def _leaving_humidity(
    target_temp: float,
    is_heating: bool,
    initial_vapor_pressure: float,
    tdp: float,
    initial_x: float,
    m_air: float,
) -> tuple[float, float, float]:
    """
    Leaving relative humidity (unclamped), absolute humidity and latent power.

    Heating and cooling above the dew point keep the moisture content
    constant. Cooling below the dew point saturates the air at the target
    temperature; the condensed water is released as (negative) latent power.
    """
    final_sat_pressure = saturation_vapor_pressure(target_temp)

    if is_heating or target_temp >= tdp:
        final_humidity = initial_vapor_pressure / final_sat_pressure * 100.0
        return final_humidity, initial_x, 0.0

    final_x = absolute_humidity(final_sat_pressure)
    condensate = m_air * (initial_x - final_x) / 1000.0  # kg/s
    latent_power = -abs(condensate * LATENT_HEAT_VAPORIZATION)
    return 100.0, final_x, latent_power


def _size_water_side(
    total_power: float, supply_temp: float, return_temp: float
) -> tuple[float, float]:
    """
    Water volume flow (m³/h) and pipe inner diameter (mm) for the total power.

    Both are math.inf when supply and return temperatures are equal.
    """
    delta_t_water = abs(supply_temp - return_temp)
    if delta_t_water <= 0:
        return math.inf, math.inf

    water_mass_flow = abs(total_power) / (SPECIFIC_HEAT_WATER * delta_t_water)  # kg/s
    water_volume_flow = water_mass_flow * SECONDS_PER_HOUR / WATER_DENSITY

    if not math.isfinite(water_volume_flow):
        return water_volume_flow, math.inf

    area = (water_volume_flow / SECONDS_PER_HOUR) / RECOMMENDED_WATER_VELOCITY  # m²
    diameter = math.sqrt(4.0 * area / math.pi) * 1000.0
    return water_volume_flow, diameter


def _efficiency(
    outside_temp: float, target_temp: float, supply_temp: float, is_heating: bool
) -> float:
    """
    Achieved over possible air temperature change, clamped to 0-1.

    Only a supply temperature on the correct side of the outside temperature
    for the operating mode counts; anything else yields 0.
    """
    potential_delta_t = supply_temp - outside_temp

    efficiency = 0.0
    if efficiency_gate_passes(potential_delta_t, is_heating):
        efficiency = (target_temp - outside_temp) / potential_delta_t
    return max(0.0, min(efficiency, 1.0))


def efficiency_gate_passes(potential_delta_t: float, is_heating: bool) -> bool:
    """
    Whether the supply temperature can drive the air temperature change of the mode.

    potential_delta_t is supply temperature minus outside temperature.
    """
    valid = (is_heating and potential_delta_t > 0) or (
        not is_heating and potential_delta_t < 0
    )
    return valid and abs(potential_delta_t) > EFFICIENCY_EPSILON
