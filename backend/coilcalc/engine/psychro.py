"""
Psychrometric helper functions (Magnus approximation, SI units).

Temperatures in °C, vapor pressures in hPa, absolute humidity in g water
per kg dry air. Valid over water for roughly -45°C to 60°C.
"""

import math

from coilcalc.config import (
    AIR_DENSITY,
    ATMOSPHERIC_PRESSURE_HPA,
    MAGNUS_A,
    MAGNUS_B,
    MAGNUS_C,
    MOLAR_MASS_RATIO_G_PER_KG,
    SECONDS_PER_HOUR,
)


def saturation_vapor_pressure(temp: float) -> float:
    """Saturation vapor pressure (hPa) at the given temperature (°C)."""
    return MAGNUS_A * math.exp((MAGNUS_B * temp) / (temp + MAGNUS_C))


def dew_point(vapor_pressure: float) -> float:
    """
    Dew point temperature (°C) for an actual vapor pressure (hPa).

    Inverse of saturation_vapor_pressure. Raises ValueError for a
    non-positive vapor pressure (math domain error).
    """
    gamma = math.log(vapor_pressure / MAGNUS_A)
    return (MAGNUS_C * gamma) / (MAGNUS_B - gamma)


def absolute_humidity(vapor_pressure: float) -> float:
    """Absolute humidity (g/kg dry air) at standard atmospheric pressure."""
    return (MOLAR_MASS_RATIO_G_PER_KG * vapor_pressure) / (
        ATMOSPHERIC_PRESSURE_HPA - vapor_pressure
    )


def air_mass_flow(volume_flow: float) -> float:
    """Convert an air volume flow (m³/h) to mass flow (kg/s)."""
    return volume_flow * AIR_DENSITY / SECONDS_PER_HOUR
