"""
CoilCalc configuration and constants.
"""

import os

# Physical constants (standard conditions, air at ~20°C)
AIR_DENSITY = 1.204                # kg/m³
SPECIFIC_HEAT_AIR = 1.005          # kJ/(kg·K)
SPECIFIC_HEAT_WATER = 4.186        # kJ/(kg·K)
WATER_DENSITY = 1000.0             # kg/m³
ATMOSPHERIC_PRESSURE_HPA = 1013.25 # hPa
LATENT_HEAT_VAPORIZATION = 2260.0  # kJ/kg of condensed water
RECOMMENDED_WATER_VELOCITY = 1.5   # m/s, pipe sizing target

# Ratio of molar masses water/dry air, expressed in g/kg
MOLAR_MASS_RATIO_G_PER_KG = 622.0

# Magnus approximation coefficients (over water, °C / hPa)
MAGNUS_A = 6.112   # hPa
MAGNUS_B = 17.67
MAGNUS_C = 243.5   # °C

SECONDS_PER_HOUR = 3600.0

# Below this supply-vs-outside temperature difference efficiency is reported as 0
EFFICIENCY_EPSILON = 1e-6

# Input ranges accepted by a consumer's numeric entry: (min, max, step, unit)
INPUT_RANGES: dict[str, tuple[float, float, float, str]] = {
    "outside_temp": (-30.0, 50.0, 0.5, "°C"),
    "outside_humidity": (0.0, 100.0, 1.0, "%"),
    "volume_flow": (100.0, 150000.0, 500.0, "m³/h"),
    "target_temp": (-10.0, 60.0, 0.5, "°C"),
    "supply_temp": (0.0, 100.0, 1.0, "°C"),
    "return_temp": (0.0, 100.0, 1.0, "°C"),
}

# Initial snapshot shown by a fresh calculator (heating case)
DEFAULT_INPUTS: dict[str, float] = {
    "outside_temp": 10.0,
    "outside_humidity": 60.0,
    "volume_flow": 2000.0,
    "target_temp": 22.0,
    "supply_temp": 60.0,
    "return_temp": 40.0,
}

# Decimal places used when rendering result tiles
DISPLAY_PRECISION = {
    "total_power": 2,
    "water_volume_flow": 3,
    "recommended_pipe_diameter": 0,
    "efficiency": 1,
    "final_humidity": 1,
    "dew_point": 1,
    "initial_absolute_humidity": 2,
    "final_absolute_humidity": 2,
}

NOT_APPLICABLE = "N/A"

# CORS — allow local frontend dev server
CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]

LOG_LEVEL = os.environ.get("COILCALC_LOG_LEVEL", "INFO").upper()
