"""
Pydantic models for coil performance input/output.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CoilPerformanceInput(BaseModel):
    """Steady-state snapshot of air and water conditions around a coil."""

    # No coercion of bools or numeric strings into floats
    model_config = ConfigDict(frozen=True, strict=True)

    outside_temp: float = Field(..., description="Outside air temperature (°C)")
    outside_humidity: float = Field(..., description="Outside relative humidity (0-100%)")
    volume_flow: float = Field(..., description="Air volume flow (m³/h)")
    target_temp: float = Field(..., description="Measured air temperature after the coil (°C)")
    supply_temp: float = Field(..., description="Water supply temperature (°C)")
    return_temp: float = Field(..., description="Water return temperature (°C)")


class CoilPerformanceResult(BaseModel):
    """Derived coil performance. Infinite water flow / pipe size means not applicable."""

    model_config = ConfigDict(frozen=True)

    sensible_power: float      # kW, sign follows the air temperature change
    latent_power: float        # kW, always <= 0
    total_power: float         # kW
    water_volume_flow: float   # m³/h, math.inf when supply == return
    final_humidity: float      # % RH after the coil, 0-100
    is_heating: bool
    dew_point: float           # °C, of the outside air
    initial_absolute_humidity: float  # g/kg
    final_absolute_humidity: float    # g/kg
    efficiency: float          # 0-1
    recommended_pipe_diameter: float  # mm, math.inf when supply == return


class ResultTile(BaseModel):
    """A single formatted result value for display."""

    key: str
    label: str
    value: str
    unit: str
    detail: Optional[str] = None  # e.g. sensible/latent breakdown of the cooling power


class InputRange(BaseModel):
    """Accepted range for one input field."""

    min: float
    max: float
    step: float
    unit: str


class CoilPerformanceRequest(CoilPerformanceInput):
    """API request: the input snapshot plus request options."""

    clamp_inputs: bool = Field(
        default=False,
        description="Clamp every input into its documented range before calculating",
    )

    def to_input(self) -> CoilPerformanceInput:
        return CoilPerformanceInput(**self.model_dump(exclude={"clamp_inputs"}))


class CoilPerformanceResponse(BaseModel):
    """API response. Non-finite values are reported as null."""

    inputs: CoilPerformanceInput
    operation_mode: str   # "heating" or "cooling"
    condensation: bool

    sensible_power: float
    latent_power: float
    total_power: float
    water_volume_flow: Optional[float] = None
    final_humidity: float
    is_heating: bool
    dew_point: float
    initial_absolute_humidity: float
    final_absolute_humidity: float
    efficiency: float
    recommended_pipe_diameter: Optional[float] = None

    summary: list[ResultTile] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
