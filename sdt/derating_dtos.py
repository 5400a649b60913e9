"""Data transfer objects (DTOs) for the derating simulation."""
# python libraries
import dataclasses

# 3rd party libraries

# own libraries
from sdt.derating_enums import EvaluationMode, SearchAlgorithm, FailureCategory

@dataclasses.dataclass(frozen=True)
class SimulationParameters:
    """Electrical and thermal ratings and simulation settings of one derating run."""

    # Device ratings
    max_current: float
    max_voltage: float
    power_dissipation: float | None
    # Junction to case thermal resistance in °C/W (only part of total_rth)
    rth_jc: float
    # Rise and fall time in ns
    rise_time: float
    fall_time: float
    # Switching frequency in kHz
    switching_frequency: float
    max_temperature: float
    ambient_temperature: float
    # Junction to ambient thermal resistance in °C/W
    total_rth: float
    transistor_type: str
    rds_on_ohms: float
    vce_sat: float | None
    simulation_mode: EvaluationMode
    cooling_budget: float | None
    simulation_algorithm: SearchAlgorithm
    precision_steps: int
    # Cooling budget in W, which is used for the comparisons
    effective_cooling_budget: float

@dataclasses.dataclass(frozen=True)
class PowerBreakdown:
    """Power loss in W."""

    total: float
    conduction: float
    switching: float

@dataclasses.dataclass(frozen=True)
class EvaluationOutcome:
    """Result of the evaluation of one current level."""

    is_safe: bool
    failure_reason: FailureCategory | None
    details: str
    final_temperature: float
    power_dissipation: PowerBreakdown

@dataclasses.dataclass(frozen=True)
class CurvePoint:
    """Single point of the derating curve."""

    current: float
    temperature: float
    power_loss: float
    conduction_loss: float
    switching_loss: float
    # Normalized progress in percent (0...100)
    progress: float
    limit_value: float
    check_result: EvaluationOutcome

@dataclasses.dataclass(frozen=True)
class SimulationSummary:
    """Final result of a derating run."""

    status: str
    max_safe_current: float
    failure_reason: FailureCategory | None
    details: str
    final_temperature: float
    power_dissipation: PowerBreakdown
    data_points: list[CurvePoint]

@dataclasses.dataclass(frozen=True)
class CoolingMethod:
    """Cooling method with its case to ambient thermal resistance and power budget."""

    name: str
    thermal_resistance: float
    cooling_budget: float
