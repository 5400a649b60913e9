"""Classes and toml checker for the derating study configuration."""
# python libraries
from typing import Literal

# 3rd party libraries
from pydantic import BaseModel

# own libraries

# ######################################################
# general
# ######################################################

class TomlGeneral(BaseModel):
    """General study information."""

    project_directory: str
    study_name: str

# ######################################################
# device
# ######################################################

class TomlDevice(BaseModel):
    """Datasheet ratings of the power semiconductor."""

    transistor_type: str
    max_current: float
    max_voltage: float
    power_dissipation: float | None = None
    rth_jc: float
    # ns
    rise_time: float
    # ns
    fall_time: float
    max_temperature: float
    # mOhm
    rds_on: float | None = None
    # V
    vce_sat: float | None = None

# ######################################################
# operating conditions
# ######################################################

class TomlOperatingConditions(BaseModel):
    """Operating point and cooling selection."""

    # kHz
    switching_frequency: float
    ambient_temperature: float = 25.0
    cooling_method: str

class TomlSimulation(BaseModel):
    """Derating simulation settings."""

    simulation_mode: Literal['ftf', 'temp', 'budget'] = 'ftf'
    simulation_algorithm: Literal['iterative', 'binary'] = 'iterative'
    precision_steps: int = 200
    cooling_budget: float | None = None

class TomlCoolingMethod(BaseModel):
    """Selectable cooling method."""

    name: str
    # °C/W case to ambient
    thermal_resistance: float
    # W
    cooling_budget: float

class TomlDeratingStudy(BaseModel):
    """Complete derating study configuration."""

    general: TomlGeneral
    device: TomlDevice
    operating_conditions: TomlOperatingConditions
    simulation: TomlSimulation
    cooling_methods: list[TomlCoolingMethod]
