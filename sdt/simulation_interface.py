"""Process boundary of the derating engine with camelCase records."""
# python libraries
import logging
from typing import Any
from collections.abc import Mapping

# 3rd party libraries
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

# own libraries
from sdt.derating_enums import EvaluationMode, SearchAlgorithm, FailureCategory
from sdt.derating_dtos import SimulationParameters, SimulationSummary
from sdt import derating_engine

# configure root logger
logger = logging.getLogger(__name__)

class CamelRecord(BaseModel):
    """Record with lower camelCase keys at the boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, from_attributes=True)

# ######################################################
# input record
# ######################################################

class SimulationParamsRecord(CamelRecord):
    """Simulation parameter record as provided by the caller."""

    max_current: float
    max_voltage: float
    power_dissipation: float | None = None
    rth_jc: float
    rise_time: float
    fall_time: float
    switching_frequency: float
    max_temperature: float
    ambient_temperature: float
    total_rth: float
    transistor_type: str
    rds_on_ohms: float
    vce_sat: float | None = None
    simulation_mode: EvaluationMode
    cooling_budget: float | None = None
    simulation_algorithm: SearchAlgorithm
    precision_steps: int = Field(ge=0)
    effective_cooling_budget: float

    def to_parameters(self) -> SimulationParameters:
        """
        Convert the record to the engine parameter DTO.

        :return: simulation parameters
        :rtype: SimulationParameters
        """
        return SimulationParameters(**self.model_dump())

# ######################################################
# output records
# ######################################################

class PowerDissipationRecord(CamelRecord):
    """Power loss breakdown in W."""

    total: float
    conduction: float
    switching: float

class CheckResultRecord(CamelRecord):
    """Evaluation outcome of one current level."""

    is_safe: bool
    failure_reason: FailureCategory | None
    details: str
    final_temperature: float
    power_dissipation: PowerDissipationRecord

class DataPointRecord(CamelRecord):
    """Point of the derating curve."""

    current: float
    temperature: float
    power_loss: float
    conduction_loss: float
    switching_loss: float
    progress: float
    limit_value: float
    check_result: CheckResultRecord

class SimulationResultRecord(CamelRecord):
    """Final simulation result."""

    status: str
    max_safe_current: float
    failure_reason: FailureCategory | None
    details: str
    final_temperature: float
    power_dissipation: PowerDissipationRecord
    data_points: list[DataPointRecord]


def parameters_from_dict(raw_params: Mapping[str, Any]) -> SimulationParameters:
    """
    Validate a camelCase parameter mapping and convert it to the engine parameters.

    :param raw_params: parameter mapping with camelCase keys, e.g. 'maxCurrent'
    :type  raw_params: Mapping[str, Any]
    :return: simulation parameters
    :rtype: SimulationParameters
    :raises pydantic.ValidationError: in case of missing or malformed entries
    """
    return SimulationParamsRecord.model_validate(raw_params).to_parameters()


def parameters_to_dict(params: SimulationParameters) -> dict[str, Any]:
    """
    Convert the engine parameters to a camelCase mapping.

    :param params: simulation parameters
    :type  params: SimulationParameters
    :return: parameter mapping with camelCase keys and lowercase mode/algorithm tokens
    :rtype: dict[str, Any]
    """
    return SimulationParamsRecord.model_validate(params).model_dump(mode="json", by_alias=True)


def summary_to_dict(summary: SimulationSummary) -> dict[str, Any]:
    """
    Convert the simulation summary to a camelCase mapping.

    :param summary: simulation summary
    :type  summary: SimulationSummary
    :return: JSON compatible mapping
    :rtype: dict[str, Any]
    """
    return SimulationResultRecord.model_validate(summary).model_dump(mode="json", by_alias=True)


def run_simulation(params: SimulationParameters | Mapping[str, Any]) -> tuple[bool, SimulationSummary | str]:
    """
    Run a derating simulation and report failures as a single error text.

    :param params: simulation parameters or a camelCase parameter mapping
    :type  params: SimulationParameters | Mapping[str, Any]
    :return: True and the summary, or False and the error text
    :rtype: tuple[bool, SimulationSummary | str]
    """
    try:
        if not isinstance(params, SimulationParameters):
            params = parameters_from_dict(params)
        summary = derating_engine.run(params)
    except ValidationError as exc:
        logger.warning(f"Simulation parameters are invalid:\n{exc}")
        return False, f"Invalid simulation parameters: {exc}"
    except Exception as exc:
        logger.exception("Simulation failed.")
        return False, f"Simulation failed: {exc}"

    return True, summary


def run_simulation_json(params: SimulationParameters | Mapping[str, Any]) -> tuple[bool, dict[str, Any] | str]:
    """
    Run a derating simulation and provide the summary as camelCase mapping.

    :param params: simulation parameters or a camelCase parameter mapping
    :type  params: SimulationParameters | Mapping[str, Any]
    :return: True and the summary mapping, or False and the error text
    :rtype: tuple[bool, dict[str, Any] | str]
    """
    is_successful, result = run_simulation(params)
    if not is_successful or isinstance(result, str):
        return False, str(result)

    return True, summary_to_dict(result)
