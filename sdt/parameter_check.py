"""Plausibility check of the simulation parameters."""
# python libraries
import enum
import logging
import math

# 3rd party libraries

# own libraries
from sdt.derating_enums import DeviceFamily, EvaluationMode
from sdt.derating_dtos import SimulationParameters

# configure root logger
logger = logging.getLogger(__name__)

# Range of the linear sweep precision steps
PRECISION_STEPS_MIN: int = 10
PRECISION_STEPS_MAX: int = 500

class CheckCondition(enum.Enum):
    """Enum for type of check."""

    check_ignore = 0
    check_inclusive = 1
    check_exclusive = 2

class ParameterCheck:
    """Plausibility check for the parameters of a derating run."""

    @staticmethod
    def check_float_value(minimum: float, maximum: float, parameter_value: float, parameter_name: str,
                          check_type_minimum: CheckCondition, check_type_maximum: CheckCondition) -> tuple[bool, str]:
        """
        Verify the value according minimum and maximum.

        :param minimum: Minimum value of the range
        :type  minimum: float
        :param maximum: Maximum value of the range
        :type  maximum: float
        :param parameter_value: Value to check
        :type  parameter_value: float
        :param parameter_name: Name of parameter to mention in inconsistency report, if check fails
        :type  parameter_name: str
        :param check_type_minimum: Type of check to perform according the minimum value
        :type  check_type_minimum: CheckCondition
        :param check_type_maximum: Type of check to perform according the maximum value
        :type  check_type_maximum: CheckCondition
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        if math.isnan(parameter_value):
            return False, f"    Parameter {parameter_name} is not a number!\n"

        if check_type_minimum == CheckCondition.check_exclusive and parameter_value <= minimum:
            return False, f"    Parameter {parameter_name}= {parameter_value} is less equal minimum value {minimum}!\n"
        if check_type_minimum == CheckCondition.check_inclusive and parameter_value < minimum:
            return False, f"    Parameter {parameter_name}= {parameter_value} is less than minimum value {minimum}!\n"
        if check_type_maximum == CheckCondition.check_exclusive and parameter_value >= maximum:
            return False, f"    Parameter {parameter_name}= {parameter_value} is greater equal maximum value {maximum}!\n"
        if check_type_maximum == CheckCondition.check_inclusive and parameter_value > maximum:
            return False, f"    Parameter {parameter_name}= {parameter_value} is greater than maximum value {maximum}!\n"

        return True, ""

    @staticmethod
    def check_float_value_list(minimum: float, maximum: float, value_list: list[tuple[float, str]],
                               check_type_minimum: CheckCondition, check_type_maximum: CheckCondition) -> tuple[bool, str]:
        """
        Verify the listed values according minimum and maximum.

        :param minimum: Minimum value of the range
        :type  minimum: float
        :param maximum: Maximum value of the range
        :type  maximum: float
        :param value_list: List of float values to check and the parameter name
        :type  value_list: list[tuple[float, str]]
        :param check_type_minimum: Type of check to perform according the minimum value
        :type  check_type_minimum: CheckCondition
        :param check_type_maximum: Type of check to perform according the maximum value
        :type  check_type_maximum: CheckCondition
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        is_check_list_passed: bool = True
        inconsistency_list_report: str = ""

        for parameter_value, parameter_name in value_list:
            is_check_passed, issue_report = ParameterCheck.check_float_value(
                minimum, maximum, parameter_value, parameter_name, check_type_minimum, check_type_maximum)
            if not is_check_passed:
                inconsistency_list_report = inconsistency_list_report + issue_report
                is_check_list_passed = False

        return is_check_list_passed, inconsistency_list_report

    @staticmethod
    def check_simulation_parameters(params: SimulationParameters) -> tuple[bool, str]:
        """
        Verify, if the parameter set leads to a meaningful derating result.

        The derating engine itself does not validate its input. This check is performed by the caller.

        :param params: simulation parameters
        :type  params: SimulationParameters
        :return: tuple: Indication if the verification passed | Error text with description about the deviation
        :rtype: tuple[bool, str]
        """
        is_check_passed: bool = True
        inconsistency_report: str = ""

        # Ratings, which need to be positive
        positive_value_list: list[tuple[float, str]] = [
            (params.max_current, "max_current"),
            (params.max_voltage, "max_voltage"),
            (params.rth_jc, "rth_jc"),
            (params.rise_time, "rise_time"),
            (params.fall_time, "fall_time"),
            (params.switching_frequency, "switching_frequency"),
            (params.max_temperature, "max_temperature")]
        if params.power_dissipation is not None:
            positive_value_list.append((params.power_dissipation, "power_dissipation"))

        # Model values, which need to be finite and non-negative
        non_negative_value_list: list[tuple[float, str]] = [
            (params.total_rth, "total_rth"),
            (params.effective_cooling_budget, "effective_cooling_budget")]

        for value_list, check_type_minimum, check_type_maximum in [
                (positive_value_list, CheckCondition.check_exclusive, CheckCondition.check_ignore),
                (non_negative_value_list, CheckCondition.check_inclusive, CheckCondition.check_exclusive)]:
            is_list_passed, issue_report = ParameterCheck.check_float_value_list(
                0.0, math.inf, value_list, check_type_minimum, check_type_maximum)
            if not is_list_passed:
                inconsistency_report = inconsistency_report + issue_report
                is_check_passed = False

        is_steps_passed, issue_report = ParameterCheck.check_float_value(
            PRECISION_STEPS_MIN, PRECISION_STEPS_MAX, params.precision_steps, "precision_steps",
            CheckCondition.check_inclusive, CheckCondition.check_inclusive)
        if not is_steps_passed:
            inconsistency_report = inconsistency_report + issue_report
            is_check_passed = False

        # Conduction loss parameter according the device family
        device_family = DeviceFamily.from_label(params.transistor_type)
        if device_family.is_resistive:
            if not params.rds_on_ohms > 0:
                inconsistency_report = inconsistency_report + \
                    f"    Rds(on) is required for {device_family.value} and must be positive!\n"
                is_check_passed = False
        elif params.vce_sat is None or not params.vce_sat > 0:
            inconsistency_report = inconsistency_report + \
                f"    Vce(sat) is required for {device_family.value} and must be positive!\n"
            is_check_passed = False

        if params.simulation_mode == EvaluationMode.budget_only and (params.cooling_budget is None or not params.cooling_budget > 0):
            inconsistency_report = inconsistency_report + "    Cooling budget must be a positive number for the budget mode!\n"
            is_check_passed = False

        if not is_check_passed:
            logger.info(f"Simulation parameters are inconsistent:\n{inconsistency_report}")

        return is_check_passed, inconsistency_report
