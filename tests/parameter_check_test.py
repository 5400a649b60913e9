"""Unit tests for the parameter plausibility check."""

# python libraries
import logging
import dataclasses
import math
from enum import Enum

# 3rd party libraries
import pytest
from _pytest.logging import LogCaptureFixture

# own libraries
import sdt.parameter_check as test_module
from sdt.parameter_check import CheckCondition
from sdt.derating_dtos import SimulationParameters
from sdt.derating_enums import EvaluationMode, SearchAlgorithm

# Enable logger
pytestlogger = logging.getLogger(__name__)

class TestCase(Enum):
    """Enum of test types."""

    # Valid test case
    LowerBoundary = 0           # Test value at lower boundary
    UpperBoundary = 1           # Test value at upper boundary
    InBetween = 2               # Test value in between
    # Failure test case
    ExceedLowerLimit = 3        # Test when the lower limit is exceeded
    ExceedUpperLimit = 4        # Test when the upper limit is exceeded
    NotANumber = 5              # Test with nan value

# Parameter set of the example MOSFET with liquid cooling
test_params_base: SimulationParameters = SimulationParameters(
    max_current=49.0,
    max_voltage=55.0,
    power_dissipation=94.0,
    rth_jc=1.0,
    rise_time=60.0,
    fall_time=45.0,
    switching_frequency=100.0,
    max_temperature=150.0,
    ambient_temperature=25.0,
    total_rth=1.5,
    transistor_type="MOSFET (N-Channel)",
    rds_on_ohms=0.0175,
    vce_sat=None,
    simulation_mode=EvaluationMode.first_to_fail,
    cooling_budget=None,
    simulation_algorithm=SearchAlgorithm.linear_sweep,
    precision_steps=200,
    effective_cooling_budget=250.0)

#########################################################################################################
# test of check_float_value
#########################################################################################################

# test parameter list
@pytest.mark.parametrize("check_type_minimum, check_type_maximum, parameter_value, test_case", [
    # Valid test case
    (CheckCondition.check_inclusive, CheckCondition.check_inclusive, 10.0, TestCase.LowerBoundary),
    (CheckCondition.check_inclusive, CheckCondition.check_inclusive, 500.0, TestCase.UpperBoundary),
    (CheckCondition.check_exclusive, CheckCondition.check_exclusive, 250.0, TestCase.InBetween),
    (CheckCondition.check_ignore, CheckCondition.check_ignore, -1e9, TestCase.InBetween),
    # Failure test case
    (CheckCondition.check_exclusive, CheckCondition.check_inclusive, 10.0, TestCase.ExceedLowerLimit),
    (CheckCondition.check_inclusive, CheckCondition.check_inclusive, 9.9, TestCase.ExceedLowerLimit),
    (CheckCondition.check_inclusive, CheckCondition.check_exclusive, 500.0, TestCase.ExceedUpperLimit),
    (CheckCondition.check_inclusive, CheckCondition.check_inclusive, 500.1, TestCase.ExceedUpperLimit),
    (CheckCondition.check_ignore, CheckCondition.check_ignore, math.nan, TestCase.NotANumber)
])
def test_check_float_value(check_type_minimum: CheckCondition, check_type_maximum: CheckCondition,
                           parameter_value: float, test_case: TestCase) -> None:
    """Test the method check_float_value.

    :param check_type_minimum: Type of check to perform according the minimum value
    :type  check_type_minimum: CheckCondition
    :param check_type_maximum: Type of check to perform according the maximum value
    :type  check_type_maximum: CheckCondition
    :param parameter_value: Value to check
    :type  parameter_value: float
    :param test_case: Type of test case
    :type  test_case: TestCase
    """
    is_check_passed, issue_report = test_module.ParameterCheck.check_float_value(
        10.0, 500.0, parameter_value, "test_value", check_type_minimum, check_type_maximum)

    if test_case in [TestCase.LowerBoundary, TestCase.UpperBoundary, TestCase.InBetween]:
        assert is_check_passed
        assert issue_report == ""
    else:
        assert not is_check_passed
        assert "test_value" in issue_report
        if test_case == TestCase.ExceedLowerLimit:
            assert "minimum value 10.0" in issue_report
        elif test_case == TestCase.ExceedUpperLimit:
            assert "maximum value 500.0" in issue_report
        else:
            assert issue_report == "    Parameter test_value is not a number!\n"

def test_check_float_value_list() -> None:
    """Test that all failing values of a list are reported."""
    is_check_passed, issue_report = test_module.ParameterCheck.check_float_value_list(
        0.0, math.inf, [(1.0, "value_a"), (0.0, "value_b"), (-2.0, "value_c")],
        CheckCondition.check_exclusive, CheckCondition.check_ignore)

    assert not is_check_passed
    assert issue_report == ("    Parameter value_b= 0.0 is less equal minimum value 0.0!\n"
                            "    Parameter value_c= -2.0 is less equal minimum value 0.0!\n")

#########################################################################################################
# test of check_simulation_parameters
#########################################################################################################

def test_check_simulation_parameters_valid(caplog: LogCaptureFixture) -> None:
    """Test the check with a consistent parameter set.

    :param caplog: class instance for logger data
    :type  caplog: LogCaptureFixture
    """
    with caplog.at_level(logging.INFO):
        is_check_passed, issue_report = test_module.ParameterCheck.check_simulation_parameters(test_params_base)

    assert is_check_passed
    assert issue_report == ""
    assert len(caplog.records) == 0

# test parameter list
@pytest.mark.parametrize("changes, exp_report_part", [
    # Ratings need to be positive
    ({"max_current": 0.0}, "Parameter max_current= 0.0 is less equal minimum value 0.0!"),
    ({"max_voltage": -55.0}, "Parameter max_voltage= -55.0"),
    ({"rth_jc": 0.0}, "Parameter rth_jc= 0.0"),
    ({"rise_time": 0.0}, "Parameter rise_time= 0.0"),
    ({"switching_frequency": math.nan}, "Parameter switching_frequency is not a number!"),
    ({"max_temperature": 0.0}, "Parameter max_temperature= 0.0"),
    ({"power_dissipation": 0.0}, "Parameter power_dissipation= 0.0"),
    # Model values need to be finite and non-negative
    ({"total_rth": -0.5}, "Parameter total_rth= -0.5 is less than minimum value 0.0!"),
    ({"effective_cooling_budget": math.inf}, "Parameter effective_cooling_budget= inf is greater equal maximum value inf!"),
    # Precision steps
    ({"precision_steps": 9}, "Parameter precision_steps= 9 is less than minimum value 10!"),
    ({"precision_steps": 501}, "Parameter precision_steps= 501 is greater than maximum value 500!"),
    # Conduction loss parameter
    ({"rds_on_ohms": 0.0}, "Rds(on) is required for N-Channel MOSFET and must be positive!"),
    ({"transistor_type": "GaN FET", "rds_on_ohms": -0.01}, "Rds(on) is required for GaN FET and must be positive!"),
    ({"transistor_type": "IGBT"}, "Vce(sat) is required for IGBT and must be positive!"),
    ({"transistor_type": "BJT (NPN)", "vce_sat": 0.0}, "Vce(sat) is required for NPN BJT and must be positive!"),
    # Cooling budget in budget mode
    ({"simulation_mode": EvaluationMode.budget_only}, "Cooling budget must be a positive number for the budget mode!"),
    ({"simulation_mode": EvaluationMode.budget_only, "cooling_budget": 0.0}, "Cooling budget must be a positive number for the budget mode!")
])
def test_check_simulation_parameters_invalid(caplog: LogCaptureFixture, changes: dict, exp_report_part: str) -> None:
    """Test the check with inconsistent parameter sets.

    :param caplog: class instance for logger data
    :type  caplog: LogCaptureFixture
    :param changes: changed parameters
    :type  changes: dict
    :param exp_report_part: expected part of the inconsistency report
    :type  exp_report_part: str
    """
    test_params = dataclasses.replace(test_params_base, **changes)

    with caplog.at_level(logging.INFO):
        is_check_passed, issue_report = test_module.ParameterCheck.check_simulation_parameters(test_params)

    assert not is_check_passed
    assert exp_report_part in issue_report
    assert len(caplog.records) == 1
    assert caplog.records[0].message.startswith("Simulation parameters are inconsistent:")

# test parameter list
@pytest.mark.parametrize("changes", [
    # Saturation voltage ignored for resistive devices
    {"vce_sat": 0.0},
    # Saturation device with valid saturation voltage and unused Rds(on)
    {"transistor_type": "BJT (PNP)", "vce_sat": 0.3, "rds_on_ohms": 0.0},
    # Budget mode with user cooling budget
    {"simulation_mode": EvaluationMode.budget_only, "cooling_budget": 20.0, "effective_cooling_budget": 20.0},
    # Zero total thermal resistance and zero cooling budget are accepted
    {"total_rth": 0.0, "effective_cooling_budget": 0.0},
    # Optional power dissipation
    {"power_dissipation": None},
    # Precision steps at the range limits
    {"precision_steps": 10},
    {"precision_steps": 500}
])
def test_check_simulation_parameters_accepted(changes: dict) -> None:
    """Test the check with consistent variations of the parameter set.

    :param changes: changed parameters
    :type  changes: dict
    """
    test_params = dataclasses.replace(test_params_base, **changes)

    is_check_passed, issue_report = test_module.ParameterCheck.check_simulation_parameters(test_params)

    assert is_check_passed
    assert issue_report == ""

def test_check_simulation_parameters_collects_all_issues() -> None:
    """Test that all inconsistencies are reported together."""
    test_params = dataclasses.replace(test_params_base, max_current=0.0, precision_steps=5, rds_on_ohms=0.0)

    is_check_passed, issue_report = test_module.ParameterCheck.check_simulation_parameters(test_params)

    assert not is_check_passed
    assert issue_report.count("\n") == 3
