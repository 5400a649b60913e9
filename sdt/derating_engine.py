"""Derating engine to find the maximum safe continuous current of a power semiconductor."""
# python libraries
import logging
import math

# 3rd party libraries
import numpy as np

# own libraries
from sdt.derating_enums import DeviceFamily, EvaluationMode, SearchAlgorithm, FailureCategory
from sdt.derating_dtos import SimulationParameters, PowerBreakdown, EvaluationOutcome, CurvePoint, SimulationSummary
from sdt.losses import transistor_conduction_loss, transistor_switch_loss, junction_temperature

# configure root logger
logger = logging.getLogger(__name__)

STATUS_SUCCESS: str = "success"
SAFE_DETAILS: str = "Operating within safe limits."

# Sweep range of the linear sweep referred to the maximum current
LINEAR_SWEEP_RANGE_FACTOR: float = 1.2
# Upper search bound of the binary search referred to the maximum current
BINARY_SEARCH_RANGE_FACTOR: float = 1.5
BINARY_SEARCH_ITERATION_FACTOR: float = 15.0
# Minimum interval width in A to stop the binary search
BINARY_SEARCH_RESOLUTION: float = 0.01
# Limit value of the normalized progress in first-to-fail mode
NORMALIZED_LIMIT_VALUE: float = 100.0
MAX_PROGRESS: float = 100.0


def format_rating(value: float) -> str:
    """
    Format a rating value by its shortest representation without a trailing '.0'.

    :param value: rating value
    :type value: float
    :return: formatted value, e.g. '150' for 150.0 or '0.5' for 0.5
    :rtype: str
    """
    value_text = repr(float(value))
    if value_text.endswith(".0"):
        value_text = value_text[:-2]
    return value_text


class DeratingEngine:
    """Evaluate the loss model at current levels and search the maximum safe current."""

    def __init__(self, params: SimulationParameters) -> None:
        """
        Initialize the engine and classify the device family.

        :param params: simulation parameters
        :type  params: SimulationParameters
        """
        self.params = params
        self.device_family = DeviceFamily.from_label(params.transistor_type)
        logger.debug(f"Device type label '{params.transistor_type}' is classified as {self.device_family.value}.")

    def evaluate_current(self, current: float) -> EvaluationOutcome:
        """
        Calculate losses and junction temperature for a current level and decide, if it is safe.

        :param current: current level in A
        :type  current: float
        :return: evaluation outcome of the current level
        :rtype: EvaluationOutcome
        """
        p_cond = float(transistor_conduction_loss(current, self.device_family, self.params.rds_on_ohms, self.params.vce_sat))
        p_sw = float(transistor_switch_loss(current, self.params.max_voltage, self.params.rise_time,
                                            self.params.fall_time, self.params.switching_frequency))

        p_total = p_cond + p_sw
        final_temperature = float(junction_temperature(p_total, self.params.ambient_temperature, self.params.total_rth))

        failure_reason, details = self._classify_failure(current, final_temperature, p_total)

        # The evaluation mode gates the verdict only, not the classification message
        match self.params.simulation_mode:
            case EvaluationMode.temperature_only:
                is_safe = final_temperature <= self.params.max_temperature
            case EvaluationMode.budget_only:
                is_safe = p_total <= self.params.effective_cooling_budget
            case EvaluationMode.first_to_fail:
                is_safe = failure_reason is None

        return EvaluationOutcome(
            is_safe=is_safe,
            failure_reason=failure_reason,
            details=details,
            final_temperature=final_temperature,
            power_dissipation=PowerBreakdown(total=p_total, conduction=p_cond, switching=p_sw))

    def _classify_failure(self, current: float, final_temperature: float, p_total: float) -> tuple[FailureCategory | None, str]:
        """
        Determine the failure category and the detail text in fixed priority.

        :param current: current level in A
        :type  current: float
        :param final_temperature: junction temperature in °C
        :type  final_temperature: float
        :param p_total: total power loss in W
        :type  p_total: float
        :return: failure category (None if no limit is exceeded) and detail text
        :rtype: tuple[FailureCategory | None, str]
        """
        if final_temperature > self.params.max_temperature:
            return (FailureCategory.thermal,
                    f"Exceeded max junction temp of {format_rating(self.params.max_temperature)}°C. "
                    f"Reached {final_temperature:.2f}°C.")

        if self.params.power_dissipation is not None and p_total > self.params.power_dissipation:
            return (FailureCategory.power_dissipation,
                    f"Exceeded component's max power dissipation of {format_rating(self.params.power_dissipation)}W. "
                    f"Reached {p_total:.2f}W.")

        if self.params.simulation_mode != EvaluationMode.temperature_only and p_total > self.params.effective_cooling_budget:
            return (FailureCategory.cooling_budget,
                    f"Exceeded cooling budget of {format_rating(self.params.effective_cooling_budget)}W. "
                    f"Reached {p_total:.2f}W.")

        if current > self.params.max_current:
            return FailureCategory.current, f"Exceeded max current rating of {self.params.max_current:.2f}A."

        return None, SAFE_DETAILS

    def create_curve_point(self, current: float) -> CurvePoint:
        """
        Evaluate a current level and derive the progress and limit value for the derating chart.

        :param current: current level in A
        :type  current: float
        :return: point of the derating curve
        :rtype: CurvePoint
        """
        check_result = self.evaluate_current(current)
        p_total = check_result.power_dissipation.total

        # Ratios follow IEEE semantics: a zero limit leads to inf or nan, which are ignored by fmax/fmin
        with np.errstate(divide="ignore", invalid="ignore"):
            match self.params.simulation_mode:
                case EvaluationMode.temperature_only:
                    progress = np.float64(check_result.final_temperature) / self.params.max_temperature * 100.0
                    limit_value = self.params.max_temperature
                case EvaluationMode.budget_only:
                    progress = np.float64(p_total) / self.params.effective_cooling_budget * 100.0
                    limit_value = self.params.effective_cooling_budget
                case EvaluationMode.first_to_fail:
                    temperature_progress = np.float64(check_result.final_temperature) / self.params.max_temperature * 100.0
                    if self.params.power_dissipation is not None:
                        power_progress = np.float64(p_total) / self.params.power_dissipation * 100.0
                    else:
                        power_progress = np.float64(0.0)
                    budget_progress = np.float64(p_total) / self.params.effective_cooling_budget * 100.0
                    current_progress = np.float64(current) / self.params.max_current * 100.0

                    progress = np.fmax(np.fmax(np.fmax(temperature_progress, power_progress), budget_progress), current_progress)
                    limit_value = NORMALIZED_LIMIT_VALUE

        return CurvePoint(
            current=current,
            temperature=check_result.final_temperature,
            power_loss=p_total,
            conduction_loss=check_result.power_dissipation.conduction,
            switching_loss=check_result.power_dissipation.switching,
            progress=float(np.fmin(progress, MAX_PROGRESS)),
            limit_value=limit_value,
            check_result=check_result)

    def _safe_summary(self, max_safe_current: float, data_points: list[CurvePoint]) -> SimulationSummary:
        """
        Build the summary from a standalone evaluation of the maximum safe current.

        :param max_safe_current: maximum safe current in A
        :type  max_safe_current: float
        :param data_points: derating curve
        :type  data_points: list[CurvePoint]
        :return: summary without failure reason
        :rtype: SimulationSummary
        """
        final_check = self.evaluate_current(max_safe_current)
        return SimulationSummary(
            status=STATUS_SUCCESS,
            max_safe_current=max_safe_current,
            failure_reason=None,
            details=f"Device operates safely up to {max_safe_current:.2f}A within all limits.",
            final_temperature=final_check.final_temperature,
            power_dissipation=final_check.power_dissipation,
            data_points=data_points)

    def run_linear_sweep(self) -> SimulationSummary:
        """
        Sweep the current from 0 to 1.2 times the maximum current and stop at the first unsafe point.

        :return: simulation summary
        :rtype: SimulationSummary
        """
        max_current_range = self.params.max_current * LINEAR_SWEEP_RANGE_FACTOR
        current_step = max_current_range / self.params.precision_steps
        max_safe_current = 0.0
        data_points: list[CurvePoint] = []

        for step_index in range(self.params.precision_steps + 1):
            current = step_index * current_step
            data_point = self.create_curve_point(current)
            data_points.append(data_point)
            logger.debug(f"Linear sweep: I={current:.3f}A, T={data_point.temperature:.2f}°C, "
                         f"P={data_point.power_loss:.3f}W, safe={data_point.check_result.is_safe}")

            if not data_point.check_result.is_safe:
                logger.info(f"Linear sweep stopped after {len(data_points)} points. "
                            f"Maximum safe current: {max_safe_current:.2f}A ({data_point.check_result.details})")
                return SimulationSummary(
                    status=STATUS_SUCCESS,
                    max_safe_current=max_safe_current,
                    failure_reason=data_point.check_result.failure_reason,
                    details=data_point.check_result.details,
                    final_temperature=data_point.check_result.final_temperature,
                    power_dissipation=data_point.check_result.power_dissipation,
                    data_points=data_points)

            max_safe_current = current

        logger.info(f"Linear sweep completed {len(data_points)} points without failure. "
                    f"Maximum safe current: {max_safe_current:.2f}A")
        return self._safe_summary(max_safe_current, data_points)

    def run_binary_search(self) -> SimulationSummary:
        """
        Bisect the current between 0 and 1.5 times the maximum current.

        All evaluated points are kept in the curve, sorted by the current afterward.
        The summary never reports a failure reason.

        :return: simulation summary
        :rtype: SimulationSummary
        """
        low = 0.0
        high = self.params.max_current * BINARY_SEARCH_RANGE_FACTOR
        max_safe_current = 0.0
        data_points: list[CurvePoint] = []

        search_span = high - low
        max_iterations = int(math.log2(search_span) * BINARY_SEARCH_ITERATION_FACTOR) if search_span > 0 else 0

        for _ in range(max_iterations):
            if high - low < BINARY_SEARCH_RESOLUTION:
                break

            mid = (low + high) / 2.0
            if mid <= 0.0:
                break

            data_point = self.create_curve_point(mid)
            data_points.append(data_point)
            logger.debug(f"Binary search: I={mid:.3f}A, T={data_point.temperature:.2f}°C, "
                         f"P={data_point.power_loss:.3f}W, safe={data_point.check_result.is_safe}")

            if data_point.check_result.is_safe:
                max_safe_current = mid
                low = mid
            else:
                high = mid

        data_points.sort(key=lambda point: point.current)

        logger.info(f"Binary search evaluated {len(data_points)} points (budget {max_iterations}). "
                    f"Maximum safe current: {max_safe_current:.2f}A")
        return self._safe_summary(max_safe_current, data_points)

    def run(self) -> SimulationSummary:
        """
        Run the simulation with the configured search algorithm.

        :return: simulation summary
        :rtype: SimulationSummary
        """
        match self.params.simulation_algorithm:
            case SearchAlgorithm.linear_sweep:
                return self.run_linear_sweep()
            case SearchAlgorithm.binary_search:
                return self.run_binary_search()

        raise ValueError(f"Unknown search algorithm {self.params.simulation_algorithm}.")


def run(params: SimulationParameters) -> SimulationSummary:
    """
    Run a derating simulation.

    :param params: simulation parameters
    :type  params: SimulationParameters
    :return: simulation summary
    :rtype: SimulationSummary
    """
    return DeratingEngine(params).run()
