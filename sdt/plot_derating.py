"""Plot the derating curve of a simulation summary."""
# python libraries
import logging
import os

# 3rd party libraries
from matplotlib import pyplot as plt
import numpy as np
from numpy.typing import NDArray

# own libraries
from sdt.derating_dtos import SimulationParameters, SimulationSummary
from sdt.derating_enums import EvaluationMode

# configure root logger
logger = logging.getLogger(__name__)

PROGRESS_TITLE_DICT: dict[EvaluationMode, str] = {
    EvaluationMode.first_to_fail: "Progress to first limit",
    EvaluationMode.temperature_only: "Progress to temperature limit",
    EvaluationMode.budget_only: "Progress to budget limit"}

def curve_to_arrays(summary: SimulationSummary) -> dict[str, NDArray]:
    """
    Convert the derating curve of a summary to numpy arrays.

    :param summary: simulation summary
    :type summary: SimulationSummary
    :return: arrays for current, temperature, power_loss, conduction_loss, switching_loss, progress and is_safe
    :rtype: dict[str, np.ndarray]
    """
    data_points = summary.data_points
    return {
        "current": np.array([point.current for point in data_points], dtype=np.float64),
        "temperature": np.array([point.temperature for point in data_points], dtype=np.float64),
        "power_loss": np.array([point.power_loss for point in data_points], dtype=np.float64),
        "conduction_loss": np.array([point.conduction_loss for point in data_points], dtype=np.float64),
        "switching_loss": np.array([point.switching_loss for point in data_points], dtype=np.float64),
        "progress": np.array([point.progress for point in data_points], dtype=np.float64),
        "is_safe": np.array([point.check_result.is_safe for point in data_points], dtype=bool)}


def plot_derating_curve(summary: SimulationSummary, params: SimulationParameters, file_path: str | None = None,
                        show: bool = False) -> plt.Figure:
    """
    Plot junction temperature, power loss and progress over the current.

    :param summary: simulation summary
    :type summary: SimulationSummary
    :param params: simulation parameters of the summary
    :type params: SimulationParameters
    :param file_path: file name to store the figure. None: figure is not stored
    :type file_path: str | None
    :param show: True to show the figure
    :type show: bool
    :return: matplotlib figure
    :rtype: matplotlib.pyplot.Figure
    """
    curve = curve_to_arrays(summary)

    fig, (ax_temperature, ax_progress) = plt.subplots(2, 1, sharex=True, figsize=(8, 7))
    fig.suptitle(f"Derating curve {params.transistor_type}")

    # Temperature (left axis) and power loss (right axis)
    ax_temperature.plot(curve["current"], curve["temperature"], color="tab:blue", label="Junction temperature")
    ax_temperature.axhline(params.max_temperature, color="tab:red", linestyle="--", label="Max. junction temperature")
    ax_temperature.axvline(summary.max_safe_current, color="tab:green", linestyle=":",
                           label=f"Max. safe current {summary.max_safe_current:.2f} A")
    ax_temperature.set_ylabel("T_j / °C")
    ax_temperature.grid()

    ax_power = ax_temperature.twinx()
    ax_power.plot(curve["current"], curve["power_loss"], color="tab:orange", label="Total loss")
    ax_power.plot(curve["current"], curve["conduction_loss"], color="tab:orange", linestyle="--", alpha=0.6, label="Conduction loss")
    ax_power.plot(curve["current"], curve["switching_loss"], color="tab:orange", linestyle=":", alpha=0.6, label="Switching loss")
    ax_power.set_ylabel("P / W")

    handles, labels = ax_temperature.get_legend_handles_labels()
    power_handles, power_labels = ax_power.get_legend_handles_labels()
    ax_temperature.legend(handles + power_handles, labels + power_labels, loc="upper left", fontsize="small")

    # Progress with the unsafe points marked
    unsafe_mask = np.logical_not(curve["is_safe"])
    ax_progress.plot(curve["current"], curve["progress"], color="tab:blue")
    ax_progress.scatter(curve["current"][unsafe_mask], curve["progress"][unsafe_mask], color="tab:red", marker="x", label="Unsafe")
    ax_progress.axhline(100.0, color="tab:red", linestyle="--")
    ax_progress.set_title(PROGRESS_TITLE_DICT[params.simulation_mode])
    ax_progress.set_xlabel("I / A")
    ax_progress.set_ylabel("Progress / %")
    ax_progress.set_ylim(bottom=0, top=105)
    ax_progress.grid()
    if np.any(unsafe_mask):
        ax_progress.legend(loc="upper left", fontsize="small")

    fig.tight_layout()

    if file_path is not None:
        directory = os.path.dirname(file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        fig.savefig(file_path)
        logger.info(f"Derating curve is stored in {file_path}.")

    if show:
        plt.show()

    return fig
