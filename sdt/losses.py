"""Calculate the transistor losses and the resulting junction temperature."""

# 3rd party libraries
import numpy as np
from numpy.typing import NDArray

# own libraries
from sdt.derating_enums import DeviceFamily

# Conduction share of a switching period
CONDUCTION_DUTY_FACTOR: float = 0.5

def transistor_conduction_loss(current: float | NDArray[np.float64], device_family: DeviceFamily,
                               rds_on_ohms: float, vce_sat: float | None) -> float | NDArray[np.float64]:
    """
    Calculate the transistor conduction losses.

    Resistive devices (MOSFET, GaN) use the on-resistance, all other devices the saturation voltage.

    :param current: transistor current in A
    :type current: float | np.ndarray[np.float64]
    :param device_family: device family of the transistor
    :type device_family: DeviceFamily
    :param rds_on_ohms: on-resistance in Ohm
    :type rds_on_ohms: float
    :param vce_sat: saturation voltage in V. None is treated as 0 V.
    :type vce_sat: float | None
    :return: transistor conduction loss in W
    :rtype: float | np.ndarray[np.float64]
    """
    if device_family.is_resistive:
        return current ** 2 * rds_on_ohms * CONDUCTION_DUTY_FACTOR

    v_sat = vce_sat if vce_sat is not None else 0.0
    return current * v_sat * CONDUCTION_DUTY_FACTOR


def transistor_switch_loss(current: float | NDArray[np.float64], max_voltage: float, rise_time: float,
                           fall_time: float, switching_frequency: float) -> float | NDArray[np.float64]:
    """
    Calculate the transistor switching losses by the linear overlap approximation.

    :param current: transistor current in A
    :type current: float | np.ndarray[np.float64]
    :param max_voltage: blocking voltage in V
    :type max_voltage: float
    :param rise_time: rise time in ns
    :type rise_time: float
    :param fall_time: fall time in ns
    :type fall_time: float
    :param switching_frequency: switching frequency in kHz
    :type switching_frequency: float
    :return: transistor switching loss in W
    :rtype: float | np.ndarray[np.float64]
    """
    # ns -> s
    t_rise_fall = (rise_time + fall_time) * 1e-9
    # kHz -> Hz
    f_s = switching_frequency * 1000.0

    # p_overlap = 1 / 2 * U_DS * I * (t_r + t_f) * f_s
    return 0.5 * max_voltage * current * t_rise_fall * f_s


def junction_temperature(p_total: float | NDArray[np.float64], ambient_temperature: float,
                         total_rth: float) -> float | NDArray[np.float64]:
    """
    Calculate the junction temperature.

    :param p_total: total power loss in W
    :type p_total: float | np.ndarray[np.float64]
    :param ambient_temperature: ambient temperature in °C
    :type ambient_temperature: float
    :param total_rth: junction to ambient thermal resistance in °C/W
    :type total_rth: float
    :return: junction temperature in °C
    :rtype: float | np.ndarray[np.float64]
    """
    return ambient_temperature + p_total * total_rth
