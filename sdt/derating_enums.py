"""Enumerations for the derating simulation."""
import enum


class DeviceFamily(enum.Enum):
    """Enum for the supported power semiconductor families."""

    n_channel_mosfet = "N-Channel MOSFET"
    p_channel_mosfet = "P-Channel MOSFET"
    gan_fet = "GaN FET"
    npn_bjt = "NPN BJT"
    pnp_bjt = "PNP BJT"
    igbt = "IGBT"

    @property
    def is_resistive(self) -> bool:
        """
        Indicate, if the conduction loss is calculated by the on-resistance.

        :return: True for MOSFET and GaN devices, False for saturation voltage devices
        :rtype: bool
        """
        return self in (DeviceFamily.n_channel_mosfet, DeviceFamily.p_channel_mosfet, DeviceFamily.gan_fet)

    @staticmethod
    def from_label(type_label: str) -> "DeviceFamily":
        """
        Classify the free text device type label.

        The markers are checked case-sensitive in fixed order. Unknown labels fall back to the N-channel MOSFET.

        :param type_label: device type label, e.g. "MOSFET (N-Channel)"
        :type type_label: str
        :return: device family
        :rtype: DeviceFamily
        """
        for marker_list, device_family in _LABEL_MARKER_LIST:
            if all(marker in type_label for marker in marker_list):
                return device_family

        return DeviceFamily.n_channel_mosfet


# Ordered marker list (first match wins)
_LABEL_MARKER_LIST: list[tuple[tuple[str, ...], DeviceFamily]] = [
    (("MOSFET", "N-Channel"), DeviceFamily.n_channel_mosfet),
    (("MOSFET", "P-Channel"), DeviceFamily.p_channel_mosfet),
    (("GaN",), DeviceFamily.gan_fet),
    (("NPN",), DeviceFamily.npn_bjt),
    (("PNP",), DeviceFamily.pnp_bjt),
    (("IGBT",), DeviceFamily.igbt),
]


class EvaluationMode(enum.Enum):
    """Enum for the limits, which gate the safe/unsafe verdict."""

    # First limit to fail
    first_to_fail = "ftf"
    # Junction temperature only
    temperature_only = "temp"
    # Cooling budget only
    budget_only = "budget"


class SearchAlgorithm(enum.Enum):
    """Enum for the search strategy of the maximum safe current."""

    linear_sweep = "iterative"
    binary_search = "binary"


class FailureCategory(enum.Enum):
    """Enum for the failure classification message."""

    thermal = "Thermal"
    power_dissipation = "Power Dissipation"
    cooling_budget = "Cooling Budget"
    current = "Current"
