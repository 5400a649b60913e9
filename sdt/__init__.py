"""Init python files as modules."""
from sdt.derating_enums import *
from sdt.derating_dtos import *
from sdt.losses import *
from sdt.derating_engine import *
from sdt.simulation_interface import *
from sdt.parameter_check import *
from sdt.toml_checker import *
from sdt.generate_toml import *
from sdt.plot_derating import *
# main control class
from sdt.deratingctl import *
