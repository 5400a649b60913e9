"""Generate default toml and logging configuration files."""
# python libraries
import os

DERATING_CONF_FILE: str = "DeratingConf.toml"
LOGGING_CONF_FILE: str = "logging.conf"

def check_for_missing_toml_files(working_directory: str) -> None:
    """
    Check for missing toml default files. Generate them, if missing.

    :param working_directory: working directory
    :type working_directory: str
    """
    if not os.path.exists(working_directory):
        os.makedirs(working_directory)
    if not os.path.isfile(os.path.join(working_directory, DERATING_CONF_FILE)):
        generate_derating_toml(working_directory)


def generate_derating_toml(working_directory: str) -> None:
    """
    Generate the default DeratingConf.toml file.

    :param working_directory: working directory
    :type working_directory: str
    """
    toml_data = f'''
    [general]
        project_directory = "{working_directory.replace(os.sep, "/")}"
        study_name = "derating_study"

    [device]
        transistor_type = "MOSFET (N-Channel)"
        max_current = 49.0          # A
        max_voltage = 55.0          # V
        power_dissipation = 94.0    # W
        rth_jc = 1.0                # °C/W
        rise_time = 60.0            # ns
        fall_time = 45.0            # ns
        max_temperature = 150.0     # °C
        rds_on = 17.5               # mOhm (MOSFET, GaN)
        # vce_sat = 1.8             # V (BJT, IGBT)

    [operating_conditions]
        switching_frequency = 100.0 # kHz
        ambient_temperature = 25.0  # °C
        cooling_method = "liquid_cooling"

    [simulation]
        simulation_mode = "ftf"              # (ftf, temp, budget)
        simulation_algorithm = "iterative"   # (iterative, binary)
        precision_steps = 200                # 10...500, linear sweep only
        # cooling_budget = 150.0             # W, overrides the cooling method budget in budget mode

    [[cooling_methods]]
        name = "passive_heat_sink"
        thermal_resistance = 3.0    # °C/W case to ambient
        cooling_budget = 40.0       # W

    [[cooling_methods]]
        name = "forced_air"
        thermal_resistance = 1.0
        cooling_budget = 100.0

    [[cooling_methods]]
        name = "liquid_cooling"
        thermal_resistance = 0.5
        cooling_budget = 250.0
    '''
    with open(os.path.join(working_directory, DERATING_CONF_FILE), 'w', encoding='utf8') as output:
        output.write(toml_data)


def generate_logging_config(working_directory: str) -> None:
    """
    Generate the default logging.conf file.

    :param working_directory: working directory
    :type working_directory: str
    """
    logging_data = '''[loggers]
keys=root,sdt

[handlers]
keys=consoleHandler

[formatters]
keys=simpleFormatter

[logger_root]
level=WARNING
handlers=consoleHandler

[logger_sdt]
level=INFO
handlers=
qualname=sdt
propagate=1

[handler_consoleHandler]
class=StreamHandler
level=DEBUG
formatter=simpleFormatter
args=(sys.stdout,)

[formatter_simpleFormatter]
format=%(asctime)s - %(name)s - %(levelname)s - %(message)s
'''
    if working_directory and not os.path.exists(working_directory):
        os.makedirs(working_directory)
    with open(os.path.join(working_directory, LOGGING_CONF_FILE), 'w', encoding='utf8') as output:
        output.write(logging_data)
