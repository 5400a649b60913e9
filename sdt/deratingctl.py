"""Main control program to run a derating study from a toml configuration."""
# python libraries
import configparser
import json
import logging
import logging.config
import os
import sys
import tomllib
from typing import Any

# 3rd party libraries
from matplotlib import pyplot as plt

# own libraries
import sdt.toml_checker as tc
from sdt.derating_dtos import SimulationParameters, SimulationSummary, CoolingMethod
from sdt.derating_enums import EvaluationMode, SearchAlgorithm
from sdt.generate_toml import check_for_missing_toml_files, generate_logging_config, DERATING_CONF_FILE, LOGGING_CONF_FILE
from sdt.parameter_check import ParameterCheck
from sdt.plot_derating import plot_derating_curve
from sdt.simulation_interface import run_simulation, summary_to_dict, parameters_to_dict

logger = logging.getLogger(__name__)

class DeratingMainCtl:
    """Main class to control a derating study."""

    @staticmethod
    def load_toml_file(toml_file: str) -> tuple[bool, dict[str, Any]]:
        """
        Load the toml configuration data to a dictionary.

        :param toml_file : File name of the toml-file
        :type  toml_file : str
        :return: True, if the data could be loaded successful and the loaded dictionary
        :rtype: bool, dict
        """
        # return value initialization to false and toml Data to empty
        is_toml_file_existing = False
        config: dict[str, Any] = {}

        # Separate filename and path
        toml_file_directory = os.path.dirname(toml_file)

        # check path
        if os.path.exists(toml_file_directory) or toml_file_directory == "":
            # check filename
            if os.path.isfile(toml_file):
                with open(toml_file, "rb") as f:
                    try:
                        config = tomllib.load(f)
                        is_toml_file_existing = True
                    except tomllib.TOMLDecodeError as e:
                        # File is not conform to toml-format
                        logger.warning(f"toml-file is not conform to toml-format:\n{e}")
            else:
                logger.warning(f"File {toml_file} does not exists!")
        else:
            logger.warning(f"Path {toml_file_directory} does not exists!")

        return is_toml_file_existing, config

    @staticmethod
    def load_generate_logging_config(logging_config_file: str) -> None:
        """
        Read the logging configuration file and configure the logger.

        Generate a default logging configuration file in case it does not exist.

        :param logging_config_file: File name of the logging configuration file
        :type logging_config_file: str
        """
        # Separate filename and path
        logging_conf_file_directory = os.path.dirname(logging_config_file)

        # check path
        if os.path.exists(logging_conf_file_directory) or logging_conf_file_directory == "":
            # check filename
            if os.path.isfile(logging_config_file):
                try:
                    logging.config.fileConfig(logging_config_file, disable_existing_loggers=False)
                except (KeyError, ValueError, RuntimeError, configparser.Error):
                    logger.warning(f"Logging configuration file {logging_config_file} is inconsistent.")
                else:
                    logger.info(f"Found existing logging configuration {logging_config_file}.")
            else:
                logger.info(f"Generate a new {LOGGING_CONF_FILE} file.")
                generate_logging_config(logging_conf_file_directory)
                # Reset to standard file name
                logging_config_file = os.path.join(logging_conf_file_directory, LOGGING_CONF_FILE)
                if os.path.isfile(logging_config_file):
                    logging.config.fileConfig(logging_config_file, disable_existing_loggers=False)
                else:
                    raise ValueError(f"{LOGGING_CONF_FILE} can not be generated.")
        else:
            logger.warning(f"Path {logging_conf_file_directory} does not exists!")

    @staticmethod
    def select_cooling_method(toml_study: tc.TomlDeratingStudy) -> CoolingMethod:
        """
        Select the configured cooling method by its name.

        :param toml_study: derating study configuration
        :type toml_study: tc.TomlDeratingStudy
        :return: selected cooling method
        :rtype: CoolingMethod
        """
        cooling_method_name = toml_study.operating_conditions.cooling_method
        for cooling_method in toml_study.cooling_methods:
            if cooling_method.name == cooling_method_name:
                return CoolingMethod(name=cooling_method.name, thermal_resistance=cooling_method.thermal_resistance,
                                     cooling_budget=cooling_method.cooling_budget)

        available_name_list = [cooling_method.name for cooling_method in toml_study.cooling_methods]
        raise ValueError(f"Cooling method '{cooling_method_name}' is not defined. Available methods: {available_name_list}")

    @staticmethod
    def assemble_simulation_parameters(toml_study: tc.TomlDeratingStudy) -> SimulationParameters:
        """
        Assemble the simulation parameters from the study configuration.

        The total thermal resistance is the sum of the junction to case resistance and the cooling method resistance.
        The user cooling budget is only effective in budget mode, otherwise the cooling method budget is used.

        :param toml_study: derating study configuration
        :type toml_study: tc.TomlDeratingStudy
        :return: simulation parameters
        :rtype: SimulationParameters
        """
        device = toml_study.device
        simulation = toml_study.simulation
        cooling_method = DeratingMainCtl.select_cooling_method(toml_study)
        simulation_mode = EvaluationMode(simulation.simulation_mode)

        if simulation_mode == EvaluationMode.budget_only and simulation.cooling_budget:
            effective_cooling_budget = simulation.cooling_budget
        else:
            effective_cooling_budget = cooling_method.cooling_budget

        return SimulationParameters(
            max_current=device.max_current,
            max_voltage=device.max_voltage,
            power_dissipation=device.power_dissipation,
            rth_jc=device.rth_jc,
            rise_time=device.rise_time,
            fall_time=device.fall_time,
            switching_frequency=toml_study.operating_conditions.switching_frequency,
            max_temperature=device.max_temperature,
            ambient_temperature=toml_study.operating_conditions.ambient_temperature,
            total_rth=device.rth_jc + cooling_method.thermal_resistance,
            transistor_type=device.transistor_type,
            # mOhm -> Ohm
            rds_on_ohms=(device.rds_on or 0.0) / 1000,
            vce_sat=device.vce_sat,
            simulation_mode=simulation_mode,
            cooling_budget=simulation.cooling_budget,
            simulation_algorithm=SearchAlgorithm(simulation.simulation_algorithm),
            precision_steps=simulation.precision_steps,
            effective_cooling_budget=effective_cooling_budget)

    @staticmethod
    def save_summary(summary: SimulationSummary, params: SimulationParameters, file_path: str) -> None:
        """
        Store parameters and summary as camelCase JSON file.

        :param summary: simulation summary
        :type summary: SimulationSummary
        :param params: simulation parameters
        :type params: SimulationParameters
        :param file_path: file name of the JSON file
        :type file_path: str
        """
        result_dict = {"params": parameters_to_dict(params), "result": summary_to_dict(summary)}

        with open(file_path, 'w', encoding='utf8') as json_file:
            json.dump(result_dict, json_file, ensure_ascii=False, indent=4)

        logger.info(f"Summary is stored in {file_path}.")

    def run_derating_from_toml_configuration(self, workspace_path: str, is_plot: bool = True) -> SimulationSummary:
        """
        Perform the derating study.

        This function corresponds to 'main', which is called after the instance of the class is created.

        :param workspace_path: Path to the folder with the configuration files. Empty string: 'workspace' beside the package
        :type  workspace_path: str
        :param is_plot: True to store the derating chart
        :type  is_plot: bool
        :return: simulation summary
        :rtype: SimulationSummary
        """
        # Check if workspace path is not provided by argument
        if workspace_path == "":
            workspace_path = os.path.dirname(os.path.abspath(__file__))
            workspace_path = os.path.join(os.path.dirname(workspace_path), "workspace")

        workspace_path = os.path.abspath(workspace_path)

        # Logging configuration and default study configuration
        self.load_generate_logging_config(os.path.join(workspace_path, LOGGING_CONF_FILE))
        check_for_missing_toml_files(workspace_path)

        toml_file = os.path.join(workspace_path, DERATING_CONF_FILE)
        is_loaded, dict_study = self.load_toml_file(toml_file)
        if not is_loaded:
            raise ValueError(f"Derating configuration {toml_file} can not be loaded!")

        # Verify toml data and transfer to class
        toml_study = tc.TomlDeratingStudy(**dict_study)
        params = self.assemble_simulation_parameters(toml_study)

        is_consistent, inconsistency_report = ParameterCheck.check_simulation_parameters(params)
        if not is_consistent:
            raise ValueError(f"Derating configuration {toml_file} is inconsistent:\n{inconsistency_report}")

        logger.info(f"Start derating study '{toml_study.general.study_name}' "
                    f"({params.simulation_mode.value}, {params.simulation_algorithm.value}).")
        is_successful, result = run_simulation(params)
        if not is_successful or isinstance(result, str):
            raise ValueError(f"Derating simulation failed: {result}")

        # Store the results
        study_directory = os.path.join(workspace_path, toml_study.general.project_directory, toml_study.general.study_name)
        os.makedirs(study_directory, exist_ok=True)
        self.save_summary(result, params, os.path.join(study_directory, f"{toml_study.general.study_name}_summary.json"))

        if is_plot:
            fig = plot_derating_curve(result, params, os.path.join(study_directory, f"{toml_study.general.study_name}_derating.png"))
            plt.close(fig)

        logger.info(result.details)
        return result


# Program flow control of the derating study
if __name__ == "__main__":
    # Variable declaration
    arg1 = ""

    # Create a main control instance
    derating_mctl = DeratingMainCtl()
    # Read the command line
    arguments = sys.argv

    # Check on argument, which corresponds to the workspace file location
    if len(arguments) > 1:
        arg1 = os.path.abspath(arguments[1])
        if not os.path.exists(arg1):
            print(f"Provided argument {arguments[1]} does not exist. A new workspace is created there.")

    # Execute program
    summary_result = derating_mctl.run_derating_from_toml_configuration(arg1)
    print(f"Maximum safe current: {summary_result.max_safe_current:.2f} A")
    print(summary_result.details)
