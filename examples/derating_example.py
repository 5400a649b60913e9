"""Example how to compare the cooling methods of a MOSFET with the derating engine."""
# python libraries
import dataclasses

# own libraries
import sdt

# 3rd party libraries

params = sdt.SimulationParameters(
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
    simulation_mode=sdt.EvaluationMode.first_to_fail,
    cooling_budget=None,
    simulation_algorithm=sdt.SearchAlgorithm.linear_sweep,
    precision_steps=200,
    effective_cooling_budget=250.0)

cooling_method_list = [sdt.CoolingMethod(name="passive_heat_sink", thermal_resistance=3.0, cooling_budget=40.0),
                       sdt.CoolingMethod(name="forced_air", thermal_resistance=1.0, cooling_budget=100.0),
                       sdt.CoolingMethod(name="liquid_cooling", thermal_resistance=0.5, cooling_budget=250.0)]

for cooling_method in cooling_method_list:
    cooling_params = dataclasses.replace(params, total_rth=params.rth_jc + cooling_method.thermal_resistance,
                                         effective_cooling_budget=cooling_method.cooling_budget)
    is_successful, summary = sdt.run_simulation(cooling_params)
    if is_successful and isinstance(summary, sdt.SimulationSummary):
        print(f"{cooling_method.name}: {summary.max_safe_current:.2f} A ({summary.details})")

# binary search for the liquid cooling
binary_params = dataclasses.replace(params, simulation_algorithm=sdt.SearchAlgorithm.binary_search)
summary = sdt.run(binary_params)
sdt.plot_derating_curve(summary, binary_params, show=True)
