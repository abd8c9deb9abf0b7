"""Modelrocket - Flight simulation for hobby model rockets.

This package assembles rockets from a catalog of hobby parts and flies
them with a step-driven point-mass integrator, producing flight records,
summaries and plots.

Example:
    >>> from modelrocket import RocketDesign, SimConfig, simulate_flight
    >>>
    >>> rocket = RocketDesign.default().to_configuration()
    >>> record = simulate_flight(rocket, SimConfig(wind_seed=7))
    >>> print(f"Apogee: {record.max_altitude:.1f} m")
"""

__version__ = "0.1.0"

# Environment
from modelrocket.environment import Atmosphere, AtmosphereResult, Wind

# Export
from modelrocket.export import (
    export_flight_to_csv,
    export_flight_to_json,
    load_flight_json,
)

# Plotting
from modelrocket.plotting import plot_flight_comparison, plot_flight_profile

# Simulation
from modelrocket.simulation import (
    FlightIntegrator,
    FlightRecord,
    FlightSummary,
    PerformanceRating,
    SimConfig,
    SimulationSample,
    SimulationState,
    StepResult,
    TerminationReason,
    advance,
    format_flight_summary,
    simulate_flight,
)

# Units
from modelrocket.units import (
    Quantity,
    grams,
    kilograms,
    meters,
    millimeters,
    newtons,
    seconds,
)

# Vehicle
from modelrocket.vehicle import (
    BodyTube,
    DragModel,
    InvalidConfigurationError,
    Motor,
    RocketConfiguration,
    RocketDesign,
    RocketPart,
    get_part,
    list_parts,
)

__all__ = [
    "__version__",
    # Environment
    "Atmosphere",
    "AtmosphereResult",
    "Wind",
    # Vehicle
    "RocketConfiguration",
    "InvalidConfigurationError",
    "Motor",
    "DragModel",
    "RocketPart",
    "BodyTube",
    "RocketDesign",
    "get_part",
    "list_parts",
    # Simulation
    "SimConfig",
    "SimulationState",
    "SimulationSample",
    "StepResult",
    "TerminationReason",
    "FlightIntegrator",
    "FlightRecord",
    "FlightSummary",
    "PerformanceRating",
    "advance",
    "simulate_flight",
    "format_flight_summary",
    # Export
    "export_flight_to_json",
    "export_flight_to_csv",
    "load_flight_json",
    # Plotting
    "plot_flight_profile",
    "plot_flight_comparison",
    # Units
    "Quantity",
    "grams",
    "kilograms",
    "meters",
    "millimeters",
    "newtons",
    "seconds",
]
