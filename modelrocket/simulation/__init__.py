"""Simulation module for model rocket flights.

Provides the step-driven flight integrator, the state and sample types it
produces, and flight records with summary statistics.

Example:
    >>> from modelrocket.simulation import simulate_flight, SimConfig
    >>>
    >>> record = simulate_flight(rocket, SimConfig(wind_speed=0.0))
    >>> summary = record.summary()
    >>> print(summary.max_altitude, summary.performance_rating.value)
"""

from modelrocket.simulation.integrator import (
    FlightIntegrator,
    FlightModel,
    NetForces,
    SimConfig,
    StepResult,
    advance,
    launch_sample,
    net_forces,
    simulate_flight,
)
from modelrocket.simulation.results import (
    FlightRecord,
    FlightSummary,
    PerformanceRating,
    format_flight_summary,
    rate_altitude,
    rate_thrust_to_weight,
)
from modelrocket.simulation.state import (
    SimulationSample,
    SimulationState,
    TerminationReason,
)

__all__ = [
    # Integrator
    "FlightIntegrator",
    "FlightModel",
    "NetForces",
    "SimConfig",
    "StepResult",
    "advance",
    "launch_sample",
    "net_forces",
    "simulate_flight",
    # State
    "SimulationState",
    "SimulationSample",
    "TerminationReason",
    # Results
    "FlightRecord",
    "FlightSummary",
    "PerformanceRating",
    "format_flight_summary",
    "rate_altitude",
    "rate_thrust_to_weight",
]
