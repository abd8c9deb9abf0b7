"""Step-driven flight integrator for model rockets.

Advances a single rigid body in the vertical plane with a semi-implicit
Euler scheme: velocities are updated from the net force first, then
positions from the new velocities.

Forces per step:
- Thrust: power-law taper from nominal thrust to zero at burnout
- Weight: current mass times gravity
- Drag: quadratic in airspeed, opposing the velocity vector
- Wind: run-fixed lateral load from one random direction

The net force is scaled by the stability factor before integration.

Architecture:
    advance(state, model, config) is a pure step function. FlightIntegrator
    owns one run and can be driven either in a tight loop (run()) or one
    step per externally driven tick (advance()), for example once per
    animation frame. Each run starts from a fresh state.

Example:
    >>> from modelrocket.simulation import FlightIntegrator, SimConfig
    >>> from modelrocket.vehicle import RocketConfiguration
    >>>
    >>> rocket = RocketConfiguration(
    ...     total_mass=0.069, thrust=2.5, total_drag=1.4,
    ...     body_diameter=0.024, stability=2.0,
    ... )
    >>> integrator = FlightIntegrator(rocket, SimConfig(wind_seed=42))
    >>>
    >>> while not integrator.finished:   # e.g. one call per frame
    ...     sample = integrator.advance()
    >>>
    >>> record = integrator.record()
    >>> print(f"Apogee: {record.max_altitude:.1f} m ({record.termination.value})")
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from beartype import beartype
from numba import njit

from modelrocket.environment.atmosphere import Atmosphere
from modelrocket.environment.wind import Wind
from modelrocket.simulation.results import FlightRecord
from modelrocket.simulation.state import (
    SimulationSample,
    SimulationState,
    TerminationReason,
)
from modelrocket.vehicle.aerodynamics import DragModel, stability_factor
from modelrocket.vehicle.configuration import RocketConfiguration
from modelrocket.vehicle.motor import Motor

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass
class SimConfig:
    """Simulation configuration.

    Attributes:
        dt: Integration time step [s]
        max_time: Safety cap on simulated time [s]
        max_speed: Velocity clamp for each axis [m/s]
        max_acceleration: Acceleration clamp for each axis [m/s^2]
        gravity: Gravitational acceleration [m/s^2]
        wind_speed: Wind speed, 0 for calm air [m/s]
        wind_direction: Fixed wind direction [rad]; random per run if None
        wind_seed: Seed for the wind direction draw; fresh entropy if None
    """
    dt: float | int = 0.01
    max_time: float | int = 30.0
    max_speed: float | int = 200.0
    max_acceleration: float | int = 1.0e4
    gravity: float | int = 9.81
    wind_speed: float | int = 5.0
    wind_direction: float | int | None = None
    wind_seed: int | None = None

    def __post_init__(self) -> None:
        if not self.dt > 0:
            raise ValueError(f"Time step must be positive, got {self.dt}")
        if not self.max_time >= self.dt:
            raise ValueError(
                f"Time limit must be at least one time step, got {self.max_time} s"
            )
        if not self.max_speed > 0:
            raise ValueError(f"Speed limit must be positive, got {self.max_speed}")
        if not self.max_acceleration > 0:
            raise ValueError(
                f"Acceleration limit must be positive, got {self.max_acceleration}"
            )
        if not self.wind_speed >= 0:
            raise ValueError(f"Wind speed must be non-negative, got {self.wind_speed}")

    def make_wind(self, rng: np.random.Generator) -> Wind:
        """Wind for one run."""
        if self.wind_speed == 0:
            return Wind.calm()
        if self.wind_direction is not None:
            return Wind(speed=float(self.wind_speed), direction=float(self.wind_direction))
        return Wind.random(self.wind_speed, rng)


# =============================================================================
# Flight Model
# =============================================================================


class FlightModel(NamedTuple):
    """Everything fixed for the duration of one run."""
    motor: Motor
    drag: DragModel
    wind: Wind
    stability_factor: float
    atmosphere: Atmosphere

    @classmethod
    def from_configuration(
        cls,
        rocket: RocketConfiguration,
        wind: Wind | None = None,
        atmosphere: Atmosphere | None = None,
    ) -> "FlightModel":
        return cls(
            motor=Motor.from_configuration(rocket),
            drag=DragModel.from_configuration(rocket),
            wind=wind or Wind.calm(),
            stability_factor=stability_factor(rocket.stability),
            atmosphere=atmosphere or Atmosphere(),
        )


class StepResult(NamedTuple):
    """Outcome of one integration step."""
    state: SimulationState
    sample: SimulationSample
    termination: TerminationReason | None


# =============================================================================
# Numba-Optimized Integration
# =============================================================================


@njit(cache=True)
def _bounded(value: float, limit: float) -> float:
    """Clamp to [-limit, limit]; NaN maps to zero."""
    if value != value:
        return 0.0
    if value > limit:
        return limit
    if value < -limit:
        return -limit
    return value


@njit(cache=True)
def _semi_implicit_euler_core(
    altitude: float, vertical_velocity: float,
    horizontal_position: float, horizontal_velocity: float,
    vertical_force: float, horizontal_force: float,
    mass: float,
    dt: float,
    max_speed: float, max_acceleration: float,
) -> tuple[float, ...]:
    """Numba-optimized semi-implicit Euler step."""
    az = _bounded(vertical_force / mass, max_acceleration)
    ax = _bounded(horizontal_force / mass, max_acceleration)

    vz = _bounded(vertical_velocity + az * dt, max_speed)
    vx = _bounded(horizontal_velocity + ax * dt, max_speed)

    return (
        altitude + vz * dt,
        vz,
        horizontal_position + vx * dt,
        vx,
        az,
        ax,
    )


# =============================================================================
# Step Function
# =============================================================================


class NetForces(NamedTuple):
    vertical: float    # [N]
    horizontal: float  # [N]
    thrust: float      # [N]
    mass: float        # [kg]


@beartype
def net_forces(
    state: SimulationState,
    model: FlightModel,
    gravity: float | int = 9.81,
) -> NetForces:
    """Net vertical and horizontal force on the rocket at ``state``."""
    density = model.atmosphere.density(state.altitude)
    thrust = model.motor.thrust(state.time)
    mass = model.motor.mass(state.time)

    drag_z, drag_x = model.drag.force_components(
        state.vertical_velocity, state.horizontal_velocity, density
    )
    wind_x, wind_z = model.wind.force(density, model.drag.reference_area)

    vertical = (thrust - mass * gravity + drag_z + wind_z) * model.stability_factor
    horizontal = (drag_x + wind_x) * model.stability_factor

    return NetForces(vertical=vertical, horizontal=horizontal, thrust=thrust, mass=mass)


@beartype
def launch_sample(
    state: SimulationState,
    model: FlightModel,
    config: SimConfig,
) -> SimulationSample:
    """Sample for ``state`` without stepping (the pad sample at ignition)."""
    forces = net_forces(state, model, config.gravity)
    return SimulationSample(
        time=state.time,
        altitude=state.altitude,
        vertical_velocity=max(state.vertical_velocity, 0.0),
        vertical_acceleration=float(
            _bounded(forces.vertical / forces.mass, float(config.max_acceleration))
        ),
        horizontal_position=state.horizontal_position,
        horizontal_velocity=state.horizontal_velocity,
        mass=state.mass,
        thrust=forces.thrust,
    )


@beartype
def advance(
    state: SimulationState,
    model: FlightModel,
    config: SimConfig,
) -> StepResult:
    """Advance one time step.

    Pure function: ``state`` is not modified. Termination is checked in
    priority order ground collision, apogee, time limit. On ground
    collision the altitude is clamped to zero and both velocities zeroed.

    Args:
        state: State at the start of the step
        model: Motor, drag, wind and atmosphere for this run
        config: Time step and limits

    Returns:
        StepResult with the new state, its sample, and the termination
        reason if this step ends the run
    """
    forces = net_forces(state, model, config.gravity)

    altitude, vz, x, vx, az, _ = _semi_implicit_euler_core(
        state.altitude, state.vertical_velocity,
        state.horizontal_position, state.horizontal_velocity,
        forces.vertical, forces.horizontal,
        forces.mass,
        float(config.dt),
        float(config.max_speed), float(config.max_acceleration),
    )

    step = state.step + 1
    time = step * float(config.dt)

    termination = None
    if altitude < 0.0:
        altitude, vz, vx = 0.0, 0.0, 0.0
        termination = TerminationReason.GROUND_COLLISION
    elif vz < 0.0 and altitude > 0.0:
        termination = TerminationReason.APOGEE
    elif time >= config.max_time:
        termination = TerminationReason.TIME_LIMIT

    new_state = SimulationState(
        time=time,
        altitude=float(altitude),
        vertical_velocity=float(vz),
        horizontal_position=float(x),
        horizontal_velocity=float(vx),
        mass=model.motor.mass(time),
        step=step,
    )
    sample = SimulationSample(
        time=time,
        altitude=new_state.altitude,
        vertical_velocity=max(new_state.vertical_velocity, 0.0),
        vertical_acceleration=float(az),
        horizontal_position=new_state.horizontal_position,
        horizontal_velocity=new_state.horizontal_velocity,
        mass=new_state.mass,
        thrust=forces.thrust,
    )

    return StepResult(state=new_state, sample=sample, termination=termination)


# =============================================================================
# Integrator
# =============================================================================


@beartype
@dataclass
class FlightIntegrator:
    """Owns one flight run.

    The configuration is validated on construction, before any step is
    taken. reset() starts a new run with a fresh state and a fresh sample
    list; records handed out earlier are never touched.

    Example:
        >>> integrator = FlightIntegrator(rocket)
        >>> record = integrator.run()
        >>> integrator.reset()          # launch again
        >>> second = integrator.run()
    """
    rocket: RocketConfiguration
    config: SimConfig = field(default_factory=SimConfig)

    # Internal
    model: FlightModel = field(init=False, repr=False)
    state: SimulationState = field(init=False, repr=False)
    termination: TerminationReason | None = field(default=None, init=False)
    _samples: list[SimulationSample] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the rocket and set up the first run.

        Raises:
            InvalidConfigurationError: If the rocket cannot be flown
        """
        self.rocket.validate()
        self.reset()

    def reset(self) -> None:
        """Start a new run on the pad."""
        rng = np.random.default_rng(self.config.wind_seed)
        wind = self.config.make_wind(rng)

        self.model = FlightModel.from_configuration(self.rocket, wind)
        self.state = SimulationState.on_pad(self.rocket.total_mass)
        self.termination = None
        self._samples = [launch_sample(self.state, self.model, self.config)]

        logger.debug(
            "Run reset: %s, wind %.1f m/s at %.0f deg",
            self.rocket.name or "rocket", wind.speed, np.degrees(wind.direction),
        )

    @property
    def finished(self) -> bool:
        return self.termination is not None

    @property
    def time(self) -> float:
        """Current simulation time [s]."""
        return self.state.time

    @property
    def altitude(self) -> float:
        """Current altitude [m]."""
        return self.state.altitude

    @property
    def samples(self) -> tuple[SimulationSample, ...]:
        """Samples recorded so far in this run."""
        return tuple(self._samples)

    def advance(self) -> SimulationSample:
        """Take one step and return its sample.

        Raises:
            RuntimeError: If the run has already terminated
        """
        if self.finished:
            raise RuntimeError(
                f"Flight already terminated ({self.termination.value}); call reset() first"
            )

        result = advance(self.state, self.model, self.config)
        self.state = result.state
        self._samples.append(result.sample)

        if result.termination is not None:
            self.termination = result.termination
            self._log_termination()

        return result.sample

    def run(self) -> FlightRecord:
        """Step until the run terminates and return its record."""
        while not self.finished:
            self.advance()
        return self.record()

    def record(self) -> FlightRecord:
        """Immutable record of the finished run.

        Raises:
            RuntimeError: If the run has not terminated yet
        """
        if self.termination is None:
            raise RuntimeError("Flight is still in progress; no record yet")
        return FlightRecord(
            samples=tuple(self._samples),
            termination=self.termination,
            rocket=self.rocket,
        )

    def _log_termination(self) -> None:
        max_altitude = max(s.altitude for s in self._samples)
        if self.termination is TerminationReason.TIME_LIMIT:
            logger.warning(
                "Simulation time limit reached: %.1f s (altitude %.1f m)",
                self.state.time, self.state.altitude,
            )
        else:
            logger.info(
                "Flight terminated by %s at t=%.2f s, max altitude %.1f m, %d samples",
                self.termination.value, self.state.time, max_altitude, len(self._samples),
            )


@beartype
def simulate_flight(
    rocket: RocketConfiguration,
    config: SimConfig | None = None,
) -> FlightRecord:
    """Fly ``rocket`` to termination.

    Raises:
        InvalidConfigurationError: If the rocket cannot be flown; no
            steps are taken
    """
    return FlightIntegrator(rocket, config or SimConfig()).run()
