"""Flight state, recorded samples, and termination reasons.

The state is the planar point-mass state of one run:

- Altitude / vertical velocity: up is positive, ground at 0
- Horizontal position / velocity: downrange drift
- Mass: current vehicle mass
- Step: integer step count, so time = step * dt without drift

States are immutable; each integration step produces a new one. Samples
are what the run records for renderers and summaries.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from beartype import beartype


class TerminationReason(Enum):
    """Why a run stopped."""
    GROUND_COLLISION = "ground collision"
    APOGEE = "apogee reached"
    TIME_LIMIT = "time limit"


@beartype
@dataclass(frozen=True)
class SimulationState:
    """Point-mass flight state.

    Attributes:
        time: Time since ignition [s]
        altitude: Height above the pad [m]
        vertical_velocity: Upward velocity [m/s]
        horizontal_position: Downrange position [m]
        horizontal_velocity: Downrange velocity [m/s]
        mass: Current vehicle mass [kg]
        step: Number of integration steps taken
    """
    time: float
    altitude: float
    vertical_velocity: float
    horizontal_position: float
    horizontal_velocity: float
    mass: float
    step: int = 0

    @classmethod
    def on_pad(cls, mass: float | int) -> "SimulationState":
        """Rocket at rest on the pad at ignition."""
        return cls(
            time=0.0,
            altitude=0.0,
            vertical_velocity=0.0,
            horizontal_position=0.0,
            horizontal_velocity=0.0,
            mass=float(mass),
        )

    @property
    def speed(self) -> float:
        return float((self.vertical_velocity**2 + self.horizontal_velocity**2) ** 0.5)


class SimulationSample(NamedTuple):
    """One recorded point of a flight.

    Vertical velocity is reported clamped at zero; the descent is not part
    of the record.
    """
    time: float                   # [s]
    altitude: float               # [m]
    vertical_velocity: float      # [m/s], >= 0
    vertical_acceleration: float  # [m/s^2]
    horizontal_position: float    # [m]
    horizontal_velocity: float    # [m/s]
    mass: float                   # [kg]
    thrust: float                 # [N]
