"""Constant lateral wind load.

Wind is modeled as a fixed-magnitude force from a single direction that is
drawn once at the start of a run and held for the whole flight. The force
is the dynamic pressure of the wind acting on a fraction of the body
cross-section, so it shrinks with air density as the rocket climbs.
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype

# Fraction of the frontal area loaded by a crosswind
WIND_AREA_FACTOR = 0.2


@beartype
@dataclass(frozen=True)
class Wind:
    """Run-fixed wind.

    Attributes:
        speed: Wind speed [m/s]
        direction: Direction angle [rad]; cos() loads the horizontal axis,
            sin() the vertical axis
    """
    speed: float = 0.0
    direction: float = 0.0

    @classmethod
    def random(cls, speed: float | int, rng: np.random.Generator) -> "Wind":
        """Draw a wind with a uniformly random direction."""
        return cls(speed=float(speed), direction=float(rng.uniform(0.0, 2.0 * np.pi)))

    @classmethod
    def calm(cls) -> "Wind":
        return cls(speed=0.0, direction=0.0)

    def force_magnitude(self, density: float, reference_area: float) -> float:
        """Wind force [N] on a body of the given frontal area."""
        return 0.5 * density * self.speed**2 * reference_area * WIND_AREA_FACTOR

    def force(self, density: float, reference_area: float) -> tuple[float, float]:
        """Wind force components (horizontal, vertical) [N]."""
        magnitude = self.force_magnitude(density, reference_area)
        return (
            magnitude * float(np.cos(self.direction)),
            magnitude * float(np.sin(self.direction)),
        )
