"""Drag and stability models for model rockets.

The drag input from the part catalog is a design score, not a measured
coefficient. It is scaled to an effective Cd and raised at low Reynolds
number, where a purely quadratic model would give unrealistically little
drag for a slow, thin rocket:

- Laminar (Re < 1e3): Cd x 1.5
- Transitional (Re < 1e5): Cd x 1.2
- Turbulent: Cd unchanged

These corrections are tuned for plausible flights, not derived from
wind-tunnel data.

Example:
    >>> from modelrocket.vehicle import DragModel
    >>>
    >>> aero = DragModel(total_drag=1.4, body_diameter=0.024)
    >>> fz, fx = aero.force_components(20.0, 0.5, density=1.2)
"""

import math
from dataclasses import dataclass

from beartype import beartype

from modelrocket.vehicle.configuration import RocketConfiguration, frontal_area

# =============================================================================
# Constants
# =============================================================================

KINEMATIC_VISCOSITY = 1.5e-5  # Air near sea level [m^2/s]
DRAG_INPUT_SCALE = 0.01  # Catalog drag score -> effective Cd
MIN_DRAG_COEFFICIENT = 0.001

LAMINAR_REYNOLDS = 1e3
TRANSITION_REYNOLDS = 1e5
LAMINAR_FACTOR = 1.5
TRANSITION_FACTOR = 1.2

MIN_SPEED = 0.1  # Floor for drag-direction decomposition [m/s]
MIN_REYNOLDS = 0.1

# Stability score above which the airframe flies clean
STABILITY_THRESHOLD = 1.5
UNSTABLE_FACTOR = 0.5
MIN_STABILITY_FACTOR = 0.1


# =============================================================================
# Drag
# =============================================================================


@beartype
@dataclass(frozen=True)
class DragModel:
    """Quadratic drag with a Reynolds-number correction.

    Attributes:
        total_drag: Catalog drag score [-]
        body_diameter: Body tube diameter [m], also the Reynolds length
    """
    total_drag: float | int
    body_diameter: float | int

    @classmethod
    def from_configuration(cls, rocket: RocketConfiguration) -> "DragModel":
        return cls(total_drag=rocket.total_drag, body_diameter=rocket.body_diameter)

    @property
    def reference_area(self) -> float:
        """Frontal area [m^2]."""
        return frontal_area(self.body_diameter)

    @property
    def base_coefficient(self) -> float:
        return max(self.total_drag * DRAG_INPUT_SCALE, MIN_DRAG_COEFFICIENT)

    def reynolds_number(self, speed: float | int) -> float:
        """Reynolds number based on body diameter."""
        return max(abs(speed) * self.body_diameter / KINEMATIC_VISCOSITY, MIN_REYNOLDS)

    def drag_coefficient(self, speed: float | int) -> float:
        """Effective Cd at the given airspeed [m/s]."""
        reynolds = self.reynolds_number(speed)
        cd = self.base_coefficient
        if reynolds < LAMINAR_REYNOLDS:
            cd *= LAMINAR_FACTOR
        elif reynolds < TRANSITION_REYNOLDS:
            cd *= TRANSITION_FACTOR
        return cd

    def drag_force(self, speed: float | int, density: float | int) -> float:
        """Drag magnitude [N]."""
        return 0.5 * density * speed**2 * self.drag_coefficient(speed) * self.reference_area

    def force_components(
        self,
        vertical_velocity: float | int,
        horizontal_velocity: float | int,
        density: float | int,
    ) -> tuple[float, float]:
        """Drag components (vertical, horizontal) [N], opposing the velocity.

        Each component is the drag magnitude times that velocity component's
        share of the speed; the speed is floored so a rocket at rest gets
        zero drag rather than 0/0.
        """
        speed = math.hypot(vertical_velocity, horizontal_velocity)
        drag = self.drag_force(speed, density)
        denominator = max(speed, MIN_SPEED)
        return (
            -drag * vertical_velocity / denominator,
            -drag * horizontal_velocity / denominator,
        )


# =============================================================================
# Stability
# =============================================================================


@beartype
def stability_factor(stability: float | int) -> float:
    """Scale applied to net forces for a given stability score.

    A stable airframe (score above 1.5) keeps all of its net force; a
    marginal one loses half of it to coning and wobble. Always in (0, 1].
    """
    factor = 1.0 if stability > STABILITY_THRESHOLD else UNSTABLE_FACTOR
    return max(factor, MIN_STABILITY_FACTOR)
