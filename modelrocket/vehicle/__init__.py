"""Vehicle modeling for model rocket simulation.

Provides the rocket configuration, motor, drag and stability models, and
the part catalog used to assemble designs.

Example:
    >>> from modelrocket.vehicle import RocketConfiguration, Motor, DragModel
    >>>
    >>> rocket = RocketConfiguration(
    ...     total_mass=0.069,
    ...     thrust=2.5,
    ...     total_drag=1.4,
    ...     body_diameter=0.024,
    ...     stability=2.0,
    ... )
    >>> motor = Motor.from_configuration(rocket)
    >>> aero = DragModel.from_configuration(rocket)
"""

from modelrocket.vehicle.aerodynamics import (
    DragModel,
    stability_factor,
)
from modelrocket.vehicle.configuration import (
    InvalidConfigurationError,
    RocketConfiguration,
)
from modelrocket.vehicle.motor import Motor
from modelrocket.vehicle.parts import (
    BodyTube,
    RocketDesign,
    RocketPart,
    get_part,
    list_parts,
)

__all__ = [
    # Configuration
    "RocketConfiguration",
    "InvalidConfigurationError",
    # Propulsion
    "Motor",
    # Aerodynamics
    "DragModel",
    "stability_factor",
    # Parts
    "RocketPart",
    "BodyTube",
    "RocketDesign",
    "get_part",
    "list_parts",
]
