"""Rocket configuration handed to the flight integrator.

A RocketConfiguration is the immutable, SI-unit description of one
assembled rocket: how heavy it is, how hard the motor pushes, how draggy
and how stable the airframe is. Builders and part catalogs describe
rockets in grams and millimetres; the classmethods here are the unit
boundary and convert everything to kilograms and metres exactly once.

Example:
    >>> from modelrocket.vehicle import RocketConfiguration
    >>> from modelrocket.units import grams, millimeters, newtons
    >>>
    >>> rocket = RocketConfiguration.from_quantities(
    ...     total_mass=grams(69),
    ...     thrust=newtons(2.5),
    ...     total_drag=1.4,
    ...     body_diameter=millimeters(24),
    ...     stability=2.0,
    ... )
    >>> print(f"{rocket.total_mass:.3f} kg")
    0.069 kg
"""

import math
from dataclasses import dataclass, fields

from beartype import beartype

from modelrocket.units import Quantity, grams, millimeters, si_value_of

# =============================================================================
# Constants
# =============================================================================

G0 = 9.81  # Gravitational acceleration used for weight [m/s^2]

DEFAULT_ENGINE_MASS = 0.024  # A8-3 motor [kg]
DEFAULT_PROPELLANT_FRACTION = 0.7  # Propellant share of motor mass
DEFAULT_BURN_TIME = 2.0  # [s]

MIN_BODY_DIAMETER = 0.002  # Floor for reference-area calculation [m]


def frontal_area(diameter: float | int) -> float:
    """Cross-sectional area [m^2] of a body tube, with the diameter floored."""
    radius = max(diameter, MIN_BODY_DIAMETER) / 2
    return math.pi * radius**2


class InvalidConfigurationError(ValueError):
    """Raised when a rocket configuration cannot be flown.

    Attributes:
        problems: Human-readable description of every failed check
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid rocket configuration: " + "; ".join(problems))


# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass(frozen=True)
class RocketConfiguration:
    """Immutable rocket parameters in SI units.

    Construction does not validate; call validate() (the integrator does)
    to reject configurations that cannot fly.

    Attributes:
        total_mass: Lift-off mass, nose + body + fins + motor [kg]
        thrust: Nominal (peak) motor thrust [N]
        total_drag: Aggregate drag score from the part catalog [-]
        body_diameter: Body tube outer diameter [m]
        stability: Stability design score [-]
        engine_mass: Loaded motor mass [kg]
        propellant_fraction: Share of motor mass that is propellant [-]
        burn_time: Duration of nonzero thrust [s]
        name: Optional label for reports
    """
    total_mass: float | int
    thrust: float | int
    total_drag: float | int = 0.0
    body_diameter: float | int = 0.024
    stability: float | int = 2.0
    engine_mass: float | int = DEFAULT_ENGINE_MASS
    propellant_fraction: float | int = DEFAULT_PROPELLANT_FRACTION
    burn_time: float | int = DEFAULT_BURN_TIME
    name: str = ""

    @classmethod
    def from_quantities(
        cls,
        total_mass: Quantity,
        thrust: Quantity,
        total_drag: float | int,
        body_diameter: Quantity,
        stability: float | int,
        engine_mass: Quantity | None = None,
        burn_time: Quantity | None = None,
        propellant_fraction: float | int = DEFAULT_PROPELLANT_FRACTION,
        name: str = "",
    ) -> "RocketConfiguration":
        """Create a configuration from unit-carrying quantities.

        Raises:
            ValueError: If a quantity has the wrong dimension
        """
        return cls(
            total_mass=si_value_of(total_mass, "mass"),
            thrust=si_value_of(thrust, "force"),
            total_drag=total_drag,
            body_diameter=si_value_of(body_diameter, "length"),
            stability=stability,
            engine_mass=(
                si_value_of(engine_mass, "mass") if engine_mass is not None
                else DEFAULT_ENGINE_MASS
            ),
            propellant_fraction=propellant_fraction,
            burn_time=(
                si_value_of(burn_time, "time") if burn_time is not None
                else DEFAULT_BURN_TIME
            ),
            name=name,
        )

    @classmethod
    def from_catalog(
        cls,
        total_mass_g: float | int,
        thrust_n: float | int,
        total_drag: float | int,
        body_diameter_mm: float | int,
        stability: float | int,
        engine_mass_g: float | int = 24.0,
        name: str = "",
    ) -> "RocketConfiguration":
        """Create a configuration from builder values (grams, millimetres, newtons)."""
        return cls.from_quantities(
            total_mass=grams(total_mass_g),
            thrust=Quantity(thrust_n, "N", "force"),
            total_drag=total_drag,
            body_diameter=millimeters(body_diameter_mm),
            stability=stability,
            engine_mass=grams(engine_mass_g),
            name=name,
        )

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def problems(self) -> list[str]:
        """List every reason this configuration cannot be flown."""
        problems = []

        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (int, float)) and not math.isfinite(value):
                problems.append(f"{f.name} must be finite, got {value}")
        if problems:
            return problems

        if self.thrust <= 0:
            problems.append(f"thrust must be positive, got {self.thrust} N")
        if self.total_mass <= 0:
            problems.append(f"total mass must be positive, got {self.total_mass} kg")
        if self.total_drag < 0:
            problems.append(f"total drag must be non-negative, got {self.total_drag}")
        if self.body_diameter < 0:
            problems.append(f"body diameter must be non-negative, got {self.body_diameter} m")
        if self.engine_mass < 0:
            problems.append(f"engine mass must be non-negative, got {self.engine_mass} kg")
        if not 0 < self.propellant_fraction < 1:
            problems.append(
                f"propellant fraction must be in (0, 1), got {self.propellant_fraction}"
            )
        if self.burn_time <= 0:
            problems.append(f"burn time must be positive, got {self.burn_time} s")

        return problems

    @property
    def is_valid(self) -> bool:
        return not self.problems()

    def validate(self) -> "RocketConfiguration":
        """Return self, or raise if the configuration cannot be flown.

        Raises:
            InvalidConfigurationError: If any check fails
        """
        problems = self.problems()
        if problems:
            raise InvalidConfigurationError(problems)
        return self

    # -------------------------------------------------------------------------
    # Derived properties
    # -------------------------------------------------------------------------

    @property
    def propellant_mass(self) -> float:
        """Propellant mass [kg]; never more than the same share of total mass."""
        return float(self.propellant_fraction * min(self.engine_mass, self.total_mass))

    @property
    def dry_mass(self) -> float:
        """Mass after burnout [kg]."""
        return float(self.total_mass - self.propellant_mass)

    @property
    def mass_flow_rate(self) -> float:
        """Propellant consumption rate during the burn [kg/s]."""
        return self.propellant_mass / self.burn_time

    @property
    def reference_area(self) -> float:
        """Body cross-sectional area [m^2]."""
        return frontal_area(self.body_diameter)

    @property
    def weight(self) -> float:
        """Lift-off weight [N]."""
        return self.total_mass * G0

    @property
    def thrust_to_weight(self) -> float:
        """Nominal thrust divided by lift-off weight."""
        return self.thrust / self.weight
