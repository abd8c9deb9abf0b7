"""Units module for modelrocket.

Part catalogs and rocket builders describe hobby rockets in grams and
millimetres, while the flight integrator works strictly in SI. Quantity
makes that boundary explicit: a value carries its unit, and converting to
kilograms or metres is always a visible ``.to()`` / ``.si_value`` call.

Example:
    >>> print(grams(69).to("kg"))
    0.069 kg
    >>> print(millimeters(24).to_si())
    0.024 m
"""

import math
from dataclasses import dataclass

from beartype import beartype

# =============================================================================
# Dimension and Unit Definitions
# =============================================================================

DIMENSIONS = {
    "length": "m",
    "mass": "kg",
    "time": "s",
    "force": "N",
    "velocity": "m/s",
    "acceleration": "m/s^2",
    "area": "m^2",
    "dimensionless": "1",
}

# Conversion factors TO base SI unit: (factor, dimension)
CONVERSIONS: dict[str, tuple[float, str]] = {
    # Length
    "m": (1.0, "length"),
    "cm": (0.01, "length"),
    "mm": (0.001, "length"),
    "km": (1000.0, "length"),
    "ft": (0.3048, "length"),
    "in": (0.0254, "length"),
    # Mass
    "kg": (1.0, "mass"),
    "g": (0.001, "mass"),
    "oz": (0.0283495, "mass"),
    "lbm": (0.453592, "mass"),
    # Time
    "s": (1.0, "time"),
    "ms": (0.001, "time"),
    # Force
    "N": (1.0, "force"),
    "lbf": (4.44822, "force"),
    "kgf": (9.80665, "force"),
    # Velocity
    "m/s": (1.0, "velocity"),
    "km/h": (1 / 3.6, "velocity"),
    "ft/s": (0.3048, "velocity"),
    "mph": (0.44704, "velocity"),
    # Acceleration
    "m/s^2": (1.0, "acceleration"),
    "g0": (9.80665, "acceleration"),
    # Area
    "m^2": (1.0, "area"),
    "cm^2": (1e-4, "area"),
    "mm^2": (1e-6, "area"),
    # Dimensionless
    "1": (1.0, "dimensionless"),
    "": (1.0, "dimensionless"),
}


def _lookup(unit: str) -> tuple[float, str]:
    if unit not in CONVERSIONS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return CONVERSIONS[unit]


def _convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a value between units of the same dimension."""
    from_factor, from_dim = _lookup(from_unit)
    to_factor, to_dim = _lookup(to_unit)

    if from_dim != to_dim:
        raise ValueError(
            f"Cannot convert between different dimensions: {from_dim} and {to_dim}"
        )

    return value * from_factor / to_factor


# =============================================================================
# Quantity Class
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class Quantity:
    """A physical quantity with value, unit, and dimension.

    Examples:
        >>> body = Quantity(24, "mm", "length")
        >>> body.to("m")
        Quantity(0.024 m)
    """

    value: float | int
    unit: str
    dimension: str

    def __post_init__(self) -> None:
        """Validate that unit matches dimension."""
        _, expected_dim = _lookup(self.unit)
        if self.dimension != expected_dim:
            raise ValueError(
                f"Unit {self.unit!r} has dimension {expected_dim!r}, "
                f"but {self.dimension!r} was specified"
            )

    def to(self, target_unit: str) -> "Quantity":
        """Convert to a different unit of the same dimension.

        Raises:
            ValueError: If target_unit belongs to another dimension
        """
        return Quantity(_convert(self.value, self.unit, target_unit), target_unit, self.dimension)

    def to_si(self) -> "Quantity":
        """Convert to the SI base unit for this dimension."""
        return self.to(DIMENSIONS[self.dimension])

    @property
    def si_value(self) -> float:
        """Value in SI base units as a bare float."""
        return float(self.value * _lookup(self.unit)[0])

    def __repr__(self) -> str:
        return f"Quantity({self.value:.6g} {self.unit})"

    def __str__(self) -> str:
        return f"{self.value:.6g} {self.unit}"

    # -------------------------------------------------------------------------
    # Arithmetic (same-dimension and scalar only)
    # -------------------------------------------------------------------------

    def _check_same_dimension(self, other: "Quantity", op: str) -> None:
        if self.dimension != other.dimension:
            raise ValueError(
                f"Cannot {op} quantities with different dimensions: "
                f"{self.dimension} and {other.dimension}"
            )

    def __add__(self, other: "Quantity") -> "Quantity":
        self._check_same_dimension(other, "add")
        return Quantity(self.value + other.to(self.unit).value, self.unit, self.dimension)

    def __sub__(self, other: "Quantity") -> "Quantity":
        self._check_same_dimension(other, "subtract")
        return Quantity(self.value - other.to(self.unit).value, self.unit, self.dimension)

    def __mul__(self, other: float | int) -> "Quantity":
        return Quantity(self.value * other, self.unit, self.dimension)

    def __rmul__(self, other: float | int) -> "Quantity":
        return Quantity(self.value * other, self.unit, self.dimension)

    def __truediv__(self, other: float | int) -> "Quantity":
        return Quantity(self.value / other, self.unit, self.dimension)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        return math.isclose(self.si_value, other.si_value, rel_tol=1e-9)

    def __lt__(self, other: "Quantity") -> bool:
        self._check_same_dimension(other, "compare")
        return self.si_value < other.si_value

    def __gt__(self, other: "Quantity") -> bool:
        self._check_same_dimension(other, "compare")
        return self.si_value > other.si_value

    def __hash__(self) -> int:
        return hash((round(self.si_value, 9), self.dimension))


@beartype
def si_value_of(quantity: Quantity, dimension: str) -> float:
    """Return the SI value of ``quantity`` after checking its dimension.

    Raises:
        ValueError: If the quantity is not of the expected dimension
    """
    if quantity.dimension != dimension:
        raise ValueError(
            f"Expected a {dimension} quantity, got {quantity.dimension} ({quantity})"
        )
    return quantity.si_value


# =============================================================================
# Factory Functions
# =============================================================================


@beartype
def meters(value: float | int) -> Quantity:
    """Create a length quantity in meters."""
    return Quantity(value, "m", "length")


@beartype
def centimeters(value: float | int) -> Quantity:
    """Create a length quantity in centimeters."""
    return Quantity(value, "cm", "length")


@beartype
def millimeters(value: float | int) -> Quantity:
    """Create a length quantity in millimeters."""
    return Quantity(value, "mm", "length")


@beartype
def inches(value: float | int) -> Quantity:
    """Create a length quantity in inches."""
    return Quantity(value, "in", "length")


@beartype
def kilograms(value: float | int) -> Quantity:
    """Create a mass quantity in kilograms."""
    return Quantity(value, "kg", "mass")


@beartype
def grams(value: float | int) -> Quantity:
    """Create a mass quantity in grams."""
    return Quantity(value, "g", "mass")


@beartype
def ounces(value: float | int) -> Quantity:
    """Create a mass quantity in ounces."""
    return Quantity(value, "oz", "mass")


@beartype
def seconds(value: float | int) -> Quantity:
    """Create a time quantity in seconds."""
    return Quantity(value, "s", "time")


@beartype
def newtons(value: float | int) -> Quantity:
    """Create a force quantity in Newtons."""
    return Quantity(value, "N", "force")


@beartype
def pounds_force(value: float | int) -> Quantity:
    """Create a force quantity in pounds-force."""
    return Quantity(value, "lbf", "force")


@beartype
def meters_per_second(value: float | int) -> Quantity:
    """Create a velocity quantity in m/s."""
    return Quantity(value, "m/s", "velocity")


@beartype
def km_per_hour(value: float | int) -> Quantity:
    """Create a velocity quantity in km/h."""
    return Quantity(value, "km/h", "velocity")


@beartype
def dimensionless(value: float | int) -> Quantity:
    """Create a dimensionless quantity."""
    return Quantity(value, "1", "dimensionless")
