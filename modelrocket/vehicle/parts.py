"""Part catalog and design totals for the rocket builder.

A design is one nose cone, one body tube, one fin set and one motor. The
builder reports its totals in catalog units (grams, millimetres) and hands
them to the integrator through RocketDesign.to_configuration(), which is
where grams and millimetres become kilograms and metres.

Totals follow the builder's rules:

- Body tube mass = diameter * length / 1000 [g]
- Total drag = nose + diameter / 50 + fins + motor
- Stability = fin stability * length / 200

Example:
    >>> from modelrocket.vehicle.parts import RocketDesign, get_part, BodyTube
    >>>
    >>> design = RocketDesign(
    ...     nose=get_part("nose", "Ogive Nose"),
    ...     body=BodyTube(diameter_mm=24, length_mm=250),
    ...     fins=get_part("fins", "Swept Fins"),
    ...     engine=get_part("engine", "B6-4 Engine"),
    ... )
    >>> rocket = design.to_configuration()
"""

from dataclasses import dataclass
from typing import Literal

from beartype import beartype

from modelrocket.vehicle.configuration import G0, RocketConfiguration

PartKind = Literal["nose", "fins", "engine"]

# Body tube ranges offered by the builder [mm]
BODY_DIAMETER_RANGE = (18.0, 38.0)
BODY_LENGTH_RANGE = (150.0, 400.0)

# Reference body length for the stability score [mm]
STABILITY_REFERENCE_LENGTH = 200.0


@beartype
@dataclass(frozen=True)
class RocketPart:
    """A catalog part.

    Attributes:
        kind: Part category
        name: Display name
        mass_g: Mass [g]
        drag: Drag score contribution [-]
        thrust: Nominal thrust for motors [N]
        stability: Stability score for fin sets [-]
    """
    kind: PartKind
    name: str
    mass_g: float | int
    drag: float | int
    thrust: float | int = 0.0
    stability: float | int = 0.0


@beartype
@dataclass(frozen=True)
class BodyTube:
    """Body tube sized by the builder sliders."""
    diameter_mm: float | int = 24.0
    length_mm: float | int = 200.0

    def __post_init__(self) -> None:
        lo, hi = BODY_DIAMETER_RANGE
        if not lo <= self.diameter_mm <= hi:
            raise ValueError(
                f"Body diameter must be within {lo:g}-{hi:g} mm, got {self.diameter_mm}"
            )
        lo, hi = BODY_LENGTH_RANGE
        if not lo <= self.length_mm <= hi:
            raise ValueError(
                f"Body length must be within {lo:g}-{hi:g} mm, got {self.length_mm}"
            )

    @property
    def mass_g(self) -> float:
        return self.diameter_mm * self.length_mm / 1000.0

    @property
    def drag(self) -> float:
        return self.diameter_mm / 50.0


# =============================================================================
# Catalog
# =============================================================================

NOSE_CONES = (
    RocketPart("nose", "Cone Nose", mass_g=10, drag=0.5),
    RocketPart("nose", "Ogive Nose", mass_g=12, drag=0.4),
    RocketPart("nose", "Parabolic Nose", mass_g=11, drag=0.45),
)

FIN_SETS = (
    RocketPart("fins", "Standard Fins", mass_g=15, drag=0.8, stability=2.0),
    RocketPart("fins", "Large Fins", mass_g=22, drag=1.2, stability=3.0),
    RocketPart("fins", "Swept Fins", mass_g=18, drag=0.9, stability=2.5),
)

ENGINES = (
    RocketPart("engine", "A8-3 Engine", mass_g=24, drag=0.1, thrust=2.5),
    RocketPart("engine", "B6-4 Engine", mass_g=28, drag=0.1, thrust=5.0),
    RocketPart("engine", "C6-5 Engine", mass_g=32, drag=0.1, thrust=10.0),
)

CATALOG: dict[str, tuple[RocketPart, ...]] = {
    "nose": NOSE_CONES,
    "fins": FIN_SETS,
    "engine": ENGINES,
}


@beartype
def list_parts(kind: PartKind) -> list[str]:
    """Names of all catalog parts of a kind."""
    return [part.name for part in CATALOG[kind]]


@beartype
def get_part(kind: PartKind, name: str) -> RocketPart:
    """Look up a catalog part by name (case-insensitive).

    Raises:
        KeyError: If no part of that kind has the name
    """
    for part in CATALOG[kind]:
        if part.name.lower() == name.lower():
            return part
    raise KeyError(f"Unknown {kind} part {name!r}. Available: {', '.join(list_parts(kind))}")


# =============================================================================
# Design
# =============================================================================


@beartype
@dataclass(frozen=True)
class RocketDesign:
    """An assembled rocket in catalog units."""
    nose: RocketPart
    body: BodyTube
    fins: RocketPart
    engine: RocketPart

    def __post_init__(self) -> None:
        for slot, part in (("nose", self.nose), ("fins", self.fins), ("engine", self.engine)):
            if part.kind != slot:
                raise ValueError(f"{part.name!r} is a {part.kind} part, not a {slot} part")

    @classmethod
    def default(cls) -> "RocketDesign":
        """The builder's starting design: cone nose, 24x200 mm tube, standard fins, A8-3."""
        return cls(
            nose=NOSE_CONES[0],
            body=BodyTube(),
            fins=FIN_SETS[0],
            engine=ENGINES[0],
        )

    @property
    def total_mass_g(self) -> float:
        return float(self.nose.mass_g + self.body.mass_g + self.fins.mass_g + self.engine.mass_g)

    @property
    def total_drag(self) -> float:
        return float(self.nose.drag + self.body.drag + self.fins.drag + self.engine.drag)

    @property
    def thrust(self) -> float:
        return float(self.engine.thrust)

    @property
    def stability(self) -> float:
        return float(self.fins.stability * self.body.length_mm / STABILITY_REFERENCE_LENGTH)

    @property
    def thrust_to_weight(self) -> float:
        return self.thrust / (self.total_mass_g / 1000.0 * G0)

    def to_configuration(self) -> RocketConfiguration:
        """Convert to an SI configuration for the integrator."""
        return RocketConfiguration.from_catalog(
            total_mass_g=self.total_mass_g,
            thrust_n=self.thrust,
            total_drag=self.total_drag,
            body_diameter_mm=self.body.diameter_mm,
            stability=self.stability,
            engine_mass_g=self.engine.mass_g,
            name=f"{self.nose.name} / {self.fins.name} / {self.engine.name}",
        )
