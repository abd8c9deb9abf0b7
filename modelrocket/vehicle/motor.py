"""Motor thrust curve and propellant mass model.

Hobby motors are described only by a nominal thrust; no impulse curve is
available. Thrust therefore starts at the nominal value and tapers to zero
at burnout along a power-law curve in t/burn_time. Propellant is consumed
at a constant rate over the same burn.
"""

from dataclasses import dataclass

from beartype import beartype

from modelrocket.vehicle.configuration import RocketConfiguration

# Shape of the thrust taper: F(t) = F0 * (1 - (t/tb)^THRUST_TAPER_EXPONENT)
THRUST_TAPER_EXPONENT = 1.5


@beartype
@dataclass(frozen=True)
class Motor:
    """Thrust and mass as functions of time since ignition.

    Attributes:
        nominal_thrust: Thrust at ignition [N]
        burn_time: Burn duration [s]
        initial_mass: Vehicle mass at ignition [kg]
        propellant_mass: Propellant burned over the burn [kg]
        taper_exponent: Power-law exponent of the thrust taper
    """
    nominal_thrust: float
    burn_time: float
    initial_mass: float
    propellant_mass: float
    taper_exponent: float = THRUST_TAPER_EXPONENT

    @classmethod
    def from_configuration(cls, rocket: RocketConfiguration) -> "Motor":
        return cls(
            nominal_thrust=float(rocket.thrust),
            burn_time=float(rocket.burn_time),
            initial_mass=float(rocket.total_mass),
            propellant_mass=rocket.propellant_mass,
        )

    @property
    def dry_mass(self) -> float:
        return self.initial_mass - self.propellant_mass

    @property
    def mass_flow_rate(self) -> float:
        """Propellant mass flow [kg/s]."""
        return self.propellant_mass / self.burn_time

    def is_burning(self, time: float | int) -> bool:
        return 0.0 <= time < self.burn_time

    def thrust(self, time: float | int) -> float:
        """Thrust [N] at time [s] after ignition; zero once burned out."""
        if not self.is_burning(time):
            return 0.0
        fraction = time / self.burn_time
        return self.nominal_thrust * max(1.0 - fraction**self.taper_exponent, 0.0)

    def mass(self, time: float | int) -> float:
        """Vehicle mass [kg] at time [s], never below dry mass."""
        burned = self.mass_flow_rate * min(max(time, 0.0), self.burn_time)
        return max(self.initial_mass - burned, self.dry_mass)

    def total_impulse(self) -> float:
        """Impulse delivered over the burn [N·s].

        Closed form of the power-law taper: F0 * tb * p / (p + 1).
        """
        p = self.taper_exponent
        return self.nominal_thrust * self.burn_time * p / (p + 1.0)
