"""Lapse-rate atmosphere for low-altitude model rocket flights.

Temperature falls linearly from sea level through the troposphere and is
held constant above the tropopause:

- Troposphere (0-11 km): -6.5 K/km lapse rate
- Tropopause (above 11 km): isothermal at 216.65 K

Density in the troposphere uses the barometric power law on the
temperature ratio, rho = rho0 * (T/T0)^(g/(R*L) - 1), which equals the
sea-level value at 0 m. Above 11 km density decays exponentially. Both
branches decrease strictly with altitude. Altitudes below the launch pad
evaluate as sea level.

Example:
    >>> from modelrocket.environment import Atmosphere
    >>>
    >>> atm = Atmosphere()
    >>> result = atm.at_altitude(300.0)
    >>> print(f"Density: {result.density:.4f} kg/m^3")
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# =============================================================================
# Constants
# =============================================================================

# Sea level conditions
T0 = 288.15  # Temperature [K]
P0 = 101325.0  # Pressure [Pa]
RHO0 = 1.225  # Density [kg/m^3]

# Physical constants
R_AIR = 287.05287  # Specific gas constant for dry air [J/(kg·K)]
GAMMA_AIR = 1.4  # Ratio of specific heats for air
G0 = 9.80665  # Standard gravity [m/s^2]

# Troposphere
LAPSE_RATE = 0.0065  # [K/m]
TROPOPAUSE_ALTITUDE = 11000.0  # [m]
TROPOPAUSE_TEMPERATURE = T0 - LAPSE_RATE * TROPOPAUSE_ALTITUDE  # 216.65 K

PRESSURE_EXPONENT = G0 / (R_AIR * LAPSE_RATE)  # ~5.256
DENSITY_EXPONENT = PRESSURE_EXPONENT - 1.0  # ~4.256


# =============================================================================
# Result Classes
# =============================================================================


@beartype
@dataclass(frozen=True)
class AtmosphereResult:
    """Atmospheric conditions at a given altitude.

    Attributes:
        altitude: Altitude above the launch site [m]
        temperature: Static temperature [K]
        pressure: Static pressure [Pa]
        density: Air density [kg/m^3]
        speed_of_sound: Speed of sound [m/s]
    """
    altitude: float
    temperature: float
    pressure: float
    density: float
    speed_of_sound: float


# =============================================================================
# Atmosphere Model
# =============================================================================


@beartype
class Atmosphere:
    """Two-layer lapse-rate atmosphere.

    Example:
        >>> atm = Atmosphere()
        >>> atm.density(0.0)
        1.225
        >>> atm.temperature(1000.0)
        281.65
    """

    def __init__(self) -> None:
        ratio = TROPOPAUSE_TEMPERATURE / T0
        self._tropopause_pressure = P0 * ratio ** PRESSURE_EXPONENT
        self._tropopause_density = RHO0 * ratio ** DENSITY_EXPONENT
        self._scale_height = R_AIR * TROPOPAUSE_TEMPERATURE / G0

    def temperature(self, altitude: float | int) -> float:
        """Get temperature at altitude [m] in kelvin."""
        h = max(float(altitude), 0.0)
        if h >= TROPOPAUSE_ALTITUDE:
            return TROPOPAUSE_TEMPERATURE
        return T0 - LAPSE_RATE * h

    def pressure(self, altitude: float | int) -> float:
        """Get pressure at altitude [m] in pascals."""
        h = max(float(altitude), 0.0)
        if h >= TROPOPAUSE_ALTITUDE:
            dh = h - TROPOPAUSE_ALTITUDE
            return float(self._tropopause_pressure * np.exp(-dh / self._scale_height))
        return P0 * (self.temperature(h) / T0) ** PRESSURE_EXPONENT

    def density(self, altitude: float | int) -> float:
        """Get density at altitude [m] in kg/m^3."""
        h = max(float(altitude), 0.0)
        if h >= TROPOPAUSE_ALTITUDE:
            dh = h - TROPOPAUSE_ALTITUDE
            return float(self._tropopause_density * np.exp(-dh / self._scale_height))
        return RHO0 * (self.temperature(h) / T0) ** DENSITY_EXPONENT

    def speed_of_sound(self, altitude: float | int) -> float:
        """Get speed of sound at altitude [m] in m/s."""
        return float(np.sqrt(GAMMA_AIR * R_AIR * self.temperature(altitude)))

    def at_altitude(self, altitude: float | int) -> AtmosphereResult:
        """Get all atmospheric properties at altitude."""
        return AtmosphereResult(
            altitude=float(altitude),
            temperature=self.temperature(altitude),
            pressure=self.pressure(altitude),
            density=self.density(altitude),
            speed_of_sound=self.speed_of_sound(altitude),
        )

    def profile(
        self,
        altitudes: NDArray[np.float64] | list[float],
    ) -> dict[str, NDArray[np.float64]]:
        """Get atmospheric properties over a range of altitudes.

        Returns:
            Dictionary with arrays of temperature, pressure, density, speed_of_sound
        """
        altitudes = np.asarray(altitudes, dtype=np.float64)

        return {
            "altitude": altitudes,
            "temperature": np.array([self.temperature(h) for h in altitudes]),
            "pressure": np.array([self.pressure(h) for h in altitudes]),
            "density": np.array([self.density(h) for h in altitudes]),
            "speed_of_sound": np.array([self.speed_of_sound(h) for h in altitudes]),
        }
