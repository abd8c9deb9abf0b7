"""Environment models for model rocket flight simulation.

Provides the atmosphere and wind models used by the flight integrator.

Example:
    >>> from modelrocket.environment import Atmosphere, Wind
    >>>
    >>> atm = Atmosphere()
    >>> rho = atm.density(150.0)  # kg/m^3
    >>>
    >>> wind = Wind(speed=5.0, direction=0.0)
    >>> fx, fz = wind.force(rho, reference_area=4.5e-4)
"""

from modelrocket.environment.atmosphere import (
    Atmosphere,
    AtmosphereResult,
)
from modelrocket.environment.wind import Wind

__all__ = [
    "Atmosphere",
    "AtmosphereResult",
    "Wind",
]
