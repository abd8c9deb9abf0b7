"""Tests for the atmosphere and wind models."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from modelrocket.environment import Atmosphere, Wind
from modelrocket.environment.atmosphere import RHO0, T0, TROPOPAUSE_TEMPERATURE
from modelrocket.environment.wind import WIND_AREA_FACTOR

# =============================================================================
# Atmosphere Tests
# =============================================================================


class TestAtmosphere:
    """Test the lapse-rate atmosphere."""

    def test_sea_level(self) -> None:
        atm = Atmosphere()
        result = atm.at_altitude(0.0)

        assert_allclose(result.temperature, T0)
        assert_allclose(result.pressure, 101325.0)
        assert_allclose(result.density, RHO0)
        assert_allclose(result.speed_of_sound, 340.3, rtol=1e-3)

    def test_temperature_lapse(self) -> None:
        atm = Atmosphere()
        assert_allclose(atm.temperature(1000.0), T0 - 6.5)

    def test_isothermal_above_tropopause(self) -> None:
        atm = Atmosphere()
        assert_allclose(atm.temperature(15000.0), TROPOPAUSE_TEMPERATURE)
        assert_allclose(atm.temperature(20000.0), TROPOPAUSE_TEMPERATURE)

    def test_density_decreases_with_altitude(self) -> None:
        atm = Atmosphere()
        altitudes = np.linspace(0.0, 20000.0, 81)
        density = atm.profile(altitudes)["density"]

        assert np.all(np.diff(density) < 0)

    def test_density_continuous_at_tropopause(self) -> None:
        atm = Atmosphere()
        assert_allclose(atm.density(10999.999), atm.density(11000.0), rtol=1e-6)

    def test_negative_altitude_is_sea_level(self) -> None:
        atm = Atmosphere()
        assert atm.density(-50.0) == atm.density(0.0)
        assert atm.temperature(-50.0) == atm.temperature(0.0)

    def test_model_rocket_altitudes_near_sea_level(self) -> None:
        """Within a few hundred metres density changes by only a few percent."""
        atm = Atmosphere()
        assert_allclose(atm.density(300.0), RHO0, rtol=0.05)

    def test_profile_accepts_list(self) -> None:
        profile = Atmosphere().profile([0.0, 100.0, 200.0])

        assert set(profile) == {"altitude", "temperature", "pressure", "density", "speed_of_sound"}
        assert profile["density"].shape == (3,)


# =============================================================================
# Wind Tests
# =============================================================================


class TestWind:
    """Test the run-fixed wind load."""

    def test_calm_has_no_force(self) -> None:
        assert Wind.calm().force(RHO0, 4.5e-4) == (0.0, 0.0)

    def test_force_magnitude(self) -> None:
        wind = Wind(speed=5.0, direction=0.0)
        expected = 0.5 * RHO0 * 25.0 * 4.5e-4 * WIND_AREA_FACTOR

        assert_allclose(wind.force_magnitude(RHO0, 4.5e-4), expected)

    def test_direction_splits_components(self) -> None:
        horizontal = Wind(speed=5.0, direction=0.0).force(RHO0, 4.5e-4)
        vertical = Wind(speed=5.0, direction=np.pi / 2).force(RHO0, 4.5e-4)

        assert horizontal[0] > 0
        assert_allclose(horizontal[1], 0.0, atol=1e-15)
        assert_allclose(vertical[0], 0.0, atol=1e-15)
        assert vertical[1] > 0

    def test_components_preserve_magnitude(self) -> None:
        wind = Wind(speed=7.0, direction=2.0)
        fx, fz = wind.force(1.1, 1e-3)

        assert_allclose(np.hypot(fx, fz), wind.force_magnitude(1.1, 1e-3))

    def test_random_is_reproducible_with_seed(self) -> None:
        a = Wind.random(5.0, np.random.default_rng(3))
        b = Wind.random(5.0, np.random.default_rng(3))

        assert a == b
        assert 0.0 <= a.direction < 2 * np.pi

    @pytest.mark.parametrize("speed", [0.0, 2.0, 10.0])
    def test_force_scales_with_speed_squared(self, speed: float) -> None:
        base = Wind(speed=1.0).force_magnitude(RHO0, 1e-3)
        assert_allclose(Wind(speed=speed).force_magnitude(RHO0, 1e-3), base * speed**2)
