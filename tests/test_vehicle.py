"""Tests for the rocket configuration, motor, drag and part catalog."""

import math

import pytest
from numpy.testing import assert_allclose

from modelrocket.units import grams, meters, millimeters, newtons, seconds
from modelrocket.vehicle import (
    BodyTube,
    DragModel,
    InvalidConfigurationError,
    Motor,
    RocketConfiguration,
    RocketDesign,
    get_part,
    list_parts,
    stability_factor,
)
from modelrocket.vehicle.configuration import DEFAULT_ENGINE_MASS


def baseline_rocket(**overrides) -> RocketConfiguration:
    params = dict(
        total_mass=0.069,
        thrust=2.5,
        total_drag=1.4,
        body_diameter=0.024,
        stability=2.0,
    )
    params.update(overrides)
    return RocketConfiguration(**params)


# =============================================================================
# Configuration Tests
# =============================================================================


class TestRocketConfiguration:
    """Test configuration construction, validation and derived values."""

    def test_baseline_is_valid(self) -> None:
        rocket = baseline_rocket()
        assert rocket.is_valid
        assert rocket.validate() is rocket

    def test_from_catalog_converts_units(self) -> None:
        rocket = RocketConfiguration.from_catalog(
            total_mass_g=69.0,
            thrust_n=2.5,
            total_drag=1.4,
            body_diameter_mm=24.0,
            stability=2.0,
        )

        assert_allclose(rocket.total_mass, 0.069)
        assert_allclose(rocket.body_diameter, 0.024)
        assert_allclose(rocket.engine_mass, DEFAULT_ENGINE_MASS)
        assert rocket.thrust == 2.5

    def test_from_quantities(self) -> None:
        rocket = RocketConfiguration.from_quantities(
            total_mass=grams(69),
            thrust=newtons(2.5),
            total_drag=1.4,
            body_diameter=millimeters(24),
            stability=2.0,
            burn_time=seconds(1.5),
        )

        assert_allclose(rocket.total_mass, 0.069)
        assert_allclose(rocket.burn_time, 1.5)

    def test_from_quantities_rejects_wrong_dimension(self) -> None:
        with pytest.raises(ValueError, match="Expected a mass quantity"):
            RocketConfiguration.from_quantities(
                total_mass=meters(1),
                thrust=newtons(2.5),
                total_drag=1.4,
                body_diameter=millimeters(24),
                stability=2.0,
            )

    @pytest.mark.parametrize(
        "overrides, fragment",
        [
            ({"thrust": 0.0}, "thrust must be positive"),
            ({"thrust": -1.0}, "thrust must be positive"),
            ({"total_mass": 0.0}, "total mass must be positive"),
            ({"total_mass": -0.05}, "total mass must be positive"),
            ({"total_drag": -1.0}, "total drag must be non-negative"),
            ({"body_diameter": -0.01}, "body diameter must be non-negative"),
            ({"burn_time": 0.0}, "burn time must be positive"),
            ({"propellant_fraction": 1.0}, "propellant fraction"),
            ({"total_mass": math.nan}, "must be finite"),
            ({"thrust": math.inf}, "must be finite"),
        ],
    )
    def test_invalid_configurations_rejected(self, overrides: dict, fragment: str) -> None:
        rocket = baseline_rocket(**overrides)

        assert not rocket.is_valid
        with pytest.raises(InvalidConfigurationError, match=fragment):
            rocket.validate()

    def test_error_lists_every_problem(self) -> None:
        rocket = baseline_rocket(thrust=0.0, total_mass=0.0)

        with pytest.raises(InvalidConfigurationError) as exc_info:
            rocket.validate()

        assert len(exc_info.value.problems) == 2
        assert isinstance(exc_info.value, ValueError)

    def test_derived_masses(self) -> None:
        rocket = baseline_rocket()

        assert_allclose(rocket.propellant_mass, 0.7 * 0.024)
        assert_allclose(rocket.dry_mass, 0.069 - 0.7 * 0.024)
        assert_allclose(rocket.mass_flow_rate, 0.7 * 0.024 / 2.0)

    def test_propellant_never_exceeds_total_mass(self) -> None:
        rocket = baseline_rocket(total_mass=0.01)
        assert rocket.dry_mass > 0

    def test_thrust_to_weight(self) -> None:
        rocket = baseline_rocket()
        assert_allclose(rocket.thrust_to_weight, 2.5 / (0.069 * 9.81))

    def test_reference_area(self) -> None:
        assert_allclose(baseline_rocket().reference_area, math.pi * 0.012**2)

    def test_zero_diameter_has_floored_area(self) -> None:
        assert baseline_rocket(body_diameter=0.0).reference_area > 0

    def test_is_frozen(self) -> None:
        rocket = baseline_rocket()
        with pytest.raises(AttributeError):
            rocket.thrust = 5.0


# =============================================================================
# Motor Tests
# =============================================================================


class TestMotor:
    """Test the thrust taper and propellant consumption."""

    def test_full_thrust_at_ignition(self) -> None:
        motor = Motor.from_configuration(baseline_rocket())
        assert motor.thrust(0.0) == 2.5

    def test_thrust_tapers_to_zero(self) -> None:
        motor = Motor.from_configuration(baseline_rocket())

        assert_allclose(motor.thrust(1.0), 2.5 * (1 - 0.5**1.5))
        assert motor.thrust(1.0) > motor.thrust(1.5) > 0.0

    def test_no_thrust_after_burnout(self) -> None:
        motor = Motor.from_configuration(baseline_rocket())

        assert motor.thrust(2.0) == 0.0
        assert motor.thrust(10.0) == 0.0
        assert not motor.is_burning(2.0)

    def test_mass_decreases_during_burn(self) -> None:
        rocket = baseline_rocket()
        motor = Motor.from_configuration(rocket)

        assert motor.mass(0.0) == pytest.approx(0.069)
        assert motor.mass(1.0) < motor.mass(0.5) < motor.mass(0.0)
        assert_allclose(motor.mass(1.0), 0.069 - rocket.mass_flow_rate * 1.0)

    def test_mass_floors_at_dry_mass(self) -> None:
        rocket = baseline_rocket()
        motor = Motor.from_configuration(rocket)

        assert_allclose(motor.mass(2.0), rocket.dry_mass)
        assert_allclose(motor.mass(25.0), rocket.dry_mass)

    def test_total_impulse(self) -> None:
        motor = Motor.from_configuration(baseline_rocket())
        assert_allclose(motor.total_impulse(), 2.5 * 2.0 * 1.5 / 2.5)


# =============================================================================
# Drag and Stability Tests
# =============================================================================


class TestDragModel:
    """Test drag coefficient, Reynolds correction and force decomposition."""

    def test_zero_speed_zero_force(self) -> None:
        aero = DragModel(total_drag=1.4, body_diameter=0.024)
        assert aero.force_components(0.0, 0.0, 1.225) == (0.0, 0.0)

    def test_base_coefficient_floor(self) -> None:
        assert DragModel(total_drag=0.0, body_diameter=0.024).base_coefficient == 0.001

    def test_reynolds_regimes(self) -> None:
        aero = DragModel(total_drag=1.0, body_diameter=0.024)

        # Re = v * d / nu with nu = 1.5e-5
        assert_allclose(aero.drag_coefficient(0.5), 0.01 * 1.5)     # Re = 800
        assert_allclose(aero.drag_coefficient(10.0), 0.01 * 1.2)    # Re = 16,000
        assert_allclose(aero.drag_coefficient(100.0), 0.01)         # Re = 160,000

    def test_drag_opposes_velocity(self) -> None:
        aero = DragModel(total_drag=1.4, body_diameter=0.024)

        fz, fx = aero.force_components(30.0, -2.0, 1.225)
        assert fz < 0
        assert fx > 0

        fz, _ = aero.force_components(-10.0, 0.0, 1.225)
        assert fz > 0

    def test_components_match_magnitude(self) -> None:
        aero = DragModel(total_drag=1.4, body_diameter=0.024)
        vz, vx = 30.0, 4.0
        fz, fx = aero.force_components(vz, vx, 1.2)

        speed = math.hypot(vz, vx)
        assert_allclose(math.hypot(fz, fx), aero.drag_force(speed, 1.2))


class TestStabilityFactor:
    """Test the stability penalty."""

    def test_stable(self) -> None:
        assert stability_factor(2.0) == 1.0

    def test_marginal(self) -> None:
        assert stability_factor(1.5) == 0.5
        assert stability_factor(0.0) == 0.5

    @pytest.mark.parametrize("stability", [-10.0, 0.0, 1.0, 1.6, 100.0])
    def test_always_in_unit_interval(self, stability: float) -> None:
        assert 0.1 <= stability_factor(stability) <= 1.0


# =============================================================================
# Part Catalog Tests
# =============================================================================


class TestParts:
    """Test catalog lookup and design totals."""

    def test_list_parts(self) -> None:
        assert list_parts("engine") == ["A8-3 Engine", "B6-4 Engine", "C6-5 Engine"]
        assert len(list_parts("nose")) == 3
        assert len(list_parts("fins")) == 3

    def test_get_part_case_insensitive(self) -> None:
        part = get_part("engine", "b6-4 engine")
        assert part.thrust == 5.0
        assert part.mass_g == 28

    def test_get_unknown_part_raises(self) -> None:
        with pytest.raises(KeyError, match="Unknown fins part"):
            get_part("fins", "Tiny Fins")

    def test_body_tube_range(self) -> None:
        with pytest.raises(ValueError, match="Body diameter"):
            BodyTube(diameter_mm=10.0)
        with pytest.raises(ValueError, match="Body length"):
            BodyTube(length_mm=500.0)

    def test_default_design_totals(self) -> None:
        design = RocketDesign.default()

        # 10 g nose + 4.8 g tube + 15 g fins + 24 g motor
        assert_allclose(design.total_mass_g, 53.8)
        assert_allclose(design.total_drag, 0.5 + 0.48 + 0.8 + 0.1)
        assert design.thrust == 2.5
        assert_allclose(design.stability, 2.0)

    def test_longer_body_is_more_stable(self) -> None:
        design = RocketDesign(
            nose=get_part("nose", "Ogive Nose"),
            body=BodyTube(diameter_mm=24.0, length_mm=300.0),
            fins=get_part("fins", "Large Fins"),
            engine=get_part("engine", "C6-5 Engine"),
        )
        assert_allclose(design.stability, 3.0 * 300.0 / 200.0)

    def test_part_in_wrong_slot_raises(self) -> None:
        with pytest.raises(ValueError, match="not a fins part"):
            RocketDesign(
                nose=get_part("nose", "Cone Nose"),
                body=BodyTube(),
                fins=get_part("engine", "A8-3 Engine"),
                engine=get_part("engine", "A8-3 Engine"),
            )

    def test_to_configuration(self) -> None:
        design = RocketDesign.default()
        rocket = design.to_configuration()

        assert_allclose(rocket.total_mass, 0.0538)
        assert_allclose(rocket.body_diameter, 0.024)
        assert_allclose(rocket.engine_mass, 0.024)
        assert rocket.thrust == 2.5
        assert "A8-3 Engine" in rocket.name
        assert rocket.is_valid
