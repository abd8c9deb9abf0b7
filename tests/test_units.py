"""Tests for the units module."""

import pytest

from modelrocket.units import (
    Quantity,
    centimeters,
    dimensionless,
    grams,
    inches,
    kilograms,
    km_per_hour,
    meters,
    meters_per_second,
    millimeters,
    newtons,
    ounces,
    pounds_force,
    seconds,
    si_value_of,
)


class TestQuantityCreation:
    """Test Quantity creation and validation."""

    def test_create_basic_quantity(self) -> None:
        q = Quantity(10.0, "m", "length")
        assert q.value == 10.0
        assert q.unit == "m"
        assert q.dimension == "length"

    def test_unit_dimension_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="has dimension"):
            Quantity(10.0, "g", "length")

    def test_unknown_unit_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown unit"):
            Quantity(10.0, "furlong", "length")

    def test_factory_functions(self) -> None:
        assert meters(1).dimension == "length"
        assert grams(1).dimension == "mass"
        assert seconds(1).dimension == "time"
        assert newtons(1).dimension == "force"
        assert meters_per_second(1).dimension == "velocity"
        assert dimensionless(1).dimension == "dimensionless"


class TestConversions:
    """Test unit conversions used at the builder boundary."""

    def test_grams_to_kilograms(self) -> None:
        assert grams(69).to("kg").value == pytest.approx(0.069)

    def test_millimeters_to_meters(self) -> None:
        assert millimeters(24).to("m").value == pytest.approx(0.024)

    def test_centimeters_and_inches(self) -> None:
        assert centimeters(2.54).to("in").value == pytest.approx(1.0)
        assert inches(1).si_value == pytest.approx(0.0254)

    def test_ounces(self) -> None:
        assert ounces(1).to("g").value == pytest.approx(28.3495)

    def test_force_units(self) -> None:
        assert pounds_force(1).to("N").value == pytest.approx(4.44822)

    def test_km_per_hour(self) -> None:
        assert km_per_hour(36).si_value == pytest.approx(10.0)

    def test_to_si(self) -> None:
        q = grams(500).to_si()
        assert q.unit == "kg"
        assert q.value == pytest.approx(0.5)

    def test_cross_dimension_conversion_raises(self) -> None:
        with pytest.raises(ValueError, match="different dimensions"):
            grams(1).to("m")


class TestArithmetic:
    """Test same-dimension and scalar arithmetic."""

    def test_add_converts_to_left_unit(self) -> None:
        total = grams(500) + kilograms(1)
        assert total.unit == "g"
        assert total.value == pytest.approx(1500.0)

    def test_subtract(self) -> None:
        assert (meters(1) - centimeters(25)).value == pytest.approx(0.75)

    def test_add_different_dimensions_raises(self) -> None:
        with pytest.raises(ValueError, match="different dimensions"):
            grams(1) + meters(1)

    def test_scalar_multiplication_and_division(self) -> None:
        assert (grams(10) * 3).value == pytest.approx(30.0)
        assert (3 * grams(10)).value == pytest.approx(30.0)
        assert (grams(10) / 4).value == pytest.approx(2.5)


class TestComparison:
    """Test equality and ordering across units."""

    def test_equal_across_units(self) -> None:
        assert grams(1000) == kilograms(1)
        assert millimeters(24) == centimeters(2.4)

    def test_different_dimensions_not_equal(self) -> None:
        assert meters(1) != seconds(1)

    def test_ordering(self) -> None:
        assert grams(999) < kilograms(1)
        assert newtons(10) > pounds_force(2)

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(grams(1000)) == hash(kilograms(1))


class TestSiValueOf:
    """Test the dimension-checked SI extraction."""

    def test_returns_si_value(self) -> None:
        assert si_value_of(millimeters(38), "length") == pytest.approx(0.038)

    def test_wrong_dimension_raises(self) -> None:
        with pytest.raises(ValueError, match="Expected a mass quantity"):
            si_value_of(millimeters(38), "mass")
