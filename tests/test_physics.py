"""
Tests for unit conversions and the shared lookup/clamp/rounding helpers.
"""

import pytest

from ridesetup.models.inputs import TireCasing
from ridesetup.physics.lookup import (
    FactorTable,
    clamp_max,
    clamp_min,
    round_half_up,
    round_int,
)
from ridesetup.physics.tables import CASING_FACTORS, STANCHION_PRESSURE_RATIOS
from ridesetup.physics.units import (
    crank_speed,
    kg_to_lb,
    lb_to_kg,
    magnitude_in,
    mm_to_inches,
    psi_to_bar,
)


class TestUnits:
    """Tests for units.py conversions."""

    def test_weight_conversions(self):
        """Test lb/kg conversion."""
        assert lb_to_kg(100) == pytest.approx(45.359, rel=0.001)
        assert kg_to_lb(45.359237) == pytest.approx(100, rel=0.001)

    def test_mm_to_inches(self):
        """Test 25.4mm is one inch."""
        assert mm_to_inches(25.4) == pytest.approx(1.0)

    def test_psi_to_bar(self):
        """Test the gauge conversion factor."""
        assert psi_to_bar(14.5038) == pytest.approx(1.0)
        assert psi_to_bar(72) == pytest.approx(4.964, rel=0.001)

    def test_crank_speed(self):
        """Test 1:1 at 90 rpm on a 2100mm wheel is 11.34 km/h."""
        speed = crank_speed(1.0, 90, 2100)
        assert magnitude_in(speed, "km/h") == pytest.approx(11.34)
        assert magnitude_in(speed, "mph") == pytest.approx(7.046, rel=0.001)


class TestFactorTable:
    """Tests for FactorTable lookups."""

    def test_enum_and_value_keys(self):
        """Test enum members and their string values find the same factor."""
        assert CASING_FACTORS[TireCasing.SUPPLE] == 0.95
        assert CASING_FACTORS["supple"] == 0.95
        assert TireCasing.SUPPLE in CASING_FACTORS

    def test_default_for_unknown_key(self):
        """Test unknown keys fall back to the documented default."""
        lookup = STANCHION_PRESSURE_RATIOS.lookup(37)
        assert lookup.value == 1.5
        assert not lookup.matched

    def test_numeric_keys(self):
        """Test float diameters match integer keys."""
        lookup = STANCHION_PRESSURE_RATIOS.lookup(34.0)
        assert lookup.value == 1.4
        assert lookup.matched

    def test_table_is_read_only(self):
        """Test the source mapping is copied."""
        source = {"a": 1.0}
        table = FactorTable("t", source, default=0.5)
        source["b"] = 2.0
        assert "b" not in table
        assert table.keys() == ["a"]


class TestClampAndRound:
    """Tests for clamps and half-up rounding."""

    def test_clamp_max(self):
        """Test ceiling clamps report whether they fired."""
        assert clamp_max(80, 72).value == 72
        assert clamp_max(80, 72).clamped
        assert not clamp_max(60, 72).clamped

    def test_clamp_min(self):
        """Test floor clamps report whether they fired."""
        assert clamp_min(15, 20).value == 20
        assert clamp_min(15, 20).clamped
        assert clamp_min(25, 20).value == 25

    def test_round_half_up(self):
        """Test halves round up, unlike round()."""
        assert round_int(72.5) == 73
        assert round_int(73.5) == 74
        assert round_int(46.4) == 46
        assert round_half_up(0.125, 2) == pytest.approx(0.13)
        assert round_half_up(11.34, 1) == pytest.approx(11.3)
