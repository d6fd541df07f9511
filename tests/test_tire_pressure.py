"""
Tests for the tire pressure model.

Covers load split, effective width, adjustment factors, the hookless
ceiling and the rim-strike floor.
"""

import pytest

from ridesetup.models.inputs import (
    SurfaceType,
    TireCasing,
    TirePressureInputs,
    TireType,
    WeightUnit,
    WheelDiameter,
)
from ridesetup.models.settings import TirePressureTuning
from ridesetup.physics.tire_pressure import (
    base_pressure_psi,
    calculate_tire_pressure,
    effective_tire_width,
    minimum_pressure_psi,
    split_wheel_loads,
)


class TestBuildingBlocks:
    """Tests for the individual model steps."""

    def test_wheel_load_split(self):
        """Test the 45/55 front/rear split."""
        loads = split_wheel_loads(100.0)
        assert loads.front_kg == pytest.approx(45.0)
        assert loads.rear_kg == pytest.approx(55.0)

    def test_effective_width_grows_with_rim(self):
        """Test each mm of rim over 19mm adds 0.4mm of tire width."""
        assert effective_tire_width(28, 19) == pytest.approx(28.0)
        assert effective_tire_width(28, 21) == pytest.approx(28.8)
        assert effective_tire_width(28, 17) == pytest.approx(27.2)

    def test_effective_width_never_reaches_zero(self):
        """Test a tiny tire on a narrow rim is held at the minimum width."""
        assert effective_tire_width(4, 9) == pytest.approx(1.0)
        assert effective_tire_width(2, 5) == pytest.approx(1.0)
        assert effective_tire_width(4, 9, minimum_mm=2.5) == pytest.approx(2.5)

    def test_base_pressure_linear_in_load(self):
        """Test pressure doubles with load and halves with width."""
        base = base_pressure_psi(40.0, 1.0)
        assert base == pytest.approx(62.4)
        assert base_pressure_psi(80.0, 1.0) == pytest.approx(2 * base)
        assert base_pressure_psi(40.0, 2.0) == pytest.approx(base / 2)

    @pytest.mark.parametrize("diameter,width,expected", [
        (WheelDiameter.ROAD_700C, 28, 30),
        (WheelDiameter.ROAD_700C, 34, 30),
        (WheelDiameter.ROAD_700C, 40, 24),
        (WheelDiameter.GRAVEL_650B, 47, 24),
        (WheelDiameter.MTB_29ER, 40, 20),
        (WheelDiameter.ROAD_700C, 50, 20),
        (WheelDiameter.GRAVEL_650B, 55, 20),
    ])
    def test_minimum_pressure(self, diameter, width, expected):
        """Test the rim-strike floor heuristics."""
        assert minimum_pressure_psi(diameter, width, TirePressureTuning()) == expected


class TestRoadSetup:
    """Tests for a typical road setup with no clamps."""

    def test_pressures_in_plausible_range(self, road_tire_inputs):
        """Test a 184 lb system on 28mm tires lands in a sane range."""
        result = calculate_tire_pressure(road_tire_inputs)

        assert 24 <= result.front_psi <= 60
        assert 24 <= result.rear_psi <= 60
        assert result.rear_psi > result.front_psi
        assert result.warnings == []

    def test_effective_width_note(self, road_tire_inputs):
        """Test the effective width is reported and explained."""
        result = calculate_tire_pressure(road_tire_inputs)

        assert result.effective_tire_width_mm == pytest.approx(28.8)
        assert any("effective width of 29mm" in n for n in result.notes)

    def test_bar_matches_psi(self, road_tire_inputs):
        """Test bar values are the PSI values converted at 14.5038."""
        result = calculate_tire_pressure(road_tire_inputs)

        assert result.front_bar == pytest.approx(result.front_psi / 14.5038, abs=0.05)
        assert result.rear_bar == pytest.approx(result.rear_psi / 14.5038, abs=0.05)

    def test_tubeless_note(self, road_tire_inputs):
        """Test tubeless mounting is explained."""
        result = calculate_tire_pressure(road_tire_inputs)
        assert any("Tubeless" in n for n in result.notes)

    def test_no_extra_notes_for_baseline_setup(self, road_tire_inputs):
        """Test standard casing on pavement with tubes adds only the width note."""
        inputs = road_tire_inputs.model_copy(update={"tire_type": TireType.TUBETYPE})
        result = calculate_tire_pressure(inputs)
        assert len(result.notes) == 1

    def test_deterministic(self, road_tire_inputs):
        """Test identical inputs give identical results."""
        assert calculate_tire_pressure(road_tire_inputs) == calculate_tire_pressure(road_tire_inputs)

    def test_kg_input_matches_lb_input(self):
        """Test weights in kg give the same answer as the same weights in lb."""
        common = dict(tire_width_mm=32, rim_width_mm=23, surface=SurfaceType.MIXED)
        in_lb = TirePressureInputs(rider_weight=176.37, equipment_weight=22.05, **common)
        in_kg = TirePressureInputs(
            rider_weight=80, equipment_weight=10, weight_unit=WeightUnit.KG, **common
        )

        lb_result = calculate_tire_pressure(in_lb)
        kg_result = calculate_tire_pressure(in_kg)
        assert abs(lb_result.front_psi - kg_result.front_psi) <= 1
        assert abs(lb_result.rear_psi - kg_result.rear_psi) <= 1


class TestAdjustments:
    """Tests for casing, surface, mounting and rim effects."""

    def test_rougher_surface_lowers_pressure(self, road_tire_inputs):
        """Test loose gravel needs less pressure than pavement."""
        smooth = calculate_tire_pressure(road_tire_inputs)
        rough = calculate_tire_pressure(
            road_tire_inputs.model_copy(update={"surface": SurfaceType.GRAVEL_HARDPACK})
        )
        assert rough.rear_psi < smooth.rear_psi
        assert any("rougher surfaces" in n for n in rough.notes)

    def test_supple_casing_lowers_pressure(self, road_tire_inputs):
        """Test supple casings run lower and get a note."""
        standard = calculate_tire_pressure(road_tire_inputs)
        supple = calculate_tire_pressure(
            road_tire_inputs.model_copy(update={"casing": TireCasing.ULTRA_SUPPLE})
        )
        assert supple.rear_psi < standard.rear_psi
        assert any("Supple casings" in n for n in supple.notes)

    def test_tubeless_lower_than_tubetype(self, road_tire_inputs):
        """Test tubeless runs lower than tubes."""
        tubeless = calculate_tire_pressure(road_tire_inputs)
        tubes = calculate_tire_pressure(
            road_tire_inputs.model_copy(update={"tire_type": TireType.TUBETYPE})
        )
        assert tubeless.rear_psi < tubes.rear_psi

    def test_wider_rim_lowers_pressure(self, road_tire_inputs):
        """Test a wider rim widens the tire and drops pressure."""
        narrow = calculate_tire_pressure(road_tire_inputs.model_copy(update={"rim_width_mm": 17}))
        wide = calculate_tire_pressure(road_tire_inputs.model_copy(update={"rim_width_mm": 30}))
        assert wide.rear_psi < narrow.rear_psi

    def test_pressure_monotonic_in_weight(self, road_tire_inputs):
        """Test heavier riders never get less pressure."""
        previous = None
        for weight in range(90, 320, 10):
            result = calculate_tire_pressure(
                road_tire_inputs.model_copy(update={"rider_weight": weight, "is_hookless": True})
            )
            if previous is not None:
                assert result.front_psi >= previous.front_psi
                assert result.rear_psi >= previous.rear_psi
            previous = result


class TestHooklessCeiling:
    """Tests for the hookless rim safety ceiling."""

    def test_both_wheels_capped(self, heavy_narrow_hookless_inputs):
        """Test a heavy rider on 23mm tires is held at exactly 72 PSI."""
        result = calculate_tire_pressure(heavy_narrow_hookless_inputs)

        assert result.front_psi == 72
        assert result.rear_psi == 72
        assert result.rear_bar == pytest.approx(4.96)
        assert len(result.warnings) == 2
        assert result.warnings[0].startswith("Front")
        assert result.warnings[1].startswith("Rear")
        assert all("72 PSI due to hookless rim limits" in w for w in result.warnings)

    def test_only_rear_capped(self):
        """Test only the wheel that exceeds the ceiling gets a warning."""
        inputs = TirePressureInputs(
            rider_weight=185,
            equipment_weight=17,
            tire_width_mm=25,
            rim_width_mm=19,
            is_hookless=True,
        )
        result = calculate_tire_pressure(inputs)

        assert result.front_psi < 72
        assert result.rear_psi == 72
        assert len(result.warnings) == 1
        assert "Rear" in result.warnings[0]

    def test_hookless_note_always_present(self, road_tire_inputs):
        """Test a hookless rim is noted even when no clamp fires."""
        result = calculate_tire_pressure(road_tire_inputs.model_copy(update={"is_hookless": True}))

        assert result.warnings == []
        assert any("Hookless rim detected" in n for n in result.notes)

    def test_hooked_rim_not_capped(self, heavy_narrow_hookless_inputs):
        """Test the ceiling only applies to hookless rims."""
        inputs = heavy_narrow_hookless_inputs.model_copy(update={"is_hookless": False})
        result = calculate_tire_pressure(inputs)

        assert result.rear_psi > 72
        assert result.warnings == []

    def test_custom_ceiling(self, heavy_narrow_hookless_inputs):
        """Test the ceiling comes from the tuning constants."""
        tuning = TirePressureTuning(hookless_max_psi=65)
        result = calculate_tire_pressure(heavy_narrow_hookless_inputs, tuning)

        assert result.front_psi == 65
        assert result.rear_psi == 65
        assert "65 PSI" in result.warnings[0]


class TestDegenerateWidths:
    """Tests for tire/rim combinations whose formula width is not positive."""

    def test_zero_formula_width_does_not_raise(self):
        """Test 4mm tire on a 9mm rim returns a result with a warning."""
        inputs = TirePressureInputs(
            rider_weight=150,
            equipment_weight=10,
            tire_width_mm=4,
            rim_width_mm=9,
        )
        result = calculate_tire_pressure(inputs)

        assert result.effective_tire_width_mm == pytest.approx(1.0)
        assert result.front_psi >= result.minimum_psi
        assert result.rear_psi >= result.front_psi
        assert any("too narrow" in w for w in result.warnings)

    def test_negative_formula_width_stays_positive(self):
        """Test a combination that would go negative still yields real pressure."""
        inputs = TirePressureInputs(
            rider_weight=150, tire_width_mm=2, rim_width_mm=5, is_hookless=True
        )
        result = calculate_tire_pressure(inputs)

        assert result.effective_tire_width_mm > 0
        assert result.front_psi == 72
        assert result.rear_psi == 72


class TestRimStrikeFloor:
    """Tests for the minimum pressure floor."""

    def test_mtb_floor(self, mtb_tire_inputs):
        """Test a light rider on wide 29er tires is raised to 20 PSI."""
        result = calculate_tire_pressure(mtb_tire_inputs)

        assert result.front_psi == 20
        assert result.rear_psi == 20
        assert result.minimum_psi == 20
        assert len(result.warnings) == 2
        assert all("minimum of 20 PSI" in w for w in result.warnings)

    def test_road_floor(self):
        """Test a very light road setup is raised to the 30 PSI road floor."""
        inputs = TirePressureInputs(
            rider_weight=90,
            equipment_weight=15,
            tire_width_mm=32,
            rim_width_mm=25,
            casing=TireCasing.SUPPLE,
            surface=SurfaceType.GRAVEL_LOOSE,
            tire_type=TireType.TUBELESS,
        )
        result = calculate_tire_pressure(inputs)

        assert result.front_psi == 30
        assert result.rear_psi == 30
        assert result.minimum_psi == 30
        assert "rim strike" in result.warnings[0]

    def test_all_adjustment_notes(self, mtb_tire_inputs):
        """Test every non-baseline adjustment is explained."""
        result = calculate_tire_pressure(mtb_tire_inputs)
        joined = " ".join(result.notes)

        assert "rougher surfaces" in joined
        assert "Supple casings" in joined
        assert "Tubeless" in joined

    def test_results_never_below_floor(self, mtb_tire_inputs):
        """Test results stay at or above the floor across weights."""
        for weight in (60, 100, 150, 200, 250):
            result = calculate_tire_pressure(
                mtb_tire_inputs.model_copy(update={"rider_weight": weight})
            )
            assert result.front_psi >= result.minimum_psi
            assert result.rear_psi >= result.minimum_psi
