"""
Pytest configuration and shared fixtures.
"""

import pytest

from ridesetup.catalog.suspension import FORK_DATABASE, SHOCK_DATABASE
from ridesetup.models.inputs import (
    GearSetup,
    RidingDiscipline,
    SpringCurve,
    SurfaceType,
    SuspensionInputs,
    SuspensionSpec,
    TireCasing,
    TirePressureInputs,
    TireType,
    WheelDiameter,
)


@pytest.fixture
def road_tire_inputs() -> TirePressureInputs:
    """165 lb rider on a 19 lb road bike, 28mm tubeless on a 21mm rim."""
    return TirePressureInputs(
        rider_weight=165,
        equipment_weight=19,
        tire_width_mm=28,
        rim_width_mm=21,
        wheel_diameter=WheelDiameter.ROAD_700C,
        casing=TireCasing.STANDARD,
        surface=SurfaceType.PAVEMENT,
        tire_type=TireType.TUBELESS,
        is_hookless=False,
    )


@pytest.fixture
def heavy_narrow_hookless_inputs() -> TirePressureInputs:
    """Heavy rider on narrow tires and a hookless rim: raw pressure exceeds 72 PSI."""
    return TirePressureInputs(
        rider_weight=250,
        equipment_weight=20,
        tire_width_mm=23,
        rim_width_mm=19,
        wheel_diameter=WheelDiameter.ROAD_700C,
        casing=TireCasing.STANDARD,
        surface=SurfaceType.PAVEMENT,
        tire_type=TireType.TUBETYPE,
        is_hookless=True,
    )


@pytest.fixture
def mtb_tire_inputs() -> TirePressureInputs:
    """Light rider on wide 29er tires over loose gravel."""
    return TirePressureInputs(
        rider_weight=120,
        equipment_weight=30,
        tire_width_mm=60,
        rim_width_mm=30,
        wheel_diameter=WheelDiameter.MTB_29ER,
        casing=TireCasing.ULTRA_SUPPLE,
        surface=SurfaceType.GRAVEL_LOOSE,
        tire_type=TireType.TUBELESS,
    )


@pytest.fixture
def fox34() -> SuspensionSpec:
    """Fox 34 Float: 34mm stanchions, 140mm travel, 140 PSI max."""
    return FORK_DATABASE["Fox 34 Float"]


@pytest.fixture
def coil_shock() -> SuspensionSpec:
    """Fox DHX2 coil shock."""
    return SHOCK_DATABASE["Fox DHX2"]


@pytest.fixture
def trail_inputs(fox34) -> SuspensionInputs:
    """180 lb rider with 5 lb of gear on a Fox 34, trail riding."""
    return SuspensionInputs(
        rider_weight=180,
        equipment_weight=5,
        fork=fox34,
        discipline=RidingDiscipline.TRAIL,
    )


@pytest.fixture
def charted_fork() -> SuspensionSpec:
    """A fork with both a known air volume and a pressure chart."""
    return SuspensionSpec(
        brand="Test",
        model="Charted 36",
        travel_mm=160,
        stanchion_diameter_mm=36,
        air_chamber_volume_cc=410,
        baseline_pressure_chart=[
            {"rider_weight_lb": 150, "recommended_psi": 70, "sag_percent": 20},
            {"rider_weight_lb": 180, "recommended_psi": 84, "sag_percent": 20},
        ],
        max_pressure_psi=140,
        recommended_sag_percent=20,
        spring_curve=SpringCurve.PROGRESSIVE,
    )


@pytest.fixture
def road_gearing() -> GearSetup:
    """Compact road drivetrain: 50/34 with an 11-34 cassette."""
    return GearSetup(
        chainrings=[50, 34],
        cogs=[11, 12, 13, 14, 15, 17, 19, 21, 24, 27, 30, 34],
        wheel_circumference_mm=2100,
    )
