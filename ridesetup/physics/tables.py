"""
Constant lookup tables for the setup engines.

All tables are built once at import and never mutated. Each has a
documented default for keys it does not cover.

Tire factors are multipliers on the base pressure (1.0 = baseline).
Suspension ratios are PSI per kg of rider+gear mass at 25% sag.
"""

from types import MappingProxyType

from ridesetup.models.inputs import (
    RidingDiscipline,
    SurfaceType,
    TireCasing,
    TireType,
)
from ridesetup.physics.lookup import FactorTable

# --- Tire pressure ---

# Supple casings deform more easily and need less pressure
CASING_FACTORS = FactorTable(
    "casing",
    {
        TireCasing.STANDARD: 1.0,
        TireCasing.SUPPLE: 0.95,
        TireCasing.ULTRA_SUPPLE: 0.90,
    },
    default=1.0,
)

# Rougher surfaces want lower pressure to cut vibration (impedance) losses
SURFACE_FACTORS = FactorTable(
    "surface",
    {
        SurfaceType.PAVEMENT: 1.0,
        SurfaceType.POOR_PAVEMENT: 0.95,
        SurfaceType.MIXED: 0.92,
        SurfaceType.GRAVEL_HARDPACK: 0.85,
        SurfaceType.GRAVEL_LOOSE: 0.78,
    },
    default=1.0,
)

# Tubeless cannot pinch flat, so it can run lower
TIRE_TYPE_FACTORS = FactorTable(
    "tire type",
    {
        TireType.TUBETYPE: 1.0,
        TireType.TUBELESS: 0.90,
    },
    default=1.0,
)

# --- Suspension ---

# Larger stanchions hold more air, so need less pressure for the same sag
STANCHION_PRESSURE_RATIOS = FactorTable(
    "stanchion diameter",
    {
        30: 1.8,  # rare, very old
        32: 1.6,  # XC
        34: 1.4,  # trail
        35: 1.3,
        36: 1.2,  # enduro
        38: 1.1,
        40: 1.0,  # DH
    },
    default=1.5,
)

# More travel needs slightly less pressure; 140mm is the baseline
TRAVEL_FACTORS = FactorTable(
    "travel",
    {
        80: 1.15,
        100: 1.10,
        120: 1.05,
        130: 1.02,
        140: 1.00,
        150: 0.98,
        160: 0.95,
        170: 0.92,
        180: 0.90,
        200: 0.85,
    },
    default=1.0,
)

# XC runs firmer for efficiency; DH runs softer for big hits
DISCIPLINE_FACTORS = FactorTable(
    "riding discipline",
    {
        RidingDiscipline.XC: 1.10,
        RidingDiscipline.TRAIL: 1.00,
        RidingDiscipline.ENDURO: 0.95,
        RidingDiscipline.DH: 0.90,
        RidingDiscipline.CASUAL: 1.05,
    },
    default=1.0,
)

DEFAULT_TARGET_SAG_PERCENT = 25.0

TARGET_SAG_PERCENT = MappingProxyType({
    RidingDiscipline.XC: 20.0,
    RidingDiscipline.TRAIL: 25.0,
    RidingDiscipline.ENDURO: 30.0,
    RidingDiscipline.DH: 30.0,
    RidingDiscipline.CASUAL: 22.0,
})

# Suggested volume spacers (tokens) when the air chamber volume is known
VOLUME_SPACERS = MappingProxyType({
    RidingDiscipline.XC: 0,
    RidingDiscipline.TRAIL: 1,
    RidingDiscipline.ENDURO: 2,
    RidingDiscipline.DH: 2,
    RidingDiscipline.CASUAL: 0,
})
