"""
Fork and shock spec catalog.

Approximate default specs for common suspension units, keyed by
"<brand> <model>". Used to fill SuspensionSpec inputs when a rider picks
a known product instead of typing numbers.

NOTES:
- Fork `travel_mm` is a common configuration; most forks ship in several
  travels and can be overridden on lookup.
- Shock `travel_mm` is the shock STROKE, not rear wheel travel, and
  `stanchion_diameter_mm` is the damper shaft diameter.
- `air_chamber_volume_cc` is ESTIMATED from stanchion size, travel and
  architecture; manufacturers do not publish it.
- Coil shocks carry no air volume and zero max pressure.
"""

from types import MappingProxyType
from typing import Optional

from ridesetup.models.inputs import SpringCurve, SuspensionSpec

LINEAR = SpringCurve.LINEAR
PROGRESSIVE = SpringCurve.PROGRESSIVE
COIL = SpringCurve.COIL


def _spec(brand, model, travel, diameter, volume, max_psi, sag, curve=PROGRESSIVE) -> SuspensionSpec:
    return SuspensionSpec(
        brand=brand,
        model=model,
        travel_mm=travel,
        stanchion_diameter_mm=diameter,
        air_chamber_volume_cc=volume,
        max_pressure_psi=max_psi,
        recommended_sag_percent=sag,
        spring_curve=curve,
    )


_FORKS = [
    # Fox
    _spec("Fox", "32 Step-Cast Float", 100, 32, 280, 250, 15, LINEAR),
    _spec("Fox", "34 Float", 140, 34, 350, 140, 20),
    _spec("Fox", "34 Step-Cast Float", 120, 34, 320, 140, 20),
    _spec("Fox", "36 Float", 160, 36, 410, 140, 20),
    _spec("Fox", "38 Float", 170, 38, 460, 140, 20),
    _spec("Fox", "40 Float", 203, 40, 550, 140, 25),
    # RockShox
    _spec("RockShox", "SID SL Ultimate", 100, 32, 290, 240, 15, LINEAR),
    _spec("RockShox", "SID Ultimate (35mm)", 120, 35, 360, 260, 20),
    _spec("RockShox", "Pike Ultimate", 140, 35, 380, 279, 20),
    _spec("RockShox", "Lyrik Ultimate", 160, 35, 420, 279, 20),
    _spec("RockShox", "ZEB Ultimate", 170, 38, 480, 270, 20),
    _spec("RockShox", "BoXXer Ultimate", 200, 38, 520, 250, 25),
    # Marzocchi (Fox chassis)
    _spec("Marzocchi", "Bomber Z2", 140, 34, 360, 140, 20),
    _spec("Marzocchi", "Bomber Z1", 170, 36, 415, 140, 20),
    _spec("Marzocchi", "Bomber 58", 203, 40, 550, 140, 25),
    # Öhlins
    _spec("Öhlins", "RXF36 M.2 Air", 160, 36, 400, 175, 20),
    _spec("Öhlins", "RXF38 M.2 Air", 170, 38, 470, 175, 20),
    _spec("Öhlins", "DH38 M.1 Air", 200, 38, 530, 175, 25),
    # Cane Creek
    _spec("Cane Creek", "Helm MKII Air", 160, 35, 400, 150, 20),
    # DVO
    _spec("DVO", "Sapphire D1", 140, 34, 370, 180, 20),
    _spec("DVO", "Onyx SC D1", 170, 36, 430, 180, 20),
    # Manitou (low-pressure Dorado air)
    _spec("Manitou", "Mattoc Pro", 140, 34, 400, 120, 20),
    _spec("Manitou", "Mezzer Pro", 160, 37, 500, 120, 20),
]

_SHOCKS = [
    # Fox
    _spec("Fox", "Float SL", 45, 9, 140, 350, 25, LINEAR),
    _spec("Fox", "Float DPS", 50, 9, 160, 350, 25),
    _spec("Fox", "Float X", 55, 12.7, 220, 350, 30),
    _spec("Fox", "Float X2", 65, 9, 280, 300, 30),
    # RockShox
    _spec("RockShox", "SIDLuxe Ultimate", 45, 10, 150, 325, 25, LINEAR),
    _spec("RockShox", "Deluxe Ultimate", 50, 10, 170, 325, 30),
    _spec("RockShox", "Super Deluxe Ultimate", 65, 10, 270, 325, 30),
    _spec("RockShox", "Vivid Ultimate", 65, 10, 320, 275, 35),
    # Others
    _spec("Marzocchi", "Bomber Air", 55, 12.7, 225, 350, 30),
    _spec("Öhlins", "TTXAir 2", 60, 12.7, 250, 300, 30),
    _spec("Cane Creek", "Kitsuma Air", 65, 9.5, 290, 300, 30),
    _spec("DVO", "Topaz 2", 55, 10, 240, 300, 30),
    _spec("Manitou", "Mara Pro", 55, 12.7, 260, 300, 30),
    # Coil
    _spec("Fox", "DHX2", 65, 9, None, 0, 30, COIL),
    _spec("RockShox", "Super Deluxe Coil Ultimate", 65, 10, None, 0, 30, COIL),
    _spec("Öhlins", "TTX22m.2", 65, 12.7, None, 0, 30, COIL),
]

FORK_DATABASE: MappingProxyType = MappingProxyType({spec.name: spec for spec in _FORKS})
SHOCK_DATABASE: MappingProxyType = MappingProxyType({spec.name: spec for spec in _SHOCKS})


def _lookup(database, brand: str, model: str, travel_mm: Optional[float]) -> Optional[SuspensionSpec]:
    spec = database.get(f"{brand} {model}")
    if spec is None:
        return None
    if travel_mm and travel_mm != spec.travel_mm:
        return spec.model_copy(update={"travel_mm": travel_mm})
    return spec


def get_fork_specs(brand: str, model: str, travel_mm: Optional[float] = None) -> Optional[SuspensionSpec]:
    """
    Look up a fork, optionally overriding its travel.

    Returns:
        The catalog spec (a copy when travel is overridden), or None
    """
    return _lookup(FORK_DATABASE, brand, model, travel_mm)


def get_shock_specs(brand: str, model: str, travel_mm: Optional[float] = None) -> Optional[SuspensionSpec]:
    """Look up a shock, optionally overriding its stroke."""
    return _lookup(SHOCK_DATABASE, brand, model, travel_mm)


def find_spec(name: str, database) -> Optional[SuspensionSpec]:
    """Case-insensitive lookup by full "<brand> <model>" name."""
    wanted = name.strip().lower()
    for key, spec in database.items():
        if key.lower() == wanted:
            return spec
    return None


def list_forks() -> list[str]:
    """Names of all catalog forks."""
    return sorted(FORK_DATABASE)


def list_shocks() -> list[str]:
    """Names of all catalog shocks."""
    return sorted(SHOCK_DATABASE)
