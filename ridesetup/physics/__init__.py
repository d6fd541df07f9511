"""
Setup calculation engines.

Pure, stateless functions for:
- Tire pressure from load, tire/rim geometry, casing, surface and mounting
- Suspension air pressure, sag and rebound baseline
- Gear ratios, road speed and drivetrain comparison

All engines consume plain input records and return immutable results.
They hold no state between calls and are safe to call concurrently.
"""

from ridesetup.physics.units import ureg, Q_, lb_to_kg, kg_to_lb, mm_to_inches, psi_to_bar
from ridesetup.physics.lookup import (
    FactorTable,
    FactorLookup,
    ClampResult,
    clamp_max,
    clamp_min,
    round_half_up,
    round_int,
)
from ridesetup.physics.tire_pressure import (
    calculate_tire_pressure,
    effective_tire_width,
    minimum_pressure_psi,
    split_wheel_loads,
    WheelLoads,
)
from ridesetup.physics.suspension import (
    calculate_suspension_setup,
    estimate_rebound_clicks,
    target_sag_percent,
)
from ridesetup.physics.gearing import (
    calculate_gear_ratios,
    compare_setups,
    parse_chainrings,
    parse_cogs,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "lb_to_kg",
    "kg_to_lb",
    "mm_to_inches",
    "psi_to_bar",
    # Lookup
    "FactorTable",
    "FactorLookup",
    "ClampResult",
    "clamp_max",
    "clamp_min",
    "round_half_up",
    "round_int",
    # Tire pressure
    "calculate_tire_pressure",
    "effective_tire_width",
    "minimum_pressure_psi",
    "split_wheel_loads",
    "WheelLoads",
    # Suspension
    "calculate_suspension_setup",
    "estimate_rebound_clicks",
    "target_sag_percent",
    # Gearing
    "calculate_gear_ratios",
    "compare_setups",
    "parse_chainrings",
    "parse_cogs",
]
