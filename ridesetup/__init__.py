"""
Ride Setup Recommender (ridesetup)

Setup recommendation engine for a cyclist's garage: tire pressure,
suspension baseline and gear ratios from physical and mechanical inputs.

WARNING: Recommendations are starting points. Always respect the limits
printed on your rims, tires and suspension.

Usage:
    python -m ridesetup make-example
    python -m ridesetup tire-pressure --input tire.json
    python -m ridesetup suspension --input suspension.json --fork "Fox 36 Float"
    python -m ridesetup gears --chainrings 50/34 --cogs 11-34
    python -m ridesetup serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Ride Setup Project"

from ridesetup.models.inputs import (
    TirePressureInputs,
    SuspensionInputs,
    SuspensionSpec,
    GearSetup,
)
from ridesetup.models.outputs import (
    PressureResult,
    SuspensionResult,
    InsufficientInput,
    GearRatio,
    ComparisonResult,
)
from ridesetup.physics.tire_pressure import calculate_tire_pressure
from ridesetup.physics.suspension import calculate_suspension_setup
from ridesetup.physics.gearing import calculate_gear_ratios, compare_setups

__all__ = [
    "TirePressureInputs",
    "SuspensionInputs",
    "SuspensionSpec",
    "GearSetup",
    "PressureResult",
    "SuspensionResult",
    "InsufficientInput",
    "GearRatio",
    "ComparisonResult",
    "calculate_tire_pressure",
    "calculate_suspension_setup",
    "calculate_gear_ratios",
    "compare_setups",
]
