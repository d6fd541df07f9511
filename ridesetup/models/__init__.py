"""
Pydantic models for setup calculator inputs, outputs and tuning.
"""

from ridesetup.models.inputs import (
    WeightUnit,
    WheelDiameter,
    TireCasing,
    SurfaceType,
    TireType,
    SpringCurve,
    RidingDiscipline,
    RiderLoad,
    TirePressureInputs,
    PressureChartPoint,
    SuspensionSpec,
    SuspensionInputs,
    GearSetup,
)
from ridesetup.models.outputs import (
    Accuracy,
    PressureResult,
    SuspensionResult,
    InsufficientInput,
    SuspensionOutcome,
    GearRatio,
    GearRangeComparison,
    ComparisonResult,
)
from ridesetup.models.settings import (
    TirePressureTuning,
    SuspensionTuning,
    EngineSettings,
)

__all__ = [
    "WeightUnit",
    "WheelDiameter",
    "TireCasing",
    "SurfaceType",
    "TireType",
    "SpringCurve",
    "RidingDiscipline",
    "RiderLoad",
    "TirePressureInputs",
    "PressureChartPoint",
    "SuspensionSpec",
    "SuspensionInputs",
    "GearSetup",
    "Accuracy",
    "PressureResult",
    "SuspensionResult",
    "InsufficientInput",
    "SuspensionOutcome",
    "GearRatio",
    "GearRangeComparison",
    "ComparisonResult",
    "TirePressureTuning",
    "SuspensionTuning",
    "EngineSettings",
]
