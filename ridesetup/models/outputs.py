"""
Output models for setup recommendations.

Every result is an immutable record owned by the caller. Notes explain
which adjustments fired; warnings are reserved for safety clamps.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class Accuracy(str, Enum):
    """How much real spec data backed a suspension recommendation."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def downgraded(self) -> "Accuracy":
        """One tier lower, bottoming out at LOW."""
        if self == Accuracy.HIGH:
            return Accuracy.MEDIUM
        return Accuracy.LOW


class PressureResult(BaseModel):
    """
    Front/rear tire pressure recommendation.

    PSI values are rounded once, at output. Bar values are informational.
    """
    front_psi: int = Field(..., ge=0, description="Recommended front pressure (PSI)")
    rear_psi: int = Field(..., ge=0, description="Recommended rear pressure (PSI)")
    front_bar: float = Field(..., ge=0, description="Front pressure in bar (2 dp)")
    rear_bar: float = Field(..., ge=0, description="Rear pressure in bar (2 dp)")
    effective_tire_width_mm: float = Field(
        ...,
        description="Tire width adjusted for the internal rim width",
    )
    minimum_psi: int = Field(..., ge=0, description="Rim-strike floor applied to this setup")
    notes: list[str] = Field(default_factory=list, description="Explanations of applied adjustments")
    warnings: list[str] = Field(default_factory=list, description="Safety clamps that changed the result")

    model_config = {"frozen": True}


class SuspensionResult(BaseModel):
    """A baseline air pressure, sag and damping recommendation."""
    status: Literal["ok"] = "ok"
    component: Literal["fork", "shock"] = Field(..., description="Which unit the numbers apply to")
    air_pressure_psi: Optional[int] = Field(
        default=None,
        ge=0,
        description="Recommended air pressure; None for coil units",
    )
    target_sag_percent: float = Field(..., gt=0)
    sag_mm: int = Field(..., ge=0, description="Target sag as measured travel")
    rebound_clicks: int = Field(..., ge=1, le=20, description="Clicks from closed (slowest)")
    compression_clicks: Optional[int] = Field(default=None, ge=0)
    volume_spacers: Optional[int] = Field(default=None, ge=0)
    notes: list[str] = Field(default_factory=list)
    accuracy: Accuracy = Field(...)

    model_config = {"frozen": True}


class InsufficientInput(BaseModel):
    """Returned instead of a recommendation when the inputs cannot support one."""
    status: Literal["insufficient_input"] = "insufficient_input"
    reason: str = Field(..., description="What was missing")
    notes: list[str] = Field(default_factory=list)
    accuracy: Accuracy = Accuracy.LOW

    model_config = {"frozen": True}


SuspensionOutcome = Annotated[
    Union[SuspensionResult, InsufficientInput],
    Field(discriminator="status"),
]


class GearRatio(BaseModel):
    """One chainring/cog combination."""
    gear: int = Field(..., ge=1, description="Gear number, 1 = easiest")
    chainring: int = Field(..., gt=0)
    cog: int = Field(..., gt=0)
    ratio: float = Field(..., gt=0, description="Chainring / cog, 2 dp")
    speed_kmh: float = Field(..., ge=0, description="Road speed at the requested cadence, 1 dp")
    speed_mph: float = Field(..., ge=0, description="Road speed at the requested cadence, 1 dp")

    model_config = {"frozen": True}


class GearRangeComparison(BaseModel):
    """Hardest/easiest ratio spread before and after a change."""
    current: float = Field(default=0.0, ge=0)
    proposed: float = Field(default=0.0, ge=0)
    improvement: float = Field(default=0.0, description="Percent change in range")

    model_config = {"frozen": True}


class ComparisonResult(BaseModel):
    """
    Difference between a current and a proposed drivetrain.

    Sign convention: positive easiest-gear improvement means an easier
    climbing gear; positive hardest-gear improvement means a faster top end.
    """
    easiest_gear_improvement: float = Field(default=0.0)
    hardest_gear_improvement: float = Field(default=0.0)
    gear_range: GearRangeComparison = Field(default_factory=GearRangeComparison)

    model_config = {"frozen": True}

    @property
    def is_neutral(self) -> bool:
        """True for the zero-delta result returned when either side is empty."""
        return (
            self.easiest_gear_improvement == 0
            and self.hardest_gear_improvement == 0
            and self.gear_range.current == 0
            and self.gear_range.proposed == 0
        )
