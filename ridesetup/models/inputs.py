"""
Input models for setup calculations.

These models carry the rider, tire, suspension and drivetrain data the
engines need. They are plain value records: the engines never look
anything up about users or bikes themselves.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class WeightUnit(str, Enum):
    """Unit for rider and equipment weights."""
    LB = "lb"
    KG = "kg"


class WheelDiameter(str, Enum):
    """Wheel size class."""
    ROAD_700C = "700c"
    GRAVEL_650B = "650b"
    MTB_29ER = "29er"


class TireCasing(str, Enum):
    """Tire casing construction quality."""
    STANDARD = "standard"          # 23-60 TPI, vulcanized
    SUPPLE = "supple"              # 60-120 TPI
    ULTRA_SUPPLE = "ultra-supple"  # 200+ TPI, cotton/silk, open tubular


class SurfaceType(str, Enum):
    """Riding surface, smoothest to roughest."""
    PAVEMENT = "pavement"
    POOR_PAVEMENT = "poor_pavement"
    MIXED = "mixed"
    GRAVEL_HARDPACK = "gravel_hardpack"
    GRAVEL_LOOSE = "gravel_loose"


class TireType(str, Enum):
    """How the tire is mounted."""
    TUBETYPE = "tubetype"
    TUBELESS = "tubeless"


class SpringCurve(str, Enum):
    """Spring characteristic of a fork or shock."""
    LINEAR = "linear"
    PROGRESSIVE = "progressive"
    DIGRESSIVE = "digressive"
    COIL = "coil"


class RidingDiscipline(str, Enum):
    """Riding discipline, from efficiency-focused to big-hit."""
    XC = "xc"
    TRAIL = "trail"
    ENDURO = "enduro"
    DH = "dh"
    CASUAL = "casual"


class RiderLoad(BaseModel):
    """
    Rider plus carried weight.

    `equipment_weight` is the bike for tire calculations and riding gear
    (pack, water, armour) for suspension calculations. Both weights use
    `weight_unit`.
    """
    rider_weight: float = Field(..., gt=0, description="Rider body weight")
    equipment_weight: float = Field(
        default=0.0,
        ge=0,
        description="Bike weight (tire calc) or riding gear weight (suspension calc)",
    )
    weight_unit: WeightUnit = Field(default=WeightUnit.LB, description="Unit for both weights")

    model_config = {"frozen": True}

    @property
    def total_weight(self) -> float:
        """Total weight in the input unit."""
        return self.rider_weight + self.equipment_weight

    def total_weight_lb(self) -> float:
        """Total weight in pounds."""
        from ridesetup.physics.units import kg_to_lb

        if self.weight_unit == WeightUnit.LB:
            return self.total_weight
        return kg_to_lb(self.total_weight)

    def total_weight_kg(self) -> float:
        """Total weight in kilograms."""
        from ridesetup.physics.units import lb_to_kg

        if self.weight_unit == WeightUnit.KG:
            return self.total_weight
        return lb_to_kg(self.total_weight)


class TirePressureInputs(RiderLoad):
    """Rider load plus tire and rim setup for the pressure calculation."""
    tire_width_mm: float = Field(..., gt=0, description="Labeled tire width in mm")
    rim_width_mm: float = Field(..., gt=0, description="Internal rim width in mm")
    wheel_diameter: WheelDiameter = Field(default=WheelDiameter.ROAD_700C)
    casing: TireCasing = Field(default=TireCasing.STANDARD)
    surface: SurfaceType = Field(default=SurfaceType.PAVEMENT)
    tire_type: TireType = Field(default=TireType.TUBETYPE)
    is_hookless: bool = Field(default=False, description="Hookless rim bead profile")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "rider_weight": 165,
                "equipment_weight": 19,
                "weight_unit": "lb",
                "tire_width_mm": 28,
                "rim_width_mm": 21,
                "wheel_diameter": "700c",
                "casing": "standard",
                "surface": "pavement",
                "tire_type": "tubeless",
                "is_hookless": False,
            }
        },
    }


class PressureChartPoint(BaseModel):
    """One row of a manufacturer's air pressure chart."""
    rider_weight_lb: float = Field(..., gt=0)
    recommended_psi: float = Field(..., gt=0)
    sag_percent: float = Field(..., gt=0, le=100)

    model_config = {"frozen": True}


class SuspensionSpec(BaseModel):
    """
    Mechanical spec of a fork or rear shock.

    For shocks, `travel_mm` is the shock stroke and
    `stanchion_diameter_mm` the damper shaft diameter. Coil units carry
    zero max pressure and no air volume.
    """
    brand: str = Field(..., description="Manufacturer (lookup only)")
    model: str = Field(..., description="Model name (lookup only)")
    travel_mm: float = Field(..., gt=0, description="Travel (fork) or stroke (shock) in mm")
    stanchion_diameter_mm: float = Field(..., gt=0, description="Stanchion or damper shaft diameter")
    air_chamber_volume_cc: Optional[float] = Field(default=None, ge=0)
    baseline_pressure_chart: Optional[list[PressureChartPoint]] = Field(default=None)
    max_pressure_psi: float = Field(..., ge=0, description="Manufacturer max air pressure (hard ceiling)")
    recommended_sag_percent: float = Field(default=25.0, gt=0, le=60)
    spring_curve: SpringCurve = Field(default=SpringCurve.PROGRESSIVE)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_coil(self) -> "SuspensionSpec":
        """Coil units have no air spring."""
        if self.spring_curve == SpringCurve.COIL:
            if self.max_pressure_psi != 0:
                raise ValueError("coil units must have max_pressure_psi == 0")
            if self.air_chamber_volume_cc:
                raise ValueError("coil units have no air chamber volume")
        return self

    @property
    def name(self) -> str:
        return f"{self.brand} {self.model}"

    @property
    def is_coil(self) -> bool:
        """Whether air pressure calculations do not apply."""
        return self.spring_curve == SpringCurve.COIL or self.max_pressure_psi == 0


class SuspensionInputs(RiderLoad):
    """
    Rider load plus suspension hardware and riding discipline.

    At least one of fork/shock is needed for a recommendation; without
    either the engine returns an InsufficientInput outcome rather than
    failing validation, so forms can render a "not enough data" state.
    """
    fork: Optional[SuspensionSpec] = Field(default=None)
    shock: Optional[SuspensionSpec] = Field(default=None)
    discipline: RidingDiscipline = Field(default=RidingDiscipline.TRAIL)
    target_sag_percent: Optional[float] = Field(
        default=None,
        gt=0,
        le=60,
        description="Explicit sag target. If None, the discipline default is used.",
    )

    model_config = {"frozen": True}


class GearSetup(BaseModel):
    """Chainrings, cassette cogs and wheel size for a drivetrain."""
    chainrings: list[int] = Field(default_factory=list, description="Chainring tooth counts")
    cogs: list[int] = Field(default_factory=list, description="Cassette cog tooth counts")
    wheel_circumference_mm: float = Field(
        default=2100.0,
        gt=0,
        description="Rolling circumference; 2100 mm is a 700x25c wheel",
    )

    model_config = {"frozen": True}

    @field_validator("chainrings", "cogs")
    @classmethod
    def validate_teeth(cls, v: list[int]) -> list[int]:
        """Tooth counts must be positive."""
        if any(t <= 0 for t in v):
            raise ValueError("tooth counts must be positive")
        return v

    @classmethod
    def from_strings(
        cls,
        chainrings: str,
        cogs: str,
        wheel_circumference_mm: float = 2100.0,
    ) -> "GearSetup":
        """Build a setup from drivetrain notation such as "50/34" and "11-34"."""
        from ridesetup.physics.gearing import parse_chainrings, parse_cogs

        return cls(
            chainrings=parse_chainrings(chainrings),
            cogs=parse_cogs(cogs),
            wheel_circumference_mm=wheel_circumference_mm,
        )
