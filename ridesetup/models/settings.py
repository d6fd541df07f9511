"""
Tuning constants for the calculation engines.

The floors, ceilings and click heuristics below are product-tuning
choices rather than physical laws, so they live in models that can be
overridden from a JSON settings file instead of being buried in the
engine code.
"""

from pydantic import BaseModel, Field, model_validator


class TirePressureTuning(BaseModel):
    """Constants for the tire pressure model."""
    front_weight_fraction: float = Field(
        default=0.45,
        gt=0,
        lt=1,
        description="Share of system weight on the front wheel (rear gets the rest)",
    )
    pressure_constant: float = Field(
        default=1.56,
        gt=0,
        description="PSI * inch per kg of wheel load, calibrated for 15% tire drop",
    )
    min_effective_width_mm: float = Field(
        default=1.0,
        gt=0,
        description="Lower bound on the rim-adjusted tire width",
    )
    rim_baseline_mm: float = Field(default=19.0, gt=0, description="Rim width the labeled tire width assumes")
    rim_width_gain: float = Field(
        default=0.4,
        ge=0,
        description="Extra tire width per mm of rim width over the baseline",
    )
    hookless_max_psi: float = Field(default=72.0, gt=0, description="Hookless rim ceiling (~5 bar)")
    road_min_psi: float = Field(default=30.0, gt=0)
    allroad_min_psi: float = Field(default=24.0, gt=0)
    mtb_min_psi: float = Field(default=20.0, gt=0)
    road_max_width_mm: float = Field(
        default=35.0,
        gt=0,
        description="700c tires narrower than this use the road floor",
    )
    mtb_min_width_mm: float = Field(
        default=50.0,
        gt=0,
        description="Tires at least this wide use the MTB floor",
    )

    model_config = {"frozen": True}

    @property
    def rear_weight_fraction(self) -> float:
        return 1.0 - self.front_weight_fraction

    @model_validator(mode="after")
    def check_floors(self) -> "TirePressureTuning":
        """Every floor must sit below the hookless ceiling."""
        highest_floor = max(self.road_min_psi, self.allroad_min_psi, self.mtb_min_psi)
        if highest_floor > self.hookless_max_psi:
            raise ValueError("minimum pressures must not exceed hookless_max_psi")
        return self


class SuspensionTuning(BaseModel):
    """Constants for the suspension setup model."""
    default_pressure_ratio: float = Field(
        default=1.5,
        gt=0,
        description="PSI per kg for stanchion diameters not in the table",
    )
    baseline_sag_percent: float = Field(
        default=25.0,
        gt=0,
        description="Sag the pressure ratios were calibrated at",
    )
    min_pressure_psi: float = Field(default=40.0, ge=0)
    min_pressure_per_kg: float = Field(default=0.8, ge=0)
    rebound_base_clicks: float = Field(default=8.0)
    rebound_baseline_weight_lb: float = Field(default=160.0, gt=0)
    rebound_lb_per_click: float = Field(default=20.0, gt=0)
    rebound_min_clicks: int = Field(default=1, ge=1)
    rebound_max_clicks: int = Field(default=20, ge=1, le=20)
    shock_compression_clicks: int = Field(default=6, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_rebound_range(self) -> "SuspensionTuning":
        """Rebound range must be non-empty."""
        if self.rebound_min_clicks > self.rebound_max_clicks:
            raise ValueError("rebound_min_clicks must be <= rebound_max_clicks")
        return self


class EngineSettings(BaseModel):
    """All tunable engine constants, loadable from one JSON document."""
    tire: TirePressureTuning = Field(default_factory=TirePressureTuning)
    suspension: SuspensionTuning = Field(default_factory=SuspensionTuning)

    model_config = {"frozen": True}
