"""
Suspension setup model.

Turns rider+gear mass, fork/shock hardware and riding discipline into a
baseline air pressure, sag target and rebound setting.

MODEL:
- Pressure = mass_kg * stanchion_ratio * travel_factor * discipline_factor
- Normalised from the 25% sag the ratios assume to the target sag
- Safety floor max(40, 0.8 * mass_kg), manufacturer max as a hard ceiling
- Rebound clicks linear in rider weight around a 160 lb baseline

ASSUMPTIONS:
- Stanchion/shaft diameter stands in for air volume
- Table lookups are exact; unlisted sizes fall back to neutral defaults
  and lower the accuracy tier
- These are starting points for a sag check, not final settings
"""

import logging
import math
from typing import Optional, Union

from ridesetup.models.inputs import (
    RidingDiscipline,
    SpringCurve,
    SuspensionInputs,
    SuspensionSpec,
)
from ridesetup.models.outputs import Accuracy, InsufficientInput, SuspensionResult
from ridesetup.models.settings import SuspensionTuning
from ridesetup.physics.lookup import clamp_max, clamp_min, round_int
from ridesetup.physics.tables import (
    DEFAULT_TARGET_SAG_PERCENT,
    DISCIPLINE_FACTORS,
    STANCHION_PRESSURE_RATIOS,
    TARGET_SAG_PERCENT,
    TRAVEL_FACTORS,
    VOLUME_SPACERS,
)

logger = logging.getLogger(__name__)


def target_sag_percent(
    discipline: RidingDiscipline,
    override: Optional[float] = None,
) -> float:
    """Explicit sag target if given, else the discipline default."""
    if override:
        return override
    return TARGET_SAG_PERCENT.get(discipline, DEFAULT_TARGET_SAG_PERCENT)


def minimum_air_pressure(mass_kg: float, tuning: SuspensionTuning) -> float:
    """Safety floor: max(40 PSI, 0.8 PSI per kg)."""
    return max(tuning.min_pressure_psi, mass_kg * tuning.min_pressure_per_kg)


def round_within(pressure: float, floor: float, ceiling: float) -> int:
    """
    Round a clamped pressure to whole PSI without leaving [floor, ceiling].

    Half-up rounding alone can drop a fractional floor (40.28 -> 40), so
    the result is pushed up to ceil(floor) and down to floor(ceiling).
    The ceiling wins when the two cross.
    """
    psi = max(round_int(pressure), math.ceil(floor))
    return min(psi, math.floor(ceiling))


def estimate_rebound_clicks(weight_lb: float, tuning: Optional[SuspensionTuning] = None) -> int:
    """
    Rebound clicks from closed.

    Linear estimate: 8 clicks at 160 lb, one more per 20 lb, clamped to
    the dial range [1, 20]. Heavier riders need more rebound damping.
    """
    tuning = tuning or SuspensionTuning()
    raw = tuning.rebound_base_clicks + (
        weight_lb - tuning.rebound_baseline_weight_lb
    ) / tuning.rebound_lb_per_click
    clicks = round_int(raw)
    return max(tuning.rebound_min_clicks, min(tuning.rebound_max_clicks, clicks))


def assess_accuracy(spec: SuspensionSpec) -> Accuracy:
    """
    Data-availability tier for a spec.

    HIGH needs both a known air volume and a manufacturer pressure chart;
    MEDIUM needs diameter and travel.
    """
    if spec.air_chamber_volume_cc and spec.baseline_pressure_chart:
        return Accuracy.HIGH
    if spec.stanchion_diameter_mm and spec.travel_mm:
        return Accuracy.MEDIUM
    return Accuracy.LOW


def calculate_suspension_setup(
    inputs: SuspensionInputs,
    tuning: Optional[SuspensionTuning] = None,
) -> Union[SuspensionResult, InsufficientInput]:
    """
    Recommend a baseline suspension setup.

    Uses the fork when one is given, otherwise the shock.

    Args:
        inputs: Rider/gear weight, fork and/or shock spec, discipline
        tuning: Model constants; defaults when None

    Returns:
        SuspensionResult, or InsufficientInput when neither a fork nor a
        shock spec was supplied
    """
    tuning = tuning or SuspensionTuning()

    if inputs.fork is not None:
        spec, component = inputs.fork, "fork"
    elif inputs.shock is not None:
        spec, component = inputs.shock, "shock"
    else:
        return InsufficientInput(
            reason="No suspension specifications provided",
            notes=["Add a fork or rear shock to get a setup recommendation."],
        )

    notes: list[str] = []
    mass_kg = inputs.total_weight_kg()
    weight_lb = inputs.total_weight_lb()

    ratio = STANCHION_PRESSURE_RATIOS.lookup(spec.stanchion_diameter_mm)
    travel = TRAVEL_FACTORS.lookup(spec.travel_mm)
    style = DISCIPLINE_FACTORS.lookup(inputs.discipline)

    ratio_value = ratio.value if ratio.matched else tuning.default_pressure_ratio
    fallbacks = [lookup for lookup in (ratio, travel, style) if not lookup.matched]
    if not ratio.matched:
        logger.warning(
            "no pressure ratio for %gmm %s; using default %.2f",
            spec.stanchion_diameter_mm, component, ratio_value,
        )
    if not travel.matched:
        logger.warning("no travel factor for %gmm; using 1.0", spec.travel_mm)

    sag = target_sag_percent(inputs.discipline, inputs.target_sag_percent)
    sag_mm = round_int(spec.travel_mm * sag / 100)

    air_pressure: Optional[int] = None
    if spec.is_coil:
        notes.append(
            "Coil spring: air pressure does not apply. Choose a spring rate that "
            f"gives {sag:g}% sag ({sag_mm}mm)."
        )
    else:
        pressure = mass_kg * ratio_value * travel.value * style.value
        pressure *= tuning.baseline_sag_percent / sag

        logger.debug(
            "%s pressure: mass=%.1fkg ratio=%.2f travel=%.2f style=%.2f sag=%g%% -> %.1f PSI",
            component, mass_kg, ratio_value, travel.value, style.value, sag, pressure,
        )

        floor = minimum_air_pressure(mass_kg, tuning)
        raised = clamp_min(pressure, floor)
        capped = clamp_max(raised.value, spec.max_pressure_psi)
        air_pressure = round_within(capped.value, floor, spec.max_pressure_psi)
        if capped.clamped and raised.clamped:
            notes.append(
                f"Safety minimum of {math.ceil(floor)} PSI exceeds the manufacturer limit; "
                f"held at {air_pressure} PSI. Consider a firmer spring setup."
            )
        elif capped.clamped:
            notes.append(f"Pressure capped at {air_pressure} PSI (manufacturer limit)")
        elif raised.clamped:
            notes.append(f"Pressure increased to {air_pressure} PSI minimum for safety")

    rebound = estimate_rebound_clicks(weight_lb, tuning)
    compression = tuning.shock_compression_clicks if component == "shock" else None

    volume_spacers = None
    if spec.air_chamber_volume_cc and not spec.is_coil:
        volume_spacers = VOLUME_SPACERS.get(inputs.discipline)

    notes.append(
        f"Based on {spec.stanchion_diameter_mm:g}mm {component} and {spec.travel_mm:g}mm travel"
    )
    notes.append(f"Target sag: {sag:g}% of {spec.travel_mm:g}mm travel = {sag_mm}mm")
    if spec.spring_curve == SpringCurve.PROGRESSIVE:
        notes.append("Progressive spring curve - may feel more linear as you add pressure")
    if spec.baseline_pressure_chart:
        notes.append("Cross-check against the manufacturer pressure chart for your weight")

    accuracy = assess_accuracy(spec)
    if fallbacks:
        accuracy = accuracy.downgraded()

    return SuspensionResult(
        component=component,
        air_pressure_psi=air_pressure,
        target_sag_percent=sag,
        sag_mm=sag_mm,
        rebound_clicks=rebound,
        compression_clicks=compression,
        volume_spacers=volume_spacers,
        notes=notes,
        accuracy=accuracy,
    )
