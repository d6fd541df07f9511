"""
Tire pressure model.

Turns system weight, tire/rim geometry, casing, surface and mounting
type into front/rear pressures.

MODEL:
- Wheel load from a fixed 45/55 front/rear weight split
- Effective tire width grows linearly with rim width over a 19mm baseline
- Base pressure = C * wheel_load_kg / effective_width_in, with C = 1.56
  calibrated for a 15% tire drop; input weights are converted to kg first
- Effective width is held at or above 1mm so the formula never divides by zero
- Casing, surface and tire-type factors multiply the base pressure
- Hookless ceiling, then rim-strike floor

ASSUMPTIONS:
- The weight split is a typical-geometry simplification, not a physical
  law; it is applied regardless of bike geometry
- Effective width is a linear fit, not a tire/rim profile model
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ridesetup.models.inputs import TirePressureInputs, TireType, WheelDiameter
from ridesetup.models.outputs import PressureResult
from ridesetup.models.settings import TirePressureTuning
from ridesetup.physics.lookup import clamp_max, clamp_min, round_half_up, round_int
from ridesetup.physics.tables import CASING_FACTORS, SURFACE_FACTORS, TIRE_TYPE_FACTORS
from ridesetup.physics.units import mm_to_inches, psi_to_bar

logger = logging.getLogger(__name__)


@dataclass
class WheelLoads:
    """Static load on each wheel."""
    front_kg: float
    rear_kg: float


def split_wheel_loads(total_kg: float, front_fraction: float = 0.45) -> WheelLoads:
    """
    Split system weight between the wheels.

    Args:
        total_kg: Rider plus bike mass
        front_fraction: Share carried by the front wheel

    Returns:
        WheelLoads with front and rear mass
    """
    return WheelLoads(
        front_kg=total_kg * front_fraction,
        rear_kg=total_kg * (1.0 - front_fraction),
    )


def effective_tire_width(
    tire_width_mm: float,
    rim_width_mm: float,
    baseline_rim_mm: float = 19.0,
    gain: float = 0.4,
    minimum_mm: float = 1.0,
) -> float:
    """
    Estimate mounted tire width.

    A wider rim spreads the beads and widens the tire profile; a narrower
    one pinches it. Each mm of rim width away from the baseline moves the
    tire width by `gain` mm. The result never drops below `minimum_mm`,
    so a tiny tire on a narrow rim cannot reach zero width.
    """
    return max(tire_width_mm + (rim_width_mm - baseline_rim_mm) * gain, minimum_mm)


def base_pressure_psi(load_kg: float, width_in: float, constant: float = 1.56) -> float:
    """
    Pressure giving the target tire drop for a wheel load.

    PSI = C * load / width. Pressure scales linearly with load and
    inversely with tire width.
    """
    return constant * load_kg / width_in


def minimum_pressure_psi(
    wheel_diameter: WheelDiameter,
    tire_width_mm: float,
    tuning: TirePressureTuning,
) -> float:
    """
    Rim-strike floor for a wheel class and tire width.

    Heuristics:
        - 700c narrower than 35mm: road floor (30 PSI)
        - 29er, or any tire 50mm or wider: MTB floor (20 PSI)
        - everything else: gravel/all-road floor (24 PSI)
    """
    if wheel_diameter == WheelDiameter.ROAD_700C and tire_width_mm < tuning.road_max_width_mm:
        return tuning.road_min_psi
    if wheel_diameter == WheelDiameter.MTB_29ER or tire_width_mm >= tuning.mtb_min_width_mm:
        return tuning.mtb_min_psi
    return tuning.allroad_min_psi


def calculate_tire_pressure(
    inputs: TirePressureInputs,
    tuning: Optional[TirePressureTuning] = None,
) -> PressureResult:
    """
    Recommend front and rear tire pressure.

    Weights are converted to kilograms before the C = 1.56 base formula
    is applied, whatever `inputs.weight_unit` says; the constant is
    calibrated per kg of wheel load, not per pound.

    Args:
        inputs: Rider/bike weight (lb or kg) plus tire and rim setup
        tuning: Model constants; defaults when None

    Returns:
        PressureResult with rounded PSI, bar equivalents, notes and
        one warning per clamped wheel
    """
    tuning = tuning or TirePressureTuning()
    notes: list[str] = []
    warnings: list[str] = []

    total_kg = inputs.total_weight_kg()
    loads = split_wheel_loads(total_kg, tuning.front_weight_fraction)

    width_mm = effective_tire_width(
        inputs.tire_width_mm,
        inputs.rim_width_mm,
        tuning.rim_baseline_mm,
        tuning.rim_width_gain,
        tuning.min_effective_width_mm,
    )
    if width_mm <= tuning.min_effective_width_mm:
        warnings.append(
            f"A {inputs.tire_width_mm:g}mm tire is too narrow for a {inputs.rim_width_mm:g}mm rim; "
            f"effective width held at {tuning.min_effective_width_mm:g}mm. Check the tire and rim widths."
        )
    width_in = mm_to_inches(width_mm)
    notes.append(
        f"With a {inputs.rim_width_mm:g}mm rim, your {inputs.tire_width_mm:g}mm tire "
        f"has an estimated effective width of {round_int(width_mm)}mm."
    )

    casing = CASING_FACTORS.lookup(inputs.casing)
    surface = SURFACE_FACTORS.lookup(inputs.surface)
    tire_type = TIRE_TYPE_FACTORS.lookup(inputs.tire_type)
    adjustment = casing.value * surface.value * tire_type.value

    front = base_pressure_psi(loads.front_kg, width_in, tuning.pressure_constant) * adjustment
    rear = base_pressure_psi(loads.rear_kg, width_in, tuning.pressure_constant) * adjustment

    logger.debug(
        "tire pressure: total=%.1fkg width=%.1fmm adjustment=%.3f raw front=%.1f rear=%.1f",
        total_kg, width_mm, adjustment, front, rear,
    )

    wheels = {"Front": front, "Rear": rear}

    if inputs.is_hookless:
        ceiling = tuning.hookless_max_psi
        notes.append(f"Hookless rim detected. Pressure is capped at {ceiling:g} PSI for safety.")
        for wheel, psi in list(wheels.items()):
            capped = clamp_max(psi, ceiling)
            if capped.clamped:
                warnings.append(
                    f"{wheel} pressure was reduced to {ceiling:g} PSI due to hookless rim limits."
                )
                wheels[wheel] = capped.value

    floor = minimum_pressure_psi(inputs.wheel_diameter, inputs.tire_width_mm, tuning)
    for wheel, psi in list(wheels.items()):
        raised = clamp_min(psi, floor)
        if raised.clamped:
            warnings.append(
                f"{wheel} pressure increased to a minimum of {floor:g} PSI "
                f"to reduce rim strike risk for your setup."
            )
            wheels[wheel] = raised.value

    if surface.value < 1.0:
        notes.append(
            "Lower pressure is recommended for rougher surfaces to improve comfort "
            "and reduce vibration-based energy loss (impedance)."
        )
    if casing.value < 1.0:
        notes.append(
            "Supple casings are more flexible and can be run at a slightly lower "
            "pressure for optimal performance."
        )
    if inputs.tire_type == TireType.TUBELESS:
        notes.append(
            "Tubeless tires can safely be run at lower pressures, improving grip "
            "and comfort without the risk of pinch flats."
        )

    if warnings:
        logger.info("tire pressure clamped: %s", "; ".join(warnings))

    front, rear = wheels["Front"], wheels["Rear"]
    return PressureResult(
        front_psi=round_int(front),
        rear_psi=round_int(rear),
        front_bar=round_half_up(psi_to_bar(front), 2),
        rear_bar=round_half_up(psi_to_bar(rear), 2),
        effective_tire_width_mm=round_half_up(width_mm, 1),
        minimum_psi=round_int(floor),
        notes=notes,
        warnings=warnings,
    )
