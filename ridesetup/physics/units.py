"""
Unit registry and helpers for setup calculations.

Uses pint so weight, width, pressure and speed conversions all go
through one registry instead of scattered magic numbers.
"""

import pint

# Shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Conversion factor used by tire pressure charts (1 bar = 14.5038 psi)
PSI_PER_BAR = 14.5038


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def lb_to_kg(weight_lb: float) -> float:
    """Convert a weight in pounds to kilograms."""
    return Q_(weight_lb, "lb").to("kg").magnitude


def kg_to_lb(weight_kg: float) -> float:
    """Convert a weight in kilograms to pounds."""
    return Q_(weight_kg, "kg").to("lb").magnitude


def mm_to_inches(length_mm: float) -> float:
    """Convert millimeters to inches."""
    return Q_(length_mm, "mm").to("inch").magnitude


def psi_to_bar(pressure_psi: float) -> float:
    """
    Convert PSI to bar.

    Uses the 14.5038 psi/bar figure printed on tire sidewalls so the
    displayed bar value matches what riders read off a gauge.
    """
    return pressure_psi / PSI_PER_BAR


def crank_speed(
    ratio: float,
    cadence_rpm: float,
    wheel_circumference_mm: float,
) -> pint.Quantity:
    """
    Road speed for a gear at a given cadence.

    Each crank revolution turns the wheel `ratio` times, so the bike
    covers ratio * circumference per pedal stroke.

    Args:
        ratio: Chainring teeth divided by cog teeth
        cadence_rpm: Crank revolutions per minute
        wheel_circumference_mm: Rolling circumference of the rear wheel

    Returns:
        Speed as a pint quantity (convert with .to("km/h") or .to("mph"))
    """
    distance_per_minute = Q_(ratio * cadence_rpm * wheel_circumference_mm, "mm/min")
    return distance_per_minute.to("km/h")
