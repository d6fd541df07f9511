"""
Helpers to turn calculation results into a compact, human-readable
console summary.
"""

from __future__ import annotations

from typing import Any, Iterable

from ridesetup.models.inputs import SuspensionSpec
from ridesetup.models.outputs import (
    ComparisonResult,
    GearRatio,
    InsufficientInput,
    PressureResult,
    SuspensionResult,
)


def _fmt_float(value: Any, unit: str = "", zero_default: str = "n/a") -> str:
    """Safely format a float with optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return zero_default
    suffix = f" {unit}" if unit else ""
    if abs(fval) >= 100:
        return f"{fval:,.0f}{suffix}"
    return f"{fval:.2f}{suffix}"


def _fmt_pct(value: float) -> str:
    """Signed percentage, e.g. +12.5%."""
    return f"{value:+.1f}%"


def _print_list(title: str, items: Iterable[str], marker: str = "-") -> None:
    items = list(items)
    if not items:
        return
    print(f"{title}:")
    for item in items:
        print(f"  {marker} {item}")


def print_pressure_result(result: PressureResult) -> None:
    """Print a tire pressure recommendation."""
    print(f"Front: {result.front_psi} PSI ({_fmt_float(result.front_bar, 'bar')})")
    print(f"Rear:  {result.rear_psi} PSI ({_fmt_float(result.rear_bar, 'bar')})")
    print(
        f"Effective tire width: {result.effective_tire_width_mm:g} mm | "
        f"floor {result.minimum_psi} PSI"
    )
    _print_list("Notes", result.notes)
    _print_list("Warnings", result.warnings, marker="!")


def print_suspension_result(outcome: SuspensionResult | InsufficientInput) -> None:
    """Print a suspension recommendation or the reason there is none."""
    if isinstance(outcome, InsufficientInput):
        print(f"Not enough data: {outcome.reason}")
        _print_list("Notes", outcome.notes)
        return

    pressure = (
        f"{outcome.air_pressure_psi} PSI" if outcome.air_pressure_psi is not None else "n/a (coil)"
    )
    print(f"{outcome.component.title()} | accuracy {outcome.accuracy.value}")
    print(f"  Air pressure: {pressure}")
    print(f"  Target sag:   {outcome.target_sag_percent:g}% ({outcome.sag_mm} mm)")
    print(f"  Rebound:      {outcome.rebound_clicks} clicks from closed")
    if outcome.compression_clicks is not None:
        print(f"  Compression:  {outcome.compression_clicks} clicks from open")
    if outcome.volume_spacers is not None:
        print(f"  Volume spacers: {outcome.volume_spacers}")
    _print_list("Notes", outcome.notes)


def print_gear_table(gears: list[GearRatio], cadence: float) -> None:
    """Print gear ratios, easiest first."""
    print(f"{'Gear':>4}  {'Ring':>4}  {'Cog':>3}  {'Ratio':>5}  {'km/h':>5}  {'mph':>5}   @ {cadence:g} rpm")
    for g in gears:
        print(
            f"{g.gear:>4}  {g.chainring:>4}  {g.cog:>3}  {g.ratio:>5.2f}  "
            f"{g.speed_kmh:>5.1f}  {g.speed_mph:>5.1f}"
        )


def print_comparison(result: ComparisonResult) -> None:
    """Print a drivetrain comparison."""
    if result.is_neutral:
        print("Nothing to compare: one of the setups has no chainrings or cogs.")
        return
    print(f"Easiest gear: {_fmt_pct(result.easiest_gear_improvement)} (positive = easier climbing)")
    print(f"Hardest gear: {_fmt_pct(result.hardest_gear_improvement)} (positive = faster top end)")
    print(
        f"Gear range: {result.gear_range.current:.2f} -> {result.gear_range.proposed:.2f} "
        f"({_fmt_pct(result.gear_range.improvement)})"
    )


def print_catalog(title: str, specs: list[SuspensionSpec]) -> None:
    """Print catalog entries."""
    print(f"{title} ({len(specs)}):")
    for spec in specs:
        max_psi = "coil" if spec.is_coil else f"max {spec.max_pressure_psi:g} PSI"
        print(
            f"  - {spec.name}: {spec.travel_mm:g}mm travel, "
            f"{spec.stanchion_diameter_mm:g}mm, {max_psi}"
        )
