"""
Gear ratio calculations.

Ratios, road speed at cadence, and easiest/hardest/range comparison
between two drivetrains. Also parses the chainring and cassette
notation stored on component records ("50/34", "11-34T",
"11,12,13,...").
"""

import logging
import re

from ridesetup.models.inputs import GearSetup
from ridesetup.models.outputs import ComparisonResult, GearRangeComparison, GearRatio
from ridesetup.physics.lookup import round_half_up
from ridesetup.physics.units import crank_speed, magnitude_in

logger = logging.getLogger(__name__)

DEFAULT_CADENCE_RPM = 90.0

_TEETH = re.compile(r"\d+")


def _teeth(text: str) -> list[int]:
    return [int(t) for t in _TEETH.findall(text or "") if int(t) > 0]


def parse_chainrings(text: str) -> list[int]:
    """
    Parse chainring notation into tooth counts, largest first.

    Accepts "52/36", "50-34", "52,36", "48/35T" and single rings ("32T").
    Returns an empty list when nothing parses.
    """
    return sorted(_teeth(text), reverse=True)


def parse_cogs(text: str) -> list[int]:
    """
    Parse cassette notation into cog tooth counts, smallest first.

    A two-number range ("11-34") is expanded into a typical cassette
    progression: single-tooth steps below 16T, two-tooth steps below 24T,
    three-tooth steps above, always ending on the largest cog. Any other
    list ("11,12,13" or "11-12-13-...") is taken verbatim.
    """
    cogs = _teeth(text)
    separators = re.findall(r"[,/]", text or "")
    if len(cogs) == 2 and not separators:
        return expand_cog_range(min(cogs), max(cogs))
    return sorted(cogs)


def expand_cog_range(smallest: int, largest: int) -> list[int]:
    """Typical cassette progression from the smallest to the largest cog."""
    cogs = [smallest]
    current = smallest
    while current < largest:
        if current < 16:
            current += 1
        elif current < 24:
            current += 2
        else:
            current += 3
        if current <= largest:
            cogs.append(current)
    if cogs[-1] != largest:
        cogs.append(largest)
    return cogs


def calculate_gear_ratios(setup: GearSetup, cadence: float = DEFAULT_CADENCE_RPM) -> list[GearRatio]:
    """
    Every chainring/cog combination, easiest gear first.

    Chainrings are paired largest first against cogs smallest first, then
    the combinations are stably sorted by ratio and numbered from 1.

    Args:
        setup: Chainrings, cogs and wheel circumference
        cadence: Crank RPM for the speed columns

    Returns:
        List of GearRatio (empty when either list is empty)
    """
    if not setup.chainrings or not setup.cogs:
        return []

    chainrings = sorted(setup.chainrings, reverse=True)
    cogs = sorted(setup.cogs)

    pairs = [(ring, cog) for ring in chainrings for cog in cogs]
    pairs.sort(key=lambda p: p[0] / p[1])

    gears = []
    for number, (ring, cog) in enumerate(pairs, start=1):
        ratio = ring / cog
        speed = crank_speed(ratio, cadence, setup.wheel_circumference_mm)
        gears.append(GearRatio(
            gear=number,
            chainring=ring,
            cog=cog,
            ratio=round_half_up(ratio, 2),
            speed_kmh=round_half_up(magnitude_in(speed, "km/h"), 1),
            speed_mph=round_half_up(magnitude_in(speed, "mph"), 1),
        ))
    return gears


def ratio_extremes(setup: GearSetup) -> tuple[float, float] | None:
    """
    (easiest, hardest) ratio as listed in the gear table, or None for an
    empty setup.

    Uses the 2 dp ratios shown to the rider so comparison deltas match
    the table.
    """
    gears = calculate_gear_ratios(setup)
    if not gears:
        return None
    return gears[0].ratio, gears[-1].ratio


def compare_setups(current: GearSetup, proposed: GearSetup) -> ComparisonResult:
    """
    Compare a proposed drivetrain against the current one.

    Returns:
        ComparisonResult. Positive easiest-gear improvement means easier
        climbing; positive hardest-gear improvement means a faster top
        end. Either setup empty gives the neutral zero result.
    """
    current_ext = ratio_extremes(current)
    proposed_ext = ratio_extremes(proposed)
    if current_ext is None or proposed_ext is None:
        logger.debug("gear comparison with an empty setup; returning neutral result")
        return ComparisonResult()

    cur_easy, cur_hard = current_ext
    new_easy, new_hard = proposed_ext

    easiest_change = (cur_easy - new_easy) / cur_easy * 100
    hardest_change = (new_hard - cur_hard) / cur_hard * 100

    cur_range = cur_hard / cur_easy
    new_range = new_hard / new_easy
    range_change = (new_range - cur_range) / cur_range * 100

    return ComparisonResult(
        easiest_gear_improvement=_round_pct(easiest_change),
        hardest_gear_improvement=_round_pct(hardest_change),
        gear_range=GearRangeComparison(
            current=round_half_up(cur_range, 2),
            proposed=round_half_up(new_range, 2),
            improvement=_round_pct(range_change),
        ),
    )


def _round_pct(value: float) -> float:
    # symmetric for negative deltas
    if value < 0:
        return -round_half_up(-value, 1)
    return round_half_up(value, 1)
