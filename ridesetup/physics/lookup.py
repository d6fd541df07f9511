"""
Shared lookup, clamp and rounding utilities.

Every adjustment factor in the engines comes out of a FactorTable with an
explicit documented default, so an unmapped key can never silently
become zero. Clamps report whether they fired so callers can attach the
matching note or warning.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Hashable, Mapping


@dataclass(frozen=True)
class FactorLookup:
    """Result of a factor table lookup."""
    value: float
    matched: bool  # False when the table default was used


@dataclass(frozen=True)
class ClampResult:
    """Result of clamping a value against a bound."""
    value: float
    clamped: bool
    bound: float


class FactorTable:
    """
    Read-only mapping from a key to a multiplicative factor.

    Args:
        name: Human-readable table name (used in log messages)
        factors: Key -> factor mapping. Enum keys are matched by value.
        default: Factor returned for keys not in the table
    """

    def __init__(self, name: str, factors: Mapping[Hashable, float], default: float):
        self.name = name
        self._factors = MappingProxyType({_key(k): float(v) for k, v in factors.items()})
        self.default = float(default)

    def lookup(self, key: Any) -> FactorLookup:
        """Look up a factor, falling back to the table default."""
        k = _key(key)
        if k in self._factors:
            return FactorLookup(value=self._factors[k], matched=True)
        return FactorLookup(value=self.default, matched=False)

    def __getitem__(self, key: Any) -> float:
        return self.lookup(key).value

    def __contains__(self, key: Any) -> bool:
        return _key(key) in self._factors

    def keys(self) -> list:
        return list(self._factors.keys())

    def __repr__(self) -> str:
        return f"FactorTable({self.name!r}, {dict(self._factors)!r}, default={self.default})"


def _key(key: Any) -> Any:
    # str-valued enums and their raw values share one slot
    return getattr(key, "value", key)


def clamp_max(value: float, ceiling: float) -> ClampResult:
    """Cap a value at a ceiling."""
    if value > ceiling:
        return ClampResult(value=ceiling, clamped=True, bound=ceiling)
    return ClampResult(value=value, clamped=False, bound=ceiling)


def clamp_min(value: float, floor: float) -> ClampResult:
    """Raise a value to a floor."""
    if value < floor:
        return ClampResult(value=floor, clamped=True, bound=floor)
    return ClampResult(value=value, clamped=False, bound=floor)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round half away from zero for positive values.

    Python's round() uses banker's rounding, which would turn 72.5 PSI
    into 72 but 73.5 into 74. Gauge readings round up at .5.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))
