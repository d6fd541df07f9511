"""
Suspension component catalog.

Default specs for common forks and shocks. Values are approximate and
intended to pre-fill calculator inputs.
"""

from ridesetup.catalog.suspension import (
    FORK_DATABASE,
    SHOCK_DATABASE,
    find_spec,
    get_fork_specs,
    get_shock_specs,
    list_forks,
    list_shocks,
)

__all__ = [
    "FORK_DATABASE",
    "SHOCK_DATABASE",
    "find_spec",
    "get_fork_specs",
    "get_shock_specs",
    "list_forks",
    "list_shocks",
]
