"""Ability score constants: bounds, point-buy costs and the standard array."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


ABILITY_SCORE_MIN = 1
ABILITY_SCORE_MAX = 20           # Standard max without magic items
ABILITY_SCORE_ABSOLUTE_MAX = 30  # Absolute max per SRD

# Standard Array values per PHB
STANDARD_ARRAY: tuple[int, ...] = (15, 14, 13, 12, 10, 8)

# Point Buy costs per PHB
POINT_BUY_COSTS: Mapping[int, int] = MappingProxyType({
    8: 0, 9: 1, 10: 2, 11: 3, 12: 4, 13: 5, 14: 7, 15: 9,
})
POINT_BUY_BUDGET = 27
POINT_BUY_MIN = 8
POINT_BUY_MAX = 15

# Returned by get_point_cost() for scores point buy cannot produce
INVALID_POINT_COST = -1


def is_whole_number(value: Any) -> bool:
    """True for ints and integral floats. Booleans don't count."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def get_point_cost(score: Any) -> int:
    """Point-buy cost of a score, or INVALID_POINT_COST outside 8-15.

    Callers must check for the sentinel before doing arithmetic with it.
    """
    if not is_whole_number(score):
        return INVALID_POINT_COST
    return POINT_BUY_COSTS.get(int(score), INVALID_POINT_COST)


def get_ability_modifier(score: int) -> int:
    """Modifier for an ability score: floor((score - 10) / 2)."""
    return (score - 10) // 2


def format_modifier(modifier: int) -> str:
    """Format a modifier for display, e.g. '+2' or '-1'."""
    return f"+{modifier}" if modifier >= 0 else str(modifier)
