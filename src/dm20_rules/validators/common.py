"""Message helpers shared by the validators."""

from __future__ import annotations

from ..models import Ability


def plural(count: int, word: str) -> str:
    """'1 point', '3 points'."""
    return f"{count} {word}{'s' if count > 1 else ''}"


def ability_field(ability: Ability) -> str:
    """Dotted field path used to group issues, e.g. 'ability_scores.str'."""
    return f"ability_scores.{ability.value}"
