"""
SRD feat catalog and the prerequisite variants feats can carry.

A prerequisite is one of a closed set of frozen dataclasses. The feat
validator dispatches on the concrete type, so adding a variant here without
registering a checker for it fails loudly instead of passing silently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from ..models import Ability, ProficiencyType

logger = logging.getLogger("dm20-rules")


# =============================================================================
# Prerequisite Variants
# =============================================================================

@dataclass(frozen=True)
class AbilityPrerequisite:
    ability: Ability
    minimum: int


@dataclass(frozen=True)
class ProficiencyPrerequisite:
    proficiency: str


@dataclass(frozen=True)
class SpellcastingPrerequisite:
    """The character must be able to cast at least one spell."""


@dataclass(frozen=True)
class RacePrerequisite:
    race: str


@dataclass(frozen=True)
class ClassPrerequisite:
    class_name: str


@dataclass(frozen=True)
class LevelPrerequisite:
    level: int


FeatPrerequisite = Union[
    AbilityPrerequisite,
    ProficiencyPrerequisite,
    SpellcastingPrerequisite,
    RacePrerequisite,
    ClassPrerequisite,
    LevelPrerequisite,
]


@dataclass(frozen=True)
class Feat:
    name: str
    prerequisites: tuple[FeatPrerequisite, ...]
    description: str


# =============================================================================
# SRD Feats
# =============================================================================

SRD_FEATS: tuple[Feat, ...] = (
    Feat(
        "Grappler",
        (AbilityPrerequisite(Ability.STR, 13),),
        "You have developed the skills necessary to hold your own in close-quarters grappling.",
    ),
    Feat(
        "Heavy Armor Master",
        (ProficiencyPrerequisite(ProficiencyType.HEAVY_ARMOR.value),),
        "You can use your armor to deflect strikes that would kill others.",
    ),
    Feat(
        "Heavily Armored",
        (ProficiencyPrerequisite(ProficiencyType.MEDIUM_ARMOR.value),),
        "You have trained to master the use of heavy armor.",
    ),
    Feat("Lightly Armored", (), "You have trained to master the use of light armor."),
    Feat(
        "Martial Adept",
        (),
        "You have martial training that allows you to perform special combat maneuvers.",
    ),
    Feat(
        "Medium Armor Master",
        (ProficiencyPrerequisite(ProficiencyType.MEDIUM_ARMOR.value),),
        "You have practiced moving in medium armor.",
    ),
    Feat(
        "Moderately Armored",
        (ProficiencyPrerequisite(ProficiencyType.LIGHT_ARMOR.value),),
        "You have trained to master the use of medium armor and shields.",
    ),
    Feat(
        "Ritual Caster",
        (AbilityPrerequisite(Ability.INT, 13), AbilityPrerequisite(Ability.WIS, 13)),
        "You have learned a number of spells that you can cast as rituals.",
    ),
    Feat(
        "Spell Sniper",
        (SpellcastingPrerequisite(),),
        "You have learned techniques to enhance your attacks with certain kinds of spells.",
    ),
    Feat(
        "War Caster",
        (SpellcastingPrerequisite(),),
        "You have practiced casting spells in the midst of combat.",
    ),
    Feat(
        "Elemental Adept",
        (SpellcastingPrerequisite(),),
        "You have mastered one damage type from your spellcasting.",
    ),
    Feat(
        "Magic Initiate",
        (),
        "You learn two cantrips and one 1st-level spell from a class spell list.",
    ),
    Feat(
        "Savage Attacker",
        (),
        "Once per turn when you roll damage for a melee weapon attack, you can reroll the damage dice.",
    ),
    Feat(
        "Sentinel",
        (),
        "You have mastered techniques to take advantage of every drop in any enemy's guard.",
    ),
    Feat(
        "Sharpshooter",
        (),
        "You have mastered ranged weapons and can make shots that others find impossible.",
    ),
    Feat(
        "Great Weapon Master",
        (),
        "You've learned to put the weight of a weapon to your advantage.",
    ),
    Feat("Dual Wielder", (), "You master fighting with two weapons."),
    Feat(
        "Defensive Duelist",
        (AbilityPrerequisite(Ability.DEX, 13),),
        "When you are wielding a finesse weapon with which you are proficient and another "
        "creature hits you with a melee attack, you can use your reaction to add your "
        "proficiency bonus to your AC.",
    ),
    Feat("Tough", (), "Your hit point maximum increases by an amount equal to twice your level."),
    Feat(
        "Resilient",
        (),
        "Choose one ability score. You gain proficiency in saving throws using that ability.",
    ),
)


def get_feat(feat_name: str) -> Feat | None:
    """Look up a feat by name (case-insensitive)."""
    target = feat_name.strip().lower()
    for feat in SRD_FEATS:
        if feat.name.lower() == target:
            return feat
    logger.debug(f"Feat '{feat_name}' not in the SRD catalog")
    return None
