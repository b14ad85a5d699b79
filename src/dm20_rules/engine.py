"""
Validation facade for dm20-rules.

validate_character() runs an ordered list of validation steps, each with a
predicate deciding whether it applies to the character, and merges whatever
ran into a single ValidationResult. The narrower helpers below reuse the same
validators for incremental checks (one ability score, one new class).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .config import DEFAULT_CONFIG, RulesConfig
from .feedback import create_empty_validation_result, merge_validation_results
from .models import (
    ALL_ABILITIES,
    Ability,
    AbilityScoreMethod,
    AbilityScores,
    CharacterClass,
    CharacterForValidation,
    ScoreSource,
    Spell,
    score_of,
)
from .results import ValidationResult
from .tables.abilities import get_ability_modifier
from .tables.feats import SRD_FEATS, Feat
from .tables.spellcasting import (
    get_cantrips_known_table,
    get_spellcasting_ability,
    get_spells_known_table,
    uses_prepared_spells,
)
from .validators.ability_scores import validate_all_ability_scores
from .validators.equipment import validate_all_equipped_items
from .validators.feats import (
    NearlyAvailableFeat,
    get_available_feats,
    get_nearly_available_feats,
    validate_feat_prerequisites,
)
from .validators.multiclass import can_multiclass, check_multiclass_prerequisites
from .validators.point_buy import validate_point_buy_scores
from .validators.spell_filtering import filter_spells_by_class_and_level, get_max_spell_level
from .validators.spells_known import validate_known_spells_limit, validate_prepared_spells_limit
from .validators.standard_array import validate_standard_array_scores

logger = logging.getLogger("dm20-rules.engine")


# =============================================================================
# Validation Steps
# =============================================================================

@dataclass(frozen=True)
class ValidationStep:
    """One conditional stage of full character validation."""
    name: str
    applies: Callable[[CharacterForValidation], bool]
    run: Callable[[CharacterForValidation, RulesConfig], ValidationResult]


def _spellcasting_classes(character: CharacterForValidation) -> list[CharacterClass]:
    """Classes with a spells known table, a cantrips table or prepared casting."""
    return [
        c for c in character.classes
        if get_spells_known_table(c.name) is not None
        or get_cantrips_known_table(c.name) is not None
        or uses_prepared_spells(c.name)
    ]


def _run_ability_scores(character: CharacterForValidation, config: RulesConfig) -> ValidationResult:
    return validate_all_ability_scores(character.ability_scores, config)


def _run_point_buy(character: CharacterForValidation, config: RulesConfig) -> ValidationResult:
    return validate_point_buy_scores(character.ability_scores, config)


def _run_standard_array(character: CharacterForValidation, config: RulesConfig) -> ValidationResult:
    return validate_standard_array_scores(character.ability_scores)


def _run_multiclass(character: CharacterForValidation, config: RulesConfig) -> ValidationResult:
    return merge_validation_results(*(
        check_multiclass_prerequisites(c.name, character.ability_scores)
        for c in character.classes
    ))


def _run_spells_known(character: CharacterForValidation, config: RulesConfig) -> ValidationResult:
    (char_class,) = _spellcasting_classes(character)
    results = [
        validate_known_spells_limit(
            char_class.name,
            char_class.level,
            character.known_spells,
            character.known_cantrips,
        )
    ]

    ability = get_spellcasting_ability(char_class.name)
    if ability is not None:
        modifier = get_ability_modifier(score_of(character.ability_scores, ability))
        results.append(validate_prepared_spells_limit(
            char_class.name,
            char_class.level,
            modifier,
            character.prepared_spells,
        ))

    return merge_validation_results(*results)


def _run_equipment(character: CharacterForValidation, config: RulesConfig) -> ValidationResult:
    return validate_all_equipped_items(
        character.equipped_items,
        character.class_names,
        character.proficiencies,
    )


def _run_feats(character: CharacterForValidation, config: RulesConfig) -> ValidationResult:
    # Held feats are re-checked, not re-acquired
    return merge_validation_results(*(
        validate_feat_prerequisites(feat_name, character, acquiring=False)
        for feat_name in character.feats
    ))


# Spell lists are kept per character, not per class, so they can only be
# checked against a limit when exactly one class casts.
VALIDATION_STEPS: tuple[ValidationStep, ...] = (
    ValidationStep("ability_scores", lambda c: True, _run_ability_scores),
    ValidationStep(
        "point_buy",
        lambda c: c.ability_score_method == AbilityScoreMethod.POINT_BUY,
        _run_point_buy,
    ),
    ValidationStep(
        "standard_array",
        lambda c: c.ability_score_method == AbilityScoreMethod.STANDARD_ARRAY,
        _run_standard_array,
    ),
    ValidationStep("multiclass", lambda c: c.is_multiclass, _run_multiclass),
    ValidationStep(
        "spells_known",
        lambda c: c.has_spellcasting and len(_spellcasting_classes(c)) == 1,
        _run_spells_known,
    ),
    ValidationStep("equipment", lambda c: len(c.equipped_items) > 0, _run_equipment),
    ValidationStep("feats", lambda c: len(c.feats) > 0, _run_feats),
)


def get_applicable_steps(character: CharacterForValidation) -> list[ValidationStep]:
    """Steps validate_character() would run for this character, in order."""
    return [step for step in VALIDATION_STEPS if step.applies(character)]


# =============================================================================
# Facade
# =============================================================================

def validate_character(
    character: CharacterForValidation,
    config: RulesConfig | None = None,
) -> ValidationResult:
    """Run every applicable validation step and merge the results."""
    config = config or DEFAULT_CONFIG
    steps = get_applicable_steps(character)
    logger.debug(
        f"Validating {character.name}: running {', '.join(step.name for step in steps)}"
    )

    result = merge_validation_results(*(step.run(character, config) for step in steps))

    logger.debug(
        f"Validation of {character.name} finished with "
        f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    )
    return result


def validate_ability_score_change(
    scores: ScoreSource,
    method: AbilityScoreMethod | str,
    current_classes: Iterable[str] | None = None,
    config: RulesConfig | None = None,
) -> ValidationResult:
    """Re-validate ability scores after an edit, without a full character."""
    config = config or DEFAULT_CONFIG
    method = AbilityScoreMethod(method)
    results = [validate_all_ability_scores(scores, config)]

    if method == AbilityScoreMethod.POINT_BUY:
        results.append(validate_point_buy_scores(scores, config))
    elif method == AbilityScoreMethod.STANDARD_ARRAY:
        results.append(validate_standard_array_scores(scores))

    for class_name in current_classes or ():
        results.append(check_multiclass_prerequisites(class_name, scores))

    return merge_validation_results(*results)


def validate_multiclass_addition(
    character: CharacterForValidation,
    new_class: str,
) -> ValidationResult:
    """Check whether the character may take a level in ``new_class``.

    A class the character already has is a level-up, not a multiclass, and
    always passes.
    """
    if character.has_class(new_class):
        logger.debug(f"{character.name} already has {new_class}; no multiclass check needed")
        return create_empty_validation_result()

    return can_multiclass(character.class_names, new_class, character.ability_scores)


def _context_scores(context: Any) -> dict[str, Any]:
    """Ability scores from a partial character, keyed by short name."""
    if context is None:
        return {}
    if isinstance(context, Mapping):
        scores = context.get("ability_scores")
    else:
        scores = getattr(context, "ability_scores", None)

    if scores is None:
        return {}
    if isinstance(scores, AbilityScores):
        return scores.as_dict()

    found: dict[str, Any] = {}
    for ability in ALL_ABILITIES:
        for key in (ability.value, ability.field_name):
            if key in scores:
                found[ability.value] = scores[key]
    return found


def validate_field(field_name: str, value: Any, context: Any = None) -> ValidationResult:
    """Real-time feedback for a single edited field.

    ``ability_scores`` validates all six scores in ``value``. A single ability
    name ('dex' or 'dexterity') substitutes ``value`` into the scores found in
    ``context`` (missing ones default to 10) and validates all six. Other
    fields have no rules.
    """
    if field_name == "ability_scores":
        return validate_all_ability_scores(value)

    ability = _ability_for_field(field_name)
    if ability is None:
        return create_empty_validation_result()

    scores = {a.value: 10 for a in ALL_ABILITIES}
    scores.update(_context_scores(context))
    scores[ability.value] = value
    return validate_all_ability_scores(scores)


def _ability_for_field(field_name: str) -> Ability | None:
    for ability in ALL_ABILITIES:
        if field_name in (ability.value, ability.field_name):
            return ability
    return None


# =============================================================================
# Options
# =============================================================================

@dataclass(frozen=True)
class SpellOptions:
    """Spells a class can pick from at a level."""
    max_spell_level: int
    available_spells: list[Spell] = field(default_factory=list)
    cantrips: list[Spell] = field(default_factory=list)
    spells_by_level: dict[int, list[Spell]] = field(default_factory=dict)


@dataclass(frozen=True)
class FeatOptions:
    available: list[Feat] = field(default_factory=list)
    already_taken: list[Feat] = field(default_factory=list)
    nearly_available: list[NearlyAvailableFeat] = field(default_factory=list)


def get_spell_options(class_name: str, level: int, spells: Iterable[Spell]) -> SpellOptions:
    """Castable spells for a class level. spells_by_level always has keys 1-9."""
    available = filter_spells_by_class_and_level(spells, class_name, level)
    return SpellOptions(
        max_spell_level=get_max_spell_level(class_name, level),
        available_spells=available,
        cantrips=[s for s in available if s.level == 0],
        spells_by_level={
            spell_level: [s for s in available if s.level == spell_level]
            for spell_level in range(1, 10)
        },
    )


def get_feat_options(character: CharacterForValidation) -> FeatOptions:
    """Feats the character can take now, already has, or is one step away from."""
    held = {name.strip().lower() for name in character.feats}
    return FeatOptions(
        available=get_available_feats(character),
        already_taken=[feat for feat in SRD_FEATS if feat.name.lower() in held],
        nearly_available=get_nearly_available_feats(character),
    )


__all__ = [
    "ValidationStep",
    "VALIDATION_STEPS",
    "SpellOptions",
    "FeatOptions",
    "get_applicable_steps",
    "validate_character",
    "validate_ability_score_change",
    "validate_multiclass_addition",
    "validate_field",
    "get_spell_options",
    "get_feat_options",
]
