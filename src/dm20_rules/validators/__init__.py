"""
Per-domain rule validators.

Each validator is a pure function over its inputs and returns a
ValidationResult. None of them raises for a rules violation.
"""

from .ability_scores import (
    validate_ability_score,
    validate_all_ability_scores,
    meets_ability_minimum,
    validate_ability_scores_for_multiclass,
)
from .point_buy import (
    ScoreAdjustment,
    PointBuySummary,
    calculate_total_points_spent,
    validate_point_buy_score,
    validate_point_buy_scores,
    can_increase_score,
    can_decrease_score,
    get_points_freed_by_decrease,
    get_point_buy_summary,
)
from .standard_array import validate_standard_array_scores
from .multiclass import check_multiclass_prerequisites, can_multiclass
from .spell_filtering import (
    AvailableSpells,
    get_max_spell_level,
    can_class_cast_spell,
    filter_spells_by_class_and_level,
    validate_spell_selection,
    get_available_spells,
)
from .spells_known import (
    get_spells_known_limit,
    get_cantrips_known_limit,
    get_prepared_spells_limit,
    validate_known_spells_limit,
    validate_prepared_spells_limit,
)
from .feats import (
    NearlyAvailableFeat,
    check_prerequisite,
    validate_feat_prerequisites,
    get_available_feats,
    get_nearly_available_feats,
)
from .equipment import (
    has_proficiency_with_equipment,
    get_unproficient_penalty,
    validate_equipment_proficiency,
    validate_all_equipped_items,
)

__all__ = [
    # Ability scores
    "validate_ability_score",
    "validate_all_ability_scores",
    "meets_ability_minimum",
    "validate_ability_scores_for_multiclass",
    # Point buy
    "ScoreAdjustment",
    "PointBuySummary",
    "calculate_total_points_spent",
    "validate_point_buy_score",
    "validate_point_buy_scores",
    "can_increase_score",
    "can_decrease_score",
    "get_points_freed_by_decrease",
    "get_point_buy_summary",
    # Standard array
    "validate_standard_array_scores",
    # Multiclass
    "check_multiclass_prerequisites",
    "can_multiclass",
    # Spells
    "AvailableSpells",
    "get_max_spell_level",
    "can_class_cast_spell",
    "filter_spells_by_class_and_level",
    "validate_spell_selection",
    "get_available_spells",
    "get_spells_known_limit",
    "get_cantrips_known_limit",
    "get_prepared_spells_limit",
    "validate_known_spells_limit",
    "validate_prepared_spells_limit",
    # Feats
    "NearlyAvailableFeat",
    "check_prerequisite",
    "validate_feat_prerequisites",
    "get_available_feats",
    "get_nearly_available_feats",
    # Equipment
    "has_proficiency_with_equipment",
    "get_unproficient_penalty",
    "validate_equipment_proficiency",
    "validate_all_equipped_items",
]
