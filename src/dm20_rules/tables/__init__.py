"""
Static SRD rule tables for dm20-rules.

This package provides:
- Ability score bounds, point-buy costs and the standard array
- Multiclass ability prerequisites with ALL/ANY semantics
- Spell slot progressions per caster archetype and spells/cantrips known
- The SRD feat catalog and its prerequisite variants
- Equipment and class proficiency maps

All tables are read-only module constants. Name lookups are case-insensitive.
"""

from .abilities import (
    ABILITY_SCORE_MIN,
    ABILITY_SCORE_MAX,
    ABILITY_SCORE_ABSOLUTE_MAX,
    STANDARD_ARRAY,
    POINT_BUY_COSTS,
    POINT_BUY_BUDGET,
    POINT_BUY_MIN,
    POINT_BUY_MAX,
    INVALID_POINT_COST,
    get_point_cost,
    get_ability_modifier,
    format_modifier,
)
from .multiclass import (
    RequirementType,
    AbilityRequirement,
    MulticlassRequirement,
    MULTICLASS_PREREQUISITES,
    get_multiclass_prerequisite,
    get_multiclass_prerequisite_description,
)
from .spellcasting import (
    CasterType,
    PactMagicSlots,
    FULL_CASTER_SPELL_SLOTS,
    HALF_CASTER_SPELL_SLOTS,
    WARLOCK_PACT_SLOTS,
    CLASS_CASTER_TYPES,
    SPELLCASTING_ABILITIES,
    SPELLS_KNOWN,
    CANTRIPS_KNOWN,
    PREPARED_SPELL_CLASSES,
    get_caster_type,
    get_spellcasting_ability,
    get_spell_slots,
    is_known_class,
    uses_prepared_spells,
)
from .feats import (
    Feat,
    FeatPrerequisite,
    AbilityPrerequisite,
    ProficiencyPrerequisite,
    SpellcastingPrerequisite,
    RacePrerequisite,
    ClassPrerequisite,
    LevelPrerequisite,
    SRD_FEATS,
    get_feat,
)
from .proficiencies import (
    CLASS_PROFICIENCIES,
    MULTICLASS_PROFICIENCIES,
    EQUIPMENT_PROFICIENCY_MAP,
    get_equipment_proficiency_requirement,
    get_class_proficiencies,
    get_multiclass_proficiencies,
    class_has_proficiency,
)

__all__ = [
    # Abilities / point buy
    "ABILITY_SCORE_MIN",
    "ABILITY_SCORE_MAX",
    "ABILITY_SCORE_ABSOLUTE_MAX",
    "STANDARD_ARRAY",
    "POINT_BUY_COSTS",
    "POINT_BUY_BUDGET",
    "POINT_BUY_MIN",
    "POINT_BUY_MAX",
    "INVALID_POINT_COST",
    "get_point_cost",
    "get_ability_modifier",
    "format_modifier",
    # Multiclass
    "RequirementType",
    "AbilityRequirement",
    "MulticlassRequirement",
    "MULTICLASS_PREREQUISITES",
    "get_multiclass_prerequisite",
    "get_multiclass_prerequisite_description",
    # Spellcasting
    "CasterType",
    "PactMagicSlots",
    "FULL_CASTER_SPELL_SLOTS",
    "HALF_CASTER_SPELL_SLOTS",
    "WARLOCK_PACT_SLOTS",
    "CLASS_CASTER_TYPES",
    "SPELLCASTING_ABILITIES",
    "SPELLS_KNOWN",
    "CANTRIPS_KNOWN",
    "PREPARED_SPELL_CLASSES",
    "get_caster_type",
    "get_spellcasting_ability",
    "get_spell_slots",
    "is_known_class",
    "uses_prepared_spells",
    # Feats
    "Feat",
    "FeatPrerequisite",
    "AbilityPrerequisite",
    "ProficiencyPrerequisite",
    "SpellcastingPrerequisite",
    "RacePrerequisite",
    "ClassPrerequisite",
    "LevelPrerequisite",
    "SRD_FEATS",
    "get_feat",
    # Proficiencies
    "CLASS_PROFICIENCIES",
    "MULTICLASS_PROFICIENCIES",
    "EQUIPMENT_PROFICIENCY_MAP",
    "get_equipment_proficiency_requirement",
    "get_class_proficiencies",
    "get_multiclass_proficiencies",
    "class_has_proficiency",
]
