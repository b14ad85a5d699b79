"""
Tests for feat prerequisites.
"""

import pytest

from dm20_rules.models import Ability
from dm20_rules.tables.feats import (
    SRD_FEATS,
    AbilityPrerequisite,
    ClassPrerequisite,
    LevelPrerequisite,
    ProficiencyPrerequisite,
    RacePrerequisite,
    SpellcastingPrerequisite,
    get_feat,
)
from dm20_rules.validators.feats import (
    check_prerequisite,
    get_available_feats,
    get_nearly_available_feats,
    validate_feat_prerequisites,
)


class TestFeatCatalog:
    """Test the SRD feat table."""

    def test_catalog_size(self):
        assert len(SRD_FEATS) == 20

    def test_lookup_case_insensitive(self):
        assert get_feat("war caster").name == "War Caster"
        assert get_feat("Lucky") is None

    def test_ritual_caster_needs_int_and_wis(self):
        feat = get_feat("Ritual Caster")
        assert feat.prerequisites == (
            AbilityPrerequisite(Ability.INT, 13),
            AbilityPrerequisite(Ability.WIS, 13),
        )


class TestCheckPrerequisite:
    """Test each prerequisite variant."""

    def test_ability(self, fighter):
        assert check_prerequisite(AbilityPrerequisite(Ability.STR, 13), fighter) is None
        issue = check_prerequisite(AbilityPrerequisite(Ability.INT, 13), fighter)
        assert issue.code == "FEAT_ABILITY_NOT_MET"
        assert issue.message == "Requires INT 13. Current: 12"
        assert issue.field == "ability_scores.int"

    def test_proficiency(self, make_character):
        armored = make_character(proficiencies=["heavy-armor"])
        assert check_prerequisite(ProficiencyPrerequisite("heavy-armor"), armored) is None
        issue = check_prerequisite(ProficiencyPrerequisite("heavy-armor"), make_character())
        assert issue.code == "FEAT_PROFICIENCY_NOT_MET"
        assert issue.message == "Requires proficiency with heavy armor"

    def test_spellcasting(self, fighter, wizard):
        assert check_prerequisite(SpellcastingPrerequisite(), wizard) is None
        assert check_prerequisite(SpellcastingPrerequisite(), fighter).code == "FEAT_SPELLCASTING_NOT_MET"

    def test_level(self, make_character):
        veteran = make_character(classes=(("Fighter", 4),))
        assert veteran.level == 4
        assert check_prerequisite(LevelPrerequisite(4), veteran) is None
        issue = check_prerequisite(LevelPrerequisite(8), veteran)
        assert issue.message == "Requires character level 8. Current: 4"

    def test_race_case_insensitive(self, wizard):
        assert check_prerequisite(RacePrerequisite("elf"), wizard) is None
        assert check_prerequisite(RacePrerequisite("Dwarf"), wizard).code == "FEAT_RACE_NOT_MET"

    def test_class_case_insensitive(self, wizard):
        assert check_prerequisite(ClassPrerequisite("WIZARD"), wizard) is None
        assert check_prerequisite(ClassPrerequisite("Cleric"), wizard).code == "FEAT_CLASS_NOT_MET"

    def test_unregistered_variant_raises(self, fighter):
        with pytest.raises(NotImplementedError):
            check_prerequisite("STR 13", fighter)


class TestValidateFeatPrerequisites:
    """Test validating a single feat choice."""

    def test_met(self, fighter):
        assert validate_feat_prerequisites("Grappler", fighter).is_valid

    def test_unmet_prefixed_with_feat_name(self, fighter):
        result = validate_feat_prerequisites("Ritual Caster", fighter)
        assert [e.message for e in result.errors] == [
            "Ritual Caster: Requires INT 13. Current: 12",
            "Ritual Caster: Requires WIS 13. Current: 10",
        ]

    def test_unknown_feat_warns(self, fighter):
        result = validate_feat_prerequisites("Lucky", fighter)
        assert result.is_valid
        assert [w.code for w in result.warnings] == ["FEAT_UNKNOWN"]

    def test_already_taken(self, make_character):
        character = make_character(feats=["tough"])
        result = validate_feat_prerequisites("Tough", character)
        assert [e.code for e in result.errors] == ["FEAT_ALREADY_TAKEN"]

    def test_held_feat_recheck(self, make_character):
        """Re-checking a held feat reports only unmet prerequisites."""
        character = make_character(feats=["Tough", "Ritual Caster"])
        assert validate_feat_prerequisites("Tough", character, acquiring=False).is_valid
        result = validate_feat_prerequisites("Ritual Caster", character, acquiring=False)
        assert [e.code for e in result.errors] == ["FEAT_ABILITY_NOT_MET", "FEAT_ABILITY_NOT_MET"]


class TestFeatQueries:
    """Test available and nearly available feats."""

    def test_available_for_fighter(self, fighter):
        names = {feat.name for feat in get_available_feats(fighter)}
        assert {"Grappler", "Defensive Duelist", "Tough"} <= names
        assert "War Caster" not in names
        assert "Ritual Caster" not in names

    def test_available_excludes_held(self, make_character):
        names = {feat.name for feat in get_available_feats(make_character(feats=["Tough"]))}
        assert "Tough" not in names

    def test_nearly_available_exactly_one_missing(self, fighter):
        nearly = {n.feat.name: n.missing for n in get_nearly_available_feats(fighter)}
        assert set(nearly) == {
            "Heavy Armor Master",
            "Heavily Armored",
            "Medium Armor Master",
            "Moderately Armored",
            "Spell Sniper",
            "War Caster",
            "Elemental Adept",
        }
        assert all(len(missing) == 1 for missing in nearly.values())

    def test_nearly_available_skips_held(self, make_character):
        character = make_character(feats=["War Caster", "Tough"])
        names = {n.feat.name for n in get_nearly_available_feats(character)}
        assert "War Caster" not in names
        assert "Tough" not in names
