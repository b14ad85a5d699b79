"""
Tests for spell slot progressions, spell filtering and spells known limits.
"""

import pytest

from dm20_rules.models import Spell
from dm20_rules.tables.spellcasting import (
    CasterType,
    get_caster_type,
    get_spell_slots,
    get_spellcasting_ability,
    is_known_class,
    third_caster_table_level,
    uses_prepared_spells,
)
from dm20_rules.validators.spell_filtering import (
    can_class_cast_spell,
    filter_spells_by_class_and_level,
    get_available_spells,
    get_max_spell_level,
    validate_spell_selection,
)
from dm20_rules.validators.spells_known import (
    get_cantrips_known_limit,
    get_prepared_spells_limit,
    get_spells_known_limit,
    validate_known_spells_limit,
    validate_prepared_spells_limit,
)


def by_name(spells, *names):
    return [s for s in spells if s.name in names]


# =============================================================================
# Progression Tables
# =============================================================================


class TestCasterTables:
    """Test caster types and slot lookups."""

    @pytest.mark.parametrize("class_name,caster_type", [
        ("Wizard", CasterType.FULL),
        ("paladin", CasterType.HALF),
        ("Warlock", CasterType.PACT),
        ("Rogue", CasterType.THIRD),
        ("Monk", CasterType.NONE),
        ("Artificer", CasterType.NONE),
    ])
    def test_caster_type(self, class_name, caster_type):
        assert get_caster_type(class_name) == caster_type

    def test_known_class_includes_non_casters(self):
        assert is_known_class(" barbarian ")
        assert is_known_class("Wizard")
        assert not is_known_class("Artificer")

    def test_spell_slots(self):
        assert get_spell_slots("Wizard", 5) == {1: 4, 2: 3, 3: 2}
        assert get_spell_slots("Paladin", 1) == {}
        assert get_spell_slots("Warlock", 11) == {5: 3}
        assert get_spell_slots("Barbarian", 20) == {}

    def test_third_caster_row(self):
        assert third_caster_table_level(3) == 2
        assert third_caster_table_level(7) == 6
        assert third_caster_table_level(20) == 14

    def test_prepared_classes(self):
        assert uses_prepared_spells("cleric") is True
        assert uses_prepared_spells("Bard") is False

    def test_spellcasting_ability(self):
        assert get_spellcasting_ability("Wizard").value == "int"
        assert get_spellcasting_ability("Barbarian") is None


class TestMaxSpellLevel:
    """Test the highest castable spell level per class level."""

    @pytest.mark.parametrize("class_name,level,expected", [
        ("Paladin", 1, 0),
        ("Paladin", 2, 1),
        ("Ranger", 9, 3),
        ("Warlock", 5, 3),
        ("Warlock", 20, 5),
        ("Wizard", 1, 1),
        ("Wizard", 5, 3),
        ("Wizard", 17, 9),
        ("Fighter", 7, 2),
        ("Barbarian", 20, 0),
        ("Wizard", 0, 0),
        ("Wizard", 21, 0),
    ])
    def test_max_spell_level(self, class_name, level, expected):
        assert get_max_spell_level(class_name, level) == expected


# =============================================================================
# Filtering and Selection
# =============================================================================


class TestFiltering:
    """Test filtering a spell list by class and level."""

    def test_class_list_is_case_insensitive(self, spells):
        fire_bolt = by_name(spells, "Fire Bolt")[0]
        assert can_class_cast_spell("wizard", fire_bolt)
        assert not can_class_cast_spell("Cleric", fire_bolt)

    def test_filter_level_one_wizard(self, spells):
        names = [s.name for s in filter_spells_by_class_and_level(spells, "Wizard", 1)]
        assert names == ["Fire Bolt", "Magic Missile"]

    def test_filter_paladin_level_one_has_nothing(self, spells):
        assert filter_spells_by_class_and_level(spells, "Paladin", 1) == []

    def test_available_spells_grouping(self, spells):
        available = get_available_spells(spells, "Wizard", 5)
        assert [s.name for s in available.cantrips] == ["Fire Bolt"]
        assert sorted(available.spells_by_level) == [1, 2, 3]
        assert [s.name for s in available.spells_by_level[3]] == ["Fireball"]


class TestSpellSelection:
    """Test validating one spell pick."""

    def test_level_one_wizard_cannot_pick_third_level(self, spells):
        fireball = by_name(spells, "Fireball")[0]
        result = validate_spell_selection(fireball, "Wizard", 1)
        assert [e.code for e in result.errors] == ["SPELL_LEVEL_TOO_HIGH"]
        assert "Maximum spell level at level 1 is 1" in result.errors[0].message

    def test_level_five_wizard_second_level_spell(self, spells):
        misty_step = by_name(spells, "Misty Step")[0]
        assert validate_spell_selection(misty_step, "Wizard", 5).is_valid

    def test_wrong_class_list(self, spells):
        result = validate_spell_selection(by_name(spells, "Sacred Flame")[0], "Wizard", 5)
        assert [e.code for e in result.errors] == ["SPELL_NOT_ON_CLASS_LIST"]
        assert result.errors[0].suggestion == "Sacred Flame is available to: Cleric"

    def test_non_caster_gets_every_error(self, spells):
        result = validate_spell_selection(by_name(spells, "Fireball")[0], "Barbarian", 10)
        assert [e.code for e in result.errors] == [
            "SPELL_NOT_ON_CLASS_LIST",
            "SPELL_LEVEL_TOO_HIGH",
            "CLASS_CANNOT_CAST_SPELLS",
        ]

    def test_homebrew_class_spell_warns(self):
        """A class outside the caster table is not blocked from its own spells."""
        spell = Spell(name="Arcane Pulse", level=1, classes=["Artificer"])
        result = validate_spell_selection(spell, "Artificer", 3)
        assert result.is_valid
        assert [w.code for w in result.warnings] == ["SPELL_UNKNOWN_CLASS"]

    def test_homebrew_class_off_list_still_errors(self, spells):
        result = validate_spell_selection(by_name(spells, "Fireball")[0], "Artificer", 3)
        assert [e.code for e in result.errors] == ["SPELL_NOT_ON_CLASS_LIST"]
        assert [w.code for w in result.warnings] == ["SPELL_UNKNOWN_CLASS"]


# =============================================================================
# Spells Known / Prepared
# =============================================================================


class TestSpellsKnownLimits:
    """Test table and formula limits."""

    def test_known_casters(self):
        assert get_spells_known_limit("Bard", 1) == 4
        assert get_spells_known_limit("Warlock", 5) == 6
        assert get_spells_known_limit("Ranger", 1) == 0

    def test_prepared_casters_have_no_known_limit(self):
        assert get_spells_known_limit("Wizard", 5) is None
        assert get_spells_known_limit("Fighter", 5) is None

    def test_cantrips(self):
        assert get_cantrips_known_limit("Sorcerer", 1) == 4
        assert get_cantrips_known_limit("Wizard", 10) == 5
        assert get_cantrips_known_limit("Paladin", 10) == 0

    @pytest.mark.parametrize("class_name,level,modifier,expected", [
        ("Wizard", 1, 3, 4),
        ("Cleric", 5, 2, 7),
        ("Paladin", 2, 2, 3),
        ("Paladin", 1, 0, 1),
        ("Druid", 1, -3, 1),
        ("Bard", 5, 3, 0),
    ])
    def test_prepared_limit(self, class_name, level, modifier, expected):
        assert get_prepared_spells_limit(class_name, level, modifier) == expected


class TestSpellsKnownValidation:
    """Test spell list size validation."""

    def test_too_many_known(self):
        result = validate_known_spells_limit("Sorcerer", 1, ["a", "b", "c"], [])
        assert [e.code for e in result.errors] == ["TOO_MANY_SPELLS_KNOWN"]
        assert "Remove 1 spell." in result.errors[0].message

    def test_room_to_learn_is_info(self):
        result = validate_known_spells_limit("Bard", 1, ["a"], ["x"])
        assert result.is_valid
        assert [w.code for w in result.warnings] == ["SPELLS_KNOWN_AVAILABLE"]
        assert result.warnings[0].message == "You can know 3 more spells"

    def test_too_many_cantrips(self):
        result = validate_known_spells_limit("Wizard", 1, [], ["a", "b", "c", "d", "e"])
        assert [e.code for e in result.errors] == ["TOO_MANY_CANTRIPS_KNOWN"]
        assert result.errors[0].field == "known_cantrips"

    def test_prepared_over_limit(self):
        result = validate_prepared_spells_limit("Wizard", 1, 2, ["a", "b", "c", "d"])
        assert [e.code for e in result.errors] == ["TOO_MANY_PREPARED_SPELLS"]
        assert "Unprepare 1 spell." in result.errors[0].message

    def test_prepared_under_limit(self):
        result = validate_prepared_spells_limit("Cleric", 3, 3, ["a"])
        assert result.is_valid
        assert result.warnings[0].message == "You can prepare 5 more spells"

    def test_known_caster_skips_prepared_check(self):
        assert validate_prepared_spells_limit("Sorcerer", 5, 3, ["a"] * 20) == validate_prepared_spells_limit(
            "Barbarian", 1, 0, []
        )
