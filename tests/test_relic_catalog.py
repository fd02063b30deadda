"""
Relic Catalog Tests

Tests catalog contents, lookups, eligibility rules and catalog validation.
"""

import pytest

from packages.fortress.content.relics import (
    RELICS, RELIC_RARITY_CONFIG, RelicDefinition, RelicCategory, RelicRarity,
    RelicRequirements, FortressClass, PillarId,
    get_relic_by_id, get_all_relic_ids, get_relics_by_category, get_relics_by_rarity,
    get_build_defining_relics, get_cursed_relics, get_available_relics,
    is_relic_eligible, validate_catalog,
)


class TestCatalogContents:
    """Test the shipped relic catalog."""

    def test_total_relics(self):
        assert len(RELICS) == 25

    def test_ids_unique(self):
        ids = get_all_relic_ids()
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("category,expected", [
        (RelicCategory.BUILD_DEFINING, 4),
        (RelicCategory.STANDARD, 5),
        (RelicCategory.CLASS, 5),
        (RelicCategory.PILLAR, 3),
        (RelicCategory.SYNERGY, 2),
        (RelicCategory.ECONOMY, 3),
        (RelicCategory.CURSED, 3),
    ])
    def test_category_counts(self, category, expected):
        assert len(get_relics_by_category(category)) == expected

    def test_rarity_weights(self):
        assert RELIC_RARITY_CONFIG[RelicRarity.COMMON].base_weight == 1.0
        assert RELIC_RARITY_CONFIG[RelicRarity.RARE].base_weight == 0.6
        assert RELIC_RARITY_CONFIG[RelicRarity.EPIC].base_weight == 0.3
        assert RELIC_RARITY_CONFIG[RelicRarity.LEGENDARY].base_weight == 0.1

    def test_one_class_relic_per_class(self):
        classes = [r.requirements.fortress_class for r in get_relics_by_category(RelicCategory.CLASS)]
        assert sorted(c.value for c in classes) == sorted(c.value for c in FortressClass)

    def test_pillar_relics_require_pillar(self):
        for relic in get_relics_by_category(RelicCategory.PILLAR):
            assert relic.requirements.pillar_id is not None

    def test_cursed_relics_carry_curse(self):
        for relic in get_cursed_relics():
            assert relic.curse is not None
            assert relic.curse.description

    def test_build_defining_relics(self):
        ids = {r.id for r in get_build_defining_relics()}
        assert {"splash-master", "chain-lightning", "executioner", "glass-cannon"} <= ids

    def test_splash_master_modifiers(self):
        relic = get_relic_by_id("splash-master")
        assert relic.modifiers.splash_radius == 3.0
        assert relic.modifiers.splash_damage == 0.35
        assert relic.rarity is RelicRarity.EPIC

    def test_every_relic_has_full_modifier_set(self):
        for relic in RELICS:
            assert relic.modifiers.crit_damage >= 1.5


class TestLookups:
    """Test catalog accessors."""

    def test_get_by_id(self):
        assert get_relic_by_id("iron-hide").name == "Iron Hide"

    def test_get_by_id_unknown(self):
        assert get_relic_by_id("nonexistent") is None

    def test_by_category_accepts_string(self):
        assert get_relics_by_category("cursed") == get_cursed_relics()

    def test_by_category_unknown_string(self):
        assert get_relics_by_category("not-a-category") == []

    def test_by_rarity_preserves_catalog_order(self):
        commons = get_relics_by_rarity(RelicRarity.COMMON)
        assert [r.id for r in commons] == ["iron-hide", "sharpened-blades", "swift-strikes"]

    def test_by_rarity_accepts_string(self):
        assert get_relics_by_rarity("legendary") == get_relics_by_rarity(RelicRarity.LEGENDARY)


class TestEligibility:
    """Test requirement checks."""

    def test_no_requirements_always_eligible(self):
        assert is_relic_eligible(get_relic_by_id("iron-hide"))

    def test_class_requirement_met(self):
        assert is_relic_eligible(get_relic_by_id("ice-mastery"), fortress_class=FortressClass.ICE)

    def test_class_requirement_wrong_class(self):
        assert not is_relic_eligible(get_relic_by_id("ice-mastery"), fortress_class=FortressClass.FIRE)

    def test_class_requirement_missing_class(self):
        assert not is_relic_eligible(get_relic_by_id("ice-mastery"))

    def test_pillar_requirement(self):
        relic = get_relic_by_id("cosmos-blessing")
        assert is_relic_eligible(relic, pillar_id=PillarId.COSMOS)
        assert not is_relic_eligible(relic, pillar_id=PillarId.MAGIC)
        assert not is_relic_eligible(relic)

    def test_min_level(self):
        relic = RelicDefinition(
            id="gated", name="Gated", description="",
            category=RelicCategory.STANDARD, rarity=RelicRarity.RARE,
            requirements=RelicRequirements(min_fortress_level=5),
        )
        assert is_relic_eligible(relic, fortress_level=5)
        assert is_relic_eligible(relic, fortress_level=12)
        assert not is_relic_eligible(relic, fortress_level=4)

    def test_min_level_unknown_level_excluded(self):
        relic = RelicDefinition(
            id="gated", name="Gated", description="",
            category=RelicCategory.STANDARD, rarity=RelicRarity.RARE,
            requirements=RelicRequirements(min_fortress_level=5),
        )
        assert not is_relic_eligible(relic, fortress_level=None)

    def test_available_without_context(self):
        available = get_available_relics()
        # 5 class + 3 pillar relics need context
        assert len(available) == 17
        assert all(r.requirements is None for r in available)

    def test_available_ice_cosmos(self):
        ids = {r.id for r in get_available_relics(FortressClass.ICE, PillarId.COSMOS, 10)}
        assert "ice-mastery" in ids
        assert "cosmos-blessing" in ids
        assert "fire-fury" not in ids
        assert "magic-arts" not in ids
        assert len(ids) == 19

    def test_available_accepts_strings(self):
        by_enum = get_available_relics(FortressClass.TECH, PillarId.SCIENCE)
        by_str = get_available_relics("tech", "science")
        assert by_enum == by_str

    def test_available_unknown_string_treated_as_unset(self):
        assert get_available_relics("plasma") == get_available_relics()


class TestValidation:
    """Test catalog authoring checks."""

    def test_shipped_catalog_is_valid(self):
        assert validate_catalog() == []

    def test_duplicate_id(self):
        relic = get_relic_by_id("iron-hide")
        problems = validate_catalog([relic, relic])
        assert problems == ["iron-hide: duplicate id"]

    def test_cursed_without_curse(self):
        relic = RelicDefinition(
            id="bad-curse", name="Bad", description="",
            category=RelicCategory.CURSED, rarity=RelicRarity.RARE,
        )
        assert validate_catalog([relic]) == ["bad-curse: cursed relic without a curse"]

    def test_class_requirement_outside_class_category(self):
        relic = RelicDefinition(
            id="misfiled", name="Misfiled", description="",
            category=RelicCategory.STANDARD, rarity=RelicRarity.RARE,
            requirements=RelicRequirements(fortress_class=FortressClass.ICE),
        )
        assert validate_catalog([relic]) == ["misfiled: class requirement outside class category"]

    def test_pillar_requirement_outside_pillar_category(self):
        relic = RelicDefinition(
            id="misfiled", name="Misfiled", description="",
            category=RelicCategory.ECONOMY, rarity=RelicRarity.RARE,
            requirements=RelicRequirements(pillar_id=PillarId.GODS),
        )
        assert validate_catalog([relic]) == ["misfiled: pillar requirement outside pillar category"]
