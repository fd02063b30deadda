"""
Duo-Attack Tests
"""

import pytest

from packages.fortress.content.duo_attacks import (
    DUO_ATTACK_DEFINITIONS, TICKS_PER_SECOND, DamageEffect, DebuffEffect, BuffEffect, StatusKind,
    get_duo_attack_by_id, get_duo_attacks_for_hero, get_duo_attack_for_pair,
    can_perform_duo_attack, get_available_duo_attacks,
)


class TestDefinitions:

    def test_count(self):
        assert len(DUO_ATTACK_DEFINITIONS) == 12

    def test_ids_unique(self):
        ids = [d.id for d in DUO_ATTACK_DEFINITIONS]
        assert len(ids) == len(set(ids))

    def test_pairs_unique(self):
        pairs = [frozenset(d.heroes) for d in DUO_ATTACK_DEFINITIONS]
        assert len(pairs) == len(set(pairs))

    def test_every_duo_has_effects(self):
        for duo in DUO_ATTACK_DEFINITIONS:
            assert duo.effects
            assert all(isinstance(e, (DamageEffect, DebuffEffect, BuffEffect)) for e in duo.effects)

    def test_thunder_guard(self):
        duo = get_duo_attack_by_id("thunder_guard")
        assert duo.heroes == ("storm", "vanguard")
        assert duo.cooldown_ticks == 900
        assert duo.cooldown_seconds == 900 / TICKS_PER_SECOND
        assert duo.total_damage() == 150

    def test_status_effects(self):
        duo = get_duo_attack_by_id("nature_fire")
        statuses = [e.status for e in duo.effects if isinstance(e, DebuffEffect)]
        assert [s.kind for s in statuses] == [StatusKind.SLOW, StatusKind.BURN]
        assert statuses[0].percent == 70
        assert statuses[1].damage_per_tick == 8

    def test_unknown_id(self):
        assert get_duo_attack_by_id("nope") is None


class TestHeroLookups:

    def test_attacks_for_hero(self):
        ids = {d.id for d in get_duo_attacks_for_hero("storm")}
        assert ids == {"thunder_guard", "void_storm", "inferno_storm"}

    def test_attacks_for_unknown_hero(self):
        assert get_duo_attacks_for_hero("nobody") == []

    @pytest.mark.parametrize("first,second", [("frost", "inferno"), ("inferno", "frost")])
    def test_pair_order_insensitive(self, first, second):
        assert get_duo_attack_for_pair(first, second).id == "frozen_inferno"

    def test_can_perform(self):
        assert can_perform_duo_attack("forge", "spectre")
        assert not can_perform_duo_attack("storm", "frost")

    def test_available_for_team(self):
        ids = {d.id for d in get_available_duo_attacks(["forge", "titan", "glacier"])}
        assert ids == {"tech_void", "cryo_artillery"}

    def test_available_for_empty_team(self):
        assert get_available_duo_attacks([]) == []
