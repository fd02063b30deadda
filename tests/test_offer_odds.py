"""
Offer Odds Tests

Tests exact first-draw probabilities and simulated offer rates.
"""

import pytest

from packages.fortress.content.relics import RelicRarity, FortressClass
from packages.fortress.generation.relic_choices import SelectionContext
from packages.fortress.analysis.offer_odds import (
    first_draw_probabilities, simulate_offer_rates, rarity_offer_share,
)


class TestFirstDrawProbabilities:

    def test_sums_to_one(self, ice_context):
        probs = first_draw_probabilities(ice_context)
        assert sum(probs.values()) == pytest.approx(1.0)

    def test_two_relic_catalog(self, empty_context, two_relic_catalog):
        probs = first_draw_probabilities(empty_context, two_relic_catalog)
        assert probs["a"] == pytest.approx(1.0 / 1.1)
        assert probs["b"] == pytest.approx(0.1 / 1.1)

    def test_only_eligible_relics(self):
        probs = first_draw_probabilities(SelectionContext(fortress_class=FortressClass.FIRE))
        assert "fire-fury" in probs
        assert "ice-mastery" not in probs

    def test_owned_excluded(self):
        probs = first_draw_probabilities(SelectionContext(owned_relic_ids={"iron-hide"}))
        assert "iron-hide" not in probs

    def test_empty_pool(self, empty_context):
        assert first_draw_probabilities(empty_context, ()) == {}


class TestSimulateOfferRates:

    def test_reproducible(self, ice_context):
        a = simulate_offer_rates(ice_context, trials=500, seed=3)
        b = simulate_offer_rates(ice_context, trials=500, seed=3)
        assert a == b

    def test_rates_sum_to_offer_size(self, ice_context):
        rates = simulate_offer_rates(ice_context, count=3, trials=500, seed=1)
        assert sum(rates.values()) == pytest.approx(3.0)

    def test_full_pool_offer(self, empty_context, two_relic_catalog):
        rates = simulate_offer_rates(empty_context, count=2, trials=200, relics=two_relic_catalog)
        assert rates == {"a": 1.0, "b": 1.0}

    def test_single_draw_matches_first_draw(self, empty_context, two_relic_catalog):
        rates = simulate_offer_rates(empty_context, count=1, trials=5000, seed=11,
                                     relics=two_relic_catalog)
        assert rates["a"] == pytest.approx(1.0 / 1.1, abs=0.03)

    def test_zero_count(self, empty_context):
        rates = simulate_offer_rates(empty_context, count=0, trials=10)
        assert all(rate == 0.0 for rate in rates.values())

    def test_trials_must_be_positive(self, empty_context):
        with pytest.raises(ValueError):
            simulate_offer_rates(empty_context, trials=0)


class TestRarityShare:

    def test_shares_sum_to_one(self, ice_context):
        shares = rarity_offer_share(first_draw_probabilities(ice_context))
        assert sum(shares.values()) == pytest.approx(1.0)

    def test_common_share_largest(self, empty_context):
        shares = rarity_offer_share(first_draw_probabilities(empty_context))
        assert shares[RelicRarity.COMMON] > shares[RelicRarity.LEGENDARY]

    def test_unknown_ids_ignored(self):
        shares = rarity_offer_share({"iron-hide": 0.5, "made-up": 0.5})
        assert shares[RelicRarity.COMMON] == 1.0

    def test_empty(self):
        shares = rarity_offer_share({})
        assert all(value == 0.0 for value in shares.values())

    def test_custom_catalog(self, empty_context, two_relic_catalog):
        """Shares resolve rarities against the catalog the rates came from."""
        rates = simulate_offer_rates(empty_context, count=1, trials=500, seed=5,
                                     relics=two_relic_catalog)
        shares = rarity_offer_share(rates, two_relic_catalog)
        assert shares[RelicRarity.COMMON] + shares[RelicRarity.LEGENDARY] == pytest.approx(1.0)
        assert shares[RelicRarity.COMMON] > shares[RelicRarity.LEGENDARY]

    def test_single_common_catalog(self, empty_context, common_relic):
        """A catalog of one common relic puts every slot in the common share."""
        rates = simulate_offer_rates(empty_context, count=1, trials=50, relics=(common_relic,))
        shares = rarity_offer_share(rates, (common_relic,))
        assert shares[RelicRarity.COMMON] == 1.0
