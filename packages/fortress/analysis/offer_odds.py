"""
Relic Offer Odds for balance tuning.

Answers "how often does the player see relic X?" for a given run context:
- Exact first-draw probability (rarity weight / total pool weight)
- Monte Carlo offer rates for multi-relic offers, where later draws are
  renormalized over a shrinking pool and have no closed form worth maintaining
"""

import numpy as np
from typing import Dict, Iterable, Mapping

from ..content.relics import RelicDefinition, RelicRarity, RELICS
from ..generation.relic_choices import SelectionContext, get_relic_pool, select_relics
from ..state.rng import SeededRandom


def first_draw_probabilities(
    context: SelectionContext,
    relics: Iterable[RelicDefinition] = RELICS,
) -> Dict[str, float]:
    """Probability that each eligible relic is the first relic drawn."""
    pool = get_relic_pool(context, relics)
    if not pool:
        return {}

    weights = np.array([r.base_weight for r in pool], dtype=np.float64)
    probs = weights / weights.sum()
    return {relic.id: float(p) for relic, p in zip(pool, probs)}


def simulate_offer_rates(
    context: SelectionContext,
    count: int = 3,
    trials: int = 10000,
    seed: int = 0,
    relics: Iterable[RelicDefinition] = RELICS,
) -> Dict[str, float]:
    """
    Fraction of offers in which each eligible relic appears.

    Runs `trials` independent offers of `count` relics from one seeded stream,
    so results are reproducible for a given seed.
    """
    if trials <= 0:
        raise ValueError("trials must be positive")

    relics = tuple(relics)
    pool = get_relic_pool(context, relics)
    if not pool:
        return {}

    index = {relic.id: i for i, relic in enumerate(pool)}
    hits = np.zeros(len(pool), dtype=np.int64)
    rng = SeededRandom(seed)

    for _ in range(trials):
        offer = select_relics(count, context, rng, relics=relics)
        for relic in offer:
            hits[index[relic.id]] += 1

    rates = hits / trials
    return {relic.id: float(rate) for relic, rate in zip(pool, rates)}


def rarity_offer_share(
    rates: Mapping[str, float],
    relics: Iterable[RelicDefinition] = RELICS,
) -> Dict[RelicRarity, float]:
    """
    Share of offered slots taken by each rarity.

    Takes the output of first_draw_probabilities() or simulate_offer_rates();
    pass the same catalog they were given. Ids that are not in the catalog
    are ignored.
    """
    rarity_by_id = {relic.id: relic.rarity for relic in relics}
    totals = {rarity: 0.0 for rarity in RelicRarity}
    for relic_id, rate in rates.items():
        rarity = rarity_by_id.get(relic_id)
        if rarity is not None:
            totals[rarity] += rate

    grand_total = float(np.sum(list(totals.values())))
    if grand_total == 0:
        return totals
    return {rarity: value / grand_total for rarity, value in totals.items()}
