"""
Fortress - Relic Choice Generation

Implements relic offers shown to the player between waves:
- Eligibility filtering by fortress class, pillar and fortress level
- Exclusion of relics the player already owns
- Rarity-weighted sampling without replacement (weights renormalized per draw)
- Build archetype detection from owned relics

Randomness is injected: any object with next_float() in [0, 1) works
(see state.rng.SeededRandom). The same seed and context always produce the
same offer in the same order.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Iterable, FrozenSet, Tuple, Callable, Union
from enum import Enum
import logging

from ..content.relics import (
    RelicDefinition,
    FortressClass,
    PillarId,
    RELICS,
    get_available_relics,
)
from ..state.rng import RelicRng

logger = logging.getLogger(__name__)


# ============================================================================
# SELECTION CONTEXT
# ============================================================================

@dataclass
class SelectionContext:
    """
    Run context for one relic offer.

    Only fortress_class, pillar_id, fortress_level and owned_relic_ids affect
    selection. The remaining fields are advisory and carried for weighting
    policies and telemetry.
    """
    fortress_class: Union[FortressClass, str, None] = None
    pillar_id: Union[PillarId, str, None] = None
    fortress_level: Optional[int] = None
    owned_relic_ids: FrozenSet[str] = frozenset()

    # Advisory
    hero_ids: List[str] = field(default_factory=list)
    equipped_stones: List[str] = field(default_factory=list)
    wave: Optional[int] = None
    gold: Optional[int] = None
    detected_build_type: Optional['BuildType'] = None
    fortress_hp_percent: Optional[float] = None

    def __post_init__(self):
        # A bare id string would otherwise split into characters
        if isinstance(self.owned_relic_ids, str):
            self.owned_relic_ids = frozenset({self.owned_relic_ids})
        else:
            self.owned_relic_ids = frozenset(self.owned_relic_ids)


def get_relic_pool(
    context: SelectionContext,
    relics: Iterable[RelicDefinition] = RELICS,
) -> List[RelicDefinition]:
    """Eligible relics for the context minus owned ones, in catalog order."""
    available = get_available_relics(
        context.fortress_class,
        context.pillar_id,
        context.fortress_level,
        relics=relics,
    )
    return [r for r in available if r.id not in context.owned_relic_ids]


# ============================================================================
# WEIGHTED SELECTION
# ============================================================================

def select_relics(
    count: int,
    context: SelectionContext,
    rng: RelicRng,
    relics: Iterable[RelicDefinition] = RELICS,
) -> List[RelicDefinition]:
    """
    Draw up to `count` distinct relics for an offer.

    Each draw:
    1. total = sum of weights of relics still in the pool
    2. roll = rng.next_float() * total
    3. walk the pool subtracting weights; the first relic where roll <= 0 wins
    4. remove the winner from the pool

    Always returns min(count, pool size) relics, in draw order.

    Args:
        count: Number of relics to offer
        context: Run context (class, pillar, level, owned relics)
        rng: Random source with next_float()
        relics: Catalog to draw from (defaults to the full catalog)

    Returns:
        List of RelicDefinition in draw order
    """
    if count <= 0:
        return []

    remaining: List[Tuple[RelicDefinition, float]] = [
        (relic, relic.base_weight) for relic in get_relic_pool(context, relics)
    ]
    if not remaining:
        logger.debug("No eligible relics for context %s", context)
        return []

    draws = min(count, len(remaining))
    logger.debug("Drawing %d relic(s) from pool of %d", draws, len(remaining))

    selected: List[RelicDefinition] = []
    for _ in range(draws):
        total_weight = sum(weight for _, weight in remaining)
        roll = rng.next_float() * total_weight

        # Rounding can leave roll > 0 after the last weight; take the last relic
        picked = len(remaining) - 1
        for idx, (_, weight) in enumerate(remaining):
            roll -= weight
            if roll <= 0:
                picked = idx
                break

        relic, _ = remaining.pop(picked)
        logger.debug("Picked %s (%s)", relic.id, relic.rarity.value)
        selected.append(relic)

    return selected


# ============================================================================
# BUILD ARCHETYPE
# ============================================================================

class BuildType(Enum):
    SPLASH = "splash"
    CHAIN = "chain"
    EXECUTE = "execute"
    CRIT = "crit"
    TANK = "tank"
    ECONOMY = "economy"
    BALANCED = "balanced"


def _owns(*relic_ids: str) -> Callable[[FrozenSet[str]], bool]:
    return lambda owned: any(relic_id in owned for relic_id in relic_ids)


# Checked in order; first match wins
BUILD_TYPE_SIGNATURES: Tuple[Tuple[Callable[[FrozenSet[str]], bool], BuildType], ...] = (
    (_owns("splash-master"), BuildType.SPLASH),
    (_owns("chain-lightning"), BuildType.CHAIN),
    (_owns("executioner"), BuildType.EXECUTE),
    (_owns("critical-eye"), BuildType.CRIT),
    (_owns("iron-hide"), BuildType.TANK),
    (_owns("gold-rush", "dust-collector"), BuildType.ECONOMY),
)


def detect_build_type(owned_relic_ids: Iterable[str]) -> BuildType:
    """
    Label a player's build from their relics.

    Signature relics are checked in priority order; the number of matches
    does not matter. Used for UI and telemetry only.
    """
    owned = frozenset(owned_relic_ids)
    for matches, build_type in BUILD_TYPE_SIGNATURES:
        if matches(owned):
            return build_type
    return BuildType.BALANCED
