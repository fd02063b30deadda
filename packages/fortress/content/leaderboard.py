"""
Leaderboard exclusive items and weekly reward tiers.

Top players in the weekly rankings (waves cleared, PvP honor) receive gold,
dust, sigils and cosmetic items that cannot be obtained anywhere else.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union
from enum import Enum


class ExclusiveItemType(Enum):
    FRAME = "frame"
    TITLE = "title"
    BADGE = "badge"
    AURA = "aura"
    EFFECT = "effect"


class ExclusiveItemRarity(Enum):
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"


class LeaderboardCategory(Enum):
    WAVES = "waves"
    HONOR = "honor"


@dataclass(frozen=True)
class ExclusiveItem:
    id: str
    name: str
    description: str
    item_type: ExclusiveItemType
    rarity: ExclusiveItemRarity
    category: LeaderboardCategory
    icon: str
    color: str
    glow_color: Optional[str] = None
    effect: Optional[str] = None


@dataclass(frozen=True)
class RewardTier:
    """Payout for every rank up to and including max_rank."""
    max_rank: int
    gold: int
    dust: int
    sigils: int
    items: Tuple[str, ...] = field(default_factory=tuple)


_W = LeaderboardCategory.WAVES
_H = LeaderboardCategory.HONOR
_T = ExclusiveItemType
_R = ExclusiveItemRarity

# ============================================================================
# WAVES LEADERBOARD ITEMS
# ============================================================================

WAVES_EXCLUSIVE_ITEMS: Tuple[ExclusiveItem, ...] = (
    # Top 1
    ExclusiveItem("waves_champion_frame", "Champion Frame", "Animated gold frame with a rolling wave",
                  _T.FRAME, _R.MYTHIC, _W, "👑", "#FFD700",
                  glow_color="rgba(255, 215, 0, 0.6)", effect="wave-pulse"),
    ExclusiveItem("waves_champion_title", "Wavebreaker", "Exclusive title for rank #1",
                  _T.TITLE, _R.MYTHIC, _W, "🌊", "#FFD700"),
    ExclusiveItem("waves_champion_aura", "Golden Tide Aura", "Golden glow around the avatar",
                  _T.AURA, _R.MYTHIC, _W, "✨", "#FFD700", effect="golden-tide"),
    # Top 2
    ExclusiveItem("waves_silver_frame", "Silver Wave Frame", "Silver frame with a subtle sheen",
                  _T.FRAME, _R.LEGENDARY, _W, "🥈", "#C0C0C0",
                  glow_color="rgba(192, 192, 192, 0.5)"),
    ExclusiveItem("waves_silver_title", "Tidemaster", "Title for second place",
                  _T.TITLE, _R.LEGENDARY, _W, "🌊", "#C0C0C0"),
    # Top 3
    ExclusiveItem("waves_bronze_frame", "Bronze Wave Frame", "Bronze frame with a warm glow",
                  _T.FRAME, _R.EPIC, _W, "🥉", "#CD7F32"),
    ExclusiveItem("waves_bronze_badge", "Wave Veteran", "Podium badge",
                  _T.BADGE, _R.EPIC, _W, "🏅", "#CD7F32"),
    # Top 4-10
    ExclusiveItem("waves_elite_badge", "Elite Defender", "Badge for the top 10 players",
                  _T.BADGE, _R.RARE, _W, "🛡️", "#00BFFF"),
    # Top 11-25
    ExclusiveItem("waves_veteran_badge", "Wave Warrior", "Badge for the top 25 players",
                  _T.BADGE, _R.RARE, _W, "⚔️", "#4169E1"),
)

# ============================================================================
# HONOR (PVP) LEADERBOARD ITEMS
# ============================================================================

HONOR_EXCLUSIVE_ITEMS: Tuple[ExclusiveItem, ...] = (
    # Top 1
    ExclusiveItem("honor_gladiator_frame", "Gladiator Frame", "Animated red-gold frame with flames",
                  _T.FRAME, _R.MYTHIC, _H, "🔥", "#FF4500",
                  glow_color="rgba(255, 69, 0, 0.6)", effect="flame-dance"),
    ExclusiveItem("honor_gladiator_title", "Supreme Gladiator", "The highest arena title",
                  _T.TITLE, _R.MYTHIC, _H, "⚔️", "#FF4500"),
    ExclusiveItem("honor_champion_effect", "Arena Fire", "Burning effect around the name",
                  _T.EFFECT, _R.MYTHIC, _H, "🔥", "#FF4500", effect="arena-fire"),
    # Top 2
    ExclusiveItem("honor_silver_frame", "Silver Arena Frame", "Silver frame with blades",
                  _T.FRAME, _R.LEGENDARY, _H, "🗡️", "#C0C0C0"),
    ExclusiveItem("honor_duelist_title", "Master Duelist", "Title for second place",
                  _T.TITLE, _R.LEGENDARY, _H, "⚔️", "#C0C0C0"),
    # Top 3
    ExclusiveItem("honor_bronze_frame", "Bronze Arena Frame", "Bronze frame with a shield",
                  _T.FRAME, _R.EPIC, _H, "🛡️", "#CD7F32"),
    ExclusiveItem("honor_champion_badge", "Arena Champion", "Arena podium badge",
                  _T.BADGE, _R.EPIC, _H, "🏆", "#CD7F32"),
    # Top 4-10
    ExclusiveItem("honor_elite_badge", "Elite Fighter", "Badge for the arena top 10",
                  _T.BADGE, _R.RARE, _H, "💪", "#DC143C"),
    # Top 11-25
    ExclusiveItem("honor_warrior_badge", "Arena Warrior", "Badge for the arena top 25",
                  _T.BADGE, _R.RARE, _H, "⚔️", "#8B0000"),
)

ALL_EXCLUSIVE_ITEMS: Tuple[ExclusiveItem, ...] = WAVES_EXCLUSIVE_ITEMS + HONOR_EXCLUSIVE_ITEMS

# ============================================================================
# REWARD TIERS (sorted by max_rank ascending)
# ============================================================================

WAVES_REWARD_TIERS: Tuple[RewardTier, ...] = (
    RewardTier(1, gold=50000, dust=500, sigils=100,
               items=("waves_champion_frame", "waves_champion_title", "waves_champion_aura")),
    RewardTier(2, gold=35000, dust=350, sigils=70, items=("waves_silver_frame", "waves_silver_title")),
    RewardTier(3, gold=25000, dust=250, sigils=50, items=("waves_bronze_frame", "waves_bronze_badge")),
    RewardTier(10, gold=15000, dust=150, sigils=30, items=("waves_elite_badge",)),
    RewardTier(25, gold=8000, dust=80, sigils=15, items=("waves_veteran_badge",)),
    RewardTier(50, gold=4000, dust=40, sigils=5),
    RewardTier(100, gold=2000, dust=20, sigils=0),
)

HONOR_REWARD_TIERS: Tuple[RewardTier, ...] = (
    RewardTier(1, gold=40000, dust=400, sigils=80,
               items=("honor_gladiator_frame", "honor_gladiator_title", "honor_champion_effect")),
    RewardTier(2, gold=28000, dust=280, sigils=55, items=("honor_silver_frame", "honor_duelist_title")),
    RewardTier(3, gold=20000, dust=200, sigils=40, items=("honor_bronze_frame", "honor_champion_badge")),
    RewardTier(10, gold=12000, dust=120, sigils=25, items=("honor_elite_badge",)),
    RewardTier(25, gold=6000, dust=60, sigils=10, items=("honor_warrior_badge",)),
    RewardTier(50, gold=3000, dust=30, sigils=5),
)

REWARD_TIERS: Dict[LeaderboardCategory, Tuple[RewardTier, ...]] = {
    LeaderboardCategory.WAVES: WAVES_REWARD_TIERS,
    LeaderboardCategory.HONOR: HONOR_REWARD_TIERS,
}


def get_exclusive_item_by_id(item_id: str) -> Optional[ExclusiveItem]:
    for item in ALL_EXCLUSIVE_ITEMS:
        if item.id == item_id:
            return item
    return None


def get_exclusive_items_by_category(category: LeaderboardCategory) -> List[ExclusiveItem]:
    return [i for i in ALL_EXCLUSIVE_ITEMS if i.category is category]


def get_exclusive_items_by_rarity(rarity: ExclusiveItemRarity) -> List[ExclusiveItem]:
    return [i for i in ALL_EXCLUSIVE_ITEMS if i.rarity is rarity]


def get_reward_tier_for_rank(
    rank: int,
    category: Union[LeaderboardCategory, str],
) -> Optional[RewardTier]:
    """
    Reward tier for a final rank (1 = best).

    Returns None for ranks below 1, ranks past the last tier and unknown categories.
    """
    if rank < 1:
        return None
    try:
        tiers = REWARD_TIERS[LeaderboardCategory(category)]
    except ValueError:
        return None
    for tier in tiers:
        if rank <= tier.max_rank:
            return tier
    return None
