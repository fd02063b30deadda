"""
Power Upgrades - permanent gold-funded meta progression.

Cost formula (linear):       cost = base_cost + current_level * cost_per_level
Bonus formula (compounding): multiplier = (1 + bonus_per_level) ** level

Items additionally climb a tier ladder (common -> legendary), each tier
multiplying the item's effect.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from enum import Enum
import math


class UpgradableStat(Enum):
    HP = "hp"
    DAMAGE = "damage"
    ATTACK_SPEED = "attackSpeed"
    RANGE = "range"
    CRIT_CHANCE = "critChance"
    CRIT_MULTIPLIER = "critMultiplier"
    ARMOR = "armor"
    DODGE = "dodge"


@dataclass(frozen=True)
class StatUpgradeConfig:
    stat: UpgradableStat
    name: str
    description: str
    bonus_per_level: float  # 0.05 = +5% per level
    max_level: float  # math.inf for uncapped stats
    base_cost: int
    cost_per_level: int


# ============================================================================
# STAT UPGRADE TABLES
# ============================================================================

FORTRESS_STAT_UPGRADES: Tuple[StatUpgradeConfig, ...] = (
    StatUpgradeConfig(UpgradableStat.HP, "Reinforced Walls", "+5% fortress HP per level",
                      bonus_per_level=0.05, max_level=20, base_cost=60, cost_per_level=45),
    StatUpgradeConfig(UpgradableStat.DAMAGE, "Arsenal", "+4% fortress damage per level",
                      bonus_per_level=0.04, max_level=20, base_cost=90, cost_per_level=60),
    StatUpgradeConfig(UpgradableStat.ARMOR, "Plating", "+3% damage reduction per level",
                      bonus_per_level=0.03, max_level=20, base_cost=120, cost_per_level=75),
)

HERO_STAT_UPGRADES: Tuple[StatUpgradeConfig, ...] = (
    StatUpgradeConfig(UpgradableStat.HP, "Endurance", "+10% hero HP per level",
                      bonus_per_level=0.10, max_level=math.inf, base_cost=15, cost_per_level=10),
    StatUpgradeConfig(UpgradableStat.DAMAGE, "Attack Power", "+10% hero damage per level",
                      bonus_per_level=0.10, max_level=math.inf, base_cost=25, cost_per_level=15),
)

TURRET_STAT_UPGRADES: Tuple[StatUpgradeConfig, ...] = (
    StatUpgradeConfig(UpgradableStat.DAMAGE, "Upgraded Caliber", "+3% turret damage per level",
                      bonus_per_level=0.03, max_level=20, base_cost=40, cost_per_level=25),
    StatUpgradeConfig(UpgradableStat.ATTACK_SPEED, "Rapid-Fire Mechanism", "+2.5% turret attack speed per level",
                      bonus_per_level=0.025, max_level=20, base_cost=60, cost_per_level=35),
)


def _find_config(table: Tuple[StatUpgradeConfig, ...], stat: UpgradableStat) -> Optional[StatUpgradeConfig]:
    for config in table:
        if config.stat is stat:
            return config
    return None


def get_fortress_stat_config(stat: UpgradableStat) -> Optional[StatUpgradeConfig]:
    return _find_config(FORTRESS_STAT_UPGRADES, stat)


def get_hero_stat_config(stat: UpgradableStat) -> Optional[StatUpgradeConfig]:
    return _find_config(HERO_STAT_UPGRADES, stat)


def get_turret_stat_config(stat: UpgradableStat) -> Optional[StatUpgradeConfig]:
    return _find_config(TURRET_STAT_UPGRADES, stat)


# ============================================================================
# COST / BONUS CURVES
# ============================================================================

def get_upgrade_cost(config: StatUpgradeConfig, current_level: int) -> float:
    """Gold cost of the next level; math.inf once the stat is maxed."""
    if current_level >= config.max_level:
        return math.inf
    return config.base_cost + current_level * config.cost_per_level


def get_stat_multiplier(config: StatUpgradeConfig, level: int) -> float:
    if level <= 0:
        return 1.0
    return (1 + config.bonus_per_level) ** level


def get_stat_bonus_percent(config: StatUpgradeConfig, level: int) -> float:
    return (get_stat_multiplier(config, level) - 1) * 100


def get_total_spent_on_stat(config: StatUpgradeConfig, current_level: int) -> int:
    """Gold spent reaching current_level from zero."""
    return sum(config.base_cost + i * config.cost_per_level for i in range(current_level))


def get_affordable_levels(config: StatUpgradeConfig, current_level: int, available_gold: int) -> int:
    """How many consecutive levels the gold buys, starting at current_level."""
    levels = 0
    level = current_level
    remaining = available_gold

    while level < config.max_level:
        cost = get_upgrade_cost(config, level)
        if remaining < cost:
            break
        remaining -= cost
        level += 1
        levels += 1

    return levels


# ============================================================================
# ITEM TIERS
# ============================================================================

class ItemTier(Enum):
    """Item tiers, lowest first."""
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


ITEM_TIERS: Tuple[ItemTier, ...] = tuple(ItemTier)


@dataclass(frozen=True)
class ItemTierConfig:
    tier: ItemTier
    name: str
    effect_multiplier: float
    upgrade_cost: Optional[int]  # None at max tier
    color: int


ITEM_TIER_CONFIG: Dict[ItemTier, ItemTierConfig] = {
    ItemTier.COMMON: ItemTierConfig(ItemTier.COMMON, "Common", 1.0, 800, 0x9D9D9D),
    ItemTier.UNCOMMON: ItemTierConfig(ItemTier.UNCOMMON, "Uncommon", 1.15, 1750, 0x1EFF00),
    ItemTier.RARE: ItemTierConfig(ItemTier.RARE, "Rare", 1.35, 4000, 0x0070DD),
    ItemTier.EPIC: ItemTierConfig(ItemTier.EPIC, "Epic", 1.6, 8000, 0xA335EE),
    ItemTier.LEGENDARY: ItemTierConfig(ItemTier.LEGENDARY, "Legendary", 2.0, None, 0xFF8000),
}


def get_next_item_tier(tier: ItemTier) -> Optional[ItemTier]:
    index = ITEM_TIERS.index(tier)
    if index >= len(ITEM_TIERS) - 1:
        return None
    return ITEM_TIERS[index + 1]


def is_max_item_tier(tier: ItemTier) -> bool:
    return tier is ItemTier.LEGENDARY


def get_item_upgrade_cost(current_tier: ItemTier) -> Optional[int]:
    return ITEM_TIER_CONFIG[current_tier].upgrade_cost
