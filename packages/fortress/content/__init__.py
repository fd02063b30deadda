"""
Content module - static game data definitions.

Contains relics and their modifiers, duo-attacks, leaderboard rewards and
power-upgrade curves.
"""

from .modifiers import ModifierSet, FieldKind, DEFAULT_MODIFIERS, compose_modifiers

from .relics import (
    RelicDefinition, RelicCategory, RelicRarity, FortressClass, PillarId,
    RELICS, RELIC_RARITY_CONFIG,
    get_relic_by_id, get_all_relic_ids, get_relics_by_category, get_relics_by_rarity,
    get_build_defining_relics, get_cursed_relics, get_available_relics,
)

from .duo_attacks import (
    DuoAttackDefinition, DUO_ATTACK_DEFINITIONS,
    get_duo_attack_by_id, get_duo_attacks_for_hero, get_duo_attack_for_pair,
    can_perform_duo_attack, get_available_duo_attacks,
)

from .leaderboard import (
    ExclusiveItem, RewardTier, LeaderboardCategory, ALL_EXCLUSIVE_ITEMS, REWARD_TIERS,
    get_exclusive_item_by_id, get_reward_tier_for_rank,
)

from .power_upgrades import (
    StatUpgradeConfig, ItemTier, ITEM_TIER_CONFIG,
    get_upgrade_cost, get_stat_multiplier, get_affordable_levels,
)
