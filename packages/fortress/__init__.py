"""
Fortress Content Engine

Balance and content data for the fortress tower-defense sim, plus the relic
selection engine built on top of it.

Core subsystems:
- content: Relics and modifiers, duo-attacks, leaderboard rewards, power upgrades
- generation: Relic offers (eligibility, weighted sampling, build detection)
- state: Seeded RNG
- analysis: Offer odds for balance tuning

Usage:
    from packages.fortress import SelectionContext, SeededRandom, select_relics, seed_to_long

    context = SelectionContext(fortress_class="ice", owned_relic_ids={"iron-hide"})
    offer = select_relics(3, context, SeededRandom(seed_to_long("ABC123")))
"""

__version__ = "0.1.0"

# RNG
from .state.rng import XorShift128, SeededRandom, SequenceRng, RelicRng, seed_to_long, long_to_seed

# Modifiers
from .content.modifiers import (
    ModifierSet, FieldKind, DEFAULT_MODIFIERS, MODIFIER_FIELDS, MODIFIER_FIELD_KINDS,
    compose_modifiers,
)

# Relics
from .content.relics import (
    RelicDefinition, RelicCategory, RelicRarity, RelicRequirements, RelicCurse,
    FortressClass, PillarId, RarityConfig, RELIC_RARITY_CONFIG, RELICS,
    get_relic_by_id, get_all_relic_ids, get_relics_by_category, get_relics_by_rarity,
    get_build_defining_relics, get_cursed_relics, get_available_relics,
    is_relic_eligible, compose_relic_modifiers, validate_catalog,
)

# Relic offers
from .generation.relic_choices import (
    SelectionContext, BuildType, BUILD_TYPE_SIGNATURES,
    get_relic_pool, select_relics, detect_build_type,
)

__all__ = [
    # RNG
    "XorShift128", "SeededRandom", "SequenceRng", "RelicRng", "seed_to_long", "long_to_seed",
    # Modifiers
    "ModifierSet", "FieldKind", "DEFAULT_MODIFIERS", "MODIFIER_FIELDS", "MODIFIER_FIELD_KINDS",
    "compose_modifiers",
    # Relics
    "RelicDefinition", "RelicCategory", "RelicRarity", "RelicRequirements", "RelicCurse",
    "FortressClass", "PillarId", "RarityConfig", "RELIC_RARITY_CONFIG", "RELICS",
    "get_relic_by_id", "get_all_relic_ids", "get_relics_by_category", "get_relics_by_rarity",
    "get_build_defining_relics", "get_cursed_relics", "get_available_relics",
    "is_relic_eligible", "compose_relic_modifiers", "validate_catalog",
    # Relic offers
    "SelectionContext", "BuildType", "BUILD_TYPE_SIGNATURES",
    "get_relic_pool", "select_relics", "detect_build_type",
]
