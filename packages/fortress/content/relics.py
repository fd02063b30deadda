"""
Fortress Relic Definitions - 25 relics across 7 categories.

Relic structure:
- id: Unique identifier string (sole equality key everywhere)
- category: build_defining, standard, class, pillar, synergy, economy, cursed
- rarity: common, rare, epic, legendary (drives selection weight)
- modifiers: Full ModifierSet (neutral defaults + overrides)

Spawn conditions come from the optional requirements record:
- fortress_class: only offered to that fortress class
- pillar_id: only offered while on that pillar
- min_fortress_level: only offered at or above that fortress level

A requirement the context does not supply counts as unmet. Cursed relics pair
their benefit with an explicit curse record describing the drawback.

The catalog is an immutable module-level tuple; all accessors return entries
in declaration order and never mutate it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Iterable, Tuple, Type, TypeVar, Union
from enum import Enum
import logging

from .modifiers import ModifierSet, DEFAULT_MODIFIERS, compose_modifiers

logger = logging.getLogger(__name__)


class RelicCategory(Enum):
    BUILD_DEFINING = "build_defining"
    STANDARD = "standard"
    CLASS = "class"
    PILLAR = "pillar"
    SYNERGY = "synergy"
    ECONOMY = "economy"
    CURSED = "cursed"


class RelicRarity(Enum):
    """Relic rarities, lowest tier first."""
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class FortressClass(Enum):
    NATURAL = "natural"
    ICE = "ice"
    FIRE = "fire"
    LIGHTNING = "lightning"
    TECH = "tech"


class PillarId(Enum):
    STREETS = "streets"
    SCIENCE = "science"
    MUTANTS = "mutants"
    COSMOS = "cosmos"
    MAGIC = "magic"
    GODS = "gods"


@dataclass(frozen=True)
class RarityConfig:
    base_weight: float
    color: int


RELIC_RARITY_CONFIG: Dict[RelicRarity, RarityConfig] = {
    RelicRarity.COMMON: RarityConfig(base_weight=1.0, color=0x808080),
    RelicRarity.RARE: RarityConfig(base_weight=0.6, color=0x0066FF),
    RelicRarity.EPIC: RarityConfig(base_weight=0.3, color=0x9900CC),
    RelicRarity.LEGENDARY: RarityConfig(base_weight=0.1, color=0xFFAA00),
}


@dataclass(frozen=True)
class RelicRequirements:
    """Eligibility requirements. Each field is independently optional."""
    fortress_class: Optional[FortressClass] = None
    pillar_id: Optional[PillarId] = None
    min_fortress_level: Optional[int] = None


@dataclass(frozen=True)
class RelicCurse:
    """The drawback paired with a cursed relic's benefit."""
    stat: str
    value: float
    description: str


@dataclass(frozen=True)
class RelicDefinition:
    """A relic definition."""
    id: str
    name: str
    description: str
    category: RelicCategory
    rarity: RelicRarity
    modifiers: ModifierSet = DEFAULT_MODIFIERS
    is_build_defining: bool = False
    synergies: Tuple[str, ...] = field(default_factory=tuple)
    requirements: Optional[RelicRequirements] = None
    curse: Optional[RelicCurse] = None

    @property
    def base_weight(self) -> float:
        return RELIC_RARITY_CONFIG[self.rarity].base_weight


def _mods(**overrides) -> ModifierSet:
    return DEFAULT_MODIFIERS.with_overrides(**overrides)


# ============================================================================
# BUILD-DEFINING RELICS (4)
# ============================================================================

SPLASH_MASTER = RelicDefinition(
    id="splash-master", name="Splash Master",
    description="Attacks deal 35% damage to nearby enemies",
    category=RelicCategory.BUILD_DEFINING, rarity=RelicRarity.EPIC,
    is_build_defining=True,
    modifiers=_mods(splash_radius=3.0, splash_damage=0.35),
)

CHAIN_LIGHTNING = RelicDefinition(
    id="chain-lightning", name="Chain Lightning",
    description="+40% chain chance, +2 chains",
    category=RelicCategory.BUILD_DEFINING, rarity=RelicRarity.EPIC,
    is_build_defining=True,
    modifiers=_mods(chain_chance=0.4, chain_count=2, chain_damage=0.6),
)

EXECUTIONER = RelicDefinition(
    id="executioner", name="Executioner",
    description="Execute enemies below 15% HP for 3x damage",
    category=RelicCategory.BUILD_DEFINING, rarity=RelicRarity.LEGENDARY,
    is_build_defining=True,
    modifiers=_mods(execute_threshold=0.15, execute_damage=3.0),
)

GLASS_CANNON = RelicDefinition(
    id="glass-cannon", name="Glass Cannon",
    description="+100% damage, -40% max HP",
    category=RelicCategory.BUILD_DEFINING, rarity=RelicRarity.LEGENDARY,
    is_build_defining=True,
    modifiers=_mods(damage_multiplier=2.0, max_hp_multiplier=0.6),
)

# ============================================================================
# STANDARD RELICS (5)
# ============================================================================

IRON_HIDE = RelicDefinition(
    id="iron-hide", name="Iron Hide",
    description="+25% max HP",
    category=RelicCategory.STANDARD, rarity=RelicRarity.COMMON,
    modifiers=_mods(max_hp_multiplier=1.25),
)

SHARPENED_BLADES = RelicDefinition(
    id="sharpened-blades", name="Sharpened Blades",
    description="+20% damage",
    category=RelicCategory.STANDARD, rarity=RelicRarity.COMMON,
    modifiers=_mods(damage_multiplier=1.2),
)

SWIFT_STRIKES = RelicDefinition(
    id="swift-strikes", name="Swift Strikes",
    description="+15% attack speed",
    category=RelicCategory.STANDARD, rarity=RelicRarity.COMMON,
    modifiers=_mods(attack_speed_multiplier=1.15),
)

CRITICAL_EYE = RelicDefinition(
    id="critical-eye", name="Critical Eye",
    description="+10% crit chance, +50% crit damage",
    category=RelicCategory.STANDARD, rarity=RelicRarity.RARE,
    modifiers=_mods(crit_chance=0.1, crit_damage=2.0),
)

ELITE_HUNTER = RelicDefinition(
    id="elite-hunter", name="Elite Hunter",
    description="+50% damage to elite enemies",
    category=RelicCategory.STANDARD, rarity=RelicRarity.RARE,
    modifiers=_mods(elite_damage_multiplier=1.5),
)

# ============================================================================
# CLASS RELICS (5) - one per fortress class
# ============================================================================

NATURAL_GROWTH = RelicDefinition(
    id="natural-growth", name="Natural Growth",
    description="Natural class: +30% HP, +HP regen",
    category=RelicCategory.CLASS, rarity=RelicRarity.RARE,
    requirements=RelicRequirements(fortress_class=FortressClass.NATURAL),
    modifiers=_mods(max_hp_multiplier=1.3, hp_regen=2),
    synergies=("natural",),
)

ICE_MASTERY = RelicDefinition(
    id="ice-mastery", name="Ice Mastery",
    description="Ice class: +25% damage, enemies slow on hit",
    category=RelicCategory.CLASS, rarity=RelicRarity.RARE,
    requirements=RelicRequirements(fortress_class=FortressClass.ICE),
    modifiers=_mods(damage_multiplier=1.25),
    synergies=("ice",),
)

LIGHTNING_SURGE = RelicDefinition(
    id="lightning-surge", name="Lightning Surge",
    description="Lightning class: +30% chain damage, +1 chain",
    category=RelicCategory.CLASS, rarity=RelicRarity.RARE,
    requirements=RelicRequirements(fortress_class=FortressClass.LIGHTNING),
    modifiers=_mods(chain_damage=0.3, chain_count=1),
    synergies=("lightning",),
)

TECH_PRECISION = RelicDefinition(
    id="tech-precision", name="Tech Precision",
    description="Tech class: +15% crit chance, +25% attack speed",
    category=RelicCategory.CLASS, rarity=RelicRarity.RARE,
    requirements=RelicRequirements(fortress_class=FortressClass.TECH),
    modifiers=_mods(crit_chance=0.15, attack_speed_multiplier=1.25),
    synergies=("tech",),
)

FIRE_FURY = RelicDefinition(
    id="fire-fury", name="Fire Fury",
    description="Fire class: +30% damage, +5% crit chance",
    category=RelicCategory.CLASS, rarity=RelicRarity.RARE,
    requirements=RelicRequirements(fortress_class=FortressClass.FIRE),
    modifiers=_mods(damage_multiplier=1.3, crit_chance=0.05),
    synergies=("fire",),
)

# ============================================================================
# PILLAR RELICS (3)
# ============================================================================

COSMOS_BLESSING = RelicDefinition(
    id="cosmos-blessing", name="Cosmos Blessing",
    description="Cosmos Pillar: +40% damage, +20% luck",
    category=RelicCategory.PILLAR, rarity=RelicRarity.EPIC,
    requirements=RelicRequirements(pillar_id=PillarId.COSMOS),
    modifiers=_mods(damage_multiplier=1.4, luck_multiplier=1.2),
)

SCIENCE_ENHANCEMENT = RelicDefinition(
    id="science-enhancement", name="Science Enhancement",
    description="Science Pillar: +30% attack speed, +20% crit",
    category=RelicCategory.PILLAR, rarity=RelicRarity.EPIC,
    requirements=RelicRequirements(pillar_id=PillarId.SCIENCE),
    modifiers=_mods(attack_speed_multiplier=1.3, crit_chance=0.2),
)

MAGIC_ARTS = RelicDefinition(
    id="magic-arts", name="Magic Arts",
    description="Magic Pillar: +50% damage, -20% cooldowns",
    category=RelicCategory.PILLAR, rarity=RelicRarity.EPIC,
    requirements=RelicRequirements(pillar_id=PillarId.MAGIC),
    modifiers=_mods(damage_multiplier=1.5, cooldown_multiplier=0.8),
)

# ============================================================================
# SYNERGY RELICS (2)
# ============================================================================

HARMONIC_RESONANCE = RelicDefinition(
    id="harmonic-resonance", name="Harmonic Resonance",
    description="Double synergy bonuses when all units match class",
    category=RelicCategory.SYNERGY, rarity=RelicRarity.LEGENDARY,
    is_build_defining=True,
    modifiers=_mods(cooldown_multiplier=0.6, crit_chance=0.15),
)

TEAM_SPIRIT = RelicDefinition(
    id="team-spirit", name="Team Spirit",
    description="+5% damage and HP per hero matching fortress class",
    category=RelicCategory.SYNERGY, rarity=RelicRarity.EPIC,
    modifiers=_mods(damage_multiplier=1.15, max_hp_multiplier=1.05),
)

# ============================================================================
# ECONOMY RELICS (3)
# ============================================================================

GOLD_RUSH = RelicDefinition(
    id="gold-rush", name="Gold Rush",
    description="+50% gold from all sources",
    category=RelicCategory.ECONOMY, rarity=RelicRarity.RARE,
    modifiers=_mods(gold_multiplier=1.5),
)

DUST_COLLECTOR = RelicDefinition(
    id="dust-collector", name="Dust Collector",
    description="+50% dust from all sources",
    category=RelicCategory.ECONOMY, rarity=RelicRarity.RARE,
    modifiers=_mods(dust_multiplier=1.5),
)

LUCKY_CHARM = RelicDefinition(
    id="lucky-charm", name="Lucky Charm",
    description="+30% luck for all drops",
    category=RelicCategory.ECONOMY, rarity=RelicRarity.EPIC,
    modifiers=_mods(luck_multiplier=1.3),
)

# ============================================================================
# CURSED RELICS (3) - benefit paired with an explicit drawback
# ============================================================================

BERSERKERS_RAGE = RelicDefinition(
    id="berserkers-rage", name="Berserker's Rage",
    description="+80% damage when below 30% HP, -20% max HP",
    category=RelicCategory.CURSED, rarity=RelicRarity.EPIC,
    is_build_defining=True,
    modifiers=_mods(low_hp_damage_multiplier=1.8, low_hp_threshold=0.3, max_hp_multiplier=0.8),
    curse=RelicCurse(stat="max_hp_multiplier", value=0.8, description="-20% max HP"),
)

GREEDY_GOBLIN = RelicDefinition(
    id="greedy-goblin", name="Greedy Goblin",
    description="+100% gold, -15% damage",
    category=RelicCategory.CURSED, rarity=RelicRarity.RARE,
    modifiers=_mods(gold_multiplier=2.0, damage_multiplier=0.85),
    curse=RelicCurse(stat="damage_multiplier", value=0.85, description="-15% damage"),
)

# The curse stat lives outside ModifierSet; enemies apply it to their own hits.
DESPERATE_MEASURES = RelicDefinition(
    id="desperate-measures", name="Desperate Measures",
    description="+100% damage when HP below 20%, enemies deal +25% damage",
    category=RelicCategory.CURSED, rarity=RelicRarity.LEGENDARY,
    is_build_defining=True,
    modifiers=_mods(low_hp_damage_multiplier=2.0, low_hp_threshold=0.2),
    curse=RelicCurse(stat="incoming_damage", value=1.25, description="+25% incoming damage"),
)


# ============================================================================
# RELIC REGISTRY
# ============================================================================

RELICS: Tuple[RelicDefinition, ...] = (
    # Build-defining
    SPLASH_MASTER, CHAIN_LIGHTNING, EXECUTIONER, GLASS_CANNON,
    # Standard
    IRON_HIDE, SHARPENED_BLADES, SWIFT_STRIKES, CRITICAL_EYE, ELITE_HUNTER,
    # Class
    NATURAL_GROWTH, ICE_MASTERY, LIGHTNING_SURGE, TECH_PRECISION, FIRE_FURY,
    # Pillar
    COSMOS_BLESSING, SCIENCE_ENHANCEMENT, MAGIC_ARTS,
    # Synergy
    HARMONIC_RESONANCE, TEAM_SPIRIT,
    # Economy
    GOLD_RUSH, DUST_COLLECTOR, LUCKY_CHARM,
    # Cursed
    BERSERKERS_RAGE, GREEDY_GOBLIN, DESPERATE_MEASURES,
)


E = TypeVar("E", bound=Enum)


def _as_enum(enum_cls: Type[E], value: Union[E, str, None]) -> Optional[E]:
    """Coerce an enum member or its string value; unknown strings become None."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug("Unknown %s value %r treated as unset", enum_cls.__name__, value)
        return None


def get_relic_by_id(relic_id: str) -> Optional[RelicDefinition]:
    """Get a relic by ID, or None if unknown."""
    for relic in RELICS:
        if relic.id == relic_id:
            return relic
    return None


def get_all_relic_ids() -> List[str]:
    return [r.id for r in RELICS]


def get_relics_by_category(category: Union[RelicCategory, str]) -> List[RelicDefinition]:
    """Get all relics of a category, in catalog order."""
    category = _as_enum(RelicCategory, category)
    return [r for r in RELICS if r.category is category]


def get_relics_by_rarity(rarity: Union[RelicRarity, str]) -> List[RelicDefinition]:
    """Get all relics of a rarity, in catalog order."""
    rarity = _as_enum(RelicRarity, rarity)
    return [r for r in RELICS if r.rarity is rarity]


def get_build_defining_relics() -> List[RelicDefinition]:
    return [r for r in RELICS if r.is_build_defining]


def get_cursed_relics() -> List[RelicDefinition]:
    return [r for r in RELICS if r.category is RelicCategory.CURSED]


# ============================================================================
# ELIGIBILITY
# ============================================================================

def is_relic_eligible(
    relic: RelicDefinition,
    fortress_class: Optional[FortressClass] = None,
    pillar_id: Optional[PillarId] = None,
    fortress_level: Optional[int] = None,
) -> bool:
    """
    Check a relic's requirements against run context.

    Every declared requirement must be met. A requirement whose context value
    is missing counts as unmet, so e.g. a level-gated relic is never offered
    when the fortress level is unknown.
    """
    req = relic.requirements
    if req is None:
        return True

    if req.fortress_class is not None and req.fortress_class is not fortress_class:
        return False

    if req.pillar_id is not None and req.pillar_id is not pillar_id:
        return False

    if req.min_fortress_level is not None:
        if fortress_level is None or fortress_level < req.min_fortress_level:
            return False

    return True


def get_available_relics(
    fortress_class: Union[FortressClass, str, None] = None,
    pillar_id: Union[PillarId, str, None] = None,
    fortress_level: Optional[int] = None,
    relics: Iterable[RelicDefinition] = RELICS,
) -> List[RelicDefinition]:
    """Get relics whose requirements are met by the given context, in catalog order."""
    fortress_class = _as_enum(FortressClass, fortress_class)
    pillar_id = _as_enum(PillarId, pillar_id)
    return [
        r for r in relics
        if is_relic_eligible(r, fortress_class, pillar_id, fortress_level)
    ]


# ============================================================================
# MODIFIER AGGREGATION
# ============================================================================

def compose_relic_modifiers(relic_ids: Iterable[str]) -> ModifierSet:
    """
    Combine the modifiers of owned relics.

    Unknown ids are skipped. Synergy relics are skipped too: their bonus
    depends on hero composition and is applied by the synergy system.
    """
    selected = []
    for relic_id in relic_ids:
        relic = get_relic_by_id(relic_id)
        if relic is None:
            logger.debug("Skipping unknown relic id %r", relic_id)
            continue
        if relic.category is RelicCategory.SYNERGY:
            continue
        selected.append(relic.modifiers)
    return compose_modifiers(selected)


# ============================================================================
# VALIDATION
# ============================================================================

def validate_catalog(relics: Iterable[RelicDefinition] = RELICS) -> List[str]:
    """
    Check catalog authoring conventions.

    Returns a list of problems (empty when the catalog is consistent):
    - ids are unique
    - cursed relics carry a curse
    - class requirements only on class relics, pillar requirements only on pillar relics
    - rarity weights are positive and strictly decreasing by tier
    """
    problems = []
    seen = set()
    for relic in relics:
        if relic.id in seen:
            problems.append(f"{relic.id}: duplicate id")
        seen.add(relic.id)

        if relic.category is RelicCategory.CURSED and relic.curse is None:
            problems.append(f"{relic.id}: cursed relic without a curse")

        req = relic.requirements
        if req is not None:
            if req.fortress_class is not None and relic.category is not RelicCategory.CLASS:
                problems.append(f"{relic.id}: class requirement outside class category")
            if req.pillar_id is not None and relic.category is not RelicCategory.PILLAR:
                problems.append(f"{relic.id}: pillar requirement outside pillar category")

    weights = [RELIC_RARITY_CONFIG[rarity].base_weight for rarity in RelicRarity]
    if any(w <= 0 for w in weights):
        problems.append("rarity weights must be positive")
    if any(a <= b for a, b in zip(weights, weights[1:])):
        problems.append("rarity weights must decrease with rarity")

    return problems


# ============================================================================
# STATISTICS
# ============================================================================

if __name__ == "__main__":
    print("=== Fortress Relic Statistics ===\n")

    print(f"Total relics: {len(RELICS)}")
    for category in RelicCategory:
        print(f"  {category.value}: {len(get_relics_by_category(category))}")

    print("\n=== By Rarity ===")
    for rarity in RelicRarity:
        weight = RELIC_RARITY_CONFIG[rarity].base_weight
        print(f"  {rarity.value} (weight {weight}): {len(get_relics_by_rarity(rarity))}")

    print("\n=== Cursed Relics ===")
    for relic in get_cursed_relics():
        print(f"  {relic.name}: {relic.curse.description}")
