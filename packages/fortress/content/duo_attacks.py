"""
Duo-Attack Definitions - synchronized attacks for specific hero pairs.

A duo-attack triggers when both heroes of its pair are within activation range
of each other. Each definition lists one or more effects, a closed set of
variants: DamageEffect, DebuffEffect (carrying a StatusEffect) and BuffEffect.

Timing is in sim ticks (30 ticks per second).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union, Iterable
from enum import Enum

TICKS_PER_SECOND = 30


class StatusKind(Enum):
    STUN = "stun"
    SLOW = "slow"
    FREEZE = "freeze"
    BURN = "burn"


@dataclass(frozen=True)
class StatusEffect:
    kind: StatusKind
    duration: int  # ticks
    percent: Optional[int] = None  # slow strength
    damage_per_tick: Optional[int] = None  # burn damage


@dataclass(frozen=True)
class DamageEffect:
    damage: int
    radius: float


@dataclass(frozen=True)
class DebuffEffect:
    status: StatusEffect


@dataclass(frozen=True)
class BuffEffect:
    stat: str
    amount: float
    duration: int  # ticks


DuoEffect = Union[DamageEffect, DebuffEffect, BuffEffect]


@dataclass(frozen=True)
class DuoAttackDefinition:
    id: str
    name: str
    description: str
    heroes: Tuple[str, str]
    activation_range: float
    cooldown_ticks: int
    effects: Tuple[DuoEffect, ...] = field(default_factory=tuple)
    visual_effect: str = ""
    audio_effect: str = ""

    @property
    def cooldown_seconds(self) -> float:
        return self.cooldown_ticks / TICKS_PER_SECOND

    def total_damage(self) -> int:
        return sum(e.damage for e in self.effects if isinstance(e, DamageEffect))


def _stun(duration: int) -> DebuffEffect:
    return DebuffEffect(StatusEffect(StatusKind.STUN, duration))


def _freeze(duration: int) -> DebuffEffect:
    return DebuffEffect(StatusEffect(StatusKind.FREEZE, duration))


def _slow(percent: int, duration: int) -> DebuffEffect:
    return DebuffEffect(StatusEffect(StatusKind.SLOW, duration, percent=percent))


def _burn(damage_per_tick: int, duration: int) -> DebuffEffect:
    return DebuffEffect(StatusEffect(StatusKind.BURN, duration, damage_per_tick=damage_per_tick))


# ============================================================================
# DUO-ATTACKS (12)
# ============================================================================

THUNDER_GUARD = DuoAttackDefinition(
    id="thunder_guard", name="Thunder Guard",
    description="Storm and Vanguard fuse lightning with a tactical shield for area control.",
    heroes=("storm", "vanguard"), activation_range=5.0, cooldown_ticks=900,
    effects=(
        DamageEffect(damage=150, radius=6.0),
        _stun(60),
        BuffEffect(stat="incoming_damage_reduction", amount=0.3, duration=180),
    ),
    visual_effect="thunder_shield_burst", audio_effect="duo_thunder_guard",
)

VOID_STORM = DuoAttackDefinition(
    id="void_storm", name="Void Storm",
    description="Titan and Storm open dimensional rifts charged with lightning.",
    heroes=("titan", "storm"), activation_range=4.0, cooldown_ticks=1200,
    effects=(
        DamageEffect(damage=250, radius=8.0),
        _slow(50, 150),
    ),
    visual_effect="void_lightning_rift", audio_effect="duo_void_storm",
)

FROZEN_INFERNO = DuoAttackDefinition(
    id="frozen_inferno", name="Frozen Inferno",
    description="Frost and Inferno create a thermal shock that shatters enemies.",
    heroes=("frost", "inferno"), activation_range=5.0, cooldown_ticks=720,
    effects=(
        DamageEffect(damage=200, radius=5.0),
        _freeze(90),
    ),
    visual_effect="thermal_shock_wave", audio_effect="duo_frozen_inferno",
)

PHASE_STRIKE = DuoAttackDefinition(
    id="phase_strike", name="Phase Strike",
    description="Spectre and Omega perform a coordinated strike from several dimensions.",
    heroes=("spectre", "omega"), activation_range=3.0, cooldown_ticks=600,
    effects=(
        DamageEffect(damage=400, radius=2.0),
        BuffEffect(stat="crit_chance", amount=0.5, duration=120),
    ),
    visual_effect="phase_assassination", audio_effect="duo_phase_strike",
)

CRYO_ARTILLERY = DuoAttackDefinition(
    id="cryo_artillery", name="Cryo Artillery",
    description="Forge fires orbital cryo-missiles guided by Glacier.",
    heroes=("forge", "glacier"), activation_range=6.0, cooldown_ticks=1080,
    effects=(
        DamageEffect(damage=180, radius=10.0),
        _slow(60, 180),
    ),
    visual_effect="cryo_orbital_strike", audio_effect="duo_cryo_artillery",
)

REALITY_TEAR = DuoAttackDefinition(
    id="reality_tear", name="Reality Tear",
    description="Rift and Titan combine chaos and void energy to tear reality apart.",
    heroes=("rift", "titan"), activation_range=4.0, cooldown_ticks=1500,
    effects=(
        DamageEffect(damage=300, radius=7.0),
        _burn(10, 150),
    ),
    visual_effect="reality_rift_zone", audio_effect="duo_reality_tear",
)

INFERNO_STORM = DuoAttackDefinition(
    id="inferno_storm", name="Inferno Storm",
    description="Storm and Inferno raise an electrical firestorm that ignites everything nearby.",
    heroes=("storm", "inferno"), activation_range=5.0, cooldown_ticks=840,
    effects=(
        DamageEffect(damage=180, radius=7.0),
        _burn(15, 120),
        _stun(30),
    ),
    visual_effect="fire_lightning_storm", audio_effect="duo_inferno_storm",
)

GLACIER_SHIELD = DuoAttackDefinition(
    id="glacier_shield", name="Glacier Shield",
    description="Vanguard and Glacier raise an ice fortress that protects allies.",
    heroes=("vanguard", "glacier"), activation_range=4.0, cooldown_ticks=1080,
    effects=(
        BuffEffect(stat="incoming_damage_reduction", amount=0.5, duration=240),
        BuffEffect(stat="max_hp_bonus", amount=0.3, duration=240),
        DamageEffect(damage=80, radius=4.0),
    ),
    visual_effect="ice_fortress_barrier", audio_effect="duo_glacier_shield",
)

PHANTOM_FROST = DuoAttackDefinition(
    id="phantom_frost", name="Phantom Frost",
    description="Spectre and Frost fire ghostly ice shards that pass through armor.",
    heroes=("spectre", "frost"), activation_range=4.0, cooldown_ticks=660,
    effects=(
        DamageEffect(damage=220, radius=5.0),
        _freeze(60),
        BuffEffect(stat="damage_bonus", amount=0.4, duration=150),
    ),
    visual_effect="ghost_ice_shards", audio_effect="duo_phantom_frost",
)

TECH_VOID = DuoAttackDefinition(
    id="tech_void", name="Tech Void",
    description="Forge and Titan combine technology and dimensional power in an orbital barrage.",
    heroes=("forge", "titan"), activation_range=5.0, cooldown_ticks=1320,
    effects=(
        DamageEffect(damage=350, radius=6.0),
        _slow(40, 120),
    ),
    visual_effect="orbital_void_strike", audio_effect="duo_tech_void",
)

THERMAL_PARADOX = DuoAttackDefinition(
    id="nature_fire", name="Thermal Paradox",
    description="Glacier and Inferno create an extreme temperature gap that detonates.",
    heroes=("glacier", "inferno"), activation_range=5.0, cooldown_ticks=900,
    effects=(
        DamageEffect(damage=280, radius=8.0),
        _slow(70, 90),
        _burn(8, 120),
    ),
    visual_effect="thermal_paradox_explosion", audio_effect="duo_nature_fire",
)

PLASMA_PHASE = DuoAttackDefinition(
    id="plasma_phase", name="Plasma Phase",
    description="Forge and Spectre send cloaked drones for precision plasma strikes.",
    heroes=("forge", "spectre"), activation_range=5.0, cooldown_ticks=780,
    effects=(
        DamageEffect(damage=260, radius=4.0),
        BuffEffect(stat="attack_speed_bonus", amount=0.35, duration=180),
    ),
    visual_effect="cloaked_plasma_drones", audio_effect="duo_plasma_phase",
)

DUO_ATTACK_DEFINITIONS: Tuple[DuoAttackDefinition, ...] = (
    THUNDER_GUARD, VOID_STORM, FROZEN_INFERNO, PHASE_STRIKE, CRYO_ARTILLERY, REALITY_TEAR,
    INFERNO_STORM, GLACIER_SHIELD, PHANTOM_FROST, TECH_VOID, THERMAL_PARADOX, PLASMA_PHASE,
)


def get_duo_attack_by_id(duo_id: str) -> Optional[DuoAttackDefinition]:
    for duo in DUO_ATTACK_DEFINITIONS:
        if duo.id == duo_id:
            return duo
    return None


def get_duo_attacks_for_hero(hero_id: str) -> List[DuoAttackDefinition]:
    """All duo-attacks the hero takes part in."""
    return [d for d in DUO_ATTACK_DEFINITIONS if hero_id in d.heroes]


def get_duo_attack_for_pair(hero1_id: str, hero2_id: str) -> Optional[DuoAttackDefinition]:
    """Duo-attack for a hero pair; order does not matter."""
    for duo in DUO_ATTACK_DEFINITIONS:
        if duo.heroes in ((hero1_id, hero2_id), (hero2_id, hero1_id)):
            return duo
    return None


def can_perform_duo_attack(hero1_id: str, hero2_id: str) -> bool:
    return get_duo_attack_for_pair(hero1_id, hero2_id) is not None


def get_available_duo_attacks(hero_ids: Iterable[str]) -> List[DuoAttackDefinition]:
    """Duo-attacks whose both heroes are in the team."""
    team = set(hero_ids)
    return [d for d in DUO_ATTACK_DEFINITIONS if d.heroes[0] in team and d.heroes[1] in team]
