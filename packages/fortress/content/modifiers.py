"""
Relic Modifier Set - the numeric effect vector every relic contributes to.

Every relic carries a full ModifierSet: the neutral defaults with zero or more
fields overridden. Fields come in three kinds:
- MULTIPLICATIVE: neutral value 1.0, combined by product
- ADDITIVE: neutral value 0, combined by sum
- MAXIMUM: thresholds / absolute values, combined by taking the largest

The selection engine never aggregates modifiers; compose_modifiers() is the
helper callers use when applying owned relics to fortress stats.
"""

from dataclasses import dataclass, fields, replace, asdict
from typing import Dict, Iterable
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    """How a modifier field combines across several relics."""
    ADDITIVE = "additive"
    MULTIPLICATIVE = "multiplicative"
    MAXIMUM = "maximum"


@dataclass(frozen=True)
class ModifierSet:
    """Full modifier vector. Defaults are the neutral values."""

    # Damage
    damage_multiplier: float = 1.0
    splash_radius: float = 0.0  # world units
    splash_damage: float = 0.0  # fraction of hit damage dealt as splash
    pierce_count: int = 0
    chain_chance: float = 0.0
    chain_count: int = 0
    chain_damage: float = 0.0
    execute_threshold: float = 0.0  # HP fraction below which execute applies
    execute_damage: float = 1.0
    crit_chance: float = 0.0
    crit_damage: float = 1.5

    # Economy
    gold_multiplier: float = 1.0
    dust_multiplier: float = 1.0

    # Defense / utility
    max_hp_multiplier: float = 1.0
    hp_regen: float = 0.0
    cooldown_multiplier: float = 1.0
    attack_speed_multiplier: float = 1.0
    elite_damage_multiplier: float = 1.0
    wave_damage_bonus: float = 0.0
    low_hp_damage_multiplier: float = 1.0
    low_hp_threshold: float = 0.3
    luck_multiplier: float = 1.0

    def with_overrides(self, **overrides) -> 'ModifierSet':
        """Return a copy with the given fields replaced.

        Raises TypeError for names outside the schema.
        """
        return replace(self, **overrides)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def changed_fields(self) -> Dict[str, float]:
        """Fields that differ from the neutral defaults."""
        return {
            name: value for name, value in self.as_dict().items()
            if value != getattr(DEFAULT_MODIFIERS, name)
        }


DEFAULT_MODIFIERS = ModifierSet()

MODIFIER_FIELDS = tuple(f.name for f in fields(ModifierSet))

MODIFIER_FIELD_KINDS: Dict[str, FieldKind] = {
    "damage_multiplier": FieldKind.MULTIPLICATIVE,
    "splash_radius": FieldKind.ADDITIVE,
    "splash_damage": FieldKind.ADDITIVE,
    "pierce_count": FieldKind.ADDITIVE,
    "chain_chance": FieldKind.ADDITIVE,
    "chain_count": FieldKind.ADDITIVE,
    "chain_damage": FieldKind.ADDITIVE,
    "execute_threshold": FieldKind.MAXIMUM,
    "execute_damage": FieldKind.MULTIPLICATIVE,
    "crit_chance": FieldKind.ADDITIVE,
    "crit_damage": FieldKind.MAXIMUM,
    "gold_multiplier": FieldKind.MULTIPLICATIVE,
    "dust_multiplier": FieldKind.MULTIPLICATIVE,
    "max_hp_multiplier": FieldKind.MULTIPLICATIVE,
    "hp_regen": FieldKind.ADDITIVE,
    "cooldown_multiplier": FieldKind.MULTIPLICATIVE,
    "attack_speed_multiplier": FieldKind.MULTIPLICATIVE,
    "elite_damage_multiplier": FieldKind.MULTIPLICATIVE,
    "wave_damage_bonus": FieldKind.ADDITIVE,
    "low_hp_damage_multiplier": FieldKind.MULTIPLICATIVE,
    "low_hp_threshold": FieldKind.MAXIMUM,
    "luck_multiplier": FieldKind.MULTIPLICATIVE,
}


def _combine(kind: FieldKind, current: float, value: float) -> float:
    if kind is FieldKind.ADDITIVE:
        return current + value
    if kind is FieldKind.MULTIPLICATIVE:
        return current * value
    if kind is FieldKind.MAXIMUM:
        return max(current, value)
    raise ValueError(f"Unhandled modifier kind: {kind}")


def compose_modifiers(modifier_sets: Iterable[ModifierSet]) -> ModifierSet:
    """
    Combine several modifier sets into one.

    Multiplicative fields multiply, additive fields sum, maximum fields keep
    the largest value. Inputs are never mutated; an empty input yields the
    neutral set.
    """
    totals = DEFAULT_MODIFIERS.as_dict()
    for mods in modifier_sets:
        for name in MODIFIER_FIELDS:
            totals[name] = _combine(MODIFIER_FIELD_KINDS[name], totals[name], getattr(mods, name))
    return ModifierSet(**totals)
