"""
Shared pytest fixtures for the fortress relic test suite.

This module provides reusable fixtures for:
- RNG with known seeds
- Selection contexts for common run situations
- A two-relic catalog for exact probability checks
"""

import pytest
import sys

# Ensure project root is in path
import os
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from packages.fortress.state.rng import SeededRandom, seed_to_long
from packages.fortress.content.relics import (
    RelicDefinition, RelicCategory, RelicRarity, FortressClass, PillarId,
)
from packages.fortress.generation.relic_choices import SelectionContext


# =============================================================================
# RNG Fixtures
# =============================================================================


@pytest.fixture
def rng_seed_42():
    """SeededRandom initialized with seed 42 for deterministic tests."""
    return SeededRandom(42)


@pytest.fixture
def rng_abc():
    """SeededRandom initialized with seed 'ABC'."""
    return SeededRandom(seed_to_long("ABC"))


# =============================================================================
# Context Fixtures
# =============================================================================


@pytest.fixture
def empty_context():
    """No class, no pillar, no level, nothing owned."""
    return SelectionContext()


@pytest.fixture
def ice_context():
    """Ice fortress on the cosmos pillar at level 10."""
    return SelectionContext(
        fortress_class=FortressClass.ICE,
        pillar_id=PillarId.COSMOS,
        fortress_level=10,
    )


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def common_relic():
    return RelicDefinition(
        id="a", name="A", description="common test relic",
        category=RelicCategory.STANDARD, rarity=RelicRarity.COMMON,
    )


@pytest.fixture
def legendary_relic():
    return RelicDefinition(
        id="b", name="B", description="legendary test relic",
        category=RelicCategory.STANDARD, rarity=RelicRarity.LEGENDARY,
    )


@pytest.fixture
def two_relic_catalog(common_relic, legendary_relic):
    """Common A (weight 1.0) and legendary B (weight 0.1)."""
    return (common_relic, legendary_relic)
