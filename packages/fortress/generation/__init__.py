"""Generation module - relic offers."""

from .relic_choices import (
    SelectionContext, BuildType, get_relic_pool, select_relics, detect_build_type,
)
