#!/usr/bin/env python3
"""
Fortress Relics - Command Line Interface

Inspect the relic catalog and reproduce relic offers for a seed.

Usage:
    python cli.py relics --category cursed
    python cli.py offer --seed ABC123 --count 3 --class ice --owned iron-hide
    python cli.py odds --class fire --trials 20000
    python cli.py build splash-master iron-hide
    python cli.py validate

The default seed for offer/odds comes from FORTRESS_SEED (read from the
environment or a .env file).
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Dict, Any

from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from packages.fortress.state.rng import SeededRandom, seed_to_long
from packages.fortress.content.relics import (
    RELICS, RelicCategory, RelicRarity, RelicDefinition, FortressClass, PillarId,
    RELIC_RARITY_CONFIG, validate_catalog,
)
from packages.fortress.generation.relic_choices import (
    SelectionContext, select_relics, detect_build_type,
)
from packages.fortress.analysis.offer_odds import (
    first_draw_probabilities, simulate_offer_rates, rarity_offer_share,
)

logger = logging.getLogger("fortress.cli")

DEFAULT_SEED = "FORTRESS"


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def relic_to_dict(relic: RelicDefinition) -> Dict[str, Any]:
    data = {
        "id": relic.id,
        "name": relic.name,
        "description": relic.description,
        "category": relic.category.value,
        "rarity": relic.rarity.value,
        "is_build_defining": relic.is_build_defining,
        "synergies": list(relic.synergies),
        "modifiers": relic.modifiers.changed_fields(),
    }
    if relic.requirements is not None:
        req = relic.requirements
        data["requirements"] = {
            "fortress_class": req.fortress_class.value if req.fortress_class else None,
            "pillar_id": req.pillar_id.value if req.pillar_id else None,
            "min_fortress_level": req.min_fortress_level,
        }
    if relic.curse is not None:
        data["curse"] = {
            "stat": relic.curse.stat,
            "value": relic.curse.value,
            "description": relic.curse.description,
        }
    return data


def format_relic_line(relic: RelicDefinition) -> str:
    flags = " [build]" if relic.is_build_defining else ""
    return f"{relic.id:<22} {relic.rarity.value:<10} {relic.category.value:<15} {relic.description}{flags}"


def format_seed_info(seed_string: str, numeric_seed: int) -> str:
    return f"Seed: {seed_string} (numeric: {numeric_seed})"


def build_context(args) -> SelectionContext:
    return SelectionContext(
        fortress_class=args.fortress_class,
        pillar_id=args.pillar,
        fortress_level=args.level,
        owned_relic_ids=frozenset(args.owned or []),
    )


def resolve_seed(args) -> str:
    return (args.seed or os.environ.get("FORTRESS_SEED") or DEFAULT_SEED).upper()


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_relics(args) -> int:
    """List catalog relics, optionally filtered."""
    relics: List[RelicDefinition] = list(RELICS)
    if args.category:
        relics = [r for r in relics if r.category.value == args.category]
    if args.rarity:
        relics = [r for r in relics if r.rarity.value == args.rarity]

    if args.json:
        print(json.dumps([relic_to_dict(r) for r in relics], indent=2))
        return 0

    for relic in relics:
        print(format_relic_line(relic))
    print(f"\n{len(relics)} relic(s)")
    return 0


def cmd_offer(args) -> int:
    """Reproduce a relic offer for a seed and run context."""
    seed_string = resolve_seed(args)
    seed = seed_to_long(seed_string)
    context = build_context(args)
    rng = SeededRandom(seed, args.counter)

    offer = select_relics(args.count, context, rng)
    logger.info("Offered %d relic(s), rng counter now %d", len(offer), rng.counter)

    if args.json:
        print(json.dumps({
            "seed": seed_string,
            "numeric_seed": seed,
            "rng_counter": rng.counter,
            "relics": [relic_to_dict(r) for r in offer],
        }, indent=2))
        return 0

    print(format_seed_info(seed_string, seed))
    print("Relic Choices:")
    for i, relic in enumerate(offer, 1):
        print(f"  {i}. {relic.name} ({relic.rarity.value}, {relic.category.value})")
    if not offer:
        print("  (no eligible relics)")
    return 0


def cmd_odds(args) -> int:
    """Show first-draw probabilities and simulated offer rates."""
    seed = seed_to_long(resolve_seed(args))
    context = build_context(args)

    first = first_draw_probabilities(context)
    rates = simulate_offer_rates(context, count=args.count, trials=args.trials, seed=seed)
    shares = rarity_offer_share(rates)

    if args.json:
        print(json.dumps({
            "first_draw": first,
            "offer_rates": rates,
            "rarity_share": {rarity.value: share for rarity, share in shares.items()},
        }, indent=2))
        return 0

    print(f"{'relic':<22} {'first draw':>10} {'in offer':>10}")
    for relic_id, prob in sorted(first.items(), key=lambda kv: -kv[1]):
        print(f"{relic_id:<22} {prob:>10.3%} {rates[relic_id]:>10.3%}")

    print("\nRarity share of offered slots:")
    for rarity, share in shares.items():
        weight = RELIC_RARITY_CONFIG[rarity].base_weight
        print(f"  {rarity.value:<10} (weight {weight}): {share:.1%}")
    return 0


def cmd_build(args) -> int:
    """Detect the build archetype for a set of owned relics."""
    print(detect_build_type(args.relic_ids).value)
    return 0


def cmd_validate(args) -> int:
    """Check catalog authoring conventions."""
    problems = validate_catalog()
    for problem in problems:
        logger.error(problem)
    if problems:
        return 1
    print(f"Catalog OK ({len(RELICS)} relics)")
    return 0


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def _add_context_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--class", dest="fortress_class",
                        choices=[c.value for c in FortressClass], help="Fortress class")
    parser.add_argument("--pillar", choices=[p.value for p in PillarId], help="Current pillar")
    parser.add_argument("--level", type=int, help="Fortress level")
    parser.add_argument("--owned", nargs="*", metavar="RELIC_ID", help="Relic ids already owned")
    parser.add_argument("--seed", "-s", help="Seed (default: $FORTRESS_SEED)")
    parser.add_argument("--count", "-n", type=int, default=3, help="Relics per offer")
    parser.add_argument("--json", "-j", action="store_true", help="Output in JSON format")


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Fortress relics - catalog inspection and offer reproduction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s relics --rarity legendary
  %(prog)s offer --seed ABC123 --class ice --owned iron-hide
  %(prog)s odds --pillar cosmos --trials 20000
  %(prog)s build chain-lightning gold-rush
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    relics_parser = subparsers.add_parser("relics", help="List relics")
    relics_parser.add_argument("--category", choices=[c.value for c in RelicCategory])
    relics_parser.add_argument("--rarity", choices=[r.value for r in RelicRarity])
    relics_parser.add_argument("--json", "-j", action="store_true", help="Output in JSON format")

    offer_parser = subparsers.add_parser("offer", help="Draw a relic offer for a seed")
    _add_context_arguments(offer_parser)
    offer_parser.add_argument("--counter", type=int, default=0, help="RNG calls to skip")

    odds_parser = subparsers.add_parser("odds", help="Offer probabilities for a context")
    _add_context_arguments(odds_parser)
    odds_parser.add_argument("--trials", "-t", type=positive_int, default=10000, help="Simulated offers")

    build_parser = subparsers.add_parser("build", help="Detect build archetype")
    build_parser.add_argument("relic_ids", nargs="*", help="Owned relic ids")

    subparsers.add_parser("validate", help="Validate the relic catalog")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "relics": cmd_relics,
        "offer": cmd_offer,
        "odds": cmd_odds,
        "build": cmd_build,
        "validate": cmd_validate,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
