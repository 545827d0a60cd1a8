"""Command-line interface for bombergen.

Prints generated blueprints as JSON for inspection, replay and debugging.

Usage:
    # A Story level, gated by the player's progress
    bombergen story 23 --highest-completed 12

    # Today's daily challenge, or a specific date / seed
    bombergen daily
    bombergen daily --date 2026-10-17
    bombergen daily --seed 20261017

    # An arcade wave with a pinned seed component
    bombergen arcade 12 --entropy 0

    # One-line summary of every Story level
    bombergen campaign

    # Check the campaign against its invariants
    bombergen validate

Exit codes:
    0: Success
    1: Validation failed or configuration error
"""

import argparse
import json
import logging
import sys
from datetime import date

from bombergen.config import GeneratorConfig, OutOfRangePolicy, load_config
from bombergen.generation.daily import daily_seed
from bombergen.generation.generator import LevelBlueprintGenerator
from bombergen.generation.validator import BlueprintValidator
from bombergen.models.blueprint import LevelBlueprint
from bombergen.parameters import STORY_LEVEL_COUNT

logger = logging.getLogger(__name__)


def format_summary(blueprint: LevelBlueprint) -> str:
    """One-line human-readable summary of a blueprint."""
    enemies = ", ".join(f"{s.type.value}x{s.count}" for s in blueprint.enemies)
    power_ups = ", ".join(p.value for p in blueprint.power_ups) or "-"
    layout = blueprint.layout.value if blueprint.layout else "default"
    return (
        f"{blueprint.number:>3}  {blueprint.name:<22} "
        f"density={blueprint.block_density:.2f} time={blueprint.time_limit_seconds:>3}s "
        f"mechanic={blueprint.mechanic.value:<10} layout={layout:<10} "
        f"enemies=[{enemies}] power_ups=[{power_ups}]"
    )


def _emit(blueprint: LevelBlueprint, compact: bool) -> None:
    if compact:
        print(blueprint.model_dump_json())
    else:
        print(blueprint.to_json())


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a YYYY-MM-DD date: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bombergen",
        description="Generate level blueprints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line",
    )
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Clamp Story levels outside 1-50 instead of using fallback tables",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log generation details (DEBUG)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    story = subparsers.add_parser("story", help="Generate a Story level")
    story.add_argument("level", type=int, help="Level number (1-50)")
    story.add_argument(
        "--highest-completed",
        type=int,
        default=None,
        help="Player's highest completed level (default: no gating)",
    )

    daily = subparsers.add_parser("daily", help="Generate a daily challenge")
    source = daily.add_mutually_exclusive_group()
    source.add_argument("--seed", type=int, default=None, help="Explicit seed")
    source.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Calendar date YYYY-MM-DD (default: today, UTC)",
    )

    arcade = subparsers.add_parser("arcade", help="Generate an arcade wave")
    arcade.add_argument("wave", type=int, help="Wave number")
    arcade.add_argument(
        "--entropy",
        type=int,
        default=None,
        help="Pin the seed's time component to reproduce a run",
    )

    campaign = subparsers.add_parser("campaign", help="Summarize every Story level")
    campaign.add_argument("--highest-completed", type=int, default=None)

    validate = subparsers.add_parser("validate", help="Validate the Story campaign")
    validate.add_argument("--highest-completed", type=int, default=None)
    validate.add_argument(
        "--skip-gating",
        action="store_true",
        help="Skip the gating monotonicity sweep",
    )

    return parser


def run(args: argparse.Namespace, config: GeneratorConfig) -> int:
    """Execute a parsed command. Returns the process exit code."""
    if args.clamp:
        config = config.model_copy(update={"out_of_range": OutOfRangePolicy.CLAMP})
    generator = LevelBlueprintGenerator(config)

    if args.command == "story":
        _emit(generator.generate_story_level(args.level, args.highest_completed), args.compact)
        return 0

    if args.command == "daily":
        seed = args.seed if args.seed is not None else daily_seed(args.date)
        logger.info(f"Daily challenge seed: {seed}")
        _emit(generator.generate_daily_challenge(seed), args.compact)
        return 0

    if args.command == "arcade":
        _emit(generator.generate_arcade_wave(args.wave, args.entropy), args.compact)
        return 0

    if args.command == "campaign":
        for level in range(1, STORY_LEVEL_COUNT + 1):
            print(format_summary(generator.generate_story_level(level, args.highest_completed)))
        return 0

    if args.command == "validate":
        validator = BlueprintValidator(generator)
        result = validator.validate_campaign(
            highest_completed=args.highest_completed,
            check_gating=not args.skip_gating,
        )
        print(json.dumps(result.to_dict(), indent=2))
        if result.overall_passed:
            logger.info("Validation PASSED")
            return 0
        logger.error("Validation FAILED")
        for issue in result.get_critical_issues():
            logger.error(f"  CRITICAL: {issue.message}")
        for issue in result.get_major_issues():
            logger.warning(f"  MAJOR: {issue.message}")
        return 1

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Entry point for the bombergen command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    return run(args, config)


if __name__ == "__main__":
    sys.exit(main())
