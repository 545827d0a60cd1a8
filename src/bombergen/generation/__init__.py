"""Level blueprint generation for bombergen.

This module provides the three generation modes (Story, Daily Challenge,
Arcade) behind LevelBlueprintGenerator, plus a validator for the generated
campaign.
"""

from .arcade import current_millisecond
from .daily import daily_seed, generate_daily_challenge_for
from .generator import (
    LevelBlueprintGenerator,
    classify_story_level,
    generate_arcade_wave,
    generate_daily_challenge,
    generate_story_level,
)
from .specials import BONUS_VARIANTS, BonusVariant, get_bonus_type, get_bonus_variant
from .story import STORY_ENEMY_BANDS, WORLD_LAYOUT_PALETTES, story_seed
from .validator import (
    BlueprintValidator,
    CheckResult,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    check_blueprint_invariants,
    check_determinism,
    check_gating_monotonicity,
    check_story_cadence,
    validate_campaign,
)

__all__ = [
    # From generator.py
    "LevelBlueprintGenerator",
    "classify_story_level",
    "generate_arcade_wave",
    "generate_daily_challenge",
    "generate_story_level",
    # From daily.py
    "daily_seed",
    "generate_daily_challenge_for",
    # From arcade.py
    "current_millisecond",
    # From specials.py
    "BONUS_VARIANTS",
    "BonusVariant",
    "get_bonus_type",
    "get_bonus_variant",
    # From story.py
    "STORY_ENEMY_BANDS",
    "WORLD_LAYOUT_PALETTES",
    "story_seed",
    # From validator.py
    "BlueprintValidator",
    "CheckResult",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "check_blueprint_invariants",
    "check_determinism",
    "check_gating_monotonicity",
    "check_story_cadence",
    "validate_campaign",
]
