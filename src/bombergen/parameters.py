"""Tunable generation constants for bombergen.

This module is the SINGLE SOURCE OF TRUTH for the numbers that shape the
difficulty curve. Per-level tables (enemy bands, layout palettes, boss
rosters) live next to the generator stage that reads them; everything that
is a single knob lives here.

Parameter Categories:
- Campaign Structure: worlds, levels, boss/bonus cadence
- Story Mode: time limits, density ramp, seeds
- Boss and Bonus: overrides applied by the specializations
- Daily Challenge: sampling ranges
- Arcade: per-wave ramps

Usage:
    from bombergen.parameters import LEVELS_PER_WORLD, STORY_SEED_MULTIPLIER
"""

# =============================================================================
# CAMPAIGN STRUCTURE
# =============================================================================

WORLD_COUNT = 5
"""Number of Story worlds."""

LEVELS_PER_WORLD = 10
"""Levels per world. The last level of every world is its boss level."""

STORY_LEVEL_COUNT = WORLD_COUNT * LEVELS_PER_WORLD
"""Total Story levels (1..50)."""

BOSS_INTERVAL = 10
"""A level is a boss level iff level % BOSS_INTERVAL == 0."""

BONUS_INTERVAL = 5
"""A non-boss level is a bonus level iff level % BONUS_INTERVAL == 0."""

WORLD_STARS_REQUIRED: list[int] = [0, 0, 10, 25, 45, 70]
"""Total stars needed to enter each world (index = world number).

World 1 is free; later worlds ask the player to have earned stars
on earlier levels. Stars are tracked outside the generator.
"""


# =============================================================================
# STORY MODE
# =============================================================================

DEFAULT_TIME_LIMIT = 200
"""Time limit in seconds for normal Story levels."""

STORY_SEED_MULTIPLIER = 12345
"""Story seed = level * STORY_SEED_MULTIPLIER.

Depends on the level number alone so that replaying a level always yields
the same renderer-side randomness.
"""

DENSITY_BASE = 0.35
"""Block density at the very start of the campaign."""

DENSITY_RAMP = 0.25
"""Density added across the campaign: density = BASE + (level / 50) * RAMP.

Runs from 0.35 at level 1 to 0.60 at level 50.
"""

SKULL_FROM_LEVEL = 20
"""Normal Story levels from this level on also hide a Skull (negative power-up)."""

ONBOARDING_LEVELS = 2
"""The first N levels of every world use the CLASSIC layout."""

MUSIC_GAMEPLAY = "gameplay"
"""Generic gameplay track identifier."""

MUSIC_BOSS = "boss"
"""Boss track; also used for every level of the final world as an intensity cue."""


# =============================================================================
# BOSS AND BONUS
# =============================================================================

BOSS_TIME_LIMIT = 240
"""Boss fights get extra time."""

BOSS_BLOCK_DENSITY = 0.25
"""Boss arenas are kept open so the fight has room to move."""

BONUS_TIME_LIMIT = 45
"""Default bonus time limit (variants may override)."""

BONUS_VARIANT_COUNT = 4
"""Bonus variant = (level // BONUS_INTERVAL) % BONUS_VARIANT_COUNT."""


# =============================================================================
# DAILY CHALLENGE
# =============================================================================

DAILY_LEVEL_NUMBER = 99
"""Sentinel level number for daily challenge blueprints."""

DAILY_TIME_LIMIT = 180

DAILY_DENSITY_RANGE: tuple[float, float] = (0.35, 0.55)
"""Uniform sampling range for daily challenge block density."""

DAILY_BASE_ENEMIES = 4
"""Daily challenges spawn DAILY_BASE_ENEMIES + randint(0, DAILY_EXTRA_ENEMIES)."""

DAILY_EXTRA_ENEMIES = 2

DAILY_BONUS_POWER_UP_CHANCE = 0.5
"""Probability of a fourth, advanced power-up in the daily challenge."""


# =============================================================================
# ARCADE
# =============================================================================

ARCADE_SEED_MULTIPLIER = 54321
"""Arcade seed = wave * ARCADE_SEED_MULTIPLIER + wall-clock millisecond."""

ARCADE_POWER_UP_SEED_MULTIPLIER = 11111
"""Arcade power-up stream seed = wave * ARCADE_POWER_UP_SEED_MULTIPLIER.

Unlike the blueprint seed this is reproducible for a given wave.
"""

ARCADE_MIN_TIME_LIMIT = 120
"""Time limit never drops below this: max(120, 200 - wave * 5)."""

ARCADE_TIME_DECAY = 5
"""Seconds removed per wave."""

ARCADE_DENSITY_BASE = 0.4

ARCADE_DENSITY_STEP = 0.02
"""Density added per wave: min(0.7, 0.4 + wave * 0.02)."""

ARCADE_DENSITY_MAX = 0.7

ARCADE_MAX_BASE_ENEMIES = 5
"""Cap for the per-wave base enemy count: min(2 + wave // 3, 5)."""

ARCADE_SKULL_FROM_WAVE = 5

ARCADE_SKULL_CHANCE = 0.4
"""Chance of appending a Skull from ARCADE_SKULL_FROM_WAVE on."""
