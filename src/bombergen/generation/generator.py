"""LevelBlueprintGenerator: the single entry point for level generation.

Given a mode and a numeric input, produce a complete LevelBlueprint:

    generate_story_level(level_number, highest_completed=None)
    generate_daily_challenge(seed)
    generate_arcade_wave(wave, entropy=None)

Story mode classifies the level first (boss, then bonus, then normal; first
match wins) and hands it to the matching stage pipeline. All generators are
total over integers: out-of-range numbers produce best-effort output through
the tables' fallback arms and are never rejected.
"""

import logging

from bombergen.config import GeneratorConfig, OutOfRangePolicy, load_config
from bombergen.generation.arcade import generate_arcade_wave as _generate_arcade_wave
from bombergen.generation.daily import generate_daily_challenge as _generate_daily_challenge
from bombergen.generation.specials import generate_bonus_level, generate_boss_level
from bombergen.generation.story import generate_normal_level
from bombergen.models.blueprint import GameMode, LevelBlueprint
from bombergen.parameters import STORY_LEVEL_COUNT
from bombergen.progression import is_bonus_level, is_boss_level, is_story_level

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object) -> int:
    """Reject non-integers (including bools) before they reach the tables."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def classify_story_level(level_number: int) -> str:
    """Classify a Story level as "boss", "bonus" or "normal"."""
    if is_boss_level(level_number):
        return "boss"
    if is_bonus_level(level_number):
        return "bonus"
    return "normal"


class LevelBlueprintGenerator:
    """Stateless level generator.

    Holds only its configuration; every call builds its blueprint (and any
    random stream) from scratch, so one instance can be shared freely
    between threads.
    """

    def __init__(self, config: GeneratorConfig | None = None):
        """Initialize the generator.

        Args:
            config: Generator settings. If None, read from the environment.
        """
        self.config = config if config is not None else load_config()

    def generate(
        self,
        mode: GameMode,
        value: int,
        highest_completed: int | None = None,
    ) -> LevelBlueprint:
        """Generate a blueprint for any mode.

        Args:
            mode: Which generator to use
            value: Level number, daily seed, or wave number
            highest_completed: Story progress for gating (ignored by other modes)

        Returns:
            A fresh LevelBlueprint.
        """
        if mode == GameMode.STORY:
            return self.generate_story_level(value, highest_completed)
        elif mode == GameMode.DAILY_CHALLENGE:
            return self.generate_daily_challenge(value)
        elif mode == GameMode.ARCADE:
            return self.generate_arcade_wave(value)
        raise ValueError(f"Unknown game mode: {mode}")

    def generate_story_level(
        self,
        level_number: int,
        highest_completed: int | None = None,
    ) -> LevelBlueprint:
        """Generate a Story level.

        Args:
            level_number: Level 1..50 (5 worlds x 10 levels)
            highest_completed: Player's best completed level. None means
                unbounded: no power-up is gated.

        Returns:
            A fresh LevelBlueprint. Regenerating the same arguments yields
            an identical blueprint, including seed == level_number * 12345.
        """
        level_number = _require_int("level_number", level_number)
        if highest_completed is not None:
            highest_completed = _require_int("highest_completed", highest_completed)

        if not is_story_level(level_number):
            level_number = self._handle_out_of_range(level_number)

        kind = classify_story_level(level_number)
        logger.debug(f"Story level {level_number} classified as {kind}")

        if kind == "boss":
            return generate_boss_level(level_number, highest_completed)
        if kind == "bonus":
            return generate_bonus_level(level_number, highest_completed)
        return generate_normal_level(level_number, highest_completed)

    def generate_daily_challenge(self, seed: int) -> LevelBlueprint:
        """Generate the daily challenge for a seed (see daily_seed())."""
        return _generate_daily_challenge(_require_int("seed", seed))

    def generate_arcade_wave(self, wave: int, entropy: int | None = None) -> LevelBlueprint:
        """Generate an arcade wave (seed is not reproducible unless entropy is pinned)."""
        wave = _require_int("wave", wave)
        if entropy is not None:
            entropy = _require_int("entropy", entropy)
        return _generate_arcade_wave(wave, entropy)

    def _handle_out_of_range(self, level_number: int) -> int:
        """Apply the configured out-of-range policy to a Story level number."""
        if self.config.out_of_range == OutOfRangePolicy.CLAMP:
            clamped = max(1, min(STORY_LEVEL_COUNT, level_number))
            logger.warning(
                f"Story level {level_number} is outside 1..{STORY_LEVEL_COUNT}; "
                f"clamping to {clamped}"
            )
            return clamped

        logger.warning(
            f"Story level {level_number} is outside 1..{STORY_LEVEL_COUNT}; "
            f"using fallback tables"
        )
        return level_number


def generate_story_level(
    level_number: int,
    highest_completed: int | None = None,
) -> LevelBlueprint:
    """Generate a Story level with configuration read from the environment."""
    return LevelBlueprintGenerator().generate_story_level(level_number, highest_completed)


def generate_daily_challenge(seed: int) -> LevelBlueprint:
    """Generate the daily challenge for a seed."""
    return LevelBlueprintGenerator().generate_daily_challenge(seed)


def generate_arcade_wave(wave: int, entropy: int | None = None) -> LevelBlueprint:
    """Generate an arcade wave."""
    return LevelBlueprintGenerator().generate_arcade_wave(wave, entropy)
