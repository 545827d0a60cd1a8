"""bombergen: procedural level blueprints for a bomb-placement arcade game.

Usage:
    from bombergen import generate_story_level, generate_daily_challenge, daily_seed

    level = generate_story_level(23, highest_completed=12)
    today = generate_daily_challenge(daily_seed())
"""

from bombergen.config import GeneratorConfig, OutOfRangePolicy, load_config
from bombergen.generation import (
    LevelBlueprintGenerator,
    daily_seed,
    generate_arcade_wave,
    generate_daily_challenge,
    generate_story_level,
)
from bombergen.models import (
    EnemySpawn,
    EnemyType,
    GameMode,
    LayoutArchetype,
    LevelBlueprint,
    PowerUpType,
    WorldMechanic,
)

__version__ = "0.1.0"

__all__ = [
    "EnemySpawn",
    "EnemyType",
    "GameMode",
    "GeneratorConfig",
    "LayoutArchetype",
    "LevelBlueprint",
    "LevelBlueprintGenerator",
    "OutOfRangePolicy",
    "PowerUpType",
    "WorldMechanic",
    "daily_seed",
    "generate_arcade_wave",
    "generate_daily_challenge",
    "generate_story_level",
    "load_config",
]
