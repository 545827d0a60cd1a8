"""Daily challenge generator for bombergen.

Every player gets the same level on the same day: the caller derives a seed
from the calendar date and the generator draws every choice from a
random.Random constructed for that call. The same seed always reproduces
the same blueprint.

Daily challenges are never gated by progression; they intentionally offer a
taste of late-game power-ups to every player.
"""

import logging
import random
from datetime import date, datetime, timezone

from bombergen.models.blueprint import (
    GameMode,
    LayoutArchetype,
    LevelBlueprint,
    WorldMechanic,
    merge_enemy_spawns,
)
from bombergen.models.entities import EnemyType, PowerUpType
from bombergen.parameters import (
    DAILY_BASE_ENEMIES,
    DAILY_BONUS_POWER_UP_CHANCE,
    DAILY_DENSITY_RANGE,
    DAILY_EXTRA_ENEMIES,
    DAILY_LEVEL_NUMBER,
    DAILY_TIME_LIMIT,
    MUSIC_GAMEPLAY,
)

logger = logging.getLogger(__name__)

DAILY_MECHANICS: list[WorldMechanic] = list(WorldMechanic)

DAILY_LAYOUTS: list[LayoutArchetype] = [
    layout for layout in LayoutArchetype if layout != LayoutArchetype.BOSS_ARENA
]

# Mid/late-game enemies
DAILY_ENEMY_POOL: list[EnemyType] = [
    EnemyType.ONIL,
    EnemyType.DOLL,
    EnemyType.MINVO,
    EnemyType.KONDORIA,
    EnemyType.OVAPI,
]

DAILY_BASE_POWER_UPS: tuple[PowerUpType, ...] = (
    PowerUpType.BOMB_UP,
    PowerUpType.FIRE,
    PowerUpType.SPEED,
)

DAILY_ADVANCED_POWER_UPS: list[PowerUpType] = [
    PowerUpType.KICK,
    PowerUpType.WALLPASS,
    PowerUpType.DETONATOR,
    PowerUpType.LINE_BOMB,
]


def daily_seed(day: date | None = None) -> int:
    """Derive the daily challenge seed from a calendar date.

    Formula: year * 10000 + month * 100 + day, using today's UTC date
    when no date is given.

    Examples:
        >>> daily_seed(date(2026, 10, 17))
        20261017
    """
    if day is None:
        day = datetime.now(timezone.utc).date()
    return day.year * 10000 + day.month * 100 + day.day


def generate_daily_challenge(seed: int) -> LevelBlueprint:
    """Generate the daily challenge for a seed.

    Draw order is part of the reproducibility contract: density, mechanic,
    layout, enemy count, each enemy, bonus power-up roll, bonus power-up.

    Args:
        seed: Seed, normally daily_seed() of the calendar date

    Returns:
        A fresh LevelBlueprint with number 99.
    """
    rng = random.Random(seed)

    density = rng.uniform(*DAILY_DENSITY_RANGE)
    mechanic = rng.choice(DAILY_MECHANICS)
    layout = rng.choice(DAILY_LAYOUTS)

    enemy_count = DAILY_BASE_ENEMIES + rng.randint(0, DAILY_EXTRA_ENEMIES)
    enemies = merge_enemy_spawns(
        (rng.choice(DAILY_ENEMY_POOL), 1) for _ in range(enemy_count)
    )

    power_ups = DAILY_BASE_POWER_UPS
    if rng.random() < DAILY_BONUS_POWER_UP_CHANCE:
        power_ups = power_ups + (rng.choice(DAILY_ADVANCED_POWER_UPS),)

    blueprint = LevelBlueprint(
        number=DAILY_LEVEL_NUMBER,
        name="Daily Challenge",
        mode=GameMode.DAILY_CHALLENGE,
        time_limit_seconds=DAILY_TIME_LIMIT,
        block_density=density,
        enemies=enemies,
        power_ups=power_ups,
        seed=seed,
        music_track=MUSIC_GAMEPLAY,
        mechanic=mechanic,
        layout=layout,
    )
    logger.debug(
        f"Daily challenge seed={seed}: mechanic={mechanic.value} "
        f"layout={layout.value} enemies={enemy_count}"
    )
    return blueprint


def generate_daily_challenge_for(day: date | None = None) -> LevelBlueprint:
    """Generate the daily challenge for a calendar date (UTC today by default)."""
    return generate_daily_challenge(daily_seed(day))
