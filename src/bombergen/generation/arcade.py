"""Arcade wave generator for bombergen.

Arcade mode is an endless sequence of waves. Pressure ramps with the wave
number: less time, denser blocks, tougher enemies, fewer power-ups.

Seeds:
- The blueprint seed mixes in the current wall-clock millisecond, so the
  same wave looks different from run to run unless the caller pins
  ``entropy``. Only cosmetic renderer randomness consumes it.
- Power-ups come from a stream seeded with wave * 11111 and are therefore
  reproducible for a given wave.
"""

import logging
import random
import time

from bombergen.models.blueprint import (
    EnemySpawn,
    GameMode,
    LayoutArchetype,
    LevelBlueprint,
    WorldMechanic,
    merge_enemy_spawns,
)
from bombergen.models.entities import EnemyType, PowerUpType
from bombergen.parameters import (
    ARCADE_DENSITY_BASE,
    ARCADE_DENSITY_MAX,
    ARCADE_DENSITY_STEP,
    ARCADE_MAX_BASE_ENEMIES,
    ARCADE_MIN_TIME_LIMIT,
    ARCADE_POWER_UP_SEED_MULTIPLIER,
    ARCADE_SEED_MULTIPLIER,
    ARCADE_SKULL_CHANCE,
    ARCADE_SKULL_FROM_WAVE,
    ARCADE_TIME_DECAY,
    DEFAULT_TIME_LIMIT,
    MUSIC_GAMEPLAY,
)

logger = logging.getLogger(__name__)

# (first wave, mechanic), highest threshold first
ARCADE_MECHANIC_LADDER: list[tuple[int, WorldMechanic]] = [
    (25, WorldMechanic.LAVA_CRACK),
    (20, WorldMechanic.TELEPORTER),
    (15, WorldMechanic.CONVEYOR),
    (10, WorldMechanic.ICE),
]

ARCADE_BASE_POWER_UP_POOL: list[PowerUpType] = [
    PowerUpType.BOMB_UP,
    PowerUpType.FIRE,
    PowerUpType.SPEED,
    PowerUpType.KICK,
    PowerUpType.MYSTERY,
    PowerUpType.WALLPASS,
    PowerUpType.DETONATOR,
    PowerUpType.BOMBPASS,
    PowerUpType.FLAMEPASS,
]

LINE_BOMB_FROM_WAVE = 5
POWER_BOMB_FROM_WAVE = 8


def get_time_limit(wave: int) -> int:
    return max(ARCADE_MIN_TIME_LIMIT, DEFAULT_TIME_LIMIT - wave * ARCADE_TIME_DECAY)


def get_block_density(wave: int) -> float:
    return min(ARCADE_DENSITY_MAX, ARCADE_DENSITY_BASE + wave * ARCADE_DENSITY_STEP)


def get_base_enemy_count(wave: int) -> int:
    """min(2 + wave // 3, 5), never below 1."""
    return max(1, min(2 + wave // 3, ARCADE_MAX_BASE_ENEMIES))


def get_enemy_roster(wave: int) -> tuple[EnemySpawn, ...]:
    """Enemy roster banded by wave (<=3, <=6, <=10, beyond)."""
    base = get_base_enemy_count(wave)

    if wave <= 3:
        roster = [(EnemyType.BALLOM, base)]
    elif wave <= 6:
        roster = [(EnemyType.BALLOM, 1), (EnemyType.ONIL, base - 1)]
    elif wave <= 10:
        roster = [
            (EnemyType.ONIL, 1),
            (EnemyType.DOLL, 1),
            (EnemyType.MINVO, base - 2),
        ]
    else:
        # Chaos mode, still limited to ~5 enemies
        roster = [
            (EnemyType.MINVO, 1),
            (EnemyType.KONDORIA, 1),
            (EnemyType.PASS, 1),
        ]
        if wave >= 15:
            roster.append((EnemyType.PONTAN, 1))

    return merge_enemy_spawns(roster)


def get_mechanic(wave: int) -> WorldMechanic:
    for first_wave, mechanic in ARCADE_MECHANIC_LADDER:
        if wave >= first_wave:
            return mechanic
    return WorldMechanic.NONE


def get_layout(wave: int) -> LayoutArchetype | None:
    """Every 5th wave is an arena, every 7th a maze; otherwise renderer default."""
    if wave % 5 == 0:
        return LayoutArchetype.ARENA
    if wave % 7 == 0:
        return LayoutArchetype.MAZE
    return None


def get_power_up_pool(wave: int) -> list[PowerUpType]:
    pool = list(ARCADE_BASE_POWER_UP_POOL)
    if wave >= LINE_BOMB_FROM_WAVE:
        pool.append(PowerUpType.LINE_BOMB)
    if wave >= POWER_BOMB_FROM_WAVE:
        pool.append(PowerUpType.POWER_BOMB)
    return pool


def get_power_ups(wave: int) -> tuple[PowerUpType, ...]:
    """Draw the wave's power-ups from a wave-seeded stream.

    max(1, 4 - wave // 5) draws with replacement, then (from wave 5) a 40%
    chance, from the same stream, to append a Skull.
    """
    rng = random.Random(wave * ARCADE_POWER_UP_SEED_MULTIPLIER)
    pool = get_power_up_pool(wave)

    count = max(1, 4 - wave // 5)
    power_ups = [rng.choice(pool) for _ in range(count)]

    if wave >= ARCADE_SKULL_FROM_WAVE and rng.random() < ARCADE_SKULL_CHANCE:
        power_ups.append(PowerUpType.SKULL)

    return tuple(power_ups)


def current_millisecond() -> int:
    """Wall-clock millisecond (0-999), the default arcade entropy source."""
    return time.time_ns() // 1_000_000 % 1000


def generate_arcade_wave(wave: int, entropy: int | None = None) -> LevelBlueprint:
    """Generate an arcade wave.

    Args:
        wave: Wave number
        entropy: Value mixed into the blueprint seed. Defaults to the
            current wall-clock millisecond; pin it to reproduce a run.

    Returns:
        A fresh LevelBlueprint.
    """
    if entropy is None:
        entropy = current_millisecond()

    blueprint = LevelBlueprint(
        number=wave,
        name=f"Wave {wave}",
        mode=GameMode.ARCADE,
        time_limit_seconds=get_time_limit(wave),
        block_density=get_block_density(wave),
        enemies=get_enemy_roster(wave),
        power_ups=get_power_ups(wave),
        seed=wave * ARCADE_SEED_MULTIPLIER + entropy,
        music_track=MUSIC_GAMEPLAY,
        mechanic=get_mechanic(wave),
        layout=get_layout(wave),
    )
    logger.debug(
        f"Wave {wave}: seed={blueprint.seed} mechanic={blueprint.mechanic.value} "
        f"power_ups={len(blueprint.power_ups)}"
    )
    return blueprint
