"""Boss and bonus level specializations for Story mode.

Boss levels close every world (level % 10 == 0). Their rosters are
hand-curated per world rather than banded, they always use the world's
mechanic, and they play in the BOSS_ARENA layout.

Bonus levels are every other 5th level (level % 5 == 0, not a boss). The
variant is a round-robin over (level // 5) % 4, so the same level always
yields the same variant:

    0 Coin Rush   - open arena, many weak enemies, power-up heavy
    1 Speed Run   - almost no blocks, 30 seconds, double Speed
    2 Demolition  - dense blocks, Fire/BombUp heavy, one Kick
    3 Mystery     - triple Mystery plus one Skull (risk/reward)

Progression gating still applies to both specializations.
"""

import logging
from dataclasses import dataclass

from bombergen.generation.story import get_music_track, story_seed
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
    BONUS_INTERVAL,
    BONUS_TIME_LIMIT,
    BONUS_VARIANT_COUNT,
    BOSS_BLOCK_DENSITY,
    BOSS_TIME_LIMIT,
    MUSIC_BOSS,
)
from bombergen.progression import gate_power_ups, world_for_level, world_mechanic

logger = logging.getLogger(__name__)


# =============================================================================
# Boss levels
# =============================================================================

BOSS_ROSTERS: dict[int, list[tuple[EnemyType, int]]] = {
    1: [(EnemyType.ONIL, 3), (EnemyType.DOLL, 2)],
    2: [(EnemyType.DOLL, 2), (EnemyType.MINVO, 3), (EnemyType.KONDORIA, 1)],
    3: [(EnemyType.MINVO, 2), (EnemyType.KONDORIA, 2), (EnemyType.OVAPI, 2)],
    4: [(EnemyType.OVAPI, 2), (EnemyType.PASS, 3), (EnemyType.PONTAN, 1)],
    5: [(EnemyType.KONDORIA, 2), (EnemyType.PASS, 3), (EnemyType.PONTAN, 3)],
}

FALLBACK_BOSS_ROSTER: list[tuple[EnemyType, int]] = [(EnemyType.BALLOM, 3)]

BOSS_BASE_POWER_UPS: tuple[PowerUpType, ...] = (
    PowerUpType.BOMB_UP,
    PowerUpType.FIRE,
    PowerUpType.SPEED,
)

BOSS_KICK_FROM_WORLD = 3
BOSS_DETONATOR_FROM_WORLD = 4


def get_boss_roster(world: int) -> tuple[EnemySpawn, ...]:
    return merge_enemy_spawns(BOSS_ROSTERS.get(world, FALLBACK_BOSS_ROSTER))


def get_boss_power_ups(world: int) -> tuple[PowerUpType, ...]:
    """Fixed boss power-ups, growing with world tier."""
    power_ups = BOSS_BASE_POWER_UPS
    if world >= BOSS_KICK_FROM_WORLD:
        power_ups = power_ups + (PowerUpType.KICK,)
    if world >= BOSS_DETONATOR_FROM_WORLD:
        power_ups = power_ups + (PowerUpType.DETONATOR,)
    return power_ups


def generate_boss_level(level: int, highest_completed: int | None = None) -> LevelBlueprint:
    """Build the boss blueprint for a level with level % 10 == 0.

    The world's mechanic is always on, bypassing the level-in-world start
    used by normal levels.
    """
    world = world_for_level(level)

    blueprint = LevelBlueprint(
        number=level,
        name=f"Boss - World {world}",
        mode=GameMode.STORY,
        world=world,
        time_limit_seconds=BOSS_TIME_LIMIT,
        block_density=BOSS_BLOCK_DENSITY,
        enemies=get_boss_roster(world),
        power_ups=gate_power_ups(get_boss_power_ups(world), level, highest_completed),
        seed=story_seed(level),
        is_boss_level=True,
        music_track=MUSIC_BOSS,
        mechanic=world_mechanic(world),
        layout=LayoutArchetype.BOSS_ARENA,
    )
    logger.debug(f"Boss level {level}: world={world} enemies={blueprint.total_enemies}")
    return blueprint


# =============================================================================
# Bonus levels
# =============================================================================


@dataclass(frozen=True)
class BonusVariant:
    """Fixed configuration for one bonus variant."""

    title: str
    block_density: float
    layout: LayoutArchetype
    enemies: tuple[tuple[EnemyType, int], ...]
    power_ups: tuple[PowerUpType, ...]
    time_limit_seconds: int = BONUS_TIME_LIMIT


BONUS_VARIANTS: list[BonusVariant] = [
    BonusVariant(
        title="Coin Rush",
        block_density=0.3,
        layout=LayoutArchetype.ARENA,
        enemies=((EnemyType.BALLOM, 6),),
        power_ups=(
            PowerUpType.BOMB_UP, PowerUpType.BOMB_UP,
            PowerUpType.FIRE, PowerUpType.FIRE,
            PowerUpType.SPEED, PowerUpType.SPEED,
            PowerUpType.MYSTERY,
        ),
    ),
    BonusVariant(
        title="Speed Run",
        block_density=0.15,
        layout=LayoutArchetype.CROSS,
        enemies=((EnemyType.BALLOM, 2),),
        power_ups=(PowerUpType.SPEED, PowerUpType.SPEED),
        time_limit_seconds=30,
    ),
    BonusVariant(
        title="Demolition",
        block_density=0.7,
        layout=LayoutArchetype.CLASSIC,
        enemies=((EnemyType.BALLOM, 3), (EnemyType.ONIL, 1)),
        power_ups=(
            PowerUpType.FIRE, PowerUpType.FIRE,
            PowerUpType.BOMB_UP, PowerUpType.BOMB_UP,
            PowerUpType.KICK,
        ),
    ),
    BonusVariant(
        title="Mystery",
        block_density=0.4,
        layout=LayoutArchetype.SPIRAL,
        enemies=((EnemyType.ONIL, 2), (EnemyType.DOLL, 1)),
        power_ups=(
            PowerUpType.MYSTERY, PowerUpType.MYSTERY, PowerUpType.MYSTERY,
            PowerUpType.SKULL,
        ),
    ),
]


def get_bonus_type(level: int) -> int:
    """Round-robin bonus variant index for a level."""
    return (level // BONUS_INTERVAL) % BONUS_VARIANT_COUNT


def get_bonus_variant(level: int) -> BonusVariant:
    return BONUS_VARIANTS[get_bonus_type(level)]


def generate_bonus_level(level: int, highest_completed: int | None = None) -> LevelBlueprint:
    """Build the bonus blueprint for a level with level % 5 == 0 (not a boss).

    Bonus levels are a break from the world's mechanic.
    """
    world = world_for_level(level)
    variant = get_bonus_variant(level)

    blueprint = LevelBlueprint(
        number=level,
        name=f"Bonus: {variant.title}",
        mode=GameMode.STORY,
        world=world,
        time_limit_seconds=variant.time_limit_seconds,
        block_density=variant.block_density,
        enemies=merge_enemy_spawns(variant.enemies),
        power_ups=gate_power_ups(variant.power_ups, level, highest_completed),
        seed=story_seed(level),
        is_bonus_level=True,
        music_track=get_music_track(world),
        mechanic=WorldMechanic.NONE,
        layout=variant.layout,
    )
    logger.debug(f"Bonus level {level}: variant={variant.title}")
    return blueprint
