"""Story-mode pipeline for normal (non-boss, non-bonus) levels.

Every stage is a pure table lookup keyed by the level number or by
(level, world). Stages run in a fixed order:

1. enemy roster
2. power-up roster
3. progression gating
4. block density
5. world mechanic
6. layout archetype
7. music cue

Boss and bonus levels are classified before this pipeline runs and are
handled in bombergen.generation.specials.
"""

import logging
from dataclasses import dataclass

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
    DEFAULT_TIME_LIMIT,
    DENSITY_BASE,
    DENSITY_RAMP,
    MUSIC_BOSS,
    MUSIC_GAMEPLAY,
    ONBOARDING_LEVELS,
    SKULL_FROM_LEVEL,
    STORY_LEVEL_COUNT,
    STORY_SEED_MULTIPLIER,
    WORLD_COUNT,
)
from bombergen.progression import (
    gate_power_ups,
    level_in_world,
    mechanic_start_in_world,
    world_for_level,
    world_mechanic,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterEntry:
    """One enemy type inside a band.

    count = base + (level - band_start) // divisor, or just base when
    divisor is 0.
    """

    type: EnemyType
    base: int
    divisor: int = 0

    def count_for(self, level: int, band_start: int) -> int:
        if self.divisor == 0:
            return self.base
        return self.base + (level - band_start) // self.divisor


@dataclass(frozen=True)
class EnemyBand:
    """Enemy roster for a contiguous range of levels.

    Counts grow from growth_start, which defaults to the band start.
    """

    start: int
    end: int
    entries: tuple[RosterEntry, ...]
    growth_start: int | None = None

    def origin(self) -> int:
        return self.start if self.growth_start is None else self.growth_start

    def contains(self, level: int) -> bool:
        return self.start <= level <= self.end


# Bands skip boss/bonus levels (10, 15, 20, ...), which never reach this stage
STORY_ENEMY_BANDS: list[EnemyBand] = [
    # Tutorial band grows from level 0: 2, 3, 3, 4, 4 Ballom
    EnemyBand(1, 5, (RosterEntry(EnemyType.BALLOM, 2, 2),), growth_start=0),
    EnemyBand(6, 9, (
        RosterEntry(EnemyType.BALLOM, 1),
        RosterEntry(EnemyType.ONIL, 2, 2),
    )),
    EnemyBand(11, 14, (
        RosterEntry(EnemyType.ONIL, 2),
        RosterEntry(EnemyType.DOLL, 1, 2),
    )),
    EnemyBand(16, 19, (
        RosterEntry(EnemyType.DOLL, 1),
        RosterEntry(EnemyType.MINVO, 2, 2),
    )),
    EnemyBand(21, 24, (
        RosterEntry(EnemyType.MINVO, 2),
        RosterEntry(EnemyType.KONDORIA, 1, 2),
    )),
    EnemyBand(26, 29, (
        RosterEntry(EnemyType.KONDORIA, 1),
        RosterEntry(EnemyType.OVAPI, 2, 2),
    )),
    EnemyBand(31, 34, (
        RosterEntry(EnemyType.OVAPI, 2),
        RosterEntry(EnemyType.PASS, 1, 2),
    )),
    EnemyBand(36, 39, (
        RosterEntry(EnemyType.PASS, 2),
        RosterEntry(EnemyType.PONTAN, 1, 3),
    )),
    EnemyBand(41, 49, (
        RosterEntry(EnemyType.MINVO, 1),
        RosterEntry(EnemyType.KONDORIA, 1),
        RosterEntry(EnemyType.PASS, 1, 3),
        RosterEntry(EnemyType.PONTAN, 1),
    )),
]

FALLBACK_ENEMIES: tuple[RosterEntry, ...] = (RosterEntry(EnemyType.BALLOM, 2),)

# (highest level, power-ups) thresholds, checked in order
STORY_POWER_UP_BANDS: list[tuple[int, tuple[PowerUpType, ...]]] = [
    (5, (PowerUpType.BOMB_UP, PowerUpType.FIRE)),
    (15, (PowerUpType.BOMB_UP, PowerUpType.FIRE, PowerUpType.SPEED)),
    (25, (PowerUpType.FIRE, PowerUpType.SPEED, PowerUpType.DETONATOR)),
    (35, (PowerUpType.FIRE, PowerUpType.WALLPASS, PowerUpType.BOMBPASS)),
]

LATE_GAME_POWER_UPS: tuple[PowerUpType, ...] = (
    PowerUpType.FIRE,
    PowerUpType.FLAMEPASS,
    PowerUpType.MYSTERY,
)

# Per-world layout rotation for levels 3..10 of the world
WORLD_LAYOUT_PALETTES: dict[int, list[LayoutArchetype]] = {
    1: [LayoutArchetype.CROSS, LayoutArchetype.ARENA, LayoutArchetype.CLASSIC, LayoutArchetype.TWO_ROOMS],
    2: [LayoutArchetype.TWO_ROOMS, LayoutArchetype.CROSS, LayoutArchetype.DIAGONAL, LayoutArchetype.ARENA],
    3: [LayoutArchetype.MAZE, LayoutArchetype.SPIRAL, LayoutArchetype.TWO_ROOMS, LayoutArchetype.CROSS],
    4: [LayoutArchetype.DIAGONAL, LayoutArchetype.MAZE, LayoutArchetype.ARENA, LayoutArchetype.SPIRAL],
    5: [LayoutArchetype.SPIRAL, LayoutArchetype.MAZE, LayoutArchetype.DIAGONAL, LayoutArchetype.TWO_ROOMS],
}

FALLBACK_LAYOUT_PALETTE: list[LayoutArchetype] = [LayoutArchetype.CLASSIC]


def story_seed(level: int) -> int:
    """Deterministic renderer seed for a Story level."""
    return level * STORY_SEED_MULTIPLIER


def get_enemy_roster(level: int) -> tuple[EnemySpawn, ...]:
    """Pick the enemy roster for a normal level from its band."""
    for band in STORY_ENEMY_BANDS:
        if band.contains(level):
            return merge_enemy_spawns(
                (entry.type, entry.count_for(level, band.origin())) for entry in band.entries
            )
    return merge_enemy_spawns((entry.type, entry.base) for entry in FALLBACK_ENEMIES)


def get_power_ups(level: int) -> tuple[PowerUpType, ...]:
    """Pick the ungated power-up roster for a normal level."""
    power_ups = LATE_GAME_POWER_UPS
    for max_level, band_power_ups in STORY_POWER_UP_BANDS:
        if level <= max_level:
            power_ups = band_power_ups
            break

    if level >= SKULL_FROM_LEVEL:
        power_ups = power_ups + (PowerUpType.SKULL,)
    return power_ups


def get_block_density(level: int) -> float:
    """Linear density ramp: 0.35 at the start of the campaign, 0.60 at level 50."""
    return DENSITY_BASE + (level / STORY_LEVEL_COUNT) * DENSITY_RAMP


def get_mechanic(level: int, world: int) -> WorldMechanic:
    """World mechanic for a normal level.

    World 1 never has one. Later worlds switch theirs on partway through
    the world (see MECHANIC_START_IN_WORLD); mechanics never mix.
    """
    start = mechanic_start_in_world(world)
    if start is None or level_in_world(level) < start:
        return WorldMechanic.NONE
    return world_mechanic(world)


def get_layout(level: int, world: int) -> LayoutArchetype:
    """Layout archetype for a normal level.

    The first levels of every world stay CLASSIC for onboarding; the rest
    rotate through the world's palette.
    """
    position = level_in_world(level)
    if position <= ONBOARDING_LEVELS:
        return LayoutArchetype.CLASSIC

    palette = WORLD_LAYOUT_PALETTES.get(world, FALLBACK_LAYOUT_PALETTE)
    return palette[(position - ONBOARDING_LEVELS - 1) % len(palette)]


def get_music_track(world: int) -> str:
    """The final world plays the boss track throughout."""
    if world == WORLD_COUNT:
        return MUSIC_BOSS
    return MUSIC_GAMEPLAY


def generate_normal_level(level: int, highest_completed: int | None = None) -> LevelBlueprint:
    """Run the Story pipeline for a level already classified as normal.

    Args:
        level: Story level number
        highest_completed: Player's best completed level, or None for no gating

    Returns:
        A fresh LevelBlueprint.
    """
    world = world_for_level(level)
    power_ups = gate_power_ups(get_power_ups(level), level, highest_completed)

    blueprint = LevelBlueprint(
        number=level,
        name=f"Stage {level}",
        mode=GameMode.STORY,
        world=world,
        time_limit_seconds=DEFAULT_TIME_LIMIT,
        block_density=get_block_density(level),
        enemies=get_enemy_roster(level),
        power_ups=power_ups,
        seed=story_seed(level),
        music_track=get_music_track(world),
        mechanic=get_mechanic(level, world),
        layout=get_layout(level, world),
    )
    logger.debug(
        f"Stage {level}: world={world} mechanic={blueprint.mechanic.value} "
        f"layout={blueprint.layout.value} enemies={blueprint.total_enemies}"
    )
    return blueprint
