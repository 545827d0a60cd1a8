"""Campaign progression rules for bombergen.

World/level arithmetic, power-up gating, mechanic unlocks and world star
gates. Everything here is a pure function of its arguments; the player's
progress (highest completed level, stars) is owned by the caller.

Key formulas:
- world = (level - 1) // 10 + 1
- level_in_world = (level - 1) % 10 + 1
- a power-up survives gating iff unlock_level <= max(highest_completed, level)
"""

from collections.abc import Iterable

from bombergen.models.blueprint import WorldMechanic
from bombergen.models.entities import PowerUpType, get_unlock_level
from bombergen.parameters import (
    BONUS_INTERVAL,
    BOSS_INTERVAL,
    LEVELS_PER_WORLD,
    STORY_LEVEL_COUNT,
    WORLD_STARS_REQUIRED,
)

# Signature mechanic of each world
WORLD_MECHANICS: dict[int, WorldMechanic] = {
    1: WorldMechanic.NONE,
    2: WorldMechanic.ICE,
    3: WorldMechanic.CONVEYOR,
    4: WorldMechanic.TELEPORTER,
    5: WorldMechanic.LAVA_CRACK,
}

# Level-in-world from which a normal level switches its world mechanic on
MECHANIC_START_IN_WORLD: dict[int, int] = {
    2: 3,
    3: 3,
    4: 3,
    5: 2,
}


def world_for_level(level: int) -> int:
    """Determine which world a Story level belongs to.

    Examples:
        >>> world_for_level(1)
        1
        >>> world_for_level(10)
        1
        >>> world_for_level(11)
        2
    """
    return (level - 1) // LEVELS_PER_WORLD + 1


def level_in_world(level: int) -> int:
    """Position of a level inside its world, 1..10."""
    return (level - 1) % LEVELS_PER_WORLD + 1


def is_story_level(level: int) -> bool:
    """Check if a level number is inside the Story campaign (1..50)."""
    return 1 <= level <= STORY_LEVEL_COUNT


def is_boss_level(level: int) -> bool:
    return level % BOSS_INTERVAL == 0


def is_bonus_level(level: int) -> bool:
    """Bonus levels are every 5th level that is not already a boss level."""
    return level % BONUS_INTERVAL == 0 and not is_boss_level(level)


def world_mechanic(world: int) -> WorldMechanic:
    """Get a world's signature mechanic (NONE for unknown worlds)."""
    return WORLD_MECHANICS.get(world, WorldMechanic.NONE)


def mechanic_start_in_world(world: int) -> int | None:
    """Level-in-world from which normal levels use the world's mechanic.

    Returns None for worlds without a mechanic.
    """
    return MECHANIC_START_IN_WORLD.get(world)


def mechanic_unlock_level(mechanic: WorldMechanic) -> int:
    """First Story level that features a mechanic.

    NONE is available from level 1. Used by menus to show when a mechanic
    will be introduced.

    Examples:
        >>> mechanic_unlock_level(WorldMechanic.ICE)
        13
    """
    for world, world_mech in WORLD_MECHANICS.items():
        start = mechanic_start_in_world(world)
        if world_mech == mechanic and start is not None:
            return (world - 1) * LEVELS_PER_WORLD + start
    return 1


def gate_power_ups(
    power_ups: Iterable[PowerUpType],
    level: int,
    highest_completed: int | None,
) -> tuple[PowerUpType, ...]:
    """Remove power-ups the player has not reached yet.

    A level may always offer the power-ups it introduces itself, so the
    threshold is max(highest_completed, level). Passing None for
    highest_completed disables gating entirely.

    Increasing highest_completed can only widen the allowed set.

    Args:
        power_ups: Candidate power-ups (duplicates kept)
        level: The level being generated
        highest_completed: Player's best completed level, or None for unbounded

    Returns:
        The surviving power-ups in their original order.
    """
    if highest_completed is None:
        return tuple(power_ups)

    threshold = max(highest_completed, level)
    return tuple(p for p in power_ups if get_unlock_level(p) <= threshold)


def is_power_up_unlocked(power_up: PowerUpType, highest_completed: int) -> bool:
    """Check if the player has unlocked a power-up for display purposes."""
    unlock = get_unlock_level(power_up)
    return highest_completed >= unlock or unlock <= 1


def world_stars_required(level: int) -> int:
    """Stars needed to enter the world that contains a level."""
    world = world_for_level(level)
    if 1 <= world < len(WORLD_STARS_REQUIRED):
        return WORLD_STARS_REQUIRED[world]
    return 0


def is_level_unlocked(level: int, highest_completed: int, total_stars: int) -> bool:
    """Check if a Story level can be started.

    Rules:
    - Only levels 1..50 exist
    - Level 1 is always open
    - The previous level must be completed
    - The level's world star gate must be met
    """
    if not is_story_level(level):
        return False

    if level == 1:
        return True

    if level > highest_completed + 1:
        return False

    required = world_stars_required(level)
    if required > 0 and total_stars < required:
        return False

    return True
