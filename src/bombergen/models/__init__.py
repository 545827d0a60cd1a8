"""bombergen data models.

This module exports the blueprint type and the entity enums it refers to.
"""

from .blueprint import (
    EnemySpawn,
    GameMode,
    GridPosition,
    LayoutArchetype,
    LevelBlueprint,
    WorldMechanic,
    merge_enemy_spawns,
)
from .entities import (
    ENEMY_POINTS,
    ENEMY_SPEED,
    POWER_UP_UNLOCK_LEVELS,
    EnemyIntelligence,
    EnemyType,
    PowerUpType,
    can_pass_walls,
    get_enemy_intelligence,
    get_enemy_points,
    get_enemy_speed,
    get_name_key,
    get_power_up_duration,
    get_power_up_points,
    get_unlock_level,
    is_negative,
    is_permanent,
    is_temporary,
)

__all__ = [
    # Blueprint
    "EnemySpawn",
    "GameMode",
    "GridPosition",
    "LayoutArchetype",
    "LevelBlueprint",
    "WorldMechanic",
    "merge_enemy_spawns",
    # Entities
    "ENEMY_POINTS",
    "ENEMY_SPEED",
    "POWER_UP_UNLOCK_LEVELS",
    "EnemyIntelligence",
    "EnemyType",
    "PowerUpType",
    "can_pass_walls",
    "get_enemy_intelligence",
    "get_enemy_points",
    "get_enemy_speed",
    "get_name_key",
    "get_power_up_duration",
    "get_power_up_points",
    "get_unlock_level",
    "is_negative",
    "is_permanent",
    "is_temporary",
]
