"""Enemy and power-up definitions for bombergen.

The enums here are owned by the gameplay layer; the generator treats them as
opaque keys. Per-type metadata (unlock levels, speeds, point values) lives in
plain dict tables next to the enums and is read through accessor functions
that fall back to a default for unknown keys.
"""

from enum import Enum


class EnemyType(str, Enum):
    """Enemy roster, weakest to strongest.

    Inherits from str for proper JSON serialization.
    """

    BALLOM = "ballom"  # Slow, dumb tutorial fodder
    ONIL = "onil"  # Normal speed, somewhat random movement
    DOLL = "doll"  # Normal speed, predictable
    MINVO = "minvo"  # Fast, normal intelligence
    KONDORIA = "kondoria"  # Very slow, walks through blocks
    OVAPI = "ovapi"  # Slow, walks through blocks
    PASS = "pass"  # Fast, actively chases
    PONTAN = "pontan"  # Very fast, chases, walks through blocks


class EnemyIntelligence(str, Enum):
    """How the enemy AI picks its moves.

    Inherits from str for proper JSON serialization.
    """

    LOW = "low"  # Predictable back-and-forth movement
    NORMAL = "normal"  # Erratic, sometimes chases
    HIGH = "high"  # Actively chases, avoids bombs


class PowerUpType(str, Enum):
    """Power-ups hidden inside destructible blocks.

    Inherits from str for proper JSON serialization.
    """

    BOMB_UP = "bomb_up"
    FIRE = "fire"
    SPEED = "speed"
    WALLPASS = "wallpass"
    DETONATOR = "detonator"
    BOMBPASS = "bombpass"
    FLAMEPASS = "flamepass"
    MYSTERY = "mystery"
    KICK = "kick"
    LINE_BOMB = "line_bomb"
    POWER_BOMB = "power_bomb"
    SKULL = "skull"


# =============================================================================
# Enemy metadata
# =============================================================================

# Base movement speed in pixels per second
ENEMY_SPEED: dict[EnemyType, float] = {
    EnemyType.BALLOM: 30.0,
    EnemyType.ONIL: 45.0,
    EnemyType.DOLL: 45.0,
    EnemyType.MINVO: 65.0,
    EnemyType.KONDORIA: 20.0,
    EnemyType.OVAPI: 35.0,
    EnemyType.PASS: 70.0,
    EnemyType.PONTAN: 85.0,
}

ENEMY_INTELLIGENCE: dict[EnemyType, EnemyIntelligence] = {
    EnemyType.BALLOM: EnemyIntelligence.LOW,
    EnemyType.ONIL: EnemyIntelligence.NORMAL,
    EnemyType.DOLL: EnemyIntelligence.LOW,
    EnemyType.MINVO: EnemyIntelligence.NORMAL,
    EnemyType.KONDORIA: EnemyIntelligence.HIGH,
    EnemyType.OVAPI: EnemyIntelligence.NORMAL,
    EnemyType.PASS: EnemyIntelligence.HIGH,
    EnemyType.PONTAN: EnemyIntelligence.HIGH,
}

WALL_PASSING_ENEMIES: frozenset[EnemyType] = frozenset(
    {EnemyType.KONDORIA, EnemyType.OVAPI, EnemyType.PONTAN}
)

ENEMY_POINTS: dict[EnemyType, int] = {
    EnemyType.BALLOM: 100,
    EnemyType.ONIL: 200,
    EnemyType.DOLL: 400,
    EnemyType.MINVO: 800,
    EnemyType.KONDORIA: 1000,
    EnemyType.OVAPI: 2000,
    EnemyType.PASS: 4000,
    EnemyType.PONTAN: 8000,
}


def get_enemy_speed(enemy: EnemyType) -> float:
    return ENEMY_SPEED.get(enemy, 45.0)


def get_enemy_intelligence(enemy: EnemyType) -> EnemyIntelligence:
    return ENEMY_INTELLIGENCE.get(enemy, EnemyIntelligence.NORMAL)


def can_pass_walls(enemy: EnemyType) -> bool:
    """Check if the enemy can walk through destructible blocks."""
    return enemy in WALL_PASSING_ENEMIES


def get_enemy_points(enemy: EnemyType) -> int:
    return ENEMY_POINTS.get(enemy, 100)


# =============================================================================
# Power-up metadata
# =============================================================================

# Story level from which each power-up may appear (progression gating)
POWER_UP_UNLOCK_LEVELS: dict[PowerUpType, int] = {
    PowerUpType.BOMB_UP: 1,
    PowerUpType.FIRE: 1,
    PowerUpType.SPEED: 1,
    PowerUpType.KICK: 10,
    PowerUpType.MYSTERY: 15,
    PowerUpType.SKULL: 20,
    PowerUpType.WALLPASS: 20,
    PowerUpType.DETONATOR: 25,
    PowerUpType.BOMBPASS: 25,
    PowerUpType.LINE_BOMB: 30,
    PowerUpType.FLAMEPASS: 35,
    PowerUpType.POWER_BOMB: 40,
}

POWER_UP_POINTS: dict[PowerUpType, int] = {
    PowerUpType.BOMB_UP: 100,
    PowerUpType.FIRE: 100,
    PowerUpType.SPEED: 200,
    PowerUpType.WALLPASS: 500,
    PowerUpType.DETONATOR: 500,
    PowerUpType.BOMBPASS: 500,
    PowerUpType.FLAMEPASS: 500,
    PowerUpType.MYSTERY: 1000,
    PowerUpType.KICK: 300,
    PowerUpType.LINE_BOMB: 400,
    PowerUpType.POWER_BOMB: 400,
    PowerUpType.SKULL: 0,  # No score for curses
}

# Duration in seconds for temporary power-ups
POWER_UP_DURATIONS: dict[PowerUpType, float] = {
    PowerUpType.MYSTERY: 35.0,
    PowerUpType.SKULL: 10.0,
}

PERMANENT_POWER_UPS: frozenset[PowerUpType] = frozenset(
    {PowerUpType.BOMB_UP, PowerUpType.FIRE}
)


def get_unlock_level(power_up: PowerUpType) -> int:
    """Get the Story level at which a power-up becomes available.

    Unknown types are treated as available from the first level.
    """
    return POWER_UP_UNLOCK_LEVELS.get(power_up, 1)


def get_power_up_points(power_up: PowerUpType) -> int:
    return POWER_UP_POINTS.get(power_up, 0)


def get_power_up_duration(power_up: PowerUpType) -> float:
    """Get duration in seconds, 0.0 for non-temporary power-ups."""
    return POWER_UP_DURATIONS.get(power_up, 0.0)


def is_permanent(power_up: PowerUpType) -> bool:
    """Permanent power-ups survive the player's death."""
    return power_up in PERMANENT_POWER_UPS


def is_temporary(power_up: PowerUpType) -> bool:
    return power_up in POWER_UP_DURATIONS


def is_negative(power_up: PowerUpType) -> bool:
    return power_up == PowerUpType.SKULL


def get_name_key(power_up: PowerUpType) -> str:
    """Localization key for the power-up's display name."""
    return f"PowerUp_{power_up.name.title().replace('_', '')}"
