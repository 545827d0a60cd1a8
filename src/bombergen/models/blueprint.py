"""Level blueprint model for bombergen.

A LevelBlueprint is the complete declarative description of a level's content,
independent of its physical tile rendering. The generator creates a fresh,
frozen blueprint on every call; the renderer consumes it and turns it into a
grid, sprites, and physics.

Invariants enforced at construction:
- block_density is clamped into [0, 1]
- a blueprint is never both a boss level and a bonus level
- enemy roster entries have positive counts and each type appears once
"""

from collections import Counter
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bombergen.models.entities import EnemyType, PowerUpType

GridPosition = tuple[int, int]


class GameMode(str, Enum):
    """Which generator produced a blueprint."""

    STORY = "story"
    DAILY_CHALLENGE = "daily_challenge"
    ARCADE = "arcade"


class WorldMechanic(str, Enum):
    """World-wide environmental rule layered onto gameplay."""

    NONE = "none"
    ICE = "ice"  # Players slide on ice tiles
    CONVEYOR = "conveyor"  # Belts push entities
    TELEPORTER = "teleporter"  # Paired portals
    LAVA_CRACK = "lava_crack"  # Cracks that periodically erupt


class LayoutArchetype(str, Enum):
    """Named topology pattern selecting the renderer's wall algorithm."""

    CLASSIC = "classic"
    CROSS = "cross"
    ARENA = "arena"
    MAZE = "maze"
    TWO_ROOMS = "two_rooms"
    SPIRAL = "spiral"
    DIAGONAL = "diagonal"
    BOSS_ARENA = "boss_arena"


class EnemySpawn(BaseModel):
    """A roster entry: enemy type and how many to spawn.

    Attributes:
        type: Enemy type
        count: Number of enemies of this type (at least 1)
        position: Suggested spawn tile, or None to let the renderer pick
    """

    model_config = ConfigDict(frozen=True)

    type: EnemyType
    count: int = Field(ge=1)
    position: GridPosition | None = Field(default=None)


def merge_enemy_spawns(spawns: Iterable[EnemySpawn | tuple[EnemyType, int]]) -> tuple[EnemySpawn, ...]:
    """Merge roster contributions into one entry per enemy type.

    Counts for the same type accumulate; order follows each type's first
    appearance. Contributions with non-positive counts are dropped, so the
    result only ever holds strictly positive counts.

    Args:
        spawns: EnemySpawn objects or (type, count) pairs

    Returns:
        Tuple of merged EnemySpawn entries.
    """
    totals: dict[EnemyType, int] = {}
    positions: dict[EnemyType, GridPosition | None] = {}

    for spawn in spawns:
        if isinstance(spawn, EnemySpawn):
            enemy, count, position = spawn.type, spawn.count, spawn.position
        else:
            enemy, count = spawn
            position = None

        if count <= 0:
            continue
        totals[enemy] = totals.get(enemy, 0) + count
        positions.setdefault(enemy, position)

    return tuple(
        EnemySpawn(type=enemy, count=count, position=positions[enemy])
        for enemy, count in totals.items()
    )


class LevelBlueprint(BaseModel):
    """Complete description of a generated level.

    The renderer is responsible for materializing a tile grid honoring
    block_density, fixed_blocks, layout and mechanic; spawning enemies per
    the roster; hiding power-ups inside destructible blocks (duplicate
    entries raise relative spawn weight); and picking music by music_track.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Identification
    number: int = Field(description="Level index, wave number, or 99 for daily challenges")
    name: str = Field(min_length=1, description="Human-readable title")
    mode: GameMode = Field(default=GameMode.STORY)
    world: int | None = Field(default=None, description="Story world index")

    # Pacing and density
    time_limit_seconds: int = Field(default=200)
    block_density: float = Field(
        default=0.35,
        description="Fraction of empty tiles converted to destructible blocks",
    )

    # Content
    enemies: tuple[EnemySpawn, ...] = Field(default_factory=tuple)
    power_ups: tuple[PowerUpType, ...] = Field(default_factory=tuple)

    # Hand-authored geometry (None means the renderer places things)
    fixed_blocks: frozenset[GridPosition] | None = Field(default=None)
    exit_position: GridPosition | None = Field(default=None)

    # Renderer-side randomness
    seed: int | None = Field(default=None)

    # Classification
    is_bonus_level: bool = Field(default=False)
    is_boss_level: bool = Field(default=False)

    music_track: str = Field(default="gameplay")
    mechanic: WorldMechanic = Field(default=WorldMechanic.NONE)
    layout: LayoutArchetype | None = Field(default=None)

    @field_validator("block_density", mode="before")
    @classmethod
    def clamp_density(cls, v: float) -> float:
        """Clamp block density to [0, 1]."""
        return max(0.0, min(1.0, float(v)))

    @model_validator(mode="after")
    def validate_classification(self) -> "LevelBlueprint":
        """A level cannot be both a boss level and a bonus level."""
        if self.is_boss_level and self.is_bonus_level:
            raise ValueError(
                f"Level {self.number} cannot be both a boss level and a bonus level"
            )
        return self

    @model_validator(mode="after")
    def validate_unique_enemy_types(self) -> "LevelBlueprint":
        """Roster entries must be merged by type."""
        seen: set[EnemyType] = set()
        for spawn in self.enemies:
            if spawn.type in seen:
                raise ValueError(
                    f"Enemy type {spawn.type.value} appears more than once; "
                    f"use merge_enemy_spawns() to combine counts"
                )
            seen.add(spawn.type)
        return self

    @property
    def total_enemies(self) -> int:
        """Total number of enemies across all roster entries."""
        return sum(spawn.count for spawn in self.enemies)

    def enemy_count(self, enemy: EnemyType) -> int:
        """Get the spawn count for one enemy type (0 if absent)."""
        for spawn in self.enemies:
            if spawn.type == enemy:
                return spawn.count
        return 0

    def enemy_counts(self) -> dict[EnemyType, int]:
        """Get the roster as a type -> count mapping."""
        return {spawn.type: spawn.count for spawn in self.enemies}

    def power_up_weights(self) -> Counter[PowerUpType]:
        """Relative spawn weight of each power-up (duplicates count extra)."""
        return Counter(self.power_ups)

    def to_json(self) -> str:
        """Serialize blueprint to JSON string."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> "LevelBlueprint":
        """Deserialize and validate a blueprint from a JSON string."""
        return cls.model_validate_json(json_str)

    def to_dict(self) -> dict:
        """Serialize blueprint to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")
