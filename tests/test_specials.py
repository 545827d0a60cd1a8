"""Tests for boss and bonus levels (bombergen.generation.specials)."""

import pytest

from bombergen.generation.specials import (
    BONUS_VARIANTS,
    generate_bonus_level,
    generate_boss_level,
    get_bonus_type,
    get_bonus_variant,
    get_boss_power_ups,
    get_boss_roster,
)
from bombergen.models.blueprint import LayoutArchetype, WorldMechanic
from bombergen.models.entities import EnemyType, PowerUpType


def roster(spawns) -> dict:
    return {spawn.type: spawn.count for spawn in spawns}


class TestBossLevels:
    """Tests for boss blueprints."""

    @pytest.mark.parametrize(
        "world,expected",
        [
            (1, {EnemyType.ONIL: 3, EnemyType.DOLL: 2}),
            (2, {EnemyType.DOLL: 2, EnemyType.MINVO: 3, EnemyType.KONDORIA: 1}),
            (3, {EnemyType.MINVO: 2, EnemyType.KONDORIA: 2, EnemyType.OVAPI: 2}),
            (4, {EnemyType.OVAPI: 2, EnemyType.PASS: 3, EnemyType.PONTAN: 1}),
            (5, {EnemyType.KONDORIA: 2, EnemyType.PASS: 3, EnemyType.PONTAN: 3}),
        ],
    )
    def test_curated_rosters(self, world, expected):
        assert roster(get_boss_roster(world)) == expected

    def test_unknown_world_roster(self):
        assert roster(get_boss_roster(0)) == {EnemyType.BALLOM: 3}

    def test_power_ups_grow_with_world(self):
        base = (PowerUpType.BOMB_UP, PowerUpType.FIRE, PowerUpType.SPEED)
        assert get_boss_power_ups(1) == base
        assert get_boss_power_ups(2) == base
        assert get_boss_power_ups(3) == base + (PowerUpType.KICK,)
        assert get_boss_power_ups(5) == base + (PowerUpType.KICK, PowerUpType.DETONATOR)

    def test_level_10(self):
        blueprint = generate_boss_level(10)
        assert blueprint.is_boss_level
        assert not blueprint.is_bonus_level
        assert blueprint.name == "Boss - World 1"
        assert blueprint.world == 1
        assert blueprint.time_limit_seconds == 240
        assert blueprint.block_density == pytest.approx(0.25)
        assert blueprint.layout == LayoutArchetype.BOSS_ARENA
        assert blueprint.mechanic == WorldMechanic.NONE
        assert blueprint.music_track == "boss"
        assert blueprint.seed == 123450
        assert roster(blueprint.enemies) == {EnemyType.ONIL: 3, EnemyType.DOLL: 2}

    @pytest.mark.parametrize(
        "level,mechanic",
        [
            (20, WorldMechanic.ICE),
            (30, WorldMechanic.CONVEYOR),
            (40, WorldMechanic.TELEPORTER),
            (50, WorldMechanic.LAVA_CRACK),
        ],
    )
    def test_boss_always_uses_world_mechanic(self, level, mechanic):
        assert generate_boss_level(level).mechanic == mechanic

    def test_boss_gating_uses_own_level(self):
        """Detonator unlocks at 25, so the level 40 boss offers it to anyone who reaches it."""
        blueprint = generate_boss_level(40, highest_completed=0)
        assert PowerUpType.DETONATOR in blueprint.power_ups
        assert PowerUpType.KICK in blueprint.power_ups


class TestBonusLevels:
    """Tests for bonus variants and blueprints."""

    @pytest.mark.parametrize(
        "level,index",
        [(5, 1), (15, 3), (20, 0), (25, 1), (30, 2), (35, 3), (45, 1)],
    )
    def test_round_robin(self, level, index):
        assert get_bonus_type(level) == index
        assert get_bonus_variant(level) is BONUS_VARIANTS[index]

    def test_variant_titles(self):
        assert [v.title for v in BONUS_VARIANTS] == [
            "Coin Rush",
            "Speed Run",
            "Demolition",
            "Mystery",
        ]

    def test_speed_run(self):
        blueprint = generate_bonus_level(5)
        assert blueprint.name == "Bonus: Speed Run"
        assert blueprint.is_bonus_level
        assert not blueprint.is_boss_level
        assert blueprint.time_limit_seconds == 30
        assert blueprint.block_density == pytest.approx(0.15)
        assert blueprint.layout == LayoutArchetype.CROSS
        assert blueprint.mechanic == WorldMechanic.NONE
        assert blueprint.power_ups == (PowerUpType.SPEED, PowerUpType.SPEED)
        assert roster(blueprint.enemies) == {EnemyType.BALLOM: 2}
        assert blueprint.seed == 5 * 12345

    def test_mystery_ungated(self):
        blueprint = generate_bonus_level(15)
        assert blueprint.name == "Bonus: Mystery"
        assert blueprint.time_limit_seconds == 45
        assert blueprint.layout == LayoutArchetype.SPIRAL
        assert blueprint.power_ups.count(PowerUpType.MYSTERY) == 3
        assert PowerUpType.SKULL in blueprint.power_ups

    def test_mystery_gated_drops_skull(self):
        """Skull unlocks at 20; Mystery unlocks at 15 and is offered by level 15 itself."""
        blueprint = generate_bonus_level(15, highest_completed=1)
        assert blueprint.power_ups == (PowerUpType.MYSTERY,) * 3

    def test_coin_rush_and_demolition(self):
        coin_rush = generate_bonus_level(20)
        assert coin_rush.layout == LayoutArchetype.ARENA
        assert roster(coin_rush.enemies) == {EnemyType.BALLOM: 6}
        assert len(coin_rush.power_ups) == 7

        demolition = generate_bonus_level(30)
        assert demolition.block_density == pytest.approx(0.7)
        assert roster(demolition.enemies) == {EnemyType.BALLOM: 3, EnemyType.ONIL: 1}
        assert PowerUpType.KICK in demolition.power_ups

    def test_bonus_music_follows_world(self):
        assert generate_bonus_level(35).music_track == "gameplay"
        assert generate_bonus_level(45).music_track == "boss"
