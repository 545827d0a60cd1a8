"""Unit tests for bombergen.models.entities module.

Tests cover:
- Enemy metadata accessors and their defaults
- Power-up unlock levels, durations, permanence and localization keys
"""

import json

import pytest

from bombergen.models.entities import (
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


class TestEnemyMetadata:
    """Tests for enemy accessor functions."""

    def test_every_enemy_has_metadata(self):
        """All enemy types have speed, intelligence and points entries."""
        for enemy in EnemyType:
            assert get_enemy_speed(enemy) > 0
            assert isinstance(get_enemy_intelligence(enemy), EnemyIntelligence)
            assert get_enemy_points(enemy) >= 100

    def test_points_grow_with_roster_order(self):
        points = [get_enemy_points(enemy) for enemy in EnemyType]
        assert points == sorted(points)

    @pytest.mark.parametrize(
        "enemy,expected",
        [
            (EnemyType.BALLOM, False),
            (EnemyType.PASS, False),
            (EnemyType.KONDORIA, True),
            (EnemyType.OVAPI, True),
            (EnemyType.PONTAN, True),
        ],
    )
    def test_wall_passing(self, enemy, expected):
        assert can_pass_walls(enemy) is expected

    def test_pontan_is_fastest(self):
        assert get_enemy_speed(EnemyType.PONTAN) == max(get_enemy_speed(e) for e in EnemyType)

    def test_enemy_type_serializes_as_string(self):
        """EnemyType inherits from str, so values compare equal to strings."""
        assert EnemyType.KONDORIA == "kondoria"

    def test_intelligence_serializes_as_string(self):
        assert json.dumps({"ai": get_enemy_intelligence(EnemyType.PASS)}) == '{"ai": "high"}'


class TestPowerUpMetadata:
    """Tests for power-up accessor functions."""

    def test_every_power_up_has_unlock_level(self):
        assert set(POWER_UP_UNLOCK_LEVELS) == set(PowerUpType)

    @pytest.mark.parametrize(
        "power_up,level",
        [
            (PowerUpType.BOMB_UP, 1),
            (PowerUpType.FIRE, 1),
            (PowerUpType.SPEED, 1),
            (PowerUpType.KICK, 10),
            (PowerUpType.MYSTERY, 15),
            (PowerUpType.SKULL, 20),
            (PowerUpType.WALLPASS, 20),
            (PowerUpType.DETONATOR, 25),
            (PowerUpType.BOMBPASS, 25),
            (PowerUpType.LINE_BOMB, 30),
            (PowerUpType.FLAMEPASS, 35),
            (PowerUpType.POWER_BOMB, 40),
        ],
    )
    def test_unlock_levels(self, power_up, level):
        assert get_unlock_level(power_up) == level

    def test_temporary_power_ups_have_durations(self):
        assert is_temporary(PowerUpType.MYSTERY)
        assert is_temporary(PowerUpType.SKULL)
        assert get_power_up_duration(PowerUpType.MYSTERY) == pytest.approx(35.0)
        assert get_power_up_duration(PowerUpType.SKULL) == pytest.approx(10.0)

    def test_non_temporary_duration_is_zero(self):
        assert not is_temporary(PowerUpType.FIRE)
        assert get_power_up_duration(PowerUpType.FIRE) == 0.0

    def test_permanent_power_ups(self):
        """Only Bomb Up and Fire survive the player's death."""
        assert is_permanent(PowerUpType.BOMB_UP)
        assert is_permanent(PowerUpType.FIRE)
        assert not is_permanent(PowerUpType.SPEED)

    def test_skull_is_the_only_negative_power_up(self):
        assert [p for p in PowerUpType if is_negative(p)] == [PowerUpType.SKULL]
        assert get_power_up_points(PowerUpType.SKULL) == 0

    @pytest.mark.parametrize(
        "power_up,key",
        [
            (PowerUpType.BOMB_UP, "PowerUp_BombUp"),
            (PowerUpType.LINE_BOMB, "PowerUp_LineBomb"),
            (PowerUpType.WALLPASS, "PowerUp_Wallpass"),
        ],
    )
    def test_name_keys(self, power_up, key):
        assert get_name_key(power_up) == key
