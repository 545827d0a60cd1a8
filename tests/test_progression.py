"""Unit tests for bombergen.progression module.

Tests cover:
- World and level-in-world arithmetic
- Boss/bonus cadence predicates
- Mechanic start points and unlock levels
- Power-up gating and its monotonicity
- Level unlocking via completion and world star gates
"""

from collections import Counter

import pytest

from bombergen.models.blueprint import WorldMechanic
from bombergen.models.entities import PowerUpType
from bombergen.progression import (
    gate_power_ups,
    is_bonus_level,
    is_boss_level,
    is_level_unlocked,
    is_power_up_unlocked,
    is_story_level,
    level_in_world,
    mechanic_start_in_world,
    mechanic_unlock_level,
    world_for_level,
    world_mechanic,
    world_stars_required,
)


class TestWorldArithmetic:
    """Tests for world_for_level() and level_in_world()."""

    @pytest.mark.parametrize(
        "level,world,position",
        [(1, 1, 1), (10, 1, 10), (11, 2, 1), (23, 3, 3), (42, 5, 2), (50, 5, 10)],
    )
    def test_story_levels(self, level, world, position):
        assert world_for_level(level) == world
        assert level_in_world(level) == position

    def test_out_of_range_uses_floor_division(self):
        """Levels outside the campaign still map to some world/position."""
        assert world_for_level(0) == 0
        assert level_in_world(0) == 10
        assert world_for_level(51) == 6
        assert level_in_world(51) == 1

    def test_is_story_level(self):
        assert is_story_level(1)
        assert is_story_level(50)
        assert not is_story_level(0)
        assert not is_story_level(51)


class TestCadence:
    """Tests for boss and bonus classification predicates."""

    def test_boss_levels(self):
        assert [n for n in range(1, 51) if is_boss_level(n)] == [10, 20, 30, 40, 50]

    def test_bonus_levels(self):
        assert [n for n in range(1, 51) if is_bonus_level(n)] == [5, 15, 25, 35, 45]

    def test_boss_and_bonus_never_overlap(self):
        for n in range(-20, 120):
            assert not (is_boss_level(n) and is_bonus_level(n))


class TestMechanics:
    """Tests for world mechanics and their unlock levels."""

    def test_world_mechanics(self):
        assert world_mechanic(1) == WorldMechanic.NONE
        assert world_mechanic(2) == WorldMechanic.ICE
        assert world_mechanic(3) == WorldMechanic.CONVEYOR
        assert world_mechanic(4) == WorldMechanic.TELEPORTER
        assert world_mechanic(5) == WorldMechanic.LAVA_CRACK

    def test_unknown_world_has_no_mechanic(self):
        assert world_mechanic(0) == WorldMechanic.NONE
        assert world_mechanic(9) == WorldMechanic.NONE

    def test_mechanic_start_in_world(self):
        assert mechanic_start_in_world(1) is None
        assert mechanic_start_in_world(2) == 3
        assert mechanic_start_in_world(5) == 2

    @pytest.mark.parametrize(
        "mechanic,level",
        [
            (WorldMechanic.NONE, 1),
            (WorldMechanic.ICE, 13),
            (WorldMechanic.CONVEYOR, 23),
            (WorldMechanic.TELEPORTER, 33),
            (WorldMechanic.LAVA_CRACK, 42),
        ],
    )
    def test_mechanic_unlock_level(self, mechanic, level):
        assert mechanic_unlock_level(mechanic) == level


class TestGatePowerUps:
    """Tests for gate_power_ups()."""

    ROSTER = (
        PowerUpType.BOMB_UP,
        PowerUpType.FIRE,
        PowerUpType.KICK,
        PowerUpType.MYSTERY,
        PowerUpType.SKULL,
        PowerUpType.POWER_BOMB,
    )

    def test_none_disables_gating(self):
        assert gate_power_ups(self.ROSTER, 3, None) == self.ROSTER

    def test_new_player_keeps_starter_power_ups(self):
        """Level 3 with only level 1 completed keeps Bomb Up and Fire."""
        gated = gate_power_ups((PowerUpType.BOMB_UP, PowerUpType.FIRE), 3, 1)
        assert gated == (PowerUpType.BOMB_UP, PowerUpType.FIRE)

    def test_level_may_offer_what_it_introduces(self):
        """Threshold is max(highest_completed, level)."""
        gated = gate_power_ups(self.ROSTER, 15, 0)
        assert gated == (
            PowerUpType.BOMB_UP,
            PowerUpType.FIRE,
            PowerUpType.KICK,
            PowerUpType.MYSTERY,
        )

    def test_progress_beyond_level_widens_set(self):
        gated = gate_power_ups(self.ROSTER, 15, 40)
        assert gated == self.ROSTER

    def test_duplicates_and_order_preserved(self):
        roster = (PowerUpType.FIRE, PowerUpType.SKULL, PowerUpType.FIRE)
        assert gate_power_ups(roster, 5, 5) == (PowerUpType.FIRE, PowerUpType.FIRE)

    def test_monotonic_in_highest_completed(self):
        """Raising highest_completed never removes a power-up."""
        for level in (1, 7, 15, 22):
            previous = Counter(gate_power_ups(self.ROSTER, level, 0))
            for highest in range(1, 51):
                current = Counter(gate_power_ups(self.ROSTER, level, highest))
                assert not previous - current
                previous = current

    def test_is_power_up_unlocked(self):
        assert is_power_up_unlocked(PowerUpType.FIRE, 0)
        assert not is_power_up_unlocked(PowerUpType.KICK, 9)
        assert is_power_up_unlocked(PowerUpType.KICK, 10)


class TestLevelUnlocking:
    """Tests for world star gates and is_level_unlocked()."""

    @pytest.mark.parametrize(
        "level,stars",
        [(1, 0), (10, 0), (11, 10), (21, 25), (31, 45), (41, 70), (50, 70)],
    )
    def test_world_stars_required(self, level, stars):
        assert world_stars_required(level) == stars

    def test_level_one_always_open(self):
        assert is_level_unlocked(1, 0, 0)

    def test_previous_level_must_be_completed(self):
        assert is_level_unlocked(5, 4, 0)
        assert not is_level_unlocked(6, 4, 0)

    def test_star_gate_blocks_world_entry(self):
        assert not is_level_unlocked(21, 20, 24)
        assert is_level_unlocked(21, 20, 25)

    def test_out_of_campaign_levels_are_locked(self):
        assert not is_level_unlocked(0, 50, 150)
        assert not is_level_unlocked(51, 50, 150)
