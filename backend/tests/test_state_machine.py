"""
Tests for GameStateMachine - the per-tick transition logic.
"""

import os
import random
import sys
import threading

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain import INITIAL_SNAKE, STILL, UP, DOWN, LEFT, RIGHT  # noqa: E402
from gridsnake.engine import FoodPlacer, GameStateMachine  # noqa: E402
from helpers import QueuedFoodPlacer  # noqa: E402

FAR_FOOD = (0, 19)


def make_machine(foods=(FAR_FOOD,), **kwargs):
    return GameStateMachine(food_placer=QueuedFoodPlacer(foods), **kwargs)


class TestInitialState:
    def test_starts_with_default_layout(self):
        machine = make_machine()
        state = machine.state
        assert state.snake == INITIAL_SNAKE
        assert state.direction == STILL
        assert state.score == 0
        assert state.speed == 200
        assert state.tile_count == 20
        assert state.food == FAR_FOOD

    def test_initial_food_avoids_snake(self):
        for seed in range(20):
            machine = GameStateMachine(food_placer=FoodPlacer(random.Random(seed)))
            assert machine.state.food not in machine.state.snake

    def test_board_too_small_for_initial_snake(self):
        with pytest.raises(ValueError):
            GameStateMachine(tile_count=10)

    def test_initial_snake_must_leave_room_for_food(self):
        with pytest.raises(ValueError):
            GameStateMachine(tile_count=1, initial_snake=[(0, 0)])

    def test_non_positive_speed_rejected(self):
        with pytest.raises(ValueError):
            GameStateMachine(initial_speed=0)


class TestStep:
    def test_idle_until_a_direction_is_set(self):
        machine = make_machine()
        before = machine.state
        result = machine.step()
        assert result.event == "idle"
        assert result.state == before

    def test_move_translates_snake(self):
        machine = make_machine()
        machine.set_direction(1, 0)
        result = machine.step()
        assert result.event == "moved"
        assert result.state.snake == ((11, 10), (10, 10), (9, 10))
        assert result.speed_changed is False

    def test_move_keeps_length(self):
        machine = make_machine()
        machine.set_direction(0, 1)
        for _ in range(5):
            before = len(machine.state.snake)
            result = machine.step()
            assert result.event == "moved"
            assert len(result.state.snake) == before

    def test_eating_grows_and_scores(self):
        machine = make_machine(foods=[(11, 10), FAR_FOOD])
        machine.set_direction(1, 0)
        result = machine.step()
        assert result.event == "ate"
        assert result.state.snake == ((11, 10), (10, 10), (9, 10), (8, 10))
        assert result.state.score == 10
        assert result.state.food == FAR_FOOD
        assert result.speed_changed is False
        assert result.new_interval is None

    def test_fifth_food_speeds_up(self):
        foods = [(11, 10), (12, 10), (13, 10), (14, 10), (15, 10), FAR_FOOD]
        machine = make_machine(foods=foods)
        machine.set_direction(1, 0)
        results = [machine.step() for _ in range(5)]
        assert [r.event for r in results] == ["ate"] * 5
        assert [r.speed_changed for r in results] == [False] * 4 + [True]
        assert results[-1].new_interval == 180
        assert results[-1].state.score == 50
        assert len(results[-1].state.snake) == 8

    def test_snapshots_are_independent(self):
        machine = make_machine()
        machine.set_direction(1, 0)
        first = machine.step().state
        second = machine.step().state
        assert first.head == (11, 10)
        assert second.head == (12, 10)


class TestReset:
    def test_wall_hit_resets_session(self):
        machine = make_machine(initial_snake=[(0, 5), (1, 5), (2, 5)])
        machine.set_direction(-1, 0)
        result = machine.step()
        assert result.event == "reset"
        assert result.reason == "wall"
        assert result.state.snake == ((0, 5), (1, 5), (2, 5))
        assert result.state.direction == STILL

    def test_driving_off_the_top_resets_to_defaults(self):
        placer = QueuedFoodPlacer([FAR_FOOD])
        machine = GameStateMachine(food_placer=placer)
        machine.set_direction(0, -1)
        for _ in range(10):
            assert machine.step().event == "moved"
        assert machine.state.head == (10, 0)

        result = machine.step()
        assert result.event == "reset"
        assert result.reason == "wall"
        assert result.state.snake == INITIAL_SNAKE
        assert len(result.state.snake) == 3
        assert result.state.score == 0
        assert result.state.speed == 200
        assert result.state.direction == STILL
        # Initial placement plus the one made by the reset
        assert placer.calls == 2

    def test_self_collision_resets(self):
        machine = make_machine(initial_snake=[(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)])
        machine.set_direction(0, 1)
        result = machine.step()
        assert result.event == "reset"
        assert result.reason == "self"

    def test_moving_into_current_tail_is_fatal(self):
        machine = make_machine(initial_snake=[(5, 5), (6, 5), (6, 6), (5, 6)])
        machine.set_direction(0, 1)
        assert machine.step().reason == "self"

    def test_reversing_from_rest_into_body_resets(self):
        machine = make_machine()
        assert machine.set_direction(-1, 0) is True
        result = machine.step()
        assert result.event == "reset"
        assert result.reason == "self"

    def test_reset_after_speed_up_reports_interval_change(self):
        foods = [(11, 10), (12, 10), (13, 10), (14, 10), (15, 10), FAR_FOOD]
        machine = make_machine(foods=foods)
        machine.set_direction(1, 0)
        for _ in range(5):
            machine.step()
        assert machine.speed == 180

        result = machine.reset()
        assert result.event == "reset"
        assert result.reason == "manual"
        assert result.speed_changed is True
        assert result.new_interval == 200
        assert result.state.speed == 200

    def test_manual_reset_at_default_speed_keeps_interval(self):
        result = make_machine().reset()
        assert result.speed_changed is False
        assert result.new_interval is None

    def test_full_board_resets_instead_of_looping(self):
        machine = GameStateMachine(
            tile_count=2,
            initial_snake=[(0, 0), (1, 0), (1, 1)],
            food_placer=FoodPlacer(random.Random(0)),
        )
        assert machine.state.food == (0, 1)
        machine.set_direction(0, 1)
        result = machine.step()
        assert result.event == "reset"
        assert result.reason == "board_full"
        assert result.state.snake == ((0, 0), (1, 0), (1, 1))
        assert result.state.score == 0


class TestDirectionInput:
    def test_reversal_is_rejected(self):
        machine = make_machine()
        assert machine.set_direction(1, 0) is True
        assert machine.set_direction(-1, 0) is False
        assert machine.direction == RIGHT

    def test_turn_is_accepted(self):
        machine = make_machine()
        machine.set_direction(1, 0)
        machine.step()
        assert machine.set_direction(0, -1) is True
        assert machine.direction == UP

    def test_two_presses_cannot_reverse_within_a_tick(self):
        machine = make_machine()
        machine.set_direction(1, 0)
        machine.step()
        assert machine.set_direction(0, 1) is True
        assert machine.set_direction(-1, 0) is False
        assert machine.direction == DOWN
        assert machine.step().event == "moved"

    @pytest.mark.parametrize("dx,dy", [(1, 1), (2, 0), (0, 5), ("x", 0)])
    def test_illegal_vectors_are_ignored(self, dx, dy):
        machine = make_machine()
        machine.set_direction(1, 0)
        assert machine.set_direction(dx, dy) is False
        assert machine.direction == RIGHT

    def test_still_stops_the_snake(self):
        machine = make_machine()
        machine.set_direction(1, 0)
        machine.step()
        assert machine.set_direction(0, 0) is True
        assert machine.step().event == "idle"

    def test_concurrent_input_never_corrupts_state(self):
        machine = GameStateMachine(food_placer=FoodPlacer(random.Random(5)))
        machine.set_direction(1, 0)
        stop = threading.Event()

        def press_keys():
            keys = [(0, -1), (1, 0), (0, 1), (-1, 0)]
            i = 0
            while not stop.is_set():
                machine.set_direction(*keys[i % 4])
                i += 1

        worker = threading.Thread(target=press_keys)
        worker.start()
        try:
            for _ in range(300):
                state = machine.step().state
                assert len(set(state.snake)) == len(state.snake)
                assert state.food not in state.snake
        finally:
            stop.set()
            worker.join()
