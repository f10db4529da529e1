import pytest

from fogmaze import Direction, attempt_move
from fogmaze.core.random import RandomSource
from fogmaze.exceptions import InvalidDirectionError, InvalidPositionError
from fogmaze.maze.factory import MazeFactory
from fogmaze.navigation.engine import MoveResult, coerce_direction

from maze_test_utils import solve


def test_move_through_open_wall(corridor):
    result = attempt_move(corridor, (0, 0), (2, 0), Direction.RIGHT)
    assert result == MoveResult(new_pos=(1, 0), moved=True, finished=False)


def test_bump_into_closed_wall_keeps_position(corridor):
    result = attempt_move(corridor, (1, 0), (2, 0), Direction.RIGHT)
    assert result.new_pos == (1, 0)
    assert result.moved is False
    assert result.finished is False


def test_bump_into_top_wall(corridor):
    assert corridor.cell(0, 0).top is True
    result = attempt_move(corridor, (0, 0), (1, 0), Direction.UP)
    assert result == MoveResult(new_pos=(0, 0), moved=False, finished=False)


def test_reaching_goal_finishes(corridor):
    result = attempt_move(corridor, (0, 0), (1, 0), Direction.RIGHT)
    assert result.moved is True
    assert result.finished is True


def test_bump_while_standing_on_goal_is_not_finished(corridor):
    result = attempt_move(corridor, (1, 0), (1, 0), Direction.RIGHT)
    assert result.moved is False
    assert result.finished is False


def test_direction_names_are_accepted(corridor):
    assert attempt_move(corridor, (1, 0), (2, 0), "left").new_pos == (0, 0)
    assert coerce_direction("Down") is Direction.DOWN


@pytest.mark.parametrize("bad", ["north", "", None, 3, (1, 0)])
def test_invalid_direction_raises(corridor, bad):
    with pytest.raises(InvalidDirectionError):
        attempt_move(corridor, (0, 0), (2, 0), bad)


@pytest.mark.parametrize("pos", [(-1, 0), (3, 0), (0, 1)])
def test_out_of_range_player_raises(corridor, pos):
    with pytest.raises(InvalidPositionError):
        attempt_move(corridor, pos, (2, 0), Direction.RIGHT)


def test_out_of_range_goal_raises(corridor):
    with pytest.raises(IndexError):
        attempt_move(corridor, (0, 0), (5, 5), Direction.RIGHT)


@pytest.mark.parametrize("algorithm", ["backtracker", "prims", "division"])
def test_moves_follow_walls_everywhere(algorithm):
    grid = MazeFactory().generate(6, 5, rng=RandomSource(7), algorithm=algorithm)
    goal = (5, 4)
    for pos in grid.positions():
        for d in Direction:
            result = attempt_move(grid, pos, goal, d)
            if grid.has_wall(pos, d):
                assert result.new_pos == pos and not result.moved
            else:
                dx, dy = d.delta
                assert result.new_pos == (pos.x + dx, pos.y + dy)
                assert result.moved
            assert result.finished == (result.moved and result.new_pos == goal)


@pytest.mark.parametrize("seed", range(3))
def test_walking_the_solution_reaches_goal(seed):
    grid = MazeFactory().generate(10, 8, rng=RandomSource(seed))
    goal = (9, 7)
    path = solve(grid, (0, 0), goal)
    assert path is not None

    pos = (0, 0)
    for i, d in enumerate(path):
        result = attempt_move(grid, pos, goal, d)
        assert result.moved
        assert result.finished == (i == len(path) - 1)
        pos = result.new_pos
    assert pos == goal
