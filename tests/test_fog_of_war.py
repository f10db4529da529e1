import math

import pytest

from fogmaze import visible_set
from fogmaze.exceptions import InvalidDimensionsError, InvalidPositionError
from fogmaze.fov.visibility import euclidean_distance, is_visible


def test_fog_disabled_shows_whole_grid():
    visible = visible_set((0, 0), 1, False, 5, 5)
    assert len(visible) == 25
    assert visible == {(x, y) for y in range(5) for x in range(5)}


def test_fog_disabled_ignores_radius_and_player():
    assert visible_set((4, 4), 3, False, 5, 5) == visible_set((2, 1), 10, False, 5, 5)


def test_radius_zero_sees_only_player():
    assert visible_set((2, 3), 0, True, 5, 5) == {(2, 3)}


def test_radius_one_is_a_plus_shape():
    assert visible_set((2, 2), 1, True, 5, 5) == {(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)}


def test_radius_two_is_a_disc():
    visible = visible_set((2, 2), 2, True, 5, 5)
    assert len(visible) == 13
    assert (4, 2) in visible
    assert (4, 3) not in visible  # sqrt(5) > 2


def test_visibility_is_clipped_to_grid():
    assert visible_set((0, 0), 1, True, 5, 5) == {(0, 0), (1, 0), (0, 1)}


def test_every_visible_cell_is_within_radius():
    player = (6, 3)
    for (x, y) in visible_set(player, 4, True, 12, 9):
        assert math.hypot(x - player[0], y - player[1]) <= 4


def test_increasing_radius_never_shrinks_view():
    previous = set()
    for radius in range(0, 12):
        current = visible_set((3, 7), radius, True, 10, 10)
        assert previous <= current
        previous = current
    assert len(previous) == 100


def test_is_visible_matches_visible_set():
    player = (4, 1)
    visible = visible_set(player, 3, True, 9, 6)
    for y in range(6):
        for x in range(9):
            assert is_visible(x, y, player, 3, True) == ((x, y) in visible)
    assert is_visible(8, 5, player, 3, False)


def test_euclidean_distance():
    assert euclidean_distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_invalid_parameters():
    with pytest.raises(ValueError):
        visible_set((0, 0), -1, True, 3, 3)
    with pytest.raises(InvalidPositionError):
        visible_set((3, 0), 2, True, 3, 3)
    with pytest.raises(InvalidDimensionsError):
        visible_set((0, 0), 2, True, 0, 3)
