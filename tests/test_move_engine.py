"""Tests for directional moves."""

import pytest

from engine import Direction, GridModel, MoveEngine, RUNNER, parse_direction


def engine_with_runner_at(size, index):
    grid = GridModel.create(size)
    grid.swap(index, grid.runner_index)
    return MoveEngine(grid)


def test_up_from_solved_2x2():
    engine = MoveEngine(GridModel.create(2, 4))
    result = engine.apply_move(Direction.UP)
    assert result.swapped
    assert set(result.cells) == {1, 3}
    assert engine.grid.cells == (0, RUNNER, 2, 1)
    assert engine.grid.runner_index == 1


@pytest.mark.parametrize("direction, expected_target", [
    (Direction.LEFT, 3),
    (Direction.UP, 1),
    (Direction.RIGHT, 5),
    (Direction.DOWN, 7),
])
def test_targets_from_center(direction, expected_target):
    engine = engine_with_runner_at(3, 4)
    result = engine.apply_move(direction)
    assert result.swapped
    assert result.cells == (expected_target, 4)
    assert engine.grid.runner_index == expected_target


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_edge_clamp(size):
    for index in range(size * size):
        for direction in Direction:
            engine = engine_with_runner_at(size, index)
            before = engine.grid.cells
            row, col = divmod(index, size)
            at_edge = {
                Direction.LEFT: col == 0,
                Direction.UP: row == 0,
                Direction.RIGHT: col == size - 1,
                Direction.DOWN: row == size - 1,
            }[direction]

            result = engine.apply_move(direction)

            assert result.recognized
            assert result.swapped is not at_edge
            if at_edge:
                assert engine.grid.cells == before
                assert engine.grid.runner_index == index
                assert result.cells is None


def test_no_wrap_around_from_row_end():
    # Runner at the end of the first row must not jump to the next row
    engine = engine_with_runner_at(3, 2)
    assert not engine.apply_move(Direction.RIGHT).swapped
    assert engine.grid.runner_index == 2


def test_left_then_right_restores_cells(engine_3x3):
    start = engine_3x3.grid.cells
    assert engine_3x3.apply_move(Direction.LEFT).swapped
    assert engine_3x3.grid.cells != start
    assert engine_3x3.apply_move(Direction.RIGHT).swapped
    assert engine_3x3.grid.cells == start


@pytest.mark.parametrize("value", ["Left", "LEFT", "ArrowLeft", Direction.LEFT])
def test_parse_direction_aliases(value):
    assert parse_direction(value) is Direction.LEFT


@pytest.mark.parametrize("value", ["a", "Escape", "", None, 37, "arrowleft"])
def test_unrecognized_input_is_noop(engine_3x3, value):
    before = engine_3x3.grid.snapshot()
    result = engine_3x3.apply_move(value)
    assert not result.recognized
    assert not result.swapped
    assert result.direction is None
    assert engine_3x3.grid.snapshot() == before


def test_key_names_drive_moves(engine_3x3):
    engine_3x3.apply_moves(["ArrowUp", "ArrowLeft"])
    assert engine_3x3.grid.runner_index == 4


def test_listeners_see_only_swaps(engine_3x3):
    seen = []
    engine_3x3.add_listener(seen.append)

    engine_3x3.apply_move(Direction.RIGHT)  # edge
    engine_3x3.apply_move("Space")
    engine_3x3.apply_move(Direction.UP)

    assert len(seen) == 1
    assert seen[0].direction is Direction.UP
    assert seen[0].cells == (5, 8)

    engine_3x3.remove_listener(seen.append)
    engine_3x3.apply_move(Direction.DOWN)
    assert len(seen) == 1


def test_can_move(engine_3x3):
    assert engine_3x3.can_move(Direction.LEFT)
    assert engine_3x3.can_move("ArrowUp")
    assert not engine_3x3.can_move(Direction.DOWN)
    assert not engine_3x3.can_move("Enter")


def test_opposites():
    for direction in Direction:
        assert direction.opposite.opposite is direction
        assert direction.opposite is not direction
