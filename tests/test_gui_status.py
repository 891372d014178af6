"""Tests for the status bar updates after player moves."""

import pytest

pytest.importorskip("tkinter")
pytest.importorskip("PIL.ImageTk")

from engine import Direction, GridModel, MoveEngine
from puzzle_gui import move_status


def test_solved_move_reports_solved():
    engine = MoveEngine(GridModel.create(2))
    engine.apply_move(Direction.LEFT)
    result = engine.apply_move(Direction.RIGHT)
    assert move_status(result, solved=True, was_solved=False) == ("✅ Puzzle Solved!", 'success')


def test_leaving_solved_state_resets_status():
    engine = MoveEngine(GridModel.create(2))
    result = engine.apply_move(Direction.LEFT)
    assert result.swapped
    message, color = move_status(result, solved=False, was_solved=True)
    assert "Solved" not in message
    assert color == 'text'


def test_unsolved_move_leaves_status():
    engine = MoveEngine(GridModel.create(3))
    result = engine.apply_move(Direction.UP)
    assert move_status(result, solved=False, was_solved=False) is None


def test_blocked_move_leaves_status():
    engine = MoveEngine(GridModel.create(3))
    result = engine.apply_move(Direction.DOWN)
    assert not result.swapped
    assert move_status(result, solved=True, was_solved=True) is None
