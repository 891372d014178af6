"""Tests for the command line player and display helpers."""

import cv2
import matplotlib
import pytest

matplotlib.use("Agg")

from engine import RUNNER
from play_puzzle import main, parse_moves
from visualization import save_comparison


@pytest.fixture
def image_file(tmp_path, gradient_image):
    path = tmp_path / "photo.png"
    cv2.imwrite(str(path), gradient_image)
    return path


def test_parse_moves():
    assert parse_moves("U, l,Right,,x") == ["Up", "Left", "Right", "x"]
    assert parse_moves(None) == []


def test_moves_and_output(tmp_path, image_file):
    out = tmp_path / "board.png"
    session = main([str(image_file), "--grid", "2", "--moves", "U,L,x",
                    "--output", str(out), "--quiet", "--no-display"])
    assert session.grid.cells == (RUNNER, 0, 2, 1)
    assert session.grid.runner_index == 0
    assert out.exists()


def test_shuffle_with_seed_is_repeatable(image_file):
    args = [str(image_file), "--grid", "4", "--shuffle", "--seed", "3", "--quiet", "--no-display"]
    assert main(args).grid == main(args).grid


def test_verbose_reports_moves(image_file, capsys):
    main([str(image_file), "--grid", "3", "--moves", "D,U", "--no-display"])
    out = capsys.readouterr().out
    assert "Down: blocked by edge" in out
    assert "Up: swapped cells (5, 8)" in out
    assert "Solved: False" in out


def test_missing_image_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.png"), "--no-display"])
    assert excinfo.value.code == 1


def test_save_comparison(tmp_path, image_file):
    session = main([str(image_file), "--grid", "2", "--quiet", "--no-display"])
    out = tmp_path / "cmp" / "comparison.png"
    save_comparison(session.image, session.render(), str(out), solved=session.is_solved())
    assert out.exists()


def test_parse_moves_accepts_names_in_any_case():
    assert parse_moves("left,UP,rIgHt,down,ArrowUp") == ["Left", "Up", "Right", "Down", "ArrowUp"]


def test_lowercase_names_move_the_runner(image_file):
    session = main([str(image_file), "--grid", "2", "--moves", "up,left",
                    "--quiet", "--no-display"])
    assert session.grid.cells == (RUNNER, 0, 2, 1)


def test_display_tiles_draws_every_tile(image_file):
    import matplotlib.pyplot as plt
    from visualization import display_tiles

    session = main([str(image_file), "--grid", "3", "--quiet", "--no-display"])
    plt.close('all')
    display_tiles(session.tiles, session.size)
    axes = plt.gcf().axes
    assert len(axes) == 9
    assert [ax.get_title() for ax in axes[:3]] == ["Tile 0", "Tile 1", "Tile 2"]
    plt.close('all')


def test_tiles_flag_shows_tiles(image_file, monkeypatch):
    import visualization

    shown = []
    monkeypatch.setattr(visualization, "display_comparison", lambda *a, **k: None)
    monkeypatch.setattr(visualization, "display_tiles", lambda tiles, size: shown.append((len(tiles), size)))
    main([str(image_file), "--grid", "3", "--tiles", "--quiet"])
    assert shown == [(9, 3)]
