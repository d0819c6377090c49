"""Engine facade: move recording, computer moves, outcome detection, configuration."""

import argparse

import pytest

from Gobang_AI.Board import AI, HUMAN, BLACK
from Gobang_AI.GobangEngine import GobangEngine, ONGOING, AI_WON, HUMAN_WON, DRAW
from Gobang_AI.utils import config as config_mod
from Gobang_AI.utils.config import EngineConfig


def quiet_engine(depth=2, ai_black=False, seed=1):
    return GobangEngine(EngineConfig(depth=depth, ai_black=ai_black, seed=seed), logger=None)


def adjacent_to_any(cell, stones):
    r, c = cell
    return any(max(abs(r - sr), abs(c - sc)) == 1 for sr, sc in stones)


def test_end_to_end_opening_scenario():
    engine = quiet_engine(depth=2, ai_black=True)
    assert engine.opening_move() == (7, 7)
    engine.record_human_move((7, 8))
    before = set(engine.board.occupied)

    mv = engine.compute_computer_move()

    assert mv not in {(7, 7), (7, 8)}
    assert adjacent_to_any(mv, before)
    assert engine.board.steps[AI] == [(7, 7), mv]
    assert engine.board.history == [(7, 7), (7, 8), mv]
    assert engine.board.color_of(AI) == BLACK


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_computer_move_is_legal_for_each_depth(depth):
    engine = quiet_engine(depth=depth)
    engine.record_human_move((7, 7))
    mv = engine.compute_computer_move()
    assert mv != (7, 7)
    assert adjacent_to_any(mv, {(7, 7)})
    assert engine.board.last_move == mv


def test_is_game_over_tracks_outcome():
    engine = quiet_engine()
    assert engine.is_game_over() is False
    assert engine.state == ONGOING

    for c in range(4):
        engine.record_human_move((3, c))
        engine.record_computer_move((10, c))
    assert engine.is_game_over() is False
    assert engine.state == ONGOING

    engine.record_human_move((3, 4))
    assert engine.is_game_over() is True
    assert engine.state == HUMAN_WON


def test_is_game_over_reports_computer_win():
    engine = quiet_engine()
    for r in range(5):
        engine.record_computer_move((r, r))
    assert engine.is_game_over() is True
    assert engine.state == AI_WON


def test_full_board_is_a_draw():
    engine = quiet_engine()
    size = engine.board.size
    for row in range(size):
        for col in range(size):
            # runs never exceed two stones in any direction
            side = AI if (col + 2 * row) % 4 < 2 else HUMAN
            engine.board.place(side, (row, col))
    assert engine.is_game_over() is True
    assert engine.state == DRAW


def test_turn_order_follows_colors():
    engine = quiet_engine(ai_black=False)
    assert engine.human_to_move()
    engine.record_human_move((7, 7))
    assert not engine.human_to_move()

    engine = quiet_engine(ai_black=True)
    assert not engine.human_to_move()
    engine.opening_move()
    assert engine.human_to_move()


def test_recording_on_occupied_cell_raises():
    engine = quiet_engine()
    engine.record_human_move((7, 7))
    with pytest.raises(ValueError):
        engine.record_computer_move((7, 7))


def test_cache_survives_across_moves():
    engine = quiet_engine(depth=2)
    engine.record_human_move((7, 7))
    engine.compute_computer_move()
    size_after_first = len(engine.cache)
    assert size_after_first > 0
    engine.record_human_move((6, 6) if engine.board.is_empty(6, 6) else (8, 8))
    engine.compute_computer_move()
    assert len(engine.cache) >= size_after_first


@pytest.mark.parametrize("depth", [0, 5, "2"])
def test_invalid_depth_rejected(depth):
    with pytest.raises(ValueError):
        EngineConfig(depth=depth)


def test_config_is_immutable():
    cfg = EngineConfig()
    with pytest.raises(AttributeError):
        cfg.depth = 3


def test_build_config_precedence():
    settings = {"search_depth": 3, "ai_black": True, "zobrist_seed": 9}
    cfg = config_mod.build_config(None, settings)
    assert cfg == EngineConfig(depth=3, ai_black=True, seed=9)

    args = argparse.Namespace(depth=1, ai_black=None, seed=None)
    cfg = config_mod.build_config(args, settings)
    assert cfg == EngineConfig(depth=1, ai_black=True, seed=9)

    assert config_mod.build_config() == EngineConfig()


def test_load_settings(tmp_path):
    shipped = config_mod.load_settings("config/settings.yaml")
    assert shipped["search_depth"] == 2
    assert config_mod.load_settings(tmp_path / "nope.yaml") == {}
