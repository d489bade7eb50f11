"""Solver test suite.

Boards are hand-built JSON fixtures under ``<project_root>/fixtures/``, each
with its known optimal move count.  Every test is hard-killed by
``pytest-timeout`` (configured in ``pyproject.toml``).  Returned move lists
are replayed through the real game engine to verify correctness.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.engine.gamegenerator import GameGenerator, seeded_random
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import SearchLimits, Solver
from backend.models.board import Board, Direction, Move, MoveKind

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS_3x3 = _load("3x3.json")


# -- helpers ------------------------------------------------------------------


def _play(game: GamePlay, move: Move) -> bool:
    """Apply a solver move through the player-facing intents."""
    board = game.state.board
    tile = board.tile_by_id(move.tile_id)
    if move.kind is MoveKind.ROTATE:
        return game.attempt_rotate(tile.row, tile.col)
    for direction in Direction:
        if board.tile_for_direction(direction) is tile:
            return game.attempt_slide(direction)
    return False


def _assert_replay_solves(board: Board, moves: list[Move]) -> None:
    game = GamePlay.from_board(board.clone())
    for i, move in enumerate(moves):
        assert _play(game, move), f"Move {i} ({move.to_notation()}) was invalid"
    assert game.is_won, f"Board not solved after {len(moves)} moves"


# -- fixture boards -----------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS_3x3, ids=_ids)
def test_optimal_moves_3x3(board_data: dict) -> None:
    board = Board.from_snapshot(board_data["board"])
    assert Solver.optimal_moves(board) == board_data["expected"]


@pytest.mark.parametrize("board_data", _BOARDS_3x3, ids=_ids)
def test_solution_path_replays(board_data: dict) -> None:
    board = Board.from_snapshot(board_data["board"])
    result = Solver.search(board)

    assert not result.exhausted
    assert result.path is not None
    assert len(result.path) == result.moves
    if result.moves:
        _assert_replay_solves(board, result.path)


# -- contract -----------------------------------------------------------------


def test_solved_board_needs_no_expansion() -> None:
    result = Solver.search(Board.solved(3))
    assert result.moves == 0
    assert result.expanded == 0
    assert result.path == []


def test_search_leaves_board_untouched() -> None:
    board = GameGenerator.generate(3, 6, seeded_random(3))
    before = board.snapshot()
    Solver.search(board)
    assert board.snapshot() == before


@pytest.mark.parametrize("seed", range(5))
def test_repeated_searches_agree(seed: int) -> None:
    board = GameGenerator.generate(3, 6, seeded_random(seed))
    first = Solver.optimal_moves(board)
    assert all(Solver.optimal_moves(board) == first for _ in range(3))


@pytest.mark.parametrize("seed", range(5))
def test_scrambled_boards_solve(seed: int) -> None:
    board = GameGenerator.generate(3, 6, seeded_random(seed))
    result = Solver.search(board)
    if not result.exhausted:
        _assert_replay_solves(board, result.path or [])


def test_budget_exhaustion_returns_fallback() -> None:
    board = Board.solved(3)
    board.tile_by_id(0).rotation = 90

    result = Solver.search(board, SearchLimits(max_expansions=1, fallback_moves=30))

    assert result.exhausted
    assert result.moves == 30
    assert result.path is None
    assert result.expanded == 1
    assert Solver.solve(board, SearchLimits(max_expansions=1)) == []


def test_slide_and_single_turn_from_scramble_costs_four() -> None:
    """A +90° turn costs three more turns to undo, plus the slide back."""
    board = Board.solved(3)
    tile = board.tile_by_id(7)
    board.slide(tile)
    board.rotate(tile)

    assert Solver.optimal_moves(board) == 4


# -- hint ---------------------------------------------------------------------


def test_hint_on_solved_board_is_none() -> None:
    assert Solver.hint(Board.solved(3)) is None


def test_hint_is_first_optimal_move() -> None:
    board = Board.solved(3)
    board.slide(board.tile_by_id(7))

    assert Solver.hint(board) == Move(MoveKind.SLIDE, 7)


def test_2x2_board() -> None:
    board = Board.solved(2)
    board.slide(board.tile_by_id(2))
    board.slide(board.tile_by_id(0))
    board.rotate(board.tile_by_id(1))

    # two slides back, three more turns for tile 1
    assert Solver.optimal_moves(board) == 5
