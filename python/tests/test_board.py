"""Board model tests: construction, legality, mutation, snapshots."""

from __future__ import annotations

import pytest

from backend.models.board import Board, Direction, Move, MoveKind


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_solved_board_layout(size: int) -> None:
    board = Board.solved(size)

    assert len(board.tiles) == size * size - 1
    assert board.empty == (size - 1, size - 1)
    assert all(t.pos == t.correct_pos for t in board.tiles)
    assert len({t.pos for t in board.tiles} | {board.empty}) == size * size
    assert board.is_solved()


def test_tile_ids_are_row_major() -> None:
    board = Board.solved(3)
    assert [t.id for t in board.tiles] == list(range(8))
    assert board.tile_by_id(5).correct_pos == (1, 2)


def test_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Board.solved(0)


# -- sliding ------------------------------------------------------------------


def test_can_slide_matches_adjacency() -> None:
    board = Board.solved(4)
    er, ec = board.empty
    for tile in board.tiles:
        dr, dc = abs(tile.row - er), abs(tile.col - ec)
        assert board.can_slide(tile) == ((dr, dc) in ((0, 1), (1, 0)))


def test_slide_swaps_with_blank() -> None:
    board = Board.solved(3)
    tile = board.tile_by_id(7)

    assert board.slide(tile)
    assert tile.pos == (2, 2)
    assert board.empty == (2, 1)
    assert not board.is_solved()


def test_illegal_slide_is_a_no_op() -> None:
    board = Board.solved(3)
    tile = board.tile_by_id(0)
    before = board.snapshot()

    assert not board.slide(tile)
    assert board.snapshot() == before


def test_tile_for_direction() -> None:
    board = Board.solved(3)
    assert board.tile_for_direction(Direction.RIGHT) is board.tile_by_id(7)
    assert board.tile_for_direction(Direction.DOWN) is board.tile_by_id(5)
    assert board.tile_for_direction(Direction.UP) is None
    assert board.tile_for_direction(Direction.LEFT) is None


def test_movable_tiles_in_id_order() -> None:
    board = Board.solved(3)
    assert [t.id for t in board.movable_tiles()] == [5, 7]


# -- rotation -----------------------------------------------------------------


def test_four_rotations_restore_tile() -> None:
    board = Board.solved(3)
    tile = board.tile_by_id(4)
    for expected in (90, 180, 270, 0):
        board.rotate(tile)
        assert tile.rotation == expected
    assert tile.pos == (1, 1)


def test_rotating_tile_zero_three_then_four_times() -> None:
    board = Board.solved(3)
    tile = board.tile_by_id(0)

    for _ in range(3):
        board.rotate(tile)
    assert not board.is_solved()
    assert tile.rotation == 270

    board.rotate(tile)
    assert tile.rotation == 0
    assert board.is_solved()
    assert board.empty == (2, 2)


def test_rotation_needs_no_adjacency() -> None:
    board = Board.solved(3)
    tile = board.tile_by_id(0)
    assert not board.can_slide(tile)
    assert board.apply(Move(MoveKind.ROTATE, 0))
    assert tile.rotation == 90


# -- moves --------------------------------------------------------------------


def test_move_inverse() -> None:
    slide = Move(MoveKind.SLIDE, 3)
    rotate = Move(MoveKind.ROTATE, 3)
    assert slide.inverse() == [slide]
    assert rotate.inverse() == [rotate, rotate, rotate]


# -- snapshots & copies -------------------------------------------------------


def test_snapshot_round_trip() -> None:
    board = Board.solved(3)
    board.slide(board.tile_by_id(5))
    board.rotate(board.tile_by_id(2))

    rebuilt = Board.from_snapshot(board.snapshot())

    assert rebuilt == board
    assert rebuilt.empty == (1, 2)


def test_clone_is_independent() -> None:
    board = Board.solved(3)
    copy = board.clone()
    copy.rotate(copy.tile_by_id(0))
    copy.slide(copy.tile_by_id(7))

    assert board.is_solved()
    assert board.state_key() != copy.state_key()


def _snapshot_3x3() -> dict:
    return Board.solved(3).snapshot()


def test_snapshot_rejects_wrong_tile_count() -> None:
    data = _snapshot_3x3()
    data["tiles"].pop()
    with pytest.raises(ValueError, match="Expected 8 tiles"):
        Board.from_snapshot(data)


def test_snapshot_rejects_tile_on_blank() -> None:
    data = _snapshot_3x3()
    data["empty"] = [0, 0]
    with pytest.raises(ValueError, match="occupied twice"):
        Board.from_snapshot(data)


def test_snapshot_rejects_bad_rotation() -> None:
    data = _snapshot_3x3()
    data["tiles"][0]["rotation"] = 45
    with pytest.raises(ValueError, match="rotation"):
        Board.from_snapshot(data)


def test_snapshot_rejects_out_of_range_cell() -> None:
    data = _snapshot_3x3()
    data["tiles"][0]["row"] = 3
    with pytest.raises(ValueError, match="outside"):
        Board.from_snapshot(data)
