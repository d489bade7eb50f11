"""Board model for the rotating sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from backend.models.tile import FULL_TURN, ROTATION_STEP, Tile


class Direction(StrEnum):
    """Direction the *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def turned_ccw(self, quarters: int) -> Direction:
        """Return this direction rotated counter-clockwise by ``quarters`` × 90°."""
        i = _CCW_ORDER.index(self)
        return _CCW_ORDER[(i + quarters) % 4]


_CCW_ORDER = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)

# Offset from the blank to the tile that slides in each direction.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class MoveKind(StrEnum):
    SLIDE = "slide"
    ROTATE = "rotate"


@dataclass(frozen=True, slots=True)
class Move:
    """A single player operation on one tile."""

    kind: MoveKind
    tile_id: int

    def inverse(self) -> list[Move]:
        """Moves that undo this one (a slide undoes itself, rotation needs 3 more)."""
        if self.kind is MoveKind.SLIDE:
            return [self]
        return [self] * (FULL_TURN // ROTATION_STEP - 1)

    def to_notation(self) -> str:
        return f"{self.kind.value}({self.tile_id})"


class Board:
    """Represents the puzzle: ``size × size`` cells, one of them empty.

    Tiles are kept in id order.  Tile ``i`` belongs at ``divmod(i, size)``;
    the bottom-right cell is the blank in the solved state.
    """

    def __init__(self, size: int, tiles: list[Tile], empty: tuple[int, int]) -> None:
        self.size = size
        self.tiles = tiles
        self.empty = empty

    def __repr__(self) -> str:
        return f"Board(size={self.size}, empty={self.empty}, tiles={self.tiles!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.state_key() == other.state_key()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (every tile home, blank bottom-right)."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        tiles = [
            Tile(id=i, row=r, col=c, correct_row=r, correct_col=c)
            for i, (r, c) in enumerate(
                divmod(k, size) for k in range(size * size - 1)
            )
        ]
        return cls(size=size, tiles=tiles, empty=(size - 1, size - 1))

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> Board:
        """Rebuild a board from the dict produced by :meth:`snapshot`.

        Example::

            Board.from_snapshot({
                "size": 2,
                "empty": [1, 0],
                "tiles": [
                    {"id": 0, "row": 0, "col": 0, "rotation": 0},
                    {"id": 1, "row": 0, "col": 1, "rotation": 90},
                    {"id": 2, "row": 1, "col": 1, "rotation": 0},
                ],
            })

        ``correct_row`` / ``correct_col`` may be omitted; they default to the
        cell implied by the tile id.
        """
        size = int(data["size"])
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        raw_tiles = data["tiles"]
        if len(raw_tiles) != size * size - 1:
            raise ValueError(
                f"Expected {size * size - 1} tiles for a {size}×{size} board, "
                f"got {len(raw_tiles)}."
            )
        empty = (int(data["empty"][0]), int(data["empty"][1]))
        _check_cell(size, empty, "empty slot")

        occupied: set[tuple[int, int]] = {empty}
        tiles: list[Tile] = []
        for raw in sorted(raw_tiles, key=lambda t: int(t["id"])):
            tid = int(raw["id"])
            default_row, default_col = divmod(tid, size)
            tile = Tile(
                id=tid,
                row=int(raw["row"]),
                col=int(raw["col"]),
                correct_row=int(raw.get("correct_row", default_row)),
                correct_col=int(raw.get("correct_col", default_col)),
                rotation=int(raw.get("rotation", 0)),
            )
            _check_cell(size, tile.pos, f"tile {tid}")
            _check_cell(size, tile.correct_pos, f"home of tile {tid}")
            if tile.pos in occupied:
                raise ValueError(f"Cell {tile.pos} is occupied twice.")
            if tile.rotation % ROTATION_STEP or not 0 <= tile.rotation < FULL_TURN:
                raise ValueError(
                    f"Tile {tid} has rotation {tile.rotation}; "
                    f"expected one of 0, 90, 180, 270."
                )
            occupied.add(tile.pos)
            tiles.append(tile)

        homes = {t.correct_pos for t in tiles}
        if len(homes) != len(tiles):
            raise ValueError("Two tiles share the same home cell.")
        ids = [t.id for t in tiles]
        if len(set(ids)) != len(ids):
            raise ValueError("Tile ids must be unique.")
        return cls(size=size, tiles=tiles, empty=empty)

    def snapshot(self) -> dict[str, Any]:
        """Plain-data, read-only view of the board for renderers and fixtures."""
        return {
            "size": self.size,
            "empty": [self.empty[0], self.empty[1]],
            "tiles": [
                {
                    "id": t.id,
                    "row": t.row,
                    "col": t.col,
                    "correct_row": t.correct_row,
                    "correct_col": t.correct_col,
                    "rotation": t.rotation,
                }
                for t in self.tiles
            ],
        }

    def clone(self) -> Board:
        return Board(
            size=self.size,
            tiles=[t.copy() for t in self.tiles],
            empty=self.empty,
        )

    # -- queries --------------------------------------------------------------

    def tile_at(self, row: int, col: int) -> Tile | None:
        for tile in self.tiles:
            if tile.row == row and tile.col == col:
                return tile
        return None

    def tile_by_id(self, tile_id: int) -> Tile:
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        raise KeyError(tile_id)

    def tile_for_direction(self, direction: Direction) -> Tile | None:
        """Return the tile that would slide in *direction*, if any."""
        dr, dc = OFFSETS[direction]
        return self.tile_at(self.empty[0] + dr, self.empty[1] + dc)

    def can_slide(self, tile: Tile) -> bool:
        er, ec = self.empty
        return abs(tile.row - er) + abs(tile.col - ec) == 1

    def movable_tiles(self) -> list[Tile]:
        """Tiles next to the blank, in id order."""
        return [t for t in self.tiles if self.can_slide(t)]

    def is_solved(self) -> bool:
        """Check if every tile is home and upright."""
        return all(self.is_tile_correct(t) for t in self.tiles)

    def is_tile_correct(self, tile: Tile) -> bool:
        return tile.is_home and tile.rotation == 0

    def state_key(self) -> tuple[tuple[int, int, int], ...]:
        """Canonical key: ``(row, col, rotation)`` per tile, in id order."""
        return tuple((t.row, t.col, t.rotation) for t in self.tiles)

    def goal_key(self) -> tuple[tuple[int, int, int], ...]:
        return tuple((t.correct_row, t.correct_col, 0) for t in self.tiles)

    # -- mutation -------------------------------------------------------------

    def slide(self, tile: Tile) -> bool:
        """Swap *tile* with the blank.  Returns False (no change) if not adjacent."""
        if not self.can_slide(tile):
            return False
        tile.row, tile.col, self.empty = self.empty[0], self.empty[1], tile.pos
        return True

    def rotate(self, tile: Tile) -> None:
        tile.rotation = (tile.rotation + ROTATION_STEP) % FULL_TURN

    def apply(self, move: Move) -> bool:
        tile = self.tile_by_id(move.tile_id)
        if move.kind is MoveKind.SLIDE:
            return self.slide(tile)
        self.rotate(tile)
        return True


def _check_cell(size: int, cell: tuple[int, int], what: str) -> None:
    r, c = cell
    if not (0 <= r < size and 0 <= c < size):
        raise ValueError(f"{what.capitalize()} at {cell} is outside a {size}×{size} board.")
