"""Tile model for the rotating sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field

ROTATION_STEP = 90
FULL_TURN = 360


@dataclass
class Tile:
    """A square piece of the picture.

    ``correct_row`` / ``correct_col`` name the cell the tile was cut from and
    never change after creation.  ``rotation`` is clockwise, in degrees.
    """

    id: int
    row: int
    col: int
    correct_row: int = field(repr=False)
    correct_col: int = field(repr=False)
    rotation: int = 0

    @property
    def pos(self) -> tuple[int, int]:
        return self.row, self.col

    @property
    def correct_pos(self) -> tuple[int, int]:
        return self.correct_row, self.correct_col

    @property
    def is_home(self) -> bool:
        """True when the tile sits on its own cell, whatever its rotation."""
        return self.pos == self.correct_pos

    def copy(self) -> Tile:
        return Tile(
            id=self.id,
            row=self.row,
            col=self.col,
            correct_row=self.correct_row,
            correct_col=self.correct_col,
            rotation=self.rotation,
        )
