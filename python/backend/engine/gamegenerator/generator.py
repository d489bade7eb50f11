"""Generates solvable rotating-slide puzzles."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator.random_source import RandomSource, seeded_random
from backend.models.board import Board, Move, MoveKind

logger = logging.getLogger(__name__)

# Re-scramble attempts when a random walk happens to land back on the goal.
_MAX_ATTEMPTS = 10


class GameGenerator:
    """Creates solvable puzzles by applying random moves to the solved state.

    Every slide and rotation can be undone, so anything reachable this way is
    solvable; no parity check is needed.
    """

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles home, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(board: Board, steps: int, rng: RandomSource) -> list[Move]:
        """Scramble *board* in-place and return the moves applied, in order.

        Each step picks one of the tiles next to the blank uniformly, then
        slides it or rotates it with equal probability.
        """
        applied: list[Move] = []
        for _ in range(steps):
            movable = board.movable_tiles()
            if not movable:
                continue
            tile = movable[int(rng.random() * len(movable))]
            if rng.random() < 0.5:
                board.slide(tile)
                applied.append(Move(MoveKind.SLIDE, tile.id))
            else:
                board.rotate(tile)
                applied.append(Move(MoveKind.ROTATE, tile.id))
        logger.debug("scrambled %dx%d board with %d moves", board.size, board.size, len(applied))
        return applied

    @staticmethod
    def generate(size: int, steps: int, rng: RandomSource | None = None) -> Board:
        """Return a scrambled, solvable board of the given size."""
        rng = rng if rng is not None else seeded_random()
        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, steps, rng)

        # Ensure the board is not already solved
        attempts = 1
        while (
            board.is_solved()
            and steps > 0
            and board.tiles
            and attempts < _MAX_ATTEMPTS
        ):
            GameGenerator.scramble(board, steps, rng)
            attempts += 1

        return board
