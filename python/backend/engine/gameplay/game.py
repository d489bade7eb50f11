"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from enum import StrEnum

from backend.config import GameConfig
from backend.engine.gamegenerator import GameGenerator, RandomSource, seeded_random
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction, Move
from backend.models.tile import FULL_TURN, ROTATION_STEP, Tile

logger = logging.getLogger(__name__)


class GameMode(StrEnum):
    CLASSIC = "classic"
    TWIST = "twist"


@dataclass(frozen=True)
class GameSummary:
    moves: int
    optimal_moves: int | None
    elapsed: float

    @property
    def extra_moves(self) -> int | None:
        if self.optimal_moves is None:
            return None
        return self.moves - self.optimal_moves


class GamePlay:
    """Orchestrates a game session: one board, one move counter, one status.

    The optimal move count is computed once per game.  With
    ``config.solve_in_background`` it is computed on a worker thread and
    stays ``None`` until the result for the *current* game arrives.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
        mode: GameMode = GameMode.CLASSIC,
        board: Board | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.mode = mode
        self._rng = rng if rng is not None else seeded_random()
        self._last_game_id = 0
        self._solver_thread: threading.Thread | None = None
        self.board_rotation = 0
        if board is None:
            board = self._generate()
        self._start(board)

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: GameConfig | None = None,
        mode: GameMode = GameMode.CLASSIC,
    ) -> GamePlay:
        """Create a game session from an existing board (e.g. a fixture)."""
        config = replace(config or GameConfig(), size=board.size)
        return cls(config=config, mode=mode, board=board)

    # -- lifecycle ------------------------------------------------------------

    def request_new_game(self, mode: GameMode | None = None) -> None:
        """Throw the current game away and start a freshly scrambled one."""
        if mode is not None:
            self.mode = mode
        self._start(self._generate())

    def _generate(self) -> Board:
        return GameGenerator.generate(
            self.config.size, self.config.scramble_steps, self._rng
        )

    def _start(self, board: Board) -> None:
        self._last_game_id += 1
        self.state = GameState(board, game_id=self._last_game_id)
        self.board_rotation = 0
        logger.debug("game %d started (%s mode)", self.state.game_id, self.mode.value)

        if self.config.solve_in_background:
            state = self.state
            snapshot = board.clone()
            limits = self.config.limits

            def worker() -> None:
                self._deliver_optimal(state, Solver.optimal_moves(snapshot, limits))

            self._solver_thread = threading.Thread(target=worker, daemon=True)
            self._solver_thread.start()
        else:
            self.state.optimal_moves = Solver.optimal_moves(board, self.config.limits)

    def _deliver_optimal(self, state: GameState, moves: int) -> None:
        # Written to the state the search was started for, never to self.state.
        state.optimal_moves = moves
        if state is not self.state:
            logger.debug("solver result for stale game %d not shown", state.game_id)

    def wait_for_solver(self, timeout: float | None = None) -> int | None:
        """Block until the background solver (if any) finishes."""
        if self._solver_thread is not None:
            self._solver_thread.join(timeout)
        return self.state.optimal_moves

    # -- movement (direction = where the *tile* moves on screen) -------------

    def attempt_slide(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        In twist mode the direction is taken as seen on the turned board.
        Returns True if the move was valid.
        """
        if self.state.is_over:
            return False
        board = self.state.board
        tile = board.tile_for_direction(direction.turned_ccw(self._quarters))
        if tile is None:
            return False
        board.slide(tile)
        self._after_move()
        return True

    def attempt_rotate(self, row: int, col: int) -> bool:
        """Rotate the tile shown at (row, col) a quarter turn clockwise."""
        if self.state.is_over:
            return False
        size = self.size
        if not (0 <= row < size and 0 <= col < size):
            return False
        board = self.state.board
        tile = board.tile_at(*self.view_to_board(row, col))
        if tile is None:
            return False
        board.rotate(tile)
        self._after_move()
        return True

    def apply_hint(self) -> Move | None:
        """Play the first move of a shortest solution; returns it, or ``None``."""
        if self.state.is_over:
            return None
        move = Solver.hint(self.state.board, self.config.limits)
        if move is None:
            return None
        self.state.board.apply(move)
        self._after_move()
        return move

    def _after_move(self) -> None:
        self.state.increment_moves()
        if self.state.is_solved:
            self.state.mark_won()
            logger.debug(
                "game %d won in %d moves (optimal %s)",
                self.state.game_id,
                self.state.moves,
                self.state.optimal_moves,
            )
            return
        if (
            self.mode is GameMode.TWIST
            and self.state.moves % self.config.board_rotation_interval == 0
        ):
            self.board_rotation = (self.board_rotation + ROTATION_STEP) % FULL_TURN

    # -- view mapping ---------------------------------------------------------

    @property
    def _quarters(self) -> int:
        return self.board_rotation // ROTATION_STEP

    def view_to_board(self, row: int, col: int) -> tuple[int, int]:
        """Map an on-screen cell to the board cell shown there."""
        last = self.size - 1
        for _ in range(self._quarters):
            row, col = last - col, row
        return row, col

    def board_to_view(self, row: int, col: int) -> tuple[int, int]:
        last = self.size - 1
        for _ in range(self._quarters):
            row, col = col, last - row
        return row, col

    def view_cells(self) -> list[list[Tile | None]]:
        """Rows of tiles in on-screen order (``None`` marks the blank)."""
        board = self.state.board
        return [
            [board.tile_at(*self.view_to_board(r, c)) for c in range(self.size)]
            for r in range(self.size)
        ]

    def display_rotation(self, tile: Tile) -> int:
        """Rotation to draw *tile* with, board turn included."""
        return (tile.rotation + self.board_rotation) % FULL_TURN

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def is_won(self) -> bool:
        return self.state.is_over

    def summary(self) -> GameSummary:
        return GameSummary(
            moves=self.state.moves,
            optimal_moves=self.state.optimal_moves,
            elapsed=self.state.elapsed_time,
        )
