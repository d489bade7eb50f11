"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from enum import StrEnum

from backend.models.board import Board


class GameStatus(StrEnum):
    PLAYING = "playing"
    WON = "won"


class GameState:
    """Holds the current board, move counter, status, and elapsed time."""

    def __init__(self, board: Board, game_id: int = 0) -> None:
        self.board = board
        self.game_id = game_id
        self.moves: int = 0
        self.status = GameStatus.PLAYING
        self.optimal_moves: int | None = None
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def mark_won(self) -> None:
        self.status = GameStatus.WON
        self.pause()

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.WON
