"""Game configuration shared by the engine and the frontends."""

from __future__ import annotations

from dataclasses import dataclass

from backend.engine.gamesolver.solver import (
    DEFAULT_FALLBACK_MOVES,
    DEFAULT_MAX_EXPANSIONS,
    SearchLimits,
)

DEFAULT_SIZE = 3
DEFAULT_SCRAMBLE_STEPS = 20
DEFAULT_ROTATION_INTERVAL = 5


@dataclass(frozen=True)
class GameConfig:
    """Recognised options for one game.

    ``board_rotation_interval`` only matters in twist mode: every that many
    player moves the whole board view turns 90° clockwise.
    """

    size: int = DEFAULT_SIZE
    scramble_steps: int = DEFAULT_SCRAMBLE_STEPS
    board_rotation_interval: int = DEFAULT_ROTATION_INTERVAL
    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    fallback_moves: int = DEFAULT_FALLBACK_MOVES
    solve_in_background: bool = False

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"size must be at least 1, got {self.size}.")
        if self.scramble_steps < 0:
            raise ValueError(
                f"scramble_steps must not be negative, got {self.scramble_steps}."
            )
        if self.board_rotation_interval < 1:
            raise ValueError(
                "board_rotation_interval must be at least 1, "
                f"got {self.board_rotation_interval}."
            )
        if self.max_expansions < 1:
            raise ValueError(
                f"max_expansions must be at least 1, got {self.max_expansions}."
            )

    @property
    def limits(self) -> SearchLimits:
        return SearchLimits(
            max_expansions=self.max_expansions,
            fallback_moves=self.fallback_moves,
        )
