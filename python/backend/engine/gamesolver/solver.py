"""Optimal move-count solver for the rotating sliding puzzle.

A* over the combined slide + rotate state space:

  - A state is every tile's ``(row, col, rotation)`` (in tile-id order) plus
    the blank cell.  Two states are equal iff their keys are equal.
  - Successors: one slide per direction that has a tile next to the blank,
    then one +90° rotation per tile that is not upright.  Upright tiles are
    never rotated; a shortest path never turns a tile a full circle.
  - ``h`` = Σ Manhattan distance to home + 1 per tile that is not upright.
    Every move changes ``h`` by at most one, so the first goal popped is an
    optimal one.
  - Expansion budget: after ``max_expansions`` the search gives up and
    reports a fixed fallback figure.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass

from backend.models.board import OFFSETS, Board, Direction, Move, MoveKind
from backend.models.tile import FULL_TURN, ROTATION_STEP

logger = logging.getLogger(__name__)

DEFAULT_MAX_EXPANSIONS = 50_000
DEFAULT_FALLBACK_MOVES = 30

StateKey = tuple[tuple[int, int, int], ...]


@dataclass(frozen=True)
class SearchLimits:
    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    fallback_moves: int = DEFAULT_FALLBACK_MOVES


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search.

    ``path`` is ``None`` when the budget ran out; ``moves`` then holds the
    fallback figure.
    """

    moves: int
    path: list[Move] | None
    expanded: int
    exhausted: bool


@dataclass(slots=True)
class _Node:
    key: StateKey
    empty: tuple[int, int]
    g: int
    h: int
    parent: _Node | None = None
    move: Move | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


def _heuristic(key: StateKey, homes: tuple[tuple[int, int], ...]) -> int:
    h = 0
    for (r, c, rot), (hr, hc) in zip(key, homes):
        h += abs(r - hr) + abs(c - hc)
        if rot:
            h += 1
    return h


def _reconstruct(node: _Node) -> list[Move]:
    path: list[Move] = []
    while node.parent is not None:
        path.append(node.move)  # type: ignore[arg-type]
        node = node.parent
    path.reverse()
    return path


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(board: Board, limits: SearchLimits = SearchLimits()) -> SearchResult:
        """Run A* from *board* (left untouched) towards the solved state."""
        ids = tuple(t.id for t in board.tiles)
        homes = tuple(t.correct_pos for t in board.tiles)
        goal = board.goal_key()
        size = board.size

        start_key = board.state_key()
        start = _Node(key=start_key, empty=board.empty, g=0, h=_heuristic(start_key, homes))

        counter = itertools.count()
        open_heap: list[tuple[int, int, _Node]] = [(start.f, next(counter), start)]
        visited: set[StateKey] = set()
        expanded = 0

        logger.debug("solver start: %dx%d board, h=%d", size, size, start.h)

        while open_heap:
            _, _, node = heapq.heappop(open_heap)
            if node.key in visited:
                continue
            visited.add(node.key)

            if node.key == goal:
                logger.debug("solver done: %d moves, %d expansions", node.g, expanded)
                return SearchResult(
                    moves=node.g,
                    path=_reconstruct(node),
                    expanded=expanded,
                    exhausted=False,
                )

            if expanded >= limits.max_expansions:
                break
            expanded += 1

            er, ec = node.empty
            occupant = {(r, c): i for i, (r, c, _) in enumerate(node.key)}

            for direction in Direction:
                dr, dc = OFFSETS[direction]
                i = occupant.get((er + dr, ec + dc))
                if i is None:
                    continue
                r, c, rot = node.key[i]
                key = node.key[:i] + ((er, ec, rot),) + node.key[i + 1 :]
                if key in visited:
                    continue
                child = _Node(
                    key=key,
                    empty=(r, c),
                    g=node.g + 1,
                    h=_heuristic(key, homes),
                    parent=node,
                    move=Move(MoveKind.SLIDE, ids[i]),
                )
                heapq.heappush(open_heap, (child.f, next(counter), child))

            for i, (r, c, rot) in enumerate(node.key):
                if rot == 0:
                    continue
                key = (
                    node.key[:i]
                    + ((r, c, (rot + ROTATION_STEP) % FULL_TURN),)
                    + node.key[i + 1 :]
                )
                if key in visited:
                    continue
                child = _Node(
                    key=key,
                    empty=node.empty,
                    g=node.g + 1,
                    h=_heuristic(key, homes),
                    parent=node,
                    move=Move(MoveKind.ROTATE, ids[i]),
                )
                heapq.heappush(open_heap, (child.f, next(counter), child))

        logger.debug(
            "solver budget exhausted after %d expansions; reporting %d",
            expanded,
            limits.fallback_moves,
        )
        return SearchResult(
            moves=limits.fallback_moves,
            path=None,
            expanded=expanded,
            exhausted=True,
        )

    @staticmethod
    def optimal_moves(board: Board, limits: SearchLimits = SearchLimits()) -> int:
        """Return the minimum number of moves to solve *board*, or the fallback."""
        return Solver.search(board, limits).moves

    @staticmethod
    def solve(board: Board, limits: SearchLimits = SearchLimits()) -> list[Move]:
        """Return a shortest move sequence, or ``[]`` if solved / out of budget."""
        return Solver.search(board, limits).path or []

    @staticmethod
    def hint(board: Board, limits: SearchLimits = SearchLimits()) -> Move | None:
        """Return the first move of a shortest solution, or ``None``."""
        if board.is_solved():
            return None
        moves = Solver.solve(board, limits)
        return moves[0] if moves else None
