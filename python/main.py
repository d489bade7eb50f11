#!/usr/bin/env python3
"""Twist Slide — a sliding puzzle whose tiles also rotate.

Usage::

    python main.py                  # Rich terminal, 3×3, interactive menu
    python main.py -s 4 -m twist    # 4×4, board view turns every 5 moves
    python main.py --daily          # puzzle of the day
    python main.py --solve --seed 7 # print a scramble and its optimal move count
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    DEFAULT_ROTATION_INTERVAL,
    DEFAULT_SCRAMBLE_STEPS,
    DEFAULT_SIZE,
    GameConfig,
)
from backend.engine.gamegenerator import (  # noqa: E402
    GameGenerator,
    RandomSource,
    daily_random,
    seeded_random,
)
from backend.engine.gameplay import GameMode  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )


def _print_solution(config: GameConfig, rng: RandomSource) -> None:
    console = Console()
    board = GameGenerator.generate(config.size, config.scramble_steps, rng)
    result = Solver.search(board, config.limits)

    for r in range(board.size):
        cells: list[str] = []
        for c in range(board.size):
            tile = board.tile_at(r, c)
            cells.append("   .  " if tile is None else f"{tile.id:>2}@{tile.rotation:<3}")
        console.print("  " + " ".join(cells))

    if result.exhausted:
        console.print(
            f"\n  Search gave up after {result.expanded} expansions; "
            f"reporting [bold yellow]{result.moves}[/bold yellow] moves."
        )
        return
    console.print(
        f"\n  Optimal: [bold green]{result.moves}[/bold green] moves "
        f"({result.expanded} expansions)"
    )
    if result.path:
        console.print("  " + " ".join(m.to_notation() for m in result.path))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    steps: int = typer.Option(
        DEFAULT_SCRAMBLE_STEPS, "--steps",
        min=0,
        help="Random moves applied when scrambling.",
    ),
    mode: GameMode = typer.Option(
        GameMode.CLASSIC, "-m", "--mode",
        help="classic, or twist (board view turns every --interval moves).",
    ),
    interval: int = typer.Option(
        DEFAULT_ROTATION_INTERVAL, "--interval",
        min=1,
        help="Player moves between board turns in twist mode.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
    daily: bool = typer.Option(
        False, "--daily",
        help="Use today's puzzle (overrides --seed).",
    ),
    solve: bool = typer.Option(
        False, "--solve",
        help="Print one scramble and its optimal move count, then exit.",
    ),
    background: bool = typer.Option(
        True, "--background/--no-background",
        help="Compute the optimal move count on a worker thread.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Debug logging.",
    ),
) -> None:
    """Twist Slide puzzle."""
    _setup_logging(verbose)

    config = GameConfig(
        size=size,
        scramble_steps=steps,
        board_rotation_interval=interval,
        solve_in_background=background,
    )
    rng = daily_random() if daily else seeded_random(seed)

    if solve:
        _print_solution(config, rng)
        return

    from frontend.cli.rich.app import run

    run(config=config, mode=mode, rng=rng)


if __name__ == "__main__":
    app()
