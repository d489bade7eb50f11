"""Rich terminal frontend — tables, colours, and panels.

Each cell shows the tile's home label (``A1`` is the top-left piece) and an
arrow pointing where the piece's top edge currently faces.  A cursor picks
the tile to rotate; the arrow keys slide.
"""

from __future__ import annotations

from dataclasses import replace

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import GameConfig
from backend.engine.gamegenerator import RandomSource
from backend.engine.gameplay import GameMode, GamePlay
from backend.models.board import Direction
from backend.models.tile import Tile
from frontend.cli.input_handler import get_key

console = Console()

_ARROWS = {0: "↑", 90: "→", 180: "↓", 270: "←"}

_DIRECTION_KEYS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_CURSOR_KEYS = {
    "cursor_up": (-1, 0),
    "cursor_down": (1, 0),
    "cursor_left": (0, -1),
    "cursor_right": (0, 1),
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _label(tile: Tile) -> str:
    return f"{chr(ord('A') + tile.correct_col)}{tile.correct_row + 1}"


def _optimal_text(game: GamePlay) -> str:
    optimal = game.state.optimal_moves
    return "computing…" if optimal is None else str(optimal)


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: tuple[int, int] | None = None) -> Table:
    """Return a Rich Table representing the puzzle as currently seen."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(game.size):
        table.add_column(width=4, justify="center")

    board = game.state.board
    for r, row in enumerate(game.view_cells()):
        cells: list[str] = []
        for c, tile in enumerate(row):
            if tile is None:
                text = "[dim]·[/dim]"
            else:
                arrow = _ARROWS[game.display_rotation(tile)]
                style = "bold green" if board.is_tile_correct(tile) else "bold white"
                text = f"[{style}]{_label(tile)}{arrow}[/{style}]"
            if cursor == (r, c):
                text = f"[reverse]{text}[/reverse]"
            cells.append(text)
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Optimal: ", style="dim")
    stats.append(_optimal_text(game), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int, mode: GameMode) -> None:
    """Draw the main menu."""
    console.clear()

    sizes = Text()
    for s in range(2, 9):
        if s > 2:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size   T  toggle twist", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append(f"  Play ({mode.value})    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]T W I S T   S L I D E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, cursor: tuple[int, int], status: str = "") -> None:
    console.clear()

    size = game.size
    title = f"Twist Slide  {size}×{size}"
    if game.mode is GameMode.TWIST:
        title += f"  ↻{game.board_rotation}°"

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("IJKL", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  rotate   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(game, cursor)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    summary = game.summary()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    result = Text()
    result.append("  Moves: ", style="dim")
    result.append(str(summary.moves), style="bold yellow")
    result.append("    Optimal: ", style="dim")
    result.append(_optimal_text(game), style="bold yellow")
    if summary.extra_moves is not None:
        result.append("    Extra: ", style="dim")
        result.append(str(summary.extra_moves), style="bold yellow")
    result.append("    Time: ", style="dim")
    result.append(_format_time(summary.elapsed), style="bold yellow")

    group = Group(
        Align.center(_render_board(game)),
        Align.center(congrats),
        Align.center(result),
    )

    panel = Panel(
        group,
        title=f"[bold green]Twist Slide  {game.size}×{game.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _play_game(game: GamePlay) -> None:
    cursor = (0, 0)
    status = ""

    while True:
        while not game.is_won:
            _draw_game(game, cursor, status)
            status = ""
            key = get_key()

            if key in _DIRECTION_KEYS:
                game.attempt_slide(_DIRECTION_KEYS[key])
            elif key in _CURSOR_KEYS:
                dr, dc = _CURSOR_KEYS[key]
                cursor = (
                    min(max(cursor[0] + dr, 0), game.size - 1),
                    min(max(cursor[1] + dc, 0), game.size - 1),
                )
            elif key in ("rotate", "enter"):
                if not game.attempt_rotate(*cursor):
                    status = "[dim]Nothing to rotate there.[/dim]"
            elif key == "hint":
                move = game.apply_hint()
                if move is None:
                    status = "[yellow]No hint available.[/yellow]"
                else:
                    status = f"[cyan]Hint:[/cyan] {move.to_notation()}"
            elif key == "restart":
                game.request_new_game()
                cursor = (0, 0)
            elif key == "quit":
                return

        # -- win ---------------------------------------------------------------
        game.wait_for_solver()
        _draw_win(game)
        console.print(
            Align.center(
                Text("\n  Press R to play again, Q to go back.\n", style="dim")
            )
        )

        while True:
            key = get_key()
            if key == "restart":
                game.request_new_game()
                cursor = (0, 0)
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: GameConfig, mode: GameMode, rng: RandomSource) -> None:
    sel_size = config.size

    while True:
        _draw_menu(sel_size, mode)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(2, sel_size - 1)
        elif key == "right":
            sel_size = min(8, sel_size + 1)
        elif key == "twist":
            mode = GameMode.CLASSIC if mode is GameMode.TWIST else GameMode.TWIST
        elif key in ("1", "enter"):
            game_config = replace(config, size=sel_size)
            _play_game(GamePlay(game_config, rng=rng, mode=mode))


# -- public entry point -------------------------------------------------------


def run(config: GameConfig, mode: GameMode, rng: RandomSource) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(config, mode, rng)
