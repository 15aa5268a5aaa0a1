"""Rich terminal frontend — tables, colours, and panels.

Tiles are labelled ``1`` to ``N - 1``; type a label to slide that tile
(Enter finishes a label that could still grow, such as ``1`` on a 4×4
board), or use the arrow keys / WASD.  When the puzzle is solved the hidden last
tile fades in and a completion panel takes the place of the browser
modal.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import GameConfig
from backend.engine.gameplay import GamePlay
from backend.engine.reveal import PolledScheduler, RevealSequence
from backend.models.board import Direction
from frontend.cli.input_handler import LabelBuffer, read_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

# Hidden-tile styles from barely visible to fully shown.
_FADE_STYLES = ("grey23", "grey50", "grey70", "bold green")

_POLL_INTERVAL = 0.05


def _fade_style(opacity: float) -> str:
    step = min(len(_FADE_STYLES) - 1, int(opacity * len(_FADE_STYLES)))
    return _FADE_STYLES[step]


class _TerminalView:
    """Presentation adapter between a ``GamePlay`` and the console."""

    def __init__(self, config: GameConfig, rng: random.Random) -> None:
        self.scheduler = PolledScheduler()
        self.game = GamePlay(config, rng)
        self.sequence = RevealSequence(
            self.game.state, self.scheduler, config
        )
        self.cells: Sequence[int] = tuple(self.game.state.board.cells)
        self.labels = LabelBuffer(self.game.size * self.game.size - 1)
        self.status = ""

        self.game.add_render_listener(self._on_render)
        self.game.add_win_listener(self.sequence.start)
        self.game.shuffle()
        self._on_render(tuple(self.game.state.board.cells))

    def _on_render(self, cells: Sequence[int]) -> None:
        self.cells = cells

    # -- input ----------------------------------------------------------------

    def handle(self, key: str) -> None:
        if key in _DIRECTIONS:
            self.labels.clear()
            self.game.move(_DIRECTIONS[key])
        elif key.isdigit():
            self._select(self.labels.push(key))
        elif key == "enter":
            self._select(self.labels.flush())

    def _select(self, label: int | None) -> None:
        if label is None or self.game.is_won:
            return
        if not 1 <= label <= self.labels.max_label:
            self.status = f"[yellow]No tile {label}.[/yellow]"
        elif not self.game.apply_move(label - 1):
            self.status = f"[yellow]Tile {label} can't move.[/yellow]"

    # -- rendering ------------------------------------------------------------

    def _render_board(self) -> Table:
        """Return a Rich Table representing the puzzle grid."""
        size = self.game.size
        empty = size * size - 1
        width = len(str(empty))
        table = Table(
            show_header=False,
            show_edge=True,
            pad_edge=True,
            box=rich.box.HEAVY,
            border_style="bright_blue",
            padding=(0, 1),
        )
        for _ in range(size):
            table.add_column(width=width + 1, justify="center")

        for r in range(size):
            row: list[str] = []
            for c in range(size):
                index = r * size + c
                val = self.cells[index]
                label = f"{val + 1:>{width}}"
                if val == empty:
                    opacity = self.sequence.opacity()
                    if opacity <= 0:
                        row.append("[dim]·[/dim]")
                    else:
                        row.append(f"[{_fade_style(opacity)}]{label}[/]")
                elif val == index:
                    row.append(f"[bold green]{label}[/bold green]")
                else:
                    row.append(f"[bold white]{label}[/bold white]")
            table.add_row(*row)

        return table

    def draw(self) -> None:
        console.clear()
        size = self.game.size

        controls = Text()
        controls.append(f"  1-{size * size - 1}", style="bold cyan")
        controls.append("  tile   ", style="dim")
        controls.append("↑↓←→", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("WASD", style="bold cyan")
        controls.append("  slide   ", style="dim")
        controls.append("R", style="bold cyan")
        controls.append("  restart   ", style="dim")
        controls.append("Q", style="bold cyan")
        controls.append("  quit", style="dim")

        parts: list = [Align.center(self._render_board())]
        if self.sequence.modal_visible:
            congrats = Text()
            congrats.append("\n  ★ ", style="bold yellow")
            congrats.append("PUZZLE COMPLETE!", style="bold green")
            congrats.append("  ★\n", style="bold yellow")
            parts.append(Align.center(congrats))
            controls = Text("  Press R to play again, Q to quit.", style="dim")

        border = "bold green" if self.game.is_won else "bright_blue"
        panel = Panel(
            Group(*parts),
            title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
            border_style=border,
            padding=(1, 2),
        )

        console.print()
        console.print(Align.center(panel))
        if self.status:
            console.print(Align.center(Text.from_markup(f"  {self.status}")))
            self.status = ""
        elif self.labels.pending:
            console.print(Align.center(Text(f"  Tile {self.labels.pending}_", style="cyan")))
        console.print(Align.center(controls))

    def wait_for_key(self) -> str | None:
        """Block until a key arrives or the reveal needs a repaint."""
        while True:
            key = read_key(_POLL_INTERVAL)
            if key is not None:
                return key
            if self.scheduler.poll() or self.sequence.fading:
                return None


# -- public entry point -------------------------------------------------------


def run(config: GameConfig) -> None:
    """Launch the Rich terminal game."""
    rng = random.Random(config.seed)
    view = _TerminalView(config, rng)

    while True:
        view.draw()
        key = view.wait_for_key()
        if key is None:
            continue
        if key == "quit":
            break
        if key == "restart":
            view.scheduler.cancel_all()
            view = _TerminalView(config, rng)
            continue
        view.handle(key)

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
