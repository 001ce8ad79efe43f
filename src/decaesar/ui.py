from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from decaesar.frequency import ALPHABET_SIZE
from decaesar.results import DecaesarResult, DecipherResult
from decaesar.rotation import decode


COLORS = {
    "best": "bold yellow",
    "candidate": "cyan",
    "score": "green",
    "plaintext": "spring_green2",
}


def format_result(result: DecipherResult) -> str:
    """Human readable form of one candidate."""
    return str(result)


def render_results(result: Optional[DecaesarResult], top: int = ALPHABET_SIZE):
    """Render the ranked candidates of a search."""
    if result is None:
        return Panel("No input analysed yet…", title="Caesar Shifts", border_style="dim")

    ranked = result.ranked(top)

    ui_table = Table(
        title=f"Top {len(ranked)} / {ALPHABET_SIZE}  |  best shift {result.best.shift}",
        min_width=60,
    )
    ui_table.add_column("Rank", justify="right")
    ui_table.add_column("Shift", justify="right")
    ui_table.add_column("Score", justify="right")

    for rank, candidate in enumerate(ranked, start=1):
        style = COLORS["best"] if candidate == result.best else COLORS["candidate"]
        ui_table.add_row(
            str(rank),
            f"[{style}]{candidate.shift}[/{style}]",
            f"[{COLORS['score']}]{candidate.score:.2f}[/{COLORS['score']}]",
        )

    return ui_table


def render_plaintext(data: bytes, shift: int) -> Panel:
    """Render the input decoded with the given shift."""
    plaintext = decode(data, shift).decode("utf-8", errors="replace")
    return Panel(Text(plaintext, style=COLORS["plaintext"]), title=f"Plaintext (shift {shift})")


def show_results(console: Console, data: bytes, result: DecaesarResult, top: int) -> None:
    console.print(render_results(result, top))
    console.print(render_plaintext(data, result.best.shift))
