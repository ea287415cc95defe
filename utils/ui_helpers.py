from __future__ import annotations

import os
import json
from typing import TYPE_CHECKING, Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from config import settings

if TYPE_CHECKING:
    from book import Book

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = ("plain", "json", "rich")

# (header, width) for each table column
COLUMNS = (("Title", 20), ("Author", 20), ("Year", 10))
EMPTY_MESSAGE = "No books to display"
CONTINUE_PROMPT = "Press enter to continue..."

_console = Console()


def get_console() -> Console:
    return _console


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"


def clear_screen(console: Optional[Console] = None, enabled: Optional[bool] = None) -> None:
    """Clear the terminal between interactions.

    Rich skips the escape sequence when stdout is not a terminal, so piped
    output and tests see nothing.
    """
    if enabled is None:
        enabled = settings.clear_screen
    if enabled:
        (console or _console).clear()


def wait_for_enter(console: Optional[Console] = None) -> None:
    console = console or _console
    console.print(CONTINUE_PROMPT, markup=False, highlight=False)
    console.input()


def _border(left: str, middle: str, right: str) -> str:
    return left + middle.join("─" * (width + 1) for _, width in COLUMNS) + right


def _row(values: Iterable[str]) -> str:
    cells = [f" {value:<{width}}" for value, (_, width) in zip(values, COLUMNS)]
    return "│" + "│".join(cells) + "│"


def render_book_table(books: Iterable[Book]) -> str:
    """Render books as a fixed-width box-drawing table.

    Each cell is left-justified to its column width; values longer than the
    column push the border out rather than being cut.
    """
    lines = [
        _border("┌", "┬", "┐"),
        _row(header for header, _ in COLUMNS),
        _border("├", "┼", "┤"),
    ]
    lines.extend(_row((b.title, b.author, b.year)) for b in books)
    lines.append(_border("└", "┴", "┘"))
    return "\n".join(lines)


def render_empty_banner() -> str:
    inner = sum(width + 1 for _, width in COLUMNS) + len(COLUMNS) - 1
    return "\n".join([
        "┌" + "─" * inner + "┐",
        "│" + EMPTY_MESSAGE.center(inner) + "│",
        "└" + "─" * inner + "┘",
    ])


def _rich_table(books: List[Book]) -> Table:
    table = Table(box=box.SQUARE, header_style="bold cyan")
    for header, width in COLUMNS:
        table.add_column(header, min_width=width, overflow="fold")
    for b in books:
        table.add_row(escape(b.title), escape(b.author), b.year)
    return table


def print_books(books: List[Book], console: Optional[Console] = None) -> None:
    """Print books according to the current output mode.
    - plain: the fixed-width table, or the empty-state banner
    - json: JSON array with title, author, year
    - rich: Rich table, or a Panel for the empty state
    """
    console = console or _console
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        if books:
            console.print(_rich_table(books))
        else:
            console.print(Panel(Text(EMPTY_MESSAGE, justify="center"), box=box.SQUARE, width=57))
    else:
        print(render_book_table(books) if books else render_empty_banner())
