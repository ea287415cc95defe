import logging
from dataclasses import replace
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from book import Book
from config import Settings, settings
from library import Library
from menu import ActionContext, LibraryMenu
from utils.ui_helpers import get_console, print_books, set_output_mode
from utils.validators import TEXT_PATTERN, InputRetriesExceeded

APP_NAME = "Library CLI"

logger = logging.getLogger(__name__)

console = get_console()


# --- Menu actions ---
def add(context: ActionContext, books: List[Book]) -> None:
    """Ask for a book's details and add it to the library."""
    book = context.read_book()
    context.add_book(book)


def search(context: ActionContext, books: List[Book]) -> None:
    """Look a book up by its exact title."""
    context.clear()
    title = context.read("Enter book title: ", TEXT_PATTERN)
    book = context.find_book(title)

    context.clear()
    if book:
        context.console.print("Book found.")
        context.console.print()
        print_books([book], context.console)
    else:
        context.console.print("Book not found.")
    context.pause()


def display(context: ActionContext, books: List[Book]) -> None:
    """Show every book added so far."""
    print_books(books, context.console)
    context.pause()


def build_menu(library: Optional[Library] = None, console: Optional[Console] = None,
               settings: Optional[Settings] = None) -> LibraryMenu:
    """Create the menu with the default actions registered."""
    menu = LibraryMenu(library, console, settings)
    menu.add_action("Add a book", add)
    menu.add_action("Search book", search)
    menu.add_action("Display books", display)
    return menu


def run_menu(settings: Settings = settings) -> None:
    """Blocks until the user picks Exit."""
    build_menu(settings=settings).run()


def _configure_logging(verbose: int, run_settings: Settings) -> None:
    if verbose >= 2 or run_settings.debug:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, run_settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")


# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME, add_completion=False)


@app.command()
def main(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format for book listings: plain | json | rich (default: plain)",
    ),
    no_clear: bool = typer.Option(False, "--no-clear", help="Do not clear the screen between screens"),
    max_retries: Optional[int] = typer.Option(
        None,
        "--max-retries",
        min=0,
        help="Give up after this many invalid answers in a row (0 = never)",
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Log more (-v info, -vv debug)"),
):
    """Start the interactive library menu."""
    run_settings = settings
    if no_clear:
        run_settings = replace(run_settings, clear_screen=False)
    if max_retries is not None:
        run_settings = replace(run_settings, max_input_retries=max_retries)
    _configure_logging(verbose, run_settings)
    if output:
        set_output_mode(output)

    try:
        run_menu(run_settings)
    except InputRetriesExceeded as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)
    except EOFError:
        logger.info("Standard input closed, leaving the menu")
        console.print()
        console.print("[yellow]Input closed, exiting.[/]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
