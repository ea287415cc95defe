from __future__ import annotations

from dataclasses import asdict, dataclass

from rich.console import Console

from utils.ui_helpers import get_console
from utils.validators import TEXT_PATTERN, YEAR_PATTERN, BookValidator, read_validated


@dataclass(frozen=True)
class Book:
    """A single book held in the library for the current session."""

    title: str
    author: str
    year: str  # four digits, kept as text

    def __post_init__(self) -> None:
        if not BookValidator.validate_text(self.title):
            raise ValueError(f"Invalid title: {self.title!r}")
        if not BookValidator.validate_text(self.author):
            raise ValueError(f"Invalid author: {self.author!r}")
        if not BookValidator.validate_year(self.year):
            raise ValueError(f"Invalid year: {self.year!r}")

    def __str__(self) -> str:
        return f"{self.title} by {self.author} ({self.year})"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_input(cls, console: Console | None = None, max_retries: int | None = None,
                   clear: bool | None = None) -> "Book":
        """Ask for title, author and year in that order and build the book."""
        console = console or get_console()
        console.print("Enter book details: ", markup=False)
        console.print()

        title = read_validated("Enter title: ", TEXT_PATTERN, console=console, max_retries=max_retries, clear=clear)
        author = read_validated("Enter author: ", TEXT_PATTERN, console=console, max_retries=max_retries, clear=clear)
        year = read_validated("Enter year: ", YEAR_PATTERN, console=console, max_retries=max_retries, clear=clear)
        return cls(title=title, author=author, year=year)
