import logging
import re
from typing import Optional

from rich.console import Console

from utils.ui_helpers import clear_screen, get_console

logger = logging.getLogger(__name__)

# Free text: letters, digits and spaces only
TEXT_PATTERN = re.compile(r"[a-zA-Z0-9 ]+")
# Publication year: exactly four ASCII digits
YEAR_PATTERN = re.compile(r"[0-9]{4}")
CHOICE_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

INVALID_INPUT_MESSAGE = "Invalid input. Please try again."


class InputRetriesExceeded(ValueError):
    """Raised when a prompt got too many invalid answers in a row."""

    def __init__(self, prompt: str, attempts: int) -> None:
        self.prompt = prompt
        self.attempts = attempts
        super().__init__(f"Gave up on {prompt.strip()!r} after {attempts} invalid attempts.")


class BookValidator:
    """Field checks shared by the prompts and by code that builds books directly."""

    @staticmethod
    def validate_text(text: Optional[str]) -> bool:
        # titles and authors: no punctuation, not empty
        return text is not None and TEXT_PATTERN.fullmatch(text) is not None

    @staticmethod
    def validate_year(year: Optional[str]) -> bool:
        return year is not None and YEAR_PATTERN.fullmatch(year) is not None


def parse_choice(raw: Optional[str], upper: int) -> Optional[int]:
    """Return the menu number typed by the user, or None if it is not in 1..upper."""
    if raw is None or not CHOICE_PATTERN.fullmatch(raw):
        return None
    try:
        choice = int(raw)
    except ValueError:
        # more digits than int() will convert
        return None
    if choice < 1 or choice > upper:
        return None
    return choice


def read_validated(prompt: str, pattern: re.Pattern, *, console: Optional[Console] = None,
                   max_retries: Optional[int] = None, clear: Optional[bool] = None) -> str:
    """Prompt until the whole line matches ``pattern`` and return it.

    Every rejected line clears the screen and shows the invalid-input message
    before asking again. Without ``max_retries`` this never gives up.
    """
    console = console or get_console()
    attempts = 0
    while True:
        value = console.input(prompt, markup=False)
        if pattern.fullmatch(value):
            return value

        attempts += 1
        logger.debug("Rejected input for %r (attempt %d)", prompt, attempts)
        if max_retries and attempts >= max_retries:
            logger.warning("Retry limit of %d reached for %r", max_retries, prompt)
            raise InputRetriesExceeded(prompt, attempts)

        clear_screen(console, clear)
        console.print(INVALID_INPUT_MESSAGE)
