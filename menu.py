"""
Menu loop for the Library CLI.

A LibraryMenu owns the book store and an ordered list of actions. Every pass
renders the numbered actions followed by a fixed "Exit" entry, reads a choice
and hands the chosen action an ActionContext plus a snapshot of the books.
Actions steer the loop by returning an ActionSignal instead of touching the
menu's state.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from rich.console import Console

from book import Book
from config import Settings, settings as default_settings
from library import Library
from utils.ui_helpers import clear_screen, get_console, wait_for_enter
from utils.validators import INVALID_INPUT_MESSAGE, InputRetriesExceeded, parse_choice, read_validated

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Enter your choice: "


class ActionSignal(Enum):
    CONTINUE = "continue"
    EXIT = "exit"


class MenuState(Enum):
    RUNNING = "running"
    EXITING = "exiting"


@dataclass
class ActionContext:
    """What an action is allowed to touch while it runs."""

    library: Library
    console: Console
    settings: Settings = field(default_factory=lambda: default_settings)

    def add_book(self, book: Book) -> None:
        self.library.add_book(book)

    def list_books(self) -> List[Book]:
        return self.library.list_books()

    def find_book(self, title: str) -> Optional[Book]:
        return self.library.find_book(title)

    def read(self, prompt: str, pattern: re.Pattern) -> str:
        return read_validated(prompt, pattern, console=self.console,
                              max_retries=self.settings.retry_limit, clear=self.settings.clear_screen)

    def read_book(self) -> Book:
        return Book.from_input(self.console, self.settings.retry_limit, self.settings.clear_screen)

    def clear(self) -> None:
        clear_screen(self.console, self.settings.clear_screen)

    def pause(self) -> None:
        wait_for_enter(self.console)


ActionHandler = Callable[[ActionContext, List[Book]], Optional[ActionSignal]]


@dataclass(frozen=True)
class LibraryAction:
    label: str
    handler: ActionHandler


def exit_library(context: ActionContext, books: List[Book]) -> ActionSignal:
    context.clear()
    context.console.print(f"Thank you for using the {context.settings.app_name}!", markup=False)
    return ActionSignal.EXIT


class LibraryMenu:
    """Numbered menu over the registered actions, always ending with Exit."""

    def __init__(self, library: Optional[Library] = None, console: Optional[Console] = None,
                 settings: Optional[Settings] = None) -> None:
        self.library = library if library is not None else Library()
        self.console = console or get_console()
        self.settings = settings or default_settings
        self.context = ActionContext(self.library, self.console, self.settings)
        self.exit_action = LibraryAction("Exit", exit_library)
        self.state = MenuState.RUNNING
        self._actions: List[LibraryAction] = []

    def add_action(self, label: str, handler: ActionHandler) -> None:
        """Register an action; it is listed after the ones added before it."""
        self._actions.append(LibraryAction(label, handler))

    @property
    def actions(self) -> List[LibraryAction]:
        return list(self._actions)

    def menu_entries(self) -> List[LibraryAction]:
        # Exit is appended on every render, never stored with the actions
        return [*self._actions, self.exit_action]

    def render_menu(self) -> None:
        self.console.print(f"Welcome to the {self.settings.app_name}!", markup=False)
        self.console.print()
        self.console.print("Please choose an action:")
        for index, action in enumerate(self.menu_entries(), start=1):
            self.console.print(f"{index}. {action.label}", markup=False, highlight=False)
        self.console.print()

    def read_choice(self) -> int:
        """Prompt until the user picks one of the listed numbers."""
        upper = len(self.menu_entries())
        attempts = 0
        while True:
            raw = self.console.input(CHOICE_PROMPT, markup=False)
            choice = parse_choice(raw, upper)
            if choice is not None:
                return choice

            attempts += 1
            logger.debug("Rejected menu choice %r (valid: 1-%d)", raw, upper)
            limit = self.settings.retry_limit
            if limit and attempts >= limit:
                logger.warning("Retry limit of %d reached for the menu", limit)
                raise InputRetriesExceeded(CHOICE_PROMPT, attempts)

            self.context.clear()
            self.render_menu()
            self.console.print(INVALID_INPUT_MESSAGE)

    def dispatch(self, choice: int) -> ActionSignal:
        action = self.menu_entries()[choice - 1]
        if action is not self.exit_action:
            self.context.clear()
        logger.info("Running menu action %r", action.label)
        signal = action.handler(self.context, self.library.list_books())
        return signal or ActionSignal.CONTINUE

    def run(self) -> None:
        """Show the menu and run actions until one of them asks to exit."""
        self.state = MenuState.RUNNING
        while self.state is MenuState.RUNNING:
            self.context.clear()
            self.render_menu()
            if self.dispatch(self.read_choice()) is ActionSignal.EXIT:
                self.state = MenuState.EXITING
        logger.info("Menu closed")
