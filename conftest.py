from dataclasses import replace

import pytest

from config import settings
from library import Library
from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # set_output_mode() writes to the environment; keep each test on plain output
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def lib():
    return Library()


@pytest.fixture
def plain_settings():
    return replace(settings, app_name="library", clear_screen=False, max_input_retries=0)


@pytest.fixture
def feed_input(monkeypatch):
    """Script the lines typed at the prompts; running out behaves like a closed stdin."""
    def _feed(*lines):
        pending = list(lines)

        def fake_input(prompt=""):
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return pending

    return _feed
