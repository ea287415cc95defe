import json

from book import Book
from utils.ui_helpers import (
    CONTINUE_PROMPT,
    get_output_mode,
    print_books,
    render_book_table,
    render_empty_banner,
    set_output_mode,
    wait_for_enter,
)

HEADER = [
    "┌─────────────────────┬─────────────────────┬───────────┐",
    "│ Title               │ Author              │ Year      │",
    "├─────────────────────┼─────────────────────┼───────────┤",
]
FOOTER = "└─────────────────────┴─────────────────────┴───────────┘"
DUNE_ROW = "│ Dune                │ Herbert             │ 1965      │"


def test_render_book_table_single_row():
    table = render_book_table([Book("Dune", "Herbert", "1965")])
    assert table.splitlines() == HEADER + [DUNE_ROW, FOOTER]


def test_render_book_table_keeps_order():
    table = render_book_table([Book("Dune", "Herbert", "1965"), Book("Emma", "Jane Austen", "1815")])
    rows = table.splitlines()[3:-1]
    assert rows == [DUNE_ROW, "│ Emma                │ Jane Austen         │ 1815      │"]


def test_render_book_table_long_title_overflows():
    title = "A Very Long Title Indeed Yes"
    row = render_book_table([Book(title, "Someone", "2000")]).splitlines()[3]
    assert row.startswith(f"│ {title}│ Someone")


def test_render_empty_banner():
    assert render_empty_banner().splitlines() == [
        "┌───────────────────────────────────────────────────────┐",
        "│                  No books to display                  │",
        "└───────────────────────────────────────────────────────┘",
    ]


def test_print_books_plain(capsys):
    print_books([Book("Dune", "Herbert", "1965")])
    assert capsys.readouterr().out == render_book_table([Book("Dune", "Herbert", "1965")]) + "\n"


def test_print_books_plain_empty(capsys):
    print_books([])
    assert "No books to display" in capsys.readouterr().out


def test_print_books_json(capsys):
    set_output_mode("json")
    print_books([Book("Dune", "Herbert", "1965")])
    assert json.loads(capsys.readouterr().out) == [{"title": "Dune", "author": "Herbert", "year": "1965"}]


def test_print_books_json_empty(capsys):
    set_output_mode("json")
    print_books([])
    assert json.loads(capsys.readouterr().out) == []


def test_print_books_rich(capsys):
    set_output_mode("rich")
    print_books([Book("Dune", "Herbert", "1965")])
    out = capsys.readouterr().out
    assert "Dune" in out
    assert "Herbert" in out
    assert "1965" in out


def test_set_output_mode_ignores_unknown_values():
    set_output_mode("rich")
    set_output_mode("yaml")
    assert get_output_mode() == "rich"


def test_wait_for_enter_consumes_one_line(feed_input, capsys):
    pending = feed_input("", "left over")
    wait_for_enter()

    assert CONTINUE_PROMPT in capsys.readouterr().out
    assert pending == ["left over"]


def test_print_books_rich_empty(capsys):
    set_output_mode("rich")
    print_books([])
    out = capsys.readouterr().out
    assert "No books to display" in out
    assert "┌" in out
