import logging
from typing import Iterator, List, Optional

from book import Book

logger = logging.getLogger(__name__)


class Library:
    """Keeps the books added during this session, in insertion order.

    Nothing is written to disk; the collection is gone once the process ends.
    Titles are not unique, so lookups report the earliest matching book.
    """

    def __init__(self) -> None:
        self.books: List[Book] = []

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Append a book to the end of the collection."""
        self.books.append(book)
        logger.debug("Added %s (%d books in library)", book, len(self.books))

    def find_book(self, title: str) -> Optional[Book]:
        """Return the first book whose title equals ``title`` exactly, or None."""
        for book in self.books:
            if book.title == title:
                logger.debug("Found book for title %r", title)
                return book
        logger.debug("No book with title %r", title)
        return None

    def list_books(self) -> List[Book]:
        """Return a snapshot of all books in insertion order."""
        return list(self.books)

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.list_books())
