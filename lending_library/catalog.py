from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional

from lending_library.book import BookRecord
from lending_library.exceptions import AvailabilityError, BookInUseError, BookNotFoundError


logger = logging.getLogger(__name__)


class SearchField(Enum):
    TITLE = "title"
    AUTHOR = "author"


class Catalog:
    """Owns the book records, keyed by id and kept in insertion order."""

    def __init__(self) -> None:
        self._books: Dict[int, BookRecord] = {}
        self._next_id = 1
        # Bound by the LendingLedger that lends from this catalog.
        self.loan_counter: Optional[Callable[[int], int]] = None

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(self.list_books())

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    # ------------------------- Core operations ------------------------- #
    def add_book(self, title: str, author: str, copies: int) -> BookRecord:
        """Add a book with ``copies`` copies, all on the shelf. Arguments are pre-validated."""
        book = BookRecord(self._next_id, title, author, copies)
        self._next_id += 1
        self._books[book.id] = book
        logger.info(f"Book added: id={book.id} title={book.title!r} copies={copies}")
        return book

    def remove_book(self, book_id: int) -> BookRecord:
        """Remove a book that has no copies out on loan.

        Raises:
            BookNotFoundError: no book with ``book_id``.
            BookInUseError: at least one active loan references the book.
        """
        book = self.get(book_id)
        active = self.loan_counter(book_id) if self.loan_counter else 0
        if active > 0:
            logger.warning(f"Refusing to remove book id={book_id}: {active} active loan(s)")
            raise BookInUseError(book_id, active)
        del self._books[book_id]
        logger.info(f"Book removed: id={book_id} title={book.title!r}")
        return book

    def get(self, book_id: int) -> BookRecord:
        book = self._books.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def list_books(self) -> List[BookRecord]:
        """All books in insertion order (a fresh list on every call)."""
        return list(self._books.values())

    def search(self, field: SearchField, query: str) -> List[BookRecord]:
        """Case-insensitive substring search on title or author."""
        needle = query.lower()
        if field is SearchField.TITLE:
            return [b for b in self._books.values() if needle in b.title.lower()]
        return [b for b in self._books.values() if needle in b.author.lower()]

    # ------------------------- Ledger hooks ------------------------- #
    def adjust_availability(self, book_id: int, delta: int) -> BookRecord:
        """Shift a book's available copies by ``delta``; only the ledger calls this."""
        book = self.get(book_id)
        updated = book.available_copies + delta
        if not 0 <= updated <= book.total_copies:
            raise AvailabilityError(
                f"available copies for book {book_id} would become {updated} "
                f"(total {book.total_copies})"
            )
        book.available_copies = updated
        return book
