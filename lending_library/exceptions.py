class LibraryError(Exception):
    """Base exception for recoverable library errors."""


class BookNotFoundError(LibraryError, LookupError):
    """Requested book id does not exist in the catalog."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"No book with ID {book_id}.")
        self.book_id = book_id


class LoanNotFoundError(LibraryError, LookupError):
    """No active loan matches the given book id and borrower."""

    def __init__(self, book_id: int, borrower_name: str) -> None:
        super().__init__(
            f"No matching issue record found for {borrower_name} and book ID {book_id}."
        )
        self.book_id = book_id
        self.borrower_name = borrower_name


class NoCopiesAvailableError(LibraryError):
    """Every copy of the book is currently on loan."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"No copies of book ID {book_id} available right now.")
        self.book_id = book_id


class BookInUseError(LibraryError):
    """Book cannot be removed while copies are on loan."""

    def __init__(self, book_id: int, active_loans: int) -> None:
        super().__init__(
            f"Cannot remove book ID {book_id}. There are currently {active_loans} issued copy(ies)."
        )
        self.book_id = book_id
        self.active_loans = active_loans


class AvailabilityError(AssertionError):
    """available_copies would leave [0, total_copies]; a caller bug, never recoverable."""
