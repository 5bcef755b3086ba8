from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

from lending_library.catalog import Catalog
from lending_library.exceptions import LoanNotFoundError, NoCopiesAvailableError
from lending_library.loan import LoanRecord, ReturnReceipt


logger = logging.getLogger(__name__)


class LendingLedger:
    """
    Tracks active loans against a Catalog and computes late fines.

    Rules enforced:
        (1) A book can only be issued while at least one copy is on the shelf
        (2) Books are due ``loan_period_days`` after issue
        (3) Late returns cost ``fine_per_day`` per whole day past the due date
        (4) A book with copies on loan cannot be removed from the catalog
    """

    LOAN_PERIOD_DAYS = 14
    FINE_PER_DAY = 5.0

    def __init__(
        self,
        catalog: Catalog,
        loan_period_days: int = LOAN_PERIOD_DAYS,
        fine_per_day: float = FINE_PER_DAY,
    ) -> None:
        self.catalog = catalog
        self.loan_period_days = loan_period_days
        self.fine_per_day = fine_per_day
        self._loans: List[LoanRecord] = []
        catalog.loan_counter = self.active_loans_for

    def __len__(self) -> int:
        return len(self._loans)

    def issue_book(self, book_id: int, borrower_name: str, today: date) -> date:
        """
        Lends one copy of a book and returns its due date.

        Raises:
            BookNotFoundError
            NoCopiesAvailableError
        """
        book = self.catalog.get(book_id)
        if book.available_copies <= 0:
            logger.warning(f"Issue refused: no copies of book id={book_id} for {borrower_name!r}")
            raise NoCopiesAvailableError(book_id)

        due_date = today + timedelta(days=self.loan_period_days)
        self.catalog.adjust_availability(book_id, -1)
        self._loans.append(LoanRecord(book_id, borrower_name, today, due_date))

        logger.info(f"Book issued: id={book_id} borrower={borrower_name!r} due={due_date}")
        return due_date

    def return_book(self, book_id: int, borrower_name: str, today: date) -> ReturnReceipt:
        """
        Closes the borrower's loan for a book and works out the fine.

        When the borrower holds several copies of the same book, the loan
        issued first is the one closed.

        Raises:
            LoanNotFoundError
        """
        loan = self._find_loan(book_id, borrower_name)
        if loan is None:
            logger.warning(f"Return refused: no loan of book id={book_id} for {borrower_name!r}")
            raise LoanNotFoundError(book_id, borrower_name)

        days_late = max(0, (today - loan.due_date).days)
        fine = days_late * self.fine_per_day if days_late > 0 else 0.0

        self.catalog.adjust_availability(book_id, +1)
        self._loans.remove(loan)

        logger.info(
            f"Book returned: id={book_id} borrower={borrower_name!r} "
            f"days_late={days_late} fine={fine:.2f}"
        )
        return ReturnReceipt(return_date=today, days_late=days_late, fine=fine)

    def active_loans_for(self, book_id: int) -> int:
        return sum(1 for loan in self._loans if loan.book_id == book_id)

    def list_active(self) -> List[LoanRecord]:
        """All active loans in issue order (a fresh list on every call)."""
        return list(self._loans)

    # Internal Helpers
    def _find_loan(self, book_id: int, borrower_name: str) -> Optional[LoanRecord]:
        for loan in self._loans:
            if loan.book_id == book_id and loan.held_by(borrower_name):
                return loan
        return None
