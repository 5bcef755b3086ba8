from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class LoanRecord:
    """One copy of a book held by a borrower between issue and return."""
    book_id: int
    borrower_name: str
    issue_date: date
    due_date: date

    def __str__(self) -> str:
        return (
            f"BookID:{self.book_id} | Borrower:{self.borrower_name} | "
            f"Issued:{self.issue_date.isoformat()} | Due:{self.due_date.isoformat()}"
        )

    def held_by(self, borrower_name: str) -> bool:
        return self.borrower_name.casefold() == borrower_name.casefold()

    def to_dict(self) -> dict:
        return {
            "book_id": self.book_id,
            "borrower_name": self.borrower_name,
            "issue_date": self.issue_date.isoformat(),
            "due_date": self.due_date.isoformat(),
        }


@dataclass(frozen=True)
class ReturnReceipt:
    """Outcome of a successful return."""
    return_date: date
    days_late: int
    fine: float

    @property
    def on_time(self) -> bool:
        return self.days_late == 0

    def to_dict(self) -> dict:
        return {
            "return_date": self.return_date.isoformat(),
            "days_late": self.days_late,
            "fine": self.fine,
        }
