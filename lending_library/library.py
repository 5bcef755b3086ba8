from typing import Optional

from lending_library.catalog import Catalog
from lending_library.config import Settings, settings as default_settings
from lending_library.ledger import LendingLedger


SAMPLE_BOOKS = [
    ("Introduction to Algorithms", "Cormen", 2),
    ("Effective Java", "Joshua Bloch", 1),
    ("Clean Code", "Robert C. Martin", 3),
    ("Head First Java", "Kathy Sierra", 2),
]


class Library:
    """Manages the catalog and the lending ledger for one process lifetime."""

    def __init__(self, config: Optional[Settings] = None, seed: Optional[bool] = None) -> None:
        config = config or default_settings
        self.catalog = Catalog()
        self.ledger = LendingLedger(
            self.catalog,
            loan_period_days=config.loan_period_days,
            fine_per_day=config.fine_per_day,
        )
        if seed is None:
            seed = config.seed_sample_data
        if seed:
            self.seed_sample_data()

    def seed_sample_data(self) -> None:
        for title, author, copies in SAMPLE_BOOKS:
            self.catalog.add_book(title, author, copies)

    def get_statistics(self) -> dict:
        books = self.catalog.list_books()
        return {
            "total_titles": len(books),
            "total_copies": sum(b.total_copies for b in books),
            "available_copies": sum(b.available_copies for b in books),
            "active_loans": len(self.ledger),
        }
