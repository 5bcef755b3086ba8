from datetime import date

from lending_library.config import Settings
from lending_library.library import Library, SAMPLE_BOOKS


def test_empty_library(lib):
    assert lib.catalog.list_books() == []
    assert lib.ledger.list_active() == []


def test_seeded_library_has_sample_books(seeded_lib):
    books = seeded_lib.catalog.list_books()
    assert [(b.title, b.author, b.total_copies) for b in books] == SAMPLE_BOOKS
    assert [b.id for b in books] == [1, 2, 3, 4]


def test_library_uses_configured_lending_rules():
    config = Settings(loan_period_days=21, fine_per_day=1.25, seed_sample_data=True)
    lib = Library(config)
    assert len(lib.catalog) == 4
    due = lib.ledger.issue_book(2, "Alice", date(2025, 3, 1))
    assert due == date(2025, 3, 22)
    assert lib.ledger.return_book(2, "Alice", date(2025, 3, 24)).fine == 2.5


def test_ledger_guards_catalog_removal(lib):
    book = lib.catalog.add_book("Refactoring", "Martin Fowler", 1)
    lib.ledger.issue_book(book.id, "Alice", date(2025, 1, 1))
    assert lib.catalog.loan_counter(book.id) == 1


def test_get_statistics(seeded_lib):
    seeded_lib.ledger.issue_book(3, "Alice", date(2025, 1, 1))
    assert seeded_lib.get_statistics() == {
        "total_titles": 4,
        "total_copies": 8,
        "available_copies": 7,
        "active_loans": 1,
    }
