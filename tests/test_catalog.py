import pytest

from lending_library.catalog import Catalog, SearchField
from lending_library.exceptions import AvailabilityError, BookInUseError, BookNotFoundError


@pytest.fixture
def catalog():
    c = Catalog()
    c.add_book("Head First Java", "Kathy Sierra", 2)
    c.add_book("Clean Code", "Robert C. Martin", 3)
    return c


def test_add_book_assigns_sequential_ids():
    c = Catalog()
    first = c.add_book("A", "X", 1)
    second = c.add_book("B", "Y", 4)
    assert (first.id, second.id) == (1, 2)
    assert second.total_copies == 4
    assert second.available_copies == 4


def test_ids_are_never_reused(catalog):
    catalog.remove_book(2)
    book = catalog.add_book("Refactoring", "Martin Fowler", 1)
    assert book.id == 3


def test_get_unknown_raises_not_found(catalog):
    with pytest.raises(BookNotFoundError):
        catalog.get(99)


def test_list_books_in_insertion_order(catalog):
    catalog.add_book("Algorithms", "Cormen", 1)
    assert [b.title for b in catalog.list_books()] == ["Head First Java", "Clean Code", "Algorithms"]


def test_list_books_is_restartable(catalog):
    listing = catalog.list_books()
    assert [b.id for b in listing] == [b.id for b in listing] == [1, 2]
    assert [b.id for b in catalog] == [1, 2]


def test_search_title_is_case_insensitive_substring(catalog):
    results = catalog.search(SearchField.TITLE, "java")
    assert [b.title for b in results] == ["Head First Java"]


def test_search_author(catalog):
    results = catalog.search(SearchField.AUTHOR, "MARTIN")
    assert [b.title for b in results] == ["Clean Code"]


def test_search_without_match_returns_empty(catalog):
    assert catalog.search(SearchField.TITLE, "python") == []


def test_remove_book(catalog):
    removed = catalog.remove_book(1)
    assert removed.title == "Head First Java"
    assert 1 not in catalog
    assert [b.id for b in catalog.list_books()] == [2]


def test_remove_unknown_raises_not_found(catalog):
    with pytest.raises(BookNotFoundError):
        catalog.remove_book(42)


def test_remove_consults_loan_counter(catalog):
    catalog.loan_counter = lambda book_id: 2 if book_id == 1 else 0
    with pytest.raises(BookInUseError) as excinfo:
        catalog.remove_book(1)
    assert excinfo.value.active_loans == 2
    assert 1 in catalog


def test_adjust_availability_within_bounds(catalog):
    catalog.adjust_availability(1, -1)
    assert catalog.get(1).available_copies == 1
    catalog.adjust_availability(1, +1)
    assert catalog.get(1).available_copies == 2


@pytest.mark.parametrize("delta", [+1, -3])
def test_adjust_availability_out_of_bounds_is_fatal(catalog, delta):
    with pytest.raises(AvailabilityError):
        catalog.adjust_availability(1, delta)
    assert catalog.get(1).available_copies == 2


def test_book_line_format(catalog):
    assert str(catalog.get(2)) == 'ID:2 | "Clean Code" by Robert C. Martin | copies: 3'
