import logging
import os
from datetime import date
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich import box
import typer

from lending_library.catalog import SearchField
from lending_library.config import settings
from lending_library.exceptions import LibraryError
from lending_library.library import Library
from lending_library.utils.ui_helpers import (
    set_output_mode,
    print_book_list,
    print_loan_list,
    print_return_result,
    print_stats_result,
)
from lending_library.utils.validators import NumberValidator, TextValidator

APP_NAME = "Library CLI"

console = Console()
logger = logging.getLogger(__name__)

# Detect test environment
def _is_test_env() -> bool:
    return ("PYTEST_CURRENT_TEST" in os.environ) or (os.environ.get("LIB_CLI_TEST_MODE") == "1")

def _today() -> date:
    return date.today()

def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

# Library singleton for the lifetime of the process
class LibraryManager:
    _instance: Optional[Library] = None

    @classmethod
    def get_instance(cls) -> Library:
        """Get the Library singleton, creating it on first use."""
        if cls._instance is None:
            cls._instance = Library()
            logger.info("Library instance created")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next call starts from a fresh catalog."""
        cls._instance = None

# --- Input helpers (re-prompt until the value is valid) ---
def read_non_empty(prompt: str) -> str:
    while True:
        raw = Prompt.ask(prompt, console=console)
        if TextValidator.is_non_empty(raw):
            return TextValidator.clean(raw)
        console.print("[yellow]Input cannot be empty. Try again.[/]")

def read_int(prompt: str) -> int:
    while True:
        value = NumberValidator.parse_int(Prompt.ask(prompt, console=console))
        if value is not None:
            return value
        console.print("[yellow]Invalid number. Try again.[/]")

def read_positive_int(prompt: str) -> int:
    while True:
        raw = Prompt.ask(prompt, console=console)
        value = NumberValidator.parse_positive_int(raw)
        if value is not None:
            return value
        if NumberValidator.parse_int(raw) is None:
            console.print("[yellow]Invalid number. Try again.[/]")
        else:
            console.print("[yellow]Please enter a positive integer.[/]")

def read_search_field() -> SearchField:
    choice = Prompt.ask("Search by (1) Title or (2) Author?", choices=["1", "2"], console=console)
    return SearchField.TITLE if choice == "1" else SearchField.AUTHOR

# --- Typer CLI Application ---
app = typer.Typer(help="Library CLI")

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Global options for the CLI (e.g. output mode). Without a command, start the menu."""
    _configure_logging()
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu()

@app.command("menu")
def cli_menu():
    """Start the interactive admin/patron menu."""
    run_menu()

@app.command("list")
def cli_list():
    """List all books in the catalog."""
    print_book_list(LibraryManager.get_instance().catalog.list_books())

@app.command("search")
def cli_search(
    query: str = typer.Argument(..., help="Search text"),
    author: bool = typer.Option(False, "--author", "-a", help="Match the author instead of the title"),
):
    """Search the catalog by title (default) or author."""
    query = TextValidator.clean(query)
    if not query:
        print("Search text cannot be empty.")
        raise typer.Exit(code=2)
    field = SearchField.AUTHOR if author else SearchField.TITLE
    books = LibraryManager.get_instance().catalog.search(field, query)
    print_book_list(books, empty_message="No results found.")

@app.command("stats")
def cli_stats():
    """Show catalog and lending statistics."""
    print_stats_result(LibraryManager.get_instance().get_statistics())

# --- Admin actions ---
def admin_login() -> bool:
    password = Prompt.ask("Enter admin password", password=not _is_test_env(), console=console)
    return TextValidator.clean(password) == settings.admin_password

def add_book():
    """Add a new title with a number of copies."""
    lib = LibraryManager.get_instance()
    console.print("\n[bold]-- Add New Book --[/]")
    title = read_non_empty("Enter title")
    author = read_non_empty("Enter author")
    copies = read_positive_int("Enter number of copies")
    book = lib.catalog.add_book(title, author, copies)
    console.print(f"[green]Book added successfully.[/] {escape(str(book))}")

def remove_book():
    """Remove a title that has no copies out on loan."""
    lib = LibraryManager.get_instance()
    console.print("\n[bold]-- Remove Book --[/]")
    list_all_books()
    if not len(lib.catalog):
        return
    book_id = read_int("Enter book ID to remove")
    book = lib.catalog.remove_book(book_id)
    console.print(f"[green]Removed book:[/] {escape(book.title)}")

def view_issued_books():
    lib = LibraryManager.get_instance()
    console.print("\n[bold]-- Issued Books --[/]")
    print_loan_list(lib.ledger.list_active())

# --- Patron actions ---
def issue_book():
    """Lend one copy of a book to the patron."""
    lib = LibraryManager.get_instance()
    console.print("\n[bold]-- Issue Book --[/]")
    if not len(lib.catalog):
        console.print("[yellow]Library has no books.[/]")
        return
    borrower = read_non_empty("Enter your name")
    list_all_books()
    book_id = read_int("Enter book ID to issue")
    due_date = lib.ledger.issue_book(book_id, borrower, _today())
    console.print(f"[green]Book issued successfully.[/] Due date: {due_date.isoformat()}")

def return_book():
    """Take a copy back and report any late fine."""
    lib = LibraryManager.get_instance()
    console.print("\n[bold]-- Return Book --[/]")
    if not len(lib.ledger):
        console.print("[yellow]No issued books exist.[/]")
        return
    borrower = read_non_empty("Enter your name")
    book_id = read_int("Enter book ID to return")
    print_return_result(lib.ledger.return_book(book_id, borrower, _today()))

# --- Shared actions ---
def search_books():
    """Search books by title or author."""
    lib = LibraryManager.get_instance()
    console.print("\n[bold]-- Search Books --[/]")
    if not len(lib.catalog):
        console.print("[yellow]Library has no books.[/]")
        return
    field = read_search_field()
    query = read_non_empty("Enter search text")
    books = lib.catalog.search(field, query)
    if books:
        print("Search results:")
    print_book_list(books, empty_message="No results found.")

def list_all_books():
    console.print("\n[bold]-- Books in Library --[/]")
    print_book_list(LibraryManager.get_instance().catalog.list_books())

def _run_action(action) -> None:
    """Run one menu action, reporting library errors instead of leaving the menu."""
    try:
        action()
    except LibraryError as e:
        console.print(f"[bold red]{escape(str(e))}[/]")

def _render_menu(title: str, items) -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, _ in items:
        table.add_row(f"[reverse]{key}[/]", label)
    console.print(Panel(table, title=title, border_style="cyan", box=box.HEAVY, padding=(0, 2)))

def _menu_loop(title: str, items, farewell: Optional[str] = None) -> None:
    actions = {key: action for key, _, action in items}
    while True:
        _render_menu(title, items)
        choice = Prompt.ask("Choose", choices=list(actions), console=console)
        action = actions[choice]
        if action is None:
            if farewell:
                console.print(farewell)
            return
        _run_action(action)

def admin_menu():
    console.print("[green]Admin logged in.[/]")
    _menu_loop("Admin Menu", [
        ("1", "Add Book", add_book),
        ("2", "Remove Book", remove_book),
        ("3", "View Issued Books", view_issued_books),
        ("4", "List All Books", list_all_books),
        ("0", "Logout", None),
    ], farewell="Admin logged out.")

def patron_menu():
    _menu_loop("Patron Menu", [
        ("1", "Issue Book", issue_book),
        ("2", "Return Book", return_book),
        ("3", "Search Books", search_books),
        ("4", "List All Books", list_all_books),
        ("0", "Back to Main Menu", None),
    ])

def admin_entry():
    if admin_login():
        admin_menu()
    else:
        console.print("[red]Admin login failed.[/]")

def run_menu():
    """Main menu of the interactive library session."""
    console.print(f"[bold]=== Welcome to {escape(settings.app_name)} ===[/]")
    _menu_loop(APP_NAME, [
        ("1", "Admin Login", admin_entry),
        ("2", "Patron Menu", patron_menu),
        ("3", "Search Books", search_books),
        ("4", "List All Books", list_all_books),
        ("0", "Exit", None),
    ], farewell="[green]Goodbye![/]")

def main():
    app()

if __name__ == "__main__":
    main()
