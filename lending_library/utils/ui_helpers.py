import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()

def print_book_list(books: List[Any], empty_message: str = "No books in library.") -> None:
    """Print books in the current output mode.
    - plain: one 'ID:1 | "Title" by Author | copies: N' line per book
    - json: JSON array of the book records
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Available", justify="right")
        for b in books:
            table.add_row(str(b.id), escape(b.title), escape(b.author), f"{b.available_copies}/{b.total_copies}")
        _console.print(table)
    else:
        for b in books:
            print(f"  {b}")

def print_loan_list(loans: List[Any]) -> None:
    """Print active loans in the current output mode."""
    mode = get_output_mode()

    if not loans:
        print("No books are currently issued.")
        return

    if mode == "json":
        print(json.dumps([loan.to_dict() for loan in loans], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📖 Issued Books", show_lines=True, header_style="bold cyan")
        table.add_column("Book ID", style="magenta", no_wrap=True)
        table.add_column("Borrower", style="white")
        table.add_column("Issued")
        table.add_column("Due")
        for loan in loans:
            table.add_row(str(loan.book_id), escape(loan.borrower_name),
                          loan.issue_date.isoformat(), loan.due_date.isoformat())
        _console.print(table)
    else:
        for loan in loans:
            print(f"  {loan}")

def print_return_result(receipt: Any) -> None:
    """Report a return: date, then either the fine or an on-time note."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(receipt.to_dict(), ensure_ascii=False))
        return

    lines = [f"Book returned on: {receipt.return_date.isoformat()}"]
    if receipt.fine > 0:
        lines.append(f"Late by {receipt.days_late} day(s). Fine = {receipt.fine:.2f}")
    else:
        lines.append("Returned on time. No fine.")

    if mode == "rich":
        _console.print(Panel.fit("\n".join(lines), title="📥 Return",
                                 border_style="yellow" if receipt.fine > 0 else "green"))
    else:
        for line in lines:
            print(line)

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    labels = {
        "total_titles": "Titles",
        "total_copies": "Total Copies",
        "available_copies": "Available Copies",
        "active_loans": "Active Loans",
    }

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = "\n".join(f"[bold]{label}:[/] {stats.get(key, 0)}" for key, label in labels.items())
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        for key, label in labels.items():
            print(f"{label}: {stats.get(key, 0)}")
