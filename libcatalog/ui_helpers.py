import os
import json
from typing import Any, Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import settings
from libcatalog.book import Book
from libcatalog.loan import Loan

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.cli_output).lower()


def print_list_result(books: List[Book]) -> None:
    """Print books in the current output mode.
    - plain: 'ID - Title by Author' lines, or 'No books in library.'
    - json: JSON array of identifier, title, author
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books in library.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        for b in books:
            table.add_row(b.identifier, b.title, b.author)
        _console.print(table)
    else:
        for b in books:
            print(f"{b.identifier} - {b.title} by {b.author}")


def print_loans_result(loans: List[Loan]) -> None:
    mode = get_output_mode()

    if not loans:
        print("No active loans.")
        return

    if mode == "json":
        print(json.dumps([loan.to_dict() for loan in loans], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📖 Loans", header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Borrower", style="white")
        table.add_column("Since", style="dim")
        for loan in loans:
            table.add_row(loan.identifier, loan.borrower_id, loan.loaned_at.strftime("%Y-%m-%d %H:%M"))
        _console.print(table)
    else:
        for loan in loans:
            print(f"{loan.identifier} -> {loan.borrower_id}")


def print_stats_result(stats: Dict[str, Any]) -> None:
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_books", 0)
    authors = stats.get("unique_authors", 0)
    loans = stats.get("active_loans", 0)

    if mode == "json":
        print(json.dumps({"total_books": total, "unique_authors": authors, "active_loans": loans}, ensure_ascii=False))
    elif mode == "rich":
        content = f"[bold]Total Books:[/] {total}\n[bold]Unique Authors:[/] {authors}\n[bold]Active Loans:[/] {loans}"
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Unique Authors: {authors}")
        print(f"Active Loans: {loans}")
