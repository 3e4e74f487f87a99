import logging
from typing import List, Optional

import typer

from config import settings
from libcatalog.book import Book, BookBuilder
from libcatalog.library import LibraryError, LibraryManager
from libcatalog.services.notification_service import get_notification_service
from libcatalog.services.observers import Patron
from libcatalog.ui_helpers import print_list_result, print_loans_result, print_stats_result, set_output_mode

APP_NAME = settings.app_name

DEMO_BOOKS = [
    ("The Great Gatsby", "F. Scott Fitzgerald", "123456789"),
    ("1984", "George Orwell", "987654321"),
    ("Animal Farm", "George Orwell", "9780451526342"),
]


def build_library(channel: Optional[str] = None) -> LibraryManager:
    """Create a fresh manager wired to the configured notification channel."""
    return LibraryManager(get_notification_service(channel))


def seed_demo_catalog(library: LibraryManager) -> List[Book]:
    builder = BookBuilder()
    books = []
    for title, author, identifier in DEMO_BOOKS:
        book = builder.set_title(title).set_author(author).set_identifier(identifier).build()
        books.append(library.add_book(book))
    return books


# --- Typer CLI Application ---
app = typer.Typer(help=APP_NAME)


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Global CLI options (output mode, logging)."""
    level = logging.DEBUG if verbose or settings.debug else settings.log_level
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    if output:
        set_output_mode(output)


@app.command("demo")
def cli_demo(
    channel: Optional[str] = typer.Option(None, "--channel", "-c", help="Notification channel: email | console"),
    borrower: str = typer.Option("user01", "--borrower", "-b", help="Borrower and subscriber id"),
):
    """Run the example scenario: subscribe, add books, loan and return."""
    try:
        library = build_library(channel)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    patron = Patron(borrower)
    library.add_observer(patron)
    seed_demo_catalog(library)
    print(f"{patron.user_id} was notified about {len(patron.notifications)} new book(s).")

    duplicate = BookBuilder().set_title("1984").set_author("George Orwell").set_identifier("987654321").build()
    try:
        library.add_book(duplicate)
    except LibraryError as e:
        print(f"Error: {e}")

    loan = library.loan_book("987654321", borrower)
    if loan:
        print(f"Loaned 987654321 to {borrower}.")
    print_loans_result(library.list_loans())

    if library.return_book("987654321", borrower):
        print(f"{borrower} returned 987654321.")

    print_list_result(library.list_books())
    print_stats_result(library.get_statistics())


@app.command("search")
def cli_search(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Substring of the title"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Substring of the author"),
    identifier: Optional[str] = typer.Option(None, "--identifier", "-i", help="Exact identifier"),
):
    """Search the demo catalog. Given criteria are combined."""
    if title is None and author is None and identifier is None:
        print("Provide --title, --author or --identifier.")
        raise typer.Exit(code=2)

    library = build_library()
    seed_demo_catalog(library)

    results = library.list_books()
    if title is not None:
        results = [b for b in library.search_by_title(title) if b in results]
    if author is not None:
        results = [b for b in library.search_by_author(author) if b in results]
    if identifier is not None:
        results = [b for b in library.search_by_identifier(identifier) if b in results]

    if not results:
        print("No books match the criteria.")
        return
    print_list_result(results)


if __name__ == "__main__":
    app()
