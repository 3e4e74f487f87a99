import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from config import settings
from libcatalog.book import Book
from libcatalog.loan import Loan
from libcatalog.services.notification_service import NotificationService, get_notification_service
from libcatalog.services.observers import BookObserver
from libcatalog.validators import ISBNValidator

logger = logging.getLogger(__name__)


class LibraryManager:
    """Owns the catalog, the loan ledger and the observer list.

    Build one explicitly with ``LibraryManager(notification_service)`` and pass
    it around, or use ``LibraryManager.get_instance()`` for the shared
    process-wide manager.
    """

    _instance: Optional["LibraryManager"] = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        notification_service: NotificationService,
        *,
        allow_concurrent_loans: Optional[bool] = None,
        validate_identifiers: Optional[bool] = None,
    ) -> None:
        self.notification_service = notification_service
        self.allow_concurrent_loans = (
            settings.allow_concurrent_loans if allow_concurrent_loans is None else allow_concurrent_loans
        )
        self.validate_identifiers = (
            settings.validate_identifiers if validate_identifiers is None else validate_identifiers
        )
        self._books: List[Book] = []
        self._loans: List[Loan] = []
        self._observers: List[BookObserver] = []
        self._lock = threading.RLock()

    # ------------------------- Shared instance ------------------------- #
    @classmethod
    def get_instance(cls, notification_service: Optional[NotificationService] = None) -> "LibraryManager":
        """Get or create the shared manager.

        The notification service is bound on first creation; a different one
        passed afterwards is ignored.
        """
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    service = notification_service or get_notification_service()
                    cls._instance = cls(service)
                    logger.info(f"Library manager initialized with {type(service).__name__}")
                    return cls._instance
                instance = cls._instance
        if notification_service is not None and notification_service is not instance.notification_service:
            logger.debug("Ignoring notification service passed to an existing library manager")
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared manager so the next get_instance() builds a new one."""
        with cls._instance_lock:
            cls._instance = None

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> Book:
        """Add a pre-constructed Book. Prevent duplicates by identifier."""
        if book is None:
            raise InvalidBookError("Book cannot be None.")
        if not isinstance(book, Book):
            raise InvalidBookError(f"Expected a Book, got {type(book).__name__}.")
        if self.validate_identifiers:
            if not ISBNValidator.is_valid_isbn(book.identifier):
                raise InvalidBookError(f"Invalid ISBN format: {book.identifier!r}.")
            # store the bare form so hyphenated and plain ISBNs collide
            book = replace(book, identifier=self._key(book.identifier))

        with self._lock:
            if self.find_book(book.identifier):
                raise DuplicateBookError(f"Book with identifier {book.identifier} already exists.")
            self._books.append(book)
            self._notify_observers(book)
        logger.info(f"Book added: {book.title}")
        return book

    def remove_book(self, identifier: str) -> Optional[Book]:
        """Remove the first book with this identifier. Returns None if not found."""
        identifier = self._key(identifier)
        with self._lock:
            for index, book in enumerate(self._books):
                if book.identifier == identifier:
                    del self._books[index]
                    logger.info(f"Book removed with identifier: {identifier}")
                    return book
        logger.warning(f"Cannot remove book {identifier}: not in catalog")
        return None

    def find_book(self, identifier: str) -> Optional[Book]:
        identifier = self._key(identifier)
        for book in self._books:
            if book.identifier == identifier:
                return book
        return None

    def list_books(self) -> List[Book]:
        return list(self._books)

    def _key(self, identifier: str) -> str:
        # ISBNs are stored without hyphens or spaces once validation is on
        return ISBNValidator.normalize_isbn(identifier) if self.validate_identifiers else identifier

    # ------------------------- Search ------------------------- #
    def search_by_title(self, query: str) -> List[Book]:
        return [b for b in self._books if query in b.title]

    def search_by_author(self, query: str) -> List[Book]:
        return [b for b in self._books if query in b.author]

    def search_by_identifier(self, query: str) -> List[Book]:
        query = self._key(query)
        return [b for b in self._books if b.identifier == query]

    # ------------------------- Loans ------------------------- #
    def loan_book(self, identifier: str, borrower_id: str, now: Optional[datetime] = None) -> Optional[Loan]:
        """Lend a catalog book to a borrower.

        Returns the new Loan, or None when the book is unknown, already held by
        this borrower, or (unless concurrent loans are allowed) held by someone
        else.
        """
        identifier = self._key(identifier)
        with self._lock:
            book = self.find_book(identifier)
            if not book:
                logger.warning(f"Cannot loan book {identifier}: not in catalog")
                return None

            holders = [loan.borrower_id for loan in self._loans if loan.identifier == identifier]
            if borrower_id in holders:
                logger.warning(f"Book {identifier} is already on loan to {borrower_id}")
                return None
            if holders and not self.allow_concurrent_loans:
                logger.warning(f"Book {identifier} is currently on loan to {holders[0]}")
                return None

            loan = Loan(identifier=identifier, borrower_id=borrower_id, loaned_at=now or datetime.now(timezone.utc))
            self._loans.append(loan)
            self.notification_service.notify(borrower_id, f"You have borrowed the book {book.title}")
        logger.info(f"Book loaned to {borrower_id}: {book.title}")
        return loan

    def return_book(self, identifier: str, borrower_id: str) -> Optional[Loan]:
        """Close the borrower's loan for this book. Returns None if there is none."""
        identifier = self._key(identifier)
        with self._lock:
            for index, loan in enumerate(self._loans):
                if loan.matches(identifier, borrower_id):
                    del self._loans[index]
                    self.notification_service.notify(
                        borrower_id, f"You have returned the book with identifier {identifier}. Thank you!"
                    )
                    logger.info(f"Book returned by {borrower_id}: {identifier}")
                    return loan
        logger.warning(f"No active loan of {identifier} for {borrower_id}")
        return None

    def list_loans(self) -> List[Loan]:
        return list(self._loans)

    def loans_for(self, borrower_id: str) -> List[Loan]:
        return [loan for loan in self._loans if loan.borrower_id == borrower_id]

    def is_on_loan(self, identifier: str) -> bool:
        identifier = self._key(identifier)
        return any(loan.identifier == identifier for loan in self._loans)

    # ------------------------- Observers ------------------------- #
    def add_observer(self, observer: BookObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def _notify_observers(self, book: Book) -> None:
        # iterate a snapshot so an observer cannot change who gets notified
        for observer in tuple(self._observers):
            try:
                observer.on_book_added(book)
            except Exception:
                logger.exception(f"Observer {observer!r} failed while handling book {book.identifier}")

    # ------------------------- Reporting ------------------------- #
    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        with self._lock:
            return {
                "total_books": len(self._books),
                "unique_authors": len({b.author for b in self._books}),
                "active_loans": len(self._loans),
                "observers": len(self._observers),
            }


class LibraryError(Exception):
    pass


class InvalidBookError(LibraryError, ValueError):
    pass


class DuplicateBookError(LibraryError, ValueError):
    pass
