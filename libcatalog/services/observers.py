from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from libcatalog.book import Book

logger = logging.getLogger(__name__)


class BookObserver(ABC):
    """Party that wants to hear about catalog changes."""

    @abstractmethod
    def on_book_added(self, book: Book) -> None:
        pass


class Patron(BookObserver):
    """A library user subscribed to new-arrival announcements."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        self.notifications: List[Book] = []

    def on_book_added(self, book: Book) -> None:
        self.notifications.append(book)
        logger.info(f"User {self.user_id} has been notified about the book: {book.title}")

    def __repr__(self) -> str:
        return f"Patron(user_id={self.user_id!r})"
