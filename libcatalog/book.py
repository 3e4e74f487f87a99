from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Book:
    """Represents a single catalog entry. Values are fixed once built."""

    title: str
    author: str
    identifier: str

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ID: {self.identifier})"

    def to_dict(self) -> dict:
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            title=data.get("title", ""),
            author=data.get("author", ""),
            identifier=data["identifier"],
        )


class BookBuilder:
    """Fluent construction of Book values.

    The builder is reusable: each ``build()`` call snapshots the fields that
    are currently set, so later setter calls never affect books already built.
    Nothing is validated here; empty strings become empty fields.
    """

    def __init__(self) -> None:
        self._title = ""
        self._author = ""
        self._identifier = ""

    def set_title(self, title: str) -> "BookBuilder":
        self._title = title
        return self

    def set_author(self, author: str) -> "BookBuilder":
        self._author = author
        return self

    def set_identifier(self, identifier: str) -> "BookBuilder":
        self._identifier = identifier
        return self

    def reset(self) -> "BookBuilder":
        """Clear every field so the next build starts from scratch."""
        self._title = ""
        self._author = ""
        self._identifier = ""
        return self

    def build(self) -> Book:
        return Book(title=self._title, author=self._author, identifier=self._identifier)
