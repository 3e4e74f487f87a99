from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Loan:
    """An open borrowing record. Created on loan, dropped on return."""

    identifier: str
    borrower_id: str
    loaned_at: datetime

    def matches(self, identifier: str, borrower_id: str) -> bool:
        return self.identifier == identifier and self.borrower_id == borrower_id

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "borrower_id": self.borrower_id,
            "loaned_at": self.loaned_at.isoformat(),
        }
