from unittest.mock import MagicMock

import pytest

from libcatalog.book import BookBuilder
from libcatalog.library import LibraryManager
from libcatalog.services.notification_service import NotificationService
from libcatalog.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    # Every test starts without a shared manager and with plain CLI output
    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)
    LibraryManager.reset_instance()
    yield
    LibraryManager.reset_instance()


@pytest.fixture
def notifier():
    return MagicMock(spec=NotificationService)


@pytest.fixture
def lib(notifier):
    # Each test gets its own manager; nothing is shared through the accessor
    return LibraryManager(notifier, allow_concurrent_loans=False, validate_identifiers=False)


@pytest.fixture
def builder():
    return BookBuilder()


@pytest.fixture
def orwell(builder):
    return builder.set_title("1984").set_author("George Orwell").set_identifier("987654321").build()
