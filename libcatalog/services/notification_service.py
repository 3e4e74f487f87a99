import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from rich.console import Console
from rich.markup import escape

from config import settings

logger = logging.getLogger(__name__)


class NotificationService(ABC):
    """Outbound message capability injected into the library manager."""

    @abstractmethod
    def notify(self, recipient_id: str, message: str) -> None:
        pass


class EmailService(NotificationService):
    """Email stub: logs the message instead of delivering it."""

    def __init__(self, from_email: Optional[str] = None) -> None:
        self.from_email = from_email or settings.smtp_from_email

    def notify(self, recipient_id: str, message: str) -> None:
        logger.info(f"Sending email to {recipient_id} (from {self.from_email}): {message}")


class ConsoleNotificationService(NotificationService):
    """Prints notifications to the terminal."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def notify(self, recipient_id: str, message: str) -> None:
        self.console.print(f"[bold cyan]✉ {escape(recipient_id)}[/]: {escape(message)}")


_CHANNELS: Dict[str, Type[NotificationService]] = {
    "email": EmailService,
    "console": ConsoleNotificationService,
}


def get_notification_service(channel: Optional[str] = None) -> NotificationService:
    """Build the notification service for a channel name (defaults to settings)."""
    name = (channel or settings.notification_channel).lower().strip()
    try:
        service_cls = _CHANNELS[name]
    except KeyError:
        raise ValueError(
            f"Unknown notification channel: {name}. Use one of: {', '.join(sorted(_CHANNELS))}"
        ) from None
    return service_cls()
