"""
Notification Interfaces

The service layer only depends on NotificationService; the shipped
implementation writes the notification to the log.
"""

from abc import ABC, abstractmethod
import logging

from database.models import UserORM

logger = logging.getLogger(__name__)


class NotificationService(ABC):
    """Interface for user-facing notifications."""

    @abstractmethod
    def send_welcome(self, user: UserORM) -> None:
        """
        Notify a newly created user.

        Args:
            user: The persisted user
        """
        pass


class LoggingNotificationService(NotificationService):
    """Writes notifications to the application log instead of delivering them."""

    def send_welcome(self, user: UserORM) -> None:
        logger.info(f"Welcome notification queued for {user.email} (user {user.id})")
