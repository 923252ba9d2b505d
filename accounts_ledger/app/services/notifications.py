from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..models import Account

logger = logging.getLogger(__name__)


class NotificationService(ABC):
    """Receives a message for the owner of an account after a transfer leg.

    Delivery is synchronous and best-effort: no queue, no retry.
    """

    @abstractmethod
    def notify_about_transfer(self, account: Account, message: str) -> None:
        """Deliver ``message`` to the owner of ``account``."""


class LoggingNotificationService(NotificationService):
    def notify_about_transfer(self, account: Account, message: str) -> None:
        # Stand-in for a real delivery channel.
        logger.info(
            "Sending notification to owner of %s: %s",
            account.account_id,
            message,
        )
