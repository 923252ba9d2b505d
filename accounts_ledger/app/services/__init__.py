from .ledger import LedgerService
from .notifications import LoggingNotificationService, NotificationService
from .repository import AccountsRepository

__all__ = [
    "AccountsRepository",
    "LedgerService",
    "LoggingNotificationService",
    "NotificationService",
]
