from functools import lru_cache

from ..services import AccountsRepository, LedgerService, LoggingNotificationService


@lru_cache()
def get_ledger_service() -> LedgerService:
    # One service per process: its lock is the global transfer lock.
    return LedgerService(AccountsRepository(), LoggingNotificationService())
