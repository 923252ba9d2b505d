from __future__ import annotations

import logging
import threading
from decimal import Decimal
from typing import Optional

from ..core.errors import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
)
from ..models import Account, format_amount
from .notifications import LoggingNotificationService, NotificationService
from .repository import AccountsRepository


logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(
        self,
        repository: AccountsRepository,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.repository = repository
        self.notification_service = notification_service or LoggingNotificationService()
        # Serializes every transfer, whichever accounts it touches.
        self._transfer_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _get_account(self, account_id: str) -> Account:
        account = self.repository.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    def _notify(self, account: Account, message: str) -> None:
        try:
            self.notification_service.notify_about_transfer(account, message)
        except Exception:
            logger.exception(
                "notification.failed",
                extra={"account_id": account.account_id},
            )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, account: Account) -> Account:
        self.repository.create_account(account)
        logger.info(
            "account.created",
            extra={
                "account_id": account.account_id,
                "balance": format_amount(account.balance),
            },
        )
        return account

    def get_account(self, account_id: str) -> Account:
        return self._get_account(account_id)

    def transfer(self, from_id: str, to_id: str, amount: Decimal) -> None:
        """Move ``amount`` from one account to another and notify both owners.

        Validation happens inside the transfer lock, so a failed transfer never
        leaves a partial update behind. Transferring to the same account is
        allowed; it nets to zero but still notifies twice.
        """
        with self._transfer_lock:
            source = self.repository.get_account(from_id)
            dest = self.repository.get_account(to_id)
            if source is None or dest is None:
                missing = from_id if source is None else to_id
                raise AccountNotFoundError(f"Account {missing} not found")

            if amount <= 0:
                raise InvalidAmountError("Amount to be transferred must be greater than 0")

            if source.balance < amount:
                raise InsufficientFundsError("Insufficient funds on origin account")

            source.balance -= amount
            dest.balance += amount

        logger.info(
            "account.transfer",
            extra={
                "source_account_id": from_id,
                "dest_account_id": to_id,
                "amount": format_amount(amount),
            },
        )

        plain_amount = format_amount(amount)
        self._notify(source, f"Transferred {plain_amount} to account: {to_id}")
        self._notify(dest, f"Received {plain_amount} from account: {from_id}")
