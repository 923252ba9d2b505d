from __future__ import annotations

import threading
from typing import Dict, Optional

from ..core.errors import DuplicateAccountError
from ..models import Account


class AccountsRepository:
    """Thread-safe in-memory map of account id to account record."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}
        self._lock = threading.Lock()

    # Account operations -------------------------------------------------
    def create_account(self, account: Account) -> None:
        with self._lock:
            if account.account_id in self._accounts:
                raise DuplicateAccountError(
                    f"Account id {account.account_id} already exists!"
                )
            self._accounts[account.account_id] = account

    def get_account(self, account_id: str) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(account_id)

    # Test support -------------------------------------------------------
    def clear_accounts(self) -> None:
        with self._lock:
            self._accounts.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
