from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(eq=False)
class Account:
    """A named balance holder.

    Records are owned by ``AccountsRepository`` and compared by identity; the
    ledger service is the only writer of ``balance`` once an account exists.
    """

    account_id: str
    balance: Decimal

    def __post_init__(self) -> None:
        if not self.account_id:
            raise ValueError("Account id must not be empty")
        if self.balance < 0:
            raise ValueError("Initial balance must not be negative")
