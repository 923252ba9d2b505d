from .account import Account
from .schemas import AccountCreate, AccountResponse, format_amount

__all__ = [
    "Account",
    "AccountCreate",
    "AccountResponse",
    "format_amount",
]
