class LedgerError(Exception):
    """Base class for errors raised by the account store and ledger service."""


class DuplicateAccountError(LedgerError):
    """Raised when an account id is already present in the store."""


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the store."""


class InvalidAmountError(LedgerError):
    """Raised when a transfer amount is zero or negative."""


class InsufficientFundsError(LedgerError):
    """Raised when a transfer would drop the sender's balance below zero."""
