"""Custom exception hierarchy for ledger-sim."""

from ledger_sim.result import ErrorKind


class LedgerError(Exception):
    """Base exception for all ledger-sim errors."""

    kind: ErrorKind | None = None


class ValidationError(LedgerError):
    """Raised when external input is rejected before touching the ledger."""


class InvalidNameError(ValidationError):
    """Raised when a customer name is empty or blank."""

    kind = ErrorKind.INVALID_NAME


class InvalidEmailError(ValidationError):
    """Raised when a customer email lacks an ``@``."""

    kind = ErrorKind.INVALID_EMAIL


class InvalidAccountTypeError(ValidationError):
    """Raised when the account type is not SAVINGS or CURRENT."""

    kind = ErrorKind.INVALID_ACCOUNT_TYPE


class InvalidAmountError(ValidationError):
    """Raised when an amount is not a positive finite number."""

    kind = ErrorKind.INVALID_AMOUNT


class AccountNotFoundError(LedgerError):
    """Raised when a referenced account does not exist."""

    kind = ErrorKind.ACCOUNT_NOT_FOUND


class InsufficientFundsError(LedgerError):
    """Raised when a debit exceeds the available balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(LedgerError):
    """Raised when a sink operation fails."""
