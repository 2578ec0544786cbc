"""Tests for custom exception hierarchy."""

import pytest

from ledger_sim.exceptions import (
    AccountNotFoundError,
    ConfigurationError,
    InsufficientFundsError,
    InvalidAccountTypeError,
    InvalidAmountError,
    InvalidEmailError,
    InvalidNameError,
    LedgerError,
    SinkError,
    ValidationError,
)
from ledger_sim.result import ErrorKind


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_ledger_error_is_exception(self) -> None:
        assert isinstance(LedgerError("test"), Exception)

    @pytest.mark.parametrize(
        "error_class",
        [InvalidNameError, InvalidEmailError, InvalidAccountTypeError, InvalidAmountError],
    )
    def test_input_errors_are_validation_errors(self, error_class: type) -> None:
        err = error_class("test")
        assert isinstance(err, ValidationError)
        assert isinstance(err, LedgerError)

    def test_business_errors_are_ledger_errors(self) -> None:
        assert isinstance(AccountNotFoundError("test"), LedgerError)
        assert isinstance(InsufficientFundsError("test"), LedgerError)
        assert not isinstance(InsufficientFundsError("test"), ValidationError)

    def test_configuration_error_is_ledger_error(self) -> None:
        assert isinstance(ConfigurationError("test"), LedgerError)

    def test_sink_error_is_ledger_error(self) -> None:
        assert isinstance(SinkError("test"), LedgerError)

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("Account ACC1 not found.")
        assert str(err) == "Account ACC1 not found."


class TestErrorKinds:
    """Each business error carries its result kind."""

    @pytest.mark.parametrize(
        "error_class, kind",
        [
            (InvalidNameError, ErrorKind.INVALID_NAME),
            (InvalidEmailError, ErrorKind.INVALID_EMAIL),
            (InvalidAccountTypeError, ErrorKind.INVALID_ACCOUNT_TYPE),
            (InvalidAmountError, ErrorKind.INVALID_AMOUNT),
            (AccountNotFoundError, ErrorKind.ACCOUNT_NOT_FOUND),
            (InsufficientFundsError, ErrorKind.INSUFFICIENT_FUNDS),
        ],
    )
    def test_kind(self, error_class: type, kind: ErrorKind) -> None:
        assert error_class("test").kind is kind

    def test_infrastructure_errors_have_no_kind(self) -> None:
        assert ConfigurationError("test").kind is None
        assert SinkError("test").kind is None
