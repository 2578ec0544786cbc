"""Result type returned by the banking service.

Business failures never escape the service as exceptions. Each operation
returns a ``Result`` holding either the value or an error message tagged
with an ``ErrorKind``, and the caller branches on it::

    result = service.withdraw("ACC1", Decimal("50"))
    if result:
        print(result.value)
    elif result.error_kind is ErrorKind.INSUFFICIENT_FUNDS:
        print(f"Error: {result.error}")
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_NAME = "INVALID_NAME"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ACCOUNT_TYPE = "INVALID_ACCOUNT_TYPE"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation.

    Attributes
    ----------
    success : bool
        Whether the operation succeeded.
    value : T | None
        The return value on success, ``None`` on failure.
    error : str | None
        Human-readable message on failure.
    error_kind : ErrorKind | None
        Failure category for programmatic handling.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, error_kind: ErrorKind | None = None) -> "Result[T]":
        """Create a failed result."""
        return cls(success=False, error=error, error_kind=error_kind)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """Return the value, raising ``ValueError`` if the operation failed."""
        if not self.success:
            raise ValueError(f"Result unwrap failed: {self.error}")
        return self.value
