"""Banking service: the public API of the ledger simulator."""

import logging
import uuid
from decimal import Decimal, Inexact, InvalidOperation
from typing import Any, Callable, Protocol, TypeVar

from ledger_sim.config import LedgerConfig
from ledger_sim.exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAccountTypeError,
    InvalidAmountError,
    InvalidEmailError,
    InvalidNameError,
    SinkError,
    ValidationError,
)
from ledger_sim.models.base import Event
from ledger_sim.models.banking import Account, AccountType, Customer, LedgerEntry
from ledger_sim.models.banking.ledger_entry import MONEY_PRECISION, exact_add
from ledger_sim.result import Result
from ledger_sim.sinks.serialization import dataclass_to_dict
from ledger_sim.store.accounts import AccountRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

EVENT_SOURCE = "ledger-sim"

# Failures reported to the caller as a Result instead of raised
BUSINESS_ERRORS = (ValidationError, AccountNotFoundError, InsufficientFundsError)


class EventSink(Protocol):
    def write_batch(self, entity_type: str, records: list[Any]) -> None: ...


class BankingService:
    """Validate external input and run ledger operations.

    Every public method returns a ``Result``. Input is checked before the
    model is touched, so a rejected operation leaves every account exactly
    as it was.

    Parameters
    ----------
    repository : AccountRepository | None
        Account store. A fresh one is created when omitted.
    config : LedgerConfig | None
        Configuration (identifier prefix, rounding, event topic).
    event_sink : EventSink | None
        When set, each successful balance change is published as a batch of
        ``Event`` envelopes, one per appended ledger entry.
    """

    def __init__(
        self,
        repository: AccountRepository | None = None,
        config: LedgerConfig | None = None,
        event_sink: EventSink | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        self.repository = repository or AccountRepository(self.config.account_id_prefix)
        self.event_sink = event_sink

    # Operations
    def open_account(self, name: str, email: str, account_type: str) -> Result[Account]:
        """Open an account for a new customer."""

        def run() -> Account:
            customer = Customer(name=_validate_name(name), email=_validate_email(email))
            account = self.repository.create(customer, _parse_account_type(account_type))
            logger.info(
                "Opened %s account %s for %s",
                account.account_type.value,
                account.account_id,
                customer.name,
                extra={"operation": "open_account", "account_id": account.account_id},
            )
            return account

        return self._execute("open_account", run)

    def deposit(self, account_id: str, amount: Any) -> Result[LedgerEntry]:
        """Credit ``amount`` to an account."""

        def run() -> LedgerEntry:
            value = _parse_amount(amount)
            entry = self.repository.find(account_id).deposit(value)
            logger.debug(
                "Deposited %s to %s",
                value,
                account_id,
                extra={"operation": "deposit", "account_id": account_id, "amount": value},
            )
            self._publish([entry])
            return entry

        return self._execute("deposit", run)

    def withdraw(self, account_id: str, amount: Any) -> Result[LedgerEntry]:
        """Debit ``amount`` from an account."""

        def run() -> LedgerEntry:
            value = _parse_amount(amount)
            entry = self.repository.find(account_id).withdraw(value)
            logger.debug(
                "Withdrew %s from %s",
                value,
                account_id,
                extra={"operation": "withdraw", "account_id": account_id, "amount": value},
            )
            self._publish([entry])
            return entry

        return self._execute("withdraw", run)

    def transfer(
        self, from_id: str, to_id: str, amount: Any
    ) -> Result[tuple[LedgerEntry, LedgerEntry]]:
        """Move ``amount`` between two accounts.

        ``from_id == to_id`` is accepted and appends a TRANSFER_OUT and a
        TRANSFER_IN entry to the same account.
        """

        def run() -> tuple[LedgerEntry, LedgerEntry]:
            value = _parse_amount(amount)
            source = self.repository.find(from_id)
            target = self.repository.find(to_id)
            entries = source.transfer(target, value)
            logger.debug(
                "Transferred %s from %s to %s",
                value,
                from_id,
                to_id,
                extra={
                    "operation": "transfer",
                    "account_id": from_id,
                    "counterparty": to_id,
                    "amount": value,
                },
            )
            self._publish(list(entries))
            return entries

        return self._execute("transfer", run)

    # Queries
    def get_statement(self, account_id: str) -> Result[tuple[LedgerEntry, ...]]:
        """Get the full ledger history of an account."""
        return self._execute("get_statement", lambda: self.repository.find(account_id).history())

    def format_statement(self, account_id: str) -> Result[list[str]]:
        """Get the ledger history of an account rendered as statement lines."""
        places = self.config.amount_places
        return self._execute(
            "format_statement",
            lambda: [e.render(places) for e in self.repository.find(account_id).history()],
        )

    def list_accounts(self) -> Result[list[Account]]:
        """Get all accounts."""
        return Result.ok(self.repository.list_all())

    def search_by_owner(self, name: str) -> Result[list[Account]]:
        """Get accounts whose owner name matches ``name``, ignoring case."""
        return Result.ok(self.repository.find_by_owner_name(name))

    # Internals
    def _execute(self, operation: str, run: Callable[[], T]) -> Result[T]:
        try:
            return Result.ok(run())
        except BUSINESS_ERRORS as exc:
            logger.info(
                "Rejected %s: %s (%s)",
                operation,
                exc,
                exc.kind.value,
                extra={"operation": operation, "error_kind": exc.kind.value},
            )
            return Result.fail(str(exc), exc.kind)

    def _publish(self, entries: list[LedgerEntry]) -> None:
        """Publish ledger entries to the event sink.

        The ledger is already updated at this point; a delivery failure is
        logged and does not undo it.
        """
        if self.event_sink is None:
            return

        events = [_entry_event(entry) for entry in entries]
        try:
            self.event_sink.write_batch(self.config.events.topic, events)
        except SinkError:
            logger.exception("Could not publish %d ledger events", len(events))


def _entry_event(entry: LedgerEntry) -> Event:
    return Event(
        event_id=uuid.uuid4().hex,
        event_type=f"ledger.{entry.kind.value.lower()}",
        event_time=entry.timestamp,
        source=EVENT_SOURCE,
        subject=entry.account_id,
        data=dataclass_to_dict(entry),
    )


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise InvalidNameError("Invalid name.")
    return name.strip()


def _validate_email(email: str) -> str:
    if not email or "@" not in email:
        raise InvalidEmailError("Invalid email.")
    return email.strip()


def _parse_account_type(account_type: str) -> AccountType:
    try:
        return AccountType((account_type or "").strip().upper())
    except ValueError:
        raise InvalidAccountTypeError("Type must be SAVINGS or CURRENT.") from None


def _parse_amount(amount: Any) -> Decimal:
    """Normalise ``amount`` to a positive finite ``Decimal``.

    Floats go through ``str()`` so that ``0.1`` becomes ``Decimal("0.1")``.
    Amounts with more than ``MONEY_PRECISION`` significant digits are
    rejected rather than rounded.
    """
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, float, str)):
        raise InvalidAmountError("Amount must be > 0")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation:
        raise InvalidAmountError("Amount must be > 0") from None
    if not value.is_finite() or value <= 0:
        raise InvalidAmountError("Amount must be > 0")
    try:
        return exact_add(value)
    except Inexact:
        raise InvalidAmountError(
            f"Amount cannot have more than {MONEY_PRECISION} significant digits."
        ) from None
