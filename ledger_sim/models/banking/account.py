"""Account model for banking domain."""

import threading
from decimal import Decimal, Inexact

from ledger_sim.exceptions import InsufficientFundsError, InvalidAmountError
from ledger_sim.models.banking.customer import Customer
from ledger_sim.models.banking.enums import AccountType, EntryKind
from ledger_sim.models.banking.ledger_entry import LedgerEntry, exact_add


class Account:
    """Bank account holding a balance, an owner and an append-only history.

    Accounts are created by ``AccountRepository.create``; nothing else in the
    library constructs one. Every balance change happens under the account
    lock and appends exactly one ``LedgerEntry`` carrying the new balance.
    Amount validation is the caller's job: the methods here assume a
    positive ``Decimal``. Balances are never rounded; a change whose exact
    result does not fit raises ``InvalidAmountError`` and modifies nothing.

    Parameters
    ----------
    account_id : str
        Identifier assigned by the repository.
    owner : Customer
        Account holder.
    account_type : AccountType
        SAVINGS or CURRENT.
    sequence : int
        Numeric part of the identifier, used to order lock acquisition.
    """

    def __init__(
        self,
        account_id: str,
        owner: Customer,
        account_type: AccountType,
        sequence: int = 0,
    ) -> None:
        self._account_id = account_id
        self._owner = owner
        self._account_type = account_type
        self._sequence = sequence
        self._balance = Decimal("0")
        self._entries: list[LedgerEntry] = []
        self._lock = threading.RLock()

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def owner(self) -> Customer:
        return self._owner

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def balance(self) -> Decimal:
        return self._balance

    def history(self) -> tuple[LedgerEntry, ...]:
        """Return a snapshot of all ledger entries, oldest first."""
        with self._lock:
            return tuple(self._entries)

    def deposit(self, amount: Decimal) -> LedgerEntry:
        """Credit ``amount`` and append a DEPOSIT entry."""
        with self._lock:
            self._balance = _apply(self._balance, amount)
            return self._record(EntryKind.DEPOSIT, amount)

    def withdraw(self, amount: Decimal) -> LedgerEntry:
        """Debit ``amount`` and append a WITHDRAW entry.

        Raises
        ------
        InsufficientFundsError
            If ``amount`` exceeds the balance. Nothing is modified.
        """
        with self._lock:
            self._check_funds(amount)
            self._balance = _apply(self._balance, amount.copy_negate())
            return self._record(EntryKind.WITHDRAW, amount.copy_negate())

    def transfer(self, to: "Account", amount: Decimal) -> tuple[LedgerEntry, LedgerEntry]:
        """Move ``amount`` from this account to ``to`` as one unit.

        Both account locks are held, in a fixed global order, from the funds
        check until both entries are appended. A transfer to the same account
        is not special-cased: the balance is unchanged and two entries are
        appended.

        Returns
        -------
        tuple[LedgerEntry, LedgerEntry]
            The TRANSFER_OUT entry on this account and the TRANSFER_IN entry
            on ``to``.

        Raises
        ------
        InsufficientFundsError
            If ``amount`` exceeds this balance. Neither account is modified.
        """
        first, second = sorted((self, to), key=_lock_order)
        with first._lock, second._lock:
            self._check_funds(amount)
            debited = _apply(self._balance, amount.copy_negate())
            credited = _apply(debited if to is self else to._balance, amount)
            self._balance = debited
            out_entry = self._record(EntryKind.TRANSFER_OUT, amount.copy_negate(), to.account_id)
            to._balance = credited
            in_entry = to._record(EntryKind.TRANSFER_IN, amount, self.account_id)
            return out_entry, in_entry

    def _check_funds(self, amount: Decimal) -> None:
        if amount > self._balance:
            raise InsufficientFundsError("Insufficient funds.")

    def _record(
        self, kind: EntryKind, amount: Decimal, counterparty: str | None = None
    ) -> LedgerEntry:
        entry = LedgerEntry(
            kind=kind,
            amount=amount,
            resulting_balance=self._balance,
            account_id=self._account_id,
            counterparty=counterparty,
        )
        self._entries.append(entry)
        return entry

    def __repr__(self) -> str:
        return (
            f"Account(account_id={self._account_id!r}, owner={self._owner.name!r}, "
            f"account_type={self._account_type.value}, balance={self._balance})"
        )


def _lock_order(account: Account) -> tuple[int, str]:
    return account.sequence, account.account_id


def _apply(balance: Decimal, delta: Decimal) -> Decimal:
    try:
        return exact_add(balance, delta)
    except Inexact:
        raise InvalidAmountError("Amount cannot be held exactly.") from None
