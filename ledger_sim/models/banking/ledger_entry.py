"""Ledger entry model for banking domain."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)

from ledger_sim.models.banking.enums import EntryKind

# Significant digits a balance or amount may carry
MONEY_PRECISION = 28

# Ledger arithmetic never rounds: a result that does not fit raises Inexact
MONEY_CONTEXT = Context(
    prec=MONEY_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[Inexact, InvalidOperation, DivisionByZero, Overflow],
)


def exact_add(*amounts: Decimal) -> Decimal:
    """Sum ``amounts`` without rounding.

    Raises
    ------
    decimal.Inexact
        If the exact result needs more than ``MONEY_PRECISION`` digits.
    """
    with localcontext(MONEY_CONTEXT) as ctx:
        total = ctx.plus(amounts[0])
        for amount in amounts[1:]:
            total = ctx.add(total, amount)
        return total


def quantize(amount: Decimal, places: int = 2) -> Decimal:
    """Round ``amount`` to ``places`` decimal places (banker's rounding)."""
    with localcontext() as ctx:
        ctx.prec = max(amount.adjusted(), 0) + places + 2
        return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True)
class LedgerEntry:
    """One balance-affecting event on one account.

    ``amount`` is signed: positive for credits, negative for debits.
    ``resulting_balance`` is the account balance immediately after the entry
    was appended. ``counterparty`` is the other account id for transfers.
    """

    kind: EntryKind
    amount: Decimal
    resulting_balance: Decimal
    account_id: str
    counterparty: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def label(self) -> str:
        """Kind label, including the counterparty for transfers."""
        if self.kind.is_transfer and self.counterparty:
            return f"{self.kind.value} {self.counterparty}"
        return self.kind.value

    def render(self, places: int = 2) -> str:
        """Format as a statement line.

        Example: ``TRANSFER_OUT ACC2 (-40.00) | Balance: 60.00``
        """
        return (
            f"{self.label} ({quantize(self.amount, places)}) "
            f"| Balance: {quantize(self.resulting_balance, places)}"
        )

    def __str__(self) -> str:
        return self.render()
