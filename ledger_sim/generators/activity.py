"""Account activity generator for demo ledgers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterator

from ledger_sim.generators.base import BaseGenerator


class OperationType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER = "TRANSFER"


@dataclass(frozen=True)
class Operation:
    """One money-movement request to replay against the banking service."""

    operation_type: OperationType
    account_id: str
    amount: Decimal
    target_id: str | None = None  # transfers only


class ActivityGenerator(BaseGenerator):
    """Generate random deposits, withdrawals and transfers.

    Amounts follow a log-normal distribution, so most operations are small
    with an occasional large one. Withdrawals and transfers are generated
    without looking at balances; some of them are expected to be rejected
    for insufficient funds.
    """

    OPERATION_TYPES = list(OperationType)
    OPERATION_WEIGHTS = [0.50, 0.30, 0.20]

    def generate(self, account_ids: list[str]) -> Operation:
        """Generate a single operation over ``account_ids``.

        Parameters
        ----------
        account_ids : list[str]
            Accounts to pick from. Transfers need at least two.

        Returns
        -------
        Operation
            Generated operation.
        """
        if not account_ids:
            raise ValueError("account_ids must not be empty")

        operation_type = self.rng.choices(
            self.OPERATION_TYPES, weights=self.OPERATION_WEIGHTS, k=1
        )[0]
        if operation_type is OperationType.TRANSFER and len(account_ids) < 2:
            operation_type = OperationType.DEPOSIT

        account_id = self.rng.choice(account_ids)
        target_id = None
        if operation_type is OperationType.TRANSFER:
            target_id = self.rng.choice([a for a in account_ids if a != account_id])

        return Operation(
            operation_type=operation_type,
            account_id=account_id,
            amount=self._amount(),
            target_id=target_id,
        )

    def generate_batch(self, account_ids: list[str], count: int) -> Iterator[Operation]:
        """Generate ``count`` operations over ``account_ids``."""
        for _ in range(count):
            yield self.generate(account_ids)

    def _amount(self) -> Decimal:
        value = self.rng.lognormvariate(mu=4.0, sigma=1.0)  # ~55 median
        return Decimal(str(round(max(value, 1.0), 2)))
