"""Demo scenario that fills a ledger with synthetic activity."""

import logging
from collections import Counter
from decimal import Decimal

from ledger_sim.generators import ActivityGenerator, CustomerGenerator, Operation, OperationType
from ledger_sim.result import ErrorKind, Result
from ledger_sim.services.banking import BankingService

logger = logging.getLogger(__name__)


class DemoLedgerScenario:
    """Open accounts for fake customers and replay random operations.

    Every operation goes through ``BankingService``, so the ledger ends in a
    state the public API could have produced. Rejected operations (mostly
    insufficient funds) are counted by error kind.
    """

    def __init__(
        self,
        num_customers: int = 10,
        operations_per_account: int = 5,
        opening_deposit: Decimal | None = Decimal("100.00"),
        seed: int | None = None,
        service: BankingService | None = None,
    ) -> None:
        """Initialize demo scenario.

        Parameters
        ----------
        num_customers : int
            Number of customers (one account each).
        operations_per_account : int
            Average operations to replay per account.
        opening_deposit : Decimal | None
            Deposit made right after each account is opened (None to skip).
        seed : int | None
            Random seed for reproducibility.
        service : BankingService | None
            Service to fill. A fresh one is created when omitted.
        """
        self.num_customers = num_customers
        self.operations_per_account = operations_per_account
        self.opening_deposit = opening_deposit
        self.service = service or BankingService()
        self.accepted = 0
        self.rejected: Counter[ErrorKind] = Counter()

        self._customer_gen = CustomerGenerator(seed=seed)
        self._activity_gen = ActivityGenerator(seed=seed)

    def generate(self) -> BankingService:
        """Run the scenario.

        Returns
        -------
        BankingService
            Service holding the generated accounts and history.
        """
        logger.info("Starting demo scenario: %d customers", self.num_customers)

        account_ids = []
        for customer in self._customer_gen.generate_batch(self.num_customers):
            account = self.service.open_account(
                customer.name, customer.email, self._customer_gen.account_type()
            ).unwrap()
            account_ids.append(account.account_id)
            if self.opening_deposit is not None:
                self._track(self.service.deposit(account.account_id, self.opening_deposit))

        if account_ids:
            count = self.operations_per_account * len(account_ids)
            for operation in self._activity_gen.generate_batch(account_ids, count):
                self._track(self.apply(operation))

        logger.info(
            "Demo scenario complete: %d accounts, %d accepted, %d rejected",
            len(account_ids),
            self.accepted,
            sum(self.rejected.values()),
        )
        return self.service

    def apply(self, operation: Operation) -> Result:
        """Replay one generated operation against the service."""
        if operation.operation_type is OperationType.DEPOSIT:
            return self.service.deposit(operation.account_id, operation.amount)
        if operation.operation_type is OperationType.WITHDRAW:
            return self.service.withdraw(operation.account_id, operation.amount)
        return self.service.transfer(operation.account_id, operation.target_id, operation.amount)

    def _track(self, result: Result) -> None:
        if result:
            self.accepted += 1
        else:
            self.rejected[result.error_kind] += 1
