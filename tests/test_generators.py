"""Tests for demo data generators."""

from decimal import Decimal

import pytest

from ledger_sim.generators import ActivityGenerator, CustomerGenerator, Operation, OperationType
from ledger_sim.models.banking import AccountType, Customer


class TestCustomerGenerator:
    """Tests for CustomerGenerator."""

    def test_generate(self, seed: int) -> None:
        customer = CustomerGenerator(seed=seed).generate()

        assert isinstance(customer, Customer)
        assert customer.name.strip()
        assert "@" in customer.email

    def test_generate_batch(self, seed: int) -> None:
        customers = list(CustomerGenerator(seed=seed).generate_batch(10))

        assert len(customers) == 10

    def test_seed_is_reproducible(self, seed: int) -> None:
        first = list(CustomerGenerator(seed=seed).generate_batch(5))
        second = list(CustomerGenerator(seed=seed).generate_batch(5))

        assert first == second

    def test_account_type(self, seed: int) -> None:
        generator = CustomerGenerator(seed=seed)

        types = {generator.account_type() for _ in range(50)}

        assert types <= set(AccountType)
        assert len(types) == 2


class TestActivityGenerator:
    """Tests for ActivityGenerator."""

    ACCOUNT_IDS = ["ACC1", "ACC2", "ACC3"]

    def test_generate(self, seed: int) -> None:
        operation = ActivityGenerator(seed=seed).generate(self.ACCOUNT_IDS)

        assert isinstance(operation, Operation)
        assert operation.account_id in self.ACCOUNT_IDS
        assert operation.amount >= Decimal("1")

    def test_amounts_have_two_places(self, seed: int) -> None:
        for operation in ActivityGenerator(seed=seed).generate_batch(self.ACCOUNT_IDS, 50):
            assert operation.amount == operation.amount.quantize(Decimal("0.01"))

    def test_transfers_have_distinct_target(self, seed: int) -> None:
        operations = list(ActivityGenerator(seed=seed).generate_batch(self.ACCOUNT_IDS, 200))
        transfers = [o for o in operations if o.operation_type is OperationType.TRANSFER]

        assert transfers
        for operation in transfers:
            assert operation.target_id in self.ACCOUNT_IDS
            assert operation.target_id != operation.account_id

    def test_non_transfers_have_no_target(self, seed: int) -> None:
        for operation in ActivityGenerator(seed=seed).generate_batch(self.ACCOUNT_IDS, 50):
            if operation.operation_type is not OperationType.TRANSFER:
                assert operation.target_id is None

    def test_single_account_never_transfers(self, seed: int) -> None:
        operations = list(ActivityGenerator(seed=seed).generate_batch(["ACC1"], 100))

        assert all(o.operation_type is not OperationType.TRANSFER for o in operations)

    def test_empty_accounts_rejected(self, seed: int) -> None:
        with pytest.raises(ValueError):
            ActivityGenerator(seed=seed).generate([])

    def test_seed_is_reproducible(self, seed: int) -> None:
        first = list(ActivityGenerator(seed=seed).generate_batch(self.ACCOUNT_IDS, 20))
        second = list(ActivityGenerator(seed=seed).generate_batch(self.ACCOUNT_IDS, 20))

        assert first == second
