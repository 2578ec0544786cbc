"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from ledger_sim.models.banking import Account, AccountType, Customer
from ledger_sim.services import BankingService
from ledger_sim.store import AccountRepository


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def repository() -> AccountRepository:
    """Create a fresh repository for each test."""
    return AccountRepository()


@pytest.fixture
def service(repository: AccountRepository) -> BankingService:
    """Create a service over the test repository."""
    return BankingService(repository=repository)


@pytest.fixture
def alice(repository: AccountRepository) -> Account:
    """Savings account owned by Alice (ACC1)."""
    return repository.create(Customer("Alice", "a@x.com"), AccountType.SAVINGS)


@pytest.fixture
def bob(repository: AccountRepository, alice: Account) -> Account:
    """Current account owned by Bob (ACC2)."""
    return repository.create(Customer("Bob", "b@x.com"), AccountType.CURRENT)


@pytest.fixture
def funded_alice(alice: Account) -> Account:
    """Alice with a balance of 100."""
    alice.deposit(Decimal("100"))
    return alice
