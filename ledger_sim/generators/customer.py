"""Customer generator for demo ledgers."""

from __future__ import annotations

from typing import Iterator

from ledger_sim.generators.base import BaseGenerator
from ledger_sim.models.banking import AccountType, Customer


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers and the account type they open."""

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.40, 0.60]

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Customer with a fake name and a matching email address.
        """
        first = self.fake.first_name()
        last = self.fake.last_name()
        user = f"{first}.{last}".lower().replace(" ", "")
        return Customer(
            name=f"{first} {last}",
            email=f"{user}@{self.fake.free_email_domain()}",
        )

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()

    def account_type(self) -> AccountType:
        """Pick an account type (CURRENT is more common)."""
        return self.rng.choices(self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1)[0]
