"""Customer model for banking domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Bank customer. Owned by exactly one account."""

    name: str
    email: str
