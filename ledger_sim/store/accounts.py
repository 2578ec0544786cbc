"""In-memory account repository."""

import itertools
import logging
import threading

from ledger_sim.exceptions import AccountNotFoundError
from ledger_sim.models.banking import Account, AccountType, Customer

logger = logging.getLogger(__name__)


class AccountRepository:
    """Exclusive owner and lookup index for all accounts.

    Identifiers are ``<prefix><n>`` with ``n`` counting up from 1. The
    counter belongs to the repository instance: it is never reset and an
    identifier is never handed out twice.
    """

    def __init__(self, id_prefix: str = "ACC") -> None:
        self.id_prefix = id_prefix
        self._accounts: dict[str, Account] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, customer: Customer, account_type: AccountType) -> Account:
        """Create, store and return a zero-balance account for ``customer``."""
        with self._lock:
            sequence = next(self._ids)
            account = Account(
                account_id=f"{self.id_prefix}{sequence}",
                owner=customer,
                account_type=account_type,
                sequence=sequence,
            )
            self._accounts[account.account_id] = account

        logger.debug("Stored account %s", account.account_id)
        return account

    def find(self, account_id: str) -> Account:
        """Get an account by exact identifier.

        Raises
        ------
        AccountNotFoundError
            If no account has this identifier.
        """
        try:
            return self._accounts[account_id]
        except KeyError:
            raise AccountNotFoundError(f"Account {account_id} not found.") from None

    def list_all(self) -> list[Account]:
        """Get all accounts in creation order."""
        with self._lock:
            return list(self._accounts.values())

    def find_by_owner_name(self, name: str) -> list[Account]:
        """Get accounts whose owner name matches ``name``, ignoring case."""
        wanted = name.casefold()
        return [acc for acc in self.list_all() if acc.owner.name.casefold() == wanted]

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts
