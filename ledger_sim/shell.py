"""Interactive menu shell over the banking service."""

import logging
from decimal import Decimal
from typing import Callable

from ledger_sim.exceptions import SinkError
from ledger_sim.models.banking import Account
from ledger_sim.models.banking.ledger_entry import quantize
from ledger_sim.result import Result
from ledger_sim.services.banking import BankingService
from ledger_sim.sinks.json_file import JsonFileSink

logger = logging.getLogger(__name__)

MENU = """
==== Banking Menu ====
1. Open Account
2. Deposit
3. Withdraw
4. Transfer
5. Statement
6. List Accounts
7. Search Accounts
8. Export
9. Exit"""


class BankShell:
    """Read commands, call the service and print whatever it returns.

    Parameters
    ----------
    service : BankingService
        Service to drive.
    export_sink : JsonFileSink | None
        Destination for the Export command.
    input_fn, output_fn : Callable
        Line reader and writer (``input`` and ``print`` by default).
    """

    def __init__(
        self,
        service: BankingService,
        export_sink: JsonFileSink | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.service = service
        self.export_sink = export_sink
        self._input = input_fn
        self._output = output_fn
        self._commands: dict[str, Callable[[], None]] = {
            "1": self.open_account,
            "2": self.deposit,
            "3": self.withdraw,
            "4": self.transfer,
            "5": self.statement,
            "6": self.list_accounts,
            "7": self.search,
            "8": self.export,
        }

    def run(self) -> None:
        """Loop until Exit is chosen or input ends."""
        while True:
            self._output(MENU)
            try:
                choice = self._input("Enter choice: ").strip()
                if choice == "9":
                    self._output("Goodbye!")
                    return
                command = self._commands.get(choice)
                if command is None:
                    self._output("Invalid option.")
                    continue
                command()
            except EOFError:
                self._output("Goodbye!")
                return

    def open_account(self) -> None:
        name = self._input("Name: ")
        email = self._input("Email: ")
        account_type = self._input("Type: ")
        result = self.service.open_account(name, email, account_type)
        if self._check(result):
            self._output(f"Account Created: {result.value.account_id}")

    def deposit(self) -> None:
        account_id = self._input("Account No: ").strip()
        amount = self._input("Amount: ")
        result = self.service.deposit(account_id, amount)
        if self._check(result):
            self._output(f"Balance: {self._money(result.value.resulting_balance)}")

    def withdraw(self) -> None:
        account_id = self._input("Account No: ").strip()
        amount = self._input("Amount: ")
        result = self.service.withdraw(account_id, amount)
        if self._check(result):
            self._output(f"Balance: {self._money(result.value.resulting_balance)}")

    def transfer(self) -> None:
        from_id = self._input("From: ").strip()
        to_id = self._input("To: ").strip()
        amount = self._input("Amount: ")
        result = self.service.transfer(from_id, to_id, amount)
        if self._check(result):
            out_entry, _ = result.value
            self._output(f"Transfer complete. Balance: {self._money(out_entry.resulting_balance)}")

    def statement(self) -> None:
        account_id = self._input("Account No: ").strip()
        result = self.service.format_statement(account_id)
        if self._check(result):
            for line in result.value or ["No transactions."]:
                self._output(line)

    def list_accounts(self) -> None:
        for account in self.service.list_accounts().value:
            self._output(f"{self._summary(account)} | {self._money(account.balance)}")

    def search(self) -> None:
        name = self._input("Name: ").strip()
        for account in self.service.search_by_owner(name).value:
            self._output(self._summary(account))

    def export(self) -> None:
        if self.export_sink is None:
            self._output("Export is not configured.")
            return
        accounts = self.service.list_accounts().value
        entries = [entry for account in accounts for entry in account.history()]
        try:
            self.export_sink.write_batch("accounts", accounts)
            self.export_sink.write_batch("ledger_entries", entries)
        except SinkError as exc:
            logger.error("Export failed: %s", exc)
            self._output(f"Error: {exc}")
            return
        self._output(f"Exported {len(accounts)} accounts to {self.export_sink.output_dir}")

    def _check(self, result: Result) -> bool:
        if not result:
            self._output(f"Error: {result.error}")
        return result.success

    def _money(self, amount: Decimal) -> str:
        return str(quantize(amount, self.service.config.amount_places))

    @staticmethod
    def _summary(account: Account) -> str:
        return f"{account.account_id} | {account.owner.name}"
