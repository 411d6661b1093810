"""Interactive console menu for a single bank account session."""

import logging

from tabulate import tabulate

from config.settings import Settings
from src.models.money import format_money
from src.models.outcome import FailureKind, Outcome
from src.services.bank_service import BankService

logger = logging.getLogger(__name__)

MENU = (
    "\nChoose one of the following options:\n"
    "1. Deposit\n"
    "2. Withdraw\n"
    "3. Exit\n"
    "4. Check Balance\n"
    "5. Recent Transactions"
)


class BankConsole:
    """Line-oriented driver: opens one account, then loops on the menu."""

    def __init__(self, service: BankService, settings: Settings, read=None, write=print):
        self.service = service
        self.settings = settings
        self._read = read if read is not None else input
        self._write = write
        self._commands = {
            '1': self.deposit,
            '2': self.withdraw,
            '4': self.check,
            '5': self.record,
        }

    def _money(self, amount) -> str:
        return format_money(amount, self.settings.currency_symbol)

    def _report_failure(self, outcome: Outcome) -> None:
        if outcome.kind is FailureKind.INSUFFICIENT_FUNDS:
            self._write(f"Insufficient Balance! {outcome.message}")
        else:
            self._write(f"Invalid amount! {outcome.message}")
        self._write(f"Current Balance: {self._money(self.service.get_balance())}")

    def run(self) -> int:
        """Run the session until the user exits or input ends. Returns 0."""
        try:
            self.register()
            while True:
                self._write(MENU)
                choice = self._read("Enter your choice: ").strip()
                if choice == '3':
                    break
                command = self._commands.get(choice)
                if command is None:
                    self._write("Invalid choice! Please try again.")
                    continue
                command()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, ending session")
            self._write("")
        self._write("Thank you!")
        return 0

    def register(self) -> None:
        account_id = self._read("Enter the Account Number (blank to generate): ")
        while True:
            name = self._read("Enter Name: ")
            if name.strip():
                break
            self._write("Name cannot be empty.")
        while True:
            opening = self._read("Enter Initial Balance: ")
            outcome = self.service.open_account(name, opening, account_id)
            if outcome.ok:
                break
            self._write(f"Invalid amount! {outcome.message}")

        account = outcome.value
        self._write("\nAccount Details:")
        self._write(f"Account Number: {account.id}")
        self._write(f"Account Holder: {account.owner_name}")
        self._write(f"Balance: {self._money(account.balance)}")

    def deposit(self) -> None:
        amount, _, memo = self._read("\nEnter the amount to be deposited: ").strip().partition(' ')
        outcome = self.service.deposit(amount, memo.strip())
        if outcome.ok:
            self._write(f"Deposit Successful! Updated Balance: {self._money(outcome.value)}")
        else:
            self._report_failure(outcome)

    def withdraw(self) -> None:
        amount, _, memo = self._read("\nEnter the amount to be withdrawn: ").strip().partition(' ')
        outcome = self.service.withdraw(amount, memo.strip())
        if outcome.ok:
            self._write(f"Withdrawal Successful! Updated Balance: {self._money(outcome.value)}")
        else:
            self._report_failure(outcome)

    def check(self) -> None:
        self._write(f"Current Balance: {self._money(self.service.get_balance())}")

    def record(self) -> None:
        data = self.service.pull_transactions(self.settings.statement_size)
        if not data:
            self._write("No transactions yet.")
            return
        header = ['ID', 'Time', 'Type', 'Amount', 'Balance', 'Status', 'Memo']
        rows = [
            [
                txn.id,
                txn.time.strftime('%H:%M:%S'),
                txn.type,
                '-' if txn.amount is None else self._money(txn.amount),
                self._money(txn.balance_after),
                txn.status,
                txn.memo,
            ]
            for txn in data
        ]
        self._write(tabulate(rows, headers=header, stralign='right', numalign='right'))
