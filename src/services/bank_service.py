"""Bank service for business logic layer."""

import logging
from decimal import Decimal

from src.models.account import Account
from src.models.exceptions import AccountNotOpenError, InvalidAmountError
from src.models.money import as_money
from src.models.outcome import Failure, FailureKind, Outcome
from src.models.transaction import Transaction
from src.repositories.transaction_repo import TransactionRepository

logger = logging.getLogger(__name__)


class BankService:
    """Service layer for one console session and its single account."""

    def __init__(
        self,
        transaction_repo: TransactionRepository | None = None,
        max_amount: Decimal = Decimal("1000000000000"),
    ):
        """
        Initialize the BankService.

        Args:
            transaction_repo: Log that receives every attempted operation
            max_amount: Maximum allowed deposit/withdrawal amount (default: 10^12)
        """
        if transaction_repo is None:
            transaction_repo = TransactionRepository()
        self._transaction_repo = transaction_repo
        self._max_amount = as_money(max_amount)
        self._account: Account | None = None

    @property
    def account(self) -> Account:
        """
        The account opened for this session.

        Raises:
            AccountNotOpenError: If open_account() has not succeeded yet
        """
        if self._account is None:
            raise AccountNotOpenError("No account has been opened for this session")
        return self._account

    def open_account(
        self,
        owner_name: str,
        opening_balance,
        account_id: str | None = None,
    ) -> Outcome:
        """
        Open the session's account.

        Args:
            owner_name: The account holder's name
            opening_balance: Initial balance (must be zero or positive)
            account_id: Account number; generated when None or blank

        Returns:
            Ok(Account) or Failure(INVALID_AMOUNT)

        Raises:
            ValueError: If owner_name is blank
        """
        owner_name = owner_name.strip()
        if not owner_name:
            raise ValueError("Owner name cannot be empty")
        if account_id is not None:
            account_id = account_id.strip() or None

        outcome = Account.create(owner_name, opening_balance, account_id)
        if not outcome.ok:
            logger.warning("Rejected opening balance %r for %s: %s",
                           opening_balance, owner_name, outcome.message)
            return outcome

        self._account = outcome.value
        self._record("open", self._account.balance, outcome)
        logger.info("Opened account %s for %s with balance %s",
                    self._account.id, owner_name, self._account.balance)
        return outcome

    def get_balance(self) -> Decimal:
        """Return the current balance of the session's account."""
        return self.account.balance

    def deposit(self, amount, memo: str = "") -> Outcome:
        """
        Deposit funds into the session's account.

        Args:
            amount: The amount to deposit (must be positive and <= max_amount)
            memo: Transaction memo/note

        Returns:
            Ok(new_balance) or Failure(INVALID_AMOUNT)
        """
        return self._apply("deposit", amount, memo)

    def withdraw(self, amount, memo: str = "") -> Outcome:
        """
        Withdraw funds from the session's account.

        Args:
            amount: The amount to withdraw (must be positive and <= max_amount)
            memo: Transaction memo/note

        Returns:
            Ok(new_balance), Failure(INVALID_AMOUNT) or
            Failure(INSUFFICIENT_FUNDS)
        """
        return self._apply("withdraw", amount, memo)

    def pull_transactions(self, n: int) -> list[Transaction]:
        """
        Get the N most recent transactions, newest first.

        Args:
            n: Number of recent transactions to retrieve

        Returns:
            List of recent transactions (max N)
        """
        return self._transaction_repo.find_recent(n)

    def _apply(self, type: str, amount, memo: str) -> Outcome:
        account = self.account

        try:
            amt = as_money(amount)
        except InvalidAmountError as err:
            amt = None
            outcome = Failure(FailureKind.INVALID_AMOUNT, str(err))
        else:
            if amt > self._max_amount:
                outcome = Failure(
                    FailureKind.INVALID_AMOUNT,
                    f"Amount {amt} exceeds maximum allowed {type} of {self._max_amount}",
                )
            elif type == "deposit":
                outcome = account.deposit(amt)
            else:
                outcome = account.withdraw(amt)

        self._record(type, amt, outcome, memo)
        if outcome.ok:
            logger.info("%s of %s on account %s, balance now %s",
                        type.capitalize(), amt, account.id, outcome.value)
        else:
            logger.warning("Denied %s of %r on account %s: %s",
                           type, amount, account.id, outcome.message)
        return outcome

    def _record(self, type: str, amount: Decimal | None, outcome: Outcome, memo: str = "") -> int:
        transaction = Transaction.from_outcome(
            type=type,
            account=self.account.id,
            amount=amount,
            outcome=outcome,
            balance_after=self.account.balance,
            memo=memo,
        )
        return self._transaction_repo.create(transaction)
