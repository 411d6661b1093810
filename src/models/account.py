"""Account data model."""

import uuid
from decimal import Decimal, Inexact, localcontext

from src.models.exceptions import InvalidAmountError
from src.models.money import as_money
from src.models.outcome import Failure, FailureKind, Ok, Outcome


class Account:
    """
    Represents a bank account holding a non-negative balance.

    The balance only changes through deposit() and withdraw(). Both return
    an Outcome; a Failure leaves the balance exactly as it was.
    """

    def __init__(self, id: str, owner_name: str, balance: Decimal):
        balance = as_money(balance)
        if balance < 0:
            raise InvalidAmountError(
                f"Opening balance cannot be negative: {balance}"
            )
        self._id = id
        self._owner_name = owner_name
        self._balance = balance

    @classmethod
    def create(
        cls,
        owner_name: str,
        opening_balance,
        account_id: str | None = None,
    ) -> Outcome:
        """
        Open a new account.

        Args:
            owner_name: The account holder's display name
            opening_balance: Initial balance (must be zero or positive)
            account_id: Account number to use; generated when omitted

        Returns:
            Ok(Account) on success, Failure(INVALID_AMOUNT) otherwise
        """
        if account_id is None:
            account_id = uuid.uuid4().hex[:12]
        try:
            return Ok(cls(account_id, owner_name, opening_balance))
        except InvalidAmountError as err:
            return Failure(FailureKind.INVALID_AMOUNT, str(err))

    def __repr__(self) -> str:
        return f"Account({self._id!r}, owner={self._owner_name!r}, balance={self._balance})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def owner_name(self) -> str:
        return self._owner_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount) -> Outcome:
        """
        Add funds to the account.

        Returns:
            Ok(new_balance), or Failure(INVALID_AMOUNT) for a zero, negative
            or unreadable amount, or one whose sum with the balance cannot be
            held exactly at the current decimal precision
        """
        try:
            amt = as_money(amount)
        except InvalidAmountError as err:
            return Failure(FailureKind.INVALID_AMOUNT, str(err))
        if amt <= 0:
            return Failure(
                FailureKind.INVALID_AMOUNT,
                f"Deposit amount must be greater than zero, got {amt}",
            )
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            try:
                new_balance = self._balance + amt
            except Inexact:
                return Failure(
                    FailureKind.INVALID_AMOUNT,
                    f"Deposit of {amt} would exceed the representable balance",
                )
        self._balance = new_balance
        return Ok(self._balance)

    def withdraw(self, amount) -> Outcome:
        """
        Take funds out of the account.

        Returns:
            Ok(new_balance); Failure(INVALID_AMOUNT) for a zero, negative or
            unreadable amount; Failure(INSUFFICIENT_FUNDS) when the amount
            exceeds the balance
        """
        try:
            amt = as_money(amount)
        except InvalidAmountError as err:
            return Failure(FailureKind.INVALID_AMOUNT, str(err))
        if amt <= 0:
            return Failure(
                FailureKind.INVALID_AMOUNT,
                f"Withdrawal amount must be greater than zero, got {amt}",
            )
        if amt > self._balance:
            return Failure(
                FailureKind.INSUFFICIENT_FUNDS,
                f"Insufficient balance: {self._balance} available, {amt} requested",
            )
        self._balance -= amt
        return Ok(self._balance)
