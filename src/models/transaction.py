"""Transaction data model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.models.outcome import Outcome


@dataclass
class Transaction:
    """Represents one attempted operation on the session's account."""

    id: int | None
    type: str
    time: datetime
    account: str
    status: str
    amount: Decimal | None
    balance_after: Decimal
    memo: str

    @classmethod
    def from_outcome(
        cls,
        type: str,
        account: str,
        amount: Decimal | None,
        outcome: Outcome,
        balance_after: Decimal,
        memo: str = "",
    ) -> "Transaction":
        """
        Record the result of an operation with current timestamp.

        A failed outcome is stored as 'denied' with the failure message
        appended to the memo.

        Args:
            type: The type of transaction ('open', 'deposit' or 'withdraw')
            account: The account id
            amount: The normalized amount, or None if it could not be read
            outcome: The Outcome returned by the account
            balance_after: The account balance once the operation finished
            memo: Transaction memo/note

        Returns:
            A new Transaction with id=None
        """
        if outcome.ok:
            status = "done"
        else:
            status = "denied"
            memo = f"{memo}/Err: {outcome.message}" if memo else f"Err: {outcome.message}"
        return cls(
            id=None,
            type=type,
            time=datetime.now(),
            account=account,
            status=status,
            amount=amount,
            balance_after=balance_after,
            memo=memo,
        )
