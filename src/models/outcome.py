"""Typed results returned by account operations.

Rejected operations return a ``Failure`` instead of raising. Call
``unwrap()`` to get the value or the matching exception.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.models.exceptions import InsufficientBalanceError, InvalidAmountError


class FailureKind(Enum):
    """Reasons an account operation can be rejected."""

    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


_ERRORS = {
    FailureKind.INVALID_AMOUNT: InvalidAmountError,
    FailureKind.INSUFFICIENT_FUNDS: InsufficientBalanceError,
}


@dataclass(frozen=True)
class Ok:
    """A successful operation carrying its result."""

    value: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A rejected operation; the account it targeted is unchanged."""

    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the exception matching this failure's kind."""
        raise _ERRORS[self.kind](self.message)


Outcome = Ok | Failure
