"""Data models for the banking system."""

from .account import Account
from .transaction import Transaction
from .outcome import Failure, FailureKind, Ok, Outcome
from .exceptions import (
    BankError,
    AccountNotOpenError,
    InsufficientBalanceError,
    InvalidAmountError,
)

__all__ = [
    "Account",
    "Transaction",
    "Ok",
    "Failure",
    "FailureKind",
    "Outcome",
    "BankError",
    "AccountNotOpenError",
    "InsufficientBalanceError",
    "InvalidAmountError",
]
