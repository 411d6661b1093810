"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., zero or negative amount)."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when an account has insufficient balance for a withdrawal."""
    pass


class AccountNotOpenError(BankError):
    """Raised when the session is used before an account has been opened."""
    pass
