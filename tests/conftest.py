"""Shared fixtures."""

from decimal import Decimal

import pytest

from src.repositories.transaction_repo import TransactionRepository
from src.services.bank_service import BankService


@pytest.fixture
def transaction_repo():
    """Create an empty TransactionRepository."""
    return TransactionRepository()


@pytest.fixture
def bank_service(transaction_repo):
    """Create a BankService instance with no account opened yet."""
    return BankService(transaction_repo=transaction_repo)


@pytest.fixture
def funded_service(bank_service):
    """A BankService whose account was opened with 5000."""
    bank_service.open_account("Alice", Decimal("5000"), account_id="123456789")
    return bank_service
