"""Tests for BankService withdraw operations."""

from decimal import Decimal

import pytest

from src.models.exceptions import InsufficientBalanceError
from src.models.outcome import FailureKind


def test_withdraw_success(funded_service, transaction_repo):
    """Withdraw from funded account."""
    outcome = funded_service.withdraw(1000, "Test withdraw")

    assert outcome.ok
    assert outcome.value == Decimal("4000.00")

    transaction = transaction_repo.find_by_id(2)
    assert transaction.type == "withdraw"
    assert transaction.status == "done"
    assert transaction.amount == Decimal("1000.00")
    assert transaction.balance_after == Decimal("4000.00")


def test_withdraw_negative_amount(funded_service):
    """Should fail with INVALID_AMOUNT, not INSUFFICIENT_FUNDS."""
    outcome = funded_service.withdraw(-100)

    assert outcome.kind is FailureKind.INVALID_AMOUNT
    assert "greater than zero" in outcome.message


def test_withdraw_insufficient_balance(funded_service, transaction_repo):
    """Should fail with INSUFFICIENT_FUNDS and leave the balance alone."""
    outcome = funded_service.withdraw(999999)

    assert outcome.kind is FailureKind.INSUFFICIENT_FUNDS
    assert funded_service.get_balance() == Decimal("5000")
    assert transaction_repo.find_by_id(2).status == "denied"


def test_withdraw_exact_balance(funded_service):
    """Withdraw exact amount."""
    outcome = funded_service.withdraw(5000)

    assert outcome.ok
    assert funded_service.get_balance() == Decimal("0")


def test_withdraw_exceeds_max_amount(funded_service):
    outcome = funded_service.withdraw(1000000000001)

    assert outcome.kind is FailureKind.INVALID_AMOUNT


def test_withdraw_unwrap_raises(funded_service):
    with pytest.raises(InsufficientBalanceError):
        funded_service.withdraw(5001).unwrap()


def test_repeated_failed_withdrawals(funded_service, transaction_repo):
    """Repeating a failing call never changes balance."""
    for _ in range(10):
        funded_service.withdraw(6000)

    assert funded_service.get_balance() == Decimal("5000")
    assert len(transaction_repo) == 11
