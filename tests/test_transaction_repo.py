"""Tests for TransactionRepository."""

from decimal import Decimal

from src.models.outcome import Ok
from src.models.transaction import Transaction


def _txn(type="deposit", amount=100):
    return Transaction.from_outcome(
        type=type,
        account="123456789",
        amount=Decimal(amount),
        outcome=Ok(Decimal(amount)),
        balance_after=Decimal(amount),
    )


def test_create_transaction(transaction_repo):
    """Create, then find by ID."""
    txn_id = transaction_repo.create(_txn())

    # ID should be assigned
    assert txn_id == 1

    found = transaction_repo.find_by_id(1)
    assert found is not None
    assert found.id == 1
    assert found.type == "deposit"
    assert found.amount == Decimal(100)


def test_create_does_not_mutate_input(transaction_repo):
    txn = _txn()
    transaction_repo.create(txn)

    assert txn.id is None


def test_find_by_id_not_found(transaction_repo):
    """Should return None."""
    assert transaction_repo.find_by_id(999) is None
    assert transaction_repo.find_by_id(0) is None


def test_find_recent(transaction_repo):
    """Newest first, limited."""
    for amount in (100, 200, 300):
        transaction_repo.create(_txn(amount=amount))

    recent = transaction_repo.find_recent(2)

    assert [t.id for t in recent] == [3, 2]
    assert transaction_repo.find_recent(0) == []
    assert len(transaction_repo) == 3
