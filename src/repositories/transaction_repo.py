"""In-memory transaction log for a single session."""

from dataclasses import replace

from src.models.transaction import Transaction


class TransactionRepository:
    """Repository for Transaction records, kept for the life of the session."""

    def __init__(self):
        self._transactions: list[Transaction] = []

    def create(self, txn: Transaction) -> int:
        """
        Store a transaction and assign it the next sequential ID.

        Args:
            txn: Transaction to store (its id is ignored)

        Returns:
            The assigned transaction ID
        """
        txn_id = len(self._transactions) + 1
        self._transactions.append(replace(txn, id=txn_id))
        return txn_id

    def find_by_id(self, txn_id: int) -> Transaction | None:
        """
        Find a transaction by ID.

        Args:
            txn_id: The transaction ID to search for

        Returns:
            Transaction object if found, None otherwise
        """
        if 1 <= txn_id <= len(self._transactions):
            return self._transactions[txn_id - 1]
        return None

    def find_recent(self, limit: int) -> list[Transaction]:
        """
        Get the most recent transactions, newest first.

        Args:
            limit: Maximum number of transactions to return

        Returns:
            List of transactions ordered by ID descending
        """
        if limit <= 0:
            return []
        return list(reversed(self._transactions[-limit:]))

    def __len__(self) -> int:
        return len(self._transactions)
