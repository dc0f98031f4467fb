"""Deduplicated, insertion-ordered list of every transaction seen."""

from typing import Iterable, Iterator

from transaction_feed.models.transaction import Transaction


class TransactionAccumulator:
    """
    Running list of transactions, unique by id.

    merge() only ever appends transactions with unseen ids, in the order
    received. Present entries keep their position and their first-seen
    values; replace() is the only way to change one.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._items: list[Transaction] = []
        self._index: dict[str, int] = {}
        self.merge(transactions)

    @property
    def items(self) -> tuple[Transaction, ...]:
        return tuple(self._items)

    def merge(self, batch: Iterable[Transaction]) -> int:
        """
        Append the transactions of batch whose ids are not present yet.

        Returns:
            Number of transactions appended.
        """
        added = 0
        for transaction in batch:
            if transaction.id in self._index:
                continue
            self._index[transaction.id] = len(self._items)
            self._items.append(transaction)
            added += 1
        return added

    def replace(self, transaction: Transaction) -> bool:
        """
        Swap in a new version of a present transaction at the same position.

        Returns:
            False if no transaction with that id is present.
        """
        position = self._index.get(transaction.id)
        if position is None:
            return False
        self._items[position] = transaction
        return True

    def get(self, transaction_id: str) -> Transaction | None:
        position = self._index.get(transaction_id)
        return None if position is None else self._items[position]

    def clear(self) -> None:
        self._items.clear()
        self._index.clear()

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._index

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)
