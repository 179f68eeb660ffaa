# src/logic/sorter.py

from typing import Iterable, List
from src.core.models.transaction import StockTransaction

class TransactionSorter:
    """
    Responsible for selecting the transactions of one ticker and ordering
    purchase lots for cheapest-first matching.
    """

    def filter_by_ticker(
        self,
        transactions: Iterable[StockTransaction],
        ticker: str
    ) -> List[StockTransaction]:
        """Keeps the transactions whose stock matches the ticker, in input order."""
        return [txn for txn in transactions if txn.stock.matches(ticker)]

    def sort_cheapest_first(
        self,
        transactions: Iterable[StockTransaction]
    ) -> List[StockTransaction]:
        """
        Sorts transactions by price per share, ascending.

        Python's sort is stable, so lots bought at the same price keep the
        order in which they were recorded.

        Args:
            transactions: Purchase transactions, in any order.

        Returns:
            A new list, cheapest lot first.
        """
        return sorted(transactions, key=lambda txn: txn.stock.price)
