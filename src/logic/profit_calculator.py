# src/logic/profit_calculator.py

import logging
from decimal import Decimal, localcontext
from typing import Iterable, Optional

from src.core.models.transaction import StockTransaction, MIN_VALUE_PRECISION

logger = logging.getLogger(__name__)


class ProfitCalculator:
    """
    Aggregates transactions into share counts, values and average prices,
    and derives the realized profit per share for a ticker.
    """

    def sum_shares(self, transactions: Iterable[StockTransaction]) -> int:
        return sum((txn.shares for txn in transactions), 0)

    def sum_value(self, transactions: Iterable[StockTransaction]) -> Decimal:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, MIN_VALUE_PRECISION)
            return sum((txn.value for txn in transactions), Decimal(0))

    def average_price(self, transactions: Iterable[StockTransaction]) -> Optional[Decimal]:
        """
        Total value divided by total shares. None when there are no shares,
        rather than dividing by zero.
        """
        transactions = list(transactions)
        total_shares = self.sum_shares(transactions)
        if total_shares <= 0:
            return None
        return self.sum_value(transactions) / Decimal(total_shares)

    def calculate_profit(
        self,
        purchases: Iterable[StockTransaction],
        sales: Iterable[StockTransaction]
    ) -> Optional[Decimal]:
        """
        Average sale price minus average purchase price.

        Returns None when nothing was purchased, or when nothing was sold yet.
        """
        average_purchase_price = self.average_price(purchases)
        if average_purchase_price is None:
            logger.debug("ProfitCalculator: No purchased shares, no profit to report.")
            return None

        average_sale_price = self.average_price(sales)
        if average_sale_price is None:
            logger.debug("ProfitCalculator: No sold shares, no realized profit to report.")
            return None

        profit = average_sale_price - average_purchase_price
        logger.debug(f"ProfitCalculator: avg sale {average_sale_price} - avg purchase {average_purchase_price} = {profit}")
        return profit
