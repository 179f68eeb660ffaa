# src/services/portfolio_ledger.py

import logging
import threading
from collections import defaultdict
from decimal import Decimal
from typing import Dict, List, Optional, Set

from src.core.enums.transaction_type import TransactionType
from src.core.exceptions import InvalidArgumentError
from src.core.models.stock import Stock, normalize_ticker
from src.core.models.transaction import StockTransaction, round_value
from src.logic.lot_matching import CheapestFirstLotMatcher
from src.logic.profit_calculator import ProfitCalculator
from src.logic.sorter import TransactionSorter

logger = logging.getLogger(__name__)

class PortfolioLedger:
    """
    Records stock purchases and sales and derives, per ticker, the lots still
    under management, their value, and the realized profit.

    Purchases and sales are append-only. Nothing derived is stored: every
    query re-runs cheapest-first matching over the current transactions.
    Safe to share between threads.
    """
    def __init__(
        self,
        sorter: Optional[TransactionSorter] = None,
        lot_matcher: Optional[CheapestFirstLotMatcher] = None,
        profit_calculator: Optional[ProfitCalculator] = None
    ):
        self._sorter = sorter or TransactionSorter()
        self._lot_matcher = lot_matcher or CheapestFirstLotMatcher(sorter=self._sorter)
        self._profit_calculator = profit_calculator or ProfitCalculator()

        self._purchases: List[StockTransaction] = []
        self._sales: List[StockTransaction] = []
        # Guards appends and snapshots of both lists, and creation of ticker locks
        self._lock = threading.Lock()
        # Held across the inventory check and the append in sell()
        self._ticker_locks: Dict[str, threading.Lock] = defaultdict(threading.Lock)

    # --- Mutations ---

    def buy(self, stock: Stock, shares: int) -> None:
        """
        Adds a purchase of `shares` shares of `stock` to the ledger.

        Raises:
            InvalidArgumentError: if shares <= 0.
        """
        self._require_positive_shares(shares)
        purchase = StockTransaction(stock=stock, shares=shares)
        self._append(TransactionType.BUY, purchase)
        logger.info(f"Bought {shares} shares of {stock.ticker} @ {stock.price}.")

    def sell(self, ticker: str, shares: int, price_per_share: Decimal) -> Optional[Set[Decimal]]:
        """
        Records a sale of `shares` shares of `ticker` at `price_per_share`.

        Which lots the sale consumes is decided later by cheapest-first
        matching; the sale price only feeds into profit.

        Returns:
            None, with nothing recorded, if the shares purchased for the ticker
            do not cover the shares already sold plus this sale. Otherwise the
            distinct values of every sale recorded for the ticker, this one
            included. Sales with equal values appear once.

        Raises:
            InvalidArgumentError: if shares <= 0.
        """
        self._require_positive_shares(shares)

        # Only tickers that were bought get a sell lock
        if not self._purchases_for(ticker):
            logger.warning(f"Sell declined for {ticker}: no shares purchased.")
            return None

        with self._ticker_lock(ticker):
            purchased = self._profit_calculator.sum_shares(self._purchases_for(ticker))
            already_sold = self._profit_calculator.sum_shares(self._sales_for(ticker))
            if purchased < already_sold + shares:
                logger.warning(f"Sell declined for {ticker}: {shares} requested, "
                               f"{purchased - already_sold} available ({purchased} purchased, {already_sold} sold).")
                return None

            sale = StockTransaction(stock=Stock(ticker=ticker, name="", price=price_per_share), shares=shares)
            self._append(TransactionType.SELL, sale)

        logger.info(f"Sold {shares} shares of {ticker} @ {price_per_share}.")
        sale_values = sorted(txn.value for txn in self._sales_for(ticker))
        return set(sale_values)

    # --- Queries ---

    def lots_under_management(self, ticker: str) -> List[StockTransaction]:
        """
        The purchase lots of `ticker` not yet attributed to a sale, cheapest
        first, each with its remaining share count.
        """
        purchases = self._purchases_for(ticker)
        total_sold = self._profit_calculator.sum_shares(self._sales_for(ticker))
        return self._lot_matcher.match(purchases, total_sold)

    def find_by_ticker(self, ticker: str) -> List[Stock]:
        """Get the stocks currently under management for a ticker symbol."""
        return [lot.stock for lot in self.lots_under_management(ticker)]

    def value_under_management(self, ticker: str) -> Decimal:
        """
        Total value of the lots under management for a ticker, rounded half-up
        to 4 decimal places. Exactly Decimal(0) when nothing is held.
        """
        value = self._profit_calculator.sum_value(self.lots_under_management(ticker))
        if value == Decimal(0):
            return Decimal(0)
        return round_value(value)

    def shares_under_management(self, ticker: str) -> int:
        return self._profit_calculator.sum_shares(self.lots_under_management(ticker))

    def profit_for_ticker(self, ticker: str) -> Optional[Decimal]:
        """
        Average sale price minus average purchase price for a ticker.

        None if the ticker was never purchased, or has no sales yet.
        """
        purchases = self._purchases_for(ticker)
        if self._profit_calculator.sum_shares(purchases) <= 0:
            return None
        return self._profit_calculator.calculate_profit(purchases, self._sales_for(ticker))

    # --- Internals ---

    @staticmethod
    def _require_positive_shares(shares: int):
        if shares <= 0:
            logger.warning(f"Rejected transaction with {shares} shares.")
            raise InvalidArgumentError("number of shares must be greater than 0")

    def _append(self, transaction_type: TransactionType, transaction: StockTransaction):
        with self._lock:
            if transaction_type == TransactionType.BUY:
                self._purchases.append(transaction)
            else:
                self._sales.append(transaction)
        logger.debug(f"Ledger: Recorded {transaction_type.value} of {transaction.shares} "
                     f"{transaction.stock.ticker} @ {transaction.stock.price} (value {transaction.value}).")

    def _ticker_lock(self, ticker: str) -> threading.Lock:
        with self._lock:
            return self._ticker_locks[normalize_ticker(ticker)]

    def _purchases_for(self, ticker: str) -> List[StockTransaction]:
        with self._lock:
            snapshot = list(self._purchases)
        return self._sorter.filter_by_ticker(snapshot, ticker)

    def _sales_for(self, ticker: str) -> List[StockTransaction]:
        with self._lock:
            snapshot = list(self._sales)
        return self._sorter.filter_by_ticker(snapshot, ticker)
