# src/logic/lot_matching.py
import logging
from itertools import accumulate
from typing import Iterable, List

from src.core.models.transaction import StockTransaction
from src.logic.cost_objects import LotMatchState
from src.logic.sorter import TransactionSorter

logger = logging.getLogger(__name__)


class CheapestFirstLotMatcher:
    """
    Determines which purchase lots are still under management once sales are
    accounted for. Sold shares are attributed to the cheapest lots first,
    whatever the price or order of the sales.
    """
    def __init__(self, sorter: TransactionSorter):
        self._sorter = sorter

    @staticmethod
    def match_lot(state: LotMatchState, lot: StockTransaction) -> LotMatchState:
        """
        Attributes as many of the outstanding sold shares as possible to one lot.
        """
        remaining = state.remaining_to_subtract
        purchased = lot.shares

        if remaining <= 0:
            return LotMatchState(remaining, lot)

        shares_delta = purchased - remaining
        if shares_delta < 0:
            # Lot fully consumed, sold shares left over for the next lot
            logger.debug(f"  Lot match: {purchased} @ {lot.stock.price} fully consumed. Still to attribute: {remaining - purchased}.")
            return LotMatchState(remaining - purchased, lot.with_shares(0))

        logger.debug(f"  Lot match: {purchased - shares_delta} of {purchased} @ {lot.stock.price} consumed, {shares_delta} retained.")
        return LotMatchState(0, lot.with_shares(shares_delta))

    def match(self, purchases: Iterable[StockTransaction], total_sold: int) -> List[StockTransaction]:
        """
        Folds the sold quantity over the purchase lots in cheapest-first order.

        Args:
            purchases: Purchase transactions of a single ticker.
            total_sold: Total number of shares sold for that ticker.

        Returns:
            The lots still under management, cheapest first. Lots with no
            shares left are dropped.
        """
        cheapest_first = self._sorter.sort_cheapest_first(purchases)
        logger.debug(f"Matching {total_sold} sold shares against {len(cheapest_first)} purchase lots.")

        # One state per lot, after the initial state
        states = list(accumulate(cheapest_first, self.match_lot, initial=LotMatchState(total_sold)))

        if states[-1].remaining_to_subtract > 0:
            logger.warning(f"Sold shares exceed purchased shares by {states[-1].remaining_to_subtract}; all lots consumed.")

        return [state.retained_lot for state in states[1:] if state.retained_lot.shares > 0]
