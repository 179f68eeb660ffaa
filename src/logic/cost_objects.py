# src/logic/cost_objects.py

from typing import NamedTuple, Optional

from src.core.models.transaction import StockTransaction


class LotMatchState(NamedTuple):
    """
    One step of the cheapest-first fold.

    remaining_to_subtract: sold shares not yet attributed to a purchase lot after this step.
    retained_lot: the lot matched at this step, with the shares left after matching.
    """
    remaining_to_subtract: int
    retained_lot: Optional[StockTransaction] = None

    def __repr__(self) -> str:
        retained = None if self.retained_lot is None else (str(self.retained_lot.stock.price), self.retained_lot.shares)
        return f"LotMatchState(remaining={self.remaining_to_subtract}, retained={retained})"
