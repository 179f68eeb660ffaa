# src/core/models/response.py

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.core.models.transaction import StockTransaction


class HeldLot(BaseModel):
    """
    A purchase lot still under management.
    """
    ticker: str
    name: str = ""
    price: Decimal = Field(..., description="Price paid per share for this lot.")
    shares: int = Field(..., description="Shares of the lot not yet attributed to a sale.")
    value: Decimal = Field(..., description="shares * price, 4 decimal places.")

    @classmethod
    def from_transaction(cls, lot: StockTransaction) -> "HeldLot":
        return cls(
            ticker=lot.stock.ticker,
            name=lot.stock.name,
            price=lot.stock.price,
            shares=lot.shares,
            value=lot.value
        )


class BuyResponse(BaseModel):
    ticker: str
    shares_under_management: int


class SellResponse(BaseModel):
    """
    Outcome of a sale: the distinct values of all sales recorded for the ticker.
    """
    ticker: str
    sale_values: List[Decimal] = Field(default_factory=list, description="Distinct sale values, ascending.")


class HoldingSummary(BaseModel):
    """
    Holdings and realized profit for one ticker.
    """
    ticker: str
    shares_under_management: int
    value_under_management: Decimal
    profit: Optional[Decimal] = Field(None, description="Average sale price minus average purchase price; null without purchases or sales.")
