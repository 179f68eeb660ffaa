# src/core/models/transaction.py

from decimal import Decimal, ROUND_HALF_UP, localcontext
from pydantic import BaseModel, Field, ConfigDict

from src.core.models.stock import Stock

# Transaction values are kept to 4 decimal places
VALUE_QUANTUM = Decimal("0.0001")
# Lowest context precision used when computing values, whatever the caller's context
MIN_VALUE_PRECISION = 28


def round_value(amount: Decimal) -> Decimal:
    """Rounds a monetary amount half-up to 4 decimal places."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, MIN_VALUE_PRECISION)
        return amount.quantize(VALUE_QUANTUM, rounding=ROUND_HALF_UP)


class StockTransaction(BaseModel):
    """
    A single purchase or sale of a number of shares of a stock.
    Immutable once created. A zero share count is accepted but never
    counts towards holdings.
    """
    stock: Stock = Field(..., description="The stock bought or sold, including the price per share")
    shares: int = Field(..., ge=0, description="Number of shares in the transaction")

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        arbitrary_types_allowed=False
    )

    @property
    def value(self) -> Decimal:
        """shares * price, rounded half-up to 4 decimal places."""
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, MIN_VALUE_PRECISION)
            return round_value(Decimal(self.shares) * self.stock.price)

    def with_shares(self, shares: int) -> "StockTransaction":
        """Returns a copy of this transaction for a different number of shares."""
        return StockTransaction(stock=self.stock, shares=shares)
