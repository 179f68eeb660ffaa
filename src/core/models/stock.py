# src/core/models/stock.py

from pydantic import BaseModel, Field, condecimal, ConfigDict


def normalize_ticker(ticker: str) -> str:
    """Tickers are compared case-insensitively, ignoring surrounding whitespace."""
    return ticker.strip().upper()


class Stock(BaseModel):
    """
    Reference to a listed stock at a given price.
    Constructed and validated by the caller; the ledger treats it as opaque.
    """
    ticker: str = Field(..., description="Ticker symbol (e.g., GOOG)")
    name: str = Field(default="", description="Display name of the company")
    price: condecimal(ge=0) = Field(..., description="Price per share")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        from_attributes=True
    )

    def matches(self, ticker: str) -> bool:
        return normalize_ticker(self.ticker) == normalize_ticker(ticker)
