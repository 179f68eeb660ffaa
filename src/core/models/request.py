# src/core/models/request.py

from pydantic import BaseModel, Field, condecimal, ConfigDict

from src.core.models.stock import Stock

class BuyRequest(BaseModel):
    """
    Input payload for recording a purchase.
    """
    stock: Stock = Field(..., description="The stock purchased, with the price paid per share.")
    shares: int = Field(..., gt=0, description="Number of shares purchased.")

    model_config = ConfigDict(
        json_schema_extra = {
            "example": {
                "stock": {"ticker": "GOOG", "name": "Alphabet Inc.", "price": "135.25"},
                "shares": 10
            }
        },
        extra='ignore'
    )

class SellRequest(BaseModel):
    """
    Input payload for recording a sale.
    """
    ticker: str = Field(..., min_length=1, description="Ticker symbol of the stock sold.")
    shares: int = Field(..., gt=0, description="Number of shares sold.")
    price_per_share: condecimal(ge=0) = Field(..., description="Price received per share.")

    model_config = ConfigDict(
        json_schema_extra = {
            "example": {"ticker": "GOOG", "shares": 5, "price_per_share": "140.00"}
        },
        extra='ignore'
    )
