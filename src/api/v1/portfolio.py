# src/api/v1/portfolio.py

import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.core.models.request import BuyRequest, SellRequest
from src.core.models.response import BuyResponse, SellResponse, HeldLot, HoldingSummary
from src.services.portfolio_ledger import PortfolioLedger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/portfolio")

def get_portfolio_ledger(request: Request) -> PortfolioLedger:
    """
    Provides the ledger owned by the running application.
    """
    return request.app.state.ledger

@router.post(
    "/buy",
    response_model=BuyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a stock purchase"
)
def buy_endpoint(
    request: BuyRequest,
    ledger: PortfolioLedger = Depends(get_portfolio_ledger)
) -> BuyResponse:
    ledger.buy(request.stock, request.shares)
    return BuyResponse(
        ticker=request.stock.ticker,
        shares_under_management=ledger.shares_under_management(request.stock.ticker)
    )

@router.post(
    "/sell",
    response_model=SellResponse,
    summary="Record a stock sale",
    description="Records the sale if enough shares were purchased for the ticker. "
                "Lots are consumed cheapest first. Returns the distinct values of "
                "all sales recorded for the ticker."
)
def sell_endpoint(
    request: SellRequest,
    ledger: PortfolioLedger = Depends(get_portfolio_ledger)
) -> SellResponse:
    sale_values = ledger.sell(request.ticker, request.shares, request.price_per_share)
    if sale_values is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Not enough shares of '{request.ticker}' under management to sell {request.shares}."
        )
    return SellResponse(ticker=request.ticker, sale_values=sorted(sale_values))

@router.get(
    "/{ticker}/lots",
    response_model=list[HeldLot],
    summary="List the lots under management for a ticker"
)
def lots_endpoint(
    ticker: str,
    ledger: PortfolioLedger = Depends(get_portfolio_ledger)
) -> list[HeldLot]:
    return [HeldLot.from_transaction(lot) for lot in ledger.lots_under_management(ticker)]

@router.get(
    "/{ticker}/summary",
    response_model=HoldingSummary,
    summary="Holdings and realized profit for a ticker"
)
def summary_endpoint(
    ticker: str,
    ledger: PortfolioLedger = Depends(get_portfolio_ledger)
) -> HoldingSummary:
    return HoldingSummary(
        ticker=ticker,
        shares_under_management=ledger.shares_under_management(ticker),
        value_under_management=ledger.value_under_management(ticker),
        profit=ledger.profit_for_ticker(ticker)
    )
