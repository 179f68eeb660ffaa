# src/tests/unit/test_stock_transaction.py

import pytest
from decimal import Decimal, localcontext
from pydantic import ValidationError

from src.core.models.stock import Stock, normalize_ticker
from src.core.models.transaction import StockTransaction, round_value

@pytest.fixture
def goog():
    return Stock(ticker="GOOG", name="", price=Decimal("1234"))

def test_happy_path_constructor(goog):
    """Test the transaction keeps the stock and share count it was built with."""
    transaction = StockTransaction(stock=goog, shares=1)
    assert transaction.shares == 1
    assert transaction.stock is goog

def test_none_stock_constructor():
    """Test a transaction cannot be created without a stock."""
    with pytest.raises(ValueError):
        StockTransaction(stock=None, shares=1)

def test_zero_shares_constructor(goog):
    """Test a zero-share transaction is accepted."""
    assert StockTransaction(stock=goog, shares=0).shares == 0

def test_negative_shares_constructor(goog):
    """Test a negative share count is rejected."""
    with pytest.raises(ValidationError):
        StockTransaction(stock=goog, shares=-1)

def test_value_rounds_half_up_to_four_places():
    """Test 100 shares @ 10.111111 is valued at 1011.1111."""
    transaction = StockTransaction(stock=Stock(ticker="GOOG", price=Decimal("10.111111")), shares=100)
    assert transaction.value == Decimal("1011.1111")

def test_value_half_up_tie():
    """Test a value exactly halfway between two 4-dp values rounds up."""
    transaction = StockTransaction(stock=Stock(ticker="GOOG", price=Decimal("0.00005")), shares=1)
    assert transaction.value == Decimal("0.0001")

def test_zero_share_value_is_zero(goog):
    assert StockTransaction(stock=goog, shares=0).value == Decimal(0)

def test_transaction_is_immutable(goog):
    """Test transactions cannot be mutated after creation."""
    transaction = StockTransaction(stock=goog, shares=3)
    with pytest.raises(ValidationError):
        transaction.shares = 5
    assert transaction.shares == 3

def test_with_shares_returns_copy(goog):
    transaction = StockTransaction(stock=goog, shares=3)
    copy = transaction.with_shares(1)
    assert copy.shares == 1
    assert copy.stock == goog
    assert transaction.shares == 3

def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        Stock(ticker="GOOG", price=Decimal("-1"))

@pytest.mark.parametrize("left, right", [("goog", "GOOG"), (" GOOG ", "goog"), ("\tGoOg\n", "GOOG")])
def test_ticker_matching_is_case_and_whitespace_insensitive(left, right):
    assert Stock(ticker=left, price=Decimal("1")).matches(right)
    assert normalize_ticker(left) == normalize_ticker(right)

def test_ticker_matching_distinguishes_tickers():
    assert not Stock(ticker="GOOG", price=Decimal("1")).matches("GOOGL")

def test_value_ignores_low_context_precision():
    """Test the value is computed exactly even when the active context is narrower than the value."""
    transaction = StockTransaction(stock=Stock(ticker="GOOG", price=Decimal("10.111111")), shares=100)
    with localcontext() as ctx:
        ctx.prec = 5
        assert transaction.value == Decimal("1011.1111")
        assert round_value(Decimal("98765.43215")) == Decimal("98765.4322")
