# src/core/enums/transaction_type.py

from enum import Enum

class TransactionType(str, Enum):
    """
    The two sides of the ledger.
    Inheriting from 'str' keeps the values usable directly in log messages.
    """
    BUY = "BUY"
    SELL = "SELL"
