# src/core/exceptions.py


class InvalidArgumentError(ValueError):
    """
    Raised when a ledger operation receives an argument it cannot act on,
    e.g. a non-positive number of shares. The call has no side effect.
    """
    pass
