"""Error family shared by the value types and the chain helpers.

Every error is recoverable: nothing in this package terminates the process on bad input.
The concrete errors also derive from the matching builtin (`ValueError`, `ZeroDivisionError`)
so callers that already catch builtins keep working.
"""

from __future__ import annotations


class CoinValueError(Exception):
    """Base class for all errors raised by this package."""


class MismatchedCurrencyError(CoinValueError, ValueError):
    """Raised when two amounts of different currencies are combined or compared.

    Attributes:
        left (str): Currency name of the receiver.
        right (str): Currency name of the other operand.
    """

    def __init__(self, operation: str, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(f"Cannot call `{operation}` because currencies differ: {left} and {right}")


class DivisionByZeroError(CoinValueError, ZeroDivisionError):
    """Raised when an amount is divided by a zero amount or a zero scalar."""


class InvalidAddressError(CoinValueError, ValueError):
    """Raised when an address string is not `0x` followed by 40 hex digits."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid address: '{address}'")


class TransportError(CoinValueError):
    """Raised when the chain client fails to talk to the RPC node.

    The original exception (if any) is available as `__cause__`.
    """
