__version__ = "0.1.0"

from coin_value.domain.monetary.amount import Amount
from coin_value.domain.monetary.currency_definition import CurrencyDefinition
from coin_value.domain.monetary.currency_registry import BTC, ETH
from coin_value.errors import CoinValueError, DivisionByZeroError, InvalidAddressError, MismatchedCurrencyError, TransportError

__all__ = [
    "Amount",
    "BTC",
    "CoinValueError",
    "CurrencyDefinition",
    "DivisionByZeroError",
    "ETH",
    "InvalidAddressError",
    "MismatchedCurrencyError",
    "TransportError",
]
