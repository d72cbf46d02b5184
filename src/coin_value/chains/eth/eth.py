from __future__ import annotations

from decimal import Decimal
from typing import Optional

from coin_value.domain.monetary.amount import Amount
from coin_value.domain.monetary.currency_registry import ETH
from coin_value.utils.decimal_tools import DecimalLike

# Named scales, as exponents relative to wei
KWEI = 3
MWEI = 6
GWEI = 9


class Eth(Amount):
    """Amount of Ether, stored in wei (10**18 wei per ether).

    Example:
        ```python
        fee = Eth.from_gwei("21000") * 30
        fee.ether()  # Decimal('0.000630000000000000')
        ```
    """

    __slots__ = ()

    DEFINITION = ETH

    @classmethod
    def from_ether(cls, ether: DecimalLike) -> Eth:
        return cls.from_coins(ether)

    @classmethod
    def from_wei(cls, wei: Optional[int]) -> Eth:
        return cls.from_units(wei)

    @classmethod
    def from_kwei(cls, kwei: DecimalLike) -> Eth:
        return cls.from_scaled(kwei, KWEI)

    @classmethod
    def from_mwei(cls, mwei: DecimalLike) -> Eth:
        return cls.from_scaled(mwei, MWEI)

    @classmethod
    def from_gwei(cls, gwei: DecimalLike) -> Eth:
        return cls.from_scaled(gwei, GWEI)

    def wei(self) -> int:
        """Value in wei (exact)."""
        return self.units

    def kwei(self) -> Decimal:
        """Value in kwei."""
        return self.scaled_value(KWEI)

    def mwei(self) -> Decimal:
        """Value in mwei."""
        return self.scaled_value(MWEI)

    def gwei(self) -> Decimal:
        """Value in gwei."""
        return self.scaled_value(GWEI)

    def ether(self) -> Decimal:
        """Value in ether."""
        return self.coins()
