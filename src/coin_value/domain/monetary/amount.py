from __future__ import annotations

from decimal import Decimal
from typing import ClassVar, Optional, Type, TypeVar

from coin_value.domain.monetary.currency_definition import CurrencyDefinition
from coin_value.errors import DivisionByZeroError, MismatchedCurrencyError
from coin_value.utils.decimal_tools import DecimalLike, as_decimal, shift_to_units, truncating_div, units_to_decimal

A = TypeVar("A", bound="Amount")


class Amount:
    """Fixed-point amount of one currency, stored exactly as an integer count of smallest units.

    The integer $units is the only stored quantity. Every decimal accessor recomputes its
    result from $units and rounds (half away from zero) only at that boundary, so rounding
    never compounds across operations.

    The generic engine takes its CurrencyDefinition as data. A concrete currency binds its
    definition by subclassing and setting `DEFINITION`, after which the definition can be
    omitted everywhere:

        ```python
        class Eth(Amount):
            DEFINITION = ETH

        Eth.from_coins("1.5").units  # 1500000000000000000
        ```

    Currency safety is a runtime check: every binary operation compares currency names and
    raises `MismatchedCurrencyError` when they differ.

    Instances are immutable; arithmetic returns a new instance of the receiver's class bound
    to the receiver's definition.
    """

    __slots__ = ("_units", "_definition")

    # Definition bound by a concrete currency subclass
    DEFINITION: ClassVar[Optional[CurrencyDefinition]] = None

    def __init__(self, units: Optional[int] = None, definition: Optional[CurrencyDefinition] = None):
        """Initialize an Amount from raw smallest units.

        Args:
            units: Count of smallest units. None is treated as zero.
            definition: Currency definition. Defaults to the class `DEFINITION`.

        Raises:
            TypeError: If $units is not an int, or no definition is available.
        """
        if units is None:
            units = 0

        # Raise: $units must be an exact integer; floats and Decimals go through `from_coins`/`from_scaled`
        if not isinstance(units, int) or isinstance(units, bool):
            raise TypeError(f"Cannot create `{self.__class__.__name__}` because $units must be an int, but provided value is: {units!r}. Use `from_coins` or `from_scaled` for decimal input")

        object.__setattr__(self, "_units", units)
        object.__setattr__(self, "_definition", self._resolve_definition(definition))

    @classmethod
    def _resolve_definition(cls, definition: Optional[CurrencyDefinition]) -> CurrencyDefinition:
        if definition is None:
            definition = cls.DEFINITION

        # Raise: plain `Amount` has no bound definition
        if definition is None:
            raise TypeError(f"Cannot create `{cls.__name__}` because $definition is missing and the class has no `DEFINITION`")

        if not isinstance(definition, CurrencyDefinition):
            raise TypeError(f"$definition must be a CurrencyDefinition instance, but provided value is: {definition!r}")

        # Raise: a currency subclass is bound to its own definition only
        if cls.DEFINITION is not None and definition != cls.DEFINITION:
            raise TypeError(f"Cannot create `{cls.__name__}` with $definition {definition!r} because the class is bound to {cls.DEFINITION!r}")

        return definition

    # region Constructors

    @classmethod
    def from_units(cls: Type[A], units: Optional[int], definition: Optional[CurrencyDefinition] = None) -> A:
        """Create an amount from raw smallest units (no rounding). None means zero."""
        return cls(units, definition)

    @classmethod
    def from_coins(cls: Type[A], value: DecimalLike, definition: Optional[CurrencyDefinition] = None) -> A:
        """Create an amount from a whole-coin decimal.

        `units = round(value * 10**unit_exponent)`, rounding half away from zero. This is the
        only constructor (besides `from_scaled`) where input precision can be lost.

        Raises:
            ValueError: If $value is not a finite decimal.
        """
        definition = cls._resolve_definition(definition)
        return cls(shift_to_units(as_decimal(value), definition.unit_exponent), definition)

    @classmethod
    def from_scaled(cls: Type[A], value: DecimalLike, scale_exp: int, definition: Optional[CurrencyDefinition] = None) -> A:
        """Create an amount from a decimal expressed at a named scale.

        `units = round(value * 10**(unit_exponent - scale_exp))`, rounding half away from
        zero. For an 18-digit currency and $scale_exp 9 this is `value * 10**9`. A $scale_exp
        above `unit_exponent` makes the multiplier exponent negative, which divides.

        Raises:
            ValueError: If $scale_exp is negative, if the currency has no subunits
                (`unit_exponent == 0`) and $scale_exp is positive, or if $value is not a
                finite decimal.
        """
        definition = cls._resolve_definition(definition)
        _check_scale_exp("from_scaled", scale_exp)

        # Raise: a currency without subunits has no scale finer than the coin
        if definition.unit_exponent == 0 and scale_exp > 0:
            raise ValueError(f"Cannot call `from_scaled` because {definition.name} has no subunits, but $scale_exp is {scale_exp}")

        return cls(shift_to_units(as_decimal(value), definition.unit_exponent - scale_exp), definition)

    @classmethod
    def from_str(cls: Type[A], value_str: str) -> A:
        """Parse an amount from a string like '1.5 ETH' (whole coins, registered currency).

        This is the inverse of `str()` for registered currencies.

        Raises:
            ValueError: If the format is invalid, the value is not a finite decimal, or the
                currency is not registered.
            TypeError: If the class is bound to a different currency.
        """
        if not isinstance(value_str, str):
            raise TypeError(f"$value_str must be a string, but provided value is: {value_str!r}")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_name'")

        value_part, currency_part = parts
        return cls.from_coins(value_part, CurrencyDefinition.from_str(currency_part))

    # endregion

    # region Accessors

    @property
    def units(self) -> int:
        """Exact count of smallest units."""
        return self._units

    @property
    def definition(self) -> CurrencyDefinition:
        return self._definition

    @property
    def currency_name(self) -> str:
        return self._definition.name

    def coins(self) -> Decimal:
        """Value in whole coins, quantized to `unit_exponent` places."""
        exp = self._definition.unit_exponent
        return units_to_decimal(self._units, exp, exp)

    def scaled_value(self, scale_exp: int) -> Decimal:
        """Value expressed at scale 10**$scale_exp of the smallest unit.

        The result is always quantized to `unit_exponent` places, i.e. to the currency's
        resolution and not to the resolution of the requested scale.

        Raises:
            ValueError: If $scale_exp is negative.
        """
        _check_scale_exp("scaled_value", scale_exp)
        return units_to_decimal(self._units, scale_exp, self._definition.unit_exponent)

    # endregion

    # region Arithmetic

    def same_currency(self, other: Amount) -> bool:
        """Return True if $other has the same currency name."""
        return self.currency_name == other.currency_name

    def _check_same_currency(self, operation: str, other: Amount) -> None:
        # Raise: $other must be an Amount
        if not isinstance(other, Amount):
            raise TypeError(f"Cannot call `{operation}` because $other must be an Amount, but provided value is: {other!r}")

        # Raise: combining different currencies is never meaningful
        if not self.same_currency(other):
            raise MismatchedCurrencyError(operation, self.currency_name, other.currency_name)

    def _new(self: A, units: int) -> A:
        return self.__class__(units, self._definition)

    def add(self: A, other: Amount) -> A:
        self._check_same_currency("add", other)
        return self._new(self._units + other.units)

    def sub(self: A, other: Amount) -> A:
        self._check_same_currency("sub", other)
        return self._new(self._units - other.units)

    def mul(self: A, other: Amount) -> A:
        """Multiply raw units of both amounts (result units are `self.units * other.units`)."""
        self._check_same_currency("mul", other)
        return self._new(self._units * other.units)

    def div(self: A, other: Amount) -> A:
        """Divide raw units, truncating toward zero.

        Raises:
            MismatchedCurrencyError: If currencies differ.
            DivisionByZeroError: If `other.units` is zero.
        """
        self._check_same_currency("div", other)
        if other.units == 0:
            raise DivisionByZeroError(f"Cannot call `div` because $other ({other!r}) is zero")
        return self._new(truncating_div(self._units, other.units))

    def mul_scalar(self: A, scalar: int) -> A:
        _check_scalar("mul_scalar", scalar)
        return self._new(self._units * scalar)

    def div_scalar(self: A, scalar: int) -> A:
        """Divide raw units by an integer scalar, truncating toward zero.

        Raises:
            DivisionByZeroError: If $scalar is zero.
        """
        _check_scalar("div_scalar", scalar)
        if scalar == 0:
            raise DivisionByZeroError("Cannot call `div_scalar` because $scalar is zero")
        return self._new(truncating_div(self._units, scalar))

    # endregion

    # region Operators

    def __add__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Amount):
            return self.mul(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.mul_scalar(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.mul_scalar(other)
        return NotImplemented

    def __floordiv__(self, other):
        # Truncates toward zero, unlike `int.__floordiv__`
        if isinstance(other, Amount):
            return self.div(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.div_scalar(other)
        return NotImplemented

    def __neg__(self):
        return self._new(-self._units)

    def __pos__(self):
        return self

    def __abs__(self):
        return self._new(abs(self._units))

    def __bool__(self) -> bool:
        return self._units != 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, Amount):
            return False
        return self.same_currency(other) and self._units == other.units

    def __hash__(self) -> int:
        return hash((self.currency_name, self._units))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_same_currency("__lt__", other)
        return self._units < other.units

    def __le__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_same_currency("__le__", other)
        return self._units <= other.units

    def __gt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_same_currency("__gt__", other)
        return self._units > other.units

    def __ge__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_same_currency("__ge__", other)
        return self._units >= other.units

    def __setattr__(self, key, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __str__(self) -> str:
        """Return string like '1.500000000000000000 ETH'."""
        return f"{self.coins()} {self.currency_name}"

    def __repr__(self) -> str:
        """Return string like 'Amount(1500000000000000000, ETH)'."""
        return f"{self.__class__.__name__}({self._units}, {self.currency_name})"

    # endregion


def _check_scale_exp(operation: str, scale_exp: int) -> None:
    if not isinstance(scale_exp, int) or isinstance(scale_exp, bool):
        raise TypeError(f"Cannot call `{operation}` because $scale_exp must be an int, but provided value is: {scale_exp!r}")

    # Raise: scales finer than the smallest unit have no meaning
    if scale_exp < 0:
        raise ValueError(f"Cannot call `{operation}` because $scale_exp ({scale_exp}) < 0 would be finer than the smallest unit")


def _check_scalar(operation: str, scalar: int) -> None:
    if not isinstance(scalar, int) or isinstance(scalar, bool):
        raise TypeError(f"Cannot call `{operation}` because $scalar must be an int, but provided value is: {scalar!r}")
