from __future__ import annotations

from typing import Dict


class CurrencyDefinition:
    """Immutable metadata describing one currency.

    Two amounts are of the same currency iff their definitions have equal names.

    Attributes:
        name (str): Currency identifier (e.g., "ETH", "BTC").
        unit_exponent (int): Number of decimal digits between the smallest unit and one whole
            coin. For Ether it is 18 (10**18 wei per ether).
    """

    __slots__ = ("_name", "_unit_exponent")

    # Class-level registry for predefined currency definitions
    _registry: Dict[str, "CurrencyDefinition"] = {}

    def __init__(self, name: str, unit_exponent: int):
        """Initialize a CurrencyDefinition instance.

        Args:
            name (str): Currency identifier (e.g., "ETH"). Stored upper-cased and stripped.
            unit_exponent (int): Non-negative number of subunit digits.

        Raises:
            ValueError: If $name is empty or $unit_exponent is negative.
            TypeError: If $unit_exponent is not an int.
        """
        # Raise: $name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        # Raise: $unit_exponent must be an int (bool is rejected on purpose)
        if not isinstance(unit_exponent, int) or isinstance(unit_exponent, bool):
            raise TypeError(f"$unit_exponent must be an int, but provided value is: {unit_exponent!r}")

        # Raise: $unit_exponent must be non-negative
        if unit_exponent < 0:
            raise ValueError(f"$unit_exponent must be >= 0, but provided value is: {unit_exponent}")

        self._name = name.upper().strip()
        self._unit_exponent = unit_exponent

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def unit_exponent(self) -> int:
        """Get the number of subunit digits."""
        return self._unit_exponent

    @property
    def units_per_coin(self) -> int:
        """Number of smallest units in one whole coin (10 ** $unit_exponent)."""
        return 10**self._unit_exponent

    @classmethod
    def register(cls, definition: CurrencyDefinition, overwrite: bool = False) -> None:
        """Register a currency definition in the global registry.

        Args:
            definition (CurrencyDefinition): The definition to register.
            overwrite (bool): Whether to overwrite an existing definition with the same name.

        Raises:
            ValueError: If the name already exists and $overwrite is False.
            TypeError: If $definition is not a CurrencyDefinition.
        """
        if not isinstance(definition, CurrencyDefinition):
            raise TypeError(f"$definition must be a CurrencyDefinition instance, but provided value is: {definition}")

        if definition.name in cls._registry and not overwrite:
            raise ValueError(f"CurrencyDefinition named '{definition.name}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[definition.name] = definition

    @classmethod
    def from_str(cls, name: str) -> CurrencyDefinition:
        """Get a registered definition by name (case-insensitive).

        Raises:
            TypeError: If $name is not a string.
            ValueError: If no definition with $name is registered.
        """
        if not isinstance(name, str):
            raise TypeError(f"$name must be a string, but provided value is: {name}")

        name = name.upper().strip()
        if name not in cls._registry:
            raise ValueError(f"CurrencyDefinition named '{name}' not found in registry. Available currencies: {list(cls._registry.keys())}")

        return cls._registry[name]

    def __setattr__(self, key, value):
        # Only the constructor may assign (each slot exactly once)
        if hasattr(self, key):
            raise AttributeError(f"{self.__class__.__name__} is immutable")
        super().__setattr__(key, value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyDefinition):
            return False
        return self.name == other.name and self.unit_exponent == other.unit_exponent

    def __hash__(self) -> int:
        return hash((self.name, self.unit_exponent))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.name}', {self.unit_exponent})"
