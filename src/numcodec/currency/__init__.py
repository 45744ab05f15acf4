"""Currency display data: definitions, the static dataset, and the registry."""

from .definitions import CURRENCY_DEFINITIONS, CurrencyDefinition
from .registry import CurrencyRegistry, default_registry, definition_from_cldr

__all__ = [
    "CURRENCY_DEFINITIONS",
    "CurrencyDefinition",
    "CurrencyRegistry",
    "default_registry",
    "definition_from_cldr",
]
