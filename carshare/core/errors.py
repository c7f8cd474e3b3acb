"""Domain errors raised by the pricing engine and the catalog loader"""


class QuoteInputError(ValueError):
    """Duration or distance the engine refuses to price (negative, NaN, out of range)."""


class CatalogError(Exception):
    """Reference data that cannot be loaded or does not hold together."""
