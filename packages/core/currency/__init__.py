from .converter import (
    Conversion,
    ConversionError,
    ConversionResult,
    RateFetchError,
    convert_currency,
    fetch_rates,
    format_conversion,
)

__all__ = [
    "Conversion",
    "ConversionError",
    "ConversionResult",
    "RateFetchError",
    "convert_currency",
    "fetch_rates",
    "format_conversion",
]
