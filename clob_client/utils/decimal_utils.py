"""
Decimal helpers for exchange-native numeric fields.
"""

from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal(value: Any, field_name: str = "value") -> Decimal:
    """
    Convert an API numeric field to Decimal without going through float.

    The exchange sends prices and sizes as strings ("0.52"); plain ints are
    accepted too. Floats are converted through their repr so "0.1" stays 0.1.

    Args:
        value: Raw field value from a decoded JSON body
        field_name: Name used in the error message

    Returns:
        Decimal value

    Raises:
        ValueError: If the value is missing or not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid {field_name}: {value!r}")
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid {field_name}: {value!r}") from None

    if not result.is_finite():
        raise ValueError(f"Invalid {field_name}: {value!r}")

    return result
