"""
Utility modules for IntaSend API operations.
"""

from .http_client import HTTPClient
from .validators import (
    validate_phone_number,
    validate_amount,
    validate_currency,
)
from .formatters import (
    format_phone_number,
    format_amount,
    format_currency,
)

__all__ = [
    'HTTPClient',
    'validate_phone_number',
    'validate_amount',
    'validate_currency',
    'format_phone_number',
    'format_amount',
    'format_currency',
]
