"""
Display formatting helpers, used by the management commands.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Union

from ..constants import KENYA_COUNTRY_CODE


def format_phone_number(phone: str, include_plus: bool = False) -> str:
    """
    Format phone number to international format.

    Args:
        phone: Phone number to format
        include_plus: Whether to include + prefix

    Returns:
        Formatted phone number (e.g., 254712345678 or +254712345678)
    """
    phone = re.sub(r'\D', '', str(phone))

    if not phone.startswith(KENYA_COUNTRY_CODE):
        if phone.startswith('0'):
            phone = KENYA_COUNTRY_CODE + phone[1:]
        else:
            phone = KENYA_COUNTRY_CODE + phone

    if include_plus:
        return f"+{phone}"
    return phone


def format_amount(amount: Union[int, float, Decimal, str, None]) -> str:
    """
    Format amount to 2 decimal places ("1000.00").
    """
    try:
        amount = Decimal(str(amount))
        return f"{amount:.2f}"
    except (InvalidOperation, ValueError, TypeError):
        return "0.00"


def format_currency(amount: Union[int, float, Decimal, str, None], currency="KES") -> str:
    """
    Format amount with currency code.

    Args:
        amount: Amount to format
        currency: Currency code or Currency member

    Returns:
        Formatted string (e.g., "KES 1,000.00")
    """
    try:
        amount = Decimal(str(amount))
        formatted = f"{amount:,.2f}"
        return f"{currency} {formatted}"
    except (InvalidOperation, ValueError, TypeError):
        return f"{currency} 0.00"
