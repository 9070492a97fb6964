"""
Validation utilities for IntaSend API operations.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..constants import Currency, KENYA_COUNTRY_CODE, PHONE_NUMBER_LENGTH
from ..exceptions import InvalidAmountError, InvalidPhoneNumberError, ValidationError


def validate_phone_number(phone: str, country_code: str = KENYA_COUNTRY_CODE) -> str:
    """
    Validate and normalize an M-Pesa phone number.

    Args:
        phone: Phone number to validate (0712345678, +254712345678,
            254712345678 or 712345678)
        country_code: Expected country code (default: 254 for Kenya)

    Returns:
        Validated phone number in format: 254XXXXXXXXX

    Raises:
        InvalidPhoneNumberError: If phone number is invalid
    """
    if not phone:
        raise InvalidPhoneNumberError("Phone number is required")

    # Remove all non-digit characters (this also drops a leading +)
    phone = re.sub(r'\D', '', str(phone))

    if phone.startswith('0'):
        # Convert 0712345678 to 254712345678
        phone = country_code + phone[1:]
    elif not phone.startswith(country_code):
        # Assume it's missing country code
        phone = country_code + phone

    if len(phone) != PHONE_NUMBER_LENGTH:
        raise InvalidPhoneNumberError(
            f"Phone number must be {PHONE_NUMBER_LENGTH} digits including country code. "
            f"Got: {phone} ({len(phone)} digits)"
        )

    # Safaricom/Airtel mobile prefixes: 07XX and 01XX
    if not re.match(rf'^{country_code}[17]\d{{8}}$', phone):
        raise InvalidPhoneNumberError(
            f"Phone number must be a mobile number (2547XXXXXXXX or 2541XXXXXXXX). Got: {phone}"
        )

    return phone


def validate_amount(
    amount,
    min_amount: Optional[Decimal] = None,
    max_amount: Optional[Decimal] = None
) -> Decimal:
    """
    Validate a monetary amount.

    Args:
        amount: Amount to validate (int, str, float or Decimal)
        min_amount: Minimum allowed amount (optional)
        max_amount: Maximum allowed amount (optional)

    Returns:
        Validated amount as Decimal

    Raises:
        InvalidAmountError: If amount is invalid
    """
    try:
        amount = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(f"Invalid amount format: {amount}")

    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount format: {amount}")

    if amount <= 0:
        raise InvalidAmountError(f"Amount must be greater than zero. Got: {amount}")

    if min_amount is not None and amount < Decimal(str(min_amount)):
        raise InvalidAmountError(
            f"Amount must be at least {min_amount}. Got: {amount}"
        )

    if max_amount is not None and amount > Decimal(str(max_amount)):
        raise InvalidAmountError(
            f"Amount must not exceed {max_amount}. Got: {amount}"
        )

    # Ensure max 2 decimal places
    if amount.as_tuple().exponent < -2:
        raise InvalidAmountError(
            f"Amount can have at most 2 decimal places. Got: {amount}"
        )

    return amount


def validate_currency(currency) -> Currency:
    """
    Validate currency code.

    Args:
        currency: Currency code or Currency member

    Returns:
        Currency member

    Raises:
        ValidationError: If currency is invalid
    """
    if not currency:
        raise ValidationError("Currency is required")

    try:
        return Currency(str(currency).upper())
    except ValueError:
        valid_currencies = [c.value for c in Currency]
        raise ValidationError(
            f"Invalid currency: {currency}. "
            f"Supported currencies: {', '.join(valid_currencies)}"
        )
