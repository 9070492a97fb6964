"""
Custom exceptions for IntaSend API operations.
"""


class IntaSendException(Exception):
    """Base exception for all IntaSend-related errors."""

    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)


class ConfigurationError(IntaSendException):
    """Raised when there's a configuration issue."""
    pass


class AuthenticationError(IntaSendException):
    """Raised when the gateway rejects our credentials (401/403)."""
    pass


class APIError(IntaSendException):
    """Raised when a request to the IntaSend API fails."""
    pass


class UnexpectedResponseStatus(APIError):
    """Raised when the API answers with a non-2xx status."""

    @property
    def status_code(self):
        return self.error_code


class ResponseParseError(APIError):
    """Raised when a response body can't be decoded into the expected type."""
    pass


class ValidationError(IntaSendException):
    """Raised when input validation fails."""
    pass


class InvalidPhoneNumberError(ValidationError):
    """Raised when phone number format is invalid."""
    pass


class InvalidAmountError(ValidationError):
    """Raised when amount is invalid."""
    pass


class CheckoutError(IntaSendException):
    """Raised when a checkout operation fails."""
    pass


class CollectionError(IntaSendException):
    """Raised when an M-Pesa collection operation fails."""
    pass


class PayoutError(IntaSendException):
    """Raised when a payout operation fails."""
    pass


class RefundError(IntaSendException):
    """Raised when a chargeback/refund operation fails."""
    pass


class WalletError(IntaSendException):
    """Raised when a wallet operation fails."""
    pass


class PaymentLinkError(IntaSendException):
    """Raised when a payment link operation fails."""
    pass
