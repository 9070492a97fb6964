"""
Constants and enums for IntaSend API operations.

Enum values are spelled exactly the way the gateway expects them on the wire.
"""

from enum import Enum


class WireEnum(str, Enum):
    """String enum that renders as its wire value."""

    def __str__(self):
        return self.value


class Currency(WireEnum):
    """Currencies supported by the gateway."""
    KES = "KES"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class Tarrif(WireEnum):
    """Who absorbs the transaction fee."""
    BUSINESS_PAYS = "BUSINESS-PAYS"
    CUSTOMER_PAYS = "CUSTOMER-PAYS"


class Provider(WireEnum):
    """Payment methods offered on checkout."""
    MPESA = "MPESA"
    CARD_PAYMENT = "CARD-PAYMENT"
    BITCOIN = "BITCOIN"
    BANK = "BANK-ACH"
    COOP_B2B = "COOP_B2B"


# Checkout calls the same vocabulary a "method"
CheckoutMethod = Provider


class PayoutProvider(WireEnum):
    """Payout (send money) channels."""
    MPESA_B2C = "MPESA-B2C"
    MPESA_B2B = "MPESA-B2B"
    PESALINK = "PESALINK"
    INTASEND = "INTASEND"
    AIRTIME = "AIRTIME"


class PayoutApproval(WireEnum):
    """Whether a payout batch waits for explicit approval."""
    YES = "YES"
    NO = "NO"


class TransactionType(WireEnum):
    """Wallet transaction types."""
    SALE = "SALE"
    ADJUSTMENT = "ADJUSTMENT"
    PAYOUT = "PAYOUT"
    CHARGE = "CHARGE"
    AIRTIME = "AIRTIME"
    DEPOSIT = "DEPOSIT"
    EXCHANGE = "EXCHANGE"
    UNMARKED = "UNMARKED"


class TransactionStatus(WireEnum):
    """Wallet transaction statuses."""
    AVAILABLE = "AVAILABLE"
    CLEARING = "CLEARING"
    ON_HOLD = "ON-HOLD"
    CANCELLED = "CANCELLED"
    CHARGEBACK_PENDING = "CHARGEBACK-PENDING"
    REFUNDED = "REFUNDED"
    ADJUSTMENT = "ADJUSTMENT"


class WalletType(WireEnum):
    """Wallet kinds. Every account has one SETTLEMENT wallet."""
    SETTLEMENT = "SETTLEMENT"
    WORKING = "WORKING"


class RefundReason(WireEnum):
    """Reasons accepted when raising a chargeback."""
    UNAVAILABLE_SERVICE = "Unavailable service"
    DELAYED_DELIVERY = "Delayed delivery"
    WRONG_SERVICE = "Wrong service"
    DUPLICATE_PAYMENT = "Duplicate payment"
    OTHER = "Other"


class RequestMethod(WireEnum):
    """HTTP verbs used by the API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class AuthScope(WireEnum):
    """Which key authenticates a request."""
    PUBLIC = "PUBLIC"
    SECRET = "SECRET"


# API Endpoints
class APIEndpoints:
    """IntaSend API endpoints."""
    # Checkout endpoints
    CHECKOUT = "/api/v1/checkout/"
    CHECKOUT_DETAILS = "/api/v1/checkout/details/"

    # Collection endpoints
    MPESA_STK_PUSH = "/api/v1/payment/mpesa-stk-push/"
    PAYMENT_STATUS = "/api/v1/payment/status/"

    # Payout endpoints
    PAYOUT_INITIATE = "/api/v1/send-money/initiate/"
    PAYOUT_APPROVE = "/api/v1/send-money/approve/"
    PAYOUT_STATUS = "/api/v1/send-money/status/"
    PAYOUT_CANCEL = "/api/v1/send-money/cancel/"
    BANK_CODES_KE = "/api/v1/send-money/bank-codes/ke/"

    # Refund endpoints
    CHARGEBACKS = "/api/v1/chargebacks/"
    CHARGEBACK_DETAILS = "/api/v1/chargebacks/{chargeback_id}/"

    # Wallet endpoints
    WALLETS = "/api/v1/wallets/"
    WALLET_DETAILS = "/api/v1/wallets/{wallet_id}/"
    WALLET_TRANSACTIONS = "/api/v1/wallets/{wallet_id}/transactions/"
    WALLET_INTRA_TRANSFER = "/api/v1/wallets/{wallet_id}/intra_transfer/"

    # Payment link endpoints
    PAYMENT_LINKS = "/api/v1/paymentlinks/"
    PAYMENT_LINK_DETAILS = "/api/v1/paymentlinks/{payment_link_id}/"


# Base URLs
SANDBOX_BASE_URL = "https://sandbox.intasend.com"
LIVE_BASE_URL = "https://payment.intasend.com"

# Auth headers
PUBLIC_KEY_HEADER = "X-IntaSend-Public-API-Key"
AUTHORIZATION_HEADER = "Authorization"

# Phone number settings
KENYA_COUNTRY_CODE = "254"
PHONE_NUMBER_LENGTH = 12  # Including country code (254XXXXXXXXX)

# Default settings
DEFAULT_CURRENCY = Currency.KES
DEFAULT_TIMEOUT = 30  # seconds
MAX_RETRIES = 3
