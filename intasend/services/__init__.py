"""
Service modules for IntaSend API operations.
"""

from .auth_service import AuthService
from .checkout_service import CheckoutService
from .collection_service import CollectionService
from .payout_service import PayoutService
from .refund_service import RefundService
from .wallet_service import WalletService
from .payment_link_service import PaymentLinkService

__all__ = [
    'AuthService',
    'CheckoutService',
    'CollectionService',
    'PayoutService',
    'RefundService',
    'WalletService',
    'PaymentLinkService',
]
