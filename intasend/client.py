"""
Entry point for the IntaSend API.
"""

import logging

from .config import IntaSendConfig
from .services import (
    CheckoutService,
    CollectionService,
    PaymentLinkService,
    PayoutService,
    RefundService,
    WalletService,
)

logger = logging.getLogger(__name__)


class IntaSend:
    """
    IntaSend API client.

    Keys not passed in are read from Django settings
    (INTASEND_PUBLISHABLE_KEY, INTASEND_SECRET_KEY, INTASEND_TEST_MODE).

    Example:
        intasend = IntaSend(publishable_key, secret_key, test_mode=True)
        checkout = intasend.checkout().initiate(CheckoutRequest(
            amount=Decimal('100.00'), currency=Currency.KES
        ))
    """

    def __init__(self, publishable_key=None, secret_key=None, test_mode=None, **overrides):
        self.config = IntaSendConfig(
            publishable_key=publishable_key,
            secret_key=secret_key,
            test_mode=test_mode,
            **overrides
        )
        self._checkout = CheckoutService(self.config)
        self._collection = CollectionService(self.config)
        self._payouts = PayoutService(self.config)
        self._refunds = RefundService(self.config)
        self._wallets = WalletService(self.config)
        self._payment_links = PaymentLinkService(self.config)
        logger.debug(f"IntaSend client created: {self.config!r}")

    def checkout(self) -> CheckoutService:
        return self._checkout

    def collection(self) -> CollectionService:
        return self._collection

    def payouts(self) -> PayoutService:
        return self._payouts

    def refunds(self) -> RefundService:
        return self._refunds

    def wallets(self) -> WalletService:
        return self._wallets

    def payment_links(self) -> PaymentLinkService:
        return self._payment_links

    def close(self):
        """Close the HTTP sessions of every service."""
        for service in (self._checkout, self._collection, self._payouts,
                        self._refunds, self._wallets, self._payment_links):
            service.close()

    def __repr__(self):
        return f"<IntaSend test_mode={self.config.test_mode}>"
