"""
Checkout service for IntaSend checkout links.

A checkout link is a hosted payment page: send the URL to the customer and
IntaSend walks them through paying with M-Pesa, card, bank or bitcoin.
"""

import logging

from ..constants import APIEndpoints, AuthScope, RequestMethod
from ..exceptions import CheckoutError
from ..schemas import (
    CheckoutDetailsRequest,
    CheckoutDetailsResponse,
    CheckoutRequest,
    CheckoutResponse,
)
from .base import BaseService

logger = logging.getLogger(__name__)


class CheckoutService(BaseService):
    """
    Service for checkout link operations.
    Both calls are authenticated with the publishable key.
    """

    error_class = CheckoutError

    def initiate(self, payload: CheckoutRequest) -> CheckoutResponse:
        """
        Generate a checkout link.

        Args:
            payload: Amount, currency and optional customer details

        Returns:
            CheckoutResponse with the hosted ``url``, plus the ``id`` and
            ``signature`` needed to query the checkout later

        Raises:
            CheckoutError: If the link can't be generated
        """
        logger.info(f"Initiating checkout for {payload.currency} {payload.amount}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.CHECKOUT,
            CheckoutResponse,
            payload=payload,
            scope=AuthScope.PUBLIC,
            action="initiate checkout"
        )

        logger.info(f"Checkout created. ID: {response.id}")
        return response

    def details(self, payload: CheckoutDetailsRequest) -> CheckoutDetailsResponse:
        """
        Get the details of a checkout created with ``initiate``.

        Args:
            payload: Checkout ``checkout_id`` and ``signature``

        Returns:
            CheckoutDetailsResponse

        Raises:
            CheckoutError: If the query fails
        """
        logger.info(f"Querying checkout details: {payload.checkout_id}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.CHECKOUT_DETAILS,
            CheckoutDetailsResponse,
            payload=payload,
            scope=AuthScope.PUBLIC,
            action="get checkout details"
        )

        logger.info(f"Checkout {response.id} retrieved. Paid: {response.paid}")
        return response
