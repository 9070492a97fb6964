"""
Payment link service for reusable IntaSend payment links.
"""

import logging

from ..constants import APIEndpoints, RequestMethod
from ..exceptions import PaymentLinkError
from ..schemas import (
    PaymentLink,
    PaymentLinksCreateDetails,
    PaymentLinksListResponse,
    PaymentLinksUpdateDetails,
)
from .base import BaseService

logger = logging.getLogger(__name__)


class PaymentLinkService(BaseService):
    """
    Service for payment link operations.
    """

    error_class = PaymentLinkError

    def list(self) -> PaymentLinksListResponse:
        """List payment links created on the account."""
        logger.info("Listing payment links")

        return self._request(
            RequestMethod.GET,
            APIEndpoints.PAYMENT_LINKS,
            PaymentLinksListResponse,
            action="list payment links"
        )

    def details(self, payment_link_id: str) -> PaymentLink:
        """Get a single payment link."""
        logger.info(f"Retrieving payment link: {payment_link_id}")

        return self._request(
            RequestMethod.GET,
            APIEndpoints.PAYMENT_LINK_DETAILS.format(payment_link_id=payment_link_id),
            PaymentLink,
            action="get payment link"
        )

    def create(self, payload: PaymentLinksCreateDetails) -> PaymentLink:
        """
        Create a payment link.

        Args:
            payload: Title, currency and optional fixed amount, usage limit
                and fee bearers

        Returns:
            The created PaymentLink
        """
        logger.info(f"Creating payment link: {payload.title}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.PAYMENT_LINKS,
            PaymentLink,
            payload=payload,
            action="create payment link"
        )

        logger.info(f"Payment link created. ID: {response.id}, URL: {response.url}")
        return response

    def update(self, payment_link_id: str, payload: PaymentLinksUpdateDetails) -> PaymentLink:
        """
        Update a payment link.

        Args:
            payment_link_id: ID of the link to update
            payload: New link details

        Returns:
            The updated PaymentLink
        """
        logger.info(f"Updating payment link: {payment_link_id}")

        return self._request(
            RequestMethod.PUT,
            APIEndpoints.PAYMENT_LINK_DETAILS.format(payment_link_id=payment_link_id),
            PaymentLink,
            payload=payload,
            action="update payment link"
        )
