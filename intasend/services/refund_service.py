"""
Refund service for IntaSend chargebacks.
"""

import logging

from ..constants import APIEndpoints, RequestMethod
from ..exceptions import RefundError
from ..schemas import Refund, RefundListResponse, RefundRequest
from .base import BaseService

logger = logging.getLogger(__name__)


class RefundService(BaseService):
    """
    Service for chargeback/refund operations.

    Refunds can only be raised against collections that completed.
    """

    error_class = RefundError

    def list(self) -> RefundListResponse:
        """List all refunds raised on the account."""
        logger.info("Listing refunds")

        response = self._request(
            RequestMethod.GET,
            APIEndpoints.CHARGEBACKS,
            RefundListResponse,
            action="list refunds"
        )

        logger.info(f"Retrieved {len(response.results)} of {response.count} refund(s)")
        return response

    def create(self, payload: RefundRequest) -> Refund:
        """
        Raise a refund for a completed collection.

        Args:
            payload: Invoice ID, amount and reason

        Returns:
            The created Refund

        Raises:
            RefundError: If the refund is rejected
        """
        logger.info(f"Creating refund of {payload.amount} for invoice: {payload.invoice}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.CHARGEBACKS,
            Refund,
            payload=payload,
            action="create refund"
        )

        logger.info(f"Refund created. Chargeback ID: {response.chargeback_id}, Status: {response.status}")
        return response

    def get(self, chargeback_id: str) -> Refund:
        """Get a single refund by its chargeback ID."""
        logger.info(f"Retrieving refund: {chargeback_id}")

        return self._request(
            RequestMethod.GET,
            APIEndpoints.CHARGEBACK_DETAILS.format(chargeback_id=chargeback_id),
            Refund,
            action="get refund"
        )
