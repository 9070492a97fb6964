"""
Payout service for IntaSend send-money operations.
Handles M-Pesa B2C/B2B, bank (PesaLink), IntaSend and airtime disbursements.
"""

import logging
from typing import List, Union

from ..constants import APIEndpoints, AuthScope, PayoutProvider, RequestMethod
from ..exceptions import PayoutError, ValidationError
from ..schemas import (
    BankCode,
    Payout,
    PayoutApprovalRequest,
    PayoutCancelRequest,
    PayoutRequest,
    PayoutStatusRequest,
)
from ..utils.validators import validate_phone_number
from .base import BaseService

logger = logging.getLogger(__name__)


class PayoutService(BaseService):
    """
    Service for payout operations.

    A payout batch is initiated, then approved with the returned
    ``tracking_id`` and ``nonce``, then tracked with ``status``.
    """

    error_class = PayoutError

    def initiate(self, payload: PayoutRequest) -> Payout:
        """
        Initiate a payout batch.

        The provider-specific helpers below all end up here.

        Args:
            payload: Currency, provider and the list of transactions

        Returns:
            Payout with ``tracking_id`` and ``nonce`` for approval

        Raises:
            PayoutError: If initiation fails
        """
        logger.info(
            f"Initiating {payload.provider or 'default'} payout of "
            f"{len(payload.transactions)} transaction(s)"
        )

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.PAYOUT_INITIATE,
            Payout,
            payload=payload,
            action="initiate payout"
        )

        logger.info(
            f"Payout initiated. Tracking ID: {response.tracking_id}, "
            f"Status: {response.status}"
        )
        return response

    def _initiate_with(self, provider: PayoutProvider, payload: PayoutRequest) -> Payout:
        return self.initiate(payload.model_copy(update={'provider': provider}))

    def mpesa_b2c(self, payload: PayoutRequest) -> Payout:
        """Send money to M-Pesa subscribers (phone numbers)."""
        transactions = [
            txn.model_copy(update={'account': validate_phone_number(txn.account)})
            for txn in payload.transactions
        ]
        payload = payload.model_copy(update={'transactions': transactions})
        return self._initiate_with(PayoutProvider.MPESA_B2C, payload)

    def mpesa_b2b(self, payload: PayoutRequest) -> Payout:
        """Send money to M-Pesa paybill and till numbers."""
        return self._initiate_with(PayoutProvider.MPESA_B2B, payload)

    def bank(self, payload: PayoutRequest) -> Payout:
        """Send money to bank accounts over PesaLink."""
        return self._initiate_with(PayoutProvider.PESALINK, payload)

    def intasend(self, payload: PayoutRequest) -> Payout:
        """Send money to other IntaSend accounts."""
        return self._initiate_with(PayoutProvider.INTASEND, payload)

    def airtime(self, payload: PayoutRequest) -> Payout:
        """Buy airtime for phone numbers."""
        return self._initiate_with(PayoutProvider.AIRTIME, payload)

    def approve(self, payload: Union[PayoutApprovalRequest, Payout]) -> Payout:
        """
        Approve an initiated payout batch.

        Args:
            payload: PayoutApprovalRequest, or the Payout returned by an
                initiate call

        Returns:
            Updated Payout

        Raises:
            ValidationError: If a Payout without tracking_id or nonce is given
            PayoutError: If approval fails
        """
        if isinstance(payload, Payout):
            if not payload.tracking_id or not payload.nonce:
                raise ValidationError("Payout has no tracking_id/nonce to approve")
            payload = PayoutApprovalRequest.from_payout(payload)

        logger.info(f"Approving payout: {payload.tracking_id}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.PAYOUT_APPROVE,
            Payout,
            payload=payload,
            action="approve payout"
        )

        logger.info(f"Payout approved. Tracking ID: {payload.tracking_id}, Status: {response.status}")
        return response

    def status(self, payload: PayoutStatusRequest) -> Payout:
        """
        Check the status of a payout batch.

        Raises:
            PayoutError: If the query fails
        """
        logger.info(f"Querying payout status: {payload.tracking_id}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.PAYOUT_STATUS,
            Payout,
            payload=payload,
            action="query payout status"
        )

        logger.info(f"Payout status retrieved. Tracking ID: {payload.tracking_id}, Status: {response.status}")
        return response

    def cancel(self, payload: PayoutCancelRequest) -> Payout:
        """
        Cancel a payout batch that has not been approved yet.

        Raises:
            PayoutError: If cancellation fails
        """
        logger.info(f"Cancelling payout: {payload.file_id}")

        return self._request(
            RequestMethod.POST,
            APIEndpoints.PAYOUT_CANCEL,
            Payout,
            payload=payload,
            action="cancel payout"
        )

    def bank_codes_ke(self) -> List[BankCode]:
        """
        List Kenyan bank codes accepted by ``bank`` payouts.

        Returns:
            List of BankCode
        """
        logger.info("Retrieving Kenyan bank codes")

        return self._request(
            RequestMethod.GET,
            APIEndpoints.BANK_CODES_KE,
            List[BankCode],
            scope=AuthScope.PUBLIC,
            action="get bank codes"
        )
