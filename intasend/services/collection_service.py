"""
Collection service for M-Pesa Express (STK Push) payments.
"""

import logging

from ..constants import APIEndpoints, RequestMethod
from ..exceptions import CollectionError
from ..schemas import (
    MpesaStkPushRequest,
    MpesaStkPushResponse,
    StkPushStatusRequest,
    StkPushStatusResponse,
)
from ..utils.validators import validate_phone_number
from .base import BaseService

logger = logging.getLogger(__name__)


class CollectionService(BaseService):
    """
    Service for merchant-initiated M-Pesa collections.
    Handles STK Push initiation and status queries.
    """

    error_class = CollectionError

    def mpesa_stk_push(self, payload: MpesaStkPushRequest) -> MpesaStkPushResponse:
        """
        Send an STK Push prompt to the payer's phone.

        Args:
            payload: Amount, phone number and optional api_ref / wallet_id

        Returns:
            MpesaStkPushResponse; keep ``invoice.invoice_id`` to query status

        Raises:
            InvalidPhoneNumberError: If the phone number is not a valid Kenyan number
            CollectionError: If the request fails
        """
        phone_number = validate_phone_number(payload.phone_number)
        payload = payload.model_copy(update={'phone_number': phone_number})

        logger.info(f"Initiating M-Pesa STK Push of KES {payload.amount} to {phone_number}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.MPESA_STK_PUSH,
            MpesaStkPushResponse,
            payload=payload,
            action="initiate M-Pesa STK Push"
        )

        invoice_id = response.invoice.invoice_id if response.invoice else None
        logger.info(f"STK Push sent. Invoice ID: {invoice_id}")
        return response

    def status(self, payload: StkPushStatusRequest) -> StkPushStatusResponse:
        """
        Query the state of a collection.

        Args:
            payload: ``invoice_id`` of the collection

        Returns:
            StkPushStatusResponse

        Raises:
            CollectionError: If the query fails
        """
        logger.info(f"Querying payment status for invoice: {payload.invoice_id}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.PAYMENT_STATUS,
            StkPushStatusResponse,
            payload=payload,
            action="query payment status"
        )

        state = response.invoice.state if response.invoice else None
        logger.info(f"Payment status retrieved. Invoice: {payload.invoice_id}, State: {state}")
        return response
