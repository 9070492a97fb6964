"""
Wallet service for IntaSend wallets.

Every account has a SETTLEMENT wallet. WORKING wallets are sub-accounts used
to keep customers' or merchants' funds apart.
"""

import logging

from ..constants import APIEndpoints, AuthScope, Currency, Provider, RequestMethod
from ..exceptions import WalletError
from ..schemas import (
    FundCheckoutRequest,
    FundCheckoutResponse,
    FundMpesaRequest,
    FundMpesaResponse,
    Wallet,
    WalletCreateDetails,
    WalletIntraTransferRequest,
    WalletIntraTransferResponse,
    WalletListResponse,
    WalletTransactionsResponse,
)
from ..utils.validators import validate_phone_number
from .base import BaseService

logger = logging.getLogger(__name__)


class WalletService(BaseService):
    """
    Service for wallet operations.
    Handles listing, creation, transfers and funding.
    """

    error_class = WalletError

    def list(self) -> WalletListResponse:
        """
        List wallets owned by or created in the account.

        Returns:
            Page of Wallet
        """
        logger.info("Listing wallets")

        response = self._request(
            RequestMethod.GET,
            APIEndpoints.WALLETS,
            WalletListResponse,
            action="list wallets"
        )

        logger.info(f"Retrieved {len(response.results)} of {response.count} wallet(s)")
        return response

    def details(self, wallet_id: str) -> Wallet:
        """Get a wallet's details and balances."""
        logger.info(f"Retrieving wallet: {wallet_id}")

        response = self._request(
            RequestMethod.GET,
            APIEndpoints.WALLET_DETAILS.format(wallet_id=wallet_id),
            Wallet,
            action="get wallet details"
        )

        logger.info(
            f"Wallet {wallet_id} balance: {response.currency} {response.available_balance} available"
        )
        return response

    def create(self, payload: WalletCreateDetails) -> Wallet:
        """
        Create a WORKING wallet.

        Args:
            payload: Currency, label and whether the wallet can disburse

        Returns:
            The created Wallet
        """
        logger.info(f"Creating {payload.currency} wallet: {payload.label}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.WALLETS,
            Wallet,
            payload=payload,
            action="create wallet"
        )

        logger.info(f"Wallet created. ID: {response.wallet_id}")
        return response

    def transactions(self, wallet_id: str) -> WalletTransactionsResponse:
        """List the ledger entries of a wallet."""
        logger.info(f"Listing transactions for wallet: {wallet_id}")

        return self._request(
            RequestMethod.GET,
            APIEndpoints.WALLET_TRANSACTIONS.format(wallet_id=wallet_id),
            WalletTransactionsResponse,
            action="list wallet transactions"
        )

    def intra_transfer(
        self,
        source_wallet_id: str,
        payload: WalletIntraTransferRequest
    ) -> WalletIntraTransferResponse:
        """
        Move funds between two wallets of the same account.

        Args:
            source_wallet_id: Wallet to debit
            payload: Destination ``wallet_id``, amount and narrative

        Returns:
            Origin and destination wallets after the transfer
        """
        logger.info(
            f"Transferring {payload.amount} from wallet {source_wallet_id} "
            f"to wallet {payload.wallet_id}"
        )

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.WALLET_INTRA_TRANSFER.format(wallet_id=source_wallet_id),
            WalletIntraTransferResponse,
            payload=payload,
            action="transfer between wallets"
        )

        logger.info(f"Intra transfer complete. Origin: {source_wallet_id}, Destination: {payload.wallet_id}")
        return response

    def fund_mpesa(self, payload: FundMpesaRequest) -> FundMpesaResponse:
        """
        Fund a wallet with an M-Pesa STK Push.

        M-Pesa only settles in KES, so method and currency are always sent
        as MPESA / KES whatever the payload says.

        Raises:
            InvalidPhoneNumberError: If the phone number is not a valid Kenyan number
            WalletError: If the request fails
        """
        payload = payload.model_copy(update={
            'method': Provider.MPESA,
            'currency': Currency.KES,
            'phone_number': validate_phone_number(payload.phone_number),
        })

        logger.info(f"Funding wallet {payload.wallet_id} with M-Pesa: KES {payload.amount}")

        return self._request(
            RequestMethod.POST,
            APIEndpoints.MPESA_STK_PUSH,
            FundMpesaResponse,
            payload=payload,
            action="fund wallet with M-Pesa"
        )

    def fund_checkout(self, payload: FundCheckoutRequest) -> FundCheckoutResponse:
        """
        Generate a checkout link that pays into a wallet.

        Authenticated with the publishable key, like any checkout.
        """
        logger.info(f"Generating wallet funding checkout for wallet: {payload.wallet_id}")

        response = self._request(
            RequestMethod.POST,
            APIEndpoints.CHECKOUT,
            FundCheckoutResponse,
            payload=payload,
            scope=AuthScope.PUBLIC,
            action="create wallet funding checkout"
        )

        logger.info(f"Funding checkout created. ID: {response.id}")
        return response
