"""
Typed request/response shapes for the IntaSend API.

Request models are serialized with ``None`` fields dropped and ``Decimal``
amounts rendered as strings. Response models ignore keys they don't know
about, so new fields on the gateway side don't break parsing.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    Currency,
    PayoutApproval,
    PayoutProvider,
    Provider,
    RefundReason,
    Tarrif,
    TransactionStatus,
    TransactionType,
    WalletType,
)

T = TypeVar('T')

# Monetary amount sent to the gateway: positive, cents precision at most
Amount = Annotated[Decimal, Field(gt=0, decimal_places=2)]


class IntaSendModel(BaseModel):
    """Base for every wire shape."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    def to_payload(self):
        """Render the model as a JSON-ready dict for a request body."""
        return self.model_dump(mode='json', exclude_none=True)


class Page(IntaSendModel, Generic[T]):
    """Paginated list envelope used by the list endpoints."""
    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[T] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Shared shapes
# ---------------------------------------------------------------------------

class CardInfo(IntaSendModel):
    bin_country: Optional[str] = None
    card_type: Optional[str] = None


class Invoice(IntaSendModel):
    """Collection invoice attached to STK Push and checkout payments."""
    invoice_id: str
    state: Optional[str] = None
    provider: Optional[str] = None
    charges: Optional[Decimal] = None
    net_amount: Optional[Decimal] = None
    currency: Optional[str] = None
    value: Optional[Decimal] = None
    account: Optional[str] = None
    api_ref: Optional[str] = None
    mpesa_reference: Optional[str] = None
    host: Optional[str] = None
    card_info: Optional[CardInfo] = None
    retry_count: int = 0
    failed_reason: Optional[str] = None
    failed_code: Optional[str] = None
    failed_code_link: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Customer(IntaSendModel):
    customer_id: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
    provider: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Transaction(IntaSendModel):
    """Wallet ledger entry."""
    transaction_id: str
    amount: Decimal
    currency: str
    value: Optional[Decimal] = None
    running_balance: Optional[Decimal] = None
    narrative: Optional[str] = None
    trans_type: TransactionType
    status: TransactionStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Wallet(IntaSendModel):
    wallet_id: str
    label: Optional[str] = None
    can_disburse: bool = False
    currency: Currency
    wallet_type: WalletType
    current_balance: Decimal = Decimal('0')
    available_balance: Decimal = Decimal('0')
    updated_at: Optional[datetime] = None


class PaymentLink(IntaSendModel):
    id: str
    title: str
    is_active: bool = True
    redirect_url: Optional[str] = None
    amount: Optional[Decimal] = None
    usage_limit: Optional[int] = None
    qrcode_file: Optional[str] = None
    url: str
    currency: Optional[Currency] = None
    mobile_tarrif: Optional[Tarrif] = None
    card_tarrif: Optional[Tarrif] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------

class CheckoutRequest(IntaSendModel):
    amount: Amount
    currency: Currency
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    method: Optional[Provider] = None
    api_ref: Optional[str] = None
    redirect_url: Optional[str] = None


class CheckoutResponse(IntaSendModel):
    """
    Generated checkout link.

    Keep ``id`` and ``signature``: both are needed to look the checkout up
    again with ``CheckoutService.details``.
    """
    id: str
    url: str
    signature: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    method: Optional[Provider] = None
    amount: Decimal
    currency: Currency
    paid: bool = False


class CheckoutDetailsRequest(IntaSendModel):
    checkout_id: str
    signature: str


class CheckoutDefaults(IntaSendModel):
    enable_card_payment: bool = False
    enable_mpesa_payment: bool = False
    enable_bitcoin_payment: bool = False
    enable_ach_payment: bool = False
    default_currency: Optional[Currency] = None
    default_tarrif: Optional[Tarrif] = None


class CheckoutDetailsResponse(IntaSendModel):
    id: str
    url: str
    signature: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    country: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    api_ref: Optional[str] = None
    wallet_id: Optional[str] = None
    method: Optional[Provider] = None
    channel: Optional[str] = None
    host: Optional[str] = None
    is_mobile: bool = False
    version: Optional[str] = None
    redirect_url: Optional[str] = None
    amount: Decimal
    currency: Optional[Currency] = None
    paid: bool = False
    mobile_tarrif: Optional[Tarrif] = None
    card_tarrif: Optional[Tarrif] = None
    bitcoin_tarrif: Optional[Tarrif] = None
    ach_tarrif: Optional[Tarrif] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    defaults: Optional[CheckoutDefaults] = None


# ---------------------------------------------------------------------------
# Collection (M-Pesa STK Push)
# ---------------------------------------------------------------------------

class MpesaStkPushRequest(IntaSendModel):
    amount: Amount
    phone_number: str
    api_ref: Optional[str] = None
    wallet_id: Optional[str] = None


class MpesaStkPushResponse(IntaSendModel):
    invoice: Optional[Invoice] = None
    customer: Optional[Customer] = None
    payment_link: Optional[str] = None
    refundable: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class StkPushStatusRequest(IntaSendModel):
    invoice_id: str
    checkout_id: Optional[str] = None
    signature: Optional[str] = None


class Meta(IntaSendModel):
    id: str
    customer_comment: Optional[str] = None
    payment_link: Optional[PaymentLink] = None
    customer: Optional[Customer] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class StkPushStatusResponse(IntaSendModel):
    invoice: Optional[Invoice] = None
    meta: Optional[Meta] = None


# ---------------------------------------------------------------------------
# Payouts (send money)
# ---------------------------------------------------------------------------

class PayoutRequestTransaction(IntaSendModel):
    # Phone number, bank account number etc
    account: str
    amount: Amount
    # Beneficiary name as per client records
    name: Optional[str] = None
    # M-Pesa validates the beneficiary against this when given
    id_number: Optional[str] = None
    bank_code: Optional[str] = None
    category_name: Optional[str] = None
    narrative: Optional[str] = None
    account_type: Optional[str] = None
    account_reference: Optional[str] = None


class PayoutResponseTransaction(IntaSendModel):
    status: Optional[str] = None
    status_code: Optional[str] = None
    request_reference_id: Optional[str] = None
    name: Optional[str] = None
    account: str
    id_number: Optional[str] = None
    bank_code: Optional[str] = None
    amount: Decimal
    narrative: Optional[str] = None


class PayoutRequest(IntaSendModel):
    currency: Currency
    transactions: List[PayoutRequestTransaction]
    provider: Optional[PayoutProvider] = None
    device_id: Optional[str] = None
    callback_url: Optional[str] = None
    batch_reference: Optional[str] = None
    requires_approval: Optional[PayoutApproval] = None


class Payout(IntaSendModel):
    file_id: Optional[str] = None
    device_id: Optional[str] = None
    tracking_id: Optional[str] = None
    batch_reference: Optional[str] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    nonce: Optional[str] = None
    wallet: Optional[Wallet] = None
    transactions: Optional[List[PayoutResponseTransaction]] = None
    charge_estimate: Optional[Decimal] = None
    total_amount_estimate: Optional[Decimal] = None
    total_amount: Optional[Decimal] = None
    transactions_count: Optional[int] = None


class PayoutApprovalRequest(IntaSendModel):
    tracking_id: str
    batch_reference: str = ''
    nonce: str
    wallet: Optional[Wallet] = None
    transactions: Optional[List[PayoutResponseTransaction]] = None

    @classmethod
    def from_payout(cls, payout):
        """Build the approval body from an initiated payout."""
        return cls(
            tracking_id=payout.tracking_id,
            batch_reference=payout.batch_reference or '',
            nonce=payout.nonce,
            wallet=payout.wallet,
            transactions=payout.transactions,
        )


class PayoutStatusRequest(IntaSendModel):
    tracking_id: str


class PayoutCancelRequest(IntaSendModel):
    file_id: str


class BankCode(IntaSendModel):
    bank_name: str
    bank_code: str


# ---------------------------------------------------------------------------
# Refunds (chargebacks)
# ---------------------------------------------------------------------------

class RefundRequest(IntaSendModel):
    amount: Amount
    invoice: str
    reason: RefundReason
    reason_details: Optional[str] = None


class Refund(IntaSendModel):
    chargeback_id: Optional[str] = None
    session_id: Optional[str] = None
    transaction: Optional[Transaction] = None
    amount: Decimal
    status: str
    reason: RefundReason
    reason_details: Optional[str] = None
    resolution: Optional[str] = None
    staff_created: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


RefundListResponse = Page[Refund]


# ---------------------------------------------------------------------------
# Wallets
# ---------------------------------------------------------------------------

class WalletCreateDetails(IntaSendModel):
    currency: Currency
    label: str
    can_disburse: bool = False
    wallet_type: WalletType = WalletType.WORKING


WalletListResponse = Page[Wallet]
WalletTransactionsResponse = Page[Transaction]


class WalletIntraTransferRequest(IntaSendModel):
    # Destination wallet
    wallet_id: str
    amount: Amount
    narrative: str


class WalletIntraTransferResponse(IntaSendModel):
    origin: Wallet
    destination: Wallet


class FundMpesaRequest(IntaSendModel):
    amount: Amount
    wallet_id: str
    phone_number: str
    method: Provider = Provider.MPESA
    currency: Currency = Currency.KES


FundMpesaResponse = MpesaStkPushResponse


class FundCheckoutRequest(IntaSendModel):
    amount: Amount
    wallet_id: str
    currency: Currency
    email: Optional[str] = None
    api_ref: Optional[str] = None
    method: Optional[Provider] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    redirect_url: Optional[str] = None


class FundCheckoutResponse(IntaSendModel):
    """Same note as CheckoutResponse: keep ``id`` and ``signature``."""
    id: str
    url: str
    signature: str
    paid: bool = False
    amount: Decimal
    currency: Currency
    email: Optional[str] = None
    method: Optional[Provider] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    redirect_url: Optional[str] = None


# ---------------------------------------------------------------------------
# Payment links
# ---------------------------------------------------------------------------

class PaymentLinksCreateDetails(IntaSendModel):
    title: str
    currency: Currency
    amount: Optional[Amount] = None
    usage_limit: Optional[int] = Field(default=None, ge=1)
    is_active: Optional[bool] = None
    mobile_tarrif: Optional[Tarrif] = None
    card_tarrif: Optional[Tarrif] = None
    redirect_url: Optional[str] = None


class PaymentLinksUpdateDetails(PaymentLinksCreateDetails):
    pass


PaymentLinksListResponse = Page[PaymentLink]
