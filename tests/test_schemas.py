from decimal import Decimal

import pydantic
from django.test import SimpleTestCase

from intasend.constants import (
    CheckoutMethod,
    Currency,
    PayoutProvider,
    Provider,
    RefundReason,
    Tarrif,
    TransactionStatus,
    TransactionType,
    WalletType,
)
from intasend.schemas import (
    CheckoutRequest,
    Payout,
    PayoutApprovalRequest,
    PayoutRequest,
    PayoutRequestTransaction,
    PaymentLink,
    RefundRequest,
    Transaction,
    Wallet,
    WalletCreateDetails,
    WalletListResponse,
)

from .helpers import PAYMENT_LINK, PAYOUT, TRANSACTION, WALLET


class WireVocabularyTest(SimpleTestCase):

    def test_enums_render_gateway_spelling(self):
        self.assertEqual(str(Tarrif.BUSINESS_PAYS), 'BUSINESS-PAYS')
        self.assertEqual(str(Tarrif.CUSTOMER_PAYS), 'CUSTOMER-PAYS')
        self.assertEqual(str(Provider.CARD_PAYMENT), 'CARD-PAYMENT')
        self.assertEqual(str(Provider.BANK), 'BANK-ACH')
        self.assertEqual(str(Provider.COOP_B2B), 'COOP_B2B')
        self.assertEqual(str(PayoutProvider.MPESA_B2C), 'MPESA-B2C')
        self.assertEqual(str(TransactionStatus.ON_HOLD), 'ON-HOLD')
        self.assertEqual(str(TransactionStatus.CHARGEBACK_PENDING), 'CHARGEBACK-PENDING')
        self.assertEqual(str(RefundReason.UNAVAILABLE_SERVICE), 'Unavailable service')
        self.assertEqual(f'{Currency.KES}', 'KES')

    def test_enums_parse_from_wire_values(self):
        self.assertIs(Tarrif('CUSTOMER-PAYS'), Tarrif.CUSTOMER_PAYS)
        self.assertIs(WalletType('SETTLEMENT'), WalletType.SETTLEMENT)
        self.assertIs(TransactionType('UNMARKED'), TransactionType.UNMARKED)
        with self.assertRaises(ValueError):
            Tarrif('BUSINESS_PAYS')

    def test_checkout_method_is_provider(self):
        self.assertIs(CheckoutMethod.MPESA, Provider.MPESA)


class RequestSerializationTest(SimpleTestCase):

    def test_payload_uses_wire_values_and_string_amounts(self):
        request = CheckoutRequest(
            amount=Decimal('10.50'),
            currency=Currency.USD,
            method=Provider.CARD_PAYMENT,
            email='joe@doe.com',
        )

        self.assertEqual(request.to_payload(), {
            'amount': '10.50',
            'currency': 'USD',
            'method': 'CARD-PAYMENT',
            'email': 'joe@doe.com',
        })

    def test_plain_strings_coerced_to_enums(self):
        request = RefundRequest(amount='10', invoice='YVB845R', reason='Duplicate payment')

        self.assertIs(request.reason, RefundReason.DUPLICATE_PAYMENT)
        self.assertEqual(request.to_payload()['reason'], 'Duplicate payment')

    def test_amount_limited_to_two_decimal_places(self):
        with self.assertRaises(pydantic.ValidationError):
            CheckoutRequest(amount=Decimal('10.123'), currency=Currency.KES)

    def test_amount_must_be_positive(self):
        with self.assertRaises(pydantic.ValidationError):
            CheckoutRequest(amount=Decimal('0'), currency=Currency.KES)
        with self.assertRaises(pydantic.ValidationError):
            PayoutRequestTransaction(account='254712345678', amount=Decimal('-5'))

    def test_unknown_currency_rejected(self):
        with self.assertRaises(pydantic.ValidationError):
            CheckoutRequest(amount=Decimal('10'), currency='TZS')

    def test_wallet_create_defaults_to_working(self):
        details = WalletCreateDetails(currency=Currency.KES, label='customer-42')

        self.assertEqual(details.to_payload(), {
            'currency': 'KES',
            'label': 'customer-42',
            'can_disburse': False,
            'wallet_type': 'WORKING',
        })

    def test_payout_request_serializes_nested_transactions(self):
        request = PayoutRequest(
            currency=Currency.KES,
            provider=PayoutProvider.PESALINK,
            transactions=[PayoutRequestTransaction(
                account='0123456789', amount=Decimal('2000.00'), bank_code='2', name='Jane'
            )],
        )

        self.assertEqual(request.to_payload(), {
            'currency': 'KES',
            'provider': 'PESALINK',
            'transactions': [{
                'account': '0123456789',
                'amount': '2000.00',
                'bank_code': '2',
                'name': 'Jane',
            }],
        })


class ResponseParsingTest(SimpleTestCase):

    def test_wallet_parses_decimals_and_enums(self):
        wallet = Wallet.model_validate(WALLET)

        self.assertEqual(wallet.available_balance, Decimal('1200.50'))
        self.assertIs(wallet.currency, Currency.KES)
        self.assertIs(wallet.wallet_type, WalletType.WORKING)
        self.assertEqual(wallet.updated_at.year, 2024)

    def test_unknown_keys_ignored(self):
        wallet = Wallet.model_validate({**WALLET, 'brand_new_field': 'x'})

        self.assertFalse(hasattr(wallet, 'brand_new_field'))

    def test_transaction_status_with_dash(self):
        transaction = Transaction.model_validate(TRANSACTION)

        self.assertIs(transaction.status, TransactionStatus.ON_HOLD)
        self.assertIs(transaction.trans_type, TransactionType.SALE)

    def test_payment_link_tarrifs(self):
        link = PaymentLink.model_validate(PAYMENT_LINK)

        self.assertIs(link.mobile_tarrif, Tarrif.BUSINESS_PAYS)
        self.assertIs(link.card_tarrif, Tarrif.CUSTOMER_PAYS)
        self.assertEqual(link.amount, Decimal('100'))
        self.assertIsNone(link.updated_at)

    def test_paginated_list(self):
        page = WalletListResponse.model_validate({
            'count': 2,
            'next': None,
            'previous': None,
            'results': [WALLET, {**WALLET, 'wallet_id': 'SETTLE1', 'wallet_type': 'SETTLEMENT', 'label': None}],
        })

        self.assertEqual(page.count, 2)
        self.assertEqual([w.wallet_id for w in page.results], ['Y7ELXJQ', 'SETTLE1'])
        self.assertIs(page.results[1].wallet_type, WalletType.SETTLEMENT)

    def test_approval_request_from_payout(self):
        payout = Payout.model_validate(PAYOUT)

        approval = PayoutApprovalRequest.from_payout(payout)

        self.assertEqual(approval.tracking_id, PAYOUT['tracking_id'])
        self.assertEqual(approval.nonce, 'a1b2c3')
        self.assertEqual(approval.batch_reference, 'BATCH-1')
        self.assertEqual(approval.wallet.wallet_id, 'Y7ELXJQ')
        self.assertEqual(len(approval.transactions), 1)

    def test_approval_request_without_batch_reference(self):
        payout = Payout.model_validate({**PAYOUT, 'batch_reference': None})

        self.assertEqual(PayoutApprovalRequest.from_payout(payout).batch_reference, '')
