from unittest import mock

import requests
from django.test import SimpleTestCase

from intasend.client import IntaSend
from intasend.constants import LIVE_BASE_URL, SANDBOX_BASE_URL
from intasend.services import (
    CheckoutService,
    CollectionService,
    PaymentLinkService,
    PayoutService,
    RefundService,
    WalletService,
)

from .helpers import WALLET, mock_response, patch_session


class IntaSendClientTest(SimpleTestCase):

    def test_services_share_client_config(self):
        intasend = IntaSend('ISPubKey_live_pk', 'ISSecretKey_live_sk', test_mode=False)

        services = [
            (intasend.checkout(), CheckoutService),
            (intasend.collection(), CollectionService),
            (intasend.payouts(), PayoutService),
            (intasend.refunds(), RefundService),
            (intasend.wallets(), WalletService),
            (intasend.payment_links(), PaymentLinkService),
        ]
        for service, service_class in services:
            with self.subTest(service=service_class.__name__):
                self.assertIsInstance(service, service_class)
                self.assertIs(service.config, intasend.config)
                self.assertEqual(service.http_client.base_url, LIVE_BASE_URL)

    def test_live_client_sends_its_own_secret_key(self):
        intasend = IntaSend('ISPubKey_live_pk', 'ISSecretKey_live_sk', test_mode=False)

        with patch_session(mock_response(200, WALLET)) as request:
            intasend.wallets().details('Y7ELXJQ')

        self.assertEqual(request.call_args.args[1], f'{LIVE_BASE_URL}/api/v1/wallets/Y7ELXJQ/')
        self.assertEqual(request.call_args.kwargs['headers']['Authorization'], 'Bearer ISSecretKey_live_sk')

    def test_falls_back_to_settings(self):
        intasend = IntaSend()

        self.assertTrue(intasend.config.test_mode)
        self.assertEqual(intasend.config.api_base_url, SANDBOX_BASE_URL)
        self.assertEqual(repr(intasend), '<IntaSend test_mode=True>')

    def test_extra_overrides_passed_to_config(self):
        intasend = IntaSend('pk', 'sk', timeout=5, max_retries=1)

        self.assertEqual(intasend.wallets().http_client.timeout, 5)
        self.assertEqual(intasend.wallets().http_client.max_retries, 1)

    def test_accessors_reuse_services(self):
        intasend = IntaSend('pk', 'sk')

        self.assertIs(intasend.wallets(), intasend.wallets())
        self.assertIs(intasend.checkout().http_client, intasend.checkout().http_client)

    def test_close_closes_every_session(self):
        intasend = IntaSend('pk', 'sk')

        with mock.patch.object(requests.Session, 'close') as close:
            intasend.close()

        self.assertEqual(close.call_count, 6)
