from django.conf import settings
from django.test import SimpleTestCase, override_settings

from intasend.config import IntaSendConfig
from intasend.constants import LIVE_BASE_URL, SANDBOX_BASE_URL
from intasend.exceptions import ConfigurationError


class IntaSendConfigTest(SimpleTestCase):

    def test_reads_keys_from_settings(self):
        config = IntaSendConfig()

        self.assertEqual(config.publishable_key, settings.INTASEND_PUBLISHABLE_KEY)
        self.assertEqual(config.secret_key, settings.INTASEND_SECRET_KEY)
        self.assertTrue(config.test_mode)

    def test_test_mode_uses_sandbox(self):
        self.assertEqual(IntaSendConfig().api_base_url, SANDBOX_BASE_URL)

    @override_settings(INTASEND_TEST_MODE=False)
    def test_live_mode_uses_payment_host(self):
        self.assertEqual(IntaSendConfig().api_base_url, LIVE_BASE_URL)

    @override_settings(INTASEND_API_BASE_URL='https://intasend.example.com')
    def test_base_url_setting_overrides_mode(self):
        self.assertEqual(IntaSendConfig().api_base_url, 'https://intasend.example.com')

    def test_constructor_values_win_over_settings(self):
        config = IntaSendConfig(publishable_key='pk', secret_key='sk', test_mode=False, timeout=5)

        self.assertEqual(config.publishable_key, 'pk')
        self.assertEqual(config.secret_key, 'sk')
        self.assertFalse(config.test_mode)
        self.assertEqual(config.api_base_url, LIVE_BASE_URL)
        self.assertEqual(config.timeout, 5)

    @override_settings(INTASEND_SECRET_KEY='')
    def test_missing_secret_key_raises_on_use(self):
        config = IntaSendConfig()

        with self.assertRaises(ConfigurationError):
            config.secret_key
        # publishable key is still usable
        self.assertTrue(config.publishable_key)

    def test_invalid_base_url_rejected(self):
        with self.assertRaises(ConfigurationError):
            IntaSendConfig(api_base_url='sandbox.intasend.com')

    def test_invalid_timeout_rejected(self):
        with self.assertRaises(ConfigurationError):
            IntaSendConfig(timeout=0)

    def test_get_full_url(self):
        config = IntaSendConfig(api_base_url='https://sandbox.intasend.com/')

        self.assertEqual(
            config.get_full_url('/api/v1/checkout/'),
            'https://sandbox.intasend.com/api/v1/checkout/'
        )
