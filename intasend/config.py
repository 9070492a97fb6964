"""
Configuration management for the IntaSend client.
"""

from django.conf import settings

from .constants import DEFAULT_TIMEOUT, LIVE_BASE_URL, MAX_RETRIES, SANDBOX_BASE_URL
from .exceptions import ConfigurationError


class IntaSendConfig:
    """
    Configuration manager for IntaSend API settings.

    Values passed to the constructor win; anything left as None is read from
    Django settings when first used.
    """

    def __init__(
        self,
        publishable_key=None,
        secret_key=None,
        test_mode=None,
        api_base_url=None,
        timeout=None,
        max_retries=None,
    ):
        self._publishable_key = publishable_key
        self._secret_key = secret_key
        self._test_mode = test_mode
        self._api_base_url = api_base_url
        self._timeout = timeout
        self._max_retries = max_retries
        self._validate_settings()

    def _setting(self, override, name, default=None):
        if override is not None:
            return override
        return getattr(settings, name, default)

    @property
    def test_mode(self):
        """Whether requests go to the sandbox."""
        return bool(self._setting(self._test_mode, 'INTASEND_TEST_MODE', True))

    @property
    def api_base_url(self):
        """Get IntaSend API base URL."""
        base_url = self._setting(self._api_base_url, 'INTASEND_API_BASE_URL', '')
        if base_url:
            return base_url
        return SANDBOX_BASE_URL if self.test_mode else LIVE_BASE_URL

    @property
    def publishable_key(self):
        """Get IntaSend publishable (public) key."""
        key = self._setting(self._publishable_key, 'INTASEND_PUBLISHABLE_KEY', '')
        if not key:
            raise ConfigurationError(
                "INTASEND_PUBLISHABLE_KEY is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )
        return key

    @property
    def secret_key(self):
        """Get IntaSend secret key."""
        key = self._setting(self._secret_key, 'INTASEND_SECRET_KEY', '')
        if not key:
            raise ConfigurationError(
                "INTASEND_SECRET_KEY is not configured in Django settings. "
                "Please add it to your settings.py or .env file."
            )
        return key

    @property
    def timeout(self):
        """Get request timeout in seconds."""
        return self._setting(self._timeout, 'INTASEND_TIMEOUT', DEFAULT_TIMEOUT)

    @property
    def max_retries(self):
        """Get number of connection attempts for idempotent requests."""
        return self._setting(self._max_retries, 'INTASEND_MAX_RETRIES', MAX_RETRIES)

    def _validate_settings(self):
        """
        Validate settings that don't depend on credentials.
        Raises ConfigurationError if validation fails.
        """
        if not self.api_base_url.startswith(('http://', 'https://')):
            raise ConfigurationError(
                f"INTASEND_API_BASE_URL must be an http(s) URL. Got: {self.api_base_url}"
            )

        try:
            timeout = float(self.timeout)
        except (TypeError, ValueError):
            raise ConfigurationError(f"INTASEND_TIMEOUT must be a number. Got: {self.timeout}")
        if timeout <= 0:
            raise ConfigurationError("INTASEND_TIMEOUT must be greater than zero.")

        if int(self.max_retries) < 1:
            raise ConfigurationError("INTASEND_MAX_RETRIES must be at least 1.")

        # Keys are checked in their property getters, so a config object can
        # exist before credentials are needed.

    def get_full_url(self, endpoint):
        """
        Get full URL for an API endpoint.

        Args:
            endpoint: API endpoint path

        Returns:
            Full URL combining base URL and endpoint
        """
        base = self.api_base_url.rstrip('/')
        endpoint = endpoint.lstrip('/')
        return f"{base}/{endpoint}"

    def __repr__(self):
        return f"<IntaSendConfig base_url={self.api_base_url!r} test_mode={self.test_mode}>"


# Singleton instance
config = IntaSendConfig()
