"""
Authentication service for the IntaSend API.

Client-side endpoints (checkout links, bank codes) are authenticated with the
publishable key; everything else with the secret key as a bearer token.
"""

import logging

from ..config import config as default_config
from ..constants import AUTHORIZATION_HEADER, PUBLIC_KEY_HEADER, AuthScope

logger = logging.getLogger(__name__)


class AuthService:
    """
    Builds the auth header for a request scope.
    """

    def __init__(self, config=None):
        self.config = config or default_config

    def get_public_key_header(self) -> dict:
        """Header carrying the publishable key."""
        return {PUBLIC_KEY_HEADER: self.config.publishable_key}

    def get_secret_key_header(self) -> dict:
        """Bearer header carrying the secret key."""
        return {AUTHORIZATION_HEADER: f"Bearer {self.config.secret_key}"}

    def get_auth_header(self, scope=AuthScope.SECRET) -> dict:
        """
        Get authorization header for API requests.

        Args:
            scope: AuthScope.PUBLIC or AuthScope.SECRET

        Returns:
            Dictionary with the auth header

        Raises:
            ConfigurationError: If the key for the scope is not configured
        """
        scope = AuthScope(scope)
        logger.debug(f"Using {scope.value.lower()} key authentication")

        if scope == AuthScope.PUBLIC:
            return self.get_public_key_header()
        return self.get_secret_key_header()
