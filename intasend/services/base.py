"""
Shared plumbing for the IntaSend API services.
"""

import logging

from ..config import config as default_config
from ..constants import AuthScope
from ..exceptions import (
    AuthenticationError,
    ConfigurationError,
    IntaSendException,
    ValidationError,
)
from ..utils.http_client import HTTPClient
from .auth_service import AuthService

logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class for API services.

    Subclasses set ``error_class``; transport and parsing failures are
    re-raised as that class, keeping the status code and response body.
    """

    error_class = IntaSendException

    def __init__(self, config=None):
        self.config = config or default_config
        self.http_client = HTTPClient(
            self.config.api_base_url,
            timeout=self.config.timeout,
            max_retries=int(self.config.max_retries)
        )
        self.auth_service = AuthService(self.config)

    def _request(self, method, endpoint, response_type, payload=None,
                 scope=AuthScope.SECRET, action="complete request"):
        """
        Send a typed request with auth headers attached.

        Args:
            method: RequestMethod
            endpoint: API endpoint path
            response_type: Type to parse the response into
            payload: Request body model (optional)
            scope: Which key authenticates the call
            action: Short description used in error messages

        Returns:
            Parsed response of ``response_type``

        Raises:
            AuthenticationError: If the gateway rejects the key
            ConfigurationError: If the key for ``scope`` is missing
            ValidationError: If input validation fails
            error_class: For any other API failure
        """
        try:
            # Get auth headers
            headers = self.auth_service.get_auth_header(scope)

            return self.http_client.send(
                method,
                endpoint,
                response_type,
                payload=payload,
                headers=headers
            )

        except (AuthenticationError, ConfigurationError, ValidationError):
            raise
        except self.error_class:
            raise
        except IntaSendException as e:
            logger.error(f"Failed to {action}: {e.message}")
            raise self.error_class(
                f"Failed to {action}: {e.message}",
                error_code=e.error_code,
                response_data=e.response_data
            ) from e

    def close(self):
        """Close the underlying HTTP session."""
        self.http_client.close()
