"""
HTTP client for IntaSend API communication.
"""

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from intasend.constants import (
    AUTHORIZATION_HEADER,
    DEFAULT_TIMEOUT,
    MAX_RETRIES,
    PUBLIC_KEY_HEADER,
    RequestMethod,
)
from intasend.exceptions import (
    APIError,
    AuthenticationError,
    ResponseParseError,
    UnexpectedResponseStatus,
)

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    HTTP client wrapper for IntaSend API requests.
    Handles request/response, error handling, retries, and logging.
    """

    def __init__(self, base_url: str, timeout: int = DEFAULT_TIMEOUT, max_retries: int = MAX_RETRIES):
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
            max_retries: Connection attempts for GET requests
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = requests.Session()

    def _get_full_url(self, endpoint: str) -> str:
        """Get full URL for endpoint."""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[Dict] = None):
        """Log API request details."""
        logger.info(f"IntaSend API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if data:
            logger.debug(f"Payload: {data}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"IntaSend API Response: {response.status_code}")
        logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = headers.copy()
        if AUTHORIZATION_HEADER in sanitized:
            sanitized[AUTHORIZATION_HEADER] = 'Bearer ***'
        if PUBLIC_KEY_HEADER in sanitized:
            sanitized[PUBLIC_KEY_HEADER] = '***'
        return sanitized

    def _error_message(self, response: requests.Response) -> str:
        """Pull a readable message out of an error body."""
        default = f"API request failed with status {response.status_code}"
        try:
            error_data = response.json()
        except ValueError:
            return response.text or default

        if isinstance(error_data, dict):
            for key in ('detail', 'message', 'errors'):
                if error_data.get(key):
                    return str(error_data[key])
        return default

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle API response and extract data.

        Args:
            response: Response object from requests

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            AuthenticationError: If authentication fails
            UnexpectedResponseStatus: If the status is not 2xx
            ResponseParseError: If the body is not valid JSON
        """
        self._log_response(response)

        if response.status_code == 401:
            raise AuthenticationError(
                "Authentication failed. Please check your IntaSend API keys.",
                error_code=401,
                response_data=response.text
            )

        if response.status_code == 403:
            raise AuthenticationError(
                "Access forbidden. Please check your API key permissions.",
                error_code=403,
                response_data=response.text
            )

        if not 200 <= response.status_code < 300:
            raise UnexpectedResponseStatus(
                self._error_message(response),
                error_code=response.status_code,
                response_data=response.text
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Failed to parse API response: {str(e)}",
                error_code=response.status_code,
                response_data=response.text
            )

    def _send_once(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise APIError(f"Connection failed: {str(e)}") from e
        except requests.RequestException as e:
            raise APIError(f"Request failed: {str(e)}") from e
        return self._handle_response(response)

    def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Make POST request to API.

        POST requests move money, so they are sent exactly once.

        Args:
            endpoint: API endpoint path
            data: Request payload
            headers: Request headers

        Returns:
            Response data
        """
        url = self._get_full_url(endpoint)
        headers = dict(headers or {})
        headers.setdefault('Content-Type', 'application/json')

        self._log_request('POST', url, headers, data)
        return self._send_once('POST', url, json=data, headers=headers)

    def put(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Make PUT request to API.

        Args:
            endpoint: API endpoint path
            data: Request payload
            headers: Request headers

        Returns:
            Response data
        """
        url = self._get_full_url(endpoint)
        headers = dict(headers or {})
        headers.setdefault('Content-Type', 'application/json')

        self._log_request('PUT', url, headers, data)
        return self._send_once('PUT', url, json=data, headers=headers)

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        retries: Optional[int] = None
    ) -> Any:
        """
        Make GET request to API.

        Args:
            endpoint: API endpoint path
            params: Query parameters
            headers: Request headers
            retries: Number of attempts on connection failure

        Returns:
            Response data
        """
        url = self._get_full_url(endpoint)
        headers = dict(headers or {})
        headers.setdefault('Content-Type', 'application/json')
        retries = retries or self.max_retries

        self._log_request('GET', url, headers)

        for attempt in range(retries):
            try:
                response = self.session.request(
                    'GET',
                    url,
                    params=params,
                    headers=headers,
                    timeout=self.timeout
                )
            except (requests.ConnectionError, requests.Timeout) as e:
                if attempt == retries - 1:
                    raise APIError(f"Connection failed after {retries} attempts: {str(e)}") from e
                logger.warning(f"Request failed (attempt {attempt + 1}/{retries}): {str(e)}")
                continue
            except requests.RequestException as e:
                raise APIError(f"Request failed: {str(e)}") from e
            return self._handle_response(response)

    def send(
        self,
        method: RequestMethod,
        endpoint: str,
        response_type: Any,
        payload: Optional[BaseModel] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Send a typed request and parse the answer into ``response_type``.

        Args:
            method: HTTP verb
            endpoint: API endpoint path
            response_type: Model class, or any type pydantic can validate
                (e.g. ``List[BankCode]``)
            payload: Request body model, ignored for GET
            headers: Request headers (auth)

        Returns:
            An instance of ``response_type``

        Raises:
            ResponseParseError: If the body doesn't match ``response_type``
        """
        method = RequestMethod(method)
        data = payload.model_dump(mode='json', exclude_none=True) if payload is not None else None

        if method == RequestMethod.GET:
            raw = self.get(endpoint, headers=headers)
        elif method == RequestMethod.POST:
            raw = self.post(endpoint, data=data, headers=headers)
        else:
            raw = self.put(endpoint, data=data, headers=headers)

        try:
            return TypeAdapter(response_type).validate_python(raw)
        except PydanticValidationError as e:
            logger.error(f"Unexpected response shape from {endpoint}: {e.error_count()} error(s)")
            raise ResponseParseError(
                f"Response from {endpoint} does not match expected shape: {str(e)}",
                response_data=raw
            )

    def close(self):
        """Close the session."""
        self.session.close()
