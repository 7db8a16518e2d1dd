import requests
from typing import Dict, Any, Optional

from ..infrastructure.config import ClientConfig
from ..infrastructure.logging import get_logger
from ..infrastructure.request_context import REQUEST_ID_HEADER, current_request_id

logger = get_logger(__name__)


class HttpClient:
    """
    HTTP transport for the aslan API.

    Builds URLs from the configured host and API prefix, attaches the bearer
    token and the current request id, and decodes JSON responses. Failures
    are raised as-is: non-2xx statuses as ``requests.HTTPError``, network
    problems as the matching ``requests`` exception, and bad bodies as the
    JSON decode error. There are no retries.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        token: Optional[str] = None,
        api_prefix: str = "/api/aslan",
        timeout: float = 30.0,
    ):
        """
        Initialize the client.

        Args:
            host: Base URL of the deployment, e.g. http://zadig.local
            token: Optional bearer token
            api_prefix: Path prefix of the aslan API
            timeout: Per-request timeout in seconds
        """
        self.host = host
        self.token = token
        self.api_prefix = api_prefix
        self.timeout = timeout

        if not self.host:
            logger.warning("aslan client created without a host")

    @classmethod
    def from_config(cls, config: ClientConfig) -> "HttpClient":
        return cls(
            host=config.host,
            token=config.token,
            api_prefix=config.api_prefix,
            timeout=config.timeout,
        )

    def _get_headers(self) -> Dict[str, str]:
        """
        Get headers for API requests including authorization.

        Returns:
            Dictionary of HTTP headers
        """
        headers = {
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        }

        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'

        request_id = current_request_id.get(None)
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id

        return headers

    def _build_url(self, endpoint: str) -> str:
        """
        Build full URL from endpoint.

        Args:
            endpoint: API endpoint path, relative to the API prefix

        Returns:
            Full URL
        """
        if not self.host:
            raise ValueError("aslan client host not configured")

        prefix = "/" + self.api_prefix.strip("/") if self.api_prefix.strip("/") else ""
        return f"{self.host.rstrip('/')}{prefix}/{endpoint.lstrip('/')}"

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            params: Optional query parameters
            body: Optional JSON payload

        Returns:
            Decoded JSON, or None when the response has no body
        """
        url = self._build_url(endpoint)
        logger.debug(f"Making {method} request to {url}")

        response = requests.request(
            method,
            url,
            headers=self._get_headers(),
            params=params,
            json=body,
            timeout=self.timeout,
        )
        response.raise_for_status()

        if not response.content:
            return None
        return response.json()

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request to the aslan API."""
        return self.request("GET", endpoint, params=params)

    def post(
        self,
        endpoint: str,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make POST request to the aslan API."""
        return self.request("POST", endpoint, params=params, body=body)
