"""
Thin async HTTP wrapper shared by every connector.

One HttpClient is bound to a provider base URL and a set of default headers.
Each call performs exactly one request; failures are normalized into the
AIConnectifyError hierarchy with a "{PROVIDER} ERROR => ..." message.
"""

from typing import Any, Dict, Mapping, Optional

import httpx

from aiconnectify.core.config import settings
from aiconnectify.utils.logger import get_logger

from .exceptions import (
    AIConnectifyError,
    AuthenticationError,
    MalformedResponseError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    TransientError,
)

logger = get_logger(__name__)


class HttpClient:
    """
    Async HTTP client bound to a single provider.

    Provides:
    - JSON verbs returning the parsed body (get/post/patch/delete)
    - Multipart uploads and full-response reads (post_form/get_full)
    - Status code to exception mapping
    """

    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        provider: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Provider API root every endpoint is joined to
            default_headers: Headers attached to every request
            timeout: Request timeout in seconds (defaults to settings)
            provider: Connector name used in error messages and logs
            transport: Optional httpx transport (mock transports in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.default_headers: Dict[str, str] = dict(default_headers or {})
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self.provider = provider or "HTTP"
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def update_headers(self, headers: Mapping[str, str]) -> None:
        """Add or replace default headers for subsequent requests."""
        self.default_headers.update(headers)

    async def aclose(self) -> None:
        """Close the underlying httpx client if one was opened."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"User-Agent": settings.USER_AGENT},
            )
        return self._client

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        response = await self._request("GET", endpoint, params=params, headers=headers)
        return self.parse_body(response)

    async def post(
        self,
        endpoint: str,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        raw: bool = False,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a JSON POST.

        Args:
            endpoint: Path relative to the base URL
            body: JSON-serializable request body
            headers: Per-request headers merged over the defaults
            raw: Return the response bytes instead of the parsed body
            params: Optional query string parameters

        Returns:
            Parsed JSON body, or bytes when raw is True
        """
        response = await self._request(
            "POST", endpoint, json=body, headers=headers, params=params
        )
        if raw:
            return response.content
        return self.parse_body(response)

    async def patch(
        self,
        endpoint: str,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        response = await self._request("PATCH", endpoint, json=body, headers=headers)
        return self.parse_body(response)

    async def delete(
        self, endpoint: str, headers: Optional[Dict[str, str]] = None
    ) -> Any:
        response = await self._request("DELETE", endpoint, headers=headers)
        return self.parse_body(response)

    async def post_form(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send a multipart/form-data POST and return the full response.

        Callers inspect status and headers themselves, e.g. to tell a finished
        binary result from a 202 "still running" reply.
        """
        return await self._request(
            "POST", endpoint, data=data, files=files, headers=headers
        )

    async def get_full(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send a GET and return the full response (status, headers, body)."""
        return await self._request("GET", endpoint, params=params, headers=headers)

    async def _request(
        self,
        method: str,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Execute one request and map failures to library errors.

        Raises:
            AIConnectifyError: Or one of its subclasses for any failure
        """
        merged_headers = {**self.default_headers, **(headers or {})}
        logger.debug(
            "Sending request",
            connector=self.provider,
            method=method,
            endpoint=endpoint,
        )

        try:
            response = await self._get_client().request(
                method, endpoint, headers=merged_headers, **kwargs
            )
        except httpx.TimeoutException as e:
            logger.warning(
                "Request timed out",
                connector=self.provider,
                method=method,
                endpoint=endpoint,
                error_type=type(e).__name__,
            )
            raise TransientError(
                f"{self._label} ERROR => Request timeout", provider=self.provider
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Request failed before a response was received",
                connector=self.provider,
                method=method,
                endpoint=endpoint,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise TransientError(
                f"{self._label} ERROR => Unexpected request error - {e}",
                provider=self.provider,
            ) from e

        if response.status_code >= 400:
            error = self._build_error(response)
            logger.warning(
                "Provider returned an error",
                connector=self.provider,
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                error_type=type(error).__name__,
                error_message=error.message,
            )
            raise error

        return response

    @property
    def _label(self) -> str:
        return self.provider.upper()

    def _build_error(self, response: httpx.Response) -> AIConnectifyError:
        """Map an error response to the matching exception class."""
        status = response.status_code
        message = (
            f"{self._label} ERROR => {status} - {self._extract_error_message(response)}"
        )

        if status == 401:
            return AuthenticationError(message, provider=self.provider, status_code=status)
        if status == 403:
            return PermissionDeniedError(message, provider=self.provider, status_code=status)
        if status == 404:
            return NotFoundError(message, provider=self.provider, status_code=status)
        if status == 429:
            return RateLimitError(
                message,
                provider=self.provider,
                status_code=status,
                retry_after=self._parse_retry_after(response),
            )
        if status >= 500:
            return TransientError(message, provider=self.provider, status_code=status)
        return AIConnectifyError(message, provider=self.provider, status_code=status)

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Pull the vendor's human-readable message out of an error body."""
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return error
            if payload.get("message"):
                return str(payload["message"])
            errors = payload.get("errors")
            if isinstance(errors, list) and errors:
                return ", ".join(str(item) for item in errors)
            if payload.get("detail"):
                return str(payload["detail"])

        text = response.text.strip() if response.content else ""
        return text or response.reason_phrase or "Unknown error"

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> Optional[int]:
        value = response.headers.get("retry-after")
        if value is None:
            return None
        try:
            return int(float(value))
        except ValueError:
            return None

    def parse_body(self, response: httpx.Response) -> Any:
        """Decode a successful body: JSON when possible, text otherwise."""
        if not response.content:
            return {}

        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            try:
                return response.json()
            except ValueError as e:
                raise MalformedResponseError(
                    f"{self._label} ERROR => Invalid JSON in response",
                    provider=self.provider,
                    status_code=response.status_code,
                ) from e

        try:
            return response.json()
        except ValueError:
            return response.text
