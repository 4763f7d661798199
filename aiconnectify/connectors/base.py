"""
Base classes for AI connectors.

Provides:
- BaseClient: holds the API key, provider headers and the HttpClient
- BaseConnector: public per-provider class built on top of a client
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from aiconnectify.core.connector_settings import CONNECTOR_CONFIGS
from aiconnectify.utils.logger import add_connector_context, get_logger
from aiconnectify.utils.validation import validate_key_string

from .http_client import HttpClient

logger = get_logger(__name__)


class BaseClient(ABC):
    """
    Abstract base class for provider clients.

    A client owns exactly one HttpClient. Setters that change identifying
    headers update it in place, so a client never holds more than one
    underlying connection pool.
    """

    ai_name: str = ""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        **config: Any,
    ):
        """
        Initialize provider client.

        Args:
            api_key: API key for the provider
            base_url: Override for the provider API root
            timeout: Request timeout in seconds
            **config: Extra options; ``transport`` is passed to httpx
        """
        defaults = CONNECTOR_CONFIGS.get(self.ai_name, {})
        self.api_key = api_key
        self.base_url = base_url or defaults.get("base_url")
        self.timeout = timeout if timeout is not None else defaults.get("timeout")
        self.http = HttpClient(
            self.base_url,
            default_headers=self._get_default_headers(),
            timeout=self.timeout,
            provider=self.ai_name,
            transport=config.get("transport"),
        )

    @abstractmethod
    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for HTTP requests."""
        pass

    def _set_header(self, name: str, value: str) -> None:
        self.http.update_headers({name: value})
        logger.info("Default header updated", connector=self.ai_name, header=name)


class BaseConnector:
    """
    Base class for all public connectors.

    Subclasses name their client class and expose one coroutine per vendor
    operation, each delegating to a method module with the client's HttpClient.
    ``client_class`` is normally a BaseClient subclass; connectors that make no
    HTTP calls (TensorFlow) supply any class taking ``(api_key, **config)``.
    """

    connector_name: str = ""
    client_class: Optional[Type[Any]] = None
    api_key_required: bool = True

    def __init__(self, api_key: Optional[str] = None, **config: Any):
        if self.api_key_required:
            validate_key_string(api_key, "A valid API key must be provided")
        self.client = self._build_client(api_key, **config)
        logger.debug("Connector created", **add_connector_context(self.connector_name))

    def _build_client(self, api_key: Optional[str], **config: Any) -> Any:
        return self.client_class(api_key, **config)

    @property
    def http(self) -> HttpClient:
        return self.client.http

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self.client.http.aclose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
