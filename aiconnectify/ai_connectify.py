"""
Public entry point.

    async with AIConnectify("ChatGPT", api_key) as ai:
        models = await ai.call("get_models")
"""

import inspect
from typing import Any, Optional

from aiconnectify.connectors.base import BaseConnector
from aiconnectify.connectors.exceptions import AIConnectifyError
from aiconnectify.connectors.factory import create_ai_instance
from aiconnectify.utils.logger import get_logger

logger = get_logger(__name__)


class AIConnectify:
    """Selects a connector by name and dispatches method calls to it."""

    def __init__(self, ai: Optional[str], api_key: Optional[str] = None, **config: Any):
        """
        Args:
            ai: Connector name ("ChatGPT", "Claude", "Cohere", "DALLE",
                "Mistral", "Stability" or "TensorFlow")
            api_key: Provider API key (not needed for TensorFlow)
            **config: Client options (base_url, timeout, transport)
        """
        if not ai:
            raise AIConnectifyError("You must specify an AI to use")
        self.ai = ai
        self.connector: BaseConnector = create_ai_instance(ai, api_key, **config)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.connector.aclose()

    async def call(self, method_name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Invoke a connector method by name.

        Coroutine methods are awaited; plain callables (TensorFlow functions,
        header setters) are returned directly.

        Raises:
            AIConnectifyError: If the connector has no such public method
        """
        if not isinstance(method_name, str) or not method_name or method_name.startswith("_"):
            raise AIConnectifyError(
                f"Method {method_name} is not available for {self.ai}", provider=self.ai
            )

        try:
            method = getattr(self.connector, method_name)
        except AttributeError:
            method = None
        if not callable(method):
            raise AIConnectifyError(
                f"Method {method_name} is not available for {self.ai}", provider=self.ai
            )

        logger.debug("Dispatching call", connector=self.ai, operation=method_name)
        result = method(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result
