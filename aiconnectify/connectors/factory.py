"""
Factory for connector instances.

Resolves the connector class from the registry and the API key from the
caller or, failing that, from settings.
"""

from typing import Any, Optional

from aiconnectify.core.connector_settings import (
    get_api_key_env_var,
    get_default_api_key,
)
from aiconnectify.utils.logger import get_logger

from .base import BaseConnector
from .exceptions import AIConnectifyError
from .registry import ConnectorRegistry

logger = get_logger(__name__)


def create_ai_instance(
    ai: Optional[str], api_key: Optional[str] = None, **config: Any
) -> BaseConnector:
    """
    Create a connector by name.

    Args:
        ai: Registered connector name (e.g. "ChatGPT")
        api_key: API key; falls back to the matching settings field
        **config: Passed to the client (base_url, timeout, transport)

    Returns:
        Configured connector instance

    Raises:
        AIConnectifyError: If the name is missing or a required key is absent
        UnknownConnectorError: If the name is not registered
    """
    if not ai or not isinstance(ai, str):
        raise AIConnectifyError("You must specify an AI to use")

    connector_class = ConnectorRegistry.get_connector(ai)
    key_required = ConnectorRegistry.requires_api_key(ai)

    if key_required and not api_key:
        api_key = get_default_api_key(ai)
        if api_key:
            logger.debug(
                "Using API key from settings",
                connector=ai,
                env_var=get_api_key_env_var(ai),
            )
        else:
            logger.warning(
                "API key missing",
                connector=ai,
                env_var=get_api_key_env_var(ai),
            )
            raise AIConnectifyError(f"API key is required for {ai}", provider=ai)

    if not key_required:
        return connector_class(**config)
    return connector_class(api_key, **config)
