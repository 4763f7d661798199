"""
Connector registry.

Provides a centralized table of every available connector, whether it needs
an API key, and registration hooks for third-party connectors.
"""

from typing import Dict, List, Tuple, Type

from .base import BaseConnector
from .chatgpt import ChatGPT
from .claude import Claude
from .cohere import Cohere
from .dalle import DALLE
from .exceptions import UnknownConnectorError
from .mistral import Mistral
from .stability import Stability
from .tensorflow import TensorFlow


class ConnectorRegistry:
    """
    Registry of connector classes keyed by public name.

    Each entry records the connector class and whether it must be created
    with an API key.
    """

    _connectors: Dict[str, Tuple[Type[BaseConnector], bool]] = {
        "ChatGPT": (ChatGPT, True),
        "Claude": (Claude, True),
        "Cohere": (Cohere, True),
        "DALLE": (DALLE, True),
        "Mistral": (Mistral, True),
        "Stability": (Stability, True),
        "TensorFlow": (TensorFlow, False),
    }

    @classmethod
    def get_connector(cls, name: str) -> Type[BaseConnector]:
        """
        Look up a connector class by name.

        Raises:
            UnknownConnectorError: If no connector is registered under name
        """
        if name not in cls._connectors:
            raise UnknownConnectorError(f"AI service {name} is not registered")
        return cls._connectors[name][0]

    @classmethod
    def requires_api_key(cls, name: str) -> bool:
        if name not in cls._connectors:
            raise UnknownConnectorError(f"AI service {name} is not registered")
        return cls._connectors[name][1]

    @classmethod
    def get_available_connectors(cls) -> List[str]:
        """
        Get list of available connector names.

        Returns:
            List of registered connector names
        """
        return list(cls._connectors.keys())

    @classmethod
    def register_connector(
        cls,
        name: str,
        connector_class: Type[BaseConnector],
        api_key_required: bool = True,
    ) -> None:
        """
        Register a new connector implementation.

        Args:
            name: Name to register the connector under
            connector_class: Class that inherits from BaseConnector
            api_key_required: Whether instances need an API key

        Raises:
            TypeError: If connector_class doesn't inherit from BaseConnector
        """
        if not isinstance(connector_class, type) or not issubclass(
            connector_class, BaseConnector
        ):
            raise TypeError("Connector class must inherit from BaseConnector")

        cls._connectors[name] = (connector_class, api_key_required)

    @classmethod
    def is_connector_available(cls, name: str) -> bool:
        return name in cls._connectors

    @classmethod
    def unregister_connector(cls, name: str) -> None:
        """
        Remove a connector from the registry.

        Raises:
            KeyError: If connector is not registered
        """
        if name not in cls._connectors:
            raise KeyError(f"Connector '{name}' is not registered")

        del cls._connectors[name]
