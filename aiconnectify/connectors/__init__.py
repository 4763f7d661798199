"""
AI connectors.

This package contains one connector per provider plus the shared HTTP
wrapper, registry and factory.
"""

from .base import BaseClient, BaseConnector
from .chatgpt import ChatGPT
from .claude import Claude
from .cohere import Cohere
from .dalle import DALLE
from .exceptions import (
    AIConnectifyError,
    AuthenticationError,
    MalformedResponseError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    TransientError,
    UnknownConnectorError,
    ValidationError,
)
from .factory import create_ai_instance
from .http_client import HttpClient
from .mistral import Mistral
from .registry import ConnectorRegistry
from .stability import Stability
from .tensorflow import TensorFlow

__all__ = [
    # Base classes
    "BaseClient",
    "BaseConnector",
    "HttpClient",
    # Connectors
    "ChatGPT",
    "Claude",
    "Cohere",
    "DALLE",
    "Mistral",
    "Stability",
    "TensorFlow",
    # Registry and factory
    "ConnectorRegistry",
    "create_ai_instance",
    # Exceptions
    "AIConnectifyError",
    "AuthenticationError",
    "MalformedResponseError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "TransientError",
    "UnknownConnectorError",
    "ValidationError",
]
