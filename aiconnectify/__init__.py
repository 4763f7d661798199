"""
AI Connectify: uniform async connectors for hosted AI APIs.
"""

from aiconnectify.ai_connectify import AIConnectify
from aiconnectify.connectors import (
    DALLE,
    AIConnectifyError,
    ChatGPT,
    Claude,
    Cohere,
    ConnectorRegistry,
    Mistral,
    Stability,
    TensorFlow,
    create_ai_instance,
)

__version__ = "0.1.0"

__all__ = [
    "AIConnectify",
    "AIConnectifyError",
    "ChatGPT",
    "Claude",
    "Cohere",
    "ConnectorRegistry",
    "DALLE",
    "Mistral",
    "Stability",
    "TensorFlow",
    "create_ai_instance",
]
