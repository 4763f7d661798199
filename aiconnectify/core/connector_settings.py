"""
Connector-specific configurations.

Provides centralized configuration for every connector including base URLs,
request timeouts and the environment variables holding their API keys.
"""

from typing import Any, Dict, List, Optional

from aiconnectify.core.config import settings

# Connector-specific configurations
CONNECTOR_CONFIGS: Dict[str, Dict[str, Any]] = {
    "ChatGPT": {
        "base_url": settings.OPENAI_BASE_URL,
        "timeout": settings.HTTP_TIMEOUT_SECONDS,
        "api_key_required": True,
    },
    "Claude": {
        "base_url": settings.ANTHROPIC_BASE_URL,
        "timeout": settings.HTTP_TIMEOUT_SECONDS,
        "api_key_required": True,
    },
    "Cohere": {
        "base_url": settings.COHERE_BASE_URL,
        "timeout": settings.HTTP_TIMEOUT_SECONDS,
        "api_key_required": True,
    },
    "DALLE": {
        "base_url": settings.OPENAI_BASE_URL,
        "timeout": max(settings.HTTP_TIMEOUT_SECONDS, 60.0),  # image generation is slow
        "api_key_required": True,
    },
    "Mistral": {
        "base_url": settings.MISTRAL_BASE_URL,
        "timeout": settings.HTTP_TIMEOUT_SECONDS,
        "api_key_required": True,
    },
    "Stability": {
        "base_url": settings.STABILITY_BASE_URL,
        "timeout": max(settings.HTTP_TIMEOUT_SECONDS, 60.0),
        "api_key_required": True,
    },
    "TensorFlow": {
        "base_url": None,
        "timeout": None,
        "api_key_required": False,
    },
}

# Environment variable mapping
REQUIRED_ENV_VARS = {
    "ChatGPT": "OPENAI_API_KEY",
    "Claude": "ANTHROPIC_API_KEY",
    "Cohere": "COHERE_API_KEY",
    "DALLE": "OPENAI_API_KEY",
    "Mistral": "MISTRAL_API_KEY",
    "Stability": "STABILITY_API_KEY",
}


def get_connector_config(connector_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific connector.

    Args:
        connector_name: Name of the connector

    Returns:
        Connector configuration dictionary

    Raises:
        ValueError: If connector is not configured
    """
    if connector_name not in CONNECTOR_CONFIGS:
        raise ValueError(f"Unknown connector: {connector_name}")

    return CONNECTOR_CONFIGS[connector_name].copy()


def get_api_key_env_var(connector_name: str) -> Optional[str]:
    """Get the settings field holding the API key for a connector, if any."""
    return REQUIRED_ENV_VARS.get(connector_name)


def get_default_api_key(connector_name: str) -> Optional[str]:
    """Resolve the API key configured in settings for a connector."""
    env_var = get_api_key_env_var(connector_name)
    if env_var is None:
        return None
    return getattr(settings, env_var, None)


def get_all_connector_names() -> List[str]:
    """Get list of all configured connector names."""
    return list(CONNECTOR_CONFIGS.keys())
