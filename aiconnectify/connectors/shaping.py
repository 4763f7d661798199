"""
Response shaping shared by the method modules.
"""

from typing import Any

from .exceptions import MalformedResponseError


def unwrap(payload: Any, key: str, provider: str) -> Any:
    """
    Return ``payload[key]``.

    Raises:
        MalformedResponseError: If the payload is not an object or lacks the key
    """
    if not isinstance(payload, dict) or key not in payload:
        raise MalformedResponseError(
            f"{provider.upper()} ERROR => Response is missing the '{key}' field",
            provider=provider,
        )
    return payload[key]


def without(payload: Any, *keys: str) -> Any:
    """Return a copy of an object response without the given keys."""
    if not isinstance(payload, dict):
        return payload
    return {k: v for k, v in payload.items() if k not in keys}
