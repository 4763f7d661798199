"""Anthropic Messages API."""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import (
    validate_array_input,
    validate_number_input,
    validate_string_input,
)

from ...http_client import HttpClient
from ...shaping import without


async def create_message(
    http: HttpClient,
    messages: List[Dict[str, Any]],
    model_id: str = "claude-3-5-sonnet-20240620",
    max_tokens: int = 1024,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Send a structured list of input messages and return the model's reply.

    Args:
        http: Anthropic HTTP client
        messages: Alternating user/assistant turns
        model_id: Model to use
        max_tokens: Upper bound on generated tokens
        config: Extra request parameters (system, temperature, tools, ...)

    Returns:
        Message object without token usage accounting
    """
    validate_array_input(messages, "Cannot process the messages array")
    validate_string_input(model_id, "Cannot process the model ID")
    validate_number_input(max_tokens, "Cannot process the max tokens value")

    body = {
        **merge_config(config),
        "messages": list(messages),
        "model": model_id,
        "max_tokens": max_tokens,
    }
    response = await http.post("/messages", body)
    return without(response, "usage")
