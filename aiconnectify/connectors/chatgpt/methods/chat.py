"""Chat completions, embeddings and moderation."""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import (
    validate_array_input,
    validate_string_input,
    validate_text_or_array_input,
)

from ...http_client import HttpClient
from ...shaping import unwrap, without


async def create_chat_completion(
    http: HttpClient,
    messages: List[Dict[str, Any]],
    model_id: str = "gpt-4o-mini",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create a model response for a chat conversation.

    Args:
        http: OpenAI HTTP client
        messages: Conversation so far, oldest first
        model_id: Model to use
        config: Extra request parameters (temperature, tools, ...)

    Returns:
        Completion object without token usage accounting
    """
    validate_array_input(messages, "Cannot process the messages array")
    validate_string_input(model_id, "Cannot process the model ID")

    body = {**merge_config(config), "messages": list(messages), "model": model_id}
    response = await http.post("/chat/completions", body)
    return without(response, "usage")


async def create_embeddings(
    http: HttpClient,
    input: Any,
    model_id: str = "text-embedding-ada-002",
    config: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    validate_text_or_array_input(input, "Cannot process the input")
    validate_string_input(model_id, "Cannot process the model ID")

    body = {**merge_config(config), "input": input, "model": model_id}
    response = await http.post("/embeddings", body)
    return unwrap(response, "data", http.provider)


async def create_moderation(
    http: HttpClient, input: Any, model_id: str = "omni-moderation-latest"
) -> Dict[str, Any]:
    """Classify text (or text and image inputs) against the usage policies."""
    validate_text_or_array_input(input, "Cannot process the input")
    validate_string_input(model_id, "Cannot process the model ID")
    return await http.post("/moderations", {"input": input, "model": model_id})
