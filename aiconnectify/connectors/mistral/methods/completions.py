"""
Mistral chat, fill-in-the-middle, agent completions and embeddings.

Completion responses drop the ``usage`` block.
"""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import (
    validate_array_input,
    validate_string_input,
    validate_text_or_array_input,
)

from ...http_client import HttpClient
from ...shaping import without

MODEL_ID_MESSAGE = "Cannot process the model ID"


async def create_chat_completion(
    http: HttpClient,
    messages: List[Dict[str, Any]],
    model_id: str = "mistral-small-latest",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    validate_array_input(messages, "Cannot process the messages array")
    validate_string_input(model_id, MODEL_ID_MESSAGE)

    body = {**merge_config(config), "messages": list(messages), "model": model_id}
    response = await http.post("/chat/completions", body)
    return without(response, "usage")


async def fim_completion(
    http: HttpClient,
    prompt: str,
    model_id: str = "codestral-2405",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Fill-in-the-middle code completion.

    Pass the text after the cursor as ``suffix`` in config.
    """
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(model_id, MODEL_ID_MESSAGE)

    body = {**merge_config(config), "prompt": prompt, "model": model_id}
    response = await http.post("/fim/completions", body)
    return without(response, "usage")


async def agents_completion(
    http: HttpClient,
    messages: List[Dict[str, Any]],
    agent_id: str,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    validate_array_input(messages, "Cannot process the messages array")
    validate_string_input(agent_id, "Cannot process the agent ID")

    body = {**merge_config(config), "messages": list(messages), "agent_id": agent_id}
    response = await http.post("/agents/completions", body)
    return without(response, "usage")


async def embeddings(
    http: HttpClient,
    input: Any,
    model_id: str = "mistral-embed",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    validate_text_or_array_input(input, "Cannot process the input")
    validate_string_input(model_id, MODEL_ID_MESSAGE)

    body = {**merge_config(config), "input": input, "model": model_id}
    response = await http.post("/embeddings", body)
    return without(response, "usage")
