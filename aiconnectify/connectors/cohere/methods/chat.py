"""
Cohere text endpoints: chat, rerank, classify and tokenization.

Responses drop the ``meta`` block (billing and API version details).
"""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_array_input, validate_string_input

from ...http_client import HttpClient
from ...shaping import without

MODEL_ID_MESSAGE = "Cannot process the model ID"


async def check_api_key(http: HttpClient) -> Dict[str, Any]:
    """Report whether the configured API key is valid."""
    return await http.post("/v1/check-api-key")


async def chat(
    http: HttpClient,
    messages: List[Dict[str, Any]],
    model_id: str = "command-r-plus-08-2024",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Generate a non-streamed chat reply.

    Args:
        http: Cohere HTTP client
        messages: Chat history including the latest user turn
        model_id: Model to use
        config: Extra request parameters (documents, tools, temperature, ...)
    """
    validate_array_input(messages, "Cannot process the messages array")
    validate_string_input(model_id, MODEL_ID_MESSAGE)

    body = {
        **merge_config(config),
        "messages": list(messages),
        "stream": False,
        "model": model_id,
    }
    response = await http.post("/v2/chat", body)
    return without(response, "meta")


async def rerank(
    http: HttpClient,
    query: str,
    documents: List[Any],
    model_id: str = "rerank-english-v3.0",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Order documents by relevance to a query."""
    validate_string_input(query, "Cannot process the query")
    validate_array_input(documents, "Cannot process the documents array")
    validate_string_input(model_id, MODEL_ID_MESSAGE)

    body = {
        **merge_config(config),
        "query": query,
        "documents": list(documents),
        "model": model_id,
    }
    response = await http.post("/v2/rerank", body)
    return without(response, "meta")


async def classify(
    http: HttpClient,
    inputs: List[str],
    examples: Optional[List[Dict[str, str]]] = None,
    model_id: str = "embed-english-light-v2.0",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Classify texts using labelled examples or a fine-tuned model.

    ``examples`` may be omitted when ``model_id`` is a fine-tuned classifier.
    """
    validate_array_input(inputs, "Cannot process the inputs array")
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    examples = list(examples or [])
    if examples:
        validate_array_input(examples, "Cannot process the examples array")

    body = {
        **merge_config(config),
        "inputs": list(inputs),
        "examples": examples,
        "model": model_id,
    }
    response = await http.post("/v1/classify", body)
    return without(response, "meta")


async def tokenize(
    http: HttpClient, text: str, model_id: str = "command"
) -> Dict[str, Any]:
    validate_string_input(text, "Cannot process the text")
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    response = await http.post("/v1/tokenize", {"text": text, "model": model_id})
    return without(response, "meta")


async def detokenize(
    http: HttpClient, tokens: List[int], model_id: str = "command"
) -> Dict[str, Any]:
    validate_array_input(tokens, "Cannot process the tokens array")
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    response = await http.post(
        "/v1/detokenize", {"tokens": list(tokens), "model": model_id}
    )
    return without(response, "meta")
