"""Cohere models."""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_string_input

from ...http_client import HttpClient


async def get_models(
    http: HttpClient, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """List models (``endpoint``, ``page_size``, ``page_token`` filters in config)."""
    return await http.get("/v1/models", params=merge_config(config))


async def get_model(http: HttpClient, model_id: str) -> Dict[str, Any]:
    validate_string_input(model_id, "Cannot process the model ID")
    return await http.get(f"/v1/models/{model_id}")
