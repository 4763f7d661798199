"""Mistral models."""

from typing import Any, Dict, List

from aiconnectify.utils.validation import validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap


async def get_models(http: HttpClient) -> List[Dict[str, Any]]:
    response = await http.get("/models")
    return unwrap(response, "data", http.provider)


async def get_model(http: HttpClient, model_id: str) -> Dict[str, Any]:
    validate_string_input(model_id, "Cannot process the model ID")
    return await http.get(f"/models/{model_id}")
