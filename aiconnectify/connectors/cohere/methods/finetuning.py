"""Cohere fine-tuned models."""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_mapping_input, validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap

BASE_PATH = "/v1/finetuning/finetuned-models"
MODEL_ID_MESSAGE = "Cannot process the fine-tuned model ID"
MODEL_NAME_MESSAGE = "Cannot process the fine-tuned model name"
SETTINGS_MESSAGE = "Cannot process the fine-tuned model settings"


async def get_fine_tuned_models(
    http: HttpClient, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    return await http.get(BASE_PATH, params=merge_config(config))


async def get_fine_tuned_model(http: HttpClient, model_id: str) -> Dict[str, Any]:
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    response = await http.get(f"{BASE_PATH}/{model_id}")
    return unwrap(response, "finetuned_model", http.provider)


async def get_fine_tuned_model_chronology(
    http: HttpClient, model_id: str, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """List status-change events of a fine-tuned model."""
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    return await http.get(f"{BASE_PATH}/{model_id}/events", params=merge_config(config))


async def get_fine_tuned_model_metrics(
    http: HttpClient, model_id: str, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    return await http.get(
        f"{BASE_PATH}/{model_id}/training-step-metrics", params=merge_config(config)
    )


async def create_fine_tuned_model(
    http: HttpClient,
    name: str,
    settings: Dict[str, Any],
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create and start training a fine-tuned model.

    Args:
        http: Cohere HTTP client
        name: Model name
        settings: Training settings (``base_model``, ``dataset_id``, hyperparameters)
        config: Extra top-level fields
    """
    validate_string_input(name, MODEL_NAME_MESSAGE)
    validate_mapping_input(settings, SETTINGS_MESSAGE)

    body = {**merge_config(config), "name": name, "settings": settings}
    response = await http.post(BASE_PATH, body)
    return unwrap(response, "finetuned_model", http.provider)


async def update_fine_tuned_model(
    http: HttpClient,
    model_id: str,
    name: str,
    settings: Dict[str, Any],
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    validate_string_input(name, MODEL_NAME_MESSAGE)
    validate_mapping_input(settings, SETTINGS_MESSAGE)

    body = {**merge_config(config), "name": name, "settings": settings}
    response = await http.patch(f"{BASE_PATH}/{model_id}", body)
    return unwrap(response, "finetuned_model", http.provider)


async def delete_fine_tuned_model(http: HttpClient, model_id: str) -> Dict[str, str]:
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    await http.delete(f"{BASE_PATH}/{model_id}")
    return {"finetuned_model_id": model_id, "status": "deleted"}
