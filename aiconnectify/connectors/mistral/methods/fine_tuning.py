"""
Mistral fine-tuning jobs and fine-tuned models.

Jobs are created, optionally validated by the vendor, then started
explicitly with start_fine_tuning_job.
"""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_mapping_input, validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap

JOB_ID_MESSAGE = "Cannot process the fine tuning job ID"
MODEL_ID_MESSAGE = "Cannot process the fine tuning model ID"


async def get_fine_tuning_jobs(
    http: HttpClient, config: Optional[Dict[str, Any]] = None
) -> List[Dict[str, Any]]:
    response = await http.get("/fine_tuning/jobs", params=merge_config(config))
    return unwrap(response, "data", http.provider)


async def get_fine_tuning_job(http: HttpClient, job_id: str) -> Dict[str, Any]:
    validate_string_input(job_id, JOB_ID_MESSAGE)
    return await http.get(f"/fine_tuning/jobs/{job_id}")


async def create_fine_tuning_job(
    http: HttpClient,
    hyperparameters: Dict[str, Any],
    model_id: str = "open-mistral-7b",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create a fine-tuning job.

    Args:
        http: Mistral HTTP client
        hyperparameters: Training hyperparameters (``training_steps``, ``learning_rate``)
        model_id: Base model to fine-tune
        config: Extra job fields (training_files, suffix, auto_start, ...)
    """
    validate_mapping_input(hyperparameters, "Cannot process the hyperparameters")
    validate_string_input(model_id, "Cannot process the model ID")

    body = {
        **merge_config(config),
        "hyperparameters": hyperparameters,
        "model": model_id,
    }
    return await http.post("/fine_tuning/jobs", body)


async def start_fine_tuning_job(http: HttpClient, job_id: str) -> Dict[str, Any]:
    validate_string_input(job_id, JOB_ID_MESSAGE)
    return await http.post(f"/fine_tuning/jobs/{job_id}/start")


async def cancel_fine_tuning_job(http: HttpClient, job_id: str) -> Dict[str, Any]:
    validate_string_input(job_id, JOB_ID_MESSAGE)
    return await http.post(f"/fine_tuning/jobs/{job_id}/cancel")


async def update_fine_tuning_model(
    http: HttpClient, model_id: str, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Rename or re-describe a fine-tuned model (``name``/``description`` in config)."""
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    return await http.patch(f"/fine_tuning/models/{model_id}", merge_config(config))


async def archive_fine_tuning_model(http: HttpClient, model_id: str) -> Dict[str, Any]:
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    return await http.post(f"/fine_tuning/models/{model_id}/archive")


async def unarchive_fine_tuning_model(
    http: HttpClient, model_id: str
) -> Dict[str, Any]:
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    return await http.delete(f"/fine_tuning/models/{model_id}/archive")


async def delete_fine_tuning_model(http: HttpClient, model_id: str) -> Dict[str, Any]:
    validate_string_input(model_id, MODEL_ID_MESSAGE)
    return await http.delete(f"/models/{model_id}")
