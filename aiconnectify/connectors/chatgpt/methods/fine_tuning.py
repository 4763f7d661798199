"""OpenAI fine-tuning jobs."""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_key_string, validate_string_input

from ...http_client import HttpClient

JOB_ID_MESSAGE = "Cannot process the fine-tuning job ID"


async def get_fine_tuning_jobs(
    http: HttpClient, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """List the organization's fine-tuning jobs (``after``/``limit`` paging in config)."""
    return await http.get("/fine_tuning/jobs", params=merge_config(config))


async def get_fine_tuning_job(http: HttpClient, job_id: str) -> Dict[str, Any]:
    validate_key_string(job_id, JOB_ID_MESSAGE)
    return await http.get(f"/fine_tuning/jobs/{job_id}")


async def get_fine_tuning_job_events(
    http: HttpClient, job_id: str, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    validate_key_string(job_id, JOB_ID_MESSAGE)
    return await http.get(
        f"/fine_tuning/jobs/{job_id}/events", params=merge_config(config)
    )


async def get_fine_tuning_job_checkpoints(
    http: HttpClient, job_id: str, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    validate_key_string(job_id, JOB_ID_MESSAGE)
    return await http.get(
        f"/fine_tuning/jobs/{job_id}/checkpoints", params=merge_config(config)
    )


async def create_fine_tuning_job(
    http: HttpClient,
    training_file_id: str,
    model_id: str = "gpt-4o-mini",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Start fine-tuning a model on an uploaded training file.

    Args:
        http: OpenAI HTTP client
        training_file_id: ID of an uploaded JSONL file
        model_id: Base model to fine-tune
        config: Extra job options (hyperparameters, suffix, validation_file, ...)
    """
    validate_string_input(training_file_id, "Cannot process the training file ID")
    validate_string_input(model_id, "Cannot process the model ID")

    body = {
        **merge_config(config),
        "training_file": training_file_id,
        "model": model_id,
    }
    return await http.post("/fine_tuning/jobs", body)


async def cancel_fine_tuning_job(http: HttpClient, job_id: str) -> Dict[str, Any]:
    validate_key_string(job_id, JOB_ID_MESSAGE)
    return await http.post(f"/fine_tuning/jobs/{job_id}/cancel")
