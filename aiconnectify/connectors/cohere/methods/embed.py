"""Cohere embeddings and asynchronous embed jobs."""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_array_input, validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap, without

EMBED_JOB_ID_MESSAGE = "Cannot process the embed job ID"


async def embed(
    http: HttpClient,
    input_type: str,
    embedding_types: List[str],
    model_id: str = "embed-english-v2.0",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Embed texts or images.

    The content itself (``texts``, ``images`` or ``inputs``) is passed in config.
    """
    validate_string_input(input_type, "Cannot process the input type")
    validate_array_input(embedding_types, "Cannot process the embedding types")
    validate_string_input(model_id, "Cannot process the model ID")

    body = {
        **merge_config(config),
        "input_type": input_type,
        "embedding_types": list(embedding_types),
        "model": model_id,
    }
    response = await http.post("/v2/embed", body)
    return without(response, "meta")


async def get_embed_jobs(http: HttpClient) -> List[Dict[str, Any]]:
    response = await http.get("/v1/embed-jobs")
    return unwrap(response, "embed_jobs", http.provider)


async def get_embed_job(http: HttpClient, embed_job_id: str) -> Dict[str, Any]:
    validate_string_input(embed_job_id, EMBED_JOB_ID_MESSAGE)
    response = await http.get(f"/v1/embed-jobs/{embed_job_id}")
    return without(response, "meta")


async def create_embed_job(
    http: HttpClient,
    dataset_id: str,
    model_id: str = "embed-english-light-v3.0",
    input_type: str = "classification",
    config: Optional[Dict[str, Any]] = None,
) -> str:
    """Launch an embed job over an uploaded dataset and return its ``job_id``."""
    validate_string_input(dataset_id, "Cannot process the dataset ID")
    validate_string_input(model_id, "Cannot process the model ID")
    validate_string_input(input_type, "Cannot process the input type")

    body = {
        **merge_config(config),
        "model": model_id,
        "dataset_id": dataset_id,
        "input_type": input_type,
    }
    response = await http.post("/v1/embed-jobs", body)
    return unwrap(response, "job_id", http.provider)


async def cancel_embed_job(http: HttpClient, embed_job_id: str) -> Dict[str, str]:
    validate_string_input(embed_job_id, EMBED_JOB_ID_MESSAGE)
    await http.post(f"/v1/embed-jobs/{embed_job_id}/cancel")
    return {"embed_job_id": embed_job_id, "status": "canceled"}
