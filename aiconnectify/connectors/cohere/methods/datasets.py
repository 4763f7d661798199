"""Cohere datasets."""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import compact_form, merge_config, read_upload
from aiconnectify.utils.validation import validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap

DATASET_ID_MESSAGE = "Cannot process the dataset ID"


async def get_datasets(
    http: HttpClient, config: Optional[Dict[str, Any]] = None
) -> List[Dict[str, Any]]:
    response = await http.get("/v1/datasets", params=merge_config(config))
    return unwrap(response, "datasets", http.provider)


async def get_dataset(http: HttpClient, dataset_id: str) -> Dict[str, Any]:
    validate_string_input(dataset_id, DATASET_ID_MESSAGE)
    response = await http.get(f"/v1/datasets/{dataset_id}")
    return unwrap(response, "dataset", http.provider)


async def get_dataset_usage(http: HttpClient) -> Dict[str, Any]:
    return await http.get("/v1/datasets/usage")


async def create_dataset(
    http: HttpClient,
    name: str,
    file_path: str,
    dataset_type: str = "embed-input",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """
    Upload a local file as a new dataset.

    Args:
        http: Cohere HTTP client
        name: Dataset name
        file_path: Local CSV/JSONL file uploaded as the ``data`` part
        dataset_type: Cohere dataset type
        config: Extra form fields (keep_fields, optional_fields, ...)

    Returns:
        ``{"dataset_id": ...}``
    """
    validate_string_input(name, "Cannot process the name")
    file_name, content = read_upload(
        file_path, "Cannot process the file path", provider=http.provider
    )
    validate_string_input(dataset_type, "Cannot process the type")

    data = compact_form({**merge_config(config), "name": name, "type": dataset_type})
    response = await http.post_form(
        "/v1/datasets", data=data, files={"data": (file_name, content)}
    )
    return {"dataset_id": unwrap(http.parse_body(response), "id", http.provider)}


async def delete_dataset(http: HttpClient, dataset_id: str) -> Dict[str, str]:
    validate_string_input(dataset_id, DATASET_ID_MESSAGE)
    await http.delete(f"/v1/datasets/{dataset_id}")
    return {"dataset_id": dataset_id, "status": "deleted"}
