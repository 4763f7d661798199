"""
Shared request/response handling for Stability media endpoints.

Every endpoint takes a multipart form. Synchronous endpoints answer 200 with
the binary result, asynchronous ones answer with a generation id that is
polled until it stops answering 202.
"""

from typing import Any, Dict, Optional, Tuple

import httpx

from aiconnectify.utils.helpers import (
    build_output_path,
    compact_form,
    generate_random_id,
    merge_config,
    read_upload,
    write_binary_file,
)
from aiconnectify.utils.validation import validate_string_input

from ...exceptions import AIConnectifyError
from ...http_client import HttpClient
from ...shaping import unwrap

IMAGE_PATH_MESSAGE = "Cannot process the image path"
OUTPUT_FORMAT_MESSAGE = "Cannot process the output format"
STILL_RUNNING = {"status": "Generation is still running, try again in 10 seconds"}

# Stability only accepts multipart bodies; an empty part forces one when no file is sent.
NO_FILES = {"none": b""}


def read_image(http: HttpClient, image_path: Any) -> Tuple[str, bytes]:
    return read_upload(image_path, IMAGE_PATH_MESSAGE, provider=http.provider)


def split_mask(http: HttpClient, config: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Separate an optional ``mask`` file path from the plain form fields."""
    fields = merge_config(config)
    files: Dict[str, Any] = {}
    if "mask" in fields:
        files["mask"] = read_upload(
            fields.pop("mask"), "Cannot process the image mask path", provider=http.provider
        )
    return fields, files


def unexpected_status(http: HttpClient, response: httpx.Response) -> AIConnectifyError:
    return AIConnectifyError(
        f"{http.provider.upper()} ERROR => {response.status_code} - Unexpected response status",
        provider=http.provider,
        status_code=response.status_code,
    )


async def render_image(
    http: HttpClient,
    endpoint: str,
    fields: Dict[str, Any],
    files: Dict[str, Any],
    folder: str,
    output_format: str,
) -> Dict[str, str]:
    """
    Post a synchronous generation and save the returned image.

    Args:
        http: Stability HTTP client
        endpoint: Stability endpoint path
        fields: Form fields (``output_format`` is added here)
        files: Uploaded files keyed by form field
        folder: Validated destination folder
        output_format: Image extension requested from the API

    Returns:
        ``{"image_path": "./<folder>/<random id>.<format>"}``
    """
    validate_string_input(output_format, OUTPUT_FORMAT_MESSAGE)
    data = compact_form({**fields, "output_format": output_format})
    response = await http.post_form(
        endpoint, data=data, files=files or NO_FILES, headers={"Accept": "image/*"}
    )
    if response.status_code != 200:
        raise unexpected_status(http, response)

    output_path = build_output_path(folder, generate_random_id(), output_format)
    write_binary_file(output_path, response.content, provider=http.provider)
    return {"image_path": output_path}


async def submit_job(
    http: HttpClient, endpoint: str, fields: Dict[str, Any], files: Dict[str, Any]
) -> str:
    """Post an asynchronous generation and return its id."""
    response = await http.post_form(
        endpoint,
        data=compact_form(fields),
        files=files or NO_FILES,
        headers={"Accept": "application/json"},
    )
    return unwrap(http.parse_body(response), "id", http.provider)


async def fetch_result(
    http: HttpClient, endpoint: str, accept: str
) -> Optional[httpx.Response]:
    """
    Poll an asynchronous generation once.

    Returns:
        The finished response, or None while the generation is still running
    """
    response = await http.get_full(endpoint, headers={"Accept": accept})
    if response.status_code == 202:
        return None
    if response.status_code != 200:
        raise unexpected_status(http, response)
    return response
