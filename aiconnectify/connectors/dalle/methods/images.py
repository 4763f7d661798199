"""
DALL-E image generation, edits and variations.

Edits and variations upload local PNG files as multipart form data.
"""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import compact_form, merge_config, read_upload
from aiconnectify.utils.validation import validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap


async def create_image(
    http: HttpClient,
    prompt: str,
    model_id: str = "dall-e-2",
    config: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Generate images from a prompt; returns the ``data`` list of URLs or b64 payloads."""
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(model_id, "Cannot process the model ID")

    body = {**merge_config(config), "prompt": prompt, "model": model_id}
    response = await http.post("/images/generations", body)
    return unwrap(response, "data", http.provider)


async def create_image_edit(
    http: HttpClient,
    image_path: str,
    prompt: str,
    model_id: str = "dall-e-2",
    config: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """
    Edit an image from a prompt.

    A ``mask`` entry in config is read as a local file path and uploaded
    alongside the image.
    """
    image = read_upload(image_path, "Cannot process the image path", provider=http.provider)
    validate_string_input(prompt, "Cannot process the prompt")
    validate_string_input(model_id, "Cannot process the model ID")

    fields = merge_config(config)
    files = {"image": image}
    if "mask" in fields:
        files["mask"] = read_upload(
            fields.pop("mask"), "Cannot process the image mask path", provider=http.provider
        )

    data = compact_form({**fields, "prompt": prompt, "model": model_id})
    response = await http.post_form("/images/edits", data=data, files=files)
    return unwrap(http.parse_body(response), "data", http.provider)


async def create_image_variation(
    http: HttpClient,
    image_path: str,
    model_id: str = "dall-e-2",
    config: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    image = read_upload(image_path, "Cannot process the image path", provider=http.provider)
    validate_string_input(model_id, "Cannot process the model ID")

    data = compact_form({**merge_config(config), "model": model_id})
    response = await http.post_form(
        "/images/variations", data=data, files={"image": image}
    )
    return unwrap(http.parse_body(response), "data", http.provider)
