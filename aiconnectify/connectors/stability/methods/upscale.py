"""Stable Image upscaling."""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import (
    build_output_path,
    merge_config,
    validate_and_return_path,
    write_binary_file,
)
from aiconnectify.utils.validation import validate_file_token, validate_string_input

from ...http_client import HttpClient
from .media import STILL_RUNNING, fetch_result, read_image, render_image, submit_job


async def upscale_conservative(
    http: HttpClient,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Upscale up to 4K while preserving the source image's details."""
    validate_string_input(prompt, "Cannot process the prompt")
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")

    fields = {**merge_config(config), "prompt": prompt}
    return await render_image(
        http,
        "/stable-image/upscale/conservative",
        fields,
        {"image": image},
        folder,
        output_format,
    )


async def upscale_creative(
    http: HttpClient,
    prompt: str,
    image_path: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """
    Start a creative upscale.

    The result is fetched later with get_upscale_creative using the returned id.
    """
    validate_string_input(prompt, "Cannot process the prompt")
    image = read_image(http, image_path)
    validate_string_input(output_format, "Cannot process the output format")

    fields = {**merge_config(config), "prompt": prompt, "output_format": output_format}
    generation_id = await submit_job(
        http, "/stable-image/upscale/creative", fields, {"image": image}
    )
    return {"image_id": generation_id}


async def get_upscale_creative(
    http: HttpClient, upscale_id: str, destination_folder: str
) -> Dict[str, str]:
    validate_file_token(upscale_id, "Cannot process the upscale ID")
    folder = validate_and_return_path(destination_folder, "destination folder")

    response = await fetch_result(
        http, f"/stable-image/upscale/creative/result/{upscale_id}", "image/*"
    )
    if response is None:
        return dict(STILL_RUNNING)

    content_type = response.headers.get("content-type", "")
    if "jpeg" in content_type:
        extension = "jpeg"
    elif "png" in content_type:
        extension = "png"
    else:
        extension = "webp"

    output_path = build_output_path(folder, upscale_id, extension)
    write_binary_file(output_path, response.content, provider=http.provider)
    return {"image_path": output_path}


async def upscale_fast(
    http: HttpClient,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
) -> Dict[str, str]:
    """Quadruple the resolution with the fast upscaler."""
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")
    return await render_image(
        http, "/stable-image/upscale/fast", {}, {"image": image}, folder, output_format
    )
