"""Stable Image control: sketch, structure and style guided generation."""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import merge_config, validate_and_return_path
from aiconnectify.utils.validation import validate_string_input

from ...http_client import HttpClient
from .media import read_image, render_image


async def _controlled(
    http: HttpClient,
    endpoint: str,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str,
    config: Optional[Dict[str, Any]],
) -> Dict[str, str]:
    validate_string_input(prompt, "Cannot process the prompt")
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")

    fields = {**merge_config(config), "prompt": prompt}
    return await render_image(http, endpoint, fields, {"image": image}, folder, output_format)


async def control_sketch(
    http: HttpClient,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Turn a rough sketch into a refined image (``control_strength`` in config)."""
    return await _controlled(
        http,
        "/stable-image/control/sketch",
        prompt,
        image_path,
        destination_folder,
        output_format,
        config,
    )


async def control_structure(
    http: HttpClient,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Generate an image that keeps the input image's structure."""
    return await _controlled(
        http,
        "/stable-image/control/structure",
        prompt,
        image_path,
        destination_folder,
        output_format,
        config,
    )


async def control_style(
    http: HttpClient,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Generate content in the style of the input image (``fidelity`` in config)."""
    return await _controlled(
        http,
        "/stable-image/control/style",
        prompt,
        image_path,
        destination_folder,
        output_format,
        config,
    )
