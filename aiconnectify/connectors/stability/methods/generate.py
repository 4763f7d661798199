"""Stable Image generation: Ultra, Core and Stable Diffusion 3."""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import merge_config, validate_and_return_path
from aiconnectify.utils.validation import validate_number_input, validate_string_input

from ...http_client import HttpClient
from .media import read_image, render_image

PROMPT_MESSAGE = "Cannot process the prompt"


async def _text_to_image(
    http: HttpClient,
    endpoint: str,
    prompt: str,
    destination_folder: str,
    output_format: str,
    config: Optional[Dict[str, Any]],
) -> Dict[str, str]:
    validate_string_input(prompt, PROMPT_MESSAGE)
    folder = validate_and_return_path(destination_folder, "destination folder")
    fields = {**merge_config(config), "prompt": prompt}
    return await render_image(http, endpoint, fields, {}, folder, output_format)


async def generate_image_ultra(
    http: HttpClient,
    prompt: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Generate an image with Stable Image Ultra."""
    return await _text_to_image(
        http, "/stable-image/generate/ultra", prompt, destination_folder, output_format, config
    )


async def generate_image_core(
    http: HttpClient,
    prompt: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Generate an image with Stable Image Core."""
    return await _text_to_image(
        http, "/stable-image/generate/core", prompt, destination_folder, output_format, config
    )


async def generate_image_diffusion(
    http: HttpClient,
    prompt: str,
    destination_folder: str,
    strength: Optional[float] = None,
    model_id: str = "sd3-medium",
    mode: str = "text-to-image",
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """
    Generate an image with Stable Diffusion 3.

    In ``image-to-image`` mode the source image path goes in config under
    ``image`` and ``strength`` controls how much of it is kept.
    """
    validate_string_input(prompt, PROMPT_MESSAGE)
    validate_string_input(model_id, "Cannot process the model ID")
    validate_string_input(mode, "Cannot process the mode")
    folder = validate_and_return_path(destination_folder, "destination folder")

    fields = merge_config(config)
    files = {}
    if mode == "image-to-image":
        validate_number_input(strength, "Cannot process the strength value")
        files["image"] = read_image(http, fields.pop("image", None))
    elif strength is not None:
        validate_number_input(strength, "Cannot process the strength value")

    fields.update({"prompt": prompt, "model": model_id, "mode": mode, "strength": strength})
    return await render_image(
        http, "/stable-image/generate/sd3", fields, files, folder, output_format
    )
