"""
Stable Image editing.

Each operation uploads the source image, saves the edited result under the
destination folder and returns its path.
"""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import merge_config, validate_and_return_path
from aiconnectify.utils.validation import validate_number_input, validate_string_input

from ...exceptions import ValidationError
from ...http_client import HttpClient
from .media import read_image, render_image, split_mask

PROMPT_MESSAGE = "Cannot process the prompt"
OUTPAINT_DIRECTIONS = ("left", "right", "up", "down")


async def erase(
    http: HttpClient,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Remove unwanted objects; pass a ``mask`` path in config to mark them."""
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")
    fields, files = split_mask(http, config)
    files["image"] = image
    return await render_image(
        http, "/stable-image/edit/erase", fields, files, folder, output_format
    )


async def inpaint(
    http: HttpClient,
    prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    validate_string_input(prompt, PROMPT_MESSAGE)
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")
    fields, files = split_mask(http, config)
    files["image"] = image
    fields["prompt"] = prompt
    return await render_image(
        http, "/stable-image/edit/inpaint", fields, files, folder, output_format
    )


async def outpaint(
    http: HttpClient,
    image_path: str,
    destination_folder: str,
    directions: Optional[Dict[str, int]] = None,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """
    Extend an image in one or more directions.

    Args:
        http: Stability HTTP client
        image_path: Source image
        destination_folder: Folder the result is written to
        directions: Pixels to add per side (``left``, ``right``, ``up``, ``down``)
        output_format: Image extension
        config: Extra form fields (prompt, creativity, seed, ...)
    """
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")

    sides = {side: 0 for side in OUTPAINT_DIRECTIONS}
    sides.update(directions or {})
    for side in OUTPAINT_DIRECTIONS:
        validate_number_input(sides[side], f"Cannot process the {side} direction")
    if not any(sides[side] > 0 for side in OUTPAINT_DIRECTIONS):
        raise ValidationError("At least one outpaint direction must be greater than zero")

    fields = {**merge_config(config), **{side: sides[side] for side in OUTPAINT_DIRECTIONS}}
    return await render_image(
        http, "/stable-image/edit/outpaint", fields, {"image": image}, folder, output_format
    )


async def search_and_replace(
    http: HttpClient,
    prompt: str,
    search_prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    validate_string_input(prompt, PROMPT_MESSAGE)
    validate_string_input(search_prompt, "Cannot process the search prompt")
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")

    fields = {**merge_config(config), "prompt": prompt, "search_prompt": search_prompt}
    return await render_image(
        http,
        "/stable-image/edit/search-and-replace",
        fields,
        {"image": image},
        folder,
        output_format,
    )


async def search_and_recolor(
    http: HttpClient,
    prompt: str,
    select_prompt: str,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    validate_string_input(prompt, PROMPT_MESSAGE)
    validate_string_input(select_prompt, "Cannot process the select prompt")
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")

    fields = {**merge_config(config), "prompt": prompt, "select_prompt": select_prompt}
    return await render_image(
        http,
        "/stable-image/edit/search-and-recolor",
        fields,
        {"image": image},
        folder,
        output_format,
    )


async def remove_background(
    http: HttpClient,
    image_path: str,
    destination_folder: str,
    output_format: str = "png",
) -> Dict[str, str]:
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")
    return await render_image(
        http,
        "/stable-image/edit/remove-background",
        {},
        {"image": image},
        folder,
        output_format,
    )
