"""
Stable Fast 3D and Stable Video Diffusion.

image_to_video only submits the job; get_image_to_video polls it once and
saves the MP4 when it is ready.
"""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import (
    build_output_path,
    compact_form,
    generate_random_id,
    merge_config,
    validate_and_return_path,
    write_binary_file,
)
from aiconnectify.utils.validation import (
    validate_file_token,
    validate_number_input,
)

from ...http_client import HttpClient
from .media import (
    STILL_RUNNING,
    fetch_result,
    read_image,
    submit_job,
    unexpected_status,
)


async def video_stable_fast(
    http: HttpClient,
    image_path: str,
    destination_folder: str,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """Generate a 3D asset (binary glTF) from a single image."""
    image = read_image(http, image_path)
    folder = validate_and_return_path(destination_folder, "destination folder")

    response = await http.post_form(
        "/3d/stable-fast-3d",
        data=compact_form(merge_config(config)),
        files={"image": image},
    )
    if response.status_code != 200:
        raise unexpected_status(http, response)

    output_path = build_output_path(folder, generate_random_id(), "glb")
    write_binary_file(output_path, response.content, provider=http.provider)
    return {"video_path": output_path}


async def image_to_video(
    http: HttpClient,
    image_path: str,
    cfg_scale: float = 1.8,
    motion_bucket_id: int = 127,
    seed: int = 0,
) -> Dict[str, str]:
    image = read_image(http, image_path)
    validate_number_input(cfg_scale, "Cannot process the cfg scale")
    validate_number_input(motion_bucket_id, "Cannot process the motion bucket ID")
    validate_number_input(seed, "Cannot process the seed")

    fields = {"cfg_scale": cfg_scale, "motion_bucket_id": motion_bucket_id, "seed": seed}
    generation_id = await submit_job(http, "/image-to-video", fields, {"image": image})
    return {"video_generated_id": generation_id}


async def get_image_to_video(
    http: HttpClient, video_id: str, destination_folder: str
) -> Dict[str, str]:
    validate_file_token(video_id, "Cannot process the video ID")
    folder = validate_and_return_path(destination_folder, "destination folder")

    response = await fetch_result(http, f"/image-to-video/result/{video_id}", "video/*")
    if response is None:
        return dict(STILL_RUNNING)

    output_path = build_output_path(folder, video_id, "mp4")
    write_binary_file(output_path, response.content, provider=http.provider)
    return {"video_path": output_path}
