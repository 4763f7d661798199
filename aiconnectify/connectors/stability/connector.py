"""
Stability connector.

Media results are written to disk under a caller-chosen folder inside the
working directory; methods return the saved file's path.
"""

from typing import Any, Dict, Optional

from ..base import BaseConnector
from .client import StabilityClient
from .methods import control, edit, generate, upscale, video


class Stability(BaseConnector):
    """Connector for the Stability AI v2beta REST API."""

    connector_name = "Stability"
    client_class = StabilityClient

    def set_client_id(self, client_id: str) -> None:
        self.client.set_client_id(client_id)

    def set_client_user_id(self, client_user_id: str) -> None:
        self.client.set_client_user_id(client_user_id)

    def set_client_version(self, client_version: str) -> None:
        self.client.set_client_version(client_version)

    # Generate
    async def generate_image_ultra(
        self,
        prompt: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await generate.generate_image_ultra(
            self.http, prompt, destination_folder, output_format, config
        )

    async def generate_image_core(
        self,
        prompt: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await generate.generate_image_core(
            self.http, prompt, destination_folder, output_format, config
        )

    async def generate_image_diffusion(
        self,
        prompt: str,
        destination_folder: str,
        strength: Optional[float] = None,
        model_id: str = "sd3-medium",
        mode: str = "text-to-image",
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await generate.generate_image_diffusion(
            self.http,
            prompt,
            destination_folder,
            strength,
            model_id,
            mode,
            output_format,
            config,
        )

    # Upscale
    async def upscale_conservative(
        self,
        prompt: str,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await upscale.upscale_conservative(
            self.http, prompt, image_path, destination_folder, output_format, config
        )

    async def upscale_creative(
        self,
        prompt: str,
        image_path: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await upscale.upscale_creative(
            self.http, prompt, image_path, output_format, config
        )

    async def get_upscale_creative(
        self, upscale_id: str, destination_folder: str
    ) -> Dict[str, str]:
        return await upscale.get_upscale_creative(self.http, upscale_id, destination_folder)

    async def upscale_fast(
        self, image_path: str, destination_folder: str, output_format: str = "png"
    ) -> Dict[str, str]:
        return await upscale.upscale_fast(
            self.http, image_path, destination_folder, output_format
        )

    # Edit
    async def erase(
        self,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await edit.erase(
            self.http, image_path, destination_folder, output_format, config
        )

    async def inpaint(
        self,
        prompt: str,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await edit.inpaint(
            self.http, prompt, image_path, destination_folder, output_format, config
        )

    async def outpaint(
        self,
        image_path: str,
        destination_folder: str,
        directions: Optional[Dict[str, int]] = None,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await edit.outpaint(
            self.http, image_path, destination_folder, directions, output_format, config
        )

    async def search_and_replace(
        self,
        prompt: str,
        search_prompt: str,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await edit.search_and_replace(
            self.http,
            prompt,
            search_prompt,
            image_path,
            destination_folder,
            output_format,
            config,
        )

    async def search_and_recolor(
        self,
        prompt: str,
        select_prompt: str,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await edit.search_and_recolor(
            self.http,
            prompt,
            select_prompt,
            image_path,
            destination_folder,
            output_format,
            config,
        )

    async def remove_background(
        self, image_path: str, destination_folder: str, output_format: str = "png"
    ) -> Dict[str, str]:
        return await edit.remove_background(
            self.http, image_path, destination_folder, output_format
        )

    # Control
    async def control_sketch(
        self,
        prompt: str,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await control.control_sketch(
            self.http, prompt, image_path, destination_folder, output_format, config
        )

    async def control_structure(
        self,
        prompt: str,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await control.control_structure(
            self.http, prompt, image_path, destination_folder, output_format, config
        )

    async def control_style(
        self,
        prompt: str,
        image_path: str,
        destination_folder: str,
        output_format: str = "png",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await control.control_style(
            self.http, prompt, image_path, destination_folder, output_format, config
        )

    # 3D and video
    async def video_stable_fast(
        self,
        image_path: str,
        destination_folder: str,
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await video.video_stable_fast(
            self.http, image_path, destination_folder, config
        )

    async def image_to_video(
        self,
        image_path: str,
        cfg_scale: float = 1.8,
        motion_bucket_id: int = 127,
        seed: int = 0,
    ) -> Dict[str, str]:
        return await video.image_to_video(
            self.http, image_path, cfg_scale, motion_bucket_id, seed
        )

    async def get_image_to_video(
        self, video_id: str, destination_folder: str
    ) -> Dict[str, str]:
        return await video.get_image_to_video(self.http, video_id, destination_folder)
