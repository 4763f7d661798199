"""DALLE connector."""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from ..chatgpt.methods import models
from .client import DALLEClient
from .methods import images


class DALLE(BaseConnector):
    """Connector for the OpenAI image endpoints."""

    connector_name = "DALLE"
    client_class = DALLEClient

    def set_organization_id(self, organization_id: str) -> None:
        self.client.set_organization_id(organization_id)

    def set_project_id(self, project_id: str) -> None:
        self.client.set_project_id(project_id)

    async def get_models(self) -> List[Dict[str, Any]]:
        return await models.get_models(self.http)

    async def get_model(self, model_id: str) -> Dict[str, Any]:
        return await models.get_model(self.http, model_id)

    async def create_image(
        self,
        prompt: str,
        model_id: str = "dall-e-2",
        config: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        return await images.create_image(self.http, prompt, model_id, config)

    async def create_image_edit(
        self,
        image_path: str,
        prompt: str,
        model_id: str = "dall-e-2",
        config: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        return await images.create_image_edit(
            self.http, image_path, prompt, model_id, config
        )

    async def create_image_variation(
        self,
        image_path: str,
        model_id: str = "dall-e-2",
        config: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        return await images.create_image_variation(self.http, image_path, model_id, config)
