"""
ChatGPT connector.

Public entry point for the OpenAI text, audio and fine-tuning APIs.
"""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import ChatGPTClient
from .methods import audio, chat, fine_tuning, models


class ChatGPT(BaseConnector):
    """
    Connector for the OpenAI platform.

    Example:
        async with ChatGPT(api_key) as gpt:
            reply = await gpt.create_chat_completion(
                [{"role": "user", "content": "Hello"}]
            )
    """

    connector_name = "ChatGPT"
    client_class = ChatGPTClient

    def set_organization_id(self, organization_id: str) -> None:
        self.client.set_organization_id(organization_id)

    def set_project_id(self, project_id: str) -> None:
        self.client.set_project_id(project_id)

    # Models
    async def get_models(self) -> List[Dict[str, Any]]:
        return await models.get_models(self.http)

    async def get_model(self, model_id: str) -> Dict[str, Any]:
        return await models.get_model(self.http, model_id)

    async def delete_fine_tuned_model(self, model_id: str) -> Dict[str, Any]:
        return await models.delete_fine_tuned_model(self.http, model_id)

    # Chat, embeddings, moderation
    async def create_chat_completion(
        self,
        messages: List[Dict[str, Any]],
        model_id: str = "gpt-4o-mini",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await chat.create_chat_completion(self.http, messages, model_id, config)

    async def create_embeddings(
        self,
        input: Any,
        model_id: str = "text-embedding-ada-002",
        config: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        return await chat.create_embeddings(self.http, input, model_id, config)

    async def create_moderation(
        self, input: Any, model_id: str = "omni-moderation-latest"
    ) -> Dict[str, Any]:
        return await chat.create_moderation(self.http, input, model_id)

    # Audio
    async def create_speech(
        self,
        input: str,
        destination_folder: str,
        model_id: str = "tts-1",
        voice: str = "alloy",
        response_format: str = "mp3",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await audio.create_speech(
            self.http,
            input,
            destination_folder,
            model_id,
            voice,
            response_format,
            config,
        )

    async def create_transcription(
        self,
        file_path: str,
        model_id: str = "whisper-1",
        config: Optional[Dict[str, Any]] = None,
    ) -> str:
        return await audio.create_transcription(self.http, file_path, model_id, config)

    async def create_translation(
        self,
        file_path: str,
        model_id: str = "whisper-1",
        config: Optional[Dict[str, Any]] = None,
    ) -> str:
        return await audio.create_translation(self.http, file_path, model_id, config)

    # Fine-tuning
    async def get_fine_tuning_jobs(
        self, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await fine_tuning.get_fine_tuning_jobs(self.http, config)

    async def get_fine_tuning_job(self, job_id: str) -> Dict[str, Any]:
        return await fine_tuning.get_fine_tuning_job(self.http, job_id)

    async def get_fine_tuning_job_events(
        self, job_id: str, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await fine_tuning.get_fine_tuning_job_events(self.http, job_id, config)

    async def get_fine_tuning_job_checkpoints(
        self, job_id: str, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await fine_tuning.get_fine_tuning_job_checkpoints(
            self.http, job_id, config
        )

    async def create_fine_tuning_job(
        self,
        training_file_id: str,
        model_id: str = "gpt-4o-mini",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await fine_tuning.create_fine_tuning_job(
            self.http, training_file_id, model_id, config
        )

    async def cancel_fine_tuning_job(self, job_id: str) -> Dict[str, Any]:
        return await fine_tuning.cancel_fine_tuning_job(self.http, job_id)
