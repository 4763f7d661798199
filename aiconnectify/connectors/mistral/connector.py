"""Mistral connector."""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import MistralClient
from .methods import completions, fine_tuning, models


class Mistral(BaseConnector):
    """Connector for La Plateforme (Mistral AI)."""

    connector_name = "Mistral"
    client_class = MistralClient

    async def get_models(self) -> List[Dict[str, Any]]:
        return await models.get_models(self.http)

    async def get_model(self, model_id: str) -> Dict[str, Any]:
        return await models.get_model(self.http, model_id)

    async def create_chat_completion(
        self,
        messages: List[Dict[str, Any]],
        model_id: str = "mistral-small-latest",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await completions.create_chat_completion(
            self.http, messages, model_id, config
        )

    async def fim_completion(
        self,
        prompt: str,
        model_id: str = "codestral-2405",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await completions.fim_completion(self.http, prompt, model_id, config)

    async def agents_completion(
        self,
        messages: List[Dict[str, Any]],
        agent_id: str,
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await completions.agents_completion(self.http, messages, agent_id, config)

    async def embeddings(
        self,
        input: Any,
        model_id: str = "mistral-embed",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await completions.embeddings(self.http, input, model_id, config)

    # Fine-tuning
    async def get_fine_tuning_jobs(
        self, config: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        return await fine_tuning.get_fine_tuning_jobs(self.http, config)

    async def get_fine_tuning_job(self, job_id: str) -> Dict[str, Any]:
        return await fine_tuning.get_fine_tuning_job(self.http, job_id)

    async def create_fine_tuning_job(
        self,
        hyperparameters: Dict[str, Any],
        model_id: str = "open-mistral-7b",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await fine_tuning.create_fine_tuning_job(
            self.http, hyperparameters, model_id, config
        )

    async def start_fine_tuning_job(self, job_id: str) -> Dict[str, Any]:
        return await fine_tuning.start_fine_tuning_job(self.http, job_id)

    async def cancel_fine_tuning_job(self, job_id: str) -> Dict[str, Any]:
        return await fine_tuning.cancel_fine_tuning_job(self.http, job_id)

    async def update_fine_tuning_model(
        self, model_id: str, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await fine_tuning.update_fine_tuning_model(self.http, model_id, config)

    async def archive_fine_tuning_model(self, model_id: str) -> Dict[str, Any]:
        return await fine_tuning.archive_fine_tuning_model(self.http, model_id)

    async def unarchive_fine_tuning_model(self, model_id: str) -> Dict[str, Any]:
        return await fine_tuning.unarchive_fine_tuning_model(self.http, model_id)

    async def delete_fine_tuning_model(self, model_id: str) -> Dict[str, Any]:
        return await fine_tuning.delete_fine_tuning_model(self.http, model_id)
