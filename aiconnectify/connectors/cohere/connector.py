"""
Cohere connector.

Wraps chat, embeddings, rerank, classification, datasets, connectors and
fine-tuning under one object.
"""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import CohereClient
from .methods import chat as chat_api
from .methods import data_connectors, datasets, finetuning, models
from .methods import embed as embed_api


class Cohere(BaseConnector):
    """Connector for the Cohere platform (v1 and v2 endpoints)."""

    connector_name = "Cohere"
    client_class = CohereClient

    def set_client_name(self, client_name: str) -> None:
        self.client.set_client_name(client_name)

    async def check_api_key(self) -> Dict[str, Any]:
        return await chat_api.check_api_key(self.http)

    # Text generation and ranking
    async def chat(
        self,
        messages: List[Dict[str, Any]],
        model_id: str = "command-r-plus-08-2024",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await chat_api.chat(self.http, messages, model_id, config)

    async def rerank(
        self,
        query: str,
        documents: List[Any],
        model_id: str = "rerank-english-v3.0",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await chat_api.rerank(self.http, query, documents, model_id, config)

    async def classify(
        self,
        inputs: List[str],
        examples: Optional[List[Dict[str, str]]] = None,
        model_id: str = "embed-english-light-v2.0",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await chat_api.classify(self.http, inputs, examples, model_id, config)

    async def tokenize(self, text: str, model_id: str = "command") -> Dict[str, Any]:
        return await chat_api.tokenize(self.http, text, model_id)

    async def detokenize(
        self, tokens: List[int], model_id: str = "command"
    ) -> Dict[str, Any]:
        return await chat_api.detokenize(self.http, tokens, model_id)

    # Embeddings
    async def embed(
        self,
        input_type: str,
        embedding_types: List[str],
        model_id: str = "embed-english-v2.0",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await embed_api.embed(
            self.http, input_type, embedding_types, model_id, config
        )

    async def get_embed_jobs(self) -> List[Dict[str, Any]]:
        return await embed_api.get_embed_jobs(self.http)

    async def get_embed_job(self, embed_job_id: str) -> Dict[str, Any]:
        return await embed_api.get_embed_job(self.http, embed_job_id)

    async def create_embed_job(
        self,
        dataset_id: str,
        model_id: str = "embed-english-light-v3.0",
        input_type: str = "classification",
        config: Optional[Dict[str, Any]] = None,
    ) -> str:
        return await embed_api.create_embed_job(
            self.http, dataset_id, model_id, input_type, config
        )

    async def cancel_embed_job(self, embed_job_id: str) -> Dict[str, str]:
        return await embed_api.cancel_embed_job(self.http, embed_job_id)

    # Datasets
    async def get_datasets(
        self, config: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        return await datasets.get_datasets(self.http, config)

    async def get_dataset(self, dataset_id: str) -> Dict[str, Any]:
        return await datasets.get_dataset(self.http, dataset_id)

    async def get_dataset_usage(self) -> Dict[str, Any]:
        return await datasets.get_dataset_usage(self.http)

    async def create_dataset(
        self,
        name: str,
        file_path: str,
        dataset_type: str = "embed-input",
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, str]:
        return await datasets.create_dataset(
            self.http, name, file_path, dataset_type, config
        )

    async def delete_dataset(self, dataset_id: str) -> Dict[str, str]:
        return await datasets.delete_dataset(self.http, dataset_id)

    # Models
    async def get_models(
        self, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await models.get_models(self.http, config)

    async def get_model(self, model_id: str) -> Dict[str, Any]:
        return await models.get_model(self.http, model_id)

    # Connectors
    async def get_connectors(
        self, config: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        return await data_connectors.get_connectors(self.http, config)

    async def get_connector(self, connector_id: str) -> Dict[str, Any]:
        return await data_connectors.get_connector(self.http, connector_id)

    async def create_connector(
        self, name: str, url: str, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await data_connectors.create_connector(self.http, name, url, config)

    async def update_connector(
        self, connector_id: str, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await data_connectors.update_connector(self.http, connector_id, config)

    async def delete_connector(self, connector_id: str) -> Dict[str, str]:
        return await data_connectors.delete_connector(self.http, connector_id)

    async def authorize_connector(
        self, connector_id: str, after_token_redirect: Optional[str] = None
    ) -> Dict[str, Any]:
        return await data_connectors.authorize_connector(
            self.http, connector_id, after_token_redirect
        )

    # Fine-tuning
    async def get_fine_tuned_models(
        self, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await finetuning.get_fine_tuned_models(self.http, config)

    async def get_fine_tuned_model(self, model_id: str) -> Dict[str, Any]:
        return await finetuning.get_fine_tuned_model(self.http, model_id)

    async def get_fine_tuned_model_chronology(
        self, model_id: str, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await finetuning.get_fine_tuned_model_chronology(
            self.http, model_id, config
        )

    async def get_fine_tuned_model_metrics(
        self, model_id: str, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await finetuning.get_fine_tuned_model_metrics(self.http, model_id, config)

    async def create_fine_tuned_model(
        self,
        name: str,
        settings: Dict[str, Any],
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await finetuning.create_fine_tuned_model(self.http, name, settings, config)

    async def update_fine_tuned_model(
        self,
        model_id: str,
        name: str,
        settings: Dict[str, Any],
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await finetuning.update_fine_tuned_model(
            self.http, model_id, name, settings, config
        )

    async def delete_fine_tuned_model(self, model_id: str) -> Dict[str, str]:
        return await finetuning.delete_fine_tuned_model(self.http, model_id)
