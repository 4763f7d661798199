"""Claude connector."""

from typing import Any, Dict, List, Optional

from ..base import BaseConnector
from .client import ClaudeClient
from .methods import message_batches
from .methods import messages as message_api


class Claude(BaseConnector):
    """Connector for the Anthropic Messages and Message Batches APIs."""

    connector_name = "Claude"
    client_class = ClaudeClient

    def set_anthropic_version(self, version: str) -> None:
        self.client.set_anthropic_version(version)

    async def create_message(
        self,
        messages: List[Dict[str, Any]],
        model_id: str = "claude-3-5-sonnet-20240620",
        max_tokens: int = 1024,
        config: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await message_api.create_message(
            self.http, messages, model_id, max_tokens, config
        )

    async def create_message_batch(
        self, requests: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        return await message_batches.create_message_batch(self.http, requests)

    async def get_message_batch(self, batch_id: str) -> Dict[str, Any]:
        return await message_batches.get_message_batch(self.http, batch_id)

    async def get_message_batch_results(self, batch_id: str) -> List[Dict[str, Any]]:
        return await message_batches.get_message_batch_results(self.http, batch_id)

    async def get_message_batch_list(
        self, config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return await message_batches.get_message_batch_list(self.http, config)

    async def cancel_message_batch(self, batch_id: str) -> Dict[str, Any]:
        return await message_batches.cancel_message_batch(self.http, batch_id)
