"""Mistral AI client."""

from typing import Dict

from ..base import BaseClient


class MistralClient(BaseClient):
    ai_name = "Mistral"

    def _get_default_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}", "Accept": "application/json"}
