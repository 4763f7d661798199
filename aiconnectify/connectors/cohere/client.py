"""Cohere client."""

from typing import Dict

from aiconnectify.utils.validation import validate_string_input

from ..base import BaseClient


class CohereClient(BaseClient):
    ai_name = "Cohere"

    def _get_default_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"bearer {self.api_key}",
            "Accept": "application/json",
        }

    def set_client_name(self, client_name: str) -> None:
        """Identify the calling application via ``X-Client-Name``."""
        validate_string_input(client_name, "Cannot process the client name")
        self._set_header("X-Client-Name", client_name.strip())
