"""
OpenAI client shared by the ChatGPT and DALLE connectors.
"""

from typing import Dict

from aiconnectify.utils.validation import validate_key_string

from ..base import BaseClient


class ChatGPTClient(BaseClient):
    """OpenAI REST client with organization and project scoping headers."""

    ai_name = "ChatGPT"

    def _get_default_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
        }

    def set_organization_id(self, organization_id: str) -> None:
        """Scope subsequent requests to an OpenAI organization."""
        validate_key_string(organization_id, "A valid Organization ID must be provided")
        self._set_header("OpenAI-Organization", organization_id)

    def set_project_id(self, project_id: str) -> None:
        """Scope subsequent requests to an OpenAI project."""
        validate_key_string(project_id, "A valid Project ID must be provided")
        self._set_header("OpenAI-Project", project_id)
