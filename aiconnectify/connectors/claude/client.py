"""Anthropic client."""

from typing import Dict

from aiconnectify.core.config import settings
from aiconnectify.utils.validation import validate_string_input

from ..base import BaseClient


class ClaudeClient(BaseClient):
    """Anthropic Messages API client."""

    ai_name = "Claude"

    def _get_default_headers(self) -> Dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": settings.ANTHROPIC_VERSION,
        }

    def set_anthropic_version(self, version: str) -> None:
        """Pin the ``anthropic-version`` header for subsequent requests."""
        validate_string_input(
            version,
            "The version is required to set the new anthropic-version request header",
        )
        self._set_header("anthropic-version", version.strip())
