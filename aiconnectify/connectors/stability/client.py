"""Stability AI client."""

from typing import Dict

from aiconnectify.utils.validation import validate_key_string

from ..base import BaseClient


class StabilityClient(BaseClient):
    """
    Stability REST v2beta client.

    The optional ``stability-client-*`` headers identify the calling
    application to Stability for support and abuse handling.
    """

    ai_name = "Stability"

    def _get_default_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def set_client_id(self, client_id: str) -> None:
        validate_key_string(client_id, "A valid Client ID must be provided")
        self._set_header("stability-client-id", client_id)

    def set_client_user_id(self, client_user_id: str) -> None:
        validate_key_string(client_user_id, "A valid Client User ID must be provided")
        self._set_header("stability-client-user-id", client_user_id)

    def set_client_version(self, client_version: str) -> None:
        validate_key_string(client_version, "A valid Client Version must be provided")
        self._set_header("stability-client-version", client_version)
