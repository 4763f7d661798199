"""TensorFlow connector."""

from typing import Any, Optional

from ..base import BaseConnector
from .client import TensorFlowClient


class TensorFlow(BaseConnector):
    """
    Connector exposing the local TensorFlow library.

    No API key is needed. Public attributes of the ``tensorflow`` module are
    reachable on the connector, e.g. ``TensorFlow().constant([1, 2])`` or
    ``TensorFlow().keras``.
    """

    connector_name = "TensorFlow"
    client_class = TensorFlowClient
    api_key_required = False

    @property
    def tf(self):
        return self.client.tf

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the connector itself
        if name.startswith("_") or name == "client":
            raise AttributeError(name)
        return getattr(self.client.tf, name)

    @property
    def http(self) -> Optional[Any]:
        return None

    async def aclose(self) -> None:
        """Nothing to release; TensorFlow runs in-process."""
        return None
