"""
Local TensorFlow client.

TensorFlow is an optional dependency (``pip install aiconnectify[tensorflow]``)
and is imported on first use, so the rest of the library never pays its
import cost.
"""

from importlib import import_module
from types import ModuleType
from typing import Optional

from aiconnectify.utils.logger import get_logger

from ..exceptions import AIConnectifyError

logger = get_logger(__name__)


class TensorFlowClient:
    """Holds the lazily imported ``tensorflow`` module."""

    ai_name = "TensorFlow"
    module_name = "tensorflow"

    def __init__(self, api_key: Optional[str] = None, **config):
        self.api_key = api_key
        self._tf: Optional[ModuleType] = None

    @property
    def tf(self) -> ModuleType:
        """
        The imported TensorFlow module.

        Raises:
            AIConnectifyError: If the tensorflow package is not installed
        """
        if self._tf is None:
            try:
                self._tf = import_module(self.module_name)
            except ImportError as e:
                logger.error(
                    "TensorFlow import failed",
                    connector=self.ai_name,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise AIConnectifyError(
                    "tensorflow package not installed. "
                    "Install it with: pip install aiconnectify[tensorflow]",
                    provider=self.ai_name,
                ) from e
            logger.info(
                "TensorFlow loaded",
                connector=self.ai_name,
                version=getattr(self._tf, "__version__", "unknown"),
            )
        return self._tf
