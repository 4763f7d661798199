"""Local TensorFlow connector."""

from .client import TensorFlowClient
from .connector import TensorFlow

__all__ = ["TensorFlow", "TensorFlowClient"]
