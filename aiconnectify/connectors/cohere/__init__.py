"""Cohere connector."""

from .client import CohereClient
from .connector import Cohere

__all__ = ["Cohere", "CohereClient"]
