"""Mistral AI connector."""

from .client import MistralClient
from .connector import Mistral

__all__ = ["Mistral", "MistralClient"]
