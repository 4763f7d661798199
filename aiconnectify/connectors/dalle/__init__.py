"""OpenAI DALL-E connector."""

from .client import DALLEClient
from .connector import DALLE

__all__ = ["DALLE", "DALLEClient"]
