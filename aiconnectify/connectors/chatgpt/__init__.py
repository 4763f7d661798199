"""OpenAI ChatGPT connector."""

from .client import ChatGPTClient
from .connector import ChatGPT

__all__ = ["ChatGPT", "ChatGPTClient"]
