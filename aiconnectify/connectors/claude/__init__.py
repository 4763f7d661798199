"""Anthropic Claude connector."""

from .client import ClaudeClient
from .connector import Claude

__all__ = ["Claude", "ClaudeClient"]
