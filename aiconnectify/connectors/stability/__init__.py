"""Stability AI connector."""

from .client import StabilityClient
from .connector import Stability

__all__ = ["Stability", "StabilityClient"]
