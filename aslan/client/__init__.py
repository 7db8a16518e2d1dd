"""REST client for the aslan environment service."""

from .environment import AslanClient
from .http import HttpClient

__all__ = ["AslanClient", "HttpClient"]
