"""HTTP API route handlers."""

from . import chat, notes

__all__ = ["chat", "notes"]
