"""Service layer for business logic and external integrations."""

from .chat_bridge import (
    ChatBridge,
    ChatFailure,
    ChatFailureReason,
    ChatReply,
    ChatResult,
    reply_text,
)
from .config import AppConfig, get_config, reload_config
from .context_assembler import ChatPrompt, ContextAssembler, render_notes
from .database import DatabaseService
from .note_store import NoteStore, NoteStoreError, NoteValidationError
from .prompt_loader import PromptLoader, PromptLoaderError

__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "DatabaseService",
    "NoteStore",
    "NoteStoreError",
    "NoteValidationError",
    "PromptLoader",
    "PromptLoaderError",
    "ChatPrompt",
    "ContextAssembler",
    "render_notes",
    "ChatBridge",
    "ChatReply",
    "ChatFailure",
    "ChatFailureReason",
    "ChatResult",
    "reply_text",
]
