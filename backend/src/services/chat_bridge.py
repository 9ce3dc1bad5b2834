"""Chat Bridge - forwards one user turn plus note context to Gemini.

Each turn is a single blocking ``generateContent`` round trip: no history,
no retries, no streaming. Every failure of the external call is returned as a
``ChatFailure`` instead of raised, and the UI gets a fixed apology string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import httpx

from .config import AppConfig, get_config
from .context_assembler import ChatPrompt, ContextAssembler

logger = logging.getLogger(__name__)

ERROR_FALLBACK_REPLY = "Sorry, I encountered an error connecting to my brain."
EMPTY_FALLBACK_REPLY = "I couldn't process that request."


class ChatFailureReason(str, Enum):
    """Why the model produced no answer."""

    MISSING_CREDENTIALS = "missing_credentials"
    NETWORK_ERROR = "network_error"
    QUOTA_EXCEEDED = "quota_exceeded"
    HTTP_ERROR = "http_error"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_REPLY = "empty_reply"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class ChatReply:
    text: str
    model: str


@dataclass(frozen=True)
class ChatFailure:
    reason: ChatFailureReason
    message: str
    status_code: Optional[int] = None

    @property
    def fallback_text(self) -> str:
        if self.reason is ChatFailureReason.EMPTY_REPLY:
            return EMPTY_FALLBACK_REPLY
        return ERROR_FALLBACK_REPLY


ChatResult = Union[ChatReply, ChatFailure]


class _ChatCallError(Exception):
    def __init__(self, reason: ChatFailureReason, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.status_code = status_code


def reply_text(result: ChatResult) -> str:
    """Text to show the user: the model reply verbatim or the fallback."""
    if isinstance(result, ChatReply):
        return result.text
    return result.fallback_text


def extract_reply_text(data: dict) -> str:
    """Concatenate the text parts of the first candidate.

    Returns an empty string when the response carries no text (for example a
    safety-blocked prompt with no candidates).
    """
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list):
        raise TypeError(f"candidates is {type(candidates).__name__}, expected list")
    if not candidates:
        return ""
    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


class ChatBridge:
    """Single-turn bridge between the chat endpoint and the hosted model."""

    def __init__(
        self,
        assembler: ContextAssembler,
        config: Optional[AppConfig] = None,
    ):
        self.assembler = assembler
        self.config = config or get_config()

    @property
    def model(self) -> str:
        return self.config.chat_model

    async def ask(self, message: str) -> ChatResult:
        """Send ``message`` with the current notes and return a typed result.

        Store errors while assembling the context propagate; failures of the
        external call never do.
        """
        prompt = self.assembler.assemble(message)

        try:
            text = await self._call_google(prompt)
        except _ChatCallError as e:
            return self._failure(e.reason, e.message, e.status_code)
        except Exception as e:
            logger.exception(f"Unexpected chat bridge error: {e}")
            return self._failure(ChatFailureReason.UNEXPECTED_ERROR, str(e))

        if not text:
            return self._failure(ChatFailureReason.EMPTY_REPLY, "Model returned no text")
        return ChatReply(text=text, model=self.model)

    def _failure(
        self, reason: ChatFailureReason, message: str, status_code: Optional[int] = None
    ) -> ChatFailure:
        logger.error(f"Chat turn failed ({reason.value}): {message}")
        return ChatFailure(reason=reason, message=message, status_code=status_code)

    async def _call_google(self, prompt: ChatPrompt) -> str:
        """Call Google Gemini ``generateContent`` and return the reply text."""
        api_key = self.config.gemini_api_key
        if not api_key:
            raise _ChatCallError(
                ChatFailureReason.MISSING_CREDENTIALS,
                "No Gemini API key configured. Set GEMINI_API_KEY environment variable.",
            )

        gemini_model = self.model
        if not gemini_model.startswith("models/"):
            gemini_model = f"models/{gemini_model}"

        url = f"{self.config.gemini_api_base}/{gemini_model}:generateContent"
        payload = {
            "systemInstruction": {"parts": [{"text": prompt.system_instruction}]},
            "contents": [{"role": "user", "parts": [{"text": prompt.user_content}]}],
        }

        try:
            async with httpx.AsyncClient(timeout=self.config.chat_timeout_seconds) as client:
                response = await client.post(url, params={"key": api_key}, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            reason = (
                ChatFailureReason.QUOTA_EXCEEDED
                if status_code == 429
                else ChatFailureReason.HTTP_ERROR
            )
            raise _ChatCallError(reason, f"Gemini returned HTTP {status_code}", status_code) from e
        except httpx.RequestError as e:
            raise _ChatCallError(ChatFailureReason.NETWORK_ERROR, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise _ChatCallError(
                ChatFailureReason.MALFORMED_RESPONSE, f"Invalid JSON from Gemini: {e}"
            ) from e

        if not isinstance(data, dict):
            raise _ChatCallError(ChatFailureReason.MALFORMED_RESPONSE, "Unexpected response shape")
        try:
            return extract_reply_text(data)
        except (AttributeError, TypeError, IndexError, KeyError) as e:
            raise _ChatCallError(
                ChatFailureReason.MALFORMED_RESPONSE, f"Unexpected response shape: {e}"
            ) from e


__all__ = [
    "ChatBridge",
    "ChatReply",
    "ChatFailure",
    "ChatFailureReason",
    "ChatResult",
    "ERROR_FALLBACK_REPLY",
    "EMPTY_FALLBACK_REPLY",
    "extract_reply_text",
    "reply_text",
]
