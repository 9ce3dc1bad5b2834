"""HTTP API route for the chat companion."""

from __future__ import annotations

from fastapi import APIRouter

from ...models.chat import ChatRequest, ChatResponse
from ...services.chat_bridge import ChatFailure, reply_text
from ..deps import ChatBridgeDep

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, bridge: ChatBridgeDep) -> ChatResponse:
    """Answer one message using the current notes as context.

    Model failures are reported in the body with a fallback reply, never as
    an HTTP error.
    """
    result = await bridge.ask(request.message)
    failure = result.reason.value if isinstance(result, ChatFailure) else None
    return ChatResponse(
        reply=reply_text(result),
        ok=failure is None,
        failure=failure,
        model=bridge.model,
    )
