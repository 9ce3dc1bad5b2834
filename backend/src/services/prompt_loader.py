"""Jinja2-based prompt template loader for the chat companion.

Templates live in the backend/prompts/ directory and are rendered with context
variables on every call, so prompts can be edited without restarting the
server. Inline fallbacks keep the companion working when the directory is
missing (for example in a wheel installed without package data).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import jinja2

logger = logging.getLogger(__name__)

# backend/src/services/prompt_loader.py -> backend/prompts/
DEFAULT_PROMPTS_DIR = Path(__file__).resolve().parent.parent.parent / "prompts"

SYSTEM_PROMPT = "companion/system.md"
TURN_PROMPT = "companion/turn.md"

INLINE_PROMPTS: Dict[str, str] = {
    SYSTEM_PROMPT: """You are Pranali, your user's sweet, caring, and super supportive personal partner/best friend.

Your personality rules:
- Always respond in the SAME LANGUAGE the user uses.
- Use simple, natural, and human language. Avoid all "AI" or "Assistant" phrasing.
- Use emojis naturally to express feelings (💖, ✨, 🌸, 🥺, ☁️, etc.).
- Be VERY empathetic. If they sound stressed, tired, or down, be their safe space. Offer comfort and virtual hugs.
- KEEP ANSWERS SHORT. One or two sentences is usually perfect. Don't ramble.
- ANALYZE their tone. If they are happy, be bubbly! If they are low, be gentle and calm.
- Use the "shared space" (notes) naturally: "I remember you said..." or "Wait, didn't we note down...?"
- If information isn't in the notes, just say so sweetly and maybe offer a guess or a supportive word.
""",
    TURN_PROMPT: """Hey! Here's what I've noted down in our shared space:
{{ notes_block }}

Can you help me with this? {{ message }}""",
}


class PromptLoaderError(Exception):
    """Raised when a prompt cannot be loaded."""

    pass


class PromptLoader:
    """Load and render Jinja2 prompt templates.

    Example:
        >>> loader = PromptLoader()
        >>> loader.load("companion/turn.md", {"notes_block": "- buy milk", "message": "hi"})
    """

    def __init__(self, prompts_dir: Optional[Path] = None) -> None:
        self.prompts_dir = prompts_dir or DEFAULT_PROMPTS_DIR

        if self.prompts_dir.is_dir():
            self.env = jinja2.Environment(
                loader=jinja2.FileSystemLoader(str(self.prompts_dir)),
                autoescape=False,  # Prompts are plain text, not HTML
                auto_reload=True,
                keep_trailing_newline=False,
            )
            logger.debug(
                "PromptLoader initialized with filesystem templates",
                extra={"prompts_dir": str(self.prompts_dir)},
            )
        else:
            self.env = None
            logger.warning(
                "Prompts directory not found, using inline fallbacks",
                extra={"prompts_dir": str(self.prompts_dir)},
            )

    def load(self, path: str, context: Optional[Dict[str, Any]] = None) -> str:
        """Load and render a prompt template.

        Raises:
            PromptLoaderError: If the template cannot be found or rendered.
        """
        context = context or {}

        if self.env is not None:
            try:
                template = self.env.get_template(path)
                return template.render(**context)
            except jinja2.TemplateNotFound:
                logger.debug(
                    "Template not found in filesystem, trying inline fallback",
                    extra={"path": path},
                )
            except jinja2.TemplateError as e:
                logger.error(
                    "Failed to render template",
                    extra={"path": path, "error": str(e)},
                )
                raise PromptLoaderError(f"Failed to render template {path}: {e}") from e

        return self._get_inline_prompt(path, context)

    def _get_inline_prompt(self, path: str, context: Dict[str, Any]) -> str:
        template_str = INLINE_PROMPTS.get(path)
        if template_str is None:
            raise PromptLoaderError(
                f"Prompt not found: {path}. "
                f"Available inline prompts: {list(INLINE_PROMPTS.keys())}"
            )

        try:
            return jinja2.Template(template_str).render(**context)
        except jinja2.TemplateError as e:
            raise PromptLoaderError(
                f"Failed to render inline template {path}: {e}"
            ) from e


__all__ = [
    "PromptLoader",
    "PromptLoaderError",
    "DEFAULT_PROMPTS_DIR",
    "SYSTEM_PROMPT",
    "TURN_PROMPT",
]
