"""Shared fixtures for store, app and Gemini mocks."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from backend.src.api.main import create_app
from backend.src.services.config import AppConfig
from backend.src.services.note_store import NoteStore


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        database_path=tmp_path / "data" / "notes.db",
        gemini_api_key="test-key",
        chat_model="test-model",
    )


@pytest.fixture
def store(app_config: AppConfig) -> Iterator[NoteStore]:
    with NoteStore(app_config.database_path) as note_store:
        yield note_store


@pytest.fixture
def client(app_config: AppConfig, tmp_path: Path) -> Iterator[TestClient]:
    """TestClient with the lifespan running (store opened on a temp file)."""
    app = create_app(app_config, frontend_dist=tmp_path / "no-frontend")
    with TestClient(app) as test_client:
        yield test_client


def gemini_response(text: Optional[str]) -> Dict[str, Any]:
    """Build a generateContent response body with a single text part."""
    if text is None:
        return {"candidates": [], "promptFeedback": {"blockReason": "SAFETY"}}
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ],
        "usageMetadata": {"totalTokenCount": 42},
    }


@pytest.fixture
def mock_gemini() -> Iterator[AsyncMock]:
    """Patch httpx.AsyncClient; set ``.post`` return value / side effect per test."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_response = MagicMock()
        mock_response.json.return_value = gemini_response("Hi there! 🌸")
        mock_response.raise_for_status = MagicMock()

        mock_client = AsyncMock()
        mock_client.post.return_value = mock_response
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = None
        mock_client_class.return_value = mock_client
        yield mock_client
