"""FastAPI application main entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

load_dotenv()

from .middleware import register_error_handlers
from .routes import chat, notes
from ..services.chat_bridge import ChatBridge
from ..services.config import PROJECT_ROOT, AppConfig, get_config
from ..services.context_assembler import ContextAssembler
from ..services.note_store import NoteStore
from ..services.prompt_loader import PromptLoader

logger = logging.getLogger(__name__)

FRONTEND_DIST = PROJECT_ROOT / "frontend" / "dist"
API_PATHS = ("api/", "notes", "chat", "health")


def create_app(
    config: Optional[AppConfig] = None,
    frontend_dist: Optional[Path] = None,
) -> FastAPI:
    """Build the application; the note store opens and closes with the lifespan."""
    config = config or get_config()
    frontend_dist = frontend_dist or FRONTEND_DIST

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Running startup: opening note store...")
        with NoteStore(config.database_path) as store:
            assembler = ContextAssembler(store, PromptLoader())
            app.state.note_store = store
            app.state.chat_bridge = ChatBridge(assembler, config=config)
            logger.info(f"Startup complete: {store.count()} notes, chat model {config.chat_model}")
            try:
                yield
            finally:
                del app.state.chat_bridge
                del app.state.note_store

    app = FastAPI(
        title="Basewise Notes API",
        description="Personal notes with a conversational companion",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # The SPA calls the /api-prefixed routes; bare paths stay for API clients.
    for prefix in ("/api", ""):
        app.include_router(notes.router, prefix=prefix, tags=["notes"])
        app.include_router(chat.router, prefix=prefix, tags=["chat"])

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    if frontend_dist.exists():
        assets = frontend_dist / "assets"
        if assets.is_dir():
            app.mount("/assets", StaticFiles(directory=str(assets)), name="assets")

        # Catch-all route for SPA - serve index.html for all non-API routes
        @app.get("/{full_path:path}")
        async def serve_spa(full_path: str):
            """Serve the SPA for all non-API routes."""
            if full_path.startswith(API_PATHS):
                raise HTTPException(status_code=404, detail="Not found")

            file_path = (frontend_dist / full_path).resolve()
            if file_path.is_file() and file_path.is_relative_to(frontend_dist.resolve()):
                return FileResponse(file_path)
            return FileResponse(frontend_dist / "index.html")

        logger.info(f"Serving frontend SPA from: {frontend_dist}")
    else:
        logger.warning(f"Frontend dist not found at: {frontend_dist}")

        @app.get("/")
        async def root():
            """API status endpoint."""
            return {"status": "ok", "service": "Basewise Notes API"}

    return app


__all__ = ["create_app"]
