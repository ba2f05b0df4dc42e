"""
SOP Engineer Backend - FastAPI Application Entry Point
======================================================

Backend for the SOP generator: users pick or create an equipment asset,
describe a maintenance task, and get a Standard Operating Procedure
written by an OpenAI model. Generated procedures are stored, listed per
asset, and exported as Markdown or a printable page.

Architecture Overview:
----------------------
- FastAPI for the REST API consumed by the browser client
- One SopSession per process (app.state.session) owning assets, history,
  the generator and the busy flag
- SQLAlchemy async key/value table for durable storage
  (SQLite by default, PostgreSQL via DATABASE_URL)
- OpenAI chat completions for generation

Startup:
--------
1. Create the storage table if missing
2. Load the procedure history (unreadable history is logged and dropped)
3. Seed the asset registry
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.ai.generator import SopGenerator
from app.api.routes import assets, documents
from app.config import settings
from app.db import async_session_maker, close_db, init_db
from app.services.history_store import HistoryStore
from app.services.session import SopSession, create_session
from app.storage.sql import SqlStorage


logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(session: SopSession | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        session: Pre-built session (tests). When omitted, startup creates
            one backed by the database and the configured OpenAI key.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name}...")

        owns_db = session is None
        if owns_db:
            await init_db()
            logger.info("Storage initialized")
            history = HistoryStore(
                SqlStorage(async_session_maker),
                key=settings.history_storage_key,
                strict=settings.strict_history_load,
            )
            app.state.session = create_session(history, SopGenerator.from_settings(settings))
        else:
            app.state.session = session

        await app.state.session.start()
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set - generation will be unavailable")

        yield

        logger.info("Shutting down...")
        if owns_db:
            await close_db()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="AI-generated Standard Operating Procedures for equipment maintenance",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        assets.router,
        prefix=f"{settings.api_prefix}/assets",
        tags=["assets"],
    )
    app.include_router(
        documents.router,
        prefix=f"{settings.api_prefix}/documents",
        tags=["documents"],
    )

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": "0.1.0",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        current = app.state.session
        return {
            "status": "healthy",
            "generation_configured": bool(current.generator.api_key),
            "generating": current.is_generating,
            "assets": len(current.registry),
            "documents": len(current.history),
        }

    return app


app = create_app()
