"""
DocSign Demo API -- Application entry point.

Run with:
    uvicorn docsign_api.main:app --reload

Then open http://localhost:8000 for the demo page,
or http://localhost:8000/docs for the interactive Swagger UI.

This file:
  1. Configures logging and reads settings from the environment
  2. Builds the FastAPI application around a DocumentRegistry
  3. Adds CORS middleware (open to every origin by default)
  4. Mounts the document routes and error handlers
  5. Serves the demo frontend and the health check
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from docsign_api.config import Settings, load_settings
from docsign_api.errors import register_error_handlers
from docsign_api.routes import documents
from docsign_api.store import DocumentRegistry

VERSION = "0.1.0"

FRONTEND_DIR = Path(__file__).resolve().parent / "frontend"

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(registry: DocumentRegistry | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the app. A registry passed in is used as-is; otherwise one is
    created (and seeded unless DOCSIGN_SEED_SAMPLES is off)."""
    settings = settings or load_settings()
    if registry is None:
        registry = DocumentRegistry(seed=settings.seed_samples)

    app = FastAPI(
        title="DocSign Demo API",
        version=VERSION,
        description=(
            "Minimal document-signing demo. Documents live in memory and "
            "can each be signed exactly once.\n\n"
            "| Endpoint | Purpose |\n"
            "|----------|--------|\n"
            "| `GET /api/documents` | List all documents |\n"
            "| `POST /api/documents` | Create an unsigned document |\n"
            "| `PUT /api/documents/{id}/sign` | Attach a signature (once) |\n\n"
            "**Status:** demo. No signature verification, no persistence."
        ),
    )
    app.state.registry = registry

    # -----------------------------------------------------------------------
    # CORS Middleware
    #
    # The demo page may be served from anywhere, so every origin is allowed
    # unless DOCSIGN_CORS_ORIGINS says otherwise.
    # -----------------------------------------------------------------------

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(documents.router)

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the demo page."""
        return FileResponse(FRONTEND_DIR / "index.html")

    @app.get(
        "/health",
        summary="Health check",
        description="Returns the current status of the API. Use this for uptime monitoring.",
        tags=["System"],
    )
    async def health():
        return {
            "status": "healthy",
            "service": "docsign-api",
            "version": VERSION,
            "documents_stored": len(app.state.registry),
        }

    logger.info("DocSign API ready with %d documents", len(registry))
    return app


app = create_app(settings=settings)
