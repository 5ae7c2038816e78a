"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from theme_header.config import STATIC_DIR
from theme_header.content import get_content_store
from theme_header.routers import header_api, preview

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load site content once at startup."""
    store = get_content_store()
    logger.info("Serving headers for %s", store.site_name or "(unnamed site)")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Theme Header",
        description=(
            "Page header and site navigation rendering: header media, "
            "title/subtitle text, header type and nav menu fallback."
        ),
        version="1.0.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )

    # Static files
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    app.include_router(header_api.router)
    # HTML previews (hidden from API docs)
    app.include_router(preview.router, include_in_schema=False)

    return app
