"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.routes import router
from src.audit.fetch import build_fetcher
from src.config import get_settings
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting seo audit service")

    app.state.settings = settings
    app.state.fetcher = build_fetcher(settings)

    logger.info(
        "seo audit service ready",
        extra={
            "fetch_timeout_seconds": settings.fetch_timeout_seconds,
            "fetch_max_redirects": settings.fetch_max_redirects,
            "auth_enabled": bool(settings.api_key),
        },
    )

    yield

    logger.info("shutting down seo audit service")


app = FastAPI(title="SEO Audit Service", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
