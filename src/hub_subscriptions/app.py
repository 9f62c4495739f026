"""Runtime entrypoint assembling the subscriptions FastAPI app."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from hub_subscriptions import __version__
from hub_subscriptions.apis.health_api import router as health_router
from hub_subscriptions.apis.subscriptions_api import router as subscriptions_router
from hub_subscriptions.config import get_settings
from hub_subscriptions.db import async_engine
from hub_subscriptions.db.migrations import upgrade_database
from hub_subscriptions.db.seed_data import seed_default_accounts, seed_sample_packages

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    if settings.auto_migrate:
        logger.info("Applying database migrations")
        upgrade_database()
    seed_default_accounts()
    seed_sample_packages()
    yield
    await async_engine.dispose()


def create_app() -> FastAPI:
    application = FastAPI(
        title="Hub Subscriptions API",
        description="Subscribe to events on hub packages.",
        version=__version__,
        lifespan=_lifespan,
    )
    application.include_router(health_router)
    application.include_router(subscriptions_router)
    return application


app = create_app()
