"""FastAPI entrypoint for the user directory service."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.api import api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.services.user_service import list_users

logger = logging.getLogger(__name__)


def startup() -> None:
    configure_logging(settings.log_level, debug=settings.debug)
    logger.info("[BOOTSTRAP] %s starting (env=%s)", settings.app_name, settings.app_env)
    logger.info("[BOOTSTRAP] user directory loaded: %s users", len(list_users()))
    if settings.debug and settings.app_env != "dev":
        logger.warning("DEBUG enabled outside dev environment (APP_ENV=%s).", settings.app_env)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    startup()
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
app.include_router(api_router)
