from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hub_subscriptions import __version__
from hub_subscriptions.db.session import AsyncSessionLocal
from hub_subscriptions.models.health_status import HealthStatus

logger = logging.getLogger(__name__)


class HealthService:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        self._session_factory = session_factory or AsyncSessionLocal

    async def get_health(self) -> HealthStatus:
        status = "ok"
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.warning("Database health probe failed", exc_info=True)
            status = "degraded"
        return HealthStatus(
            status=status,
            version=__version__,
            timestamp=datetime.now(timezone.utc),
        )
