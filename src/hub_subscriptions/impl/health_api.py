from __future__ import annotations

from hub_subscriptions.apis.health_api_base import BaseHealthApi
from hub_subscriptions.models.health_status import HealthStatus
from hub_subscriptions.services.health_service import HealthService

_service = HealthService()


class HealthApiImpl(BaseHealthApi):
    async def get_health(self) -> HealthStatus:
        return await _service.get_health()
