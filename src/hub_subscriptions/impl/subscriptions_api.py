from __future__ import annotations

from fastapi import Request
from fastapi.responses import Response

from hub_subscriptions.apis.subscriptions_api_base import BaseSubscriptionsApi
from hub_subscriptions.services.subscription_manager import SubscriptionManager
from hub_subscriptions.services.subscriptions_service import SubscriptionsService


class SubscriptionsApiImpl(BaseSubscriptionsApi):
    def __init__(self, manager: SubscriptionManager) -> None:
        super().__init__(manager)
        self._service = SubscriptionsService(manager)

    async def add_subscription(self, request: Request) -> Response:
        return await self._service.add(request)

    async def delete_subscription(self, request: Request) -> Response:
        return await self._service.delete(request)

    async def get_package_subscriptions(self, request: Request, package_id: str) -> Response:
        return await self._service.get_by_package(request, package_id)

    async def get_user_subscriptions(self, request: Request) -> Response:
        return await self._service.get_by_user(request)
