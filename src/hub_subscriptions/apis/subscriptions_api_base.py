# coding: utf-8

from typing import ClassVar, Dict, List, Tuple  # noqa: F401

from fastapi import Request
from fastapi.responses import Response
from pydantic import StrictStr

from hub_subscriptions.services.subscription_manager import SubscriptionManager


class BaseSubscriptionsApi:
    subclasses: ClassVar[Tuple] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        BaseSubscriptionsApi.subclasses = BaseSubscriptionsApi.subclasses + (cls,)

    def __init__(self, manager: SubscriptionManager) -> None:
        self.manager = manager

    async def add_subscription(
        self,
        request: Request,
    ) -> Response:
        ...


    async def delete_subscription(
        self,
        request: Request,
    ) -> Response:
        ...


    async def get_package_subscriptions(
        self,
        request: Request,
        package_id: StrictStr,
    ) -> Response:
        ...


    async def get_user_subscriptions(
        self,
        request: Request,
    ) -> Response:
        ...
