# coding: utf-8

from typing import Dict, List  # noqa: F401
import importlib
import pkgutil

from hub_subscriptions.apis.subscriptions_api_base import BaseSubscriptionsApi
import hub_subscriptions.impl

from fastapi import (  # noqa: F401
    APIRouter,
    Depends,
    HTTPException,
    Path,
    Request,
    Response,
    Security,
    status,
)

from hub_subscriptions.models.extra_models import TokenModel  # noqa: F401
from pydantic import StrictStr
from hub_subscriptions.models.error import Error
from hub_subscriptions.models.package_subscription import PackageSubscription
from hub_subscriptions.models.subscription import Subscription
from hub_subscriptions.models.user_subscription import UserSubscription
from hub_subscriptions.security_api import get_token_bearerAuth
from hub_subscriptions.services.subscription_manager import (
    SubscriptionManager,
    get_subscription_manager,
)

router = APIRouter()

ns_pkg = hub_subscriptions.impl
for _, name, _ in pkgutil.iter_modules(ns_pkg.__path__, ns_pkg.__name__ + "."):
    importlib.import_module(name)

_SUBSCRIPTION_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": Subscription.model_json_schema()}},
    }
}


def _implementation(manager: SubscriptionManager) -> BaseSubscriptionsApi:
    if not BaseSubscriptionsApi.subclasses:
        raise HTTPException(status_code=500, detail="Not implemented")
    return BaseSubscriptionsApi.subclasses[0](manager)


@router.post(
    "/api/v1/subscriptions",
    responses={
        200: {"description": "OK"},
        400: {"model": Error, "description": "Invalid input"},
        401: {"model": Error, "description": "Unauthorized"},
        403: {"model": Error, "description": "Forbidden"},
        500: {"model": Error, "description": "Internal error"},
    },
    tags=["Subscriptions"],
    summary="Subscribe to package events",
    openapi_extra=_SUBSCRIPTION_BODY,
)
async def add_subscription(
    request: Request,
    manager: SubscriptionManager = Depends(get_subscription_manager),
    token_bearerAuth: TokenModel = Security(
        get_token_bearerAuth, scopes=["subscribe"]
    ),
) -> Response:
    return await _implementation(manager).add_subscription(request)


@router.delete(
    "/api/v1/subscriptions",
    responses={
        200: {"description": "OK"},
        400: {"model": Error, "description": "Invalid input"},
        401: {"model": Error, "description": "Unauthorized"},
        403: {"model": Error, "description": "Forbidden"},
        500: {"model": Error, "description": "Internal error"},
    },
    tags=["Subscriptions"],
    summary="Unsubscribe from package events",
    openapi_extra=_SUBSCRIPTION_BODY,
)
async def delete_subscription(
    request: Request,
    manager: SubscriptionManager = Depends(get_subscription_manager),
    token_bearerAuth: TokenModel = Security(
        get_token_bearerAuth, scopes=["subscribe"]
    ),
) -> Response:
    return await _implementation(manager).delete_subscription(request)


@router.get(
    "/api/v1/subscriptions",
    responses={
        200: {"model": List[UserSubscription], "description": "OK"},
        401: {"model": Error, "description": "Unauthorized"},
        403: {"model": Error, "description": "Forbidden"},
        500: {"model": Error, "description": "Internal error"},
    },
    tags=["Subscriptions"],
    summary="List the caller's subscriptions",
)
async def get_user_subscriptions(
    request: Request,
    manager: SubscriptionManager = Depends(get_subscription_manager),
    token_bearerAuth: TokenModel = Security(
        get_token_bearerAuth, scopes=["read"]
    ),
) -> Response:
    return await _implementation(manager).get_user_subscriptions(request)


@router.get(
    "/api/v1/subscriptions/{packageID}",
    responses={
        200: {"model": List[PackageSubscription], "description": "OK"},
        400: {"model": Error, "description": "Invalid input"},
        401: {"model": Error, "description": "Unauthorized"},
        403: {"model": Error, "description": "Forbidden"},
        500: {"model": Error, "description": "Internal error"},
    },
    tags=["Subscriptions"],
    summary="List the caller's subscriptions on a package",
)
async def get_package_subscriptions(
    request: Request,
    packageID: StrictStr = Path(..., description="Package identifier"),  # noqa: N803
    manager: SubscriptionManager = Depends(get_subscription_manager),
    token_bearerAuth: TokenModel = Security(
        get_token_bearerAuth, scopes=["read"]
    ),
) -> Response:
    return await _implementation(manager).get_package_subscriptions(request, packageID)
