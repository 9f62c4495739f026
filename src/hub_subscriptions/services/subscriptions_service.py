"""Request handlers for the subscription endpoints.

Each handler pulls the caller identity from the request, decodes the body
where one is expected, makes exactly one manager call and maps the outcome
to a response. Manager payloads for reads are already encoded JSON and are
returned as-is.
"""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import Response
from pydantic import ValidationError

from hub_subscriptions.http.cache import build_cache_control_header
from hub_subscriptions.http.errors import bad_request, internal_error, unauthorized
from hub_subscriptions.models.subscription import Subscription
from hub_subscriptions.security_api import get_request_user_id
from hub_subscriptions.services.subscription_manager import (
    InvalidInputError,
    RequestContext,
    SubscriptionManager,
)

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def _request_context(request: Request) -> RequestContext:
    user_id = get_request_user_id(request)
    if not user_id:
        raise unauthorized()
    return RequestContext(user_id=user_id)


async def _decode_subscription(request: Request) -> Subscription:
    body = await request.body()
    if not body.strip():
        raise bad_request("Subscription not provided.")
    try:
        return Subscription.from_json(body)
    except ValidationError as exc:
        raise bad_request(
            "Invalid subscription.",
            details={"errors": _describe_errors(exc)},
        ) from exc


def _describe_errors(exc: ValidationError) -> list[dict[str, object]]:
    return [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]


def _json_response(data: bytes) -> Response:
    return Response(
        content=data,
        status_code=status.HTTP_200_OK,
        media_type=JSON_MEDIA_TYPE,
        headers={"Cache-Control": build_cache_control_header(0)},
    )


class SubscriptionsService:
    def __init__(self, manager: SubscriptionManager) -> None:
        self._manager = manager

    async def add(self, request: Request) -> Response:
        subscription = await _decode_subscription(request)
        ctx = _request_context(request)
        subscription.user_id = ctx.user_id
        try:
            await self._manager.add(ctx, subscription)
        except InvalidInputError as exc:
            logger.debug("Rejected subscription add: %s", exc)
            raise bad_request(str(exc)) from exc
        except Exception as exc:
            logger.exception("Adding subscription failed (user=%s)", ctx.user_id)
            raise internal_error() from exc
        return Response(status_code=status.HTTP_200_OK)

    async def delete(self, request: Request) -> Response:
        subscription = await _decode_subscription(request)
        ctx = _request_context(request)
        subscription.user_id = ctx.user_id
        try:
            await self._manager.delete(ctx, subscription)
        except InvalidInputError as exc:
            logger.debug("Rejected subscription delete: %s", exc)
            raise bad_request(str(exc)) from exc
        except Exception as exc:
            logger.exception("Deleting subscription failed (user=%s)", ctx.user_id)
            raise internal_error() from exc
        return Response(status_code=status.HTTP_200_OK)

    async def get_by_package(self, request: Request, package_id: str) -> Response:
        ctx = _request_context(request)
        try:
            data = await self._manager.get_by_package_json(ctx, package_id)
        except InvalidInputError as exc:
            logger.debug("Rejected package subscriptions lookup: %s", exc)
            raise bad_request(str(exc)) from exc
        except Exception as exc:
            logger.exception("Getting package subscriptions failed (user=%s)", ctx.user_id)
            raise internal_error() from exc
        return _json_response(data)

    async def get_by_user(self, request: Request) -> Response:
        ctx = _request_context(request)
        try:
            data = await self._manager.get_by_user_json(ctx)
        except Exception as exc:
            logger.exception("Getting user subscriptions failed (user=%s)", ctx.user_id)
            raise internal_error() from exc
        return _json_response(data)
