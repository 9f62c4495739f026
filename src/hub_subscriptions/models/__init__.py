# coding: utf-8

"""Hub Subscriptions API models."""

from hub_subscriptions.models.error import Error
from hub_subscriptions.models.event_kind import EventKind
from hub_subscriptions.models.extra_models import TokenModel
from hub_subscriptions.models.health_status import HealthStatus
from hub_subscriptions.models.package_subscription import PackageSubscription
from hub_subscriptions.models.subscription import Subscription
from hub_subscriptions.models.user_subscription import UserSubscription

__all__ = [
    "Error",
    "EventKind",
    "HealthStatus",
    "PackageSubscription",
    "Subscription",
    "TokenModel",
    "UserSubscription",
]
