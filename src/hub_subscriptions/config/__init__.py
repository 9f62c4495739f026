from .settings import (
    SubscriptionsApiSettings,
    SubscriptionsSettings,
    get_api_settings,
    get_settings,
)

__all__ = [
    "SubscriptionsSettings",
    "SubscriptionsApiSettings",
    "get_settings",
    "get_api_settings",
]
