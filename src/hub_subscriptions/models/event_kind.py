# coding: utf-8

"""
    Hub Subscriptions API (v1)
"""

from __future__ import annotations

from enum import IntEnum


class EventKind(IntEnum):
    """
    Class of package event a subscription reacts to.
    """

    NEW_RELEASE = 0
    SECURITY_ALERT = 1

    @classmethod
    def is_valid(cls, value: int) -> bool:
        return value in cls._value2member_map_
