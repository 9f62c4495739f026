# coding: utf-8

"""
    Hub Subscriptions API (v1)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt
from typing import Any, ClassVar, Dict


class PackageSubscription(BaseModel):
    """
    One event kind the caller is subscribed to on a package.
    """  # noqa: E501

    event_kind: StrictInt = Field(description="Event kind code.")
    __properties: ClassVar[list[str]] = ["event_kind"]

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
