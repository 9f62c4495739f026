# coding: utf-8

"""
    Hub Subscriptions API (v1)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, StrictStr
from typing import Any, ClassVar, Dict, List


class UserSubscription(BaseModel):
    """
    A package the caller is subscribed to, with the subscribed event kinds.
    """  # noqa: E501

    package_id: StrictStr
    name: StrictStr
    normalized_name: StrictStr
    event_kinds: List[StrictInt] = Field(default_factory=list)
    __properties: ClassVar[list[str]] = ["package_id", "name", "normalized_name", "event_kinds"]

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
