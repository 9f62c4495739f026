# coding: utf-8

"""
    Hub Subscriptions API (v1)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, StrictStr
from typing import Any, ClassVar, Dict, Optional
try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class Subscription(BaseModel):
    """
    A caller's subscription to one kind of event on one package.
    """  # noqa: E501

    user_id: Optional[StrictStr] = Field(
        default=None,
        description="Subscriber; always taken from the authenticated caller.",
    )
    package_id: StrictStr = Field(description="Package identifier (UUID).")
    event_kind: StrictInt = Field(default=0, description="Event kind code (0 = new release).")
    __properties: ClassVar[list[str]] = ["user_id", "package_id", "event_kind"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, json_str: str | bytes) -> Self:
        return cls.model_validate_json(json_str)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        return cls.model_validate(obj)
