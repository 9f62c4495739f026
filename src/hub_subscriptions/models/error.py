# coding: utf-8

"""
    Hub Subscriptions API (v1)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr
from typing import Any, ClassVar, Dict, Optional
try:
    from typing import Self
except ImportError:
    from typing_extensions import Self


class Error(BaseModel):
    """
    Error payload returned by failed requests.
    """  # noqa: E501

    error: StrictStr = Field(description="Machine readable error code.")
    message: StrictStr = Field(description="Human readable description of the failure.")
    details: Optional[Dict[str, Any]] = None
    __properties: ClassVar[list[str]] = ["error", "message", "details"]

    model_config = {
        "populate_by_name": True,
        "validate_assignment": True,
        "protected_namespaces": (),
    }

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, json_str: str) -> Self:
        return cls.model_validate_json(json_str)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> Self:
        if obj is None:
            return None
        return cls.model_validate(obj)
