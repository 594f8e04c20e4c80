"""Flash state carried in the session between a redirect and the next page."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ResponseType(str, Enum):
    SUCCESS = 'success'
    ERROR = 'error'


class FlashState(BaseModel):
    """What the previous request left behind.

    Every field falls back to its default when nothing was written, so
    templates can read ``state.message`` without checking first.
    """
    type: Optional[ResponseType] = None
    message: Optional[str] = None
    code: Optional[int] = None
    data: Any = Field(default_factory=dict)
    errors: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.type is ResponseType.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.type is ResponseType.ERROR

    @property
    def is_empty(self) -> bool:
        return self.type is None


__all__ = ["ResponseType", "FlashState"]
