"""Pagination descriptors attached to list responses as ``meta``.

Three shapes are supported and the caller picks one explicitly through the
``kind`` tag:

- ``length_aware``: offset pages where the total row count is known
- ``simple``: offset pages without a total (only "is there more?")
- ``cursor``: keyset pages addressed by opaque cursors

Each model renders its own ``meta`` block; the tag itself never leaks into
the response.
"""
from __future__ import annotations

import math
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from utils.cursor import Cursor


class _Page(BaseModel):
    model_config = {'extra': 'forbid', 'frozen': True}

    def meta(self) -> Dict[str, Any]:
        return self.model_dump(exclude={'kind'})


class LengthAwarePage(_Page):
    kind: Literal['length_aware'] = 'length_aware'
    total: int = Field(..., ge=0)
    per_page: int = Field(..., gt=0)
    current_page: int = Field(..., ge=1)
    last_page: int = Field(..., ge=1)
    # None on an empty page
    first_item_index: Optional[int] = None
    last_item_index: Optional[int] = None

    @classmethod
    def build(cls, total: int, per_page: int, current_page: int = 1, count: int | None = None) -> 'LengthAwarePage':
        """Describe page ``current_page`` of ``total`` rows.

        ``count`` is the number of rows actually on the page; when omitted it
        is derived from the totals.
        """
        if per_page <= 0:
            # let the per_page constraint report it
            return cls(total=total, per_page=per_page, current_page=current_page, last_page=1)
        last_page = max(math.ceil(total / per_page), 1)
        if count is None:
            count = max(0, min(per_page, total - (current_page - 1) * per_page))
        first_item = last_item = None
        if count > 0:
            first_item = (current_page - 1) * per_page + 1
            last_item = first_item + count - 1
        return cls(
            total=total,
            per_page=per_page,
            current_page=current_page,
            last_page=last_page,
            first_item_index=first_item,
            last_item_index=last_item,
        )


class SimplePage(_Page):
    kind: Literal['simple'] = 'simple'
    per_page: int = Field(..., gt=0)
    current_page: int = Field(..., ge=1)
    has_more_pages: bool = False

    @classmethod
    def build(cls, per_page: int, current_page: int = 1, has_more_pages: bool = False) -> 'SimplePage':
        return cls(per_page=per_page, current_page=current_page, has_more_pages=has_more_pages)


class CursorPage(_Page):
    kind: Literal['cursor'] = 'cursor'
    per_page: int = Field(..., gt=0)
    has_more_pages: bool = False
    next_cursor: Optional[str] = None
    prev_cursor: Optional[str] = None

    @field_validator('next_cursor', 'prev_cursor', mode='before')
    @classmethod
    def _encode_cursor(cls, v):
        if isinstance(v, Cursor):
            return v.encode()
        return v or None

    @classmethod
    def build(
        cls,
        per_page: int,
        has_more_pages: bool = False,
        next_cursor: Cursor | str | None = None,
        prev_cursor: Cursor | str | None = None,
    ) -> 'CursorPage':
        return cls(
            per_page=per_page,
            has_more_pages=has_more_pages,
            next_cursor=next_cursor,
            prev_cursor=prev_cursor,
        )


PaginationDescriptor = Annotated[
    Union[LengthAwarePage, SimplePage, CursorPage],
    Field(discriminator='kind'),
]

_descriptor_adapter: TypeAdapter = TypeAdapter(PaginationDescriptor)


def as_pagination(value: Any) -> Union[LengthAwarePage, SimplePage, CursorPage]:
    """Accept a page model or a mapping tagged with ``kind``.

    Raises ``pydantic.ValidationError`` for anything else.
    """
    if isinstance(value, (LengthAwarePage, SimplePage, CursorPage)):
        return value
    return _descriptor_adapter.validate_python(value)


__all__ = [
    "LengthAwarePage",
    "SimplePage",
    "CursorPage",
    "PaginationDescriptor",
    "as_pagination",
]
