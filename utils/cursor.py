"""Opaque cursors for cursor-paginated listings.

A cursor is the set of column values the next (or previous) page starts
from, plus a direction flag. It travels to clients as a URL-safe base64
string:

    Cursor({'date': '2024-01-01', '_id': 'abc'}).encode()
    Cursor.decode(request.args.get('cursor'))
"""
from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict, Optional

DIRECTION_KEY = '_pointsToNextItems'


class Cursor:
    def __init__(self, parameters: Optional[Dict[str, Any]] = None, points_to_next_items: bool = True):
        self.parameters = dict(parameters or {})
        self.points_to_next_items = bool(points_to_next_items)

    def parameter(self, name: str, default: Any = None) -> Any:
        return self.parameters.get(name, default)

    def points_to_previous_items(self) -> bool:
        return not self.points_to_next_items

    def to_dict(self) -> Dict[str, Any]:
        return {**self.parameters, DIRECTION_KEY: self.points_to_next_items}

    def encode(self) -> str:
        raw = json.dumps(self.to_dict(), separators=(',', ':'), default=str)
        return base64.urlsafe_b64encode(raw.encode('utf-8')).decode('ascii').rstrip('=')

    @classmethod
    def decode(cls, value: Optional[str]) -> Optional['Cursor']:
        """Rebuild a cursor from its encoded form; ``None`` if it is not one."""
        if not value:
            return None
        padded = value + '=' * (-len(value) % 4)
        try:
            decoded = json.loads(base64.urlsafe_b64decode(padded.encode('ascii')))
        except (ValueError, binascii.Error):
            return None
        if not isinstance(decoded, dict):
            return None
        points_to_next = decoded.pop(DIRECTION_KEY, True)
        return cls(decoded, bool(points_to_next))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Cursor({self.parameters!r}, points_to_next_items={self.points_to_next_items})"


__all__ = ["Cursor", "DIRECTION_KEY"]
