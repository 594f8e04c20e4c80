"""Key/value session stores with per-key flash lifetimes.

Flask's session keeps every key until it is removed; ``flask.flash`` only
covers message lists. The stores here add the missing rule: a key written
with ``flash`` is readable for the rest of the current request and the
whole of the next one, and is dropped when that next request finishes.

Bookkeeping lives under a reserved ``_flash`` key:

    {"new": [keys flashed this request], "old": [keys flashed last request]}

``age_flash_data`` must run once at the end of every request (the
``Responsable`` extension wires it to ``after_request``).
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, MutableMapping, Protocol, runtime_checkable

from flask import session

logger = logging.getLogger(__name__)

FLASH_KEY = '_flash'


@runtime_checkable
class SessionStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def put(self, key: str, value: Any) -> None: ...

    def flash(self, key: str, value: Any) -> None: ...

    def forget(self, keys: Iterable[str]) -> None: ...


def _as_list(keys: Iterable[str] | str) -> List[str]:
    if isinstance(keys, str):
        return [keys]
    return list(keys)


class MappingSessionStore:
    """``SessionStore`` over any mutable mapping (a dict, ``flask.session``)."""

    def __init__(self, data: MutableMapping[str, Any] | None = None):
        self._data = data if data is not None else {}

    @property
    def data(self) -> MutableMapping[str, Any]:
        return self._data

    # ---- Flash bookkeeping ----
    def _lists(self) -> tuple[list, list]:
        state = self.data.get(FLASH_KEY) or {}
        return list(state.get('new', [])), list(state.get('old', []))

    def _save_lists(self, new: list, old: list) -> None:
        # Reassign instead of mutating so cookie sessions notice the change
        if new or old:
            self.data[FLASH_KEY] = {'new': new, 'old': old}
        else:
            self.data.pop(FLASH_KEY, None)

    # ---- Read ----
    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self.data

    # ---- Write ----
    def put(self, key: str, value: Any) -> None:
        self.data[key] = value
        new, old = self._lists()
        if key in new or key in old:
            self._save_lists([k for k in new if k != key], [k for k in old if k != key])

    def flash(self, key: str, value: Any) -> None:
        self.data[key] = value
        new, old = self._lists()
        if key not in new:
            new.append(key)
        self._save_lists(new, [k for k in old if k != key])

    def forget(self, keys: Iterable[str] | str) -> None:
        keys = _as_list(keys)
        for key in keys:
            self.data.pop(key, None)
        new, old = self._lists()
        if any(k in keys for k in new + old):
            self._save_lists([k for k in new if k not in keys], [k for k in old if k not in keys])

    # ---- Lifecycle ----
    def keep(self, keys: Iterable[str] | str | None = None) -> None:
        """Carry flashed keys from the previous request over one more request."""
        new, old = self._lists()
        kept = old if keys is None else [k for k in _as_list(keys) if k in old]
        for key in kept:
            if key not in new:
                new.append(key)
        self._save_lists(new, [k for k in old if k not in kept])

    def age_flash_data(self) -> None:
        new, old = self._lists()
        if not new and not old:
            return
        for key in old:
            self.data.pop(key, None)
        if old:
            logger.debug('session_store: expired flashed keys %s', old)
        self._save_lists([], new)


class FlaskSessionStore(MappingSessionStore):
    """``SessionStore`` bound to the current request's ``flask.session``."""

    @property
    def data(self) -> MutableMapping[str, Any]:
        return session


__all__ = [
    "FLASH_KEY",
    "SessionStore",
    "MappingSessionStore",
    "FlaskSessionStore",
]
