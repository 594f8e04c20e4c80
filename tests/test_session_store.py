"""Flash lifetimes on the mapping-backed session store."""
from __future__ import annotations

from utils.session_store import FLASH_KEY, MappingSessionStore, SessionStore


def test_store_satisfies_protocol(store):
    assert isinstance(store, SessionStore)


def test_flashed_key_survives_one_boundary(store):
    store.flash("message", "hi")
    store.age_flash_data()  # end of the writing request
    assert store.get("message") == "hi"
    store.age_flash_data()  # end of the reading request
    assert store.get("message") is None
    assert FLASH_KEY not in store.data


def test_put_key_never_expires(store):
    store.put("message", "hi")
    for _ in range(3):
        store.age_flash_data()
    assert store.get("message") == "hi"


def test_put_overrides_pending_flash(store):
    store.flash("message", "temporary")
    store.put("message", "durable")
    store.age_flash_data()
    store.age_flash_data()
    assert store.get("message") == "durable"


def test_reflash_resets_lifetime(store):
    store.flash("code", 200)
    store.age_flash_data()
    store.flash("code", 201)
    store.age_flash_data()
    assert store.get("code") == 201


def test_forget_removes_values_and_bookkeeping(store):
    store.flash("a", 1)
    store.put("b", 2)
    store.forget(["a", "b", "missing"])
    assert store.data == {}


def test_forget_single_key_string(store):
    store.put("message", "x")
    store.forget("message")
    assert not store.has("message")


def test_keep_extends_flash_by_one_request(store):
    store.flash("message", "hi")
    store.age_flash_data()
    store.keep()
    store.age_flash_data()
    assert store.get("message") == "hi"
    store.age_flash_data()
    assert store.get("message") is None


def test_keep_selected_keys_only(store):
    store.flash("a", 1)
    store.flash("b", 2)
    store.age_flash_data()
    store.keep(["a"])
    store.age_flash_data()
    assert store.get("a") == 1
    assert store.get("b") is None


def test_aging_empty_store_is_noop():
    data = {"unrelated": True}
    MappingSessionStore(data).age_flash_data()
    assert data == {"unrelated": True}
