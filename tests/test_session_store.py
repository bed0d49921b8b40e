from __future__ import annotations

import json

import pytest

from shortlink_client.session_store import FileSessionStore, MemorySessionStore, SessionStoreError


def test_memory_store_round_trip():
    store = MemorySessionStore()
    store.set_session("abc", is_admin=True)

    assert store.get_token() == "abc"
    assert store.is_admin() is True

    store.clear()
    assert store.get_token() is None
    assert store.is_admin() is False


def test_file_store_missing_file_means_signed_out(tmp_path):
    store = FileSessionStore(str(tmp_path / "nested" / "session.json"))

    assert store.get_token() is None
    assert store.is_admin() is False


def test_file_store_persists_under_fixed_keys(tmp_path):
    path = tmp_path / "session.json"
    FileSessionStore(str(path)).set_session("abc", is_admin=False)

    assert json.loads(path.read_text(encoding="utf-8")) == {"token": "abc", "is_admin": "false"}
    assert FileSessionStore(str(path)).get_token() == "abc"


def test_file_store_clear_removes_both_keys(tmp_path):
    path = tmp_path / "session.json"
    store = FileSessionStore(str(path))
    store.set_session("abc", is_admin=True)

    store.clear()
    store.clear()

    assert json.loads(path.read_text(encoding="utf-8")) == {}
    assert store.get_token() is None


def test_file_store_corrupted_read_raises(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(SessionStoreError):
        FileSessionStore(str(path)).get_token()


def test_file_store_login_overwrites_corrupted_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("[1, 2]", encoding="utf-8")
    store = FileSessionStore(str(path))

    store.set_session("fresh")

    assert store.get_token() == "fresh"
