"""SQLite and in-memory settings stores."""
from __future__ import annotations

import sqlite3

import pytest

from worldclock.core.settings.logic.settings_manager import InMemorySettingsManager, SettingsManager
from worldclock.core.settings.logic.settings_repository import SettingsRepository


@pytest.fixture
def store(tmp_path):
    manager = SettingsManager(SettingsRepository(tmp_path / "settings.db"))
    yield manager
    manager.close()


def test_missing_key_returns_fallback(store) -> None:
    assert store.get("ns", "key") is None
    assert store.get("ns", "key", []) == []


def test_values_round_trip_as_json(store) -> None:
    store.set("ns", "list", ["UTC", "Asia/Tokyo"])
    store.set("ns", "map", {"a": True, "b": False})
    assert store.get("ns", "list") == ["UTC", "Asia/Tokyo"]
    assert store.get("ns", "map") == {"a": True, "b": False}


def test_set_replaces_and_namespaces_are_separate(store) -> None:
    store.set("ns", "key", 1)
    store.set("ns", "key", 2)
    store.set("other", "key", 3)
    assert store.get("ns", "key") == 2
    assert store.get("other", "key") == 3


def test_delete(store) -> None:
    store.set("ns", "key", 1)
    store.delete("ns", "key")
    assert store.get("ns", "key") is None


def test_in_memory_store_copies_values() -> None:
    store = InMemorySettingsManager()
    value = ["UTC"]
    store.set("ns", "list", value)
    value.append("Asia/Tokyo")
    assert store.get("ns", "list") == ["UTC"]


def test_set_many_writes_every_key(store) -> None:
    store.set_many("ns", {"timezones": ["UTC"], "config": {"show_city_name": True}})
    assert store.get("ns", "timezones") == ["UTC"]
    assert store.get("ns", "config") == {"show_city_name": True}


def test_set_many_is_all_or_nothing(tmp_path) -> None:
    repo = SettingsRepository(tmp_path / "settings.db")
    store = SettingsManager(repo)
    store.set_many("ns", {"timezones": ["UTC"], "config": {"show_city_name": True}})

    for action in ("INSERT", "UPDATE"):
        repo.conn.execute(
            f"""
            CREATE TRIGGER reject_config_{action.lower()} BEFORE {action} ON settings
            WHEN NEW.key = 'config'
            BEGIN SELECT RAISE(ABORT, 'config is read-only'); END
            """
        )
    repo.conn.commit()

    with pytest.raises(sqlite3.Error):
        store.set_many("ns", {"timezones": ["Asia/Tokyo"], "config": {"show_city_name": False}})

    assert store.get("ns", "timezones") == ["UTC"]
    assert store.get("ns", "config") == {"show_city_name": True}
    store.close()


def test_in_memory_set_many_copies_values() -> None:
    store = InMemorySettingsManager()
    active = ["UTC"]
    store.set_many("ns", {"timezones": active})
    active.append("Asia/Tokyo")
    assert store.get("ns", "timezones") == ["UTC"]
