"""Tests for SQLiteBackend."""

import pytest

from shared_preferences import PreferenceStore, Variant
from shared_preferences.backends import SQLiteBackend


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "prefs.db")


@pytest.fixture
async def backend(db_path):
    b = SQLiteBackend(db_path, domain="com.example.app")
    yield b
    await b.close()


@pytest.mark.parametrize(
    "variant",
    [
        Variant.boolean(False),
        Variant.double(2.5),
        Variant.string("héllo"),
        Variant.integer(2**63 - 1),
        Variant.string_list(["a", "", "c"]),
        Variant.data(b"\x00\x01\xfe"),
    ],
)
async def test_round_trip_every_kind(backend, variant):
    await backend.set("k", variant)
    assert await backend.get("k") == variant


async def test_get_nonexistent(backend):
    assert await backend.get("missing") is None


async def test_remove(backend):
    await backend.set("k", Variant.integer(1))
    await backend.remove("k")
    assert await backend.get("k") is None
    await backend.remove("k")  # should not raise


async def test_entries(backend):
    await backend.set("a", Variant.integer(1))
    await backend.set("b", Variant.string("x"))
    assert await backend.entries() == {"a": Variant.integer(1), "b": Variant.string("x")}


async def test_survives_reopen(db_path):
    first = SQLiteBackend(db_path, domain="com.example.app")
    await PreferenceStore(first).set_bool("flutter.enabled", True)
    await first.close()

    second = SQLiteBackend(db_path, domain="com.example.app")
    try:
        assert await PreferenceStore(second).get_all() == {"flutter.enabled": True}
    finally:
        await second.close()


async def test_domains_are_isolated(db_path):
    a = SQLiteBackend(db_path, domain="com.example.a")
    b = SQLiteBackend(db_path, domain="com.example.b")
    try:
        await a.set("flutter.k", Variant.string("a"))
        await b.set("flutter.k", Variant.string("b"))
        await b.set("flutter.only_b", Variant.boolean(True))

        assert await a.entries() == {"flutter.k": Variant.string("a")}
        await PreferenceStore(b).clear()
        assert await a.get("flutter.k") == Variant.string("a")
        assert await b.entries() == {}
    finally:
        await a.close()
        await b.close()


async def test_in_memory_database():
    backend = SQLiteBackend(":memory:")
    await backend.set("k", Variant.double(1.0))
    assert await backend.entries() == {"k": Variant.double(1.0)}
    await backend.close()
