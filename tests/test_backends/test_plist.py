"""Tests for PlistBackend."""

import datetime
import logging
import plistlib

import pytest

from shared_preferences import PreferenceStore, Variant
from shared_preferences.backends import PlistBackend


@pytest.fixture
def backend(tmp_path):
    return PlistBackend(tmp_path, domain="com.example.app")


def _write_domain(backend, data):
    with backend.path.open("wb") as fh:
        plistlib.dump(data, fh, fmt=plistlib.FMT_BINARY)


def test_path_layout(tmp_path, backend):
    assert backend.path == tmp_path / "com.example.app.plist"


async def test_missing_file_is_empty(backend):
    assert await backend.entries() == {}
    assert await backend.get("k") is None
    await backend.remove("k")  # should not raise
    assert not backend.path.exists()


async def test_set_writes_binary_plist(backend):
    await backend.set("flutter.count", Variant.integer(3))
    raw = backend.path.read_bytes()
    assert raw.startswith(b"bplist00")
    assert plistlib.loads(raw) == {"flutter.count": 3}


@pytest.mark.parametrize(
    "variant",
    [
        Variant.boolean(True),
        Variant.double(0.5),
        Variant.string("s"),
        Variant.integer(-7),
        Variant.string_list(["x", "y"]),
        Variant.data(b"\x10\x20"),
    ],
)
async def test_round_trip_every_kind(backend, variant):
    await backend.set("k", variant)
    assert await backend.get("k") == variant


async def test_creates_directory(tmp_path):
    backend = PlistBackend(tmp_path / "nested" / "prefs", domain="d")
    await backend.set("k", Variant.string("v"))
    assert backend.path.exists()


async def test_foreign_types_skipped_but_preserved(backend, caplog):
    stamp = datetime.datetime(2024, 1, 1, 12, 0)
    _write_domain(
        backend,
        {"flutter.ok": "yes", "flutter.when": stamp, "NSWindow": {"w": 1}},
    )
    store = PreferenceStore(backend)

    with caplog.at_level(logging.WARNING):
        assert await store.get_all() == {"flutter.ok": "yes"}
    assert "flutter.when" in caplog.text

    await store.clear()
    with backend.path.open("rb") as fh:
        remaining = plistlib.load(fh)
    assert remaining == {"flutter.when": stamp, "NSWindow": {"w": 1}}


async def test_sees_external_writes(backend):
    await backend.set("flutter.a", Variant.string("one"))
    _write_domain(backend, {"flutter.a": "two"})
    assert await backend.get("flutter.a") == Variant.string("two")


async def test_clear_scenario(backend):
    _write_domain(backend, {"flutter.a": 1, "other.b": 2})
    await PreferenceStore(backend).clear()
    with backend.path.open("rb") as fh:
        assert plistlib.load(fh) == {"other.b": 2}


async def test_no_temp_files_left(tmp_path, backend):
    await backend.set("k", Variant.string("v"))
    await backend.set("k", Variant.string("w"))
    assert [p.name for p in tmp_path.iterdir()] == ["com.example.app.plist"]
