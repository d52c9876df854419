"""Tests for InMemoryBackend."""

import pytest

from shared_preferences import UnsupportedValueKindError, Variant
from shared_preferences.backends import InMemoryBackend


@pytest.fixture
def backend():
    return InMemoryBackend()


async def test_get_nonexistent(backend):
    assert await backend.get("key") is None


async def test_set_and_get(backend):
    await backend.set("k", Variant.string("v"))
    assert await backend.get("k") == Variant.string("v")


async def test_overwrite(backend):
    await backend.set("k", Variant.integer(1))
    await backend.set("k", Variant.integer(2))
    assert (await backend.get("k")).value == 2


async def test_remove(backend):
    await backend.set("k", Variant.boolean(True))
    await backend.remove("k")
    assert await backend.get("k") is None


async def test_remove_nonexistent(backend):
    await backend.remove("nope")  # should not raise


async def test_entries_is_snapshot(backend):
    await backend.set("a", Variant.boolean(True))
    snapshot = await backend.entries()
    await backend.set("b", Variant.boolean(False))
    assert list(snapshot) == ["a"]


def test_initial_values_classified():
    backend = InMemoryBackend(domain="d", initial={"x": b"raw"})
    assert backend.domain == "d"
    assert backend._data["x"] == Variant.data(b"raw")


def test_initial_values_rejected():
    with pytest.raises(UnsupportedValueKindError):
        InMemoryBackend(initial={"x": None})


async def test_close_is_noop(backend):
    await backend.close()
    await backend.set("k", Variant.string("still works"))


async def test_reads_do_not_share_lists(backend):
    variant = Variant.string_list(["a"])
    await backend.set("k", variant)
    variant.value.append("set-side")
    (await backend.get("k")).value.append("get-side")
    (await backend.entries())["k"].value.append("entries-side")
    assert await backend.get("k") == Variant.string_list(["a"])
