import dataclasses

import pytest

from expiration_cache.core.models import CacheEntry, SnapshotEntry


def test_cache_entry_equality_ignores_expiration():
    a = CacheEntry(value="v", expires_at=1.0)
    b = CacheEntry(value="v", expires_at=99.0)

    assert a == b
    assert hash(a) == hash(b)
    assert a != CacheEntry(value="w", expires_at=1.0)


def test_cache_entry_expiry_is_strict():
    e = CacheEntry(value="v", expires_at=10.0)

    assert not e.is_expired(9.0)
    assert not e.is_expired(10.0)
    assert e.is_expired(10.0001)


def test_cache_entry_is_immutable():
    e = CacheEntry(value="v", expires_at=10.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.value = "w"


def test_snapshot_entry_set_value_and_unpack():
    s = SnapshotEntry(key="k", value=1)

    assert s.set_value(2) == 1
    key, value = s
    assert (key, value) == ("k", 2)


def test_snapshot_entries_compare_by_identity():
    assert SnapshotEntry(key="k", value=1) != SnapshotEntry(key="k", value=1)
    assert len({SnapshotEntry(key="k", value=1), SnapshotEntry(key="k", value=1)}) == 2
