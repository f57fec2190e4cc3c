"""Tests for the shared allocation cell.

Critical Invariants:
- Holder counts never go negative
- Allocation ids are unique
- Counts stay exact under concurrent clone/drop
"""

import gc
import threading

import pytest

from cowshare import Allocation, AllocationError, SharedValue


@pytest.fixture
def allocation():
    """Allocation with no holders yet."""
    return Allocation([1, 2, 3])


def test_new_allocation_has_no_holders(allocation):
    assert allocation.ref_count == 0
    assert not allocation.is_alive()


def test_acquire_and_release(allocation):
    assert allocation.acquire() == 1
    assert allocation.acquire() == 2
    assert allocation.release() == 1
    assert allocation.is_alive()
    assert allocation.release() == 0
    assert not allocation.is_alive()


def test_release_without_holders_raises(allocation):
    """CRITICAL: over-release must fail loudly.

    Why: A negative count would hide a double release.
    """
    with pytest.raises(AllocationError, match="no holders left"):
        allocation.release()


def test_allocation_ids_are_unique():
    ids = {Allocation(None).allocation_id for _ in range(100)}

    assert len(ids) == 100


def test_value_is_stored_as_is(allocation):
    payload = {"a": 1}

    assert Allocation(payload).value is payload


def test_repr(allocation):
    allocation.acquire()

    assert repr(allocation) == f"Allocation(id={allocation.allocation_id}, refs=1)"


def test_concurrent_clone_and_drop_keeps_count_exact():
    """Clones made and dropped from many threads leave only the source holding."""
    source = SharedValue({"shared": True})
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for _ in range(200):
            clones = [source.clone() for _ in range(5)]
            assert all(c.shares_with(source) for c in clones)
            del clones

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    gc.collect()

    assert source.ref_count == 1


def test_concurrent_reads_see_original_value_while_clones_diverge():
    source = SharedValue([0, 1, 2])
    seen: list[list[int]] = []
    lock = threading.Lock()

    def writer(n):
        handle = source.clone()
        handle.update(lambda val: val.append(n))

    def reader():
        for _ in range(100):
            value = source.get()
            with lock:
                seen.append(list(value))

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(value == [0, 1, 2] for value in seen)
    assert source == [0, 1, 2]
