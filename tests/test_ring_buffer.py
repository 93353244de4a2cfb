"""Tests for the fixed-capacity ring buffer."""

import numpy as np
import pytest

from core.ring_buffer import RingBuffer


def test_partial_population_is_chronological():
    ring = RingBuffer(5)
    for value in (1, 2, 3):
        ring.push(value)

    assert len(ring) == 3
    assert not ring.is_full()
    assert np.allclose(ring.ordered(), [1, 2, 3])


def test_overwrite_keeps_newest_in_order():
    ring = RingBuffer(5)
    for value in range(1, 8):
        ring.push(value)

    assert ring.count == 5
    assert ring.head == 2
    assert np.allclose(ring.ordered(), [3, 4, 5, 6, 7])


def test_recent_limits_and_orders():
    ring = RingBuffer(4)
    for value in range(10):
        ring.push(value)

    assert np.allclose(ring.recent(2), [8, 9])
    assert np.allclose(ring.recent(100), [6, 7, 8, 9])
    assert ring.recent(0).size == 0


def test_storage_never_grows():
    ring = RingBuffer(3)
    storage = ring.data
    for value in range(50):
        ring.push(value)

    assert ring.data is storage
    assert ring.data.shape == (3,)


def test_fill_keeps_bookkeeping():
    ring = RingBuffer(3, fill_value=999.0)
    ring.push(1.0)
    ring.fill(0.0)

    assert np.allclose(ring.data, [0.0, 0.0, 0.0])
    assert ring.head == 1
    assert ring.count == 1


def test_empty_ring_reads():
    ring = RingBuffer(3)
    assert ring.ordered().size == 0


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError, match="capacity"):
        RingBuffer(0)
