"""Tests for the median-of-3 RUL output filter."""

import numpy as np
import pytest

from analytics.prognostics.hysteresis import MedianHysteresis
from analytics.prognostics.rul_estimator import RUL_STABLE


def test_initial_slots_are_stable():
    filt = MedianHysteresis()
    assert np.allclose(filt.history.data, [RUL_STABLE] * 3)


def test_single_value_cannot_leave_stable():
    filt = MedianHysteresis()
    assert filt.update(40.0) == RUL_STABLE
    assert filt.update(38.0) == pytest.approx(40.0)


def test_sentinel_between_values_delays_snap():
    filt = MedianHysteresis()

    outputs = [filt.update(v) for v in (10.0, RUL_STABLE, 10.0)]

    # the sentinel floods every slot, so one fresh 10 is outvoted
    assert outputs == [RUL_STABLE, RUL_STABLE, RUL_STABLE]
    assert filt.update(10.0) == pytest.approx(10.0)


def test_failed_overrides_immediately():
    filt = MedianHysteresis()
    filt.update(30.0)
    filt.update(29.0)

    assert filt.update(0.0) == 0.0
    assert np.allclose(filt.history.data, [0.0, 0.0, 0.0])


def test_rejects_single_spike():
    filt = MedianHysteresis()
    for value in (50.0, 49.0, 48.0):
        filt.update(value)

    assert filt.update(5.0) == pytest.approx(48.0)
    assert filt.update(47.0) == pytest.approx(47.0)


def test_overwrites_oldest_slot_then_medians():
    filt = MedianHysteresis()
    for value in (10.0, 20.0, 30.0):
        filt.update(value)

    # slots now [10, 20, 30]; 40 replaces 10
    assert filt.update(40.0) == pytest.approx(30.0)
