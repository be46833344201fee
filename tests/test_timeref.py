import time

import pytest

from zdpkit.timeref import (
    SteadyTimeRef,
    SystemTimeRef,
    TimeMs,
    TimeSeconds,
    is_valid,
    msec_since_epoch,
    steady_time_ref,
    system_time_ref,
)


def test_default_refs_are_invalid():
    assert is_valid(SteadyTimeRef()) is False
    assert is_valid(SystemTimeRef()) is False


def test_current_refs_are_valid():
    assert is_valid(steady_time_ref()) is True
    assert is_valid(system_time_ref()) is True


def test_is_valid_rejects_other_types():
    with pytest.raises(TypeError):
        is_valid(5)


def test_steady_time_is_monotonic():
    a = steady_time_ref()
    b = steady_time_ref()
    assert a <= b
    assert (b - a) >= TimeMs(0)


def test_msec_since_epoch_matches_clock():
    before = int(time.time() * 1000)
    now = msec_since_epoch()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_system_time_ref_ordering():
    a = system_time_ref()
    later = SystemTimeRef(a.ref + 10)
    assert a < later
    assert not later < a


def test_add_ms_and_subtract_round_trip():
    start = SteadyTimeRef(5)
    end = start + TimeMs(250)
    assert end - start == TimeMs(250)
    assert start < end


def test_add_seconds_equals_add_ms():
    start = SteadyTimeRef(42)
    assert start + TimeSeconds(3) == start + TimeSeconds(3).to_ms()
    assert (start + TimeSeconds(3)) - start == TimeSeconds(3)


def test_seconds_to_ms_pinned():
    assert TimeSeconds(1).to_ms() == TimeMs(1000)


def test_mixed_comparisons():
    assert TimeSeconds(1) < TimeMs(1001)
    assert TimeMs(999) < TimeSeconds(1)
    assert not TimeSeconds(1) < TimeMs(1000)
    assert TimeSeconds(1) == TimeMs(1000)


def test_multiplication():
    assert TimeMs(7) * 3 == TimeMs(21)
    assert TimeSeconds(2) * 5 == TimeSeconds(5) * 2
    assert 3 * TimeMs(7) == TimeMs(7) * 3


def test_invalid_operands_raise():
    with pytest.raises(TypeError):
        SteadyTimeRef(1) + 5
    with pytest.raises(TypeError):
        TimeMs(1) < 5
    with pytest.raises(TypeError):
        TimeMs(1) * 1.5