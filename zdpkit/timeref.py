"""Strongly typed time points and durations in milliseconds."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Union

_MS_PER_SECOND = 1000


def _millis(value: object) -> int:
    if isinstance(value, TimeMs):
        return value.val
    if isinstance(value, TimeSeconds):
        return value.val * _MS_PER_SECOND
    raise TypeError(f"not a duration: {value!r}")


class _Duration:
    """Comparison shared by durations of different units."""

    __slots__ = ()

    def _other_ms(self, other: object) -> Union[int, None]:
        if isinstance(other, (TimeMs, TimeSeconds)):
            return _millis(other)
        return None

    def __eq__(self, other: object) -> bool:
        ms = self._other_ms(other)
        if ms is None:
            return NotImplemented
        return _millis(self) == ms

    def __hash__(self) -> int:
        return hash(_millis(self))

    def __lt__(self, other: object) -> bool:
        ms = self._other_ms(other)
        if ms is None:
            return NotImplemented
        return _millis(self) < ms

    def __le__(self, other: object) -> bool:
        ms = self._other_ms(other)
        if ms is None:
            return NotImplemented
        return _millis(self) <= ms

    def __gt__(self, other: object) -> bool:
        ms = self._other_ms(other)
        if ms is None:
            return NotImplemented
        return _millis(self) > ms

    def __ge__(self, other: object) -> bool:
        ms = self._other_ms(other)
        if ms is None:
            return NotImplemented
        return _millis(self) >= ms


@dataclass(frozen=True, eq=False)
class TimeMs(_Duration):
    """A duration in milliseconds."""

    val: int = 0

    def __mul__(self, factor: int) -> TimeMs:
        if not isinstance(factor, int):
            return NotImplemented
        return TimeMs(self.val * factor)

    __rmul__ = __mul__


@dataclass(frozen=True, eq=False)
class TimeSeconds(_Duration):
    """A duration in seconds."""

    val: int = 0

    def __mul__(self, factor: int) -> TimeSeconds:
        if not isinstance(factor, int):
            return NotImplemented
        return TimeSeconds(self.val * factor)

    __rmul__ = __mul__

    def to_ms(self) -> TimeMs:
        """Return the same duration in milliseconds."""
        return TimeMs(self.val * _MS_PER_SECOND)


@dataclass(frozen=True, order=True)
class SteadyTimeRef:
    """A monotonic time point in milliseconds; zero means unset."""

    ref: int = 0

    def __add__(self, other: object) -> SteadyTimeRef:
        if isinstance(other, (TimeMs, TimeSeconds)):
            return SteadyTimeRef(self.ref + _millis(other))
        return NotImplemented

    def __sub__(self, other: object) -> TimeMs:
        if isinstance(other, SteadyTimeRef):
            return TimeMs(self.ref - other.ref)
        return NotImplemented


@dataclass(frozen=True, order=True)
class SystemTimeRef:
    """A wall clock time point in milliseconds since the epoch; zero means unset."""

    ref: int = 0


def msec_since_epoch() -> int:
    """Return milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def system_time_ref() -> SystemTimeRef:
    """Return the current system time as a time reference.

    On machines without a real time clock this may jump until the clock is synced.
    """
    return SystemTimeRef(msec_since_epoch())


def steady_time_ref() -> SteadyTimeRef:
    """Return a monotonic increasing time reference, suited to timeouts."""
    return SteadyTimeRef(time.monotonic_ns() // 1_000_000 or 1)


def is_valid(ref: Union[SteadyTimeRef, SystemTimeRef]) -> bool:
    """Return True if the time reference has been set."""
    if not isinstance(ref, (SteadyTimeRef, SystemTimeRef)):
        raise TypeError(f"not a time reference: {ref!r}")
    return ref.ref != 0