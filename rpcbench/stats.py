"""Latency statistics gathered during a benchmark and rendered as a histogram."""

from __future__ import annotations

import io
import math
from typing import TextIO

from rpcbench.histogram import Histogram, HistogramOptions

__all__ = ["Stats"]

_DEFAULT_NUM_BUCKETS = 16
_MAX_INT64 = 2**63 - 1

# Candidate display units, in nanoseconds, from smallest to largest.
_UNITS = (
    (1, "ns"),
    (1_000, "µs"),
    (1_000_000, "ms"),
    (1_000_000_000, "s"),
)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _growth_factor(span: int, num_buckets: int) -> float:
    """Growth factor making the last bounded bucket start at ``span``."""
    exponent_base = num_buckets - 2
    if exponent_base == 0:
        power = math.pow(float(span), math.inf)
    elif span == 0 and exponent_base < 0:
        power = math.inf
    else:
        power = math.pow(float(span), 1 / exponent_base)
    return power - 1


class Stats:
    """Collects per-operation durations in nanoseconds. Not thread safe."""

    def __init__(self, num_buckets: int = _DEFAULT_NUM_BUCKETS) -> None:
        if num_buckets <= 0:
            num_buckets = _DEFAULT_NUM_BUCKETS
        # One more bucket for the last, unbounded one.
        self._num_buckets = num_buckets + 1
        self._durations: list[int] = []
        self._histogram: Histogram | None = None
        self._unit = _UNITS[0]
        self._dirty = False

    def add(self, duration_ns: int) -> None:
        """Record the elapsed time of one operation, in nanoseconds."""
        self._durations.append(int(duration_ns))
        self._dirty = True

    def clear(self) -> None:
        """Remove all recorded values."""
        self._durations.clear()
        self._histogram = None
        self._dirty = False

    def _maybe_update(self) -> None:
        if not self._dirty:
            return

        low = min(_MAX_INT64, *self._durations) if self._durations else _MAX_INT64
        high = max(0, *self._durations) if self._durations else 0

        # Use the largest unit that can still represent the minimum duration.
        unit = _UNITS[0]
        for candidate in _UNITS[1:]:
            if low <= candidate[0]:
                break
            unit = candidate
        size = unit[0]

        low = _trunc_div(low, size)
        high = _trunc_div(high, size)
        num_buckets = min(self._num_buckets, high - low + 1)
        histogram = Histogram(
            HistogramOptions(
                num_buckets=num_buckets,
                growth_factor=_growth_factor(high - low, num_buckets),
                base_bucket_size=1.0,
                min_value=low,
            )
        )
        for duration in self._durations:
            try:
                histogram.add(_trunc_div(duration, size))
            except ValueError:
                # A value without a bucket is left out of the rendering.
                pass

        self._unit = unit
        self._histogram = histogram
        self._dirty = False

    def write(self, out: TextIO) -> None:
        """Write a textual rendering of the statistics to ``out``."""
        self._maybe_update()
        if self._histogram is None:
            out.write("Histogram (empty)\n")
            return
        out.write(f"Histogram (unit: {self._unit[1]})\n")
        self._histogram.write(out)

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()