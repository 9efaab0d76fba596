"""Histogram with exponentially growing bucket sizes."""

from __future__ import annotations

import dataclasses
import io
import math
from typing import TextIO

__all__ = ["HistogramOptions", "HistogramBucket", "Histogram"]

_MAX_INT64 = 2**63 - 1
_MIN_INT64 = -(2**63)
_BAR_SCALE = 0.1


@dataclasses.dataclass(frozen=True)
class HistogramOptions:
    """Parameters that define a histogram's buckets.

    Bucket 0 holds ``[min, min + n)`` with ``n = base_bucket_size``; bucket
    ``i >= 1`` holds ``[min + n * m**(i-1), min + n * m**i)`` with
    ``m = 1 + growth_factor``.
    """

    num_buckets: int = 0
    growth_factor: float = 0.0
    base_bucket_size: float = 0.0
    min_value: int = 0


@dataclasses.dataclass
class HistogramBucket:
    """One bucket: its lower bound and how many values fell in it."""

    low_bound: float
    count: int = 0


class Histogram:
    """Accumulates integer values into exponentially sized buckets."""

    def __init__(self, opts: HistogramOptions) -> None:
        if opts.num_buckets == 0:
            opts = dataclasses.replace(opts, num_buckets=32)
        if opts.base_bucket_size == 0.0:
            opts = dataclasses.replace(opts, base_bucket_size=1.0)
        self.opts = opts
        self._log_base_bucket_size = math.log(opts.base_bucket_size)
        log_growth = math.log(1 + opts.growth_factor)
        self._inv_log_growth = 1 / log_growth if log_growth != 0 else math.inf

        self.count = 0
        self.sum = 0
        self.sum_of_squares = 0
        self.min = _MAX_INT64
        self.max = _MIN_INT64

        multiplier = 1.0 + opts.growth_factor
        delta = opts.base_bucket_size
        self.buckets = [HistogramBucket(float(opts.min_value))]
        for _ in range(1, opts.num_buckets):
            self.buckets.append(HistogramBucket(float(opts.min_value) + delta))
            delta *= multiplier

    def add(self, value: int) -> None:
        """Add a value; raise ValueError if no bucket can hold it."""
        bucket = self._find_bucket(value)
        self.buckets[bucket].count += 1
        self.count += 1
        self.sum += value
        self.sum_of_squares += value * value
        self.min = min(self.min, value)
        self.max = max(self.max, value)

    def _find_bucket(self, value: int) -> int:
        delta = float(value - self.opts.min_value)
        index = 0
        if delta >= self.opts.base_bucket_size:
            position = (math.log(delta) - self._log_base_bucket_size) * self._inv_log_growth + 1
            if not math.isfinite(position):
                raise ValueError(f"no bucket for value: {value}")
            index = int(position)
        if index >= len(self.buckets):
            raise ValueError(f"no bucket for value: {value}")
        return index

    def clear(self) -> None:
        """Reset all accumulated content."""
        self.count = 0
        self.sum = 0
        self.sum_of_squares = 0
        self.min = _MAX_INT64
        self.max = _MIN_INT64
        for bucket in self.buckets:
            bucket.count = 0

    def merge(self, other: Histogram) -> None:
        """Merge ``other``, which must have been built with equal options."""
        if self.opts != other.opts:
            raise ValueError("failed to merge histograms, created by inequivalent options")
        self.count += other.count
        self.sum += other.sum
        self.sum_of_squares += other.sum_of_squares
        self.min = min(self.min, other.min)
        self.max = max(self.max, other.max)
        for mine, theirs in zip(self.buckets, other.buckets):
            mine.count += theirs.count

    def write(self, out: TextIO) -> None:
        """Write a textual rendering of the histogram to ``out``."""
        avg = "NaN" if self.count == 0 else f"{self.sum / self.count:.2f}"
        out.write(f"Count: {self.count}  Min: {self.min}  Max: {self.max}  Avg: {avg}\n")
        out.write("-" * 60 + "\n")
        if self.count <= 0:
            return

        bound_width = max(len(f"{self.buckets[-1].low_bound:.6f}"), len("inf"))
        count_width = len(str(self.count))
        percent_multi = 100 / self.count

        accumulated = 0
        upper_bounds = [f"{b.low_bound:{bound_width}.6f}" for b in self.buckets[1:]]
        upper_bounds.append(f"{'inf':>{bound_width}}")
        for bucket, upper in zip(self.buckets, upper_bounds):
            accumulated += bucket.count
            bar_length = int(bucket.count * percent_multi * _BAR_SCALE + 0.5)
            out.write(
                f"[{bucket.low_bound:{bound_width}.6f}, {upper})"
                f"  {bucket.count:{count_width}d}"
                f"  {bucket.count * percent_multi:5.1f}%"
                f"  {accumulated * percent_multi:5.1f}%"
                f"  {'#' * bar_length}\n"
            )

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()