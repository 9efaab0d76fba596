"""Exponential backoff with jitter for connection retries."""

from __future__ import annotations

import dataclasses
import random

__all__ = ["BackoffConfig", "DEFAULT_BACKOFF_CONFIG", "with_defaults"]


@dataclasses.dataclass(frozen=True)
class BackoffConfig:
    """Parameters of the backoff strategy; all durations are in seconds."""

    max_delay: float = 0.0
    """Upper bound of the backoff delay."""
    base_delay: float = 0.0
    """Delay before retrying after the first failure."""
    factor: float = 0.0
    """Multiplier applied to the delay after each retry."""
    jitter: float = 0.0
    """Relative range used to randomise delays."""

    def backoff(self, retries: int) -> float:
        """Return the delay to wait after ``retries`` consecutive failures."""
        if retries == 0:
            return self.base_delay
        delay, ceiling = float(self.base_delay), float(self.max_delay)
        while delay < ceiling and retries > 0:
            delay *= self.factor
            retries -= 1
        delay = min(delay, ceiling)
        # Randomise so that clients starting together do not retry in lockstep.
        delay *= 1 + self.jitter * (random.random() * 2 - 1)
        return max(delay, 0.0)


DEFAULT_BACKOFF_CONFIG = BackoffConfig(
    max_delay=120.0,
    base_delay=1.0,
    factor=1.6,
    jitter=0.2,
)


def with_defaults(config: BackoffConfig) -> BackoffConfig:
    """Return the default configuration, keeping ``config.max_delay`` if positive."""
    if config.max_delay > 0:
        return dataclasses.replace(DEFAULT_BACKOFF_CONFIG, max_delay=config.max_delay)
    return DEFAULT_BACKOFF_CONFIG