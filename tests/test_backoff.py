from unittest import mock

import pytest

from rpcbench.backoff import DEFAULT_BACKOFF_CONFIG, BackoffConfig, with_defaults


def test_backoff_config_defaults():
    assert with_defaults(BackoffConfig()) == DEFAULT_BACKOFF_CONFIG


def test_with_defaults_keeps_positive_max_delay():
    half = DEFAULT_BACKOFF_CONFIG.max_delay / 2
    result = with_defaults(BackoffConfig(max_delay=half))
    assert result.max_delay == half
    assert result.base_delay == DEFAULT_BACKOFF_CONFIG.base_delay
    assert result.factor == DEFAULT_BACKOFF_CONFIG.factor
    assert result.jitter == DEFAULT_BACKOFF_CONFIG.jitter


def test_with_defaults_overrides_other_fields():
    result = with_defaults(BackoffConfig(max_delay=5.0, base_delay=9.0, factor=3.0))
    assert result.base_delay == DEFAULT_BACKOFF_CONFIG.base_delay
    assert result.factor == DEFAULT_BACKOFF_CONFIG.factor


def test_zero_retries_returns_base_delay():
    assert DEFAULT_BACKOFF_CONFIG.backoff(0) == DEFAULT_BACKOFF_CONFIG.base_delay


@pytest.mark.parametrize("retries", [1, 2, 5, 10])
def test_backoff_within_jitter_bounds(retries):
    cfg = DEFAULT_BACKOFF_CONFIG
    nominal = min(cfg.base_delay * cfg.factor**retries, cfg.max_delay)
    for _ in range(50):
        delay = cfg.backoff(retries)
        assert nominal * (1 - cfg.jitter) - 1e-9 <= delay <= nominal * (1 + cfg.jitter) + 1e-9


def test_backoff_capped_by_max_delay():
    cfg = DEFAULT_BACKOFF_CONFIG
    for _ in range(50):
        assert cfg.backoff(1000) <= cfg.max_delay * (1 + cfg.jitter)


def test_backoff_without_jitter_is_exact_at_cap():
    cfg = BackoffConfig(max_delay=10.0, base_delay=1.0, factor=2.0, jitter=0.0)
    assert cfg.backoff(50) == 10.0


def test_negative_backoff_clamped_to_zero():
    cfg = BackoffConfig(max_delay=10.0, base_delay=1.0, factor=2.0, jitter=2.0)
    with mock.patch("random.random", return_value=0.0):
        assert cfg.backoff(3) == 0.0