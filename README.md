# rpcbench

Small building blocks for measuring and tuning RPC clients and servers. It
has no runtime dependencies.

- `rpcbench.codes`: the canonical RPC status codes as an `IntEnum`
  (`Code`). `str(Code.INVALID_ARGUMENT)` gives `"InvalidArgument"`.
- `rpcbench.backoff`: exponential connection backoff with jitter
  (`BackoffConfig`, `DEFAULT_BACKOFF_CONFIG`, `with_defaults`).
- `rpcbench.histogram`: histograms with exponentially growing buckets
  (`Histogram`, `HistogramOptions`, `HistogramBucket`).
- `rpcbench.stats`: records raw durations in nanoseconds and renders them as
  a histogram in a suitable time unit (`Stats`).
- `rpcbench.worker`: a pass-through byte codec (`ByteBufCodec`) and helpers
  that find files relative to a package directory (`package_path`,
  `abs_path`).
- `rpcbench.connectivity`: connection states (`ConnectivityState`) and the
  errors of dialing (`DialError` and its subclasses).
- `rpcbench.dialing`: composable dial options (`with_timeout`,
  `with_insecure`, `with_backoff_config`, …), collected into `DialOptions` by
  `build_dial_options`, and `authority_of`, which derives the authority from
  a target.

## Installation

```
pip install rpcbench
```

Python 3.10 or later is required.

## Collecting latency statistics

```python
from rpcbench.stats import Stats

stats = Stats(16)
for duration_ns in (1_200_000, 1_500_000, 2_300_000, 9_800_000):
    stats.add(duration_ns)

print(stats)
```

The output begins with `Histogram (unit: ms)`. The unit is the largest of
`ns`, `µs`, `ms` and `s` that the smallest duration exceeds. Next come the
count, minimum, maximum and average, then one line per bucket. Each bucket
line shows the bucket's range, its count, its percentage, the cumulative
percentage and a bar. A `Stats` with nothing recorded prints
`Histogram (empty)`.

`Stats.write(out)` writes the same text to any writable text stream.
`Stats.clear()` discards everything recorded. A `num_buckets` of zero or less
falls back to 16.

## Histograms

`Histogram(opts)` takes a `HistogramOptions` with these fields:

- `num_buckets`: defaults to 32 when zero.
- `growth_factor`: how much larger each bucket is than the one before.
- `base_bucket_size`: the size of the first bucket; defaults to 1.0 when zero.
- `min_value`: the lowest value the histogram covers.

`add(value)` records a value. It raises `ValueError` when no bucket can hold
the value.

`merge(other)` combines two histograms. It raises `ValueError` unless both
were built from equal options.

`clear()` resets the counts. `write(out)` and `str()` render the histogram as
text.

## Backoff

```python
from rpcbench.backoff import BackoffConfig, with_defaults

config = with_defaults(BackoffConfig(max_delay=30.0))
delay = config.backoff(3)   # seconds to wait after three failures
```

`backoff(0)` returns the base delay. After that, the delay is multiplied by
the factor once per retry, capped at `max_delay`, and given random jitter.
`with_defaults` returns `DEFAULT_BACKOFF_CONFIG`, which has a 1 s base delay,
a factor of 1.6, a jitter of 0.2 and a maximum of 120 s. When the given
configuration has a positive `max_delay`, that value replaces the default
maximum.

## Dial options

```python
from rpcbench.dialing import (
    authority_of,
    build_dial_options,
    with_block,
    with_insecure,
    with_timeout,
)

options = build_dial_options(with_insecure(), with_block(), with_timeout(5.0))
print(authority_of("localhost:50051"))   # localhost
```

Options are applied in order. When no backoff is given, the default backoff
configuration is used.

`build_dial_options` raises one of two errors from `rpcbench.connectivity`:

- `NoTransportSecurityError` when neither transport credentials nor
  `with_insecure()` were given.
- `CredentialsMisuseError` when `with_insecure()` is combined with
  credentials whose `require_transport_security()` returns true.

`ClientConnTimeoutError` is also a `TimeoutError`.

## Locating resource files

`package_path(pkg)` looks for `<root>/src/<pkg>` under each root listed in
the `RPCBENCH_PATH` environment variable, using the platform's path
separator. It raises `FileNotFoundError` when the variable is unset or no
root holds the directory.

`abs_path(rel)` returns an absolute path unchanged. It resolves a relative
path against the `rpcbench` package directory found this way.

## What this package does not do

The package does not carry RPCs. It has no network transport, no connection
that dials or reconnects, and no benchmark client, server or worker service.
It offers no command-line program.

- `DialOptions` only records settings and checks them.
- `ConnectivityState` and the dialing errors are definitions for code that
  manages connections.
- `with_block()`, `with_dialer()`, `with_timeout()` and `with_user_agent()`
  only record their values; nothing here acts on them.

## Running the tests

```
pip install "rpcbench[test]"
pytest
```