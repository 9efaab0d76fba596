"""Building blocks for RPC benchmarking: status codes, backoff, histograms, statistics and dial options."""

__version__ = "0.1.0"

__all__ = [
    "backoff",
    "codes",
    "connectivity",
    "dialing",
    "histogram",
    "stats",
    "worker",
]