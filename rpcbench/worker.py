"""Benchmark worker helpers: a raw byte codec and resource path lookup."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "ByteBufCodec",
    "package_path",
    "abs_path",
    "SEARCH_PATH_ENV",
    "ROOT_PACKAGE",
    "CA_FILE",
    "CERT_FILE",
    "KEY_FILE",
]

SEARCH_PATH_ENV = "RPCBENCH_PATH"
"""Environment variable listing the roots searched for packages."""

ROOT_PACKAGE = "rpcbench"
"""Package whose directory relative resource paths are resolved against."""

CA_FILE = "benchmark/server/testdata/ca.pem"
CERT_FILE = "benchmark/server/testdata/server1.pem"
KEY_FILE = "benchmark/server/testdata/server1.key"


class ByteBufCodec:
    """Codec that passes raw bytes through without serialisation."""

    def marshal(self, value: bytes | bytearray | memoryview) -> bytes:
        """Return ``value`` as bytes; raise TypeError for anything else."""
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"failed to marshal: {value!r} is not a byte buffer")
        return bytes(value)

    def unmarshal(self, data: bytes | bytearray | memoryview) -> bytes:
        """Return ``data`` unchanged, as bytes."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"failed to unmarshal: {data!r} is not a byte buffer")
        return bytes(data)

    def __str__(self) -> str:
        return "bytebuffer"


def package_path(pkg: str) -> Path:
    """Find the directory ``<root>/src/<pkg>`` under a root in the search path.

    Raises FileNotFoundError when the search path is unset or no root holds
    such a directory.
    """
    search_path = os.environ.get(SEARCH_PATH_ENV, "")
    if not search_path:
        raise FileNotFoundError(f"{SEARCH_PATH_ENV} is not set")
    for root in search_path.split(os.pathsep):
        candidate = Path(root, "src", *pkg.split("/"))
        try:
            is_dir = candidate.stat() and candidate.is_dir()
        except FileNotFoundError:
            continue
        if is_dir:
            return candidate
    raise FileNotFoundError(f"package {pkg!r} not found in {SEARCH_PATH_ENV}")


def abs_path(rel: str) -> Path:
    """Resolve ``rel`` against the root package directory unless already absolute."""
    path = Path(rel)
    if path.is_absolute():
        return path
    return package_path(ROOT_PACKAGE) / path