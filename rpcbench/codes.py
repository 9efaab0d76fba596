"""Canonical status codes shared by clients and servers."""

from __future__ import annotations

import enum

__all__ = ["Code"]


class Code(enum.IntEnum):
    """An unsigned 32-bit status code."""

    OK = 0
    """Returned on success."""
    CANCELED = 1
    """The operation was cancelled, typically by the caller."""
    UNKNOWN = 2
    """An error whose kind is not known in this address space."""
    INVALID_ARGUMENT = 3
    """The client supplied an argument that is invalid regardless of state."""
    DEADLINE_EXCEEDED = 4
    """The deadline expired before the operation completed."""
    NOT_FOUND = 5
    """A requested entity was not found."""
    ALREADY_EXISTS = 6
    """The entity a caller tried to create already exists."""
    PERMISSION_DENIED = 7
    """The caller may not execute the operation."""
    RESOURCE_EXHAUSTED = 8
    """Some resource, such as a quota or disk space, is exhausted."""
    FAILED_PRECONDITION = 9
    """The system is not in the state the operation requires."""
    ABORTED = 10
    """The operation was aborted, typically by a concurrency conflict."""
    OUT_OF_RANGE = 11
    """The operation went past the valid range."""
    UNIMPLEMENTED = 12
    """The operation is not implemented or not enabled."""
    INTERNAL = 13
    """An internal invariant was broken."""
    UNAVAILABLE = 14
    """The service is unavailable; retrying with backoff may succeed."""
    DATA_LOSS = 15
    """Unrecoverable data loss or corruption."""
    UNAUTHENTICATED = 16
    """The request lacks valid authentication credentials."""

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Code.OK: "OK",
    Code.CANCELED: "Canceled",
    Code.UNKNOWN: "Unknown",
    Code.INVALID_ARGUMENT: "InvalidArgument",
    Code.DEADLINE_EXCEEDED: "DeadlineExceeded",
    Code.NOT_FOUND: "NotFound",
    Code.ALREADY_EXISTS: "AlreadyExists",
    Code.PERMISSION_DENIED: "PermissionDenied",
    Code.RESOURCE_EXHAUSTED: "ResourceExhausted",
    Code.FAILED_PRECONDITION: "FailedPrecondition",
    Code.ABORTED: "Aborted",
    Code.OUT_OF_RANGE: "OutOfRange",
    Code.UNIMPLEMENTED: "Unimplemented",
    Code.INTERNAL: "Internal",
    Code.UNAVAILABLE: "Unavailable",
    Code.DATA_LOSS: "DataLoss",
    Code.UNAUTHENTICATED: "Unauthenticated",
}