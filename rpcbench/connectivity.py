"""Connectivity states of a client connection and the errors of dialing."""

from __future__ import annotations

import enum

__all__ = [
    "ConnectivityState",
    "DialError",
    "UnspecifiedTargetError",
    "NoTransportSecurityError",
    "CredentialsMisuseError",
    "ClientConnClosingError",
    "ClientConnTimeoutError",
    "MIN_CONNECT_TIMEOUT",
]

MIN_CONNECT_TIMEOUT = 20.0
"""Minimum time, in seconds, given to a connection attempt to complete."""


class ConnectivityState(enum.IntEnum):
    """The state of a client connection."""

    IDLE = 0
    """The connection is idle."""
    CONNECTING = enum.auto()
    """The connection is being established."""
    READY = enum.auto()
    """The connection is ready for work."""
    TRANSIENT_FAILURE = enum.auto()
    """The connection has failed but expects to recover."""
    SHUTDOWN = enum.auto()
    """The connection has started shutting down."""

    def __str__(self) -> str:
        return self.name


class DialError(Exception):
    """Base class of the errors raised while setting up a client connection."""

    default_message = "grpc: dial failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class UnspecifiedTargetError(DialError):
    """The target address is unspecified."""

    default_message = "grpc: target is unspecified"


class NoTransportSecurityError(DialError):
    """No transport security was set and insecure mode was not requested."""

    default_message = (
        "grpc: no transport security set "
        "(use grpc.WithInsecure() explicitly or set credentials)"
    )


class CredentialsMisuseError(DialError):
    """Credentials that need a secure transport were given on an insecure one."""

    default_message = (
        "grpc: the credentials require transport level security "
        "(use grpc.WithTransportAuthenticator() to set)"
    )


class ClientConnClosingError(DialError):
    """The operation is illegal because the connection is closing."""

    default_message = "grpc: the client connection is closing"


class ClientConnTimeoutError(DialError, TimeoutError):
    """The connection could not be established within the timeout."""

    default_message = "grpc: timed out trying to connect"