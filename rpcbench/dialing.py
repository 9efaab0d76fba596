"""Options that configure how a client connection is dialed."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Protocol, runtime_checkable

from rpcbench.backoff import DEFAULT_BACKOFF_CONFIG, BackoffConfig, with_defaults
from rpcbench.connectivity import CredentialsMisuseError, NoTransportSecurityError

__all__ = [
    "BackoffStrategy",
    "Credentials",
    "TransportCredentials",
    "DialOptions",
    "DialOption",
    "with_codec",
    "with_compressor",
    "with_decompressor",
    "with_backoff_max_delay",
    "with_backoff_config",
    "with_block",
    "with_insecure",
    "with_transport_credentials",
    "with_per_rpc_credentials",
    "with_timeout",
    "with_dialer",
    "with_user_agent",
    "build_dial_options",
    "authority_of",
]


@runtime_checkable
class BackoffStrategy(Protocol):
    """Gives the delay to wait after a number of consecutive failures."""

    def backoff(self, retries: int) -> float: ...


@runtime_checkable
class Credentials(Protocol):
    """Credentials attached to a connection or to each call."""

    def require_transport_security(self) -> bool: ...


@runtime_checkable
class TransportCredentials(Protocol):
    """Connection-level security, such as TLS."""

    def require_transport_security(self) -> bool: ...

    def client_handshake(self, *args: Any, **kwargs: Any) -> Any: ...


@dataclasses.dataclass
class DialOptions:
    """Settings of a dial, filled in by the dial options passed to it."""

    codec: Any = None
    compressor: Any = None
    decompressor: Any = None
    backoff: BackoffStrategy | None = None
    block: bool = False
    insecure: bool = False
    auth_options: list[Credentials] = dataclasses.field(default_factory=list)
    timeout: float = 0.0
    """Dial timeout in seconds; zero means no timeout."""
    dialer: Callable[[str, float], Any] | None = None
    user_agent: str = ""


DialOption = Callable[[DialOptions], None]


def with_codec(codec: Any) -> DialOption:
    """Set the codec used to marshal and unmarshal messages."""

    def apply(options: DialOptions) -> None:
        options.codec = codec

    return apply


def with_compressor(compressor: Any) -> DialOption:
    """Set the compressor for outgoing messages."""

    def apply(options: DialOptions) -> None:
        options.compressor = compressor

    return apply


def with_decompressor(decompressor: Any) -> DialOption:
    """Set the decompressor for incoming messages."""

    def apply(options: DialOptions) -> None:
        options.decompressor = decompressor

    return apply


def with_backoff_max_delay(max_delay: float) -> DialOption:
    """Use the default backoff with the given maximum delay in seconds."""
    return with_backoff_config(BackoffConfig(max_delay=max_delay))


def with_backoff_config(config: BackoffConfig) -> DialOption:
    """Use ``config`` for backoff, with the fixed parameters taken from the defaults."""
    return _with_backoff(with_defaults(config))


def _with_backoff(strategy: BackoffStrategy) -> DialOption:
    def apply(options: DialOptions) -> None:
        options.backoff = strategy

    return apply


def with_block() -> DialOption:
    """Make dialing wait until the underlying connection is up."""

    def apply(options: DialOptions) -> None:
        options.block = True

    return apply


def with_insecure() -> DialOption:
    """Disable transport security."""

    def apply(options: DialOptions) -> None:
        options.insecure = True

    return apply


def with_transport_credentials(creds: TransportCredentials) -> DialOption:
    """Add connection-level security credentials."""

    def apply(options: DialOptions) -> None:
        options.auth_options.append(creds)

    return apply


def with_per_rpc_credentials(creds: Credentials) -> DialOption:
    """Add credentials that place auth state on each outbound call."""

    def apply(options: DialOptions) -> None:
        options.auth_options.append(creds)

    return apply


def with_timeout(timeout: float) -> DialOption:
    """Set the timeout, in seconds, for dialing the connection."""

    def apply(options: DialOptions) -> None:
        options.timeout = timeout

    return apply


def with_dialer(dialer: Callable[[str, float], Any]) -> DialOption:
    """Set the function used to dial network addresses."""

    def apply(options: DialOptions) -> None:
        options.dialer = dialer

    return apply


def with_user_agent(user_agent: str) -> DialOption:
    """Set the user agent string sent with every call."""

    def apply(options: DialOptions) -> None:
        options.user_agent = user_agent

    return apply


def _check_security(options: DialOptions) -> None:
    if not options.insecure:
        if not any(isinstance(cred, TransportCredentials) for cred in options.auth_options):
            raise NoTransportSecurityError()
    elif any(cred.require_transport_security() for cred in options.auth_options):
        raise CredentialsMisuseError()


def build_dial_options(*args: DialOption) -> DialOptions:
    """Apply dial options in order, fill in defaults and check the security setup.

    Raises NoTransportSecurityError when neither transport credentials nor
    insecure mode were given, and CredentialsMisuseError when credentials
    that need a secure transport are used in insecure mode.
    """
    options = DialOptions()
    for option in args:
        option(options)
    if options.backoff is None:
        options.backoff = DEFAULT_BACKOFF_CONFIG
    _check_security(options)
    return options


def authority_of(target: str) -> str:
    """Return the part of ``target`` before its last colon, or all of it."""
    host, sep, _ = target.rpartition(":")
    return host if sep else target