import pytest

from rpcbench.connectivity import (
    ClientConnClosingError,
    ClientConnTimeoutError,
    ConnectivityState,
    CredentialsMisuseError,
    DialError,
    NoTransportSecurityError,
    UnspecifiedTargetError,
)


@pytest.mark.parametrize(
    "state, text",
    [
        (ConnectivityState.IDLE, "IDLE"),
        (ConnectivityState.CONNECTING, "CONNECTING"),
        (ConnectivityState.READY, "READY"),
        (ConnectivityState.TRANSIENT_FAILURE, "TRANSIENT_FAILURE"),
        (ConnectivityState.SHUTDOWN, "SHUTDOWN"),
    ],
)
def test_state_string(state, text):
    assert str(state) == text


def test_states_are_ordered_consecutively_from_idle():
    states = [ConnectivityState(i) for i in range(len(ConnectivityState))]
    assert states[0] is ConnectivityState.IDLE
    assert states[-1] is ConnectivityState.SHUTDOWN
    assert states == list(ConnectivityState)


def test_unknown_state_is_rejected():
    with pytest.raises(ValueError):
        ConnectivityState(len(ConnectivityState))


@pytest.mark.parametrize(
    "error_type, message",
    [
        (UnspecifiedTargetError, "grpc: target is unspecified"),
        (ClientConnClosingError, "grpc: the client connection is closing"),
        (ClientConnTimeoutError, "grpc: timed out trying to connect"),
        (
            NoTransportSecurityError,
            "grpc: no transport security set "
            "(use grpc.WithInsecure() explicitly or set credentials)",
        ),
        (
            CredentialsMisuseError,
            "grpc: the credentials require transport level security "
            "(use grpc.WithTransportAuthenticator() to set)",
        ),
    ],
)
def test_error_default_messages(error_type, message):
    err = error_type()
    assert str(err) == message
    assert isinstance(err, DialError)


def test_error_custom_message_overrides_default():
    err = ClientConnClosingError("closing now")
    assert str(err) == "closing now"


def test_timeout_error_is_builtin_timeout():
    err = ClientConnTimeoutError()
    assert isinstance(err, TimeoutError)
    assert str(err) == "grpc: timed out trying to connect"