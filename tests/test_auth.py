import socket
import threading

import pytest

from forwardsec.auth import challenge, passwords
from forwardsec.common.config import Config
from forwardsec.common.exceptions import AuthenticationFailedError
from forwardsec.primitives.rand import SeededRandom


def test_challenge_is_decimal_u64() -> None:
    value = challenge.generate_challenge()
    assert value.isdigit()
    assert 0 <= int(value) < 2**64


def test_response_is_sha3_512() -> None:
    assert len(challenge.response("pw", "123")) == 64


def test_validate() -> None:
    answer = challenge.response("hunter2", "42")
    assert challenge.validate("hunter2", "42", answer)
    assert not challenge.validate("hunter3", "42", answer)
    assert not challenge.validate("hunter2", "43", answer)
    assert not challenge.validate("hunter2", "42", answer[:-1])


def _run_exchange(server_password: str, client_password: str):
    server_conn, client_conn = socket.socketpair()
    errors: dict[str, BaseException] = {}

    def serve() -> None:
        try:
            challenge.challenge_peer(server_conn, server_password)
        except AuthenticationFailedError as err:
            errors["server"] = err
        finally:
            server_conn.close()

    thread = threading.Thread(target=serve)
    thread.start()
    try:
        challenge.authenticate(client_conn, client_password)
    except AuthenticationFailedError as err:
        errors["client"] = err
    finally:
        client_conn.close()
        thread.join(timeout=5)
    return errors


def test_challenge_exchange_succeeds() -> None:
    assert _run_exchange("correct horse", "correct horse") == {}


def test_challenge_exchange_wrong_password() -> None:
    errors = _run_exchange("correct horse", "battery staple")
    assert isinstance(errors["server"], AuthenticationFailedError)
    assert isinstance(errors["client"], AuthenticationFailedError)


def test_derive_key_sizes() -> None:
    key = passwords.derive_key("secret", rng=SeededRandom(b"salt"))
    assert len(key.salt) == Config.PASSWORD_SALT_LENGTH
    assert len(key.key) == Config.PASSWORD_KEY_SIZE


def test_derive_key_with_salt_is_deterministic() -> None:
    first = passwords.derive_key_with_salt("secret", b"\x01" * 16)
    second = passwords.derive_key_with_salt("secret", b"\x01" * 16)
    assert first == second


def test_match_password() -> None:
    key = passwords.derive_key("secret")
    assert passwords.match_password("secret", key)
    assert not passwords.match_password("Secret", key)


def test_match_password_length_mismatch() -> None:
    key = passwords.derive_key("secret")
    truncated = key.model_copy(update={"key": key.key[:-1]})
    assert not passwords.match_password("secret", truncated)


def test_fresh_salts_differ() -> None:
    assert passwords.derive_key("x").salt != passwords.derive_key("x").salt


@pytest.mark.parametrize("password", ["", "ünïcødé", "a" * 1000])
def test_unusual_passwords_roundtrip(password: str) -> None:
    assert passwords.match_password(password, passwords.derive_key(password))
