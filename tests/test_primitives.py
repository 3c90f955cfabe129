import pytest

from forwardsec.common.config import Config
from forwardsec.common.exceptions import (
    AuthenticationFailedError,
    EncryptionError,
    KeyImportError,
    SignatureInvalidError,
)
from forwardsec.primitives import agreement, authsym, signing
from forwardsec.primitives.rand import SeededRandom, read_random
from forwardsec.primitives.zeroize import scoped_secret, wipe

SYM_KEY = b"\x11" * Config.SYM_KEY_LEN
MAC_KEY = b"\x22" * Config.MAC_KEY_LEN


def test_shared_key_agrees_and_has_requested_length() -> None:
    a = agreement.generate_private()
    b = agreement.generate_private()
    ab = a.shared_key(b.public_key(), Config.SHARED_KEY_LEN)
    ba = b.shared_key(agreement.import_public(a.export()), Config.SHARED_KEY_LEN)
    assert ab == ba
    assert len(ab) == Config.SHARED_KEY_LEN


def test_shared_key_depends_on_salt() -> None:
    a = agreement.generate_private()
    b = agreement.generate_private().public_key()
    assert a.shared_key(b, 48, salt=b"one") != a.shared_key(b, 48, salt=b"two")


def test_import_public_rejects_wrong_length() -> None:
    with pytest.raises(KeyImportError):
        agreement.import_public(b"\x01" * 31)


def test_destroyed_key_cannot_be_used() -> None:
    key = agreement.generate_private()
    key.destroy()
    assert key.destroyed
    with pytest.raises(Exception, match="destroyed"):  # noqa: PT011
        key.export()


def test_sign_and_verify() -> None:
    key = signing.generate_private()
    signature = signing.sign(key, b"payload")
    signing.verify(key.public_key(), b"payload", signature)
    with pytest.raises(SignatureInvalidError):
        signing.verify(key.public_key(), b"payload!", signature)


def test_authsym_roundtrip() -> None:
    ct = authsym.encrypt(SYM_KEY, MAC_KEY, b"plaintext")
    assert len(ct) == len(b"plaintext") + authsym.OVERHEAD
    assert authsym.decrypt(SYM_KEY, MAC_KEY, ct) == b"plaintext"


def test_authsym_wrong_mac_key_fails() -> None:
    ct = authsym.encrypt(SYM_KEY, MAC_KEY, b"plaintext")
    with pytest.raises(AuthenticationFailedError):
        authsym.decrypt(SYM_KEY, b"\x23" * Config.MAC_KEY_LEN, ct)


def test_authsym_short_ciphertext_fails() -> None:
    with pytest.raises(AuthenticationFailedError):
        authsym.decrypt(SYM_KEY, MAC_KEY, b"\x00" * (authsym.OVERHEAD - 1))


def test_authsym_bad_key_size_is_encryption_error() -> None:
    with pytest.raises(EncryptionError):
        authsym.encrypt(b"short", MAC_KEY, b"x")


def test_authsym_rng_failure_is_encryption_error() -> None:
    with pytest.raises(EncryptionError):
        authsym.encrypt(SYM_KEY, MAC_KEY, b"x", rng=lambda n: b"")


def test_seeded_random_is_deterministic() -> None:
    first, second = SeededRandom(b"s"), SeededRandom(b"s")
    assert [first(16) for _ in range(3)] == [second(16) for _ in range(3)]
    assert first(16) != first(16)


def test_read_random_default_source() -> None:
    assert len(read_random(None, 24)) == 24


def test_scoped_secret_wipes_on_error() -> None:
    captured = []
    with pytest.raises(RuntimeError), scoped_secret(b"secret") as buffer:
        captured.append(buffer)
        raise RuntimeError
    assert captured[0] == bytearray(6)


def test_wipe_zeroes_in_place() -> None:
    buffer = bytearray(b"abc")
    wipe(buffer)
    assert buffer == bytearray(3)
