"""
Authenticated symmetric encryption: AES-128-CTR with an HMAC-SHA256 tag.

Ciphertext layout is ``nonce || body || tag``; the tag covers the nonce and
the body. Decryption checks the tag before decrypting anything.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from forwardsec.common.config import Config
from forwardsec.common.exceptions import (
    AuthenticationFailedError,
    EncryptionError,
    KeyGenerationError,
)
from forwardsec.common.interfaces import RandomSource
from forwardsec.primitives.rand import read_random

SYM_KEY_LEN = Config.SYM_KEY_LEN
MAC_KEY_LEN = Config.MAC_KEY_LEN
NONCE_LEN = Config.CTR_NONCE_LEN
TAG_LEN = Config.TAG_LEN
OVERHEAD = NONCE_LEN + TAG_LEN


def _check_keys(sym_key: bytes, mac_key: bytes) -> None:
    if len(sym_key) != SYM_KEY_LEN or len(mac_key) != MAC_KEY_LEN:
        msg = (
            f"expected {SYM_KEY_LEN}-byte cipher key and {MAC_KEY_LEN}-byte MAC key, "
            f"got {len(sym_key)} and {len(mac_key)}"
        )
        raise ValueError(msg)


def _tag(mac_key: bytes, data: bytes) -> hmac.HMAC:
    h = hmac.HMAC(mac_key, hashes.SHA256())
    h.update(data)
    return h


def encrypt(
    sym_key: bytes,
    mac_key: bytes,
    plaintext: bytes,
    rng: RandomSource | None = None,
) -> bytes:
    try:
        _check_keys(sym_key, mac_key)
        nonce = read_random(rng, NONCE_LEN)
        encryptor = Cipher(algorithms.AES(sym_key), modes.CTR(nonce)).encryptor()
        body = encryptor.update(plaintext) + encryptor.finalize()
    except (KeyGenerationError, TypeError, ValueError) as err:
        msg = "authenticated encryption failed"
        raise EncryptionError(msg) from err
    return nonce + body + _tag(mac_key, nonce + body).finalize()


def decrypt(sym_key: bytes, mac_key: bytes, ciphertext: bytes) -> bytes:
    _check_keys(sym_key, mac_key)
    if len(ciphertext) < OVERHEAD:
        msg = "ciphertext is too short"
        raise AuthenticationFailedError(msg)

    nonce = ciphertext[:NONCE_LEN]
    body = ciphertext[NONCE_LEN:-TAG_LEN]
    tag = ciphertext[-TAG_LEN:]
    try:
        _tag(mac_key, nonce + body).verify(tag)
    except InvalidSignature as err:
        msg = "message authentication failed"
        raise AuthenticationFailedError(msg) from err

    decryptor = Cipher(algorithms.AES(sym_key), modes.CTR(nonce)).decryptor()
    return decryptor.update(body) + decryptor.finalize()
