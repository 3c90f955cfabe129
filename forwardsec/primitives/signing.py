"""
Ed25519 signing and verification for long-term identities.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from forwardsec.common.exceptions import (
    KeyGenerationError,
    MalformedIdentityError,
    SignatureInvalidError,
    SigningError,
)
from forwardsec.common.interfaces import RandomSource
from forwardsec.primitives.rand import read_random
from forwardsec.primitives.zeroize import scoped_secret

SEED_LEN = 32


def generate_private(rng: RandomSource | None = None) -> Ed25519PrivateKey:
    with scoped_secret(read_random(rng, SEED_LEN)) as seed:
        try:
            return Ed25519PrivateKey.from_private_bytes(bytes(seed))
        except ValueError as err:
            msg = "could not build an identity key"
            raise KeyGenerationError(msg) from err


def sign(private_key: Ed25519PrivateKey, data: bytes) -> bytes:
    try:
        return private_key.sign(data)
    except (TypeError, ValueError) as err:
        msg = "identity key failed to sign"
        raise SigningError(msg) from err


def verify(public_key: Ed25519PublicKey, data: bytes, signature: bytes) -> None:
    """Raise SignatureInvalidError unless ``signature`` is valid for ``data``."""
    try:
        public_key.verify(signature, data)
    except InvalidSignature as err:
        msg = "signature verification failed"
        raise SignatureInvalidError(msg) from err


def export_public(public_key: Ed25519PublicKey) -> bytes:
    """Encode as DER SubjectPublicKeyInfo."""
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def import_public(data: bytes) -> Ed25519PublicKey:
    if not data or not isinstance(data, (bytes, bytearray)):
        msg = "empty or non-bytes identity export"
        raise MalformedIdentityError(msg)
    try:
        key = serialization.load_der_public_key(bytes(data))
    except (ValueError, UnsupportedAlgorithm) as err:
        msg = "identity export could not be decoded"
        raise MalformedIdentityError(msg) from err
    if not isinstance(key, Ed25519PublicKey):
        msg = f"identity key must be Ed25519, got {type(key).__name__}"
        raise MalformedIdentityError(msg)
    return key
