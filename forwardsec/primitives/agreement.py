"""
X25519 key agreement.

Shared secrets are expanded with HKDF-SHA256 to whatever fixed length the
caller asks for, and are handed back as a ``bytearray`` the caller is
expected to wipe.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric.x25519 import (
    X25519PrivateKey,
    X25519PublicKey,
)
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from forwardsec.common.config import Config
from forwardsec.common.exceptions import (
    InvariantViolation,
    KeyAgreementError,
    KeyGenerationError,
    KeyImportError,
)
from forwardsec.common.interfaces import RandomSource
from forwardsec.primitives.rand import read_random
from forwardsec.primitives.zeroize import scoped_secret

logger = logging.getLogger(__name__)


def _raw_public(key: X25519PublicKey) -> bytes:
    return key.public_bytes(
        serialization.Encoding.Raw,
        serialization.PublicFormat.Raw,
    )


class AgreementPublicKey:
    """A peer's agreement public value."""

    __slots__ = ("_key",)

    def __init__(self, key: X25519PublicKey) -> None:
        self._key = key

    @property
    def key(self) -> X25519PublicKey:
        return self._key

    def export(self) -> bytes:
        return _raw_public(self._key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AgreementPublicKey):
            return NotImplemented
        return self.export() == other.export()

    def __hash__(self) -> int:
        return hash(self.export())


class AgreementPrivateKey:
    """An agreement key pair with exclusively owned private value."""

    __slots__ = ("_key",)

    def __init__(self, key: X25519PrivateKey) -> None:
        self._key: X25519PrivateKey | None = key

    @classmethod
    def generate(cls, rng: RandomSource | None = None) -> AgreementPrivateKey:
        with scoped_secret(read_random(rng, Config.AGREEMENT_KEY_LEN)) as seed:
            try:
                key = X25519PrivateKey.from_private_bytes(bytes(seed))
            except ValueError as err:
                msg = "could not build an agreement key"
                raise KeyGenerationError(msg) from err
        return cls(key)

    @property
    def destroyed(self) -> bool:
        return self._key is None

    def _live_key(self) -> X25519PrivateKey:
        if self._key is None:
            msg = "agreement key has been destroyed"
            raise InvariantViolation(msg)
        return self._key

    def public_key(self) -> AgreementPublicKey:
        return AgreementPublicKey(self._live_key().public_key())

    def export(self) -> bytes:
        """Return the encoded public value."""
        return _raw_public(self._live_key().public_key())

    def shared_key(
        self, peer: AgreementPublicKey, length: int, salt: bytes | None = None
    ) -> bytearray:
        """Derive ``length`` bytes shared with ``peer``.

        The output is deterministic for a given pair of keys and salt.
        """
        try:
            raw = self._live_key().exchange(peer.key)
        except ValueError as err:
            msg = "peer agreement value is not valid for the group"
            raise KeyAgreementError(msg) from err
        with scoped_secret(raw) as secret:
            try:
                derived = HKDF(
                    algorithm=hashes.SHA256(),
                    length=length,
                    salt=salt,
                    info=Config.AGREEMENT_INFO,
                ).derive(bytes(secret))
            except ValueError as err:
                msg = f"cannot derive {length} bytes of shared secret"
                raise KeyAgreementError(msg) from err
        return bytearray(derived)

    def destroy(self) -> None:
        """Drop the private value. Later use raises InvariantViolation."""
        self._key = None


def generate_private(rng: RandomSource | None = None) -> AgreementPrivateKey:
    return AgreementPrivateKey.generate(rng)


def import_public(data: bytes) -> AgreementPublicKey:
    """Decode an exported agreement public value."""
    if not isinstance(data, (bytes, bytearray)):
        msg = "agreement public value must be bytes"
        raise KeyImportError(msg)
    try:
        key = X25519PublicKey.from_public_bytes(bytes(data))
    except ValueError as err:
        msg = f"malformed agreement public value ({len(data)} bytes)"
        raise KeyImportError(msg) from err
    return AgreementPublicKey(key)
