"""
Imported public identities of remote parties.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from forwardsec.primitives import signing

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey


class PeerIdentity:
    """Read-only public verification key of a remote party."""

    __slots__ = ("_key", "_export")

    def __init__(self, key: Ed25519PublicKey) -> None:
        self._key = key
        self._export = signing.export_public(key)

    @property
    def key(self) -> Ed25519PublicKey:
        return self._key

    def public(self) -> bytes:
        return self._export

    def fingerprint(self) -> str:
        """SHA-256 of the exported key, for out-of-band comparison."""
        return hashlib.sha256(self._export).hexdigest()

    def verify(self, data: bytes, signature: bytes) -> None:
        signing.verify(self._key, data, signature)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeerIdentity):
            return NotImplemented
        return self._export == other._export

    def __hash__(self) -> int:
        return hash(self._export)

    def __repr__(self) -> str:
        return f"PeerIdentity({self.fingerprint()[:16]})"


def import_peer_identity(data: bytes) -> PeerIdentity:
    """Decode an exported identity; raises MalformedIdentityError."""
    return PeerIdentity(signing.import_public(data))
