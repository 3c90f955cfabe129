"""
Long-term identities.

An Identity owns an Ed25519 signing key that never leaves the process. It
authorizes sessions by signing their agreement public values.
"""

from __future__ import annotations

import logging

from forwardsec.common.exceptions import InvariantViolation
from forwardsec.common.interfaces import RandomSource
from forwardsec.common.models import SignedAgreementExport
from forwardsec.core.peer import PeerIdentity
from forwardsec.core.session import Session
from forwardsec.primitives import agreement, signing

logger = logging.getLogger(__name__)


class Identity:
    """Long-term identity key pair of the local party."""

    __slots__ = ("_key",)

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._key = signing.generate_private(rng)

    @classmethod
    def new(cls, rng: RandomSource | None = None) -> Identity:
        return cls(rng)

    def public(self) -> bytes:
        """Return the exportable encoding of the public verification key."""
        try:
            return signing.export_public(self._key.public_key())
        except ValueError as err:
            msg = "identity public key could not be encoded"
            raise InvariantViolation(msg) from err

    def peer_identity(self) -> PeerIdentity:
        """This identity as seen by a peer."""
        return PeerIdentity(self._key.public_key())

    def new_session_key(self, rng: RandomSource | None = None) -> Session:
        """Build a session bound to this identity.

        Send ``Session.public()`` to the peer, and call
        ``Session.peer_session_key`` with the peer's export before using the
        session for encryption.
        """
        key = agreement.generate_private(rng)
        try:
            public = key.export()
            record = SignedAgreementExport(
                public=public,
                signature=signing.sign(self._key, public),
            )
            session = Session(key, record.encode())
        except Exception:
            key.destroy()
            raise
        logger.debug("New session key created")
        return session

    def __repr__(self) -> str:
        return f"Identity({self.peer_identity().fingerprint()[:16]})"
