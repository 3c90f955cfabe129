"""
Sessions with a single peer.

A session starts UNBOUND, holding its own agreement key and the signed
export of that key. Once the peer's signed export has been verified with
``peer_session_key`` the session is BOUND and can encrypt and decrypt.
``close`` drops all key material and ends the session.

Every ``encrypt`` mints a fresh ephemeral agreement key whose private value
is discarded before the call returns, so the message keys of one message
cannot be recovered from any key the session keeps.

Sessions do no internal locking. Callers must serialize ``peer_session_key``
and ``close`` against any other call on the same instance.
"""

from __future__ import annotations

import enum
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from forwardsec.common.config import Config
from forwardsec.common.exceptions import SessionStateError, SignatureInvalidError
from forwardsec.common.models import EphemeralEnvelope, SignedAgreementExport
from forwardsec.core.peer import PeerIdentity
from forwardsec.primitives import agreement, authsym
from forwardsec.primitives.zeroize import wipe

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

    from forwardsec.common.interfaces import RandomSource
    from forwardsec.primitives.agreement import (
        AgreementPrivateKey,
        AgreementPublicKey,
    )

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    UNBOUND = "unbound"
    BOUND = "bound"
    CLOSED = "closed"


@contextmanager
def _message_keys(
    private: AgreementPrivateKey,
    public: AgreementPublicKey,
    sender_pub: bytes,
    recipient_pub: bytes,
) -> Iterator[tuple[bytes, bytes]]:
    # Both exported values go into the salt so that an envelope whose
    # public value was altered never yields the sender's keys.
    shared = private.shared_key(
        public, Config.SHARED_KEY_LEN, salt=sender_pub + recipient_pub
    )
    try:
        yield (
            bytes(shared[: Config.SYM_KEY_LEN]),
            bytes(shared[Config.SYM_KEY_LEN :]),
        )
    finally:
        wipe(shared)


class Session:
    """One agreement key pair bound to one logical session with one peer."""

    def __init__(self, key: AgreementPrivateKey, signed_export: bytes) -> None:
        self._key: AgreementPrivateKey | None = key
        self._signed_export = signed_export
        self._peer: AgreementPublicKey | None = None
        self._state = SessionState.UNBOUND

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_bound(self) -> bool:
        return self._state is SessionState.BOUND

    def _require(self, operation: str, *states: SessionState) -> None:
        if self._state not in states:
            allowed = ", ".join(state.value for state in states)
            msg = (
                f"{operation} is not permitted on a {self._state.value} session "
                f"(requires {allowed})"
            )
            raise SessionStateError(msg, self._state.value)

    def public(self) -> bytes:
        """Return the encoded signed agreement export to send to the peer."""
        self._require("public", SessionState.UNBOUND, SessionState.BOUND)
        return self._signed_export

    def peer_session_key(self, peer: PeerIdentity, session: bytes) -> None:
        """Verify the peer's signed export and bind the session to it.

        The signature is checked before the agreement value is imported; a
        failed call leaves the session unbound. Binding happens once.
        """
        if not isinstance(peer, PeerIdentity):
            msg = f"peer must be a PeerIdentity, got {type(peer).__name__}"
            raise TypeError(msg)
        self._require("peer_session_key", SessionState.UNBOUND)

        record = SignedAgreementExport.decode(session)
        try:
            peer.verify(record.public, record.signature)
        except SignatureInvalidError:
            logger.warning("Rejected session key not signed by %r", peer)
            raise
        self._peer = agreement.import_public(record.public)
        self._state = SessionState.BOUND
        logger.debug("Session bound to %r", peer)

    def encrypt(self, message: bytes, rng: RandomSource | None = None) -> bytes:
        """Encrypt ``message`` to the peer under a fresh ephemeral key."""
        self._require("encrypt", SessionState.BOUND)
        assert self._peer is not None

        ephemeral = agreement.generate_private(rng)
        try:
            pub = ephemeral.export()
            with _message_keys(
                ephemeral, self._peer, pub, self._peer.export()
            ) as (sym_key, mac_key):
                ct = authsym.encrypt(sym_key, mac_key, message, rng)
        finally:
            ephemeral.destroy()
        return EphemeralEnvelope(pub=pub, ct=ct).encode()

    def decrypt(self, envelope: bytes) -> bytes:
        """Decrypt an envelope produced by the peer's ``encrypt``."""
        self._require("decrypt", SessionState.BOUND)
        assert self._key is not None

        record = EphemeralEnvelope.decode(envelope)
        pub = agreement.import_public(record.pub)
        with _message_keys(
            self._key, pub, record.pub, self._key.export()
        ) as (sym_key, mac_key):
            return authsym.decrypt(sym_key, mac_key, record.ct)

    def close(self) -> None:
        """Destroy the session's key material."""
        if self._state is SessionState.CLOSED:
            return
        if self._key is not None:
            self._key.destroy()
        self._key = None
        self._peer = None
        self._state = SessionState.CLOSED
        logger.debug("Session closed")

    def __enter__(self) -> Session:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Session(state={self._state.value})"
