# Forward-secret peer sessions

from forwardsec.common.exceptions import (
    AuthenticationFailedError,
    DecodeError,
    EncryptionError,
    ForwardSecError,
    InvariantViolation,
    KeyAgreementError,
    KeyGenerationError,
    KeyImportError,
    MalformedIdentityError,
    SessionStateError,
    SignatureInvalidError,
    SigningError,
)
from forwardsec.core import (
    Identity,
    PeerIdentity,
    Session,
    SessionState,
    import_peer_identity,
)

__all__ = [
    "AuthenticationFailedError",
    "DecodeError",
    "EncryptionError",
    "ForwardSecError",
    "Identity",
    "InvariantViolation",
    "KeyAgreementError",
    "KeyGenerationError",
    "KeyImportError",
    "MalformedIdentityError",
    "PeerIdentity",
    "Session",
    "SessionState",
    "SessionStateError",
    "SignatureInvalidError",
    "SigningError",
    "import_peer_identity",
]
