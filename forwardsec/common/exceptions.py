"""
Custom exceptions for the forward-secret session protocol.

Every failure of an underlying primitive is translated into one of these
types before it reaches the caller. Nothing is retried and nothing falls
back to a weaker mode.
"""

from __future__ import annotations


class ForwardSecError(Exception):
    """Base class for all protocol failures."""


class KeyGenerationError(ForwardSecError):
    """Randomness or key parameters could not be produced."""


class DecodeError(ForwardSecError):
    """An encoded record is malformed, oversized or of an unknown version."""


class MalformedIdentityError(DecodeError):
    """An exported identity could not be decoded as an Ed25519 public key."""


class KeyImportError(ForwardSecError):
    """A well-formed record carried an unusable agreement public value."""


class SigningError(ForwardSecError):
    """The identity key failed to sign."""


class SignatureInvalidError(ForwardSecError):
    """A signed agreement export was not signed by the claimed peer."""


class KeyAgreementError(ForwardSecError):
    """The shared secret could not be derived."""


class EncryptionError(ForwardSecError):
    """The authenticated cipher failed to encrypt."""


class AuthenticationFailedError(ForwardSecError):
    """An integrity check failed; no plaintext is returned."""


class SessionStateError(ForwardSecError):
    """An operation was invoked in a session state that does not permit it."""

    def __init__(self, message: str, state: str | None = None) -> None:
        super().__init__(message)
        self.state = state


class InvariantViolation(ForwardSecError):
    """Internal encoding failed; this indicates a programming error."""
