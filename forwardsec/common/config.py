"""
Configuration settings for the forward-secret session protocol.
"""

from __future__ import annotations

import logging
import os

DEFAULT_MAX_RECORD_LEN = 1024 * 1024


def _int_from_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _log_level_from_env() -> int:
    name = os.getenv("FORWARDSEC_LOG_LEVEL", "WARNING")
    level = getattr(logging, name.upper(), None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


class Config:
    """Central configuration class for all protocol settings."""

    # Protocol constants
    PROTOCOL_VERSION: int = 1
    CIPHER_SUITE: str = "v1:X25519:Ed25519:AES128-CTR:HMAC-SHA256"

    # Authenticated cipher sizes (AES-128-CTR + HMAC-SHA256)
    SYM_KEY_LEN: int = 16
    MAC_KEY_LEN: int = 32
    CTR_NONCE_LEN: int = 16
    TAG_LEN: int = 32

    # Shared secret is split into the cipher key followed by the MAC key
    SHARED_KEY_LEN: int = SYM_KEY_LEN + MAC_KEY_LEN
    AGREEMENT_KEY_LEN: int = 32
    AGREEMENT_INFO: bytes = b"forwardsec:v1:message-keys"

    # Upper bound on encoded records accepted by decode()
    MAX_RECORD_LEN: int = _int_from_env(
        "FORWARDSEC_MAX_RECORD_LEN", DEFAULT_MAX_RECORD_LEN
    )

    # Password helpers
    PBKDF2_ITERATIONS: int = 16384
    PASSWORD_KEY_SIZE: int = 32
    PASSWORD_SALT_LENGTH: int = 128
    CHALLENGE_RESPONSE_LENGTH: int = 128

    # Logging
    LOG_LEVEL: int = _log_level_from_env()
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __init__(self) -> None:
        # Environment-driven settings are re-read per instance
        self.MAX_RECORD_LEN = _int_from_env(
            "FORWARDSEC_MAX_RECORD_LEN", DEFAULT_MAX_RECORD_LEN
        )
        self.LOG_LEVEL = _log_level_from_env()
