"""
Salted PBKDF2 password hashing.
"""

from __future__ import annotations

import hmac

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from forwardsec.common.config import Config
from forwardsec.common.interfaces import RandomSource
from forwardsec.common.models import PasswordKey
from forwardsec.primitives.rand import read_random


def derive_key(password: str, rng: RandomSource | None = None) -> PasswordKey:
    """Hash ``password`` under a freshly generated salt."""
    salt = read_random(rng, Config.PASSWORD_SALT_LENGTH)
    return derive_key_with_salt(password, salt)


def derive_key_with_salt(password: str, salt: bytes) -> PasswordKey:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=Config.PASSWORD_KEY_SIZE,
        salt=salt,
        iterations=Config.PBKDF2_ITERATIONS,
    )
    return PasswordKey(salt=salt, key=kdf.derive(password.encode()))


def match_password(password: str, password_key: PasswordKey) -> bool:
    """Check ``password`` against a stored key in constant time."""
    candidate = derive_key_with_salt(password, password_key.salt)
    return hmac.compare_digest(candidate.key, password_key.key)
