"""
Challenge/response password authentication.

The verifier sends a random decimal challenge; the prover answers with
SHA3-512(password + challenge). Responses are compared in constant time.
"""

from __future__ import annotations

import hashlib
import hmac
import logging

from forwardsec.common.config import Config
from forwardsec.common.exceptions import AuthenticationFailedError
from forwardsec.common.interfaces import Connection, RandomSource
from forwardsec.primitives.rand import read_random

logger = logging.getLogger(__name__)

RESPONSE_LENGTH = Config.CHALLENGE_RESPONSE_LENGTH
ACK = b"ok"


def generate_challenge(rng: RandomSource | None = None) -> str:
    return str(int.from_bytes(read_random(rng, 8), "big"))


def response(password: str, challenge: str) -> bytes:
    return hashlib.sha3_512((password + challenge).encode()).digest()


def validate(password: str, challenge: str, answer: bytes) -> bool:
    return hmac.compare_digest(response(password, challenge), answer)


def _recv(conn: Connection, size: int) -> bytes:
    data = conn.recv(size)
    if not data:
        msg = "connection closed during authentication"
        raise AuthenticationFailedError(msg)
    return data


def challenge_peer(
    conn: Connection, password: str, rng: RandomSource | None = None
) -> None:
    """Challenge the peer on ``conn`` and acknowledge a correct response."""
    challenge = generate_challenge(rng)
    conn.sendall(challenge.encode())

    answer = _recv(conn, RESPONSE_LENGTH)
    if not validate(password, challenge, answer):
        logger.warning("Peer failed password challenge")
        msg = "invalid challenge response"
        raise AuthenticationFailedError(msg)
    conn.sendall(ACK)


def authenticate(conn: Connection, password: str) -> None:
    """Answer a challenge from the peer on ``conn``."""
    challenge = _recv(conn, RESPONSE_LENGTH)
    conn.sendall(response(password, challenge.decode("ascii", errors="replace")))
    if _recv(conn, len(ACK)) != ACK:
        msg = "peer did not acknowledge the response"
        raise AuthenticationFailedError(msg)
