"""
Sources of randomness.

Every operation that consumes randomness takes an optional ``rng``; ``None``
selects the operating system source.
"""

from __future__ import annotations

import hashlib
import os

from forwardsec.common.exceptions import KeyGenerationError
from forwardsec.common.interfaces import RandomSource


def read_random(rng: RandomSource | None, n: int) -> bytes:
    """Read exactly ``n`` bytes from ``rng``."""
    source = os.urandom if rng is None else rng
    try:
        data = source(n)
    except (OSError, NotImplementedError) as err:
        msg = "randomness source failed"
        raise KeyGenerationError(msg) from err
    if not isinstance(data, (bytes, bytearray)) or len(data) != n:
        msg = f"randomness source returned a short read (wanted {n} bytes)"
        raise KeyGenerationError(msg)
    return bytes(data)


class SeededRandom:
    """Deterministic SHAKE-256 stream keyed by ``seed``. Never use outside tests."""

    def __init__(self, seed: bytes) -> None:
        self._seed = bytes(seed)
        self._counter = 0

    def __call__(self, n: int, /) -> bytes:
        block = self._seed + self._counter.to_bytes(8, "big")
        self._counter += 1
        return hashlib.shake_256(block).digest(n)
