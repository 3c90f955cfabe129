"""
Interfaces and protocols for dependency injection.
"""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Callable returning ``n`` random bytes.

    ``os.urandom`` satisfies this protocol; tests pass a seeded source.
    """

    def __call__(self, n: int, /) -> bytes: ...


class Connection(Protocol):
    """Minimal socket surface used by the challenge/response helpers."""

    def sendall(self, data: bytes, /) -> None: ...

    def recv(self, bufsize: int, /) -> bytes: ...
