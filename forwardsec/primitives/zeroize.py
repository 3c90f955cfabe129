"""
Scoped handling of transient secret buffers.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


def wipe(buffer: bytearray) -> None:
    """Overwrite ``buffer`` with zeros in place."""
    buffer[:] = bytes(len(buffer))


@contextmanager
def scoped_secret(data: bytes | bytearray) -> Iterator[bytearray]:
    """Yield a mutable copy of ``data`` that is zeroed on every exit path."""
    buffer = bytearray(data)
    try:
        yield buffer
    finally:
        wipe(buffer)
