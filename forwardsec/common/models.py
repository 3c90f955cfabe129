"""
Pydantic models for the records exchanged between peers.

Byte fields travel as lowercase hex strings inside compact JSON, so an
encoded record is plain UTF-8 and ``decode(record.encode()) == record``.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    ValidationError,
)

from forwardsec.common.config import Config
from forwardsec.common.exceptions import DecodeError

_HEX_RE = re.compile(r"(?:[0-9a-f]{2})*")

_R = TypeVar("_R", bound="WireRecord")


def _from_hex(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        if not _HEX_RE.fullmatch(value):
            msg = "expected lowercase hex"
            raise ValueError(msg)
        return bytes.fromhex(value)
    return value


HexBytes = Annotated[
    bytes,
    BeforeValidator(_from_hex),
    PlainSerializer(lambda value: value.hex(), return_type=str),
]


def _non_empty(value: bytes) -> bytes:
    if not value:
        msg = "must not be empty"
        raise ValueError(msg)
    return value


NonEmptyHexBytes = Annotated[HexBytes, AfterValidator(_non_empty)]


class WireRecord(BaseModel):
    """Base for versioned records sent to a peer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: int = Config.PROTOCOL_VERSION

    def encode(self) -> bytes:
        return self.model_dump_json().encode()

    @classmethod
    def decode(cls: type[_R], data: bytes) -> _R:
        """Parse ``data`` into a record, raising DecodeError on any defect."""
        if not isinstance(data, (bytes, bytearray)):
            msg = f"{cls.__name__} must be decoded from bytes"
            raise DecodeError(msg)
        if len(data) > Config.MAX_RECORD_LEN:
            msg = f"{cls.__name__} exceeds {Config.MAX_RECORD_LEN} bytes"
            raise DecodeError(msg)
        try:
            record = cls.model_validate_json(bytes(data))
        except ValidationError as err:
            msg = f"malformed {cls.__name__}"
            raise DecodeError(msg) from err
        if record.version != Config.PROTOCOL_VERSION:
            msg = f"unsupported {cls.__name__} version {record.version}"
            raise DecodeError(msg)
        return record


class SignedAgreementExport(WireRecord):
    public: NonEmptyHexBytes
    signature: NonEmptyHexBytes


class EphemeralEnvelope(WireRecord):
    pub: NonEmptyHexBytes
    ct: NonEmptyHexBytes


class PasswordKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    salt: HexBytes
    key: HexBytes
