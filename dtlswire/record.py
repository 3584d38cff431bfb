"""DTLS record layer framing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .types import ParseError, ProtocolVersion, Reader, _check_range, _OpenIntEnum


class ContentType(_OpenIntEnum):
    """Record content type."""

    CHANGE_CIPHER_SPEC = 20
    ALERT = 21
    HANDSHAKE = 22
    APPLICATION_DATA = 23

    @classmethod
    def from_u8(cls, value: int) -> ContentType:
        return cls(_check_range(value, 8))

    @classmethod
    def parse(cls, reader: Reader) -> ContentType:
        return cls.from_u8(reader.u8())


@dataclass(frozen=True, order=True)
class Sequence:
    """Epoch and 48-bit record sequence number, ordered by epoch first."""

    epoch: int
    sequence_number: int = 0

    def __post_init__(self) -> None:
        _check_range(self.epoch, 16)
        _check_range(self.sequence_number, 48)

    def __str__(self) -> str:
        return f"[epoch: {self.epoch}, sequence_number: {self.sequence_number}]"


@dataclass(frozen=True)
class DTLSRecord:
    """A single DTLS record."""

    HEADER_LEN: ClassVar[int] = 13
    EXPLICIT_NONCE_LEN: ClassVar[int] = 8
    LENGTH_OFFSET: ClassVar[slice] = slice(11, 13)

    content_type: ContentType
    version: ProtocolVersion
    sequence: Sequence
    length: int
    fragment: bytes

    @classmethod
    def parse(cls, reader: Reader, skip_offset: int = 0) -> DTLSRecord:
        """Parse one record; ``skip_offset`` bytes after the header are skipped."""
        content_type = ContentType.parse(reader)
        version = ProtocolVersion.parse(reader)
        # The record layer accepts DTLS 1.0 as well as 1.2.
        if version not in (ProtocolVersion.DTLS1_0, ProtocolVersion.DTLS1_2) or version.is_unknown:
            raise ParseError(f"unsupported record version {int(version):#06x}")
        epoch = reader.u16()
        sequence_number = reader.u48()
        length = reader.u16()
        reader.take(skip_offset)
        fragment = reader.take(length)
        return cls(content_type, version, Sequence(epoch, sequence_number), length, fragment)

    def serialize(self) -> bytes:
        return b"".join(
            (
                bytes([int(self.content_type)]),
                self.version.serialize(),
                self.sequence.epoch.to_bytes(2, "big"),
                self.sequence.sequence_number.to_bytes(6, "big"),
                self.length.to_bytes(2, "big"),
                self.fragment,
            )
        )

    def nonce(self) -> bytes:
        """Explicit AEAD nonce at the start of the fragment."""
        if len(self.fragment) < self.EXPLICIT_NONCE_LEN:
            raise ParseError("fragment too short to hold an explicit nonce")
        return self.fragment[: self.EXPLICIT_NONCE_LEN]