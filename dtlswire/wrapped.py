"""Length-prefixed opaque values: ASN.1 certificates and distinguished names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .types import ParseError, Reader


@dataclass(frozen=True)
class _Wrapped:
    """Opaque bytes carried behind a big-endian length prefix."""

    LENGTH_SIZE: ClassVar[int] = 0
    MIN_LEN: ClassVar[int] = 0

    data: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) < self.MIN_LEN:
            raise ValueError(
                f"{type(self).__name__} needs at least {self.MIN_LEN} bytes, got {len(raw)}"
            )
        if len(raw) >= 1 << (8 * self.LENGTH_SIZE):
            raise ValueError(f"{type(self).__name__} too long: {len(raw)} bytes")
        object.__setattr__(self, "data", raw)

    @classmethod
    def _read(cls, reader: Reader):
        length = int.from_bytes(reader.take(cls.LENGTH_SIZE), "big")
        if length < cls.MIN_LEN:
            raise ParseError(
                f"{cls.__name__} length {length} below minimum {cls.MIN_LEN}"
            )
        return cls(reader.take(length))

    def _write(self) -> bytes:
        return len(self.data).to_bytes(self.LENGTH_SIZE, "big") + self.data

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class Asn1Cert(_Wrapped):
    """A DER certificate with a 24-bit length prefix."""

    LENGTH_SIZE: ClassVar[int] = 3
    MIN_LEN: ClassVar[int] = 0

    @classmethod
    def parse(cls, reader: Reader) -> "Asn1Cert":
        """Read the 24-bit length prefix and the bytes it covers."""
        return cls._read(reader)

    def serialize(self) -> bytes:
        """Length prefix followed by the data."""
        return self._write()


@dataclass(frozen=True)
class DistinguishedName(_Wrapped):
    """A DER distinguished name with a 16-bit length prefix, at least one byte."""

    LENGTH_SIZE: ClassVar[int] = 2
    MIN_LEN: ClassVar[int] = 1

    @classmethod
    def parse(cls, reader: Reader) -> "DistinguishedName":
        """Read the 16-bit length prefix and the bytes it covers."""
        return cls._read(reader)

    def serialize(self) -> bytes:
        """Length prefix followed by the data."""
        return self._write()