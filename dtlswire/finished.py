"""Finished handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from .types import CipherSuite, Reader


@dataclass(frozen=True)
class Finished:
    """Handshake verification data."""

    verify_data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "verify_data", bytes(self.verify_data))

    @classmethod
    def parse(cls, reader: Reader, cipher_suite: CipherSuite) -> Finished:
        return cls(reader.take(cipher_suite.verify_data_length()))

    def serialize(self) -> bytes:
        return self.verify_data