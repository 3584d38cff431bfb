"""CertificateVerify handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from .digitally_signed import DigitallySigned
from .types import Reader


@dataclass(frozen=True)
class CertificateVerify:
    """Client proof of possession of its certificate's private key."""

    signed: DigitallySigned

    @classmethod
    def parse(cls, reader: Reader) -> CertificateVerify:
        return cls(DigitallySigned.parse(reader))

    def serialize(self) -> bytes:
        return self.signed.serialize()