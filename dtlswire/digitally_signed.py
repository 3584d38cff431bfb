"""A signature together with its hash and signature algorithm."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Reader, SignatureAndHashAlgorithm


@dataclass(frozen=True)
class DigitallySigned:
    """TLS 1.2 digitally-signed element."""

    algorithm: SignatureAndHashAlgorithm
    signature: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.signature)
        if len(raw) > 0xFFFF:
            raise ValueError("signature longer than 65535 bytes")
        object.__setattr__(self, "signature", raw)

    @classmethod
    def parse(cls, reader: Reader) -> DigitallySigned:
        algorithm = SignatureAndHashAlgorithm.parse(reader)
        length = reader.u16()
        return cls(algorithm, reader.take(length))

    def serialize(self) -> bytes:
        return (
            self.algorithm.as_u16().to_bytes(2, "big")
            + len(self.signature).to_bytes(2, "big")
            + self.signature
        )