"""ServerKeyExchange handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from .digitally_signed import DigitallySigned
from .named_group import CurveType, NamedGroup
from .types import KeyExchangeAlgorithm, ParseError, Reader


@dataclass(frozen=True)
class EcdhParams:
    """Server ECDH parameters with an optional signature over them."""

    curve_type: CurveType
    named_group: NamedGroup
    public_key: bytes
    signature: DigitallySigned | None = None

    def __post_init__(self) -> None:
        raw = bytes(self.public_key)
        if len(raw) > 0xFF:
            raise ValueError("public key longer than 255 bytes")
        object.__setattr__(self, "public_key", raw)

    @classmethod
    def parse(cls, reader: Reader) -> EcdhParams:
        """Parse the parameters; any bytes left over are read as the signature."""
        curve_type = CurveType.parse(reader)
        named_group = NamedGroup.parse(reader)
        public_key = reader.take(reader.u8())
        signature = DigitallySigned.parse(reader) if reader.remaining() else None
        return cls(curve_type, named_group, public_key, signature)

    def serialize(self, with_signature: bool = True) -> bytes:
        parts = [
            bytes([int(self.curve_type)]),
            int(self.named_group).to_bytes(2, "big"),
            bytes([len(self.public_key)]),
            self.public_key,
        ]
        if with_signature and self.signature is not None:
            parts.append(self.signature.serialize())
        return b"".join(parts)


@dataclass(frozen=True)
class ServerKeyExchange:
    """Server key exchange carrying ECDH parameters."""

    params: EcdhParams

    @classmethod
    def parse(
        cls, reader: Reader, key_exchange_algorithm: KeyExchangeAlgorithm
    ) -> ServerKeyExchange:
        if key_exchange_algorithm != KeyExchangeAlgorithm.EECDH:
            raise ParseError(f"unsupported key exchange {key_exchange_algorithm.value}")
        return cls(EcdhParams.parse(reader))

    def serialize(self, with_signature: bool = True) -> bytes:
        return self.params.serialize(with_signature)

    def signature(self) -> DigitallySigned | None:
        """The signature over the parameters, if present."""
        return self.params.signature