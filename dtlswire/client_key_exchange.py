"""ClientKeyExchange handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from .named_group import CurveType, NamedGroup
from .types import KeyExchangeAlgorithm, ParseError, Reader


@dataclass(frozen=True)
class ClientEcdhKeys:
    """The client's ephemeral ECDH public key.

    Curve type and group are settled by the ServerKeyExchange and are not on
    the wire here; the fields hold defaults.
    """

    public_key: bytes
    curve_type: CurveType = CurveType.NAMED_CURVE
    named_group: NamedGroup = NamedGroup.SECP256R1

    def __post_init__(self) -> None:
        raw = bytes(self.public_key)
        if len(raw) > 0xFF:
            raise ValueError("public key longer than 255 bytes")
        object.__setattr__(self, "public_key", raw)

    @classmethod
    def parse(cls, reader: Reader) -> ClientEcdhKeys:
        return cls(reader.take(reader.u8()))

    def serialize(self) -> bytes:
        return bytes([len(self.public_key)]) + self.public_key


@dataclass(frozen=True)
class ClientKeyExchange:
    """Client key exchange carrying the ECDH public key."""

    exchange_keys: ClientEcdhKeys

    @classmethod
    def parse(
        cls, reader: Reader, key_exchange_algorithm: KeyExchangeAlgorithm
    ) -> ClientKeyExchange:
        if key_exchange_algorithm != KeyExchangeAlgorithm.EECDH:
            raise ParseError(f"unsupported key exchange {key_exchange_algorithm.value}")
        return cls(ClientEcdhKeys.parse(reader))

    def serialize(self) -> bytes:
        return self.exchange_keys.serialize()

    @staticmethod
    def serialize_public_key(public_key: bytes) -> bytes:
        """Encode a raw public key as a ClientKeyExchange body."""
        return ClientEcdhKeys(public_key).serialize()