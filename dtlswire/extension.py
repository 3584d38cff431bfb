"""Generic TLS hello extension container and extension type registry."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Reader, _check_range, _OpenIntEnum


class ExtensionType(_OpenIntEnum):
    """Registered TLS extension types."""

    SERVER_NAME = 0x0000
    MAX_FRAGMENT_LENGTH = 0x0001
    CLIENT_CERTIFICATE_URL = 0x0002
    TRUSTED_CA_KEYS = 0x0003
    TRUNCATED_HMAC = 0x0004
    STATUS_REQUEST = 0x0005
    USER_MAPPING = 0x0006
    CLIENT_AUTHZ = 0x0007
    SERVER_AUTHZ = 0x0008
    CERT_TYPE = 0x0009
    SUPPORTED_GROUPS = 0x000A
    EC_POINT_FORMATS = 0x000B
    SRP = 0x000C
    SIGNATURE_ALGORITHMS = 0x000D
    USE_SRTP = 0x000E
    HEARTBEAT = 0x000F
    APPLICATION_LAYER_PROTOCOL_NEGOTIATION = 0x0010
    STATUS_REQUEST_V2 = 0x0011
    SIGNED_CERTIFICATE_TIMESTAMP = 0x0012
    CLIENT_CERTIFICATE_TYPE = 0x0013
    SERVER_CERTIFICATE_TYPE = 0x0014
    PADDING = 0x0015
    ENCRYPT_THEN_MAC = 0x0016
    EXTENDED_MASTER_SECRET = 0x0017
    TOKEN_BINDING = 0x0018
    CACHED_INFO = 0x0019
    SESSION_TICKET = 0x0023
    PRE_SHARED_KEY = 0x0029
    EARLY_DATA = 0x002A
    SUPPORTED_VERSIONS = 0x002B
    COOKIE = 0x002C
    PSK_KEY_EXCHANGE_MODES = 0x002D
    CERTIFICATE_AUTHORITIES = 0x002F
    OID_FILTERS = 0x0030
    POST_HANDSHAKE_AUTH = 0x0031
    SIGNATURE_ALGORITHMS_CERT = 0x0032
    KEY_SHARE = 0x0033
    RENEGOTIATION_INFO = 0xFF01

    @classmethod
    def from_u16(cls, value: int) -> ExtensionType:
        return cls(_check_range(value, 16))

    @classmethod
    def parse(cls, reader: Reader) -> ExtensionType:
        return cls.from_u16(reader.u16())


@dataclass(frozen=True)
class Extension:
    """An extension type with its opaque data."""

    extension_type: ExtensionType
    data: bytes = b""

    def __post_init__(self) -> None:
        if len(self.data) > 0xFFFF:
            raise ValueError("extension data longer than 65535 bytes")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def parse(cls, reader: Reader) -> Extension:
        extension_type = ExtensionType.parse(reader)
        length = reader.u16()
        return cls(extension_type, reader.take(length))

    def serialize(self) -> bytes:
        return (
            int(self.extension_type).to_bytes(2, "big")
            + len(self.data).to_bytes(2, "big")
            + self.data
        )