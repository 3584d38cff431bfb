"""Core wire types shared by the DTLS 1.2 message codecs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ParseError(ValueError):
    """Raised when wire data is truncated or malformed."""


def _check_range(value: int, bits: int) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"value {value} does not fit in {bits} bits")
    return value


class Reader:
    """Sequential big-endian reader over a byte string."""

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0) -> None:
        self.data = bytes(data)
        if not 0 <= offset <= len(self.data):
            raise ValueError(f"offset {offset} outside data of length {len(self.data)}")
        self.offset = offset

    def _uint(self, size: int) -> int:
        return int.from_bytes(self.take(size), "big")

    def u8(self) -> int:
        """Read one unsigned byte."""
        return self._uint(1)

    def u16(self) -> int:
        """Read a big-endian 16-bit unsigned integer."""
        return self._uint(2)

    def u24(self) -> int:
        """Read a big-endian 24-bit unsigned integer."""
        return self._uint(3)

    def u32(self) -> int:
        """Read a big-endian 32-bit unsigned integer."""
        return self._uint(4)

    def u48(self) -> int:
        """Read a big-endian 48-bit unsigned integer."""
        return self._uint(6)

    def take(self, n: int) -> bytes:
        """Read exactly ``n`` bytes."""
        if n < 0:
            raise ValueError("cannot take a negative number of bytes")
        end = self.offset + n
        if end > len(self.data):
            raise ParseError(
                f"need {n} bytes at offset {self.offset}, only {self.remaining()} left"
            )
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self.data) - self.offset


class _OpenIntEnum(IntEnum):
    """Integer enum that keeps values it has no name for."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return cls._unknown(value)
        return None

    @classmethod
    def _unknown(cls, value: int):
        member = int.__new__(cls, value)
        member._name_ = f"UNKNOWN_{value:#x}"
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        """True when this value has no registered name."""
        return self._name_ not in type(self).__members__


class ProtocolVersion(_OpenIntEnum):
    """DTLS protocol version as carried on the wire."""

    DTLS1_0 = 0xFEFF
    DTLS1_2 = 0xFEFD
    DTLS1_3 = 0xFEFC

    @classmethod
    def from_u16(cls, value: int) -> ProtocolVersion:
        return cls(_check_range(value, 16))

    @classmethod
    def parse(cls, reader: Reader) -> ProtocolVersion:
        return cls.from_u16(reader.u16())

    def serialize(self) -> bytes:
        return int(self).to_bytes(2, "big")


class KeyExchangeAlgorithm(Enum):
    """Key exchange family of a cipher suite."""

    EECDH = "EECDH"
    UNKNOWN = "UNKNOWN"


class SignatureAlgorithm(_OpenIntEnum):
    """Signature algorithms used in DTLS handshakes."""

    ANONYMOUS = 0
    RSA = 1
    DSA = 2
    ECDSA = 3

    @classmethod
    def from_u8(cls, value: int) -> SignatureAlgorithm:
        return cls(_check_range(value, 8))

    @classmethod
    def parse(cls, reader: Reader) -> SignatureAlgorithm:
        return cls.from_u8(reader.u8())


class HashAlgorithm(_OpenIntEnum):
    """Hash algorithms of TLS 1.2 signatures and PRF."""

    NONE = 0
    MD5 = 1
    SHA1 = 2
    SHA224 = 3
    SHA256 = 4
    SHA384 = 5
    SHA512 = 6

    @classmethod
    def from_u8(cls, value: int) -> HashAlgorithm:
        return cls(_check_range(value, 8))

    @classmethod
    def parse(cls, reader: Reader) -> HashAlgorithm:
        return cls.from_u8(reader.u8())


class CipherSuite(_OpenIntEnum):
    """Supported TLS 1.2 cipher suites for DTLS."""

    ECDHE_ECDSA_AES256_GCM_SHA384 = 0xC02C
    ECDHE_ECDSA_AES128_GCM_SHA256 = 0xC02B

    @classmethod
    def from_u16(cls, value: int) -> CipherSuite:
        return cls(_check_range(value, 16))

    @classmethod
    def parse(cls, reader: Reader) -> CipherSuite:
        return cls.from_u16(reader.u16())

    def verify_data_length(self) -> int:
        """Length in bytes of the Finished verify_data."""
        return 12

    def key_exchange_algorithm(self) -> KeyExchangeAlgorithm:
        if self.is_unknown:
            return KeyExchangeAlgorithm.UNKNOWN
        return KeyExchangeAlgorithm.EECDH

    def has_ecc(self) -> bool:
        return not self.is_unknown

    @classmethod
    def all(cls) -> tuple[CipherSuite, ...]:
        """All supported suites in server preference order."""
        return (cls.ECDHE_ECDSA_AES256_GCM_SHA384, cls.ECDHE_ECDSA_AES128_GCM_SHA256)

    @classmethod
    def compatible_with_certificate(
        cls, cert_type: SignatureAlgorithm
    ) -> tuple[CipherSuite, ...]:
        """Suites usable with a certificate of the given signature algorithm."""
        if cert_type == SignatureAlgorithm.ECDSA and not SignatureAlgorithm(cert_type).is_unknown:
            return (cls.ECDHE_ECDSA_AES256_GCM_SHA384, cls.ECDHE_ECDSA_AES128_GCM_SHA256)
        raise ValueError("Need either RSA or ECDSA certificate")

    def need_encrypt_then_mac(self) -> bool:
        # Only AEAD suites are supported, none of which use encrypt-then-MAC.
        return False

    def hash_algorithm(self) -> HashAlgorithm:
        if self == CipherSuite.ECDHE_ECDSA_AES256_GCM_SHA384:
            return HashAlgorithm.SHA384
        if self == CipherSuite.ECDHE_ECDSA_AES128_GCM_SHA256:
            return HashAlgorithm.SHA256
        return HashAlgorithm._unknown(0)

    def signature_algorithm(self) -> SignatureAlgorithm:
        if self.is_unknown:
            return SignatureAlgorithm._unknown(0)
        return SignatureAlgorithm.ECDSA


class CompressionMethod(_OpenIntEnum):
    """Record compression method."""

    NULL = 0x00
    DEFLATE = 0x01

    @classmethod
    def from_u8(cls, value: int) -> CompressionMethod:
        return cls(_check_range(value, 8))

    @classmethod
    def parse(cls, reader: Reader) -> CompressionMethod:
        return cls.from_u8(reader.u8())


class ClientCertificateType(_OpenIntEnum):
    """Certificate types a server may request from a client."""

    RSA_SIGN = 1
    DSS_SIGN = 2
    RSA_FIXED_DH = 3
    DSS_FIXED_DH = 4
    RSA_EPHEMERAL_DH = 5
    DSS_EPHEMERAL_DH = 6
    FORTEZZA_DMS = 20
    ECDSA_SIGN = 64

    @classmethod
    def from_u8(cls, value: int) -> ClientCertificateType:
        return cls(_check_range(value, 8))

    @classmethod
    def parse(cls, reader: Reader) -> ClientCertificateType:
        return cls.from_u8(reader.u8())


@dataclass(frozen=True)
class SignatureAndHashAlgorithm:
    """A hash and signature algorithm pair."""

    hash: HashAlgorithm
    signature: SignatureAlgorithm

    @classmethod
    def from_u16(cls, value: int) -> SignatureAndHashAlgorithm:
        _check_range(value, 16)
        return cls(HashAlgorithm.from_u8(value >> 8), SignatureAlgorithm.from_u8(value & 0xFF))

    def as_u16(self) -> int:
        return (int(self.hash) << 8) | int(self.signature)

    @classmethod
    def parse(cls, reader: Reader) -> SignatureAndHashAlgorithm:
        return cls.from_u16(reader.u16())

    @classmethod
    def supported(cls) -> tuple[SignatureAndHashAlgorithm, ...]:
        """Pairs advertised by default, in preference order."""
        return (
            cls(HashAlgorithm.SHA256, SignatureAlgorithm.ECDSA),
            cls(HashAlgorithm.SHA384, SignatureAlgorithm.ECDSA),
            cls(HashAlgorithm.SHA256, SignatureAlgorithm.RSA),
            cls(HashAlgorithm.SHA384, SignatureAlgorithm.RSA),
        )