"""Elliptic curve groups and curve types for ECDHE key exchange."""

from __future__ import annotations

from .types import Reader, _check_range, _OpenIntEnum


class NamedGroup(_OpenIntEnum):
    """Named groups for ECDHE (RFC 4492, RFC 8422)."""

    SECT163K1 = 1
    SECT163R1 = 2
    SECT163R2 = 3
    SECT193R1 = 4
    SECT193R2 = 5
    SECT233K1 = 6
    SECT233R1 = 7
    SECT239K1 = 8
    SECT283K1 = 9
    SECT283R1 = 10
    SECT409K1 = 11
    SECT409R1 = 12
    SECT571K1 = 13
    SECT571R1 = 14
    SECP160K1 = 15
    SECP160R1 = 16
    SECP160R2 = 17
    SECP192K1 = 18
    SECP192R1 = 19
    SECP224K1 = 20
    SECP224R1 = 21
    SECP256K1 = 22
    SECP256R1 = 23
    SECP384R1 = 24
    SECP521R1 = 25
    X25519 = 29
    X448 = 30

    @classmethod
    def from_u16(cls, value: int) -> NamedGroup:
        return cls(_check_range(value, 16))

    @classmethod
    def parse(cls, reader: Reader) -> NamedGroup:
        return cls.from_u16(reader.u16())


class CurveType(_OpenIntEnum):
    """ECParameters curve type."""

    EXPLICIT_PRIME = 1
    EXPLICIT_CHAR2 = 2
    NAMED_CURVE = 3

    @classmethod
    def from_u8(cls, value: int) -> CurveType:
        return cls(_check_range(value, 8))

    @classmethod
    def parse(cls, reader: Reader) -> CurveType:
        return cls.from_u8(reader.u8())