"""Typed payloads of the hello extensions used in the handshake."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .named_group import NamedGroup
from .types import ParseError, Reader, SignatureAndHashAlgorithm


class ECPointFormat(IntEnum):
    """EC point format (RFC 4492 section 5.1.2)."""

    UNCOMPRESSED = 0x00
    ANSIX962_COMPRESSED_PRIME = 0x01
    ANSIX962_COMPRESSED_CHAR2 = 0x02

    @classmethod
    def parse(cls, reader: Reader) -> ECPointFormat:
        value = reader.u8()
        try:
            return cls(value)
        except ValueError:
            raise ParseError(f"unknown EC point format {value:#04x}") from None


@dataclass(frozen=True)
class ECPointFormatsExtension:
    """ec_point_formats extension (RFC 4492)."""

    formats: tuple[ECPointFormat, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "formats", tuple(self.formats))

    @classmethod
    def default(cls) -> ECPointFormatsExtension:
        """Only the uncompressed format, as most implementations support."""
        return cls((ECPointFormat.UNCOMPRESSED,))

    @classmethod
    def parse(cls, reader: Reader) -> ECPointFormatsExtension:
        count = reader.u8()
        return cls(tuple(ECPointFormat.parse(reader) for _ in range(count)))

    def serialize(self) -> bytes:
        return bytes([len(self.formats), *(int(f) for f in self.formats)])


@dataclass(frozen=True)
class SignatureAlgorithmsExtension:
    """signature_algorithms extension (RFC 5246)."""

    supported_signature_algorithms: tuple[SignatureAndHashAlgorithm, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "supported_signature_algorithms",
            tuple(self.supported_signature_algorithms),
        )

    @classmethod
    def default(cls) -> SignatureAlgorithmsExtension:
        return cls(SignatureAndHashAlgorithm.supported())

    @classmethod
    def parse(cls, reader: Reader) -> SignatureAlgorithmsExtension:
        list_len = reader.u16()
        if list_len % 2:
            raise ParseError(f"odd signature algorithm list length {list_len}")
        return cls(
            tuple(SignatureAndHashAlgorithm.parse(reader) for _ in range(list_len // 2))
        )

    def serialize(self) -> bytes:
        algorithms = self.supported_signature_algorithms
        return (len(algorithms) * 2).to_bytes(2, "big") + b"".join(
            a.as_u16().to_bytes(2, "big") for a in algorithms
        )


@dataclass(frozen=True)
class SupportedGroupsExtension:
    """supported_groups extension (RFC 8422)."""

    groups: tuple[NamedGroup, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))

    @classmethod
    def parse(cls, reader: Reader) -> SupportedGroupsExtension:
        """Parse the list, keeping only groups with a known name."""
        list_len = reader.u16()
        parsed = (NamedGroup.parse(reader) for _ in range(list_len // 2))
        return cls(tuple(g for g in parsed if not g.is_unknown))

    def serialize(self) -> bytes:
        return (len(self.groups) * 2).to_bytes(2, "big") + b"".join(
            int(g).to_bytes(2, "big") for g in self.groups
        )


class SrtpProfileId(IntEnum):
    """DTLS-SRTP protection profile identifiers (RFC 5764 section 4.1.2)."""

    AES128_CM_SHA1_80 = 0x0001
    AEAD_AES128_GCM = 0x0007
    AEAD_AES256_GCM = 0x0008

    @classmethod
    def parse(cls, reader: Reader) -> SrtpProfileId:
        value = reader.u16()
        try:
            return cls(value)
        except ValueError:
            raise ParseError(f"unknown SRTP profile {value:#06x}") from None


_KNOWN_SRTP_PROFILES = {p.value: p for p in SrtpProfileId}


@dataclass(frozen=True)
class UseSrtpExtension:
    """use_srtp extension (RFC 5764)."""

    profiles: tuple[SrtpProfileId, ...]
    mki: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "profiles", tuple(self.profiles))
        object.__setattr__(self, "mki", bytes(self.mki))

    @classmethod
    def default(cls) -> UseSrtpExtension:
        """All supported profiles, strongest first, with an empty MKI."""
        return cls(
            (
                SrtpProfileId.AEAD_AES256_GCM,
                SrtpProfileId.AEAD_AES128_GCM,
                SrtpProfileId.AES128_CM_SHA1_80,
            )
        )

    @classmethod
    def parse(cls, reader: Reader) -> UseSrtpExtension:
        """Parse the extension, skipping profile ids that are not known."""
        profiles_data = reader.take(reader.u16())
        values = (
            int.from_bytes(profiles_data[i:i + 2], "big")
            for i in range(0, len(profiles_data) - 1, 2)
        )
        profiles = tuple(
            _KNOWN_SRTP_PROFILES[v] for v in values if v in _KNOWN_SRTP_PROFILES
        )
        mki = reader.take(reader.u8())
        return cls(profiles, mki)

    def serialize(self) -> bytes:
        return b"".join(
            (
                (len(self.profiles) * 2).to_bytes(2, "big"),
                b"".join(int(p).to_bytes(2, "big") for p in self.profiles),
                bytes([len(self.mki)]),
                self.mki,
            )
        )