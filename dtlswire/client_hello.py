"""ClientHello handshake message."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import TypeVar

from .extension import Extension, ExtensionType
from .extensions import (
    ECPointFormatsExtension,
    SignatureAlgorithmsExtension,
    SupportedGroupsExtension,
    UseSrtpExtension,
)
from .ids import Cookie, SessionId
from .named_group import NamedGroup
from .random import Random
from .types import CipherSuite, CompressionMethod, ParseError, ProtocolVersion, Reader

_MAX_EXTENSIONS = 16

_T = TypeVar("_T")


def _parse_at_least_one(data: bytes, parse: Callable[[Reader], _T], what: str) -> tuple[_T, ...]:
    """Parse ``data`` completely as a non-empty list of items."""
    reader = Reader(data)
    items = []
    while reader.remaining():
        items.append(parse(reader))
    if not items:
        raise ParseError(f"empty {what} list")
    return tuple(items)


@dataclass(frozen=True)
class ClientHello:
    """The client's opening handshake message."""

    client_version: ProtocolVersion
    random: Random
    session_id: SessionId
    cookie: Cookie
    cipher_suites: tuple[CipherSuite, ...]
    compression_methods: tuple[CompressionMethod, ...]
    extensions: tuple[Extension, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "session_id", SessionId(self.session_id))
        object.__setattr__(self, "cookie", Cookie(self.cookie))
        object.__setattr__(self, "cipher_suites", tuple(self.cipher_suites))
        object.__setattr__(self, "compression_methods", tuple(self.compression_methods))
        object.__setattr__(self, "extensions", tuple(self.extensions))

    def with_extensions(self, groups: Iterable[NamedGroup] = ()) -> ClientHello:
        """Return a copy carrying every extension the handshake requires.

        ``groups`` are the key exchange groups on offer; when there are any,
        supported_groups and ec_point_formats are added as well.
        """
        groups = tuple(groups)
        added: list[Extension] = []

        if groups:
            added.append(
                Extension(
                    ExtensionType.SUPPORTED_GROUPS,
                    SupportedGroupsExtension(groups).serialize(),
                )
            )
            added.append(
                Extension(
                    ExtensionType.EC_POINT_FORMATS,
                    ECPointFormatsExtension.default().serialize(),
                )
            )

        added.append(
            Extension(
                ExtensionType.SIGNATURE_ALGORITHMS,
                SignatureAlgorithmsExtension.default().serialize(),
            )
        )
        added.append(Extension(ExtensionType.USE_SRTP, UseSrtpExtension.default().serialize()))

        if any(suite.need_encrypt_then_mac() for suite in self.cipher_suites):
            added.append(Extension(ExtensionType.ENCRYPT_THEN_MAC, b"\x00"))

        added.append(Extension(ExtensionType.EXTENDED_MASTER_SECRET, b""))

        return replace(self, extensions=self.extensions + tuple(added))

    @classmethod
    def parse(cls, reader: Reader) -> ClientHello:
        client_version = ProtocolVersion.parse(reader)
        random = Random.parse(reader)
        session_id = SessionId.parse(reader)
        cookie = Cookie.parse(reader)
        cipher_suites = _parse_at_least_one(
            reader.take(reader.u16()), CipherSuite.parse, "cipher suite"
        )
        compression_methods = _parse_at_least_one(
            reader.take(reader.u8()), CompressionMethod.parse, "compression method"
        )
        extensions = cls._parse_extensions(reader)
        return cls(
            client_version,
            random,
            session_id,
            cookie,
            cipher_suites,
            compression_methods,
            extensions,
        )

    @staticmethod
    def _parse_extensions(reader: Reader) -> tuple[Extension, ...]:
        if not reader.remaining():
            return ()
        length = reader.u16()
        if length == 0:
            return ()
        ext_reader = Reader(reader.take(length))
        extensions: list[Extension] = []
        while ext_reader.remaining() and len(extensions) < _MAX_EXTENSIONS:
            extensions.append(Extension.parse(ext_reader))
        return tuple(extensions)

    def serialize(self) -> bytes:
        parts = [
            self.client_version.serialize(),
            self.random.serialize(),
            bytes([len(self.session_id)]),
            bytes(self.session_id),
            bytes([len(self.cookie)]),
            bytes(self.cookie),
            (len(self.cipher_suites) * 2).to_bytes(2, "big"),
            *(int(s).to_bytes(2, "big") for s in self.cipher_suites),
            bytes([len(self.compression_methods)]),
            bytes(int(m) for m in self.compression_methods),
        ]
        if self.extensions:
            body = b"".join(ext.serialize() for ext in self.extensions)
            parts.append(len(body).to_bytes(2, "big"))
            parts.append(body)
        return b"".join(parts)