"""ServerHello handshake message."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .extension import Extension, ExtensionType
from .extensions import SrtpProfileId, UseSrtpExtension
from .ids import SessionId
from .random import Random
from .types import CipherSuite, CompressionMethod, ParseError, ProtocolVersion, Reader

_MAX_EXTENSIONS = 32


@dataclass(frozen=True)
class ServerHello:
    """The server's reply to a ClientHello."""

    server_version: ProtocolVersion
    random: Random
    session_id: SessionId
    cipher_suite: CipherSuite
    compression_method: CompressionMethod
    extensions: tuple[Extension, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "session_id", SessionId(self.session_id))
        if self.extensions is not None:
            object.__setattr__(self, "extensions", tuple(self.extensions))

    def with_extensions(self, srtp_profile: SrtpProfileId | None = None) -> ServerHello:
        """Return a copy with the server's extensions.

        use_srtp is included when a profile was negotiated; extended master
        secret and an empty renegotiation_info are always included.
        """
        extensions: list[Extension] = []
        if srtp_profile is not None:
            use_srtp = UseSrtpExtension((SrtpProfileId(srtp_profile),))
            extensions.append(Extension(ExtensionType.USE_SRTP, use_srtp.serialize()))
        extensions.append(Extension(ExtensionType.EXTENDED_MASTER_SECRET, b""))
        # Empty renegotiated_connection for the initial handshake (RFC 5746).
        extensions.append(Extension(ExtensionType.RENEGOTIATION_INFO, b"\x00"))
        return replace(self, extensions=tuple(extensions))

    @classmethod
    def parse(cls, reader: Reader) -> ServerHello:
        server_version = ProtocolVersion.parse(reader)
        random = Random.parse(reader)
        session_id = SessionId.parse(reader)
        cipher_suite = CipherSuite.parse(reader)
        compression_method = CompressionMethod.parse(reader)
        extensions = cls._parse_extensions(reader)
        return cls(
            server_version,
            random,
            session_id,
            cipher_suite,
            compression_method,
            extensions,
        )

    @staticmethod
    def _parse_extensions(reader: Reader) -> tuple[Extension, ...] | None:
        if not reader.remaining():
            return None
        if reader.remaining() < 2:
            raise ParseError("truncated ServerHello extensions length")
        length = reader.u16()
        if reader.remaining() < length:
            raise ParseError("truncated ServerHello extensions")
        if length == 0:
            return None
        ext_reader = Reader(reader.take(length))
        if reader.remaining():
            raise ParseError("trailing bytes after ServerHello extensions")
        extensions: list[Extension] = []
        while ext_reader.remaining() and len(extensions) < _MAX_EXTENSIONS:
            extensions.append(Extension.parse(ext_reader))
        return tuple(extensions)

    def serialize(self) -> bytes:
        parts = [
            self.server_version.serialize(),
            self.random.serialize(),
            bytes([len(self.session_id)]),
            bytes(self.session_id),
            int(self.cipher_suite).to_bytes(2, "big"),
            bytes([int(self.compression_method)]),
        ]
        if self.extensions is not None:
            body = b"".join(ext.serialize() for ext in self.extensions)
            parts.append(len(body).to_bytes(2, "big"))
            parts.append(body)
        return b"".join(parts)