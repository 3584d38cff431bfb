"""HelloVerifyRequest handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from .ids import Cookie
from .types import ParseError, ProtocolVersion, Reader


@dataclass(frozen=True)
class HelloVerifyRequest:
    """Server challenge carrying a stateless cookie."""

    server_version: ProtocolVersion
    cookie: Cookie

    def __post_init__(self) -> None:
        object.__setattr__(self, "cookie", Cookie(self.cookie))

    @classmethod
    def parse(cls, reader: Reader) -> HelloVerifyRequest:
        server_version = ProtocolVersion.parse(reader)
        cookie = Cookie.parse(reader)
        if not cookie:
            raise ParseError("HelloVerifyRequest cookie is empty")
        return cls(server_version, cookie)

    def serialize(self) -> bytes:
        return self.server_version.serialize() + bytes([len(self.cookie)]) + bytes(self.cookie)