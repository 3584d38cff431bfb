"""Certificate handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from .types import ParseError, Reader
from .wrapped import Asn1Cert

_MAX_CERTIFICATES = 32


@dataclass(frozen=True)
class Certificate:
    """A chain of DER certificates, leaf first."""

    certificate_list: tuple[Asn1Cert, ...]

    def __post_init__(self) -> None:
        certs = tuple(
            c if isinstance(c, Asn1Cert) else Asn1Cert(c) for c in self.certificate_list
        )
        if len(certs) > _MAX_CERTIFICATES:
            raise ValueError(f"more than {_MAX_CERTIFICATES} certificates")
        object.__setattr__(self, "certificate_list", certs)

    @classmethod
    def parse(cls, reader: Reader) -> Certificate:
        certs_reader = Reader(reader.take(reader.u24()))
        certs: list[Asn1Cert] = []
        while certs_reader.remaining():
            if len(certs) == _MAX_CERTIFICATES:
                raise ParseError(f"more than {_MAX_CERTIFICATES} certificates")
            certs.append(Asn1Cert.parse(certs_reader))
        return cls(tuple(certs))

    def serialize(self) -> bytes:
        body = b"".join(cert.serialize() for cert in self.certificate_list)
        return len(body).to_bytes(3, "big") + body