"""CertificateRequest handshake message."""

from __future__ import annotations

from dataclasses import dataclass

from .types import (
    ClientCertificateType,
    HashAlgorithm,
    ParseError,
    Reader,
    SignatureAndHashAlgorithm,
)
from .wrapped import DistinguishedName

_MAX_CERT_TYPES = 8
_MAX_SIG_ALGS = 32
_MAX_AUTHORITIES = 32


@dataclass(frozen=True)
class CertificateRequest:
    """Server request for a client certificate."""

    certificate_types: tuple[ClientCertificateType, ...]
    supported_signature_algorithms: tuple[SignatureAndHashAlgorithm, ...]
    certificate_authorities: tuple[DistinguishedName, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "certificate_types", tuple(self.certificate_types))
        object.__setattr__(
            self,
            "supported_signature_algorithms",
            tuple(self.supported_signature_algorithms),
        )
        object.__setattr__(
            self,
            "certificate_authorities",
            tuple(
                a if isinstance(a, DistinguishedName) else DistinguishedName(a)
                for a in self.certificate_authorities
            ),
        )

    @classmethod
    def parse(cls, reader: Reader) -> CertificateRequest:
        types_data = reader.take(reader.u8())
        if not types_data:
            raise ParseError("empty certificate type list")
        if len(types_data) > _MAX_CERT_TYPES:
            raise ParseError(f"more than {_MAX_CERT_TYPES} certificate types")
        certificate_types = tuple(ClientCertificateType.from_u8(b) for b in types_data)

        sigs_data = reader.take(reader.u16())
        if len(sigs_data) % 2:
            raise ParseError("trailing byte in signature algorithm list")
        if len(sigs_data) // 2 > _MAX_SIG_ALGS:
            raise ParseError(f"more than {_MAX_SIG_ALGS} signature algorithms")
        sigs_reader = Reader(sigs_data)
        algorithms = tuple(
            SignatureAndHashAlgorithm.parse(sigs_reader) for _ in range(len(sigs_data) // 2)
        )

        auths_reader = Reader(reader.take(reader.u16()))
        authorities: list[DistinguishedName] = []
        while auths_reader.remaining():
            if len(authorities) == _MAX_AUTHORITIES:
                raise ParseError(f"more than {_MAX_AUTHORITIES} certificate authorities")
            authorities.append(DistinguishedName.parse(auths_reader))

        return cls(certificate_types, algorithms, tuple(authorities))

    def serialize(self) -> bytes:
        authorities = b"".join(name.serialize() for name in self.certificate_authorities)
        return b"".join(
            (
                bytes([len(self.certificate_types)]),
                bytes(int(t) for t in self.certificate_types),
                (len(self.supported_signature_algorithms) * 2).to_bytes(2, "big"),
                b"".join(
                    a.as_u16().to_bytes(2, "big")
                    for a in self.supported_signature_algorithms
                ),
                len(authorities).to_bytes(2, "big"),
                authorities,
            )
        )

    def supports_hash_algorithm(self, hash_algorithm: HashAlgorithm) -> bool:
        """True if any offered signature algorithm uses ``hash_algorithm``."""
        return any(a.hash == hash_algorithm for a in self.supported_signature_algorithms)