import pytest

from dtlswire.certificate_request import CertificateRequest
from dtlswire.types import (
    ClientCertificateType,
    HashAlgorithm,
    ParseError,
    Reader,
    SignatureAlgorithm,
    SignatureAndHashAlgorithm,
)

MESSAGE = bytes(
    [
        0x02,
        0x01, 0x02,
        0x00, 0x04,
        0x04, 0x01, 0x05, 0x02,
        0x00, 0x0C,
        0x00, 0x04,
        0x01, 0x02, 0x03, 0x04,
        0x00, 0x04,
        0x05, 0x06, 0x07, 0x08,
    ]
)


def test_roundtrip():
    reader = Reader(MESSAGE)
    parsed = CertificateRequest.parse(reader)
    assert reader.remaining() == 0
    assert parsed.serialize() == MESSAGE


def test_parsed_fields():
    parsed = CertificateRequest.parse(Reader(MESSAGE))
    assert parsed.certificate_types == (
        ClientCertificateType.RSA_SIGN,
        ClientCertificateType.DSS_SIGN,
    )
    assert parsed.supported_signature_algorithms == (
        SignatureAndHashAlgorithm(HashAlgorithm.SHA256, SignatureAlgorithm.RSA),
        SignatureAndHashAlgorithm(HashAlgorithm.SHA384, SignatureAlgorithm.DSA),
    )
    assert [a.data for a in parsed.certificate_authorities] == [
        b"\x01\x02\x03\x04",
        b"\x05\x06\x07\x08",
    ]


def test_supports_hash_algorithm():
    parsed = CertificateRequest.parse(Reader(MESSAGE))
    assert parsed.supports_hash_algorithm(HashAlgorithm.SHA256) is True
    assert parsed.supports_hash_algorithm(HashAlgorithm.SHA384) is True
    assert parsed.supports_hash_algorithm(HashAlgorithm.SHA512) is False


def test_empty_certificate_types_fails():
    with pytest.raises(ParseError):
        CertificateRequest.parse(Reader(bytes([0x00, 0x00, 0x00, 0x00, 0x00])))


def test_odd_signature_list_fails():
    data = bytes([0x01, 0x40, 0x00, 0x03, 0x04, 0x03, 0x05, 0x00, 0x00])
    with pytest.raises(ParseError):
        CertificateRequest.parse(Reader(data))


def test_empty_distinguished_name_fails():
    data = bytes([0x01, 0x40, 0x00, 0x00, 0x00, 0x02, 0x00, 0x00])
    with pytest.raises(ParseError):
        CertificateRequest.parse(Reader(data))


def test_no_authorities():
    data = bytes([0x01, 0x40, 0x00, 0x02, 0x04, 0x03, 0x00, 0x00])
    parsed = CertificateRequest.parse(Reader(data))
    assert parsed.certificate_authorities == ()
    assert parsed.certificate_types == (ClientCertificateType.ECDSA_SIGN,)
    assert parsed.serialize() == data