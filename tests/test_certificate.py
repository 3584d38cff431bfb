import pytest

from dtlswire.certificate import Certificate
from dtlswire.types import ParseError, Reader
from dtlswire.wrapped import Asn1Cert

MESSAGE = bytes(
    [
        0x00, 0x00, 0x0C,
        0x00, 0x00, 0x04,
        0x01, 0x02, 0x03, 0x04,
        0x00, 0x00, 0x02,
        0x05, 0x06,
    ]
)


def test_roundtrip():
    reader = Reader(MESSAGE)
    parsed = Certificate.parse(reader)
    assert reader.remaining() == 0
    assert parsed.serialize() == MESSAGE


def test_parsed_certificates():
    parsed = Certificate.parse(Reader(MESSAGE))
    assert [c.data for c in parsed.certificate_list] == [b"\x01\x02\x03\x04", b"\x05\x06"]


def test_empty_list_serializes_to_zero_length():
    assert Certificate(()).serialize() == b"\x00\x00\x00"


def test_build_from_certs():
    cert = Certificate((Asn1Cert(b"\x01\x02\x03\x04"), Asn1Cert(b"\x05\x06")))
    assert cert.serialize() == MESSAGE


def test_truncated_certificate_fails():
    with pytest.raises(ParseError):
        Certificate.parse(Reader(MESSAGE[:-1]))


def test_inner_length_overrun_fails():
    bad = bytes([0x00, 0x00, 0x04, 0x00, 0x00, 0x05, 0x01])
    with pytest.raises(ParseError):
        Certificate.parse(Reader(bad))