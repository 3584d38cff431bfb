import pytest

from dtlswire.digitally_signed import DigitallySigned
from dtlswire.types import (
    HashAlgorithm,
    ParseError,
    Reader,
    SignatureAlgorithm,
    SignatureAndHashAlgorithm,
)

MESSAGE = bytes(
    [
        0x04, 0x01,  # SHA256 + RSA
        0x00, 0x04,  # signature length
        0x01, 0x02, 0x03, 0x04,  # signature data
    ]
)


def test_roundtrip():
    reader = Reader(MESSAGE)
    parsed = DigitallySigned.parse(reader)
    assert reader.remaining() == 0
    assert parsed.serialize() == MESSAGE


def test_parsed_fields():
    parsed = DigitallySigned.parse(Reader(MESSAGE))
    assert parsed.algorithm == SignatureAndHashAlgorithm(
        HashAlgorithm.SHA256, SignatureAlgorithm.RSA
    )
    assert parsed.signature == bytes([0x01, 0x02, 0x03, 0x04])


def test_truncated_signature():
    with pytest.raises(ParseError):
        DigitallySigned.parse(Reader(MESSAGE[:-1]))


def test_parse_at_offset():
    data = b"\xff\xff" + MESSAGE
    parsed = DigitallySigned.parse(Reader(data, 2))
    assert parsed.serialize() == MESSAGE