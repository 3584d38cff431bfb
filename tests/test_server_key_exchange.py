import pytest

from dtlswire.digitally_signed import DigitallySigned
from dtlswire.named_group import CurveType, NamedGroup
from dtlswire.server_key_exchange import EcdhParams, ServerKeyExchange
from dtlswire.types import (
    HashAlgorithm,
    KeyExchangeAlgorithm,
    ParseError,
    Reader,
    SignatureAlgorithm,
    SignatureAndHashAlgorithm,
)

MESSAGE_ECDH_PUBKEY = bytes([0x03, 0x00, 0x17, 0x04, 0x01, 0x02, 0x03, 0x04])
ALGORITHM = SignatureAndHashAlgorithm(HashAlgorithm.SHA256, SignatureAlgorithm.RSA)
SIGNATURE_BYTES = bytes([0x05, 0x06, 0x07, 0x08])
EXPECTED = (
    MESSAGE_ECDH_PUBKEY
    + ALGORITHM.as_u16().to_bytes(2, "big")
    + len(SIGNATURE_BYTES).to_bytes(2, "big")
    + SIGNATURE_BYTES
)


def test_roundtrip_ecdh():
    reader = Reader(EXPECTED)
    parsed = ServerKeyExchange.parse(reader, KeyExchangeAlgorithm.EECDH)
    assert reader.remaining() == 0
    assert parsed.serialize(True) == EXPECTED


def test_parsed_fields():
    parsed = ServerKeyExchange.parse(Reader(EXPECTED), KeyExchangeAlgorithm.EECDH)
    assert parsed.params.curve_type == CurveType.NAMED_CURVE
    assert parsed.params.named_group == NamedGroup.SECP256R1
    assert parsed.params.public_key == b"\x01\x02\x03\x04"
    assert parsed.signature() == DigitallySigned(ALGORITHM, SIGNATURE_BYTES)


def test_serialize_without_signature():
    parsed = ServerKeyExchange.parse(Reader(EXPECTED), KeyExchangeAlgorithm.EECDH)
    assert parsed.serialize(False) == MESSAGE_ECDH_PUBKEY


def test_no_signature_when_nothing_left():
    parsed = EcdhParams.parse(Reader(MESSAGE_ECDH_PUBKEY))
    assert parsed.signature is None
    assert parsed.serialize() == MESSAGE_ECDH_PUBKEY


def test_unknown_algorithm_fails():
    with pytest.raises(ParseError):
        ServerKeyExchange.parse(Reader(EXPECTED), KeyExchangeAlgorithm.UNKNOWN)


def test_truncated_signature_fails():
    with pytest.raises(ParseError):
        ServerKeyExchange.parse(Reader(EXPECTED[:-1]), KeyExchangeAlgorithm.EECDH)