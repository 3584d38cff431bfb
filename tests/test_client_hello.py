import pytest

from dtlswire.client_hello import ClientHello
from dtlswire.extension import Extension, ExtensionType
from dtlswire.ids import Cookie, SessionId
from dtlswire.named_group import NamedGroup
from dtlswire.random import Random
from dtlswire.types import (
    CipherSuite,
    CompressionMethod,
    ParseError,
    ProtocolVersion,
    Reader,
)

MESSAGE = bytes(
    [0xFE, 0xFD]
    + list(range(0x01, 0x21))
    + [0x01, 0xAA]
    + [0x01, 0xBB]
    + [0x00, 0x04, 0xC0, 0x2B, 0xC0, 0x2C]
    + [0x01, 0x00]
)


def _hello() -> ClientHello:
    random = Random.parse(Reader(MESSAGE[2:34]))
    return ClientHello(
        ProtocolVersion.DTLS1_2,
        random,
        SessionId(b"\xaa"),
        Cookie(b"\xbb"),
        (
            CipherSuite.ECDHE_ECDSA_AES128_GCM_SHA256,
            CipherSuite.ECDHE_ECDSA_AES256_GCM_SHA384,
        ),
        (CompressionMethod.NULL,),
    )


def test_roundtrip():
    hello = _hello()
    serialized = hello.serialize()
    assert serialized == MESSAGE

    reader = Reader(serialized)
    parsed = ClientHello.parse(reader)
    assert parsed == hello
    assert reader.remaining() == 0


def test_session_id_too_long():
    message = bytearray(MESSAGE)
    message[34] = 0x21
    with pytest.raises(ParseError):
        ClientHello.parse(Reader(message))


def test_cookie_too_long():
    message = bytearray(MESSAGE)
    message[36] = 0xFF
    with pytest.raises(ParseError):
        ClientHello.parse(Reader(message))


def test_empty_cipher_suites_rejected():
    message = MESSAGE[:38] + b"\x00\x00" + MESSAGE[44:]
    with pytest.raises(ParseError):
        ClientHello.parse(Reader(message))


def test_odd_cipher_suite_length_rejected():
    message = bytearray(MESSAGE)
    message[39] = 0x03
    with pytest.raises(ParseError):
        ClientHello.parse(Reader(bytes(message)))


def test_empty_compression_methods_rejected():
    message = MESSAGE[:-2] + b"\x00"
    with pytest.raises(ParseError):
        ClientHello.parse(Reader(message))


def test_with_extensions_without_groups():
    hello = _hello().with_extensions()
    assert [e.extension_type for e in hello.extensions] == [
        ExtensionType.SIGNATURE_ALGORITHMS,
        ExtensionType.USE_SRTP,
        ExtensionType.EXTENDED_MASTER_SECRET,
    ]
    assert hello.extensions[1].data == b"\x00\x06\x00\x08\x00\x07\x00\x01\x00"
    assert hello.extensions[2].data == b""


def test_with_extensions_with_groups():
    hello = _hello().with_extensions([NamedGroup.SECP256R1, NamedGroup.SECP384R1])
    types = [e.extension_type for e in hello.extensions]
    assert types == [
        ExtensionType.SUPPORTED_GROUPS,
        ExtensionType.EC_POINT_FORMATS,
        ExtensionType.SIGNATURE_ALGORITHMS,
        ExtensionType.USE_SRTP,
        ExtensionType.EXTENDED_MASTER_SECRET,
    ]
    assert hello.extensions[0].data == b"\x00\x04\x00\x17\x00\x18"
    assert hello.extensions[1].data == b"\x01\x00"
    assert hello.extensions[2].data == (
        b"\x00\x08\x04\x03\x05\x03\x04\x01\x05\x01"
    )


def test_with_extensions_roundtrip():
    hello = _hello().with_extensions([NamedGroup.SECP256R1])
    reader = Reader(hello.serialize())
    parsed = ClientHello.parse(reader)
    assert parsed == hello
    assert reader.remaining() == 0


def test_zero_extensions_length_parses_as_none():
    reader = Reader(MESSAGE + b"\x00\x00")
    parsed = ClientHello.parse(reader)
    assert parsed.extensions == ()
    assert reader.remaining() == 0


def test_extensions_capped_at_sixteen():
    hello = _hello()
    exts = tuple(Extension(ExtensionType.PADDING, b"") for _ in range(18))
    body = b"".join(e.serialize() for e in exts)
    data = hello.serialize() + len(body).to_bytes(2, "big") + body
    parsed = ClientHello.parse(Reader(data))
    assert len(parsed.extensions) == 16