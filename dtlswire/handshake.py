"""Handshake message framing, body dispatch, fragmentation and reassembly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Union

from .certificate import Certificate
from .certificate_request import CertificateRequest
from .certificate_verify import CertificateVerify
from .client_hello import ClientHello
from .client_key_exchange import ClientKeyExchange
from .finished import Finished
from .hello_verify import HelloVerifyRequest
from .server_hello import ServerHello
from .server_key_exchange import ServerKeyExchange
from .types import CipherSuite, ParseError, Reader, _check_range, _OpenIntEnum

HEADER_LEN = 12


class IncompleteMessage(ParseError):
    """Raised when reassembled fragments do not form a whole message."""


class MessageType(_OpenIntEnum):
    """Handshake message type."""

    HELLO_REQUEST = 0
    CLIENT_HELLO = 1
    SERVER_HELLO = 2
    HELLO_VERIFY_REQUEST = 3
    NEW_SESSION_TICKET = 4
    CERTIFICATE = 11
    SERVER_KEY_EXCHANGE = 12
    CERTIFICATE_REQUEST = 13
    SERVER_HELLO_DONE = 14
    CERTIFICATE_VERIFY = 15
    CLIENT_KEY_EXCHANGE = 16
    FINISHED = 20

    @classmethod
    def from_u8(cls, value: int) -> MessageType:
        return cls(_check_range(value, 8))

    @classmethod
    def parse(cls, reader: Reader) -> MessageType:
        return cls.from_u8(reader.u8())

    def epoch(self) -> int:
        """Epoch in which this message type is sent."""
        if not self.is_unknown and self in (
            MessageType.NEW_SESSION_TICKET,
            MessageType.FINISHED,
        ):
            return 1
        return 0


@dataclass(frozen=True)
class Header:
    """The 12-byte DTLS handshake header."""

    msg_type: MessageType
    length: int
    message_seq: int
    fragment_offset: int
    fragment_length: int

    def __post_init__(self) -> None:
        _check_range(self.length, 24)
        _check_range(self.message_seq, 16)
        _check_range(self.fragment_offset, 24)
        _check_range(self.fragment_length, 24)

    @classmethod
    def parse(cls, reader: Reader) -> Header:
        msg_type = MessageType.parse(reader)
        length = reader.u24()
        message_seq = reader.u16()
        fragment_offset = reader.u24()
        fragment_length = reader.u24()
        return cls(msg_type, length, message_seq, fragment_offset, fragment_length)

    def serialize(self) -> bytes:
        return b"".join(
            (
                bytes([int(self.msg_type)]),
                self.length.to_bytes(3, "big"),
                self.message_seq.to_bytes(2, "big"),
                self.fragment_offset.to_bytes(3, "big"),
                self.fragment_length.to_bytes(3, "big"),
            )
        )

    @property
    def is_fragment(self) -> bool:
        return self.fragment_offset > 0 or self.fragment_length < self.length


@dataclass(frozen=True)
class Fragment:
    """Raw bytes of one piece of a handshake body."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def serialize(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class NewSessionTicket:
    """Opaque session ticket body (lifetime hint and ticket)."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def serialize(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class UnknownBody:
    """Body of a message type with no registered name."""

    value: int

    def serialize(self) -> bytes:
        return bytes([self.value])


Body = Union[
    ClientHello,
    HelloVerifyRequest,
    ServerHello,
    Certificate,
    ServerKeyExchange,
    CertificateRequest,
    CertificateVerify,
    ClientKeyExchange,
    NewSessionTicket,
    Finished,
    UnknownBody,
    Fragment,
    None,
]


def _require_suite(cipher_suite: CipherSuite | None, msg_type: MessageType) -> CipherSuite:
    if cipher_suite is None:
        raise ParseError(f"{msg_type.name} needs a negotiated cipher suite")
    return cipher_suite


def parse_body(
    reader: Reader, msg_type: MessageType, cipher_suite: CipherSuite | None = None
) -> Body:
    """Parse a handshake body of ``msg_type``; empty bodies come back as None."""
    if msg_type.is_unknown:
        return UnknownBody(int(msg_type))
    if msg_type in (MessageType.HELLO_REQUEST, MessageType.SERVER_HELLO_DONE):
        return None
    if msg_type == MessageType.CLIENT_HELLO:
        return ClientHello.parse(reader)
    if msg_type == MessageType.HELLO_VERIFY_REQUEST:
        return HelloVerifyRequest.parse(reader)
    if msg_type == MessageType.SERVER_HELLO:
        return ServerHello.parse(reader)
    if msg_type == MessageType.CERTIFICATE:
        return Certificate.parse(reader)
    if msg_type == MessageType.SERVER_KEY_EXCHANGE:
        suite = _require_suite(cipher_suite, msg_type)
        return ServerKeyExchange.parse(reader, suite.key_exchange_algorithm())
    if msg_type == MessageType.CERTIFICATE_REQUEST:
        return CertificateRequest.parse(reader)
    if msg_type == MessageType.CERTIFICATE_VERIFY:
        return CertificateVerify.parse(reader)
    if msg_type == MessageType.CLIENT_KEY_EXCHANGE:
        suite = _require_suite(cipher_suite, msg_type)
        return ClientKeyExchange.parse(reader, suite.key_exchange_algorithm())
    if msg_type == MessageType.NEW_SESSION_TICKET:
        return NewSessionTicket(reader.take(reader.remaining()))
    # Only FINISHED is left.
    suite = _require_suite(cipher_suite, msg_type)
    return Finished.parse(reader, suite)


@dataclass
class Handshake:
    """A handshake message or fragment with its header."""

    header: Header
    body: Body = None
    handled: bool = False

    @classmethod
    def parse(
        cls,
        reader: Reader,
        cipher_suite: CipherSuite | None = None,
        as_fragment: bool = False,
    ) -> Handshake:
        """Parse one handshake.

        With ``as_fragment`` the body is kept as raw bytes; otherwise the
        message must be whole and its body is parsed.
        """
        header = Header.parse(reader)
        if as_fragment:
            return cls(header, Fragment(reader.take(header.fragment_length)))
        if header.is_fragment:
            raise ParseError("fragmented handshake where a whole message was expected")
        body_reader = Reader(reader.take(header.length))
        return cls(header, parse_body(body_reader, header.msg_type, cipher_suite))

    def _body_bytes(self) -> bytes:
        return b"" if self.body is None else self.body.serialize()

    def serialize(self) -> bytes:
        return self.header.serialize() + self._body_bytes()

    @classmethod
    def defragment(
        cls,
        fragments: Iterable[Handshake],
        cipher_suite: CipherSuite | None = None,
        transcript: bytearray | None = None,
    ) -> Handshake:
        """Join fragments of one message, in the order given, and parse it.

        Joining stops at the first fragment of a different message type. Each
        fragment used is marked handled. When ``transcript`` is given, the
        whole message with an unfragmented header is appended to it.
        """
        iterator = iter(fragments)
        try:
            first = next(iterator)
        except StopIteration:
            raise ValueError("defragment needs at least one fragment") from None

        chunks: list[bytes] = []
        for fragment in (first, *iterator):
            if fragment.header.msg_type != first.header.msg_type:
                break
            if not isinstance(fragment.body, Fragment):
                raise TypeError("defragment needs handshakes with Fragment bodies")
            fragment.handled = True
            chunks.append(fragment.body.data)

        data = b"".join(chunks)
        if len(data) != first.header.length:
            raise IncompleteMessage(
                f"fragments hold {len(data)} bytes, message needs {first.header.length}"
            )

        header = replace(first.header, fragment_offset=0, fragment_length=first.header.length)
        if transcript is not None:
            transcript.extend(header.serialize())
            transcript.extend(data)

        reader = Reader(data)
        body = parse_body(reader, header.msg_type, cipher_suite)
        if reader.remaining() and header.msg_type == MessageType.FINISHED:
            raise IncompleteMessage("Finished body has trailing bytes")
        return cls(header, body)

    def fragment(self, max_size: int) -> Iterator[Handshake]:
        """Split the message into fragments of at most ``max_size`` body bytes."""
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        data = self._body_bytes()
        if len(data) != self.header.length:
            raise ValueError(
                f"body serializes to {len(data)} bytes, header says {self.header.length}"
            )
        for index, offset in enumerate(range(0, len(data), max_size)):
            chunk = data[offset:offset + max_size]
            header = replace(
                self.header,
                fragment_offset=offset,
                fragment_length=len(chunk),
                message_seq=(self.header.message_seq + index) & 0xFFFF,
            )
            yield Handshake(header, Fragment(chunk))

    def dupe_triggers_resend(self) -> int | None:
        """Message sequence of a duplicate that should trigger a flight resend.

        Only the first fragment of a ClientHello, HelloVerifyRequest,
        ServerHelloDone or ClientKeyExchange qualifies.
        """
        if self.header.fragment_offset != 0:
            return None
        msg_type = self.header.msg_type
        if not msg_type.is_unknown and msg_type in (
            MessageType.CLIENT_HELLO,
            MessageType.HELLO_VERIFY_REQUEST,
            MessageType.SERVER_HELLO_DONE,
            MessageType.CLIENT_KEY_EXCHANGE,
        ):
            return self.header.message_seq
        return None