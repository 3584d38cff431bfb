# dtlswire

Parsing and serialization of the DTLS 1.2 wire format: the record layer,
handshake headers and bodies, and the hello extensions used by WebRTC
(supported groups, EC point formats, signature algorithms, `use_srtp`,
extended master secret and renegotiation info).

It has no dependencies beyond the standard library. The `test` extra pulls
in pytest for the test suite in `tests/`.

## Reading and writing

Parsing starts from a `Reader` (in `dtlswire.types`). It walks a byte string
with big-endian `u8`, `u16`, `u24`, `u32`, `u48` and `take(n)`. It raises
`ParseError`, a `ValueError`, when the data runs short or is malformed. Every
message class has a `parse` class method that takes a reader, and a
`serialize` method that returns `bytes`. Messages are frozen dataclasses
holding their own bytes.

```python
from dtlswire.types import Reader
from dtlswire.record import DTLSRecord, ContentType

record = DTLSRecord.parse(Reader(datagram, 0), 0)
if record.content_type is ContentType.HANDSHAKE:
    ...
assert record.serialize() == datagram[: 13 + record.length]
```

`DTLSRecord.parse` accepts only DTLS 1.0 and 1.2 record versions. Its second
argument is a number of bytes to skip after the 13-byte header.
`DTLSRecord.nonce()` returns the first 8 bytes of the fragment, the explicit
AEAD nonce. `Sequence` orders by epoch, then sequence number.

## Handshake messages

`Handshake.parse(reader, cipher_suite=None, as_fragment=False)` in
`dtlswire.handshake` reads the 12-byte `Header` and the body. The body is
dispatched on `MessageType` by `parse_body`:

- HelloRequest and ServerHelloDone give `None`.
- ServerKeyExchange, ClientKeyExchange and Finished need the negotiated
  `CipherSuite`. Without it they raise `ParseError`.
- NewSessionTicket is kept as opaque bytes (`NewSessionTicket`).
- Unnamed message types give `UnknownBody`.

Without `as_fragment`, a fragmented header raises `ParseError`. With it, the
body is kept raw in a `Fragment`. `Handshake.defragment(fragments,
cipher_suite=None, transcript=None)` joins fragments in the order given. It
stops at the first fragment of another message type and marks each fragment
it uses as `handled`. It raises `IncompleteMessage` when the joined bytes do
not match the header length. It then parses the whole message. When a
`bytearray` transcript is given, the message with an unfragmented header is
appended to it.

`Handshake.fragment(max_size)` yields fragments of at most `max_size` body
bytes. Each fragment's `message_seq` is the message's own plus the
fragment's index.

```python
from dtlswire.handshake import Handshake

pieces = list(message.fragment(10))
whole = Handshake.defragment(pieces)
```

`Handshake.dupe_triggers_resend()` returns the message sequence number of the
first fragment of a ClientHello, HelloVerifyRequest, ServerHelloDone or
ClientKeyExchange, and `None` for anything else.

## Building hellos

`ClientHello.with_extensions(groups)` returns a copy with these extensions
added:

- supported_groups and ec_point_formats, when `groups` is not empty;
- signature_algorithms and use_srtp, with their defaults;
- extended master secret.

`ServerHello.with_extensions(srtp_profile=None)` sets use_srtp when a profile
is given. It always adds extended master secret and an empty
renegotiation_info.

`Random.generate()` stamps the current time and 28 random bytes from
`secrets`. `SessionId` (0 to 32 bytes) and `Cookie` (0 to 255 bytes) are
`bytes` subclasses. They raise `InvalidLength` when built with a bad length.
`HelloVerifyRequest.parse` rejects an empty cookie.

## Modules

- `dtlswire.types`: `Reader`, `ParseError`, `ProtocolVersion`, `CipherSuite`,
  `CompressionMethod`, `ClientCertificateType`, `SignatureAlgorithm`,
  `HashAlgorithm`, `SignatureAndHashAlgorithm`, `KeyExchangeAlgorithm`.
- `dtlswire.named_group`: `NamedGroup`, `CurveType`.
- `dtlswire.ids`: `SessionId`, `Cookie`, `InvalidLength`.
- `dtlswire.random`: `Random`.
- `dtlswire.extension`: `Extension`, `ExtensionType`.
- `dtlswire.extensions`: `ECPointFormatsExtension`,
  `SignatureAlgorithmsExtension`, `SupportedGroupsExtension`,
  `UseSrtpExtension`, `SrtpProfileId`, `ECPointFormat`.
- `dtlswire.record`: `DTLSRecord`, `ContentType`, `Sequence`.
- `dtlswire.wrapped`: `Asn1Cert`, `DistinguishedName`.
- `dtlswire.digitally_signed`: `DigitallySigned`.
- `dtlswire.client_hello`, `dtlswire.server_hello`, `dtlswire.hello_verify`,
  `dtlswire.certificate`, `dtlswire.certificate_request`,
  `dtlswire.certificate_verify`, `dtlswire.server_key_exchange`,
  `dtlswire.client_key_exchange`, `dtlswire.finished`: the handshake bodies.
- `dtlswire.handshake`: `Handshake`, `Header`, `MessageType`, `Fragment`,
  `NewSessionTicket`, `UnknownBody`, `parse_body`, `IncompleteMessage`.

The enums keep values they have no name for as unknown members, with
`is_unknown` set, so such values still round-trip. Only the ECDHE-ECDSA
AES-GCM cipher suites are known by name.

## What it does not do

This is a codec only. It runs no handshake state machine and does no
cryptography: no key exchange, signing, encryption or decryption of records,
and no certificate handling beyond carrying DER bytes. It has no timers or
retransmission, no sockets or other I/O, and no SRTP key export. Those belong
to the DTLS engine that uses it.