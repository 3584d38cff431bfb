"""Variable-length identifiers: session ids and cookies."""

from __future__ import annotations

from .types import ParseError, Reader


class InvalidLength(ValueError):
    """Raised when an identifier has a length outside its allowed bounds."""

    def __init__(self, name: str, minimum: int, maximum: int, length: int) -> None:
        super().__init__(
            f"Incorrect variable ID ({name}) length: {minimum} <= {length} <= {maximum}"
        )
        self.name = name
        self.minimum = minimum
        self.maximum = maximum
        self.length = length


class _VariableId(bytes):
    """Immutable byte string whose length must lie within fixed bounds."""

    min_len: int = 0
    max_len: int = 0

    def __new__(cls, data: bytes | bytearray | memoryview | str = b""):
        if isinstance(data, int):
            raise TypeError(f"{cls.__name__} needs bytes or str, not int")
        if isinstance(data, str):
            data = data.encode("utf-8")
        raw = bytes(data)
        if not cls.min_len <= len(raw) <= cls.max_len:
            raise InvalidLength(cls.__name__, cls.min_len, cls.max_len, len(raw))
        return super().__new__(cls, raw)

    @classmethod
    def _make_empty(cls):
        if cls.min_len > 0:
            raise ValueError(f"{cls.__name__}.empty() is not valid")
        return cls(b"")

    @classmethod
    def _read(cls, reader: Reader):
        length = reader.u8()
        if not cls.min_len <= length <= cls.max_len:
            raise ParseError(
                f"{cls.__name__} length {length} outside {cls.min_len}..{cls.max_len}"
            )
        return cls(reader.take(length))

    def __repr__(self) -> str:
        body = ", ".join(f"{b:02x}" for b in self)
        return f"{type(self).__name__}([{body}])"

    __str__ = __repr__


class SessionId(_VariableId):
    """TLS session identifier, 0 to 32 bytes."""

    min_len = 0
    max_len = 32

    @classmethod
    def empty(cls):
        """A session id with no bytes."""
        return cls._make_empty()

    @classmethod
    def parse(cls, reader: Reader):
        """Read a one-byte length followed by that many bytes."""
        return cls._read(reader)


class Cookie(_VariableId):
    """DTLS HelloVerifyRequest cookie, 0 to 255 bytes."""

    min_len = 0
    max_len = 255

    @classmethod
    def empty(cls):
        """A cookie with no bytes."""
        return cls._make_empty()

    @classmethod
    def parse(cls, reader: Reader):
        """Read a one-byte length followed by that many bytes."""
        return cls._read(reader)