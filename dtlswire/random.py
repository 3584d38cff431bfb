"""Handshake random value: a timestamp and 28 random bytes."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone

from .types import Reader

_RANDOM_BYTES_LEN = 28


@dataclass(frozen=True)
class Random:
    """ClientHello/ServerHello random."""

    gmt_unix_time: int
    random_bytes: bytes

    def __post_init__(self) -> None:
        if not 0 <= self.gmt_unix_time < (1 << 32):
            raise ValueError("gmt_unix_time must fit in 32 bits")
        if len(self.random_bytes) != _RANDOM_BYTES_LEN:
            raise ValueError(f"random_bytes must be {_RANDOM_BYTES_LEN} bytes")
        object.__setattr__(self, "random_bytes", bytes(self.random_bytes))

    @classmethod
    def generate(cls, now: datetime | None = None) -> Random:
        """Build a fresh random stamped with ``now`` (current time by default)."""
        if now is None:
            now = datetime.now(timezone.utc)
        # Truncated to 32 bits, valid until 2106.
        seconds = int(now.timestamp()) & 0xFFFFFFFF
        return cls(seconds, secrets.token_bytes(_RANDOM_BYTES_LEN))

    @classmethod
    def parse(cls, reader: Reader) -> Random:
        gmt_unix_time = reader.u32()
        return cls(gmt_unix_time, reader.take(_RANDOM_BYTES_LEN))

    def serialize(self) -> bytes:
        return self.gmt_unix_time.to_bytes(4, "big") + self.random_bytes