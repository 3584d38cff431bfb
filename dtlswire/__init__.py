"""Parsing and serialization of DTLS 1.2 records, handshake messages and hello extensions."""

__version__ = "0.1.5"