"""Packet codec for improv.

This module provides encoding and decoding between packet models and the
exact byte sequence of an Improv frame.
"""

from __future__ import annotations

from .bytepack import ByteReader, ByteWriter
from .decoder import decode, decode_payload
from .encoder import encode, encode_payload

__all__ = [
    "encode",
    "decode",
    "encode_payload",
    "decode_payload",
    "ByteReader",
    "ByteWriter",
]
