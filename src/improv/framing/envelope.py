"""Improv frame envelope.

Frame layout::

    +---------+---------+---------+---------+-----------------+----------+
    |  Magic  | Version |  Type   | Length  |     Payload     | Checksum |
    | 6 bytes | 1 byte  | 1 byte  | 1 byte  | 0-255 bytes     |  1 byte  |
    +---------+---------+---------+---------+-----------------+----------+

- Magic: ASCII ``IMPROV``
- Version: 0x01
- Type: packet type tag (see improv.models.PacketType)
- Length: number of payload bytes
- Checksum: 8-bit wraparound sum of every preceding byte
"""

from __future__ import annotations

from ..exceptions import (
    BadLength,
    ChecksumMismatch,
    EncodeError,
    NotAnImprovPacket,
    UnsupportedVersion,
)
from ..utils.checksum import checksum, verify_checksum as _verify_checksum

MAGIC = b"IMPROV"
IMPROV_VERSION = 0x01
HEADER_SIZE = len(MAGIC) + 3
FRAME_OVERHEAD = HEADER_SIZE + 1
MAX_PAYLOAD_SIZE = 0xFF


def frame_packet(packet_type: int, payload: bytes) -> bytes:
    """Wrap a payload in the Improv envelope.

    Args:
        packet_type: Type tag byte
        payload: Type-specific payload (0-255 bytes)

    Returns:
        Complete frame, checksum included

    Raises:
        EncodeError: If the type tag is not a byte or the payload is too long

    Example:
        >>> frame_packet(0x03, b"\\x02\\x00").hex(" ")
        '49 4d 50 52 4f 56 01 03 02 02 00 e5'
    """
    if not 0 <= packet_type <= 0xFF:
        raise EncodeError(f"Packet type must be 0-255, got {packet_type}")

    if len(payload) > MAX_PAYLOAD_SIZE:
        raise EncodeError(
            f"Payload is {len(payload)} bytes, frame length field allows at most "
            f"{MAX_PAYLOAD_SIZE}"
        )

    result = bytearray(MAGIC)
    result.append(IMPROV_VERSION)
    result.append(packet_type)
    result.append(len(payload))
    result.extend(payload)
    result.append(checksum(result))

    return bytes(result)


def unframe_packet(data: bytes, *, verify_checksum: bool = True) -> tuple[int, bytes]:
    """Validate the envelope of a single frame and extract its payload.

    Checks run in a fixed order and the first failure wins: magic, version,
    payload length, checksum.

    Args:
        data: Exactly one complete frame
        verify_checksum: If True, compare the trailing byte with the checksum
            of the preceding bytes

    Returns:
        Tuple of (packet_type, payload)

    Raises:
        NotAnImprovPacket: If the data does not start with ``IMPROV``
        UnsupportedVersion: If the version byte is not 0x01
        BadLength: If the length byte does not match the frame size
        ChecksumMismatch: If checksum verification is enabled and fails

    Example:
        >>> unframe_packet(bytes.fromhex("49 4d 50 52 4f 56 01 03 02 02 00 e5"))
        (3, b'\\x02\\x00')
    """
    data = bytes(data)

    if data[: len(MAGIC)] != MAGIC:
        raise NotAnImprovPacket(data[: len(MAGIC)])

    if len(data) > len(MAGIC) and data[len(MAGIC)] != IMPROV_VERSION:
        raise UnsupportedVersion(data[len(MAGIC)])

    if len(data) < FRAME_OVERHEAD:
        raise BadLength(
            f"Frame too short: need at least {FRAME_OVERHEAD} bytes, got {len(data)} bytes",
            expected=FRAME_OVERHEAD,
            actual=len(data),
        )

    declared_length = data[HEADER_SIZE - 1]
    actual_length = len(data) - FRAME_OVERHEAD
    if declared_length != actual_length:
        raise BadLength(
            f"Length mismatch: header says {declared_length} bytes, "
            f"but frame carries {actual_length} bytes",
            expected=declared_length,
            actual=actual_length,
        )

    if verify_checksum and not _verify_checksum(data[:-1], data[-1]):
        raise ChecksumMismatch(checksum(data[:-1]), data[-1])

    packet_type = data[len(MAGIC) + 1]
    payload = data[HEADER_SIZE:-1]

    return packet_type, payload
