"""Frame checksum implementation.

Improv frames end with a single byte holding the unsigned 8-bit wraparound
sum of every preceding byte in the frame.
"""

from __future__ import annotations


def checksum(data: bytes) -> int:
    """Calculate the 8-bit additive checksum.

    Args:
        data: Data to checksum

    Returns:
        Sum of all bytes modulo 256

    Example:
        >>> checksum(b"IMPROV\\x01\\x03\\x02\\x02\\x00")
        229
    """
    return sum(data) & 0xFF


def checksum_bytes(data: bytes) -> bytes:
    """Calculate the checksum and return it as a single byte.

    Args:
        data: Data to checksum

    Returns:
        1 byte holding the checksum value
    """
    return bytes([checksum(data)])


def verify_checksum(data: bytes, expected: int | bytes) -> bool:
    """Verify the 8-bit checksum.

    Args:
        data: Data to verify (everything before the checksum byte)
        expected: Expected checksum (int or 1 byte)

    Returns:
        True if checksum matches, False otherwise

    Raises:
        ValueError: If ``expected`` is bytes of a length other than 1

    Example:
        >>> verify_checksum(b"\\x01\\x02", 3)
        True
    """
    if isinstance(expected, bytes):
        if len(expected) != 1:
            raise ValueError(f"Checksum must be 1 byte, got {len(expected)}")
        expected = expected[0]

    return checksum(data) == expected
