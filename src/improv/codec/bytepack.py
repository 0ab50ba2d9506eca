"""Byte-level packing and unpacking utilities.

Every length in the Improv wire format is a single unsigned byte, so the
primitives here are bytes and byte-length-prefixed byte strings.
"""

from __future__ import annotations


class ByteWriter:
    """Appends bytes and length-prefixed fields to a buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_u8(0x01)
        >>> writer.write_prefixed(b"anthill")
        >>> writer.to_bytes()
        b'\\x01\\x07anthill'
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_u8(self, value: int) -> None:
        """Write a single unsigned byte.

        Raises:
            ValueError: If value is outside 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Value {value} does not fit in one byte")
        self._buffer.append(value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.extend(data)

    def write_prefixed(self, data: bytes) -> None:
        """Write a one-byte length followed by ``data``.

        Raises:
            ValueError: If data is longer than 255 bytes
        """
        if len(data) > 0xFF:
            raise ValueError(f"Length-prefixed field is {len(data)} bytes (max 255)")
        self._buffer.append(len(data))
        self._buffer.extend(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)


class ByteReader:
    """Reads bytes and length-prefixed fields from a buffer.

    All reads are bounds-checked against the buffer; reading past the end
    raises IndexError and leaves the position unchanged.

    Example:
        >>> reader = ByteReader(b"\\x01\\x07anthill")
        >>> reader.read_u8()
        1
        >>> reader.read_prefixed()
        b'anthill'
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    def read_u8(self) -> int:
        """Read a single unsigned byte.

        Raises:
            IndexError: If no more bytes are available
        """
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of buffer")

        value = self._data[self._position]
        self._position += 1
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly ``num_bytes`` bytes.

        Raises:
            IndexError: If not enough bytes are available
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

        result = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return result

    def read_prefixed(self) -> bytes:
        """Read a one-byte length followed by that many bytes.

        Raises:
            IndexError: If the length byte or the field itself is truncated
        """
        start = self._position
        length = self.read_u8()
        try:
            return self.read_bytes(length)
        except IndexError:
            self._position = start
            raise

    def read_remaining(self) -> bytes:
        """Read every byte left in the buffer."""
        return self.read_bytes(self.bytes_remaining())

    def bytes_remaining(self) -> int:
        return len(self._data) - self._position

    def position(self) -> int:
        return self._position
