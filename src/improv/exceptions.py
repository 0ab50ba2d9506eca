"""Exception hierarchy for improv.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ImprovError for easy catching of any improv-specific error.

Every way a frame can fail to decode has its own DecodeError subclass, so callers
can tell a foreign byte stream from a corrupted or unsupported Improv frame.
"""

from __future__ import annotations


class ImprovError(Exception):
    """Base exception for all improv errors."""

    pass


class EncodeError(ImprovError):
    """Raised when a packet cannot be serialized.

    Examples:
        - Serialized payload longer than 255 bytes
        - Packet type tag outside 0-255
    """

    pass


class DecodeError(ImprovError):
    """Raised when binary data cannot be decoded into a packet."""

    pass


class FramingError(DecodeError):
    """Raised when the outer envelope of a frame is invalid."""

    pass


class NotAnImprovPacket(FramingError):
    """The data does not start with the ``IMPROV`` magic."""

    def __init__(self, prefix: bytes) -> None:
        super().__init__(f"Not an Improv packet: bad magic {prefix!r}")
        self.prefix = prefix


class UnsupportedVersion(FramingError):
    """The frame carries a protocol version this codec does not speak."""

    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported Improv version: 0x{version:02X}")
        self.version = version


class ChecksumMismatch(FramingError):
    """The trailing checksum byte does not match the frame contents."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Checksum mismatch: computed 0x{expected:02X}, frame carries 0x{actual:02X}"
        )
        self.expected = expected
        self.actual = actual


class BadLength(DecodeError):
    """A length byte disagrees with the number of bytes actually present.

    Raised for the outer payload length as well as for the length prefixes
    inside RPC command and RPC result payloads, and for truncated input.
    """

    def __init__(self, message: str, expected: int | None = None, actual: int | None = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidCurrentStateByte(DecodeError):
    """The current-state payload is not a known DeviceState value."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid current state byte: 0x{value:02X}")
        self.value = value


class InvalidErrorStateByte(DecodeError):
    """The error-state payload is not a known DeviceError value."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid error state byte: 0x{value:02X}")
        self.value = value


class InvalidRpcCommand(DecodeError):
    """The RPC command opcode is not recognized."""

    def __init__(self, opcode: int) -> None:
        super().__init__(f"Invalid RPC command opcode: 0x{opcode:02X}")
        self.opcode = opcode


class InvalidTextEncoding(DecodeError):
    """A text field (SSID or PSK) is not valid in the configured encoding."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid text encoding in {field}: {reason}")
        self.field = field


class UnsupportedPacket(DecodeError):
    """The packet type tag has no decoder."""

    def __init__(self, packet_type: int) -> None:
        super().__init__(f"Unsupported packet type: 0x{packet_type:02X}")
        self.packet_type = packet_type
