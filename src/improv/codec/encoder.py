"""Improv packet encoder.

This module provides the encode() function that converts a packet model to
the exact byte sequence transmitted on the wire.
"""

from __future__ import annotations

import logging

from ..exceptions import EncodeError
from ..framing import frame_packet
from ..models import (
    Command,
    CurrentState,
    ErrorState,
    Packet,
    RpcCommand,
    RpcResult,
    SendWifiSettings,
)
from .bytepack import ByteWriter

logger = logging.getLogger(__name__)


def encode(packet: Packet) -> bytes:
    """Encode a packet to a complete Improv frame.

    The frame is the ``IMPROV`` magic, version, type tag, payload length,
    type-specific payload and the 8-bit wraparound checksum.

    Args:
        packet: Packet model to encode

    Returns:
        Frame bytes, ready to be written to the transport verbatim

    Raises:
        EncodeError: If the serialized payload exceeds 255 bytes

    Examples:
        ```python
        from improv import RpcCommand, RequestCurrentState, encode

        frame = encode(RpcCommand(command=RequestCurrentState()))
        assert frame.hex(" ") == "49 4d 50 52 4f 56 01 03 02 02 00 e5"
        ```
    """
    payload = encode_payload(packet)
    frame = frame_packet(packet.packet_type, payload)

    logger.debug("Encoded %r as %s", packet, frame.hex(" "))
    return frame


def encode_payload(packet: Packet) -> bytes:
    """Encode only the type-specific payload of a packet.

    Args:
        packet: Packet model to encode

    Returns:
        Payload bytes (what follows the length byte in a frame)

    Raises:
        EncodeError: If the packet type is unknown or a field is too long
    """
    writer = ByteWriter()

    if isinstance(packet, CurrentState):
        writer.write_u8(packet.state)
    elif isinstance(packet, ErrorState):
        writer.write_u8(packet.error)
    elif isinstance(packet, RpcCommand):
        _encode_command(writer, packet.command)
    elif isinstance(packet, RpcResult):
        for value in packet.values:
            writer.write_prefixed(value)
    else:
        raise EncodeError(f"Cannot encode {type(packet).__name__}: not an Improv packet")

    return writer.to_bytes()


def _encode_command(writer: ByteWriter, command: Command) -> None:
    """Write opcode, sub-payload length and sub-payload of an RPC command."""
    data = ByteWriter()

    if isinstance(command, SendWifiSettings):
        data.write_prefixed(command.settings.ssid.encode("utf-8"))
        data.write_prefixed(command.settings.psk.encode("utf-8"))

    if len(data) > 0xFF:
        raise EncodeError(
            f"{type(command).__name__} data is {len(data)} bytes (max 255)"
        )

    writer.write_u8(command.opcode)
    writer.write_u8(len(data))
    writer.write_bytes(data.to_bytes())
