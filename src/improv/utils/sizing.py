"""Packet size calculation utilities.

This module provides functions to calculate the on-wire size of a packet,
for example to check it against a transport's buffer size before sending.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import Packet


def payload_size(packet: Packet) -> int:
    """Calculate the size of a packet's type-specific payload in bytes.

    Args:
        packet: Packet to measure

    Returns:
        Payload size in bytes (the value of the frame's length byte)

    Example:
        >>> payload_size(RpcCommand(command=RequestCurrentState()))
        2
    """
    # Import here to avoid circular dependency
    from ..codec.encoder import encode_payload

    return len(encode_payload(packet))


def encoded_size(packet: Packet) -> int:
    """Calculate the size of a complete frame for a packet in bytes.

    Args:
        packet: Packet to measure

    Returns:
        Frame size in bytes, header and checksum included

    Example:
        >>> encoded_size(CurrentState(state=DeviceState.READY))
        11
    """
    from ..framing.envelope import FRAME_OVERHEAD

    return payload_size(packet) + FRAME_OVERHEAD
