"""improv: Improv Wi-Fi provisioning protocol codec

A Python library for the Improv serial provisioning protocol: a small framed
binary packet format used to query a headless device's state and hand it
Wi-Fi credentials over a byte-oriented link such as a serial port.

Key Features:
- Pydantic-based packet models, validated at construction
- Exact wire encoding with checksum trailer
- Bounds-checked decoding with one exception type per failure
- Mock device for testing provisioning flows without hardware

Quick Start:
    >>> from improv import RpcCommand, SendWifiSettings, WifiSettings, decode, encode
    >>>
    >>> settings = WifiSettings(ssid="anthill", psk="ants in my pants")
    >>> packet = RpcCommand(command=SendWifiSettings(settings=settings))
    >>> frame = encode(packet)
    >>> decode(frame) == packet
    True
"""

from __future__ import annotations

from .codec import decode, decode_payload, encode, encode_payload
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    BadLength,
    ChecksumMismatch,
    DecodeError,
    EncodeError,
    FramingError,
    ImprovError,
    InvalidCurrentStateByte,
    InvalidErrorStateByte,
    InvalidRpcCommand,
    InvalidTextEncoding,
    NotAnImprovPacket,
    UnsupportedPacket,
    UnsupportedVersion,
)
from .framing import IMPROV_VERSION, frame_packet, unframe_packet
from .models import (
    Command,
    CommandOpcode,
    CurrentState,
    DeviceError,
    DeviceState,
    ErrorState,
    Packet,
    PacketType,
    RequestCurrentState,
    RequestDeviceInformation,
    RequestScannedWifiNetworks,
    RpcCommand,
    RpcResult,
    SendWifiSettings,
    WifiSettings,
)
from .utils import checksum, checksum_bytes, encoded_size, payload_size, verify_checksum

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_payload",
    "decode_payload",
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Packets
    "Packet",
    "PacketType",
    "CurrentState",
    "ErrorState",
    "RpcCommand",
    "RpcResult",
    "DeviceState",
    "DeviceError",
    # Commands
    "Command",
    "CommandOpcode",
    "SendWifiSettings",
    "RequestCurrentState",
    "RequestDeviceInformation",
    "RequestScannedWifiNetworks",
    "WifiSettings",
    # Exceptions
    "ImprovError",
    "EncodeError",
    "DecodeError",
    "FramingError",
    "NotAnImprovPacket",
    "UnsupportedVersion",
    "ChecksumMismatch",
    "BadLength",
    "InvalidCurrentStateByte",
    "InvalidErrorStateByte",
    "InvalidRpcCommand",
    "InvalidTextEncoding",
    "UnsupportedPacket",
    # Framing
    "frame_packet",
    "unframe_packet",
    "IMPROV_VERSION",
    # Checksum
    "checksum",
    "checksum_bytes",
    "verify_checksum",
    # Sizing
    "encoded_size",
    "payload_size",
    # Version
    "__version__",
]
