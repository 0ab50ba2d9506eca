"""Pydantic packet models for improv.

This module provides the packet, RPC command and enumeration types that the
codec converts to and from the Improv wire format.
"""

from __future__ import annotations

from .base import CommandOpcode, DeviceError, DeviceState, ImprovModel, PacketType
from .packets import (
    COMMANDS_BY_OPCODE,
    PACKETS_BY_TYPE,
    Command,
    CurrentState,
    ErrorState,
    Packet,
    RequestCurrentState,
    RequestDeviceInformation,
    RequestScannedWifiNetworks,
    RpcCommand,
    RpcResult,
    SendWifiSettings,
    WifiSettings,
)

__all__ = [
    "ImprovModel",
    # Enumerations
    "PacketType",
    "DeviceState",
    "DeviceError",
    "CommandOpcode",
    # Packets
    "Packet",
    "CurrentState",
    "ErrorState",
    "RpcCommand",
    "RpcResult",
    "PACKETS_BY_TYPE",
    # Commands
    "Command",
    "SendWifiSettings",
    "RequestCurrentState",
    "RequestDeviceInformation",
    "RequestScannedWifiNetworks",
    "COMMANDS_BY_OPCODE",
    "WifiSettings",
]
