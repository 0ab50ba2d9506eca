"""Base model class and protocol enumerations.

This module provides the ImprovModel class that all packet and command models
inherit from, and the single-byte enumerations carried on the wire.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict

MAX_FIELD_BYTES = 255


class ImprovModel(BaseModel):
    """Base class for all improv packet and command models.

    Models are immutable: a packet is built right before it is encoded, or
    produced by a single decode call, and never modified afterwards.
    """

    model_config = ConfigDict(
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )


class PacketType(enum.IntEnum):
    """Type tag at offset 7 of every frame."""

    CURRENT_STATE = 0x01
    ERROR_STATE = 0x02
    RPC_COMMAND = 0x03
    RPC_RESULT = 0x04


class DeviceState(enum.IntEnum):
    """Lifecycle state reported by the device."""

    READY = 0x02
    PROVISIONING = 0x03
    PROVISIONED = 0x04


class DeviceError(enum.IntEnum):
    """Error condition reported by the device."""

    NO_ERROR = 0x00
    INVALID_RPC_PACKET = 0x01
    UNKNOWN_RPC_COMMAND = 0x02
    UNABLE_TO_CONNECT = 0x03
    UNKNOWN_ERROR = 0xFF


class CommandOpcode(enum.IntEnum):
    """Command identifier inside an RPC command payload."""

    SEND_WIFI_SETTINGS = 0x01
    REQUEST_CURRENT_STATE = 0x02
    REQUEST_DEVICE_INFORMATION = 0x03
    REQUEST_SCANNED_WIFI_NETWORKS = 0x04


def check_field_size(value: bytes, name: str) -> bytes:
    """Reject values that do not fit behind a one-byte length prefix."""
    if len(value) > MAX_FIELD_BYTES:
        raise ValueError(f"{name} is {len(value)} bytes, max {MAX_FIELD_BYTES}")
    return value
