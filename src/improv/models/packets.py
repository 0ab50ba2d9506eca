"""Packet and RPC command models.

A packet is one of four models (CurrentState, ErrorState, RpcCommand,
RpcResult). Each carries its type tag as a ClassVar; RPC commands carry their
opcode the same way.

Example:
    >>> from improv.models import RpcCommand, SendWifiSettings, WifiSettings
    >>> packet = RpcCommand(
    ...     command=SendWifiSettings(settings=WifiSettings(ssid="anthill", psk="secret"))
    ... )
    >>> packet.packet_type
    <PacketType.RPC_COMMAND: 3>
"""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import ValidationInfo, field_validator

from .base import (
    CommandOpcode,
    DeviceError,
    DeviceState,
    ImprovModel,
    PacketType,
    check_field_size,
)


class WifiSettings(ImprovModel):
    """Credentials sent with a SendWifiSettings command.

    Each field is sent behind a one-byte length prefix, so its UTF-8
    encoding must be at most 255 bytes.
    """

    ssid: str
    psk: str

    @field_validator("ssid", "psk")
    @classmethod
    def fits_length_prefix(cls, value: str, info: ValidationInfo) -> str:
        check_field_size(value.encode("utf-8"), info.field_name)
        return value


class SendWifiSettings(ImprovModel):
    """Hand the device credentials for the network it should join."""

    opcode: ClassVar[CommandOpcode] = CommandOpcode.SEND_WIFI_SETTINGS

    settings: WifiSettings


class RequestCurrentState(ImprovModel):
    """Ask the device for its current state."""

    opcode: ClassVar[CommandOpcode] = CommandOpcode.REQUEST_CURRENT_STATE


class RequestDeviceInformation(ImprovModel):
    """Ask for firmware name, firmware version, hardware and device name."""

    opcode: ClassVar[CommandOpcode] = CommandOpcode.REQUEST_DEVICE_INFORMATION


class RequestScannedWifiNetworks(ImprovModel):
    """Ask for the Wi-Fi networks the device can see."""

    opcode: ClassVar[CommandOpcode] = CommandOpcode.REQUEST_SCANNED_WIFI_NETWORKS


Command = Union[
    SendWifiSettings,
    RequestCurrentState,
    RequestDeviceInformation,
    RequestScannedWifiNetworks,
]

COMMANDS_BY_OPCODE: dict[int, type[ImprovModel]] = {
    cls.opcode: cls
    for cls in (
        SendWifiSettings,
        RequestCurrentState,
        RequestDeviceInformation,
        RequestScannedWifiNetworks,
    )
}


class CurrentState(ImprovModel):
    """Device lifecycle state report."""

    packet_type: ClassVar[PacketType] = PacketType.CURRENT_STATE

    state: DeviceState


class ErrorState(ImprovModel):
    """Device error report."""

    packet_type: ClassVar[PacketType] = PacketType.ERROR_STATE

    error: DeviceError


class RpcCommand(ImprovModel):
    """A command sent to the device."""

    packet_type: ClassVar[PacketType] = PacketType.RPC_COMMAND

    command: Command


class RpcResult(ImprovModel):
    """A multi-value result returned by the device.

    Values are opaque byte strings; most device responses are text, see
    from_strings() and strings().
    """

    packet_type: ClassVar[PacketType] = PacketType.RPC_RESULT

    values: tuple[bytes, ...] = ()

    @field_validator("values")
    @classmethod
    def values_fit_length_prefix(cls, values: tuple[bytes, ...]) -> tuple[bytes, ...]:
        for index, value in enumerate(values):
            check_field_size(value, f"values[{index}]")
        return values

    @classmethod
    def from_strings(cls, *values: str) -> RpcResult:
        """Build a result from text values, encoded as UTF-8."""
        return cls(values=tuple(value.encode("utf-8") for value in values))

    def strings(self, errors: str = "strict") -> list[str]:
        """Return the values decoded as UTF-8."""
        return [value.decode("utf-8", errors) for value in self.values]


Packet = Union[CurrentState, ErrorState, RpcCommand, RpcResult]

PACKETS_BY_TYPE: dict[int, type[ImprovModel]] = {
    cls.packet_type: cls for cls in (CurrentState, ErrorState, RpcCommand, RpcResult)
}
