"""Tests for packet and command models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from improv.models import (
    COMMANDS_BY_OPCODE,
    PACKETS_BY_TYPE,
    CommandOpcode,
    CurrentState,
    DeviceError,
    DeviceState,
    ErrorState,
    PacketType,
    RequestCurrentState,
    RequestDeviceInformation,
    RequestScannedWifiNetworks,
    RpcCommand,
    RpcResult,
    SendWifiSettings,
    WifiSettings,
)


class TestEnums:
    """Test wire values of the protocol enumerations."""

    def test_packet_type_values(self) -> None:
        assert PacketType.CURRENT_STATE == 0x01
        assert PacketType.ERROR_STATE == 0x02
        assert PacketType.RPC_COMMAND == 0x03
        assert PacketType.RPC_RESULT == 0x04

    def test_device_state_values(self) -> None:
        assert [int(state) for state in DeviceState] == [0x02, 0x03, 0x04]

    def test_device_error_values(self) -> None:
        assert [int(error) for error in DeviceError] == [0x00, 0x01, 0x02, 0x03, 0xFF]

    def test_opcode_values(self) -> None:
        assert [int(opcode) for opcode in CommandOpcode] == [0x01, 0x02, 0x03, 0x04]


class TestPacketModels:
    """Test construction and validation of packet models."""

    def test_type_tags(self) -> None:
        """Test each packet carries its type tag."""
        assert CurrentState.packet_type == PacketType.CURRENT_STATE
        assert ErrorState.packet_type == PacketType.ERROR_STATE
        assert RpcCommand.packet_type == PacketType.RPC_COMMAND
        assert RpcResult.packet_type == PacketType.RPC_RESULT

    def test_registry(self) -> None:
        """Test lookup tables cover every tag and opcode."""
        assert set(PACKETS_BY_TYPE) == {1, 2, 3, 4}
        assert PACKETS_BY_TYPE[PacketType.RPC_RESULT] is RpcResult
        assert set(COMMANDS_BY_OPCODE) == {1, 2, 3, 4}
        assert COMMANDS_BY_OPCODE[CommandOpcode.SEND_WIFI_SETTINGS] is SendWifiSettings

    def test_current_state_from_int(self) -> None:
        """Test plain ints are coerced to DeviceState."""
        packet = CurrentState(state=2)
        assert packet.state is DeviceState.READY

    def test_current_state_invalid(self) -> None:
        """Test unknown state values are rejected."""
        with pytest.raises(ValidationError):
            CurrentState(state=0x05)

    def test_error_state_invalid(self) -> None:
        """Test unknown error values are rejected."""
        with pytest.raises(ValidationError):
            ErrorState(error=0x04)

    def test_models_are_frozen(self) -> None:
        """Test packets cannot be modified after construction."""
        packet = CurrentState(state=DeviceState.READY)
        with pytest.raises(ValidationError):
            packet.state = DeviceState.PROVISIONED  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            CurrentState(state=DeviceState.READY, extra=1)  # type: ignore[call-arg]

    def test_equality(self) -> None:
        """Test structural equality."""
        assert RpcCommand(command=RequestCurrentState()) == RpcCommand(
            command=RequestCurrentState()
        )
        assert RpcCommand(command=RequestCurrentState()) != RpcCommand(
            command=RequestDeviceInformation()
        )
        assert ErrorState(error=DeviceError.NO_ERROR) != CurrentState(state=DeviceState.READY)


class TestCommands:
    """Test RPC command models."""

    def test_opcodes(self) -> None:
        assert SendWifiSettings.opcode == CommandOpcode.SEND_WIFI_SETTINGS
        assert RequestCurrentState.opcode == CommandOpcode.REQUEST_CURRENT_STATE
        assert RequestDeviceInformation.opcode == CommandOpcode.REQUEST_DEVICE_INFORMATION
        assert RequestScannedWifiNetworks.opcode == CommandOpcode.REQUEST_SCANNED_WIFI_NETWORKS

    def test_commands_documented(self) -> None:
        """Test every command model describes itself in its docstring."""
        for cls in COMMANDS_BY_OPCODE.values():
            assert cls.__doc__ and cls.__doc__.strip()

    def test_command_kind_preserved(self) -> None:
        """Test the union keeps the concrete command class."""
        for cls in (RequestCurrentState, RequestDeviceInformation, RequestScannedWifiNetworks):
            packet = RpcCommand(command=cls())
            assert type(packet.command) is cls

    def test_wifi_settings(self) -> None:
        settings = WifiSettings(ssid="anthill", psk="ants in my pants")
        command = SendWifiSettings(settings=settings)

        assert command.settings.ssid == "anthill"
        assert command.settings.psk == "ants in my pants"

    def test_wifi_settings_empty_fields(self) -> None:
        """Test empty SSID and PSK are allowed."""
        settings = WifiSettings(ssid="", psk="")
        assert settings.ssid == ""

    def test_wifi_settings_max_length(self) -> None:
        """Test 255 encoded bytes is the limit for each field."""
        WifiSettings(ssid="s" * 255, psk="p" * 255)

        with pytest.raises(ValidationError, match="ssid is 256 bytes"):
            WifiSettings(ssid="s" * 256, psk="")

        with pytest.raises(ValidationError, match="psk is 256 bytes"):
            WifiSettings(ssid="", psk="p" * 256)

    def test_wifi_settings_length_is_encoded_length(self) -> None:
        """Test the limit applies to UTF-8 bytes, not characters."""
        # 128 two-byte characters encode to 256 bytes
        with pytest.raises(ValidationError, match="256 bytes"):
            WifiSettings(ssid="é" * 128, psk="")


class TestRpcResult:
    """Test RpcResult model."""

    def test_default_empty(self) -> None:
        assert RpcResult().values == ()

    def test_list_coerced_to_tuple(self) -> None:
        result = RpcResult(values=[b"a", b"bc"])
        assert result.values == (b"a", b"bc")

    def test_from_strings(self) -> None:
        result = RpcResult.from_strings("improv-mock", "1.0.0")
        assert result.values == (b"improv-mock", b"1.0.0")

    def test_strings(self) -> None:
        result = RpcResult(values=(b"http://192.168.4.1/", b""))
        assert result.strings() == ["http://192.168.4.1/", ""]

    def test_strings_invalid_utf8(self) -> None:
        result = RpcResult(values=(b"ok\xff",))

        with pytest.raises(UnicodeDecodeError):
            result.strings()
        assert result.strings(errors="replace") == ["ok�"]

    def test_value_max_length(self) -> None:
        RpcResult(values=(b"x" * 255,))

        with pytest.raises(ValidationError, match=r"values\[1\] is 256 bytes"):
            RpcResult(values=(b"ok", b"x" * 256))
