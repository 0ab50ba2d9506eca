"""End-to-end integration tests."""

from __future__ import annotations

import threading

import pytest

from improv import (
    CodecConfig,
    CurrentState,
    DecodeError,
    DeviceError,
    DeviceState,
    ErrorState,
    Packet,
    RequestCurrentState,
    RequestDeviceInformation,
    RequestScannedWifiNetworks,
    RpcCommand,
    RpcResult,
    SendWifiSettings,
    WifiSettings,
    decode,
    encode,
    encoded_size,
)
from improv.device import MockDeviceConfig, MockImprovDevice


class Client:
    """Minimal provisioning client collecting responses from a transport."""

    def __init__(self, device: MockImprovDevice) -> None:
        self.device = device
        self.received: list[Packet] = []
        self._changed = threading.Condition()
        device.attach_rx_callback(self._on_receive)

    def _on_receive(self, packet: Packet) -> None:
        with self._changed:
            self.received.append(packet)
            self._changed.notify_all()

    def request(self, packet: Packet, expected: int, timeout: float = 2.0) -> list[Packet]:
        """Send a packet and wait for the given number of responses."""
        with self._changed:
            start = len(self.received)
        self.device.send_packet(packet)
        with self._changed:
            assert self._changed.wait_for(
                lambda: len(self.received) >= start + expected, timeout=timeout
            )
            return self.received[start : start + expected]


@pytest.fixture
def client():
    device = MockImprovDevice(MockDeviceConfig(response_delay=0.05))
    device.connect("/dev/null")
    yield Client(device)
    device.disconnect()


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_provisioning_session(self, client: Client) -> None:
        """Test a full provisioning session against the mock device."""
        # 1. Device starts ready
        responses = client.request(RpcCommand(command=RequestCurrentState()), expected=1)
        assert responses == [CurrentState(state=DeviceState.READY)]

        # 2. Device information
        (info,) = client.request(RpcCommand(command=RequestDeviceInformation()), expected=1)
        assert isinstance(info, RpcResult)
        assert info.strings()[2] == "ESP32"

        # 3. Scan until the empty terminator
        scan = client.request(RpcCommand(command=RequestScannedWifiNetworks()), expected=3)
        assert scan[-1] == RpcResult()
        assert [result.strings()[0] for result in scan[:-1]] == ["anthill", "guest"]

        # 4. Wrong password
        settings = WifiSettings(ssid="anthill", psk="not it")
        responses = client.request(
            RpcCommand(command=SendWifiSettings(settings=settings)), expected=3
        )
        assert ErrorState(error=DeviceError.UNABLE_TO_CONNECT) in responses
        assert responses[-1] == CurrentState(state=DeviceState.READY)

        # 5. Right password
        settings = WifiSettings(ssid="anthill", psk="ants in my pants")
        responses = client.request(
            RpcCommand(command=SendWifiSettings(settings=settings)), expected=3
        )
        assert responses[1] == CurrentState(state=DeviceState.PROVISIONED)
        assert responses[2].strings() == ["http://192.168.4.1/"]

        # 6. State request now includes the redirect URL
        responses = client.request(RpcCommand(command=RequestCurrentState()), expected=2)
        assert responses == [
            CurrentState(state=DeviceState.PROVISIONED),
            RpcResult.from_strings("http://192.168.4.1/"),
        ]

    def test_malformed_frame_reported(self, client: Client) -> None:
        """Test the device answers a corrupted frame with an error report."""
        done = threading.Event()
        errors: list[Packet] = []

        def on_error(packet: Packet) -> None:
            if isinstance(packet, ErrorState):
                errors.append(packet)
                done.set()

        client.device.attach_rx_callback(on_error)
        frame = encode(RpcCommand(command=RequestCurrentState()))
        client.device.write(frame[:-1] + b"\x00")

        assert done.wait(timeout=2.0)
        assert errors == [ErrorState(error=DeviceError.INVALID_RPC_PACKET)]


class TestWireCompatibility:
    """Test frames produced by other Improv implementations."""

    def test_device_frames(self) -> None:
        """Test decoding a device's response stream, frame by frame."""
        stream = [
            "49 4D 50 52 4F 56 01 01 01 03 E3",
            "49 4D 50 52 4F 56 01 01 01 04 E4",
            "49 4D 50 52 4F 56 01 04 05 01 61 02 62 63 10",
        ]

        packets = [decode(bytes.fromhex(frame)) for frame in stream]

        assert packets == [
            CurrentState(state=DeviceState.PROVISIONING),
            CurrentState(state=DeviceState.PROVISIONED),
            RpcResult(values=(b"a", b"bc")),
        ]

    def test_lenient_peer(self) -> None:
        """Test a peer with a bad checksum and non-UTF-8 SSID bytes."""
        frame = bytes.fromhex("49 4D 50 52 4F 56 01 03 07 01 05 02 FF 61 01 62 00")
        lenient = CodecConfig(verify_checksum=False, strict_text=False)

        with pytest.raises(DecodeError):
            decode(frame)

        packet = decode(frame, config=lenient)
        assert packet.command.settings == WifiSettings(ssid="a", psk="b")

    def test_encoded_size_matches(self, wifi_packet: RpcCommand) -> None:
        assert encoded_size(wifi_packet) == len(encode(wifi_packet)) == 37
