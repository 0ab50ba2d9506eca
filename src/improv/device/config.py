"""Configuration for mock Improv device simulation.

This module provides the configuration dataclass for MockImprovDevice, which
lets client code be exercised against a provisioning device without hardware.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import DeviceState


@dataclass
class MockDeviceConfig:
    """Configuration for a simulated Improv device.

    Attributes:
        response_delay: Seconds between receiving a command and delivering the
            responses to RX callbacks (default 0.0).

        initial_state: Device state after connect (default READY). A device
            that starts PROVISIONED answers state requests with its
            redirect URL as well.

        firmware_name, firmware_version, hardware, device_name: The four
            values returned for a RequestDeviceInformation command.

        redirect_url: URL returned once the device is provisioned.

        networks: Networks reported by RequestScannedWifiNetworks, as
            ``(ssid, rssi, secured)`` tuples.

        credentials: Networks the device can join, mapping SSID to PSK.
            SendWifiSettings with any other pair fails with UNABLE_TO_CONNECT.

    Examples:
        ```python
        from improv.device import MockDeviceConfig, MockImprovDevice

        config = MockDeviceConfig(
            response_delay=0.2,
            credentials={"anthill": "ants in my pants"},
        )
        device = MockImprovDevice(config)
        device.connect("/dev/null")
        ```
    """

    # Channel parameters
    response_delay: float = 0.0  # seconds

    # Device parameters
    initial_state: DeviceState = DeviceState.READY
    firmware_name: str = "improv-mock"
    firmware_version: str = "1.0.0"
    hardware: str = "ESP32"
    device_name: str = "Mock Improv Device"
    redirect_url: str = "http://192.168.4.1/"

    # Wi-Fi environment
    networks: tuple[tuple[str, int, bool], ...] = (
        ("anthill", -48, True),
        ("guest", -71, False),
    )
    credentials: dict[str, str] = field(default_factory=lambda: {"anthill": "ants in my pants"})

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.response_delay < 0:
            raise ValueError(f"response_delay must be >= 0, got {self.response_delay}")

        self.initial_state = DeviceState(self.initial_state)

        for ssid, rssi, _secured in self.networks:
            if len(ssid.encode("utf-8")) > 255:
                raise ValueError(f"network SSID is longer than 255 bytes: {ssid[:32]!r}...")
            if rssi > 0:
                raise ValueError(f"rssi must be <= 0 dBm, got {rssi} for {ssid!r}")
