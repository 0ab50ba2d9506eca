"""Provisioning Simulation Example.

This example demonstrates using MockImprovDevice to test a provisioning client
without a physical device. Useful for:
- CI testing
- Development before hardware is available
- Reproducing error paths (wrong password, corrupted frames)

The mock device simulates:
- State, device information and Wi-Fi scan requests
- Joining a network with a known password
- Error reports for malformed frames
- Response delay

Run this example:
    python examples/provisioning_simulation.py
"""

from __future__ import annotations

import time

from improv import (
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
    encode,
)
from improv.device import MockDeviceConfig, MockImprovDevice


def main() -> None:
    """Run provisioning simulation demo."""
    print("=" * 70)
    print("improv Provisioning Simulation Demo")
    print("=" * 70)
    print()

    # ========================================================================
    # Step 1: Configure mock device
    # ========================================================================
    print("Step 1: Configure mock device")
    print("-" * 70)

    config = MockDeviceConfig(
        response_delay=0.3,
        device_name="Kitchen Lamp",
        networks=(("anthill", -48, True), ("guest", -71, False), ("cafe", -80, False)),
        credentials={"anthill": "ants in my pants"},
    )

    print(f"  Response delay: {config.response_delay} seconds")
    print(f"  Visible networks: {len(config.networks)}")
    print()

    # ========================================================================
    # Step 2: Connect and register RX callback
    # ========================================================================
    print("Step 2: Connect and register RX callback")
    print("-" * 70)

    device = MockImprovDevice(config)
    device.connect("/dev/null")

    def on_receive(packet: Packet) -> None:
        """Print each packet the device sends back."""
        if isinstance(packet, RpcResult):
            print(f"  <- RpcResult {packet.strings()}")
        elif isinstance(packet, ErrorState):
            print(f"  <- Error: {packet.error.name}")
        else:
            print(f"  <- State: {packet.state.name}")

    device.attach_rx_callback(on_receive)
    print()

    # ========================================================================
    # Step 3: Run the provisioning session
    # ========================================================================
    print("Step 3: Run the provisioning session")
    print("-" * 70)

    session = [
        RpcCommand(command=RequestCurrentState()),
        RpcCommand(command=RequestDeviceInformation()),
        RpcCommand(command=RequestScannedWifiNetworks()),
        RpcCommand(
            command=SendWifiSettings(settings=WifiSettings(ssid="anthill", psk="wrong"))
        ),
        RpcCommand(
            command=SendWifiSettings(
                settings=WifiSettings(ssid="anthill", psk="ants in my pants")
            )
        ),
    ]

    for packet in session:
        print(f"  -> {type(packet.command).__name__} ({len(encode(packet))} bytes)")
        device.send_packet(packet)
        time.sleep(config.response_delay + 0.2)

    print()

    # ========================================================================
    # Step 4: Send a corrupted frame
    # ========================================================================
    print("Step 4: Send a corrupted frame")
    print("-" * 70)

    frame = encode(RpcCommand(command=RequestCurrentState()))
    device.write(frame[:-1] + b"\x00")
    time.sleep(config.response_delay + 0.2)
    print()

    # ========================================================================
    # Step 5: Disconnect
    # ========================================================================
    print("Step 5: Disconnect mock device")
    print("-" * 70)
    provisioned = device.state == DeviceState.PROVISIONED
    device.disconnect()
    print(f"  Device provisioned: {provisioned}")
    print()


if __name__ == "__main__":
    main()
