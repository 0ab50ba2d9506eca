"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from improv import RpcCommand, SendWifiSettings, WifiSettings


@pytest.fixture
def request_state_frame() -> bytes:
    """Frame for RpcCommand(RequestCurrentState())."""
    return bytes.fromhex("49 4D 50 52 4F 56 01 03 02 02 00 E5")


@pytest.fixture
def wifi_packet() -> RpcCommand:
    """SendWifiSettings command for the network the mock device can join."""
    settings = WifiSettings(ssid="anthill", psk="ants in my pants")
    return RpcCommand(command=SendWifiSettings(settings=settings))


@pytest.fixture
def wifi_frame() -> bytes:
    """Frame for the wifi_packet fixture."""
    return bytes.fromhex(
        "49 4D 50 52 4F 56 01 03 1B 01 19 07 61 6E 74 68 69 6C 6C 10 61 6E 74 73"
        " 20 69 6E 20 6D 79 20 70 61 6E 74 73 12"
    )
