#!/usr/bin/env python3
"""Basic usage example for improv.

This example demonstrates:
1. Building an RPC command packet
2. Encoding it to an Improv frame
3. Decoding the frame back to a packet model
4. Handling malformed frames
"""

from __future__ import annotations

from improv import (
    CodecConfig,
    DecodeError,
    RpcCommand,
    RpcResult,
    SendWifiSettings,
    WifiSettings,
    decode,
    encode,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("improv Basic Usage Example")
    print("=" * 60)
    print()

    # Build a command
    print("1. Building a SendWifiSettings command...")
    settings = WifiSettings(ssid="anthill", psk="ants in my pants")
    packet = RpcCommand(command=SendWifiSettings(settings=settings))

    print(f"   SSID: {settings.ssid}")
    print(f"   PSK: {settings.psk}")
    print(f"   Frame size: {encoded_size(packet)} bytes")
    print()

    # Encode
    print("2. Encoding to an Improv frame...")
    frame = encode(packet)

    print(f"   Hex: {frame.hex(' ').upper()}")
    print(f"   Type: 0x{frame[7]:02X}, payload length: {frame[8]}, checksum: 0x{frame[-1]:02X}")
    print()

    # Decode
    print("3. Decoding the frame...")
    decoded = decode(frame)
    print(f"   {decoded!r}")
    print(f"   Round-trip {'OK' if decoded == packet else 'FAILED'}")
    print()

    # Device responses carry text values
    print("4. Decoding a device response...")
    response = decode(encode(RpcResult.from_strings("improv-mock", "1.0.0", "ESP32", "Lamp")))
    print(f"   Values: {response.strings()}")
    print()

    # Malformed input
    print("5. Handling malformed frames...")
    corrupted = frame[:-1] + bytes([(frame[-1] + 1) & 0xFF])
    try:
        decode(corrupted)
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")

    lenient = CodecConfig(verify_checksum=False)
    print(f"   Without checksum verification: {decode(corrupted, config=lenient)!r}")
    print()


if __name__ == "__main__":
    main()
