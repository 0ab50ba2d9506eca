"""Main CLI entry point for improv."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from .. import __version__
from ..codec import decode, encode
from ..config import CodecConfig
from ..exceptions import DecodeError, EncodeError
from ..models import (
    Packet,
    RequestCurrentState,
    RequestDeviceInformation,
    RequestScannedWifiNetworks,
    RpcCommand,
    SendWifiSettings,
    WifiSettings,
)

COMMANDS = {
    "request-state": RequestCurrentState,
    "device-info": RequestDeviceInformation,
    "scan-networks": RequestScannedWifiNetworks,
}


def format_frame(frame: bytes) -> str:
    """Format frame bytes as space-separated upper-case hex."""
    return frame.hex(" ").upper()


def parse_hex(values: list[str]) -> bytes:
    """Join hex arguments into bytes; spaces and ``0x`` prefixes are allowed.

    Raises:
        ValueError: If the text is not valid hex
    """
    text = " ".join(values).replace("0x", "").replace("0X", "")
    return bytes.fromhex(text)


def build_command(name: str, ssid: str | None = None, psk: str | None = None) -> RpcCommand:
    """Build the RPC command packet named on the command line."""
    if name == "wifi":
        if ssid is None or psk is None:
            raise ValueError("wifi requires --ssid and --psk")
        settings = WifiSettings(ssid=ssid, psk=psk)
        return RpcCommand(command=SendWifiSettings(settings=settings))

    return RpcCommand(command=COMMANDS[name]())


def run_encode(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.command == "wifi" and (args.ssid is None or args.psk is None):
        parser.error("encode wifi requires --ssid and --psk")

    try:
        packet = build_command(args.command, args.ssid, args.psk)
        print(format_frame(encode(packet)))
    except (ValueError, EncodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run_decode(args: argparse.Namespace) -> int:
    try:
        frame = parse_hex(args.hex)
    except ValueError as e:
        print(f"Error: invalid hex input: {e}", file=sys.stderr)
        return 1

    config = CodecConfig(
        verify_checksum=not args.no_verify_checksum,
        strict_text=not args.lenient_text,
    )

    try:
        packet = decode(frame, config=config)
    except DecodeError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(repr(packet))
    return 0


def run_simulate(args: argparse.Namespace) -> int:
    """Cycle the four provisioning commands through a mock device."""
    # Import here so the codec commands do not start any device machinery
    from ..device import MockDeviceConfig, MockImprovDevice

    try:
        packets = [
            build_command("request-state"),
            build_command("device-info"),
            build_command("scan-networks"),
            build_command("wifi", args.ssid, args.psk),
        ]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        config = MockDeviceConfig(response_delay=args.delay)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    device = MockImprovDevice(config)

    def on_receive(packet: Packet) -> None:
        print(f"  <- {packet!r}")

    device.attach_rx_callback(on_receive)
    device.connect("mock")
    try:
        for packet in packets:
            frame = encode(packet)
            print(f"-> {packet!r}")
            print(f"   {format_frame(frame)}")
            device.write(frame)
            # Let the RX thread drain the responses before the next command
            time.sleep(args.delay + 0.1)
    finally:
        device.disconnect()

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the improv CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="improv",
        description="improv: Improv Wi-Fi provisioning protocol codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  improv encode request-state                   Print a current-state request frame
  improv encode wifi --ssid net --psk secret    Print a Wi-Fi settings frame
  improv decode 49 4D 50 52 4F 56 01 03 02 02 00 E5
  improv simulate --ssid anthill --psk "ants in my pants"
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"improv {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="action")

    encode_parser = subparsers.add_parser("encode", help="Encode an RPC command frame")
    encode_parser.add_argument("command", choices=[*COMMANDS, "wifi"])
    encode_parser.add_argument("--ssid", help="Network name (wifi only)")
    encode_parser.add_argument("--psk", help="Network password (wifi only)")

    decode_parser = subparsers.add_parser("decode", help="Decode a frame given as hex")
    decode_parser.add_argument("hex", nargs="+", help="Frame bytes as hex")
    decode_parser.add_argument(
        "--no-verify-checksum",
        action="store_true",
        help="Accept frames with a wrong checksum byte",
    )
    decode_parser.add_argument(
        "--lenient-text",
        action="store_true",
        help="Drop invalid UTF-8 bytes in SSID/PSK instead of failing",
    )

    simulate_parser = subparsers.add_parser(
        "simulate", help="Run a provisioning session against a mock device"
    )
    simulate_parser.add_argument("--ssid", required=True, help="Network name")
    simulate_parser.add_argument("--psk", required=True, help="Network password")
    simulate_parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        metavar="SECONDS",
        help="Simulated device response delay",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.action == "encode":
        return run_encode(args, encode_parser)
    if args.action == "decode":
        return run_decode(args)
    if args.action == "simulate":
        return run_simulate(args)

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
