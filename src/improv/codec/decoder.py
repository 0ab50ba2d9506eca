"""Improv packet decoder.

This module provides the decode() function that converts one complete frame
back to a packet model. Every length byte read from the frame is checked
against the bytes actually present; malformed input always raises a
DecodeError subclass.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import (
    BadLength,
    InvalidCurrentStateByte,
    InvalidErrorStateByte,
    InvalidRpcCommand,
    InvalidTextEncoding,
    UnsupportedPacket,
)
from ..framing import unframe_packet
from ..models import (
    COMMANDS_BY_OPCODE,
    Command,
    CommandOpcode,
    CurrentState,
    DeviceError,
    DeviceState,
    ErrorState,
    Packet,
    PacketType,
    RpcCommand,
    RpcResult,
    SendWifiSettings,
    WifiSettings,
)
from .bytepack import ByteReader

logger = logging.getLogger(__name__)


def decode(data: bytes, config: CodecConfig | None = None) -> Packet:
    """Decode one complete Improv frame.

    Validation order is fixed so the same input always reports the same
    error: magic, version, payload length, checksum, then the type-specific
    payload.

    Args:
        data: Exactly one frame, header through checksum
        config: Decode options (checksum verification, text handling).
            Defaults to improv.config.DEFAULT_CONFIG.

    Returns:
        Decoded packet model

    Raises:
        NotAnImprovPacket: If the data does not start with ``IMPROV``
        UnsupportedVersion: If the version byte is not 0x01
        BadLength: If any length byte disagrees with the data present
        ChecksumMismatch: If the checksum is wrong and verification is enabled
        InvalidCurrentStateByte: If a CurrentState payload is not a DeviceState
        InvalidErrorStateByte: If an ErrorState payload is not a DeviceError
        InvalidRpcCommand: If an RPC command opcode is unknown
        InvalidTextEncoding: If SSID/PSK bytes are not valid text (strict mode)
        UnsupportedPacket: If the packet type tag is unknown

    Examples:
        ```python
        from improv import decode

        frame = bytes.fromhex("49 4d 50 52 4f 56 01 03 02 02 00 e5")
        packet = decode(frame)
        # RpcCommand(command=RequestCurrentState())
        ```
    """
    config = config if config is not None else DEFAULT_CONFIG

    packet_type, payload = unframe_packet(data, verify_checksum=config.verify_checksum)
    packet = decode_payload(packet_type, payload, config)

    logger.debug("Decoded %s as %r", bytes(data).hex(" "), packet)
    return packet


def decode_payload(
    packet_type: int, payload: bytes, config: CodecConfig | None = None
) -> Packet:
    """Decode a type-specific payload that has already been unframed.

    Args:
        packet_type: Type tag byte from the frame header
        payload: Payload bytes (checksum excluded)
        config: Decode options

    Returns:
        Decoded packet model

    Raises:
        DecodeError: If the payload is invalid for the given type
    """
    config = config if config is not None else DEFAULT_CONFIG

    if packet_type == PacketType.CURRENT_STATE:
        value = _decode_single_byte(payload, "CurrentState")
        try:
            return CurrentState(state=DeviceState(value))
        except ValueError:
            raise InvalidCurrentStateByte(value) from None

    if packet_type == PacketType.ERROR_STATE:
        value = _decode_single_byte(payload, "ErrorState")
        try:
            return ErrorState(error=DeviceError(value))
        except ValueError:
            raise InvalidErrorStateByte(value) from None

    if packet_type == PacketType.RPC_COMMAND:
        return RpcCommand(command=_decode_command(payload, config))

    if packet_type == PacketType.RPC_RESULT:
        return _decode_result(payload)

    raise UnsupportedPacket(packet_type)


def _decode_single_byte(payload: bytes, name: str) -> int:
    if len(payload) != 1:
        raise BadLength(
            f"{name} payload must be 1 byte, got {len(payload)} bytes",
            expected=1,
            actual=len(payload),
        )
    return payload[0]


def _decode_command(payload: bytes, config: CodecConfig) -> Command:
    """Decode the opcode of an RPC command payload and, for SendWifiSettings, its data.

    Request commands are identified by the opcode alone; whatever follows it
    is ignored.
    """
    if not payload:
        raise BadLength("RPC command payload is empty: missing opcode", expected=1, actual=0)

    reader = ByteReader(payload)
    opcode = reader.read_u8()

    if opcode not in COMMANDS_BY_OPCODE:
        raise InvalidRpcCommand(opcode)

    if opcode == CommandOpcode.SEND_WIFI_SETTINGS:
        return _decode_wifi_settings(reader, config)

    command = COMMANDS_BY_OPCODE[opcode]()

    if reader.bytes_remaining():
        logger.debug(
            "Ignoring %d bytes after %s opcode",
            reader.bytes_remaining(),
            type(command).__name__,
        )
    return command


def _decode_wifi_settings(reader: ByteReader, config: CodecConfig) -> SendWifiSettings:
    try:
        declared_length = reader.read_u8()
    except IndexError as e:
        raise BadLength(f"SendWifiSettings is missing its data length byte: {e}") from e

    if declared_length != reader.bytes_remaining():
        raise BadLength(
            f"SendWifiSettings length mismatch: declared {declared_length} bytes, "
            f"got {reader.bytes_remaining()} bytes",
            expected=declared_length,
            actual=reader.bytes_remaining(),
        )

    try:
        ssid_bytes = reader.read_prefixed()
    except IndexError as e:
        raise BadLength(f"Truncated SSID in SendWifiSettings: {e}") from e

    try:
        psk_bytes = reader.read_prefixed()
    except IndexError as e:
        raise BadLength(f"Truncated PSK in SendWifiSettings: {e}") from e

    if reader.bytes_remaining():
        raise BadLength(
            f"SendWifiSettings has {reader.bytes_remaining()} unexpected trailing bytes",
            expected=0,
            actual=reader.bytes_remaining(),
        )

    settings = WifiSettings(
        ssid=_decode_text(ssid_bytes, "ssid", config),
        psk=_decode_text(psk_bytes, "psk", config),
    )
    return SendWifiSettings(settings=settings)


def _decode_text(raw: bytes, field: str, config: CodecConfig) -> str:
    try:
        return raw.decode("utf-8", config.text_errors)
    except UnicodeDecodeError as e:
        raise InvalidTextEncoding(field, str(e)) from e


def _decode_result(payload: bytes) -> RpcResult:
    """Decode a sequence of length-prefixed values filling the whole payload."""
    reader = ByteReader(payload)
    values: list[bytes] = []

    while reader.bytes_remaining():
        try:
            values.append(reader.read_prefixed())
        except IndexError as e:
            raise BadLength(
                f"Truncated value {len(values)} in RpcResult at offset {reader.position()}: {e}"
            ) from e

    return RpcResult(values=values)
