"""Abstract interface for Improv transports.

A transport moves complete frames between a client and an Improv device.
Implementations encode outbound packets with improv.encode, write the frame
verbatim, and hand each received frame to improv.decode before invoking the
registered callbacks.

Design Pattern: Strategy Pattern / Adapter Pattern
- ImprovTransport: Abstract interface (link-agnostic)
- MockImprovDevice: Simulated device (testing without hardware)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from ..models import Packet

RxCallback = Callable[[Packet], None]


class ImprovTransport(ABC):
    """Abstract interface for talking to an Improv device.

    Examples:
        ```python
        from improv import RpcCommand, RequestCurrentState
        from improv.device import MockImprovDevice

        device = MockImprovDevice()
        device.connect("/dev/null")

        def on_receive(packet):
            print(f"Device says: {packet!r}")

        device.attach_rx_callback(on_receive)
        device.send_packet(RpcCommand(command=RequestCurrentState()))
        device.disconnect()
        ```
    """

    @abstractmethod
    def connect(self, port: str, baudrate: int = 115200) -> None:
        """Open the link to the device.

        Args:
            port: Serial port (e.g., "/dev/ttyUSB0") or other link address
            baudrate: Serial baud rate (default 115200)

        Raises:
            ConnectionError: If the link cannot be opened
        """
        pass

    @abstractmethod
    def send_packet(self, packet: Packet) -> None:
        """Encode a packet and transmit the frame.

        Args:
            packet: Packet to send, normally an RpcCommand

        Raises:
            EncodeError: If the packet cannot be encoded
            RuntimeError: If the transport is not connected
        """
        pass

    @abstractmethod
    def attach_rx_callback(self, callback: RxCallback) -> None:
        """Register a callback for decoded packets received from the device.

        Multiple callbacks can be registered; each is called for every packet.

        Args:
            callback: Function with signature (packet: Packet) -> None
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close the link to the device."""
        pass
