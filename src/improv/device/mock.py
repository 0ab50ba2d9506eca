"""Mock Improv device for testing provisioning clients without hardware.

MockImprovDevice plays the device side of the protocol. Every packet sent to
it travels the full wire path: it is encoded to a frame, decoded by the
device, answered with response packets that are encoded again, and those
frames are decoded before they reach the registered RX callbacks.

Simulated behaviour:
- Current state, device information and Wi-Fi scan requests
- Provisioning with a configurable set of joinable networks
- Error reports for malformed frames and unknown commands
- Response delay (delivery from a background thread)
"""

from __future__ import annotations

import logging
import threading
from queue import Empty, Queue

from ..codec import decode, encode
from ..exceptions import DecodeError, InvalidRpcCommand
from ..models import (
    Command,
    CurrentState,
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
)
from .config import MockDeviceConfig
from .driver import ImprovTransport, RxCallback

logger = logging.getLogger(__name__)


class MockImprovDevice(ImprovTransport):
    """Simulated Improv device.

    Attributes:
        config: Mock device configuration
        state: Current device state
        rx_queue: Response frames waiting to be delivered to callbacks
        rx_callbacks: Registered RX callbacks

    Examples:
        ```python
        from improv import RpcCommand, SendWifiSettings, WifiSettings
        from improv.device import MockDeviceConfig, MockImprovDevice

        device = MockImprovDevice(MockDeviceConfig(response_delay=0.5))
        device.connect("/dev/null")
        device.attach_rx_callback(lambda packet: print(repr(packet)))

        settings = WifiSettings(ssid="anthill", psk="ants in my pants")
        device.send_packet(RpcCommand(command=SendWifiSettings(settings=settings)))
        # CurrentState(state=PROVISIONING), CurrentState(state=PROVISIONED),
        # RpcResult(values=(b'http://192.168.4.1/',))
        ```
    """

    def __init__(self, config: MockDeviceConfig | None = None) -> None:
        self.config = config if config is not None else MockDeviceConfig()
        self.state = self.config.initial_state
        self.rx_queue: Queue[bytes] = Queue()
        self.rx_callbacks: list[RxCallback] = []
        self._lock = threading.Lock()
        self._running = False
        self._rx_thread: threading.Thread | None = None
        self._delayed_threads: list[threading.Thread] = []
        self._stopped = threading.Event()

    @property
    def connected(self) -> bool:
        return self._running

    def connect(self, port: str, baudrate: int = 115200) -> None:
        """Start the simulation.

        No I/O is performed; this starts the background thread that delivers
        responses to RX callbacks.

        Args:
            port: Fake port (ignored)
            baudrate: Fake baudrate (ignored)
        """
        if self._running:
            logger.info("Mock device already connected")
            return

        logger.info("Mock device connected on %s @ %d baud (simulation mode)", port, baudrate)

        # Responses from a previous connection are not delivered
        while True:
            try:
                self.rx_queue.get_nowait()
            except Empty:
                break

        self._stopped = threading.Event()
        self._running = True
        self._rx_thread = threading.Thread(
            target=self._rx_loop, daemon=True, name="MockImprovDevice-RX"
        )
        self._rx_thread.start()

    def send_packet(self, packet: Packet) -> None:
        """Encode a packet and deliver the frame to the simulated device.

        Raises:
            EncodeError: If the packet cannot be encoded
            RuntimeError: If the device is not connected
        """
        self.write(encode(packet))

    def write(self, frame: bytes) -> None:
        """Deliver raw frame bytes to the simulated device.

        Unlike send_packet(), this accepts arbitrary bytes, so malformed
        frames can be injected.

        Raises:
            RuntimeError: If the device is not connected
        """
        if not self._running:
            raise RuntimeError("Mock device not connected. Call connect() before sending.")

        responses = self.handle_frame(frame)

        if self.config.response_delay <= 0:
            for response in responses:
                self.rx_queue.put(response)
            return

        def delayed_rx(stopped: threading.Event) -> None:
            if stopped.wait(self.config.response_delay):
                return
            for response in responses:
                self.rx_queue.put(response)

        rx_thread = threading.Thread(
            target=delayed_rx,
            args=(self._stopped,),
            daemon=True,
            name="MockImprovDevice-Delayed-RX",
        )
        self._delayed_threads = [t for t in self._delayed_threads if t.is_alive()]
        self._delayed_threads.append(rx_thread)
        rx_thread.start()

    def attach_rx_callback(self, callback: RxCallback) -> None:
        self.rx_callbacks.append(callback)
        logger.debug("Registered RX callback (total: %d)", len(self.rx_callbacks))

    def disconnect(self) -> None:
        """Stop the simulation and wait for the RX and delayed-delivery threads to exit.

        Responses still waiting out the response delay are discarded.
        """
        if not self._running:
            logger.info("Mock device already disconnected")
            return

        self._running = False
        self._stopped.set()
        for thread in self._delayed_threads:
            thread.join(timeout=1.0)
        self._delayed_threads = []

        if self._rx_thread is not None:
            self._rx_thread.join(timeout=1.0)
            self._rx_thread = None
        logger.info("Mock device disconnected")

    def handle_frame(self, frame: bytes) -> list[bytes]:
        """Process one frame as the device would and return its response frames.

        Frames that fail to decode are answered with an ErrorState report
        instead of raising.

        Args:
            frame: One complete frame sent to the device

        Returns:
            Encoded response frames, in the order the device sends them
        """
        try:
            packet = decode(frame)
        except InvalidRpcCommand as e:
            logger.warning("Rejected frame %s: %s", bytes(frame).hex(" "), e)
            responses: list[Packet] = [ErrorState(error=DeviceError.UNKNOWN_RPC_COMMAND)]
        except DecodeError as e:
            logger.warning("Rejected frame %s: %s", bytes(frame).hex(" "), e)
            responses = [ErrorState(error=DeviceError.INVALID_RPC_PACKET)]
        else:
            responses = self.handle_packet(packet)

        return [encode(response) for response in responses]

    def handle_packet(self, packet: Packet) -> list[Packet]:
        """Process one decoded packet and return the device's responses."""
        if not isinstance(packet, RpcCommand):
            logger.warning("Device only accepts RPC commands, got %s", type(packet).__name__)
            return [ErrorState(error=DeviceError.INVALID_RPC_PACKET)]

        with self._lock:
            return self._handle_command(packet.command)

    def _handle_command(self, command: Command) -> list[Packet]:
        logger.debug("Handling %r in state %s", command, self.state.name)

        if isinstance(command, RequestCurrentState):
            responses: list[Packet] = [CurrentState(state=self.state)]
            if self.state == DeviceState.PROVISIONED:
                responses.append(RpcResult.from_strings(self.config.redirect_url))
            return responses

        if isinstance(command, RequestDeviceInformation):
            return [
                RpcResult.from_strings(
                    self.config.firmware_name,
                    self.config.firmware_version,
                    self.config.hardware,
                    self.config.device_name,
                )
            ]

        if isinstance(command, RequestScannedWifiNetworks):
            responses = [
                RpcResult.from_strings(ssid, str(rssi), "YES" if secured else "NO")
                for ssid, rssi, secured in self.config.networks
            ]
            # Empty result terminates the scan list
            responses.append(RpcResult())
            return responses

        if isinstance(command, SendWifiSettings):
            return self._provision(command)

        return [ErrorState(error=DeviceError.UNKNOWN_RPC_COMMAND)]

    def _provision(self, command: SendWifiSettings) -> list[Packet]:
        settings = command.settings
        responses: list[Packet] = [CurrentState(state=DeviceState.PROVISIONING)]

        if self.config.credentials.get(settings.ssid) == settings.psk:
            self.state = DeviceState.PROVISIONED
            logger.info("Provisioned on network %r", settings.ssid)
            responses.append(CurrentState(state=DeviceState.PROVISIONED))
            responses.append(RpcResult.from_strings(self.config.redirect_url))
        else:
            self.state = DeviceState.READY
            logger.warning("Unable to connect to network %r", settings.ssid)
            responses.append(ErrorState(error=DeviceError.UNABLE_TO_CONNECT))
            responses.append(CurrentState(state=DeviceState.READY))

        return responses

    def _rx_loop(self) -> None:
        """Deliver queued response frames to callbacks while connected."""
        logger.debug("RX processing thread started")
        while self._running:
            try:
                frame = self.rx_queue.get(timeout=0.01)
            except Empty:
                continue

            try:
                packet = decode(frame)
            except DecodeError:
                logger.exception("Dropping undecodable response frame %s", frame.hex(" "))
                continue

            for callback in self.rx_callbacks:
                try:
                    callback(packet)
                except Exception:
                    logger.exception("RX callback error")

        logger.debug("RX processing thread stopped")
