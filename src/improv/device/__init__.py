"""Device transport abstraction for improv.

This module provides a link-agnostic interface for talking to Improv devices
and a simulated device for testing provisioning flows without hardware.

## Quick Start

```python
import time

from improv import RpcCommand, RequestDeviceInformation
from improv.device import MockDeviceConfig, MockImprovDevice

device = MockImprovDevice(MockDeviceConfig(response_delay=0.1))
device.connect("/dev/null")
device.attach_rx_callback(lambda packet: print(repr(packet)))

device.send_packet(RpcCommand(command=RequestDeviceInformation()))

time.sleep(0.5)
device.disconnect()
```
"""

from improv.device.config import MockDeviceConfig
from improv.device.driver import ImprovTransport, RxCallback
from improv.device.mock import MockImprovDevice

__all__ = [
    "ImprovTransport",
    "RxCallback",
    "MockImprovDevice",
    "MockDeviceConfig",
]
