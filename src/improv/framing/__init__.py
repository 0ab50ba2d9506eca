"""Frame envelope utilities for improv.

This module wraps packet payloads in the Improv envelope (magic, version,
type tag, length, checksum) and validates received frames.
"""

from __future__ import annotations

from .envelope import (
    FRAME_OVERHEAD,
    HEADER_SIZE,
    IMPROV_VERSION,
    MAGIC,
    MAX_PAYLOAD_SIZE,
    frame_packet,
    unframe_packet,
)

__all__ = [
    "frame_packet",
    "unframe_packet",
    "MAGIC",
    "IMPROV_VERSION",
    "HEADER_SIZE",
    "FRAME_OVERHEAD",
    "MAX_PAYLOAD_SIZE",
]
