"""Utility functions for improv.

This module provides the frame checksum and size calculation helpers.
"""

from __future__ import annotations

from .checksum import checksum, checksum_bytes, verify_checksum
from .sizing import encoded_size, payload_size

__all__ = [
    # Checksum functions
    "checksum",
    "checksum_bytes",
    "verify_checksum",
    # Sizing functions
    "encoded_size",
    "payload_size",
]
