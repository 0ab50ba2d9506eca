"""Decode options for the improv codec."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Options controlling how strictly frames are decoded.

    Attributes:
        verify_checksum: Reject frames whose trailing checksum byte does not
            match the frame contents (default True). Disable only to talk to
            peers known to send bad checksums.

        strict_text: Reject SSID/PSK bytes that are not valid UTF-8 with
            InvalidTextEncoding (default True). When False, invalid bytes are
            dropped, so the decoded strings no longer round-trip
            byte-for-byte.

    Examples:
        ```python
        from improv import decode
        from improv.config import CodecConfig

        lenient = CodecConfig(verify_checksum=False, strict_text=False)
        packet = decode(frame, config=lenient)
        ```
    """

    verify_checksum: bool = True
    strict_text: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.verify_checksum, bool):
            raise ValueError(f"verify_checksum must be a bool, got {self.verify_checksum!r}")

        if not isinstance(self.strict_text, bool):
            raise ValueError(f"strict_text must be a bool, got {self.strict_text!r}")

    @property
    def text_errors(self) -> str:
        """Error handler passed to bytes.decode() for SSID/PSK fields."""
        return "strict" if self.strict_text else "ignore"


DEFAULT_CONFIG = CodecConfig()
