"""Tests for codec configuration."""

from __future__ import annotations

import dataclasses

import pytest

from improv.config import DEFAULT_CONFIG, CodecConfig


class TestCodecConfig:
    """Tests for CodecConfig validation."""

    def test_default_config(self) -> None:
        """Test default configuration is strict."""
        assert DEFAULT_CONFIG.verify_checksum is True
        assert DEFAULT_CONFIG.strict_text is True
        assert DEFAULT_CONFIG.text_errors == "strict"

    def test_lenient_text(self) -> None:
        config = CodecConfig(strict_text=False)
        assert config.text_errors == "ignore"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.verify_checksum = False  # type: ignore[misc]

    def test_non_bool_rejected(self) -> None:
        """Test options must be real booleans."""
        with pytest.raises(ValueError, match="verify_checksum must be a bool"):
            CodecConfig(verify_checksum=0)  # type: ignore[arg-type]

        with pytest.raises(ValueError, match="strict_text must be a bool"):
            CodecConfig(strict_text="no")  # type: ignore[arg-type]
