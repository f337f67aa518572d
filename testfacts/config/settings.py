# testfacts/config/settings.py
"""
testfacts Settings Module.

Provides library-wide settings with environment variable support.
All settings can be overridden via environment variables with TESTFACTS_ prefix.

Environment Variables:
    TESTFACTS_MESSAGES_PATH: YAML message bundle to load connector templates from
        (default: the bundle shipped in testfacts/resources)
    TESTFACTS_MAX_COLLECTION_ITEMS: Elements shown before a prettified
        collection is truncated (default: 20)
    TESTFACTS_STRICT_ARGS: Validate leaf arguments against template
        placeholders (default: true)
    TESTFACTS_DEBUG: Enable debug mode (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

DEFAULT_MESSAGES_PATH = Path(__file__).parent.parent / "resources" / "messages.yaml"


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("1", "true", "yes", "on"):
        return True
    if val in ("0", "false", "no", "off"):
        return False
    return default


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    val = os.environ.get(key)
    if val is not None:
        try:
            return int(val)
        except ValueError:
            pass
    return default


def _get_env_path(key: str, default: Path) -> Path:
    """Get Path from environment variable."""
    val = os.environ.get(key)
    if val:
        return Path(val)
    return default


@dataclass
class TestFactsSettings:
    """
    Library-wide settings for testfacts.

    All settings can be overridden via environment variables with TESTFACTS_
    prefix, or by passing values directly to the constructor.

    Attributes:
        messages_path: YAML bundle holding the connector templates
        max_collection_items: Elements shown by the default prettifier
            before truncating a collection
        strict_args: Reject leaf facts whose templates reference a
            placeholder that has no argument
        debug: Enable debug mode with verbose logging

    Example:
        # Use default settings
        from testfacts.config import settings
        print(settings.messages_path)

        # Override via environment
        os.environ["TESTFACTS_MAX_COLLECTION_ITEMS"] = "5"

        # Override programmatically
        custom = TestFactsSettings(strict_args=False)
    """

    __test__ = False

    messages_path: Path = field(
        default_factory=lambda: _get_env_path("TESTFACTS_MESSAGES_PATH", DEFAULT_MESSAGES_PATH)
    )
    max_collection_items: int = field(
        default_factory=lambda: _get_env_int("TESTFACTS_MAX_COLLECTION_ITEMS", 20)
    )
    strict_args: bool = field(
        default_factory=lambda: _get_env_bool("TESTFACTS_STRICT_ARGS", True)
    )
    debug: bool = field(
        default_factory=lambda: _get_env_bool("TESTFACTS_DEBUG", False)
    )

    def as_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "messages_path": str(self.messages_path),
            "max_collection_items": self.max_collection_items,
            "strict_args": self.strict_args,
            "debug": self.debug,
        }


# Global settings instance (singleton pattern)
settings = TestFactsSettings()
