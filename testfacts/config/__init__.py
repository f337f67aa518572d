# testfacts/config/__init__.py
"""
Configuration management for testfacts.

This module provides centralized configuration handling with:
- Environment variable support (TESTFACTS_* prefix)
- Default values for all settings
- Easy override for testing
- Opt-in logging setup

Usage:
    from testfacts.config import settings

    # Access settings
    limit = settings.max_collection_items

    # Override for testing
    from testfacts.config import TestFactsSettings
    test_settings = TestFactsSettings(strict_args=False)
"""

from testfacts.config.settings import TestFactsSettings, settings
from testfacts.config.logging import JSONFormatter, setup_logging

__all__ = [
    "TestFactsSettings",
    "settings",
    "JSONFormatter",
    "setup_logging",
]
