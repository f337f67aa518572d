# testfacts/resources/__init__.py
"""
Message bundle access.

Raw templates are looked up by key in a YAML bundle. The bundle path comes
from ``settings.messages_path`` at lookup time; each path is parsed once.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from testfacts.config import settings
from testfacts.core.exceptions import MessageNotFoundError

logger = logging.getLogger(__name__)


def load_yaml_config(path: Union[str, Path]) -> Dict[str, str]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=None)
def load_messages(path: str) -> Dict[str, str]:
    """
    Load and cache a message bundle.

    Args:
        path: Bundle file path

    Returns:
        Mapping of message key to raw template

    Raises:
        MessageNotFoundError: If the bundle file does not exist
    """
    try:
        messages = load_yaml_config(path)
    except FileNotFoundError as e:
        raise MessageNotFoundError("*", path) from e
    logger.debug("Loaded %d messages", len(messages), extra={"messages_path": path})
    return {str(k): str(v) for k, v in messages.items()}


def raw_message(key: str, path: Optional[Union[str, Path]] = None) -> str:
    """
    Look up a raw template.

    Args:
        key: Message key, e.g. "comma_double_ampersand"
        path: Bundle to read; defaults to ``settings.messages_path``

    Raises:
        MessageNotFoundError: If the key is not in the bundle
    """
    bundle_path = str(path or settings.messages_path)
    messages = load_messages(bundle_path)
    try:
        return messages[key]
    except KeyError:
        raise MessageNotFoundError(key, bundle_path) from None


__all__ = ["load_messages", "load_yaml_config", "raw_message"]
