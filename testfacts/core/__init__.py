# testfacts/core/__init__.py
"""
Core abstractions shared by the fact algebra.

This module provides:
- The exception hierarchy (assertion failure, configuration, resources)
- Assertion outcomes and caller source locations
- Protocols for pluggable prettifiers
"""

from testfacts.core.exceptions import (
    TestFactsError,
    TestFailedError,
    ConfigurationError,
    MessageArgumentError,
    ResourceError,
    MessageNotFoundError,
)
from testfacts.core.outcomes import (
    Assertion,
    Succeeded,
    SourceLocation,
    caller_location,
)
from testfacts.core.protocols import (
    PrettifierProtocol,
)

__all__ = [
    # Exceptions
    "TestFactsError",
    "TestFailedError",
    "ConfigurationError",
    "MessageArgumentError",
    "ResourceError",
    "MessageNotFoundError",
    # Outcomes
    "Assertion",
    "Succeeded",
    "SourceLocation",
    "caller_location",
    # Protocols (interfaces)
    "PrettifierProtocol",
]
