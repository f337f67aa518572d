# testfacts/core/exceptions.py
"""
Exception hierarchy for testfacts.

Exception Hierarchy:
    TestFactsError (base)
    ├── TestFailedError
    ├── ConfigurationError
    │   └── MessageArgumentError
    └── ResourceError
        └── MessageNotFoundError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from testfacts.core.outcomes import SourceLocation


class TestFactsError(Exception):
    """
    Base exception for all testfacts errors.

    All custom exceptions in testfacts inherit from this class,
    making it easy to catch all library-specific errors:

        try:
            fact.to_assertion()
        except TestFactsError as e:
            logger.error(f"testfacts error: {e}")
    """

    # Keep pytest from collecting this hierarchy as test classes.
    __test__ = False

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Assertion Failure
# ============================================================================

class TestFailedError(TestFactsError, AssertionError):
    """
    Raised when a false fact is converted into an assertion outcome.

    The message is the fact's fully rendered message, truth prefix included.
    ``str()`` of the error is exactly that message so that test runners
    report it verbatim.

    Attributes:
        message: Rendered full message of the failing fact
        cause: The underlying error the fact was built from, if any
        location: Where ``to_assertion()`` was called from, if known
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        location: Optional["SourceLocation"] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.location = location
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    @property
    def failed_code_file_name_and_line_number(self) -> Optional[str]:
        if self.location is None:
            return None
        return f"{self.location.filename}:{self.location.lineno}"


# ============================================================================
# Configuration Exceptions
# ============================================================================

class ConfigurationError(TestFactsError):
    """Base exception for configuration errors."""
    pass


class MessageArgumentError(ConfigurationError):
    """Raised when a leaf's arguments do not cover its template placeholders."""

    def __init__(self, field: str, template: str, expected: int, actual: int):
        super().__init__(
            f"Template for '{field}' needs {expected} argument(s), got {actual}",
            details={"field": field, "template": template},
        )
        self.field = field
        self.expected = expected
        self.actual = actual


# ============================================================================
# Resource Exceptions
# ============================================================================

class ResourceError(TestFactsError):
    """Base exception for message bundle errors."""
    pass


class MessageNotFoundError(ResourceError):
    """Raised when a message key, or the bundle itself, cannot be found."""

    def __init__(self, key: str, path: str):
        super().__init__(
            f"Message '{key}' not found in bundle",
            details={"key": key, "path": path},
        )
        self.key = key
        self.path = path
