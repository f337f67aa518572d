# testfacts/report/formatters/__init__.py
"""
Formatters for fact messages.

This module provides formatting utilities for converting raw templates
and argument values into display-ready message text.
"""

from testfacts.report.formatters.templates import (
    format_string,
    placeholder_count,
)
from testfacts.report.formatters.prettify import (
    prettify,
    make_prettifier,
)

__all__ = [
    # Template formatting
    "format_string",
    "placeholder_count",
    # Value prettifiers
    "prettify",
    "make_prettifier",
]
