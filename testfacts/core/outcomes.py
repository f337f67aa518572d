# testfacts/core/outcomes.py
"""
Assertion outcomes.

A passing fact converts to ``Succeeded``; a failing one raises
``TestFailedError`` carrying the ``SourceLocation`` of the caller.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Assertion(Enum):
    """Result type of ``Fact.to_assertion()``. It has a single member."""

    SUCCEEDED = "succeeded"

    def __repr__(self) -> str:
        return "Succeeded"


Succeeded = Assertion.SUCCEEDED


@dataclass(frozen=True)
class SourceLocation:
    """File, line and function of the code that forced an assertion."""

    filename: str
    lineno: int
    function: str

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.function}"


def caller_location(depth: int = 2) -> Optional[SourceLocation]:
    """
    Locate the frame ``depth`` levels above this call.

    Args:
        depth: 1 is the function calling ``caller_location``, 2 its caller

    Returns:
        SourceLocation, or None when the stack is shallower than ``depth``
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return SourceLocation(
            filename=frame.f_code.co_filename,
            lineno=frame.f_lineno,
            function=frame.f_code.co_name,
        )
    finally:
        del frame
