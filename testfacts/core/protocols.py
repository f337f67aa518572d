# testfacts/core/protocols.py
"""
Protocol definitions for testfacts components.

Protocols enable structural subtyping (duck typing) with type checker support.
Any callable taking one value and returning a string is a prettifier, so
lambdas and plain functions work without inheriting from anything:

    shout: PrettifierProtocol = lambda value: str(value).upper()
    fact = TrueFact.of("{0} is loud", args=["x"], prettifier=shout)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PrettifierProtocol(Protocol):
    """
    Protocol for value prettifiers used when rendering fact messages.

    A prettifier converts an opaque message argument (a primitive, a
    collection, a nested lazy message) into display text before the
    template is formatted. It is applied to every argument, including
    arguments that are already rendered sub-messages.
    """

    def __call__(self, value: Any) -> str:
        """
        Format a value for display.

        Args:
            value: Raw message argument

        Returns:
            Display string for the argument
        """
        ...

