# testfacts/facts/base.py
"""
The Fact contract and lazy nested messages.

A fact is an immutable boolean that can explain itself. It carries four raw
templates, one per phrasing:

    message                          full, start of sentence
    simplified_message               abbreviated, start of sentence
    mid_sentence_message             full, after a connector word
    mid_sentence_simplified_message  abbreviated, after a connector word

and one argument tuple per template. Arguments stay unformatted until a
message is rendered; each is passed through the fact's prettifier and then
substituted into its template. Rendered messages are prefixed with the
fact's truth value, e.g. ``"false: file was empty"``.

Facts combine with ``~`` / ``negate()``, ``&`` / ``and_()`` and ``|`` /
``or_()``. The right-hand side of ``and_``/``or_`` is a zero-argument
callable so it is never built when the left side settles the result.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Optional, Tuple, Union

from testfacts.core.exceptions import TestFailedError
from testfacts.core.outcomes import Assertion, Succeeded, caller_location
from testfacts.core.protocols import PrettifierProtocol
from testfacts.report.formatters import format_string

logger = logging.getLogger(__name__)

Prettifier = PrettifierProtocol


class FactKind(Enum):
    """Tag for the closed set of fact variants."""

    TRUE = "true"
    FALSE = "false"
    NOT = "not"
    AND = "and"
    OR = "or"

    @property
    def is_leaf(self) -> bool:
        return self in (FactKind.TRUE, FactKind.FALSE)


class Fact(ABC):
    """
    Abstract base for every fact variant.

    Concrete variants are ``TrueFact``, ``FalseFact`` (leaves) and
    ``NotFact``, ``AndFact``, ``OrFact`` (composites). Each provides the
    attributes below, either as dataclass fields or as properties.

    Attributes:
        raw_message: Template for ``message``
        raw_simplified_message: Template for ``simplified_message``
        raw_mid_sentence_message: Template for ``mid_sentence_message``
        raw_mid_sentence_simplified_message: Template for
            ``mid_sentence_simplified_message``
        message_args: Arguments for ``raw_message``
        simplified_message_args: Arguments for ``raw_simplified_message``
        mid_sentence_message_args: Arguments for ``raw_mid_sentence_message``
        mid_sentence_simplified_message_args: Arguments for
            ``raw_mid_sentence_simplified_message``
        composite: True for facts built by combinators
        prettifier: Converts each argument to display text
        cause: Error a failing leaf was built from, if any
    """

    kind: ClassVar[FactKind]

    raw_message: str
    raw_simplified_message: str
    raw_mid_sentence_message: str
    raw_mid_sentence_simplified_message: str

    message_args: Tuple[Any, ...]
    simplified_message_args: Tuple[Any, ...]
    mid_sentence_message_args: Tuple[Any, ...]
    mid_sentence_simplified_message_args: Tuple[Any, ...]

    composite: bool
    prettifier: Prettifier
    cause: Optional[BaseException] = None

    @property
    @abstractmethod
    def is_true(self) -> bool:
        ...

    @property
    def is_false(self) -> bool:
        return not self.is_true

    def to_boolean(self) -> bool:
        return self.is_true

    def __bool__(self) -> bool:
        return self.is_true

    # -- rendering -----------------------------------------------------------

    def _render(self, raw: str, args: Tuple[Any, ...]) -> str:
        prefix = "true: " if self.is_true else "false: "
        if not args:
            return prefix + raw
        return prefix + format_string(raw, [self.prettifier(a) for a in args])

    @property
    def message(self) -> str:
        """Full message, recomputed on every access."""
        return self._render(self.raw_message, self.message_args)

    @property
    def simplified_message(self) -> str:
        return self._render(self.raw_simplified_message, self.simplified_message_args)

    @property
    def mid_sentence_message(self) -> str:
        """Full message phrased to follow a connector word."""
        return self._render(self.raw_mid_sentence_message, self.mid_sentence_message_args)

    @property
    def mid_sentence_simplified_message(self) -> str:
        return self._render(
            self.raw_mid_sentence_simplified_message,
            self.mid_sentence_simplified_message_args,
        )

    def __str__(self) -> str:
        return self.message

    # -- combinators ---------------------------------------------------------

    def negate(self) -> "Fact":
        """Negated fact with full and simplified phrasings swapped."""
        from testfacts.facts.combinators import NotFact

        return NotFact(self)

    def and_(self, rhs: Callable[[], "Fact"]) -> "Fact":
        """
        Conjunction. ``rhs`` is only called when this fact is true.

        Returns:
            ``self`` if this fact is false, otherwise an ``AndFact``
        """
        if self.is_false:
            logger.debug("'and' short-circuited on a false left operand", extra={"fact_kind": self.kind.value})
            return self
        from testfacts.facts.combinators import AndFact

        return AndFact(self, rhs)

    def or_(self, rhs: Callable[[], "Fact"]) -> "Fact":
        """
        Disjunction. ``rhs`` is only called when this fact is false.

        Returns:
            ``self`` if this fact is true, otherwise an ``OrFact``
        """
        if self.is_true:
            logger.debug("'or' short-circuited on a true left operand", extra={"fact_kind": self.kind.value})
            return self
        from testfacts.facts.combinators import OrFact

        return OrFact(self, rhs)

    def __invert__(self) -> "Fact":
        return self.negate()

    def __and__(self, rhs: Union["Fact", Callable[[], "Fact"]]) -> "Fact":
        return self.and_((lambda: rhs) if isinstance(rhs, Fact) else rhs)

    def __or__(self, rhs: Union["Fact", Callable[[], "Fact"]]) -> "Fact":
        return self.or_((lambda: rhs) if isinstance(rhs, Fact) else rhs)

    # -- outcome -------------------------------------------------------------

    def to_assertion(self) -> Assertion:
        """
        Force the fact into a pass/fail outcome.

        Returns:
            ``Succeeded`` if the fact is true

        Raises:
            TestFailedError: If the fact is false. The error message is
                exactly ``self.message``.
        """
        if self.is_true:
            return Succeeded
        location = caller_location(2)
        logger.debug("Fact failed at %s", location, extra={"fact_kind": self.kind.value, "truth": False})
        raise TestFailedError(self.message, cause=self.cause, location=location)


# =============================================================================
# Lazy nested messages
# =============================================================================

@dataclass(frozen=True)
class LazyMessage(ABC):
    """
    A fact embedded as an argument of another fact's template.

    Holds the fact and which of its four messages to use. ``str()`` renders
    that message anew on every call, so nothing is cached.
    """

    fact: Fact

    @property
    @abstractmethod
    def nested_args(self) -> Tuple[Any, ...]:
        ...

    @abstractmethod
    def __str__(self) -> str:
        ...


@dataclass(frozen=True)
class FactMessage(LazyMessage):
    @property
    def nested_args(self) -> Tuple[Any, ...]:
        return self.fact.message_args

    def __str__(self) -> str:
        return self.fact.message


@dataclass(frozen=True)
class SimplifiedFactMessage(LazyMessage):
    @property
    def nested_args(self) -> Tuple[Any, ...]:
        return self.fact.simplified_message_args

    def __str__(self) -> str:
        return self.fact.simplified_message


@dataclass(frozen=True)
class MidSentenceFactMessage(LazyMessage):
    @property
    def nested_args(self) -> Tuple[Any, ...]:
        return self.fact.mid_sentence_message_args

    def __str__(self) -> str:
        return self.fact.mid_sentence_message


@dataclass(frozen=True)
class MidSentenceSimplifiedFactMessage(LazyMessage):
    @property
    def nested_args(self) -> Tuple[Any, ...]:
        return self.fact.mid_sentence_simplified_message_args

    def __str__(self) -> str:
        return self.fact.mid_sentence_simplified_message
