# testfacts/facts/combinators.py
"""
Composite facts: negation, conjunction and disjunction.

Composites compute their templates and arguments once, at construction.
Arguments are lazy message holders, so a nested fact's text is produced
only when the outer message is rendered, and produced again on every render.

When the left operand settles the result (false for ``and``, true for
``or``) the composite reuses the left operand's four templates and the
right operand is never built. Otherwise every template is the connector
from the message bundle and the arguments pair a phrasing of the left
operand with a mid-sentence phrasing of the right one:

    and         left            right
    full        simplified      mid-sentence
    simplified  simplified      mid-sentence simplified
    mid         mid simplified  mid-sentence
    mid simpl.  mid simplified  mid-sentence simplified

    or          left            right
    full        full            mid-sentence
    simplified  full            mid-sentence simplified
    mid         mid-sentence    mid-sentence
    mid simpl.  mid-sentence    mid-sentence simplified

A satisfied ``or`` never reaches the connector, so the left operand of a
combined ``or`` is always the failed branch, kept unabbreviated.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import FrozenInstanceError, dataclass
from typing import Any, Callable, ClassVar, Optional, Tuple, Union

from testfacts import resources
from testfacts.facts.base import (
    Fact,
    FactKind,
    FactMessage,
    MidSentenceFactMessage,
    MidSentenceSimplifiedFactMessage,
    Prettifier,
    SimplifiedFactMessage,
)

RightOperand = Union[Fact, Callable[[], Fact]]


@dataclass(frozen=True, repr=False)
class NotFact(Fact):
    """
    Negation of ``underlying``.

    Negated statements usually read better abbreviated, so the full and
    simplified phrasings (and their arguments) trade places.
    """

    underlying: Fact

    kind: ClassVar[FactKind] = FactKind.NOT
    composite: ClassVar[bool] = True

    @property
    def is_true(self) -> bool:
        return not self.underlying.is_true

    @property
    def prettifier(self) -> Prettifier:
        return self.underlying.prettifier

    @property
    def raw_message(self) -> str:
        return self.underlying.raw_simplified_message

    @property
    def raw_simplified_message(self) -> str:
        return self.underlying.raw_message

    @property
    def raw_mid_sentence_message(self) -> str:
        return self.underlying.raw_mid_sentence_simplified_message

    @property
    def raw_mid_sentence_simplified_message(self) -> str:
        return self.underlying.raw_mid_sentence_message

    @property
    def message_args(self) -> Tuple[Any, ...]:
        return self.underlying.simplified_message_args

    @property
    def simplified_message_args(self) -> Tuple[Any, ...]:
        return self.underlying.message_args

    @property
    def mid_sentence_message_args(self) -> Tuple[Any, ...]:
        return self.underlying.mid_sentence_simplified_message_args

    @property
    def mid_sentence_simplified_message_args(self) -> Tuple[Any, ...]:
        return self.underlying.mid_sentence_message_args

    def negate(self) -> Fact:
        # Double negation cancels to the original object
        return self.underlying

    def __repr__(self) -> str:
        return f"NotFact({self.underlying!r})"


class BinaryFact(Fact):
    """
    Shared construction for ``AndFact`` and ``OrFact``.

    Subclasses name their connector and decide when the left operand
    settles the result; this class resolves the right operand (at most
    once, only when needed) and fills in templates and arguments.

    Attributes:
        left: Left operand
        right: Right operand, or None when it was never evaluated
        short_circuited: True when ``left`` alone settled the result
    """

    connector_key: ClassVar[str]
    composite: ClassVar[bool] = True

    left: Fact
    right: Optional[Fact]
    short_circuited: bool

    def __init__(self, left: Fact, right: RightOperand):
        short_circuited = self._settled_by(left)
        values = {
            "left": left,
            "right": None if short_circuited else _force(right),
            "short_circuited": short_circuited,
            "prettifier": left.prettifier,
        }
        if short_circuited:
            values.update(
                raw_message=left.raw_message,
                raw_simplified_message=left.raw_simplified_message,
                raw_mid_sentence_message=left.raw_mid_sentence_message,
                raw_mid_sentence_simplified_message=left.raw_mid_sentence_simplified_message,
            )
            values.update(self._short_circuit_args(left))
        else:
            connector = resources.raw_message(self.connector_key)
            values.update(
                raw_message=connector,
                raw_simplified_message=connector,
                raw_mid_sentence_message=connector,
                raw_mid_sentence_simplified_message=connector,
            )
            values.update(self._combined_args(left, values["right"]))
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field '{name}'")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field '{name}'")

    @staticmethod
    @abstractmethod
    def _settled_by(left: Fact) -> bool:
        ...

    @staticmethod
    @abstractmethod
    def _short_circuit_args(left: Fact) -> dict:
        ...

    @staticmethod
    @abstractmethod
    def _combined_args(left: Fact, right: Fact) -> dict:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(left={self.left!r}, right={self.right!r})"


class AndFact(BinaryFact):
    """Conjunction. Settled by a false left operand."""

    kind: ClassVar[FactKind] = FactKind.AND
    connector_key: ClassVar[str] = "comma_double_ampersand"

    @property
    def is_true(self) -> bool:
        return not self.short_circuited and self.right.is_true

    @staticmethod
    def _settled_by(left: Fact) -> bool:
        return left.is_false

    @staticmethod
    def _short_circuit_args(left: Fact) -> dict:
        # Keep the full message when the left operand alone explains the failure
        return {
            "message_args": (FactMessage(left),),
            "simplified_message_args": (SimplifiedFactMessage(left),),
            "mid_sentence_message_args": (MidSentenceFactMessage(left),),
            "mid_sentence_simplified_message_args": (MidSentenceFactMessage(left),),
        }

    @staticmethod
    def _combined_args(left: Fact, right: Fact) -> dict:
        return {
            "message_args": (SimplifiedFactMessage(left), MidSentenceFactMessage(right)),
            "simplified_message_args": (SimplifiedFactMessage(left), MidSentenceSimplifiedFactMessage(right)),
            "mid_sentence_message_args": (
                MidSentenceSimplifiedFactMessage(left),
                MidSentenceFactMessage(right),
            ),
            "mid_sentence_simplified_message_args": (
                MidSentenceSimplifiedFactMessage(left),
                MidSentenceSimplifiedFactMessage(right),
            ),
        }


class OrFact(BinaryFact):
    """Disjunction. Settled by a true left operand."""

    kind: ClassVar[FactKind] = FactKind.OR
    connector_key: ClassVar[str] = "comma_double_pipe"

    @property
    def is_true(self) -> bool:
        return self.short_circuited or self.right.is_true

    @staticmethod
    def _settled_by(left: Fact) -> bool:
        return left.is_true

    @staticmethod
    def _short_circuit_args(left: Fact) -> dict:
        return {
            "message_args": (FactMessage(left),),
            "simplified_message_args": (SimplifiedFactMessage(left),),
            "mid_sentence_message_args": (MidSentenceFactMessage(left),),
            "mid_sentence_simplified_message_args": (MidSentenceSimplifiedFactMessage(left),),
        }

    @staticmethod
    def _combined_args(left: Fact, right: Fact) -> dict:
        return {
            "message_args": (FactMessage(left), MidSentenceFactMessage(right)),
            "simplified_message_args": (FactMessage(left), MidSentenceSimplifiedFactMessage(right)),
            "mid_sentence_message_args": (MidSentenceFactMessage(left), MidSentenceFactMessage(right)),
            "mid_sentence_simplified_message_args": (
                MidSentenceFactMessage(left),
                MidSentenceSimplifiedFactMessage(right),
            ),
        }


def _force(right: RightOperand) -> Fact:
    result = right if isinstance(right, Fact) else right()
    if not isinstance(result, Fact):
        raise TypeError(f"right operand must produce a Fact, got {type(result).__name__}")
    return result


# =============================================================================
# Parenthesised connectors
# =============================================================================

def _parenthesised(stem: str, left_composite: bool, right_composite: bool) -> str:
    if left_composite and right_composite:
        key = f"both_parens_{stem}"
    elif left_composite:
        key = f"left_parens_{stem}"
    elif right_composite:
        key = f"right_parens_{stem}"
    else:
        key = stem
    return resources.raw_message(key)


def comma_and(left_composite: bool, right_composite: bool) -> str:
    """
    Raw "and" connector with composite sides wrapped in parentheses.

    Examples:
        >>> comma_and(False, False)
        '{0}, and {1}'
        >>> comma_and(True, False)
        '({0}), and {1}'
    """
    return _parenthesised("comma_and", left_composite, right_composite)


def comma_but(left_composite: bool, right_composite: bool) -> str:
    """Raw "but" connector; parenthesisation as in ``comma_and``."""
    return _parenthesised("comma_but", left_composite, right_composite)
