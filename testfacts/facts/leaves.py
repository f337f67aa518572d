# testfacts/facts/leaves.py
"""
Leaf facts: the outcome of a single test.

Only the full message is required; the rest default in tiers so callers
spell out just the phrasings that differ:

    TrueFact("file exists")
        all four templates are "file exists"

    TrueFact("file was found", "file found")
        simplified phrasing differs; mid-sentence phrasings copy the
        start-of-sentence ones

    TrueFact.of("File exists", mid_sentence="file exists")
        mid-sentence phrasing differs; simplified phrasings copy the full ones

    FalseFact.of("{0} was empty", args=[path])
        ``args`` covers the full and mid-sentence-full templates;
        ``simplified_args`` (default: ``args``) covers the two simplified
        ones; either mid-sentence list may still be given on its own, and a
        mid-sentence simplified template copied from ``mid_sentence`` keeps
        the mid-sentence arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence

from testfacts.config import settings
from testfacts.core.exceptions import MessageArgumentError
from testfacts.facts.base import Fact, FactKind, Prettifier
from testfacts.report.formatters import placeholder_count, prettify


@dataclass(frozen=True)
class LeafFact(Fact):
    """Fields and defaulting rules shared by ``TrueFact`` and ``FalseFact``."""

    raw_message: str
    raw_simplified_message: Optional[str] = None
    raw_mid_sentence_message: Optional[str] = None
    raw_mid_sentence_simplified_message: Optional[str] = None
    message_args: Sequence[Any] = ()
    simplified_message_args: Optional[Sequence[Any]] = None
    mid_sentence_message_args: Optional[Sequence[Any]] = None
    mid_sentence_simplified_message_args: Optional[Sequence[Any]] = None
    cause: Optional[BaseException] = None
    prettifier: Prettifier = field(default=prettify, repr=False, compare=False)

    composite: ClassVar[bool] = False

    @classmethod
    def of(
        cls,
        message: str,
        simplified: Optional[str] = None,
        mid_sentence: Optional[str] = None,
        mid_sentence_simplified: Optional[str] = None,
        *,
        args: Sequence[Any] = (),
        simplified_args: Optional[Sequence[Any]] = None,
        mid_sentence_args: Optional[Sequence[Any]] = None,
        mid_sentence_simplified_args: Optional[Sequence[Any]] = None,
        cause: Optional[BaseException] = None,
        prettifier: Prettifier = prettify,
    ):
        """Keyword-friendly constructor using the short names from the module docstring."""
        return cls(
            message,
            simplified,
            mid_sentence,
            mid_sentence_simplified,
            args,
            simplified_args,
            mid_sentence_args,
            mid_sentence_simplified_args,
            cause,
            prettifier,
        )

    def __post_init__(self):
        simplified = self.raw_simplified_message
        mid = self.raw_mid_sentence_message
        mid_simplified = self.raw_mid_sentence_simplified_message
        # A mid-sentence simplified template copied from the mid-sentence one
        # takes the mid-sentence arguments along with it
        mid_simplified_from_mid = mid_simplified is None and mid is not None
        if mid_simplified is None:
            mid_simplified = mid if mid is not None else simplified
        if simplified is None:
            simplified = self.raw_message
        if mid is None:
            mid = self.raw_message
        if mid_simplified is None:
            mid_simplified = self.raw_message

        args = tuple(self.message_args)
        simplified_args = args if self.simplified_message_args is None else tuple(self.simplified_message_args)
        mid_args = args if self.mid_sentence_message_args is None else tuple(self.mid_sentence_message_args)
        if self.mid_sentence_simplified_message_args is not None:
            mid_simplified_args = tuple(self.mid_sentence_simplified_message_args)
        elif mid_simplified_from_mid:
            mid_simplified_args = mid_args
        else:
            mid_simplified_args = simplified_args

        resolved = {
            "raw_simplified_message": simplified,
            "raw_mid_sentence_message": mid,
            "raw_mid_sentence_simplified_message": mid_simplified,
            "message_args": args,
            "simplified_message_args": simplified_args,
            "mid_sentence_message_args": mid_args,
            "mid_sentence_simplified_message_args": mid_simplified_args,
        }
        for name, value in resolved.items():
            object.__setattr__(self, name, value)

        if settings.strict_args:
            self._check_args()

    def _check_args(self) -> None:
        pairs = (
            ("raw_message", self.raw_message, self.message_args),
            ("raw_simplified_message", self.raw_simplified_message, self.simplified_message_args),
            ("raw_mid_sentence_message", self.raw_mid_sentence_message, self.mid_sentence_message_args),
            (
                "raw_mid_sentence_simplified_message",
                self.raw_mid_sentence_simplified_message,
                self.mid_sentence_simplified_message_args,
            ),
        )
        for name, template, args in pairs:
            # Empty args render the template verbatim
            if not args:
                continue
            needed = placeholder_count(template)
            if needed > len(args):
                raise MessageArgumentError(name, template, needed, len(args))

    def __hash__(self) -> int:
        # Arguments may be unhashable (lists, arrays), so only the templates count
        return hash(
            (
                type(self),
                self.raw_message,
                self.raw_simplified_message,
                self.raw_mid_sentence_message,
                self.raw_mid_sentence_simplified_message,
            )
        )


@dataclass(frozen=True, eq=False)
class TrueFact(LeafFact):
    """A leaf fact that holds."""

    kind: ClassVar[FactKind] = FactKind.TRUE

    @property
    def is_true(self) -> bool:
        return True


@dataclass(frozen=True, eq=False)
class FalseFact(LeafFact):
    """A leaf fact that does not hold. ``to_assertion()`` raises ``TestFailedError``."""

    kind: ClassVar[FactKind] = FactKind.FALSE

    @property
    def is_true(self) -> bool:
        return False

    @classmethod
    def from_error(
        cls,
        error: BaseException,
        message: Optional[str] = None,
        simplified: Optional[str] = None,
        **kwargs: Any,
    ) -> "FalseFact":
        """
        Build a failing fact from an error raised by the code under test.

        Args:
            error: The underlying failure, kept as ``cause``
            message: Raw template; defaults to "<ErrorType>: <error text>"
            simplified: Raw simplified template
            **kwargs: Any other keyword accepted by ``FalseFact.of``

        Returns:
            FalseFact with ``cause`` set to ``error``
        """
        if message is None:
            message = f"{type(error).__name__}: {error}"
        return cls.of(message, simplified, cause=error, **kwargs)


def fact(
    condition: bool,
    message: str,
    simplified: Optional[str] = None,
    mid_sentence: Optional[str] = None,
    mid_sentence_simplified: Optional[str] = None,
    **kwargs: Any,
) -> LeafFact:
    """
    Wrap an already evaluated test result in a leaf fact.

    Args:
        condition: The test result
        message: Raw full template
        simplified: Raw simplified template
        mid_sentence: Raw mid-sentence template
        mid_sentence_simplified: Raw mid-sentence simplified template
        **kwargs: Argument lists, ``cause`` or ``prettifier``

    Returns:
        TrueFact if ``condition`` holds, else FalseFact

    Example:
        fact(path.exists(), "{0} exists", args=[str(path)])
    """
    cls = TrueFact if condition else FalseFact
    return cls.of(message, simplified, mid_sentence, mid_sentence_simplified, **kwargs)
