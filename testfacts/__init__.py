# testfacts/__init__.py
"""
testfacts - Boolean facts that explain themselves

testfacts lets assertion helpers return facts instead of bare booleans.
Facts combine with not/and/or and still render grammatical explanations of
why the combination holds or fails.

Quick Start:
    from testfacts import TrueFact, FalseFact, fact

    exists = fact(path.exists(), "{0} exists", args=[str(path)])
    non_empty = lambda: fact(path.stat().st_size > 0, "{0} is non-empty", args=[str(path)])

    # The right operand is only built when ``exists`` holds
    check = exists.and_(non_empty)

    # Raises TestFailedError with check.message if the check fails
    check.to_assertion()

For Contributors:
    See testfacts/facts/base.py for the Fact contract.
    See testfacts/facts/combinators.py for how composite messages are built.
"""

import logging

__version__ = "0.1.0"

from testfacts.core import (
    Assertion,
    Succeeded,
    SourceLocation,
    TestFactsError,
    TestFailedError,
    ConfigurationError,
    MessageArgumentError,
    ResourceError,
    MessageNotFoundError,
    PrettifierProtocol,
)
from testfacts.config import TestFactsSettings, settings, setup_logging
from testfacts.facts import (
    Fact,
    FactKind,
    TrueFact,
    FalseFact,
    NotFact,
    AndFact,
    OrFact,
    fact,
    comma_and,
    comma_but,
)
from testfacts.report.formatters import format_string, prettify, make_prettifier

logging.getLogger(__name__).addHandler(logging.NullHandler())

if settings.debug:
    setup_logging("DEBUG")

__all__ = [
    "__version__",
    # Facts
    "Fact",
    "FactKind",
    "TrueFact",
    "FalseFact",
    "NotFact",
    "AndFact",
    "OrFact",
    "fact",
    "comma_and",
    "comma_but",
    # Outcomes
    "Assertion",
    "Succeeded",
    "SourceLocation",
    # Exceptions
    "TestFactsError",
    "TestFailedError",
    "ConfigurationError",
    "MessageArgumentError",
    "ResourceError",
    "MessageNotFoundError",
    # Formatting
    "PrettifierProtocol",
    "format_string",
    "prettify",
    "make_prettifier",
    # Configuration
    "TestFactsSettings",
    "settings",
    "setup_logging",
]
