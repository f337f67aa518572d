# testfacts/facts/__init__.py
"""
The fact algebra.

Leaves record single test outcomes; composites combine them while keeping
their explanations readable:

    from testfacts.facts import TrueFact, FalseFact

    exists = TrueFact("file exists")
    non_empty = FalseFact.of("{0} was empty", "file was empty", args=["data.csv"])

    combined = exists.and_(lambda: non_empty)
    combined.message  # 'false: true: file exists, and false: "data.csv" was empty'
"""

from testfacts.facts.base import (
    Fact,
    FactKind,
    LazyMessage,
    FactMessage,
    SimplifiedFactMessage,
    MidSentenceFactMessage,
    MidSentenceSimplifiedFactMessage,
)
from testfacts.facts.leaves import LeafFact, TrueFact, FalseFact, fact
from testfacts.facts.combinators import (
    NotFact,
    BinaryFact,
    AndFact,
    OrFact,
    comma_and,
    comma_but,
)

__all__ = [
    # Contract
    "Fact",
    "FactKind",
    # Lazy nested messages
    "LazyMessage",
    "FactMessage",
    "SimplifiedFactMessage",
    "MidSentenceFactMessage",
    "MidSentenceSimplifiedFactMessage",
    # Leaves
    "LeafFact",
    "TrueFact",
    "FalseFact",
    "fact",
    # Composites
    "NotFact",
    "BinaryFact",
    "AndFact",
    "OrFact",
    "comma_and",
    "comma_but",
]
