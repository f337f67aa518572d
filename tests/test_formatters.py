import numpy as np
import pandas as pd
import pytest

from testfacts import settings
from testfacts.facts import FactMessage, FalseFact, MidSentenceSimplifiedFactMessage, TrueFact
from testfacts.report.formatters import (
    format_string,
    make_prettifier,
    placeholder_count,
    prettify,
)


# --- format_string ---
def test_format_string_positional():
    assert format_string("{0}, and {1}", ["a", "b"]) == "a, and b"


def test_format_string_repeated_and_reordered():
    assert format_string("{1} {0} {1}", ["x", "y"]) == "y x y"


def test_format_string_leaves_unknown_placeholders():
    assert format_string("{0} vs {2}", ["a"]) == "a vs {2}"


def test_format_string_single_pass():
    # Argument text that looks like a placeholder is not substituted again
    assert format_string("{0} then {1}", ["{1}", "b"]) == "{1} then b"


def test_placeholder_count():
    assert placeholder_count("{0} and {1}") == 2
    assert placeholder_count("{2} only") == 3
    assert placeholder_count("plain") == 0


# --- prettify: primitives ---
@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "None"),
        ("abc", '"abc"'),
        ("", '""'),
        (42, "42"),
        (1.5, "1.5"),
        (True, "True"),
    ],
)
def test_prettify_primitives(value, expected):
    assert prettify(value) == expected


# --- prettify: containers ---
def test_prettify_list_and_tuple():
    assert prettify([1, "a"]) == '[1, "a"]'
    assert prettify((1, 2)) == "(1, 2)"
    assert prettify((1,)) == "(1,)"
    assert prettify([]) == "[]"


def test_prettify_dict():
    assert prettify({"k": (1, 2)}) == '{"k": (1, 2)}'


def test_prettify_sets_are_sorted():
    assert prettify({3, 1, 2}) == "{1, 2, 3}"
    assert prettify(frozenset({"b", "a"})) == 'frozenset({"a", "b"})'
    assert prettify(set()) == "set()"


def test_prettify_nested():
    assert prettify([["a"], {"b": None}]) == '[["a"], {"b": None}]'


def test_prettify_truncates_long_collections():
    assert prettify(list(range(5)), max_items=2) == "[0, 1, … (+3 more)]"
    assert prettify({"a": 1, "b": 2, "c": 3}, max_items=1) == '{"a": 1, … (+2 more)}'


def test_prettify_truncation_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "max_collection_items", 3)
    assert prettify(list(range(4))) == "[0, 1, 2, … (+1 more)]"


def test_make_prettifier():
    short = make_prettifier(2)
    assert short([1, 2, 3]) == "[1, 2, … (+1 more)]"
    assert short("x") == '"x"'


# --- prettify: numpy / pandas ---
def test_prettify_numpy():
    assert prettify(np.array([1, 2, 3])) == "array([1, 2, 3])"
    assert prettify(np.float64(1.5)) == "1.5"
    assert prettify(np.int64(7)) == "7"
    assert prettify(np.array([[1, 2], [3, 4]]), max_items=3) == "array([1, 2, 3, … (+1 more)])"


def test_prettify_pandas():
    assert prettify(pd.Series([1, 2])) == "Series([1, 2])"
    assert prettify(pd.Index(["a", "b"])) == 'Index(["a", "b"])'
    df = pd.DataFrame({"a": [1, 2, 3], "b": [4, 5, 6]})
    assert prettify(df) == "DataFrame(3 rows x 2 columns)"


# --- prettify: lazy messages ---
def test_prettify_lazy_message_renders_fact():
    assert prettify(FactMessage(TrueFact("x"))) == "true: x"
    holder = MidSentenceSimplifiedFactMessage(FalseFact("A", "a", "mid A", "mid a"))
    assert prettify(holder) == "false: mid a"


def test_lazy_message_nested_args():
    f = FalseFact.of("{0}", "{0}!", args=[1], simplified_args=[2])
    assert FactMessage(f).nested_args == (1,)
    assert MidSentenceSimplifiedFactMessage(f).nested_args == (2,)


def test_fact_arguments_in_templates():
    f = FalseFact.of("{0} should equal {1}", args=[np.array([1, 2]), "ab"])
    assert f.message == 'false: array([1, 2]) should equal "ab"'


def test_prettifiers_satisfy_protocol():
    from testfacts.core.protocols import PrettifierProtocol

    assert isinstance(prettify, PrettifierProtocol)
    assert isinstance(make_prettifier(3), PrettifierProtocol)
    assert isinstance(lambda v: str(v), PrettifierProtocol)
