# testfacts/report/formatters/prettify.py
"""
Value prettification for fact messages.

Every message argument goes through a prettifier before it is placed into
its template. The default one quotes strings, renders containers with their
elements prettified recursively, and understands numpy and pandas values.
Anything else, including nested lazy messages, renders through ``str()``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

import numpy as np
import pandas as pd

from testfacts.config import settings


def _join(items: List[str], total: int, max_items: int, sep: str = ", ") -> str:
    """Join rendered elements, appending a truncation marker past ``max_items``."""
    if total <= max_items:
        return sep.join(items)
    head = sep.join(items[:max_items])
    return f"{head}{sep}… (+{total - max_items} more)"


def _render_items(values: Iterable[Any], max_items: int, prettifier: Callable[[Any], str]) -> List[str]:
    out = []
    for i, v in enumerate(values):
        if i >= max_items:
            break
        out.append(prettifier(v))
    return out


def prettify(value: Any, max_items: Optional[int] = None) -> str:
    """
    Convert a message argument into display text.

    Args:
        value: Argument to render
        max_items: Elements shown before truncating a collection
            (defaults to ``settings.max_collection_items``, read per call)

    Returns:
        Display string

    Examples:
        >>> prettify("abc")
        '"abc"'
        >>> prettify([1, "a"])
        '[1, "a"]'
        >>> prettify({"k": (1, 2)})
        '{"k": (1, 2)}'
    """
    limit = settings.max_collection_items if max_items is None else max_items

    def recurse(v: Any) -> str:
        return prettify(v, limit)

    if value is None:
        return "None"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, np.generic):
        return recurse(value.item())
    if isinstance(value, np.ndarray):
        flat = value.ravel()
        return f"array([{_join(_render_items(flat, limit, recurse), flat.size, limit)}])"
    if isinstance(value, pd.DataFrame):
        rows, cols = value.shape
        return f"DataFrame({rows} rows x {cols} columns)"
    if isinstance(value, (pd.Series, pd.Index)):
        kind = type(value).__name__
        return f"{kind}([{_join(_render_items(value.tolist(), limit, recurse), len(value), limit)}])"
    if isinstance(value, dict):
        pairs = []
        for i, (k, v) in enumerate(value.items()):
            if i >= limit:
                break
            pairs.append(f"{recurse(k)}: {recurse(v)}")
        return "{" + _join(pairs, len(value), limit) + "}"
    if isinstance(value, list):
        return "[" + _join(_render_items(value, limit, recurse), len(value), limit) + "]"
    if isinstance(value, tuple):
        body = _join(_render_items(value, limit, recurse), len(value), limit)
        if len(value) == 1:
            body += ","
        return f"({body})"
    if isinstance(value, (set, frozenset)):
        if not value:
            return "set()" if isinstance(value, set) else "frozenset()"
        # Sorted by rendered text so messages are deterministic
        rendered = sorted(recurse(v) for v in value)
        body = _join(rendered[:limit], len(rendered), limit)
        if isinstance(value, frozenset):
            return f"frozenset({{{body}}})"
        return "{" + body + "}"
    return str(value)


def make_prettifier(max_items: int) -> Callable[[Any], str]:
    """
    Build a prettifier with a fixed truncation limit.

    Example:
        >>> short = make_prettifier(2)
        >>> short([1, 2, 3])
        '[1, 2, … (+1 more)]'
    """
    def _prettify(value: Any) -> str:
        return prettify(value, max_items)

    return _prettify
