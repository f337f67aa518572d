# testfacts/report/formatters/templates.py
"""
Raw message template formatting.

Templates use positional placeholders, ``{0}``, ``{1}`` and so on.
"""

from __future__ import annotations

import re
from typing import Sequence

PLACEHOLDER = re.compile(r"\{(\d+)\}")


def format_string(raw: str, args: Sequence[str]) -> str:
    """
    Substitute positional placeholders in a raw template.

    Substitution is a single pass, so argument text that itself contains
    ``{n}`` is never substituted again. Placeholders with no matching
    argument are left untouched.

    Args:
        raw: Template string
        args: Display strings, already prettified

    Returns:
        Formatted string

    Examples:
        >>> format_string("{0}, and {1}", ["a", "b"])
        'a, and b'
        >>> format_string("{0} vs {2}", ["a"])
        'a vs {2}'
    """
    def _sub(match: re.Match) -> str:
        idx = int(match.group(1))
        if idx < len(args):
            return str(args[idx])
        return match.group(0)

    return PLACEHOLDER.sub(_sub, raw)


def placeholder_count(raw: str) -> int:
    """
    Number of arguments a template needs: one past its highest placeholder index.

    Examples:
        >>> placeholder_count("{0} and {1}")
        2
        >>> placeholder_count("no placeholders")
        0
    """
    indices = [int(m) for m in PLACEHOLDER.findall(raw)]
    return max(indices) + 1 if indices else 0
