"""Boolean clause composition for Solr queries.

Every function here is pure: identical inputs always produce identical output.
Invalid operands never raise; they degrade to an empty string so calls can be
nested without guarding each level.

Examples:

    and_("a", "b")            -> "(a AND b)"
    and_("a", ["b", "c"])     -> "(a:(b c))"
    not_("draft", False)      -> "! draft"
    strict_string("a b")      -> '"a b"'
"""

from __future__ import annotations

import math
from typing import Any, Final, Sequence

AND: Final = "AND"
OR: Final = "OR"
NOT: Final = "!"
PROHIBIT: Final = "-"
REQUIRED: Final = "+"


def is_valid_string(value: Any) -> bool:
    """Return True for strings that are non-empty after trimming."""
    return isinstance(value, str) and value.strip() != ""


def is_valid_list(value: Any) -> bool:
    """Return True for non-empty lists or tuples."""
    return isinstance(value, (list, tuple)) and len(value) > 0


def is_valid_number(value: Any) -> bool:
    """Return True for integers, integral finite floats and integer strings."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    if isinstance(value, str):
        try:
            int(value.strip())
        except ValueError:
            return False
        return True
    return False


def is_valid_mapping(value: Any) -> bool:
    """Return True for non-empty dicts with valid string keys."""
    return isinstance(value, dict) and len(value) > 0 and all(is_valid_string(k) for k in value)


def _parenthesize(clause: str, include: bool) -> str:
    return f"({clause})" if include else clause


def _multi_clause(left: Any, right: Any, operator: str, use_parentheses: bool) -> str:
    if is_valid_list(right):
        items = " ".join(str(item) for item in right)
        return _parenthesize(f"{left}:{_parenthesize(items, True)}", use_parentheses)
    if not is_valid_string(left) and not is_valid_string(right):
        return ""
    return _parenthesize(f"{left} {operator} {right}", use_parentheses)


def _single_clause(clause: Any, operator: str, use_parentheses: bool) -> str:
    if not is_valid_string(clause):
        return ""
    return _parenthesize(f"{operator} {clause}", use_parentheses)


def and_(left: str, right: str | Sequence[str], use_parentheses: bool = True) -> str:
    """Match documents where both terms exist.

    A list on the right side expands to ``left:(item1 item2 ...)``.
    """
    return _multi_clause(left, right, AND, use_parentheses)


def or_(left: str, right: str | Sequence[str], use_parentheses: bool = True) -> str:
    """Match documents where either term exists.

    A list on the right side expands to ``left:(item1 item2 ...)``.
    """
    return _multi_clause(left, right, OR, use_parentheses)


def not_(clause: str, use_parentheses: bool = True) -> str:
    """Exclude documents containing ``clause``."""
    return _single_clause(clause, NOT, use_parentheses)


def prohibit(clause: str, use_parentheses: bool = True) -> str:
    """Prohibit the term: match only fields or documents without it."""
    return _single_clause(clause, PROHIBIT, use_parentheses)


def required(clause: str, use_parentheses: bool = True) -> str:
    """Require the term to exist for a document to match."""
    return _single_clause(clause, REQUIRED, use_parentheses)


def strict_string(value: str) -> str:
    """Wrap ``value`` in double quotes for exact phrase matching."""
    return f'"{value}"' if is_valid_string(value) else ""
