"""Shared helpers for reading typed values out of YAML sections."""

from __future__ import annotations

from typing import Any, Mapping


def get_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return ``raw[key]`` as a mapping; a missing section reads as empty.

    Raises:
        TypeError: If the section is present but not a mapping.
    """
    section = raw.get(key)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def read_value(
    section: Mapping[str, Any],
    field: str,
    default: Any,
    expected: type | tuple[type, ...],
    config_key: str,
    *,
    nullable: bool = False,
) -> Any:
    """Return ``section[field]`` (or ``default``) after a type check.

    Booleans never satisfy a numeric ``expected`` type.

    Raises:
        TypeError: If the value has the wrong type.
    """
    value = section.get(field, default)
    if value is None and nullable:
        return None
    numeric = expected in (int, float) or expected == (int, float)
    if (numeric and isinstance(value, bool)) or not isinstance(value, expected):
        suffix = " or null" if nullable else ""
        raise TypeError(f"{config_key} must be {_type_label(expected)}{suffix}")
    return value


def _type_label(expected: type | tuple[type, ...]) -> str:
    if expected is str:
        return "a string"
    if expected is bool:
        return "a boolean"
    return "a number"
