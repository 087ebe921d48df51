"""Pipe-delimited canonical form for signed field sets."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

FIELD_DELIMITER = "|"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _fragment(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return FIELD_DELIMITER.join(
            f"{_text(key)}{FIELD_DELIMITER}{_text(item)}" for key, item in value.items()
        )
    if isinstance(value, Collection) and not isinstance(value, (str, bytes, bytearray)):
        # One level only: nested containers keep their str() form.
        return FIELD_DELIMITER.join(_text(item) for item in value)
    return str(value)


def concatenate(*values: Any) -> str:
    """Join ``values`` into the canonical string that gets hashed and signed.

    ``None`` becomes an empty field, mappings contribute ``key|value`` pairs
    in iteration order and collections contribute their elements. The
    delimiter is not escaped, so a value containing ``|`` produces the same
    canonical form as two separate values::

        >>> concatenate("a", "b", None)
        'a|b|'
        >>> concatenate("a|b") == concatenate("a", "b")
        True

    Sets and unordered mappings only give a stable result if their iteration
    order is stable.
    """
    return FIELD_DELIMITER.join(_fragment(value) for value in values)
