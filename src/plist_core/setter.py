"""Subscript writes for plist_core."""

from __future__ import annotations

from .getter import check_key, is_index
from .model import PlistValue, VList, VMap, _EmptyType
from .native import from_native


def _is_absent(replacement: object) -> bool:
    return replacement is None or isinstance(replacement, _EmptyType)


def apply_setter(value: PlistValue, key: int | str, replacement: object) -> PlistValue:
    """Assign or clear ``value[key]`` in place.

    An ``Empty`` (or ``None``) replacement removes the element: list items
    after it shift down by one, a missing map key is left alone.  A present
    replacement is imported with ``from_native`` and stored as a private
    copy.  Out-of-range indices, mismatched key kinds and leaf variants are
    no-ops.

    Returns *value* itself so writes can be chained.
    """
    check_key(key)

    if isinstance(value, VList):
        if not is_index(key, value):
            return value
        if _is_absent(replacement):
            del value.items[key]
        else:
            value.items[key] = from_native(replacement)
        return value

    if isinstance(value, VMap):
        if not isinstance(key, str):
            return value
        if _is_absent(replacement):
            value.entries.pop(key, None)
        else:
            value.entries[key] = from_native(replacement)
        return value

    return value
