"""Subscript reads for plist_core."""

from __future__ import annotations

from .model import Empty, PlistValue, Value, VList, VMap, _EmptyType


def check_key(key: object) -> None:
    """Reject keys that are neither an index (``int``) nor a map key (``str``)."""
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise TypeError(f"plist subscript must be int or str, not {type(key).__name__}")


def is_index(key: int | str, value: VList) -> bool:
    return isinstance(key, int) and 0 <= key < len(value.items)


def apply_getter(value: PlistValue, key: int | str) -> Value | _EmptyType:
    """Resolve ``value[key]``.

    - VList: in-range, non-negative integer index
    - VMap: str key
    - anything else (other variants, wrong key kind, out of range,
      missing key): Empty
    """
    check_key(key)

    if isinstance(value, VList):
        if is_index(key, value):
            return value.items[key]
        return Empty

    if isinstance(value, VMap):
        if isinstance(key, str):
            return value.entries.get(key, Empty)
        return Empty

    return Empty
