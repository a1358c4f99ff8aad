"""Conversion between values and plain Python object graphs."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping
from datetime import datetime
from pathlib import PurePath
from urllib.parse import ParseResult, SplitResult

from .errors import InvalidValue
from .model import (
    PlistValue,
    Value,
    VBinary,
    VDate,
    VList,
    VMap,
    VNumber,
    VText,
)

log = logging.getLogger(__name__)

KeyPath = tuple[str | int, ...]


def from_native(obj: object) -> Value:
    """Build a Value from a native object graph.

    Accepted node types, in order of precedence:

    - ``datetime`` → VDate
    - ``bytes`` / ``bytearray`` / ``memoryview`` → VBinary
    - ``bool`` / integral / real numbers → VNumber
    - ``str`` → VText
    - URL tuples and ``PurePath`` → VText holding the string form
      (one-way: these never convert back to a locator)
    - ``list`` → VList
    - mappings with ``str`` keys → VMap

    Values already of type ``PlistValue`` are accepted too (containers are
    copied).  Any other node, anywhere in the graph, raises ``InvalidValue``
    for the whole call, and so does a container that contains itself.
    """
    return _import(obj, (), set())


def _import(obj: object, path: KeyPath, active: set[int]) -> Value:
    if isinstance(obj, PlistValue):
        return _copy(obj)

    if isinstance(obj, datetime):
        return VDate(obj)

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return VBinary(obj)

    if isinstance(obj, (bool, numbers.Integral, numbers.Real)):
        return _number(obj, path)

    if isinstance(obj, str):
        return VText(obj)

    # Locators are not plist types but turn up inside otherwise valid graphs.
    if isinstance(obj, (ParseResult, SplitResult)):
        return VText(obj.geturl())
    if isinstance(obj, PurePath):
        return VText(str(obj))

    if isinstance(obj, (list, Mapping)):
        if id(obj) in active:
            raise _reject(obj, path, "cyclic reference")
        active.add(id(obj))
        container = _import_container(obj, path, active)
        active.discard(id(obj))
        return container

    raise _reject(obj, path)


def _import_container(obj: list | Mapping, path: KeyPath, active: set[int]) -> Value:
    if isinstance(obj, list):
        return VList._adopt([_import(item, path + (idx,), active) for idx, item in enumerate(obj)])

    entries: dict[str, Value] = {}
    for key, item in obj.items():
        if not isinstance(key, str):
            raise _reject(key, path, "map keys must be str")
        entries[key] = _import(item, path + (key,), active)
    return VMap._adopt(entries)


def _number(obj: object, path: KeyPath) -> VNumber:
    try:
        return VNumber(obj)
    except InvalidValue as exc:
        raise _reject(obj, path, exc.reason) from None


def _copy(value: PlistValue) -> Value:
    if isinstance(value, VList):
        return VList._adopt([_copy(item) for item in value.items])
    if isinstance(value, VMap):
        return VMap._adopt({k: _copy(v) for k, v in value.entries.items()})
    # Leaves are frozen and can be shared.
    return value


def _reject(node: object, path: KeyPath, reason: str | None = None) -> InvalidValue:
    log.debug("rejecting %r at %r: %s", node, path, reason or "unsupported type")
    return InvalidValue(node, path, reason)


def to_native(value: Value) -> object:
    """Inverse of :func:`from_native`; never fails."""
    if isinstance(value, VList):
        return [to_native(item) for item in value.items]
    if isinstance(value, VMap):
        return {k: to_native(v) for k, v in value.entries.items()}
    if isinstance(value, (VDate, VBinary, VNumber, VText)):
        return value.value
    raise TypeError(f"not a property list value: {value!r}")
