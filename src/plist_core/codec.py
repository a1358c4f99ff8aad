"""Byte serialization of values through the standard ``plistlib`` codec."""

from __future__ import annotations

import logging
import plistlib
from datetime import datetime, timezone
from enum import Enum
from xml.parsers.expat import ExpatError

from .errors import CodecFailure
from .model import Value
from .native import from_native, to_native

log = logging.getLogger(__name__)


class Format(Enum):
    BINARY = plistlib.FMT_BINARY
    XML = plistlib.FMT_XML


DEFAULT_FORMAT = Format.BINARY


def encode(value: Value, fmt: Format = DEFAULT_FORMAT, *, sort_keys: bool = True) -> bytes:
    """Serialize *value* to bytes in *fmt*.

    Raises ``CodecFailure`` if the graph cannot be written without loss:
    XML refuses control characters, carriage returns (plistlib rewrites them
    to newlines) and sub-second dates (XML dates carry whole seconds only).
    """
    try:
        native = _prepare(to_native(value), fmt)
        data = plistlib.dumps(native, fmt=fmt.value, sort_keys=sort_keys)
    except (TypeError, ValueError, OverflowError) as exc:
        log.debug("plistlib rejected %s export: %s", fmt.name, exc)
        raise CodecFailure("encode", str(exc)) from exc
    log.debug("encoded %s plist, %d bytes", fmt.name, len(data))
    return data


def _prepare(node: object, fmt: Format) -> object:
    """Convert aware dates to naive UTC and check the XML limits."""
    if isinstance(node, list):
        return [_prepare(item, fmt) for item in node]
    if isinstance(node, dict):
        return {_prepare(k, fmt): _prepare(v, fmt) for k, v in node.items()}
    if isinstance(node, str):
        if fmt is Format.XML and "\r" in node:
            raise ValueError(f"XML cannot keep carriage returns in {node!r}")
        return node
    if isinstance(node, datetime):
        if node.tzinfo is not None and node.utcoffset() is not None:
            node = node.astimezone(timezone.utc)
        node = node.replace(tzinfo=None)
        if fmt is Format.XML and node.microsecond:
            raise ValueError(f"XML dates have whole-second resolution, got {node.isoformat()}")
        return node
    return node


def decode(data: bytes, fmt: Format | None = None) -> Value:
    """Parse serialized plist *data* into a Value.

    *fmt* of ``None`` detects the format from the header.  Malformed bytes
    raise ``CodecFailure``; a well-formed plist holding something that is not
    a property list type (a keyed-archive UID, a null, a self-referencing
    array) raises ``InvalidValue``.
    """
    try:
        native = plistlib.loads(data, fmt=fmt.value if fmt is not None else None)
    except (
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        TypeError,
        AttributeError,
        RecursionError,
    ) as exc:
        log.debug("plistlib could not parse %d bytes: %s", len(data), exc)
        raise CodecFailure("decode", str(exc) or type(exc).__name__) from exc
    log.debug("decoded %d bytes", len(data))
    return from_native(native)
