"""plist_core — typed property list values with native and byte conversion."""

from .codec import DEFAULT_FORMAT, Format, decode, encode
from .errors import CodecFailure, InvalidValue, PlistCoreError
from .getter import apply_getter
from .model import (
    Empty,
    PlistItems,
    PlistValue,
    Value,
    VBinary,
    VDate,
    VList,
    VMap,
    VNumber,
    VText,
)
from .native import from_native, to_native
from .render import format_inline, format_inspect
from .setter import apply_setter

__all__ = [
    "DEFAULT_FORMAT",
    "Format",
    "decode",
    "encode",
    "from_native",
    "to_native",
    "apply_getter",
    "apply_setter",
    "format_inline",
    "format_inspect",
    "Empty",
    "PlistItems",
    "PlistValue",
    "Value",
    "VBinary",
    "VDate",
    "VList",
    "VMap",
    "VNumber",
    "VText",
    "PlistCoreError",
    "InvalidValue",
    "CodecFailure",
]
