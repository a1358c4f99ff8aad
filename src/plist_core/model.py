"""Data model for plist_core: the six property list variants."""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator, Union

from .errors import InvalidValue

# Range of integers both plist formats can carry.
INT_MIN = -(1 << 63)
INT_MAX = (1 << 64) - 1

_SIGNED_MAX = (1 << 63) - 1


# ---------------------------------------------------------------------------
# Empty — singleton for absent results
# ---------------------------------------------------------------------------

class _EmptyType:
    """Sentinel returned when a subscript read finds nothing."""

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False


Empty = _EmptyType()


# ---------------------------------------------------------------------------
# PlistValue — behaviour shared by all variants
# ---------------------------------------------------------------------------

class PlistValue:
    """Common surface of the six variants.

    Payload accessors return ``None`` for the wrong variant; subscript reads
    return ``Empty``.  Neither ever raises.
    """

    __slots__ = ()

    # -- Predicates -----------------------------------------------------

    @property
    def is_date(self) -> bool:
        return isinstance(self, VDate)

    @property
    def is_binary(self) -> bool:
        return isinstance(self, VBinary)

    @property
    def is_number(self) -> bool:
        return isinstance(self, VNumber)

    @property
    def is_text(self) -> bool:
        return isinstance(self, VText)

    @property
    def is_list(self) -> bool:
        return isinstance(self, VList)

    @property
    def is_map(self) -> bool:
        return isinstance(self, VMap)

    # -- Payload accessors ----------------------------------------------

    @property
    def date(self) -> datetime | None:
        return self.value if isinstance(self, VDate) else None

    @property
    def binary(self) -> bytes | None:
        return self.value if isinstance(self, VBinary) else None

    @property
    def number(self) -> bool | int | float | None:
        return self.value if isinstance(self, VNumber) else None

    @property
    def text(self) -> str | None:
        return self.value if isinstance(self, VText) else None

    # -- Number readings ------------------------------------------------

    @property
    def as_bool(self) -> bool | None:
        if not isinstance(self, VNumber):
            return None
        return bool(self.value)

    @property
    def as_int(self) -> int | None:
        """Integer reading of a number, truncating floats.

        NaN reads as 0 and infinities saturate to the signed 64-bit bounds.
        """
        if not isinstance(self, VNumber):
            return None
        v = self.value
        if isinstance(v, float):
            if math.isnan(v):
                return 0
            if math.isinf(v):
                return _SIGNED_MAX if v > 0 else INT_MIN
        return int(v)

    @property
    def as_float(self) -> float | None:
        if not isinstance(self, VNumber):
            return None
        return float(self.value)

    # -- Containers -----------------------------------------------------

    @property
    def count(self) -> int:
        """Number of elements of a list or map, 0 for any other variant."""
        if isinstance(self, VList):
            return len(self.items)
        if isinstance(self, VMap):
            return len(self.entries)
        return 0

    @property
    def is_empty(self) -> bool:
        """True for an empty list or map only."""
        return isinstance(self, (VList, VMap)) and self.count == 0

    def pairs(self) -> PlistItems:
        """Restartable ``(key, value)`` view; list keys are ``"0"``, ``"1"``, …"""
        return PlistItems(self)

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        return iter(self.pairs())

    # -- Subscripts -----------------------------------------------------

    def get(self, key: int | str) -> Value | _EmptyType:
        """Return the child at *key*, or ``Empty``.

        The result is a live reference to the owned child, not a snapshot:
        writes through it (or later writes through this value) are visible
        both ways.  Use ``.copy()`` on a container result to keep a snapshot.
        """
        from .getter import apply_getter
        return apply_getter(self, key)

    def set(self, key: int | str, replacement: object) -> None:
        """Replace, insert or (for an ``Empty``/``None`` replacement) remove."""
        from .setter import apply_setter
        apply_setter(self, key, replacement)

    def __getitem__(self, key: int | str) -> Value | _EmptyType:
        return self.get(key)

    def __setitem__(self, key: int | str, replacement: object) -> None:
        self.set(key, replacement)


# ---------------------------------------------------------------------------
# Leaf variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=False)
class VDate(PlistValue):
    """An instant in time.

    The datetime is kept exactly as given.  Naive datetimes are read as UTC,
    so equality compares instants: an aware datetime equals its naive UTC
    counterpart.
    """

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise InvalidValue(self.value, reason="expected a datetime")

    def instant(self) -> datetime:
        """The value as a naive UTC datetime."""
        v = self.value
        if v.tzinfo is not None and v.utcoffset() is not None:
            v = v.astimezone(timezone.utc)
        return v.replace(tzinfo=None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VDate):
            return NotImplemented
        return self.instant() == other.instant()

    def __hash__(self) -> int:
        return hash(self.instant())

    def __str__(self) -> str:
        return self.instant().isoformat() + "Z"


@dataclass(frozen=True, slots=True)
class VBinary(PlistValue):
    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        elif not isinstance(self.value, bytes):
            raise InvalidValue(self.value, reason="expected bytes")

    def __str__(self) -> str:
        hexed = self.value.hex()
        return "<" + " ".join(hexed[i:i + 8] for i in range(0, len(hexed), 8)) + ">"


@dataclass(frozen=True, slots=True, eq=False)
class VNumber(PlistValue):
    """A boolean, integer or real number.

    The three representations stay distinct: ``VNumber(1)``, ``VNumber(1.0)``
    and ``VNumber(True)`` are pairwise unequal.  NaN equals NaN.
    """

    value: bool | int | float

    def __post_init__(self) -> None:
        v = self.value
        if isinstance(v, bool):
            return
        if isinstance(v, numbers.Integral):
            v = int(v)
            if not INT_MIN <= v <= INT_MAX:
                raise InvalidValue(v, reason="integer out of 64-bit range")
        elif isinstance(v, numbers.Real):
            v = float(v)
            if v != self.value and v == v:
                raise InvalidValue(self.value, reason="not exactly representable as a float")
        else:
            raise InvalidValue(v, reason="expected a number")
        object.__setattr__(self, "value", v)

    def _key(self) -> tuple[type, object]:
        v = self.value
        if isinstance(v, float) and math.isnan(v):
            return float, "nan"
        return type(v), v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VNumber):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, bool):
            return str(v).lower()
        if isinstance(v, int):
            return str(v)
        return repr(v)


@dataclass(frozen=True, slots=True)
class VText(PlistValue):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidValue(self.value, reason="expected a str")

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Container variants
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VList(PlistValue):
    """Ordered list of values.

    Items may be given as values or native objects; either way the list
    holds its own copies.
    """

    items: list[Value] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.items, (list, tuple)):
            raise InvalidValue(self.items, reason="expected a list")
        from .native import from_native
        self.items = from_native(list(self.items)).items

    @classmethod
    def _adopt(cls, items: list[Value]) -> VList:
        # Takes ownership of already-imported items without copying them again.
        obj = cls.__new__(cls)
        obj.items = items
        return obj

    def copy(self) -> VList:
        return VList(self.items)

    def __str__(self) -> str:
        from .render import format_inline
        return "[" + ", ".join(format_inline(v) for v in self.items) + "]"


@dataclass(slots=True)
class VMap(PlistValue):
    """Text-keyed map of values.  Entry order carries no meaning."""

    entries: dict[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, Mapping):
            raise InvalidValue(self.entries, reason="expected a dict")
        from .native import from_native
        self.entries = from_native(self.entries).entries

    @classmethod
    def _adopt(cls, entries: dict[str, Value]) -> VMap:
        obj = cls.__new__(cls)
        obj.entries = entries
        return obj

    def copy(self) -> VMap:
        return VMap(self.entries)

    def __str__(self) -> str:
        from .render import format_inline
        return "{" + ", ".join(f"{k}: {format_inline(v)}" for k, v in self.entries.items()) + "}"


Value = Union[VDate, VBinary, VNumber, VText, VList, VMap]


# ---------------------------------------------------------------------------
# PlistItems — iteration view
# ---------------------------------------------------------------------------

class PlistItems:
    """Read-only ``(key, value)`` view over a list or map.

    Every ``iter()`` starts from the beginning; leaves yield nothing.
    """

    __slots__ = ("_value",)

    def __init__(self, value: PlistValue) -> None:
        self._value = value

    def __len__(self) -> int:
        return self._value.count

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        value = self._value
        if isinstance(value, VList):
            for idx, item in enumerate(value.items):
                yield str(idx), item
        elif isinstance(value, VMap):
            yield from value.entries.items()

    def __repr__(self) -> str:
        return f"PlistItems({list(self)!r})"
