"""Human-readable formatting of values."""

from __future__ import annotations

from .model import Value, VList, VMap, VText, _EmptyType


def format_inline(value: Value | _EmptyType) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, _EmptyType):
        return "Empty"
    if isinstance(value, VText):
        return f'"{value.value}"'
    return str(value)


def format_inspect(value: Value | _EmptyType, indent: int = 0) -> str:
    """Pretty-print a value as an indented tree."""
    pad = "  " * indent
    if isinstance(value, VList):
        if not value.items:
            return "VList []"
        lines = ["VList ["]
        for idx, item in enumerate(value.items):
            lines.append(f"{pad}  {idx}: {format_inspect(item, indent + 1)}")
        lines.append(f"{pad}]")
        return "\n".join(lines)

    if isinstance(value, VMap):
        if not value.entries:
            return "VMap {}"
        width = max(len(k) for k in value.entries)
        lines = ["VMap {"]
        for key, item in value.entries.items():
            lines.append(f"{pad}  {key:<{width}}: {format_inspect(item, indent + 1)}")
        lines.append(f"{pad}}}")
        return "\n".join(lines)

    return format_inline(value)
