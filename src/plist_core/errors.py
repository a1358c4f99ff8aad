"""Exceptions raised by plist_core."""

from __future__ import annotations


class PlistCoreError(Exception):
    """Base class for every error raised by plist_core."""


class InvalidValue(PlistCoreError):
    """A native node (or map key) is not a property list type.

    ``path`` is the chain of keys and indices leading from the root of the
    imported graph to ``node``; it is empty for the root itself.
    """

    def __init__(self, node: object, path: tuple[str | int, ...] = (), reason: str | None = None) -> None:
        self.node = node
        self.path = path
        self.reason = reason
        where = "/".join(str(p) for p in path) or "<root>"
        message = f"value {node!r} at {where} is not a valid property list type"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CodecFailure(PlistCoreError):
    """The plist codec rejected the native graph or the input bytes."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")
