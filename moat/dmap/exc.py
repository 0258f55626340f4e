"""
Errors raised while accessing a DMap.

Every error carries the path at which resolution stopped. Each one also
derives from the builtin exception a plain dict or list access would
raise, so ``except KeyError`` and friends keep working.
"""

from __future__ import annotations

from .path import Path

__all__ = [
    "DMapError",
    "EmptyData",
    "ExpectedKey",
    "KeyNotFound",
    "ExpectedIndex",
    "IndexOutOfRange",
    "UnexpectedType",
    "NotMapStringKeyed",
    "NotMapScalarKeyed",
    "NotSequence",
]


class DMapError(Exception):
    """
    Base class for DMap access errors.

    ``path`` is the part of the requested path that was consumed,
    including the step that failed.
    """

    def __init__(self, path=()):
        super().__init__(Path.build(tuple(path)))

    @property
    def path(self) -> Path:
        "where the error occurred"
        return self.args[0]

    def __str__(self):
        return self._msg()

    def _msg(self):
        return f"error at path {self.path}"

    def __repr__(self):
        return f"‹{self.__class__.__name__} {self._msg()}›"


class _SegError(DMapError):
    def __init__(self, seg, path=()):
        super().__init__(path)
        self.seg = seg


class EmptyData(DMapError, ValueError):
    "The DMap holds no data but a path was given."

    def _msg(self):
        return "empty data"


class ExpectedKey(_SegError, TypeError):
    "A string-keyed mapping was indexed with something else."

    def _msg(self):
        return (
            f"expected key, got {self.seg!r} of type {type(self.seg).__name__} "
            f"at path {self.path}"
        )


class KeyNotFound(_SegError, KeyError):
    "Mapping lookup failed."

    @property
    def key(self):
        "the missing key"
        return self.seg

    def _msg(self):
        return f"key {self.seg!r} not found at path {self.path}"


class ExpectedIndex(_SegError, TypeError):
    "A list was indexed with something other than an integer."

    def _msg(self):
        return (
            f"expected index, got {self.seg!r} of type {type(self.seg).__name__} "
            f"at path {self.path}"
        )


class IndexOutOfRange(_SegError, IndexError):
    "List index is negative or too large."

    @property
    def index(self):
        "the offending index"
        return self.seg

    def _msg(self):
        return f"index {self.seg} out of range at path {self.path}"


class UnexpectedType(DMapError, TypeError):
    "There's path left but the data is not a container."

    def _msg(self):
        return f"data at {self.path} is not a map or list"


class NotMapStringKeyed(DMapError, TypeError):
    "data is not a string-keyed mapping"

    def _msg(self):
        return f"data at {self.path} is not a string-keyed map"


class NotMapScalarKeyed(DMapError, TypeError):
    "data is not a scalar-keyed mapping"

    def _msg(self):
        return f"data at {self.path} is not a scalar-keyed map"


class NotSequence(DMapError, TypeError):
    "data is not a list"

    def _msg(self):
        return f"data at {self.path} is not a list"
