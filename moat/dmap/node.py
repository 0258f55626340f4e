"""
The DMap accessor.

A `DMap` wraps one decoded value and resolves paths of mixed keys and
indices against it::

    >>> d = parse_bytes(b'{"root": {"contents": ["c1", "c2"]}}')
    >>> d.get("root", "contents", 1).value
    'c2'
    >>> d.exists("root", "title")
    False

Containers returned by the ``get_*`` methods are the live objects inside
the tree: modifying them modifies the tree. Don't hold on to them past
the lifetime of the data you parsed.
"""

from __future__ import annotations

import logging

from .codec import get_codec
from .exc import (
    DMapError,
    EmptyData,
    ExpectedIndex,
    ExpectedKey,
    IndexOutOfRange,
    KeyNotFound,
    NotMapScalarKeyed,
    NotMapStringKeyed,
    NotSequence,
    UnexpectedType,
)
from .path import SegKind, seg_kind
from .shape import Shape, shape_of

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, BinaryIO, TextIO

    from .codec import Codec

__all__ = ["DMap", "init", "parse_bytes", "parse_stream"]

logger = logging.getLogger(__name__)


class DMap:
    """
    Holds some decoded data and provides path-based access to it.

    The wrapper itself is never modified. `get` returns a new DMap for the
    sub-value; the ``set_*`` methods modify the containers inside the data.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any = None):
        self._data = data

    @property
    def value(self) -> Any:
        "The wrapped data. Not a copy."
        return self._data

    def has_value(self) -> bool:
        "Check whether there's any data."
        return self._data is not None

    def __repr__(self):
        return f"{self.__class__.__name__}({self._data!r})"

    def get(self, *path) -> DMap:
        """
        Return the data at a given path, wrapped in a new DMap.

        Raises a `DMapError` subclass if the path can't be resolved.
        """
        if path and not self.has_value():
            raise EmptyData()

        cur = self._data
        for i, p in enumerate(path):
            shape = shape_of(cur)
            if shape is Shape.MAP_SI:
                if seg_kind(p) is not SegKind.KEY:
                    raise ExpectedKey(p, path[: i + 1])
                try:
                    cur = cur[p]
                except KeyError:
                    raise KeyNotFound(p, path[: i + 1]) from None

            elif shape is Shape.MAP_II:
                try:
                    cur = cur[p]
                except (KeyError, TypeError):
                    # TypeError: unhashable segment, can't be a key
                    raise KeyNotFound(p, path[: i + 1]) from None

            elif shape is Shape.SEQ:
                if seg_kind(p) is not SegKind.INDEX:
                    raise ExpectedIndex(p, path[: i + 1])
                if p < 0 or p >= len(cur):
                    raise IndexOutOfRange(p, path[: i + 1])
                cur = cur[p]

            else:
                raise UnexpectedType(path[: i + 1])

        return DMap(cur)

    def exists(self, *path) -> bool:
        "Check whether there is some data at the given path."
        try:
            self.get(*path)
        except DMapError:
            return False
        return True

    def get_map_si(self, *path) -> dict[str, Any]:
        "Return the string-keyed mapping at the given path."
        data = self.get(*path).value
        if shape_of(data) is not Shape.MAP_SI:
            raise NotMapStringKeyed(path)
        return data

    def get_map_ii(self, *path) -> dict:
        "Return the scalar-keyed mapping at the given path."
        data = self.get(*path).value
        if shape_of(data) is not Shape.MAP_II:
            raise NotMapScalarKeyed(path)
        return data

    def get_seq(self, *path) -> list:
        "Return the list at the given path."
        data = self.get(*path).value
        if shape_of(data) is not Shape.SEQ:
            raise NotSequence(path)
        return data

    def set_map_si(self, data: Any, key: str, *path) -> None:
        """
        Store @data under @key in the string-keyed mapping at @path.

        The mapping must exist; the key need not.
        """
        parent = self.get_map_si(*path)
        if seg_kind(key) is not SegKind.KEY:
            raise ExpectedKey(key, path + (key,))
        parent[key] = data
        logger.debug("Set %r at %r", key, path)

    def set_map_ii(self, data: Any, key: Any, *path) -> None:
        """
        Store @data under @key in the scalar-keyed mapping at @path.

        The mapping must exist; the key need not.
        """
        parent = self.get_map_ii(*path)
        parent[key] = data
        logger.debug("Set %r at %r", key, path)

    def set_seq(self, data: Any, index: int, *path) -> None:
        """
        Replace the item at @index in the list at @path.

        The index must refer to an existing item. Lists are never extended.
        """
        parent = self.get_seq(*path)
        if seg_kind(index) is not SegKind.INDEX:
            raise ExpectedIndex(index, path)
        if index < 0 or index >= len(parent):
            raise IndexOutOfRange(index, path)
        parent[index] = data
        logger.debug("Set :%d at %r", index, path)


def init(data: Any) -> DMap:
    "Wrap existing data."
    return DMap(data)


def parse_bytes(data: bytes | str, codec: str | Codec = "json") -> DMap:
    """
    Decode @data and wrap the result.

    Decoding errors are not caught.
    """
    return DMap(get_codec(codec).decode(data))


def parse_stream(stream: BinaryIO | TextIO, codec: str | Codec = "json") -> DMap:
    """
    Decode the first object from a file-like object and wrap the result.

    Decoding errors are not caught.
    """
    return DMap(get_codec(codec).load(stream))
