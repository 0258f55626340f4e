"""
Container shapes of decoded data.

Decoded trees contain three kinds of containers: mappings with string
keys (what a JSON decoder returns), mappings with arbitrary hashable keys
(what YAML and msgpack may return), and lists. Everything else is a leaf.

Both kinds of mappings are `dict` instances. Mappings with arbitrary keys
are marked by using `ScalarMap` instead of a plain dict.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["Shape", "ScalarMap", "shape_of", "to_scalar_map"]


class Shape(Enum):
    """The shapes `DMap` distinguishes, in lookup order."""

    MAP_SI = "map[str]"
    MAP_II = "map[any]"
    SEQ = "list"
    LEAF = "leaf"


class ScalarMap(dict):
    """
    A dict whose keys are arbitrary hashable values, not just strings.

    This is a plain `dict` in every other respect.
    """

    def __repr__(self):
        return f"{self.__class__.__name__}({dict.__repr__(self)})"


def shape_of(value) -> Shape:
    """
    Classify a value.

    The order of tests matters: a `ScalarMap` is also a dict.
    """
    if isinstance(value, dict) and not isinstance(value, ScalarMap):
        return Shape.MAP_SI
    if isinstance(value, ScalarMap):
        return Shape.MAP_II
    if isinstance(value, list):
        return Shape.SEQ
    return Shape.LEAF


def to_scalar_map(d):
    """
    Return a hierarchy with all dicts converted to ScalarMaps.

    Lists are copied, tuples and other leaves are returned as-is.
    """
    if isinstance(d, dict):
        return ScalarMap((k, to_scalar_map(v)) for k, v in d.items())
    if isinstance(d, list):
        return [to_scalar_map(v) for v in d]
    return d
