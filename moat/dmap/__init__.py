"""
Path-based access to trees of decoded data.

A `DMap` wraps whatever a JSON, YAML or msgpack decoder returns (nested
mappings, lists and scalars) and lets you read and write it by a path of
mixed keys and indices, without checking every level yourself.
"""

# pylint: disable=cyclic-import,wrong-import-position
from __future__ import annotations

import logging as _logging

_log = _logging.getLogger(__name__)

NotGiven = Ellipsis

# Mapping of exported names to their source modules
_imports = {
    # node
    "DMap": "node",
    "init": "node",
    "parse_bytes": "node",
    "parse_stream": "node",
    # shape
    "Shape": "shape",
    "ScalarMap": "shape",
    "shape_of": "shape",
    "to_scalar_map": "shape",
    # path
    "P": "path",
    "Path": "path",
    "SegKind": "path",
    "path_eval": "path",
    "seg_kind": "path",
    # exc
    "DMapError": "exc",
    "EmptyData": "exc",
    "ExpectedIndex": "exc",
    "ExpectedKey": "exc",
    "IndexOutOfRange": "exc",
    "KeyNotFound": "exc",
    "NotMapScalarKeyed": "exc",
    "NotMapStringKeyed": "exc",
    "NotSequence": "exc",
    "UnexpectedType": "exc",
    # codec
    "Codec": "codec",
    "NoCodecError": "codec",
    "get_codec": "codec",
    # dict
    "combine_dict": "dict",
    # yaml
    "yload": "yaml",
    "yprint": "yaml",
}

__all__ = list(_imports.keys())


def __getattr__(attr: str):
    try:
        mod = _imports[attr]
    except KeyError:
        raise AttributeError(attr) from None
    value = getattr(__import__(mod, globals(), None, True, 1), attr)
    globals()[attr] = value
    return value


def __dir__():
    return __all__
