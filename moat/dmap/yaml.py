"""
ruyaml glue.

Mappings load as `ScalarMap`, since YAML keys can be any scalar.
``!P`` tags a `Path` in its dotted form, ``!bin`` a UTF-8 byte string.
"""

from __future__ import annotations

import sys

import ruyaml as yaml

from .path import P, Path
from .shape import ScalarMap

__all__ = ["yload", "yprint"]


class Constructor(yaml.constructor.SafeConstructor):
    "Safe constructor that builds ScalarMaps"

    def __init__(self, *a, **k):
        super().__init__(*a, **k)
        self.yaml_base_dict_type = ScalarMap


class Representer(yaml.representer.SafeRepresenter):
    "Safe representer for decoded data"


def _load_path(loader, node):
    return P(loader.construct_scalar(node))


def _load_bin(loader, node):
    return loader.construct_scalar(node).encode("utf-8")


def _dump_path(dumper, data):
    return dumper.represent_scalar("!P", str(data))


def _dump_bytes(dumper, data):
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return dumper.represent_binary(bytes(data))
    return dumper.represent_scalar("!bin", text)


Constructor.add_constructor("!P", _load_path)
Constructor.add_constructor("!bin", _load_bin)

Representer.add_representer(ScalarMap, Representer.represent_dict)
Representer.add_representer(tuple, Representer.represent_list)
Representer.add_representer(Path, _dump_path)
Representer.add_representer(bytes, _dump_bytes)
Representer.add_representer(bytearray, _dump_bytes)


def yload(stream):
    """
    Load one YAML document from a string or a file.
    """
    y = yaml.YAML(typ="safe")
    y.Constructor = Constructor
    return y.load(stream)


def yprint(data, stream=None):
    """
    Print @data to @stream (default: stdout).

    Plain scalars are printed as Python literals, everything else as a
    YAML document.
    """
    if stream is None:
        stream = sys.stdout
    if isinstance(data, (str, bytes, int, float)) or data is None:
        print(repr(data), file=stream)
        return
    y = yaml.YAML(typ="safe")
    y.Representer = Representer
    y.default_flow_style = False
    y.dump(data, stream=stream)
