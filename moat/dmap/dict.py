"""
Layering of configuration mappings.
"""

from __future__ import annotations

from collections.abc import Mapping

from . import NotGiven
from .shape import ScalarMap

__all__ = ["combine_dict"]


def combine_dict(*layers) -> ScalarMap:
    """
    Merge mappings into a new `ScalarMap`. Later layers win.

    Nested mappings are merged recursively into new ScalarMaps; the
    inputs are not modified. Other values, including lists, replace
    what was there before. `NotGiven` removes a key. `None` layers are
    skipped.
    """
    res = ScalarMap()
    for layer in layers:
        if layer is None:
            continue
        if not isinstance(layer, Mapping):
            raise TypeError(f"Not a mapping: {layer!r}")
        for k, v in layer.items():
            if v is NotGiven:
                res.pop(k, None)
            elif isinstance(v, Mapping):
                prev = res.get(k)
                res[k] = combine_dict(prev if isinstance(prev, Mapping) else None, v)
            else:
                res[k] = v
    return res
