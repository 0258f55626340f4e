"""
This module reads the configuration of the moat-dmap tool.

Configuration is layered: the packaged ``_cfg.yaml`` first, then any
files passed explicitly, then the file named by ``$MOAT_DMAP_CFG``.
Later layers override earlier ones.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path as FSPath

from .dict import combine_dict
from .node import DMap
from .shape import ScalarMap
from .yaml import yload

__all__ = ["CFG_ENV", "default_cfg", "read_cfg", "load_cfg"]

CFG_ENV = "MOAT_DMAP_CFG"

logger = logging.getLogger(__name__)


def read_cfg(path) -> ScalarMap:
    """
    Read a YAML config file.

    An empty file is an empty config. Anything else that's not a mapping
    is an error.
    """
    with open(path, "r") as cf:
        res = yload(cf)
    if res is None:
        return ScalarMap()
    if not isinstance(res, Mapping):
        raise ValueError(f"{path}: config must be a mapping, not {type(res).__name__}")
    logger.debug("Config from %s", path)
    return res


def default_cfg() -> ScalarMap:
    "The packaged defaults."
    return read_cfg(FSPath(__file__).parent / "_cfg.yaml")


def load_cfg(*paths, env: bool = True) -> DMap:
    """
    Build the effective configuration.

    Returns a DMap, so that values are accessed by path.
    """
    layers = [default_cfg()]
    layers.extend(read_cfg(p) for p in paths)
    if env and (fn := os.environ.get(CFG_ENV)):
        layers.append(read_cfg(fn))
    return DMap(combine_dict(*layers))
