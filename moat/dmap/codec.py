"""
Decoders that turn serialized data into DMap-compatible trees.

JSON objects become plain dicts. YAML and msgpack mappings may have
non-string keys, so they always become `ScalarMap` instances.
"""

from __future__ import annotations

import io

import msgpack
import simplejson as json
from ruyaml.error import YAMLError

from .shape import ScalarMap
from .yaml import yload

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any, BinaryIO, TextIO

__all__ = ["Codec", "NoCodecError", "codec_names", "get_codec"]


class NoCodecError(ValueError):
    "No codec found"


class Codec:
    "Base class for decoders."

    name: str = None
    binary: bool = False

    # what decode/load raise on malformed input
    errors: tuple[type[Exception], ...] = (ValueError,)

    def decode(self, data: bytes | str) -> Any:
        "bytes > object"
        raise NotImplementedError

    def load(self, stream: BinaryIO | TextIO) -> Any:
        "file > object"
        raise NotImplementedError

    def __repr__(self):
        return f"<{self.__class__.__name__}>"


class JsonCodec(Codec):
    "JSON, via simplejson"

    name = "json"

    def decode(self, data):  # noqa: D102
        return json.loads(data)

    def load(self, stream):  # noqa: D102
        return json.load(stream)


class YamlCodec(Codec):
    "YAML, via ruyaml. Mappings are ScalarMaps."

    name = "yaml"
    errors = (ValueError, YAMLError)

    def decode(self, data):  # noqa: D102
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("utf-8")
        return yload(data)

    def load(self, stream):  # noqa: D102
        return yload(stream)


class MsgpackCodec(Codec):
    "msgpack. Mappings are ScalarMaps, arrays are lists."

    name = "msgpack"
    binary = True
    errors = (ValueError, msgpack.UnpackException)

    _kw = dict(
        object_pairs_hook=ScalarMap,
        strict_map_key=False,
        raw=False,
        use_list=True,
    )

    def decode(self, data):  # noqa: D102
        return msgpack.unpackb(data, **self._kw)

    def load(self, stream):  # noqa: D102
        if isinstance(stream, io.TextIOBase):
            stream = stream.buffer
        unpacker = msgpack.Unpacker(stream, **self._kw)
        return unpacker.unpack()


_codecs = {c.name: c for c in (JsonCodec, YamlCodec, MsgpackCodec)}
codec_names = tuple(_codecs)


def get_codec(name: str | Codec) -> Codec:
    "Codec loader"
    if isinstance(name, Codec):
        return name
    try:
        return _codecs[name.lower()]()
    except (KeyError, AttributeError):
        raise NoCodecError(name) from None
