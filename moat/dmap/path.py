"""
Paths into decoded data, and their text form.

A path is a tuple of segments. Strings are keys into string-keyed maps,
integers are list indices, anything else hashable is a key into a
scalar-keyed map. `seg_kind` tells them apart.

The text form is used for command-line arguments, the ``!P`` YAML tag
and error messages: ``root.contents:1`` is ``("root", "contents", 1)``.
"""

from __future__ import annotations

import ast
import re
from enum import Enum

import simpleeval

__all__ = ["Path", "P", "SegKind", "seg_kind", "path_eval"]

# escaped char, element-introducing colon, dot, plain text
_TokRE = re.compile(r":[:._]|:|\.|[^:.]+")
_unesc = {"::": ":", ":.": ".", ":_": " "}


class SegKind(Enum):
    """The role a path segment can play during traversal."""

    KEY = "key"
    INDEX = "index"
    SCALAR = "scalar"


def seg_kind(seg) -> SegKind:
    """
    Classify a path segment.

    Strings are keys, integers are indices. `bool` is an `int` subclass
    but never counts as an index.
    """
    if isinstance(seg, str):
        return SegKind.KEY
    if isinstance(seg, int) and not isinstance(seg, bool):
        return SegKind.INDEX
    return SegKind.SCALAR


class _PathEval(simpleeval.SimpleEval):
    "Evaluate literals in path elements. Tuples are allowed, names are not."

    def __init__(self):
        super().__init__(functions={})
        self.nodes[ast.Tuple] = self._eval_tuple

    def _eval_tuple(self, node):
        return tuple(self._eval(x) for x in node.elts)


path_eval = _PathEval().eval


def _esc(s: str) -> str:
    return s.replace(":", "::").replace(".", ":.").replace(" ", ":_")


def _typed(s: str):
    # the text after an element-introducing colon
    if s == "t":
        return True
    if s == "f":
        return False
    if s == "n":
        return None
    if s == "e":
        return ""
    if s[0] == "x":
        return int(s[1:], 16)
    if s[0] == "b":
        return int(s[1:], 2)
    if s[0] == "i":
        return path_eval(s[1:])
    if s[0].isalpha():
        raise ValueError(f"unknown element type {s[0]!r}")
    return path_eval(s)


class Path(tuple):
    """
    Paths are dot-separated. The colon is special.

    Within an element:

    \b
        ::  colon
        :.  dot
        :_  space

    Starting a new element:

    \b
        :t   True
        :f   False
        :n   None
        :e   empty string
        :xAB hex integer
        :b01 binary integer
        :iXY the Python literal XY (numbers, strings, tuples).
             The 'i' may be left off if XY doesn't start with a letter.

    Thus "root.contents:1" is ("root", "contents", 1), and a float key
    is written "x:1:.5". A lone colon is the empty path.
    """

    def __new__(cls, *segs):
        return super().__new__(cls, segs)

    def __getnewargs__(self):
        return tuple(self)

    @classmethod
    def build(cls, data) -> Path:
        "Convert an iterable of segments"
        if isinstance(data, Path):
            return data
        return cls(*data)

    def kinds(self) -> tuple[SegKind, ...]:
        "the `SegKind` of each element"
        return tuple(seg_kind(x) for x in self)

    def __str__(self):
        if not self:
            return ":"
        res = []
        for x in self:
            if isinstance(x, str):
                if x == "":
                    res.append(":e")
                else:
                    if res:
                        res.append(".")
                    res.append(_esc(x))
            elif x is True:
                res.append(":t")
            elif x is False:
                res.append(":f")
            elif x is None:
                res.append(":n")
            elif isinstance(x, tuple):
                xs = ",".join(repr(y) for y in x)
                if len(x) == 1:
                    xs += ","
                res.append(":" + _esc(xs or "()"))
            else:
                xs = repr(x)
                if xs[0].isalpha():
                    xs = "i" + xs
                res.append(":" + _esc(xs))
        return "".join(res)

    def __repr__(self):
        return f"P({str(self)!r})"

    @classmethod
    def from_str(cls, text: str) -> Path:
        """
        Parse the dotted text form.

        Raises `SyntaxError` if the text is malformed.
        """
        if text == ":":
            return cls()
        if text == "":
            raise SyntaxError("The empty string is not a path")

        elems = []  # [typed, text] pairs
        cur = None
        dotted = False
        colon = False
        for tok in _TokRE.findall(text):
            if colon:
                colon = False
                if tok in (":", "."):
                    raise SyntaxError(f"{text!r}: colon without element type")
                cur = [True, tok]
                elems.append(cur)
            elif tok == ".":
                if cur is None or dotted:
                    raise SyntaxError(f"{text!r}: empty element")
                cur = None
                dotted = True
            elif tok == ":":
                if dotted:
                    raise SyntaxError(f"{text!r}: typed element after a dot")
                colon = True
            else:
                dotted = False
                if tok in _unesc:
                    tok = _unesc[tok]
                if cur is None:
                    cur = [False, ""]
                    elems.append(cur)
                cur[1] += tok
        if colon or dotted:
            raise SyntaxError(f"{text!r}: incomplete")

        res = []
        for typed, s in elems:
            if not typed:
                res.append(s)
                continue
            try:
                res.append(_typed(s))
            except Exception as exc:
                raise SyntaxError(f"{text!r}: cannot evaluate {s!r}") from exc
        return cls(*res)


def P(path) -> Path:  # noqa:N802
    """
    Build a `Path` from its text form.

    Idempotent, as required by ``click``. Lists and tuples are taken as
    sequences of segments.
    """
    if isinstance(path, Path):
        return path
    if isinstance(path, (tuple, list)):
        return Path(*path)
    return Path.from_str(path)
