"""
Tests for layering config mappings
"""

# ruff:noqa:D103 pylint: disable=missing-function-docstring
from __future__ import annotations

import pytest

from moat.dmap import NotGiven, ScalarMap, combine_dict


def chk(*layers, res):
    r = combine_dict(*layers)
    assert type(r) is ScalarMap
    assert r == res


def test_later_wins():
    chk(dict(a=1, b=2, c=3), dict(b=4, d=5), res=dict(a=1, b=4, c=3, d=5))
    chk(dict(a=1), dict(a=2), dict(a=3), res=dict(a=3))
    chk(dict(a=[1]), dict(a=[2, 3]), res=dict(a=[2, 3]))
    chk(dict(a=dict(x=1)), dict(a=5), res=dict(a=5))
    chk(dict(a=5), dict(a=dict(x=1)), res=dict(a=dict(x=1)))


def test_nested():
    chk(dict(a=dict(x=1, y=2)), dict(a=dict(y=3, z=4)), res=dict(a=dict(x=1, y=3, z=4)))
    r = combine_dict(dict(a=dict(x=1)), {1: "one"}, dict(a=dict(y=2)))
    assert type(r["a"]) is ScalarMap
    assert r == {"a": {"x": 1, "y": 2}, 1: "one"}


def test_not_given():
    chk(dict(a=1, b=2, c=3), dict(b=NotGiven), res=dict(a=1, c=3))
    chk(dict(b=NotGiven), dict(a=1, b=2), res=dict(a=1, b=2))
    chk(dict(a=dict(x=1, y=2)), dict(a=dict(y=NotGiven)), res=dict(a=dict(x=1)))


def test_inputs_untouched():
    one = dict(a=dict(x=1))
    two = dict(a=dict(y=2))
    r = combine_dict(one, two)
    r["a"]["z"] = 3
    assert one == dict(a=dict(x=1))
    assert two == dict(a=dict(y=2))

    inner = [1, 2]
    assert combine_dict(dict(a=inner))["a"] is inner


def test_misc():
    assert combine_dict() == {}
    assert combine_dict(None, dict(a=1)) == dict(a=1)
    with pytest.raises(TypeError):
        combine_dict(dict(a=1), [1, 2])
