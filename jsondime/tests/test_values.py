# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from decimal import Decimal

import pytest

from jsondime.values import (
    value_type, is_json_value, is_number, is_scalar, values_equal, deep_copy)


def test_value_type():
    assert value_type(None) == "null"
    assert value_type(True) == "boolean"
    assert value_type(0) == "number"
    assert value_type(1.5) == "number"
    assert value_type("") == "string"
    assert value_type([]) == "array"
    assert value_type({}) == "object"
    with pytest.raises(TypeError):
        value_type(set())
    with pytest.raises(TypeError):
        value_type((1, 2))


def test_bool_is_not_a_number():
    assert not is_number(True)
    assert not is_number(False)
    assert is_number(0)
    assert is_scalar(False)
    assert not is_scalar([])


def test_is_json_value():
    assert is_json_value({"a": [1, 2.0, None, True, "x", {"b": []}]})
    assert not is_json_value({1: "a"})
    assert not is_json_value([1, {"a": object()}])
    assert not is_json_value({"a": (1,)})


def test_values_equal_scalars():
    assert values_equal(None, None)
    assert values_equal(1, 1.0)
    assert values_equal("a", "a")
    assert not values_equal(True, 1)
    assert not values_equal(0, False)
    assert not values_equal(None, False)
    assert not values_equal("1", 1)
    assert not values_equal(None, [])


def test_values_equal_containers():
    assert values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert values_equal([1, [2, {"c": 3}]], [1.0, [2, {"c": 3.0}]])
    assert not values_equal([1, 2], [2, 1])
    assert not values_equal({"a": 1}, {"a": 1, "b": 2})
    assert not values_equal({"a": 1}, {"b": 1})
    assert not values_equal({"a": True}, {"a": 1})
    assert not values_equal([], {})
    assert not values_equal([1], [1, 1])


def test_deep_copy_is_independent():
    a = {"a": [1, {"b": 2}]}
    c = deep_copy(a)
    assert values_equal(a, c)
    c["a"][1]["b"] = 3
    assert a["a"][1]["b"] == 2


def _nested(depth, leaf, container=list):
    v = leaf
    for _ in range(depth):
        v = [v] if container is list else {"k": v}
    return v


def test_decimal_is_not_a_json_number():
    assert not is_number(Decimal("1.5"))
    assert not is_json_value({"a": Decimal("1.5")})
    with pytest.raises(TypeError):
        value_type(Decimal("1.5"))


def test_deep_values():
    depth = 5000
    a = _nested(depth, 1)
    assert values_equal(a, _nested(depth, 1))
    assert values_equal(a, _nested(depth, 1.0))
    assert not values_equal(a, _nested(depth, 2))
    assert not values_equal(a, _nested(depth, True))
    assert is_json_value(a)

    o = _nested(depth, "x", container=dict)
    c = deep_copy(o)
    assert values_equal(o, c)
    inner = c
    for _ in range(depth - 1):
        inner = inner["k"]
    inner["k"] = "y"
    assert not values_equal(o, c)
