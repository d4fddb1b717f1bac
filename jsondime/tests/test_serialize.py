# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import pytest

from jsondime import (
    make_patch, Patch, dumps, loads, to_json_patch, from_json_patch,
    op_add, op_remove, op_replace, op_move, op_copy, op_test,
    MalformedPatchOperation)
from jsondime.patch_format import Missing


def test_empty_patch_text():
    assert dumps(Patch()) == "[]"
    assert to_json_patch(Patch()) == []
    assert loads("[]") == Patch()
    assert str(Patch()) == "[]"


def test_roundtrip_patches():
    patches = [
        Patch(),
        Patch([op_add("/foo", "bar")]),
        Patch([op_remove("/foo"), op_add("/bar", "baz")]),
        Patch([op_replace("", None), op_test("/a", [1, {"b": False}])]),
        Patch([op_move("/a", "/b"), op_copy("/b", "/c~1d")]),
        ]
    for p in patches:
        assert loads(dumps(p)) == p
        assert Patch.from_string(p.to_string()) == p
        assert from_json_patch(to_json_patch(p)) == p


def test_to_json_patch_members():
    p = Patch([
        op_add("/a", 1),
        op_remove("/b"),
        op_replace("/c", None),
        op_move("/d", "/e"),
        op_copy("/f", "/g"),
        op_test("/h", "x"),
        ])
    assert to_json_patch(p) == [
        {"op": "add", "path": "/a", "value": 1},
        {"op": "remove", "path": "/b"},
        {"op": "replace", "path": "/c", "value": None},
        {"op": "move", "path": "/e", "from": "/d"},
        {"op": "copy", "path": "/g", "from": "/f"},
        {"op": "test", "path": "/h", "value": "x"},
        ]


def test_dumps_is_json():
    p = Patch([op_add("/baz", "qux")])
    assert json.loads(dumps(p)) == [{"op": "add", "path": "/baz", "value": "qux"}]
    assert dumps(p, indent=2).startswith("[\n")


def test_loads_ignores_extra_members():
    p = loads('[{"op": "remove", "path": "/a", "value": 1, "comment": "x"}]')
    assert p[0] == op_remove("/a")
    assert p[0].value is Missing
    p = loads('[{"op": "add", "path": "/a", "value": null, "from": "/b"}]')
    assert p[0] == op_add("/a", None)
    assert p[0].from_path is Missing


def test_loads_errors():
    bad = [
        '{',
        '{"op": "add", "path": "/a", "value": 1}',
        '[1]',
        '[{"path": "/a"}]',
        '[{"op": "frobnicate", "path": "/a"}]',
        '[{"op": "add", "value": 1}]',
        '[{"op": "add", "path": "/a"}]',
        '[{"op": "add", "path": 1, "value": 1}]',
        '[{"op": "add", "path": "a", "value": 1}]',
        '[{"op": "move", "path": "/a"}]',
        '[{"op": "copy", "path": "/a", "from": 3}]',
        ]
    for text in bad:
        with pytest.raises(MalformedPatchOperation):
            loads(text)
    # Also a ValueError
    with pytest.raises(ValueError):
        loads('[{"op": "add"}]')


def test_patch_equality_uses_json_values():
    assert Patch([op_replace("/a", 1)]) == Patch([op_replace("/a", 1.0)])
    assert Patch([op_replace("/a", 1)]) != Patch([op_replace("/a", True)])
    assert Patch([op_add("/a", 1)]) != Patch([op_replace("/a", 1)])


def test_serialized_patch_matches_schema(base_doc, remote_doc, patch_validator):
    for a, b in [(base_doc, remote_doc), (remote_doc, base_doc), ({}, base_doc), (1, [])]:
        p = make_patch(a, b)
        patch_validator.validate(to_json_patch(p))
    patch_validator.validate(to_json_patch(Patch([
        op_move("/a~1b", "/c"), op_copy("", "/d"), op_test("/e/0", None)])))


def test_schema_rejects_invalid_entries(patch_validator):
    assert not patch_validator.is_valid([{"op": "remove", "path": "/a", "value": 1}])
    assert not patch_validator.is_valid([{"op": "add", "path": "/a"}])
    assert not patch_validator.is_valid([{"op": "add", "path": "a", "value": 1}])
    assert not patch_validator.is_valid([{"op": "add", "path": "/~2", "value": 1}])
