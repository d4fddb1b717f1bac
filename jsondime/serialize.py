# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

"""Conversion of patches to and from the RFC 6902 JSON representation."""

import json

from .patch_format import (
    Patch, PatchOperation, Missing, MalformedPatchOperation,
    VALUE_OPS, FROM_OPS, ALL_OPS, validate_patch_entry)

__all__ = ["to_json_patch", "from_json_patch", "dumps", "loads"]


def to_json_patch(patch):
    """Convert a patch into a list of RFC 6902 operation dicts.

    Only "op" and "path" are always present, "value" is included for
    add, replace and test, "from" for move and copy.
    """
    jp = []
    for e in patch:
        d = {"op": e.op, "path": e.path}
        if e.op in FROM_OPS:
            d["from"] = e.from_path
        if e.op in VALUE_OPS:
            d["value"] = e.value
        jp.append(d)
    return jp


def entry_from_dict(d):
    "Build a single PatchOperation from an RFC 6902 operation dict."
    if not isinstance(d, dict):
        raise MalformedPatchOperation("Patch entry must be an object, not {!r}.".format(d))
    if "op" not in d:
        raise MalformedPatchOperation("Patch entry {!r} has no 'op' member.".format(d))
    op = d["op"]
    if op not in ALL_OPS:
        raise MalformedPatchOperation("Unknown patch op {!r}.".format(op))
    if "path" not in d:
        raise MalformedPatchOperation("Patch op {!r} has no 'path' member.".format(op))

    # Members not belonging to the op are ignored
    value = d.get("value", Missing) if op in VALUE_OPS else Missing
    if op in FROM_OPS:
        if "from" not in d:
            raise MalformedPatchOperation("Patch op {!r} has no 'from' member.".format(op))
        from_path = d["from"]
    else:
        from_path = Missing

    e = PatchOperation(op, d["path"], value=value, from_path=from_path)
    validate_patch_entry(e)
    return e


def from_json_patch(data):
    "Convert a list of RFC 6902 operation dicts into a Patch."
    if isinstance(data, Patch):
        return data
    if not isinstance(data, list):
        raise MalformedPatchOperation(
            "Patch document must be an array, not {}.".format(type(data).__name__))
    return Patch(entry_from_dict(d) for d in data)


def dumps(patch, **kwargs):
    "Serialize a patch to JSON text. The empty patch is '[]'."
    return json.dumps(to_json_patch(patch), **kwargs)


def loads(text):
    "Parse JSON patch text into a Patch."
    try:
        data = json.loads(text)
    except ValueError as e:
        raise MalformedPatchOperation("Patch text is not valid JSON: {}".format(e))
    return from_json_patch(data)
