# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from . import log
from .patch_format import Patch, PatchOp, MalformedPatchOperation
from .pointer import (
    PointerResolutionError, parse_index, resolve_parent, resolve_value, split_pointer)
from .values import values_equal, deep_copy


__all__ = ["apply_patch", "PatchTestFailed"]


class PatchTestFailed(AssertionError):
    "A test operation found a different value than expected."
    pass


def _as_patch(patch):
    if isinstance(patch, Patch):
        return patch
    from .serialize import from_json_patch, loads
    if isinstance(patch, (str, bytes)):
        return loads(patch)
    return from_json_patch(patch)


def patch_add(doc, path, value):
    "Insert value at path, returns the new document."
    if path == "":
        return value
    parent, key = resolve_parent(doc, path)
    if isinstance(parent, dict):
        parent[key] = value
    else:
        parent.insert(parse_index(key, len(parent), allow_end=True), value)
    return doc


def patch_remove(doc, path):
    "Remove the value at path, returns (new document, removed value)."
    if path == "":
        raise PointerResolutionError("Cannot remove the whole document.")
    parent, key = resolve_parent(doc, path)
    if isinstance(parent, dict):
        if key not in parent:
            raise PointerResolutionError("Cannot remove missing key at {!r}.".format(path))
        value = parent.pop(key)
    else:
        value = parent.pop(parse_index(key, len(parent)))
    return doc, value


def patch_replace(doc, path, value):
    "Replace the existing value at path, returns the new document."
    if path == "":
        return value
    parent, key = resolve_parent(doc, path)
    if isinstance(parent, dict):
        if key not in parent:
            raise PointerResolutionError("Cannot replace missing key at {!r}.".format(path))
        parent[key] = value
    else:
        parent[parse_index(key, len(parent))] = value
    return doc


def patch_move(doc, from_path, path):
    if from_path == path:
        # Still required to exist
        resolve_value(doc, split_pointer(from_path), from_path)
        return doc
    if path.startswith(from_path + "/") or from_path == "":
        raise PointerResolutionError(
            "Cannot move {!r} into its own child {!r}.".format(from_path, path))
    doc, value = patch_remove(doc, from_path)
    return patch_add(doc, path, value)


def patch_copy(doc, from_path, path):
    value = resolve_value(doc, split_pointer(from_path), from_path)
    return patch_add(doc, path, deep_copy(value))


def patch_test(doc, path, value):
    actual = resolve_value(doc, split_pointer(path), path)
    if not values_equal(actual, value):
        raise PatchTestFailed(
            "Test failed at {!r}: {!r} is not equal to {!r}.".format(path, actual, value))
    return doc


def apply_patch(doc, patch, in_place=False):
    """Produce a patched version of doc by applying patch operations in order.

    patch may be a Patch, a list of RFC 6902 operation dicts, or patch text.
    Unless in_place is set, doc is left untouched and a patched copy is
    returned. With in_place, containers of doc are modified where possible,
    but the return value must still be used since a root-level operation
    replaces the document itself.
    """
    patch = _as_patch(patch)
    if not in_place:
        doc = deep_copy(doc)

    for e in patch:
        op = e.op
        log.debug("Applying %s at %r", op, e.path)
        if op == PatchOp.ADD:
            doc = patch_add(doc, e.path, deep_copy(e.value))
        elif op == PatchOp.REMOVE:
            doc, _ = patch_remove(doc, e.path)
        elif op == PatchOp.REPLACE:
            doc = patch_replace(doc, e.path, deep_copy(e.value))
        elif op == PatchOp.MOVE:
            doc = patch_move(doc, e.from_path, e.path)
        elif op == PatchOp.COPY:
            doc = patch_copy(doc, e.from_path, e.path)
        elif op == PatchOp.TEST:
            doc = patch_test(doc, e.path, e.value)
        else:
            raise MalformedPatchOperation("Invalid op {}.".format(op))

    return doc
