# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from .. import log
from ..patch_format import Patch, PatchBuilder, PatchOperation, op_add, op_remove
from ..pointer import join_pointer
from ..values import values_equal, deep_copy, is_json_value

from .config import DiffConfig
from .splittree import split_by_common_runs, iter_split_tree

__all__ = ["diff", "make_patch", "UnsupportedRootComparison"]


class UnsupportedRootComparison(TypeError):
    "A document passed to make_patch is not a JSON value."
    pass


def make_patch(a, b, config=None):
    """Compute the patch transforming document a into document b.

    Applying the result to a, in order, yields a document equal to b.
    Neither a nor b is modified.
    """
    for doc in (a, b):
        if not is_json_value(doc):
            raise UnsupportedRootComparison(
                "Document is not a JSON value tree: %s" % type(doc).__name__)
    return Patch(diff(a, b, config=config))


def diff(a, b, path="", config=None):
    "Compute the list of patch operations transforming a into b at path."

    if config is None:
        config = DiffConfig()

    di = PatchBuilder()
    _run(di, [(a, b, path)], config)
    return di.validated()


def _run(di, pending, config):
    """Process pending work in order, appending operations to di.

    Work items are either (a, b, path) triples still to be diffed or
    finished PatchOperations. Nested values push their own work, so the
    nesting depth of documents is not bounded by the interpreter stack.
    """
    stack = list(reversed(pending))
    while stack:
        item = stack.pop()
        if isinstance(item, PatchOperation):
            di.append(item)
            continue

        a, b, path = item
        if values_equal(a, b):
            continue
        if config.is_atomic(path):
            di.replace(path, deep_copy(b))
        elif isinstance(a, dict) and isinstance(b, dict):
            stack.extend(reversed(_object_work(a, b, path, config)))
        elif isinstance(a, list) and isinstance(b, list):
            stack.extend(reversed(_array_work(a, b, path, config)))
        else:
            # Different types or different scalars
            di.replace(path, deep_copy(b))


def _object_work(a, b, path, config):
    work = []
    for key in config.ordered_keys(a.keys()):
        subpath = join_pointer(path, key)
        if key in b:
            work.append((a[key], b[key], subpath))
        else:
            work.append(op_remove(subpath))

    for key in config.ordered_keys(k for k in b.keys() if k not in a):
        work.append(op_add(join_pointer(path, key), deep_copy(b[key])))
    return work


def _array_work(a, b, path, config):
    # Items matched by plain equality need no further diffing
    diff_matched = config.compare is not values_equal

    work = []
    tree = split_by_common_runs(a, b, compare=config.compare)
    for node in iter_split_tree(tree):
        if node.matched:
            if diff_matched:
                for k in range(node.left.length):
                    j = node.right.start + k
                    work.append((a[node.left.start + k], b[j], join_pointer(path, j)))
            continue
        if node.is_empty:
            continue

        (i0, i1), (j0, j1) = node.a_range, node.b_range
        n = i1 - i0
        m = j1 - j0
        log.debug("Unmatched region at %s: %d items from source, %d from target",
                  path or "/", n, m)

        # Replace positionally paired items
        for k in range(min(n, m)):
            work.append((a[i0 + k], b[j0 + k], join_pointer(path, j0 + k)))

        # Remove from the back so that indices stay valid
        for index in range(j0 + n - 1, j0 + m - 1, -1):
            work.append(op_remove(join_pointer(path, index)))

        for index in range(j0 + n, j0 + m):
            work.append(op_add(join_pointer(path, index), deep_copy(b[index])))
    return work


def diff_objects(a, b, path="", config=None, builder=None):
    """Compute diff of two dicts.

    Keys of a are visited in configured order: keys missing from b are
    removed, shared keys are diffed recursively. Keys only in b are added
    afterwards, in the same order.
    """
    if config is None:
        config = DiffConfig()
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_objects need to be dicts, got %r and %r' % (a, b))

    di = PatchBuilder() if builder is None else builder
    _run(di, _object_work(a, b, path, config), config)
    return di.validated()


def diff_arrays(a, b, path="", config=None, builder=None):
    """Compute diff of two lists.

    Common runs found by the split tree are kept. Within each unmatched
    region, items are paired up positionally and diffed recursively,
    then surplus items of a are removed and surplus items of b added.
    With a custom compare predicate, matched items are diffed as well.

    Indices refer to the array as it looks when the operation is applied,
    which at every point of the walk equals the position in b.
    """
    if config is None:
        config = DiffConfig()
    if not isinstance(a, list) or not isinstance(b, list):
        raise TypeError('Arguments to diff_arrays need to be lists, got %r and %r' % (a, b))

    di = PatchBuilder() if builder is None else builder
    _run(di, _array_work(a, b, path, config), config)
    return di.validated()
