# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, make_patch, DiffConfig, UnsupportedRootComparison
from .patching import apply_patch, PatchTestFailed
from .patch_format import (
    Patch, PatchOperation, MalformedPatchOperation,
    op_add, op_remove, op_replace, op_move, op_copy, op_test)
from .pointer import PointerResolutionError
from .serialize import to_json_patch, from_json_patch, dumps, loads


__all__ = [
    "__version__",
    "diff", "make_patch", "DiffConfig",
    "apply_patch",
    "Patch", "PatchOperation",
    "op_add", "op_remove", "op_replace", "op_move", "op_copy", "op_test",
    "to_json_patch", "from_json_patch", "dumps", "loads",
    "MalformedPatchOperation", "PointerResolutionError",
    "PatchTestFailed", "UnsupportedRootComparison",
    ]
