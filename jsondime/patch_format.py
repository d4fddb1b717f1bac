# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .values import values_equal


# Sentinel to allow None as a value
Missing = object()


class MalformedPatchOperation(ValueError):
    "A patch or patch entry does not follow the RFC 6902 format."
    pass


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


# Operations the differ produces
DIFF_OPS = (
    PatchOp.ADD,
    PatchOp.REMOVE,
    PatchOp.REPLACE,
    )

# Operations requiring a "value" member
VALUE_OPS = (
    PatchOp.ADD,
    PatchOp.REPLACE,
    PatchOp.TEST,
    )

# Operations requiring a "from" member
FROM_OPS = (
    PatchOp.MOVE,
    PatchOp.COPY,
    )

ALL_OPS = DIFF_OPS + (PatchOp.MOVE, PatchOp.COPY, PatchOp.TEST)


class PatchOperation(namedtuple("PatchOperation", ["op", "path", "value", "from_path"])):
    """A single immutable patch entry.

    Absent members hold the Missing sentinel, so that None can be used
    as the JSON null value.
    """
    __slots__ = ()

    def __new__(cls, op, path, value=Missing, from_path=Missing):
        return super(PatchOperation, cls).__new__(cls, op, path, value, from_path)

    def __eq__(self, other):
        if not isinstance(other, PatchOperation):
            return NotImplemented
        return (self.op == other.op and
                self.path == other.path and
                self.from_path == other.from_path and
                values_equal(self.value, other.value))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.op, self.path))

    def __repr__(self):
        args = [repr(self.op), repr(self.path)]
        if self.from_path is not Missing:
            args.append("from_path=%r" % (self.from_path,))
        if self.value is not Missing:
            args.append("value=%r" % (self.value,))
        return "PatchOperation(%s)" % ", ".join(args)

    @property
    def has_value(self):
        return self.value is not Missing


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchOperation(PatchOp.ADD, path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchOperation(PatchOp.REMOVE, path)

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchOperation(PatchOp.REPLACE, path, value=value)

def op_move(from_path, path):
    "Create a patch entry to move the value at from_path to path."
    return PatchOperation(PatchOp.MOVE, path, from_path=from_path)

def op_copy(from_path, path):
    "Create a patch entry to copy the value at from_path to path."
    return PatchOperation(PatchOp.COPY, path, from_path=from_path)

def op_test(path, value):
    "Create a patch entry checking that the value at path equals value."
    return PatchOperation(PatchOp.TEST, path, value=value)


class Patch(object):
    """An ordered, immutable sequence of patch operations.

    The empty patch is valid and means "no change".
    """

    def __init__(self, operations=()):
        operations = tuple(operations)
        validate_patch(operations)
        self._operations = operations

    @property
    def operations(self):
        return self._operations

    def __iter__(self):
        return iter(self._operations)

    def __len__(self):
        return len(self._operations)

    def __getitem__(self, index):
        return self._operations[index]

    def __bool__(self):
        return bool(self._operations)

    def __eq__(self, other):
        if isinstance(other, Patch):
            return self._operations == other._operations
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._operations)

    def __repr__(self):
        return "Patch(%r)" % (list(self._operations),)

    def __str__(self):
        return self.to_string()

    def apply(self, doc, in_place=False):
        "Apply this patch to doc, see jsondime.patching.apply_patch."
        from .patching import apply_patch
        return apply_patch(doc, self, in_place=in_place)

    def to_string(self, **kwargs):
        from .serialize import dumps
        return dumps(self, **kwargs)

    @classmethod
    def from_string(cls, text):
        from .serialize import loads
        return loads(text)


class PatchBuilder(object):
    "Accumulates patch entries during a diff run."

    def __init__(self):
        self._patch = []

    def validated(self):
        return self._patch

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, PatchOperation)
        assert entry.op in DIFF_OPS
        assert isinstance(entry.path, str)

        self._patch.append(entry)

    def extend(self, entries):
        for e in entries:
            self.append(e)

    def add(self, path, value):
        self.append(op_add(path, value))

    def remove(self, path):
        self.append(op_remove(path))

    def replace(self, path, value):
        self.append(op_replace(path, value))


def is_valid_patch(patch):
    """Checks whether a patch (sequence of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except MalformedPatchOperation:
        return False
    return True


def validate_patch(patch):
    """Check whether a patch (sequence of patch entries) is well formed.

    Raises a MalformedPatchOperation if not well formed.
    """
    if not isinstance(patch, (list, tuple, Patch)):
        raise MalformedPatchOperation("Patch must be a sequence of operations.")
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch entry.

    Raises a MalformedPatchOperation if not well formed.
    """
    if not isinstance(e, PatchOperation):
        raise MalformedPatchOperation("Patch entry '{}' is not a patch operation.".format(e))

    if e.op not in ALL_OPS:
        raise MalformedPatchOperation("Unknown patch op '{}'.".format(e.op))

    if not isinstance(e.path, str):
        raise MalformedPatchOperation(
            "Patch op '{}' needs a string path, not '{}'.".format(e.op, e.path))
    if e.path and not e.path.startswith("/"):
        raise MalformedPatchOperation(
            "Patch path '{}' must be empty or start with '/'.".format(e.path))

    if e.op in VALUE_OPS:
        if e.value is Missing:
            raise MalformedPatchOperation("Patch op '{}' needs a value.".format(e.op))
    elif e.value is not Missing:
        raise MalformedPatchOperation("Patch op '{}' takes no value.".format(e.op))

    if e.op in FROM_OPS:
        if not isinstance(e.from_path, str):
            raise MalformedPatchOperation(
                "Patch op '{}' needs a string from path, not '{}'.".format(
                    e.op, None if e.from_path is Missing else e.from_path))
    elif e.from_path is not Missing:
        raise MalformedPatchOperation("Patch op '{}' takes no from path.".format(e.op))
