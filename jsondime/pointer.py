# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON Pointer (RFC 6901) helpers.

Escaping and parsing are left to the jsonpointer package, this module
only adds the segment joining used by the differ and the container
resolution used by the patch applier.
"""

import re

from jsonpointer import JsonPointer, JsonPointerException, escape

__all__ = [
    "PointerResolutionError",
    "join_pointer", "split_pointer", "make_pointer",
    "resolve_parent", "resolve_value", "parse_index",
    ]


class PointerResolutionError(LookupError):
    "A JSON Pointer does not resolve against the document."
    pass


# Array index per RFC 6901: "0" or digits without leading zeros
_r_index = re.compile(r"^(0|[1-9][0-9]*)$")


def join_pointer(pointer, segment):
    "Append a single object key or array index to a pointer string."
    return pointer + "/" + escape(str(segment))


def make_pointer(segments):
    "Join a list of unescaped segments into a pointer string."
    return JsonPointer.from_parts(segments).path


def split_pointer(pointer):
    "Split a pointer string into its list of unescaped segments."
    try:
        return JsonPointer(pointer).parts
    except JsonPointerException as e:
        raise PointerResolutionError("Invalid JSON pointer {!r}: {}".format(pointer, e))


def parse_index(segment, length, allow_end=False):
    """Convert a pointer segment into an index into an array of given length.

    With allow_end, the index may equal length and "-" refers to the end of
    the array, as is the case for insertions.
    """
    if segment == "-" and allow_end:
        return length
    if not _r_index.match(segment):
        raise PointerResolutionError(
            "Array index must be a non-negative integer, not {!r}.".format(segment))
    index = int(segment)
    limit = length + 1 if allow_end else length
    if index >= limit:
        raise PointerResolutionError(
            "Array index {} out of range for array of length {}.".format(index, length))
    return index


def resolve_value(doc, segments, pointer=None):
    "Return the value that a list of segments refers to in doc."
    obj = doc
    for depth, segment in enumerate(segments):
        if isinstance(obj, dict):
            if segment not in obj:
                raise PointerResolutionError("Key {!r} not found at {!r}.".format(
                    segment, make_pointer(segments[:depth])))
            obj = obj[segment]
        elif isinstance(obj, list):
            obj = obj[parse_index(segment, len(obj))]
        else:
            raise PointerResolutionError(
                "Pointer {!r} traverses a {} value at {!r}.".format(
                    pointer if pointer is not None else make_pointer(segments),
                    type(obj).__name__, make_pointer(segments[:depth])))
    return obj


def resolve_parent(doc, pointer):
    """Resolve all but the last segment of pointer.

    Returns (container, last_segment). The pointer must not be empty.
    """
    segments = split_pointer(pointer)
    if not segments:
        raise PointerResolutionError("The root pointer has no parent.")
    parent = resolve_value(doc, segments[:-1], pointer)
    if not isinstance(parent, (dict, list)):
        raise PointerResolutionError(
            "Parent of {!r} is a {} value, not a container.".format(
                pointer, type(parent).__name__))
    return parent, segments[-1]
