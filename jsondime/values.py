# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

"""
The JSON value model used throughout jsondime.

Values are plain Python objects: None, bool, int/float, str,
list and dict with str keys. Key order of dicts is irrelevant to
equality, list order is always significant.
"""

__all__ = [
    "value_type", "is_json_value",
    "is_null", "is_boolean", "is_number", "is_string",
    "is_array", "is_object", "is_scalar", "is_container",
    "values_equal", "deep_copy",
    ]


number_types = (int, float)


def is_null(x):
    return x is None


def is_boolean(x):
    return isinstance(x, bool)


def is_number(x):
    "True for numbers. Note that bool is not a number in JSON."
    return isinstance(x, number_types) and not isinstance(x, bool)


def is_string(x):
    return isinstance(x, str)


def is_array(x):
    return isinstance(x, list)


def is_object(x):
    return isinstance(x, dict)


def is_container(x):
    return isinstance(x, (list, dict))


def is_scalar(x):
    return x is None or isinstance(x, (bool, str)) or is_number(x)


def value_type(x):
    """Return the JSON type name of x.

    Raises TypeError for objects outside the JSON value domain.
    """
    if x is None:
        return "null"
    elif isinstance(x, bool):
        return "boolean"
    elif is_number(x):
        return "number"
    elif isinstance(x, str):
        return "string"
    elif isinstance(x, list):
        return "array"
    elif isinstance(x, dict):
        return "object"
    raise TypeError("Not a JSON value type: {}".format(type(x).__name__))


def is_json_value(x):
    "Check that x is a JSON value tree, all the way down."
    stack = [x]
    while stack:
        v = stack.pop()
        if isinstance(v, dict):
            if not all(isinstance(k, str) for k in v):
                return False
            stack.extend(v.values())
        elif isinstance(v, list):
            stack.extend(v)
        elif not is_scalar(v):
            return False
    return True


def _scalars_equal(a, b):
    if isinstance(a, bool) or isinstance(b, bool):
        # Plain == would make True equal to 1
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    elif is_number(a):
        return is_number(b) and a == b
    elif is_number(b):
        return False
    return a == b


def values_equal(a, b):
    """Deep structural equality of two JSON values.

    Both values must have the same JSON type. Numbers compare by numeric
    value, objects ignore key order, arrays compare elementwise in order.
    Nesting depth is only limited by memory.
    """
    stack = [(a, b)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if isinstance(a, dict):
            if not isinstance(b, dict) or len(a) != len(b):
                return False
            for key, avalue in a.items():
                if key not in b:
                    return False
                stack.append((avalue, b[key]))
        elif isinstance(a, list):
            if not isinstance(b, list) or len(a) != len(b):
                return False
            stack.extend(zip(a, b))
        elif isinstance(b, (dict, list)) or not _scalars_equal(a, b):
            return False
    return True


def _empty_like(x):
    return {} if isinstance(x, dict) else []


def deep_copy(x):
    "Return an independent copy of a value tree."
    if not isinstance(x, (dict, list)):
        # Scalars are immutable
        return x
    result = _empty_like(x)
    stack = [(x, result)]
    while stack:
        src, dst = stack.pop()
        items = src.items() if isinstance(src, dict) else enumerate(src)
        for key, value in items:
            if isinstance(value, (dict, list)):
                child = _empty_like(value)
                stack.append((value, child))
            else:
                child = value
            if isinstance(dst, dict):
                dst[key] = child
            else:
                dst.append(child)
    return result
