# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import re
import sys

from .pointer import make_pointer, split_pointer

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_json(f, on_null='empty'):
    """Read and return a JSON document from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
        on_null: What to return when filename null
            "empty": return empty dict
            "null": return None
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null == 'empty':
            return {}
        elif on_null == 'null':
            return None
        else:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are "empty" or "null"' % (on_null,))
    elif isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    else:
        return json.load(f)


def write_json(obj, f, indent=2):
    "Write a JSON document to filename or file-like object."
    if isinstance(f, str):
        with io.open(f, 'w', encoding='utf-8') as fo:
            json.dump(obj, fo, indent=indent, separators=(",", ": "))
            fo.write("\n")
    else:
        json.dump(obj, f, indent=indent, separators=(",", ": "))
        f.write("\n")


def split_path(path):
    "Split a pointer on the form '/foo/bar' into ['foo','bar']."
    return split_pointer(path)


def join_path(*args):
    "Join a path on the form ['foo','bar'] into '/foo/bar'."
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    return make_pointer(args)


r_is_int = re.compile(r"^[-+]?\d+$")

def star_path(path):
    """Replace integers and integer-strings in a path with * """
    path = list(path)
    for i, p in enumerate(path):
        if isinstance(p, int):
            path[i] = '*'
        elif r_is_int.match(p):
            path[i] = '*'
    return join_path(path)


def setup_std_streams():
    """Setup sys.stdout/err for the command line apps.

    Unencodable characters are escaped instead of raising, and colorama
    is enabled for ANSI escapes on Windows.
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            if stream is not getattr(sys, '__%s__' % name):
                # captured or redirected
                continue
            errors = getattr(stream, 'errors', None) or 'strict'
            if errors == 'strict' or errors.startswith('surrogate'):
                stream.reconfigure(errors='backslashreplace')
    # after reconfiguring, colorama wraps the final streams
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
