# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

from . import log
from .args import add_generic_args, add_filename_args, add_output_args, ConfigBackedParser
from .patch_format import MalformedPatchOperation
from .patching import apply_patch, PatchTestFailed
from .pointer import PointerResolutionError
from .serialize import loads
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a JSON patch from jsdiff to a JSON document."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            log.error("Missing file %s", fn)
            return 1

    before = read_json(base_filename, on_null='empty')
    with io.open(patch_filename, encoding="utf8") as patch_file:
        text = patch_file.read()

    try:
        patch = loads(text)
        after = apply_patch(before, patch)
    except MalformedPatchOperation as e:
        log.error("Invalid patch %s: %s", patch_filename, e)
        return 1
    except (PointerResolutionError, PatchTestFailed) as e:
        log.error("Patch %s does not apply to %s: %s", patch_filename, base_filename, e)
        return 1

    indent = getattr(args, 'indent', 2)
    if output_filename:
        write_json(after, output_filename, indent=indent)
    else:
        write_json(after, sys.stdout, indent=indent)

    return 0


def _build_arg_parser(prog='jspatch'):
    """Creates an argument parser for the jspatch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
