# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from . import log
from .args import (
    add_generic_args, add_filename_args, add_diff_args, add_output_args,
    diff_config_from_args, prettyprint_config_from_args, ConfigBackedParser,
    )
from .diffing import make_patch, UnsupportedRootComparison
from .prettyprint import pretty_print_diff_header, pretty_print_patch
from .serialize import to_json_patch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Compute the JSON patch between two JSON documents."


def main_diff(args):
    """Main handler of diff CLI"""
    base = args.base
    remote = args.remote
    output = getattr(args, 'out', None)

    # Check that filenames either exist, or are explicitly marked as missing
    for fn in (base, remote):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            log.error("Missing file %s", fn)
            return 1
    # Both files cannot be missing
    if base == EXPLICIT_MISSING_FILE and remote == EXPLICIT_MISSING_FILE:
        log.error('Cannot diff %r against %r', base, remote)
        return 1

    a = read_json(base, on_null='empty')
    b = read_json(remote, on_null='empty')

    try:
        p = make_patch(a, b, config=diff_config_from_args(args))
    except UnsupportedRootComparison as e:
        log.error("Cannot diff %s and %s: %s", base, remote, e)
        return 1
    log.debug("Computed patch with %d operations", len(p))

    # Output as JSON to file, or print to stdout:
    if output:
        write_json(to_json_patch(p), output, indent=getattr(args, 'indent', 2))
    else:
        # Some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_diff_header(base, remote, config)
        pretty_print_patch(a, p, config)

    return 0


def _build_arg_parser(prog='jsdiff'):
    """Creates an argument parser for the jsdiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_output_args(parser)
    add_filename_args(parser, ["base", "remote"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
