# -*- coding: utf-8 -*-

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import json
import sys

import colorama

from .patch_format import PatchOp
from .patching import patch_add, patch_copy, patch_move, patch_remove, patch_replace
from .pointer import resolve_value, split_pointer
from .values import deep_copy


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format a JSON value as indented text."
    return json.dumps(v, indent=2, sort_keys=False, separators=(",", ": "))


def pretty_print_value(value, prefix="", config=DefaultConfig):
    for line in format_value(value).splitlines():
        config.out.write("%s%s%s\n" % (prefix, line, config.RESET))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or "/", config.RESET))


def pretty_print_patch_entry(doc, e, config=DefaultConfig):
    """Print a single patch entry, then return doc with the entry applied.

    doc is modified in place.
    """
    op = e.op
    if op == PatchOp.ADD:
        pretty_print_patch_action("add", e.path, config)
        pretty_print_value(e.value, config.ADD, config)
        return patch_add(doc, e.path, deep_copy(e.value))
    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("remove", e.path, config)
        doc, removed = patch_remove(doc, e.path)
        pretty_print_value(removed, config.REMOVE, config)
        return doc
    elif op == PatchOp.REPLACE:
        pretty_print_patch_action("replace", e.path, config)
        old = resolve_value(doc, split_pointer(e.path), e.path)
        pretty_print_value(old, config.REMOVE, config)
        pretty_print_value(e.value, config.ADD, config)
        return patch_replace(doc, e.path, deep_copy(e.value))
    elif op == PatchOp.MOVE:
        pretty_print_patch_action("move %s to" % e.from_path, e.path, config)
        return patch_move(doc, e.from_path, e.path)
    elif op == PatchOp.COPY:
        pretty_print_patch_action("copy %s to" % e.from_path, e.path, config)
        return patch_copy(doc, e.from_path, e.path)
    elif op == PatchOp.TEST:
        pretty_print_patch_action("test", e.path, config)
        pretty_print_value(e.value, config.KEEP, config)
        return doc
    raise ValueError("Unknown patch op {!r}.".format(op))


def pretty_print_patch(doc, patch, config=DefaultConfig):
    """Pretty-print a patch against the document it applies to.

    Removed and replaced values are looked up by replaying the patch on
    a copy of doc, so doc itself is left untouched.
    """
    if not patch:
        config.out.write("%sno changes%s\n" % (config.INFO, config.RESET))
        return
    doc = deep_copy(doc)
    for e in patch:
        doc = pretty_print_patch_entry(doc, e, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    "Print a nested dict of strings, as used for the config listing."
    for key in sorted(d):
        value = d[key]
        if isinstance(value, dict):
            config.out.write("%s%s:\n" % (prefix, key))
            pretty_print_dict(value, prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, key, value))


def pretty_print_diff_header(base_name, remote_name, config=DefaultConfig):
    if config.use_color:
        red, green = colorama.Fore.RED, colorama.Fore.GREEN
    else:
        red = green = ""
    config.out.write("%s--- %s%s\n" % (red, base_name, config.RESET))
    config.out.write("%s+++ %s%s\n" % (green, remote_name, config.RESET))
