# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .diffing.config import DiffConfig, KEY_ORDERS
from .log import LEVEL_NAMES, init_logging, set_jsondime_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        namespace, extra = super(ConfigBackedParser, self).parse_known_args(
            args=args, namespace=namespace)
        # A log level from config files only reaches the loggers here
        level = getattr(namespace, 'log_level', None)
        if level:
            set_jsondime_log_level(level)
        return namespace, extra


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = default or 'INFO'
        init_logging(level=level)
        set_jsondime_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_jsondime_log_level(values, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondime commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LEVEL_NAMES,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_filename_args(parser, names):
    """Add positional filename arguments with consistent help strings."""
    helps = {
        "base": "the base JSON document filename.",
        "remote": "the remote modified JSON document filename.",
        "patch": "the JSON patch filename, as written by jsdiff.",
        }
    for name in names:
        parser.add_argument(name, help=helps[name])


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    diffing = parser.add_argument_group(
        title='diffing',
        description='Control how documents are compared.')
    diffing.add_argument(
        '--key-order',
        default='insertion',
        choices=KEY_ORDERS,
        help="order in which object keys are visited: as found in the "
             "documents (insertion) or sorted.")
    diffing.add_argument(
        '--atomic-path',
        dest='atomic_paths',
        action='append',
        default=[],
        metavar='POINTER',
        help="JSON pointer of a value to replace as a whole instead of diffing "
             "it (`*` matches any array index). Can be given multiple times.")


def add_output_args(parser):
    """Adds a set of arguments for commands that print or write documents.
    """
    parser.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        default=True,
        help="do not use colors when printing to the terminal.")
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="indentation of written JSON files.")


def diff_config_from_args(args):
    "Build a DiffConfig from parsed diff arguments."
    return DiffConfig(
        key_order=getattr(args, 'key_order', 'insertion'),
        atomic_paths=getattr(args, 'atomic_paths', None) or (),
    )


def prettyprint_config_from_args(args, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(use_color=getattr(args, 'color', True), **kwargs)
