# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    build_config, entrypoint_configurables,
)
from .log import init_logging, set_patchguard_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = build_config(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_patchguard_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_patchguard_log_level(level, True)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        json.dump({header: config}, sys.stderr, indent=2, sort_keys=True)
        print('', file=sys.stderr)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all patchguard commands.
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
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_filename_args(parser, names):
    """Add patch filename arguments to an argument parser.

    Each name becomes an optional list of files, read from
    stdin when no files or '-' are given.
    """
    helps = {
        "patches": "JSON patch files to merge and check, in order. "
                   "Reads stdin if none are given.",
        }
    for name in names:
        parser.add_argument(name, nargs="*", help=helps[name])


def add_forbidden_args(parser):
    parser.add_argument(
        '--forbidden-path',
        dest='forbidden_paths',
        action='append',
        metavar='POINTER',
        help="a JSON pointer that test operations may not target, "
             "in addition to the configured ones. May be repeated.")
