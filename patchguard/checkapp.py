# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

import patchguard.log
from .args import ConfigBackedParser, add_generic_args, add_filename_args, add_forbidden_args
from .log import ForbiddenPathError, PatchFormatError
from .patchset import loads, merge


_description = ("Merge JSON patch files and check that no test operation "
                "targets a forbidden path. The checked patch is printed "
                "in canonical form.")


def _read_patch(filename):
    if filename == '-':
        return sys.stdin.read()
    with io.open(filename, "rb") as f:
        return f.read()


def main_check(args):
    filenames = args.patches or ['-']
    output_filename = args.output

    for fn in filenames:
        if fn != '-' and not os.path.exists(fn):
            patchguard.log.error("Missing file %s", fn)
            return 2

    patchsets = []
    for fn in filenames:
        try:
            patchsets.append(loads(_read_patch(fn)))
        except (PatchFormatError, UnicodeDecodeError, OSError) as e:
            patchguard.log.error("Invalid patch %s: %s", fn, e)
            return 2
    patchset = merge(*patchsets)
    patchguard.log.debug("Checking %d operations from %d files", len(patchset), len(filenames))

    try:
        data = patchset.marshal(forbidden_paths=frozenset(args.forbidden_paths or ()))
    except ForbiddenPathError as e:
        for v in e.violations:
            patchguard.log.error("%s", v)
        return 1

    if output_filename:
        with io.open(output_filename, 'wb') as f:
            f.write(data)
        patchguard.log.info("Wrote checked patch to %s", output_filename)
    else:
        sys.stdout.write(data.decode("utf8"))
        sys.stdout.write("\n")
    return 0


def _build_arg_parser():
    """Creates an argument parser for the patchguard-check command."""
    parser = ConfigBackedParser(
        'patchguard-check',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["patches"])
    add_forbidden_args(parser)
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the checked patch is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    arguments = _build_arg_parser().parse_args(args)
    return main_check(arguments)


if __name__ == "__main__":
    sys.exit(main())
