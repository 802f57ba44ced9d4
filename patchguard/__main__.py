# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["check"]
HELP_MESSAGE_VERBOSE = ("Usage: patchguard [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, COMMANDS{%s}\n\n"
                       "Examples: patchguard --version\n"
                       "          patchguard check -h\n"
                       "          patchguard check patch.json --forbidden-path /metadata/uid\n"
                       % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "check":
        from patchguard.checkapp import main
    else:
        if cmd == '--version':
            sys.exit(__version__)
        if cmd == '-h' or cmd == '--help':
            sys.exit(HELP_MESSAGE_VERBOSE)
        sys.exit("Unrecognized command '%s'\n\n%s." %
                 (cmd, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m patchguard <args>"
    sys.exit(main_dispatch())
