# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
from collections import namedtuple


class PatchFormatError(ValueError):
    pass


class Violation(namedtuple("Violation", ("index", "path"))):
    "A test operation at `index` targeting a forbidden `path`."
    __slots__ = ()

    def __str__(self):
        return 'test operation at index: {} contains forbidden path: "{}"'.format(
            self.index, self.path)


class ForbiddenPathError(ValueError):
    """Raised when a patch tests one or more forbidden paths.

    All violations found are kept, in the order they appear in the patch,
    on the `violations` attribute.
    """

    def __init__(self, violations):
        self.violations = tuple(violations)
        super(ForbiddenPathError, self).__init__(format_violations(self.violations))

    def __str__(self):
        return format_violations(self.violations)


def format_violations(violations):
    """Render violations as a single message, or a bracketed list of them."""
    messages = [str(v) for v in violations]
    if len(messages) == 1:
        return messages[0]
    return "[" + ", ".join(messages) + "]"


def init_logging(level=logging.INFO):
    """Sets up logging for patchguard entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all patchguard loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_patchguard_log_level(level, set_main=True):
    """Set a log level for patchguard loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('patchguard')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
