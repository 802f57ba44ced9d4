# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .log import ForbiddenPathError, PatchFormatError, Violation
from .patch_format import Operation, PatchOp, new_test_condition
from .patchset import FORBIDDEN_PATHS, PatchSet, merge, loads


__all__ = [
    "__version__",
    "PatchSet", "Operation", "PatchOp",
    "new_test_condition", "merge", "loads",
    "ForbiddenPathError", "PatchFormatError", "Violation",
    "FORBIDDEN_PATHS",
    ]
