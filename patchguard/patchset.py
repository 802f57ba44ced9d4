# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .log import ForbiddenPathError, PatchFormatError, Violation, logger
from .patch_format import Operation, PatchOp, op_remove, op_test, validate_operation


__all__ = ["PatchSet", "merge", "loads", "find_forbidden_tests", "FORBIDDEN_PATHS"]


# Paths a test operation may never target.
FORBIDDEN_PATHS = frozenset([
    "/metadata/resourceVersion",
])


class PatchSet(object):
    """Ordered builder for an RFC 6902 JSON Patch document.

    The append methods mutate the patch set and return it, so calls
    can be chained:

        PatchSet().with_test("/status/phase", "Ready").with_remove("/status/foo")

    Operations are kept in insertion order, which is the order a patch
    processor applies them in. Nothing is validated until marshal().
    """

    def __init__(self):
        self._operations = []

    @property
    def operations(self):
        return tuple(self._operations)

    def __len__(self):
        return len(self._operations)

    def __iter__(self):
        return iter(self._operations)

    def __repr__(self):
        return "PatchSet(%r)" % (self._operations,)

    def append(self, operation):
        # Typechecking (just for internal consistency checking)
        assert isinstance(operation, Operation)
        self._operations.append(operation)
        return self

    def with_test(self, path, value):
        return self.append(op_test(path, value))

    def with_remove(self, path, condition=None):
        """Append a removal of path, guarded by an optional test condition.

        The condition goes in front of the removal, so the whole patch is
        rejected when the test fails. It may test a different path than
        the one being removed.
        """
        if condition is not None:
            self.append(condition)
        return self.append(op_remove(path))

    def is_empty(self):
        return len(self._operations) == 0

    def to_json_patch(self):
        "Convert to a list of RFC 6902 operation dicts, without validation."
        return [o.to_dict() for o in self._operations]

    def marshal(self, forbidden_paths=None):
        """Serialize to JSON after checking for forbidden test paths.

        An empty patch set encodes as the JSON null value, otherwise
        as a compact JSON array. Returns bytes.

        Raises a ForbiddenPathError listing every test operation that
        targets one of `forbidden_paths` (default FORBIDDEN_PATHS).
        """
        if forbidden_paths is None:
            forbidden_paths = FORBIDDEN_PATHS
        logger.debug("Marshalling patch with %d operations", len(self._operations))

        violations = find_forbidden_tests(self._operations, forbidden_paths)
        if violations:
            logger.debug("Patch has %d forbidden test operations", len(violations))
            raise ForbiddenPathError(violations)

        if not self._operations:
            return b"null"
        return json.dumps(
            self.to_json_patch(),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf8")


def find_forbidden_tests(operations, forbidden_paths):
    """Return a Violation for each test operation on a forbidden path.

    Violations are listed in operation order.
    """
    return [
        Violation(i, o.path) for i, o in enumerate(operations)
        if o.op == PatchOp.TEST and o.path in forbidden_paths
    ]


def merge(*patchsets):
    """Concatenate the operations of several patch sets into a new one.

    Order of arguments and of operations within each argument is kept.
    Empty patch sets, and None, contribute nothing. The inputs are left
    untouched and nothing is validated.
    """
    merged = PatchSet()
    for p in patchsets:
        if p is None or p.is_empty():
            continue
        merged._operations.extend(p.operations)
    return merged


def _reject_constant(name):
    raise ValueError("{} is not a JSON value".format(name))


def loads(data):
    """Build a PatchSet from a serialized JSON Patch document.

    Accepts the JSON null value (an empty patch) or an array of
    operations. Raises a PatchFormatError if the document is not
    well formed. Forbidden paths are left for marshal() to report.
    """
    try:
        if isinstance(data, bytes):
            data = data.decode("utf8")
        doc = json.loads(data, parse_constant=_reject_constant)
    except ValueError as e:
        raise PatchFormatError("Patch is not valid JSON: {}".format(e))

    patchset = PatchSet()
    if doc is None:
        return patchset
    if not isinstance(doc, list):
        raise PatchFormatError("Patch must be a list or null.")
    for e in doc:
        patchset.append(validate_operation(e))
    return patchset
