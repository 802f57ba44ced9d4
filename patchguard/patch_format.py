# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import PatchFormatError


# Sentinel to allow None as a value
Missing = object()


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    TEST = "test"
    REMOVE = "remove"
    ADD = "add"
    REPLACE = "replace"


# Operations carrying a value field
VALUE_OPS = (
    PatchOp.TEST,
    PatchOp.ADD,
    PatchOp.REPLACE,
    )

OPS = VALUE_OPS + (PatchOp.REMOVE,)


class Operation(namedtuple("Operation", ("op", "path", "value"))):
    """A single RFC 6902 patch operation.

    Being a tuple, an operation is immutable and compares structurally.
    Operations without a payload hold the `Missing` sentinel as value.
    """
    __slots__ = ()

    def __new__(cls, op, path, value=Missing):
        return super(Operation, cls).__new__(cls, op, path, value)

    def __repr__(self):
        if self.value is Missing:
            return "Operation(op=%r, path=%r)" % (self.op, self.path)
        return "Operation(op=%r, path=%r, value=%r)" % (self.op, self.path, self.value)

    @property
    def has_value(self):
        return self.value is not Missing

    def to_dict(self):
        "Convert to a dict with keys in op, path, value order."
        d = {"op": self.op, "path": self.path}
        if self.has_value:
            d["value"] = self.value
        return d


def op_test(path, value):
    "Create an operation asserting that path holds value."
    return Operation(PatchOp.TEST, path, value)

def op_remove(path):
    "Create an operation to remove the value at path."
    return Operation(PatchOp.REMOVE, path)

def op_add(path, value):
    "Create an operation to add value at path."
    return Operation(PatchOp.ADD, path, value)

def op_replace(path, value):
    "Create an operation to replace the value at path with given value."
    return Operation(PatchOp.REPLACE, path, value)


def new_test_condition(path, value):
    """Create a test operation for use as the guard of a removal.

    The operation is not attached to any patch set, see
    PatchSet.with_remove. No forbidden path checking happens here.
    """
    return op_test(path, value)


def validate_operation(e):
    """Check that e is a well formed RFC 6902 operation object.

    Returns the corresponding Operation.
    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise PatchFormatError("Patch operation '{}' is not an object.".format(e))

    op = e.get("op")
    if op not in OPS:
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    path = e.get("path")
    if not isinstance(path, str):
        msg = "Invalid patch path '{}' of type '{}'. Expecting str."
        raise PatchFormatError(msg.format(path, type(path)))

    # Note that paths are not parsed as JSON pointers, and
    # values can in principle be arbitrary json objects
    if op in VALUE_OPS:
        if "value" not in e:
            raise PatchFormatError("{} operation at '{}' needs a value.".format(op, path))
        return Operation(op, path, e["value"])
    return Operation(op, path)
