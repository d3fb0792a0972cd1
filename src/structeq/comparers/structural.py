"""
Objects that declare how they should be compared: dataclasses (structurally, field by field) and classes with their
    own __eq__
"""

import dataclasses
from .base import ChainComparer


# Modules whose types implement '==' generically. Objects of these types are left to the later comparers
_NATIVE_EQ_MODULES = ('builtins', 'collections')


def _has_generated_eq(cls):
    """True if the __eq__ of dataclass `cls` was written by the dataclasses module, rather than by hand"""
    params = getattr(cls, '__dataclass_params__', None)
    if params is None or not params.eq:
        return False
    code = getattr(cls.__dict__.get('__eq__'), '__code__', None)
    return code is not None and code.co_filename == '<string>'


def _defines_own_eq(cls):
    for klass in cls.__mro__:
        if '__eq__' in klass.__dict__:
            return klass.__module__ not in _NATIVE_EQ_MODULES
    return False


class StructuralComparer(ChainComparer):
    """
    Two instances of the same dataclass (generated with eq=True) are compared field by field through the engine, so
        nested values get the full comparison rules. Fields with compare=False are skipped. The failure position is
        the field name.

    A dataclass that writes its own __eq__ is left for EquatablesComparer.
    """

    def attempt(self, left, right, tolerance, state):
        cls = type(left)
        if cls is not type(right) or not _has_generated_eq(cls):
            return None

        for field in dataclasses.fields(left):
            if not field.compare:
                continue
            left_value, right_value = getattr(left, field.name), getattr(right, field.name)
            if not self.engine.are_equal(left_value, right_value, tolerance, state):
                state.record_failure(field.name, left_value, right_value)
                return False

        return True


class EquatablesComparer(ChainComparer):
    """
    Objects whose class defines its own __eq__ (outside of the builtin types) are compared with it. It may encode
        rules the generic walk of EnumerablesComparer could never infer (eg: normalization), so it takes precedence.
    """

    def attempt(self, left, right, tolerance, state):
        if not (_defines_own_eq(type(left)) or _defines_own_eq(type(right))):
            return None
        return bool(left == right)
