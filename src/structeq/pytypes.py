"""
Groups of runtime types used to route objects to the right comparer
"""

import array
import io
import numpy as np
from collections.abc import Iterable, Mapping, Set
from decimal import Decimal
from fractions import Fraction


# Native (shaped) arrays
ArrayTypes = (np.ndarray, array.array)

# Numbers that can be promoted to one another. bool is NOT in here on purpose
NumericTypes = (int, float, complex, Decimal, Fraction, np.number)
BoolTypes = (bool, np.bool_)

BytesLikeTypes = (bytes, bytearray, memoryview)

# Iterables that should never be walked element-by-element
_UNWALKABLE_TYPES = (str, Mapping, Set)


def is_numeric(obj):
    """True if obj is a number (and not a bool)"""
    return isinstance(obj, NumericTypes) and not isinstance(obj, BoolTypes)


def is_array(obj):
    return isinstance(obj, ArrayTypes)


def is_stream(obj):
    """True if obj looks like a binary file object"""
    if isinstance(obj, io.TextIOBase):
        return False
    if isinstance(obj, io.IOBase):
        return True
    return all(callable(getattr(obj, name, None)) for name in ('read', 'seek', 'tell'))


def is_walkable(obj):
    """True if obj is an iterable that can be compared element-by-element in order"""
    return isinstance(obj, Iterable) and not isinstance(obj, _UNWALKABLE_TYPES)


def is_single_char(obj):
    return isinstance(obj, str) and len(obj) == 1
