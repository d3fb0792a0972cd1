"""
Native arrays (numpy ndarrays and array.array)
"""

import array
import numpy as np
from .base import ChainComparer
from ..pytypes import is_array, is_walkable


def _as_shaped(obj):
    """Returns obj as a numpy array with a well-defined shape. Nested lists/tuples become extra dimensions"""
    if isinstance(obj, np.ndarray):
        return obj
    if isinstance(obj, array.array):
        return np.array(obj)

    if is_walkable(obj) and not isinstance(obj, (list, tuple)):
        obj = list(obj)

    try:
        return np.array(obj, dtype=object)
    except ValueError:
        # Ragged nested arrays can't be broadcast into one block, so keep only the outer dimension
        shaped = np.empty(len(obj), dtype=object)
        for i, item in enumerate(obj):
            shaped[i] = item
        return shaped


def _flat_elements(obj):
    """Row-major elements of an array, or the elements of any other iterable"""
    if isinstance(obj, np.ndarray):
        return obj.flat
    return obj


class ArraysComparer(ChainComparer):
    """
    Applies whenever either object is a native array.

    By default both objects must have the same shape (rank, and length along every dimension), and are then compared
        element-wise in row-major order. The failure position is the full index tuple of the first differing element.
        A non-array object is shaped the way numpy would shape it, so a list of lists acts as a 2-d array.

    With the engine's `compare_as_collection` flag, shapes are ignored and both objects are compared as flat
        sequences instead.
    """

    def __init__(self, engine, enumerables):
        """
        :param engine: the ComparisonEngine to recurse with
        :param enumerables: the EnumerablesComparer to hand flattened sequences to
        """
        super().__init__(engine)
        self.enumerables = enumerables

    def attempt(self, left, right, tolerance, state):
        if not (is_array(left) or is_array(right)):
            return None

        if self.engine.compare_as_collection and is_walkable(left) and is_walkable(right):
            return self.enumerables.walk(_flat_elements(left), _flat_elements(right), tolerance, state)

        left_arr, right_arr = _as_shaped(left), _as_shaped(right)

        if left_arr.shape != right_arr.shape:
            state.record_failure('shape', left_arr.shape, right_arr.shape)
            return False

        for index in np.ndindex(*left_arr.shape):
            left_item, right_item = left_arr[index], right_arr[index]
            if not self.engine.are_equal(left_item, right_item, tolerance, state):
                state.record_failure(index, left_item, right_item)
                return False

        return True
