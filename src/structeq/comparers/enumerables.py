"""
Ordered iterables: the last link of the chain
"""

from itertools import count
from .base import ChainComparer
from ..pytypes import BytesLikeTypes, is_walkable


# Marks an exhausted iterator
_NO_DATA = object()


class EnumerablesComparer(ChainComparer):
    """
    Walks both iterables in lockstep. Order matters. Unequal lengths are unequal, and the first index where only one
        side has data is recorded with the other side's `has_data` flag set to False.

    Strings, mappings and sets are never walked. Bytes-like objects are only walked against other bytes-like objects.
    """

    def attempt(self, left, right, tolerance, state):
        if not (is_walkable(left) and is_walkable(right)):
            return None
        if isinstance(left, BytesLikeTypes) != isinstance(right, BytesLikeTypes):
            return None
        return self.walk(left, right, tolerance, state)

    def walk(self, left, right, tolerance, state) -> bool:
        """Compares two iterables element-by-element, in order"""
        left_iter, right_iter = iter(left), iter(right)

        for position in count():
            left_item, right_item = next(left_iter, _NO_DATA), next(right_iter, _NO_DATA)

            if left_item is _NO_DATA and right_item is _NO_DATA:
                return True

            if left_item is _NO_DATA or right_item is _NO_DATA:
                state.record_failure(position,
                    None if left_item is _NO_DATA else left_item,
                    None if right_item is _NO_DATA else right_item,
                    expected_has_data=left_item is not _NO_DATA,
                    actual_has_data=right_item is not _NO_DATA)
                return False

            if not self.engine.are_equal(left_item, right_item, tolerance, state):
                state.record_failure(position, left_item, right_item)
                return False
