"""
Tuples and named tuples of the same arity
"""

from .base import ChainComparer


class TuplesComparer(ChainComparer):
    """
    Compares every positional element of two tuples of the same length. Tuples of different lengths are left for
        later comparers (and end up unequal there). Two named tuples must also have the same field names, and their
        failure positions are field names instead of indices.
    """

    def attempt(self, left, right, tolerance, state):
        if not (isinstance(left, tuple) and isinstance(right, tuple)) or len(left) != len(right):
            return None

        left_fields, right_fields = getattr(left, '_fields', None), getattr(right, '_fields', None)
        named = left_fields is not None and right_fields is not None
        if named and tuple(left_fields) != tuple(right_fields):
            state.record_failure('_fields', left_fields, right_fields)
            return False

        for i, (left_item, right_item) in enumerate(zip(left, right)):
            if not self.engine.are_equal(left_item, right_item, tolerance, state):
                state.record_failure(left_fields[i] if named else i, left_item, right_item)
                return False

        return True
