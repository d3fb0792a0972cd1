"""
Numbers of any representation
"""

from .base import ChainComparer
from ..numerics import numbers_equal
from ..pytypes import BoolTypes, is_numeric


class NumericsComparer(ChainComparer):
    """
    Compares numbers that may have different concrete types (int against float, numpy int32 against python int,
        Decimal against Fraction, ...) within the tolerance. See :func:`~structeq.numerics.numbers_equal`.

    Booleans are NOT numbers: a bool is never equal to an int, float, etc.
    """

    def attempt(self, left, right, tolerance, state):
        if isinstance(left, BoolTypes) != isinstance(right, BoolTypes):
            if is_numeric(left) or is_numeric(right):
                return False
            return None

        if not (is_numeric(left) and is_numeric(right)):
            return None
        return numbers_equal(left, right, tolerance)
