"""
Numeric promotion and tolerance arithmetic.

Numbers of different representations (int, float, complex, Decimal, Fraction, numpy scalars) are promoted into one
    common domain before a tolerance is applied to their difference. Promotion order, widest first:

        complex > float > Decimal > Fraction/int

    with the exception that a Decimal compared against a Fraction is promoted into Fraction so neither loses
    precision. Exact comparisons skip promotion entirely and use Python's own cross-type '==', which is exact.
"""

import cmath
import math
import numpy as np
from decimal import Decimal
from fractions import Fraction
from .tolerance import ToleranceError, ToleranceMode
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Tuple
    from .tolerance import Tolerance


def to_python_number(x: 'Any') -> 'Any':
    """Converts numpy scalars into the matching builtin python number, leaves anything else alone"""
    if isinstance(x, np.integer):
        return int(x)
    elif isinstance(x, np.floating):
        return float(x)
    elif isinstance(x, np.complexfloating):
        return complex(x)
    return x


def _is_nan(x):
    if isinstance(x, complex):
        return cmath.isnan(x)
    elif isinstance(x, float):
        return math.isnan(x)
    elif isinstance(x, Decimal):
        return x.is_nan()
    return False


def _is_inf(x):
    if isinstance(x, complex):
        return cmath.isinf(x)
    elif isinstance(x, float):
        return math.isinf(x)
    elif isinstance(x, Decimal):
        return x.is_infinite()
    return False


def _promote(left: 'Any', right: 'Any', amount: 'Any') -> 'Tuple[Any, Any, Any]':
    """Returns (left, right, amount) all converted into the common domain of left and right"""
    kinds = (type(left), type(right))

    if complex in kinds:
        return complex(left), complex(right), float(amount)

    elif float in kinds:
        return float(left), float(right), float(amount)

    elif Decimal in kinds and Fraction not in kinds:
        if isinstance(amount, float):
            amount = Decimal(repr(amount))
        elif isinstance(amount, Fraction):
            amount = Decimal(amount.numerator) / Decimal(amount.denominator)
        return Decimal(left), Decimal(right), Decimal(amount)

    return Fraction(left), Fraction(right), Fraction(amount)


def _ulps_distance(left: 'Any', right: 'Any', single: bool) -> int:
    """Number of representable floats between left and right"""
    float_type, int_type, min_int = (np.float32, np.int32, -2 ** 31) if single else (np.float64, np.int64, -2 ** 63)

    # Reinterpret the bits as signed ints, then map negatives so that ints are ordered like the floats they encode
    def _lexicographic(x):
        bits = int(np.array(x, dtype=float_type).view(int_type))
        return min_int - bits if bits < 0 else bits

    return abs(_lexicographic(left) - _lexicographic(right))


def numbers_equal(left: 'Any', right: 'Any', tolerance: 'Tolerance') -> bool:
    """
    Determines whether two numbers are equal within the given tolerance.

    NaN is only equal to NaN and an infinity is only equal to the same infinity, whatever the tolerance. In PERCENT
        mode, `left` is the expected value the percentage is taken from.

    Args:
        left (Any): expected number
        right (Any): actual number
        tolerance (Tolerance): the tolerance to allow

    Raises:
        ToleranceError: if the tolerance is time-based, or if it is in ULPS mode and either number is not a float
    """
    if tolerance.is_time_based:
        raise ToleranceError("Cannot apply the time-based tolerance %r to numbers %r and %r" % (tolerance, left, right))

    single = isinstance(left, np.float32) and isinstance(right, np.float32)
    both_floats = isinstance(left, (float, np.floating)) and isinstance(right, (float, np.floating))
    left, right = to_python_number(left), to_python_number(right)

    if _is_nan(left) or _is_nan(right):
        return _is_nan(left) and _is_nan(right)
    if _is_inf(left) or _is_inf(right):
        return bool(left == right)

    if not tolerance.has_variance:
        return bool(left == right)

    mode = tolerance.mode
    if mode is ToleranceMode.ULPS:
        if not both_floats:
            raise ToleranceError("ULPS tolerance can only be applied to floating point numbers, not %s and %s"
                % (repr(type(left).__name__), repr(type(right).__name__)))
        return _ulps_distance(left, right, single) <= tolerance.amount

    left, right, amount = _promote(left, right, tolerance.amount)
    if mode is ToleranceMode.LINEAR:
        return abs(left - right) <= amount
    elif mode is ToleranceMode.PERCENT:
        return abs(left - right) * 100 <= abs(left) * amount

    raise ToleranceError("Unknown tolerance mode: %r" % mode)
