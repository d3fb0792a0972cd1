"""
Timezone-aware datetimes, and timedeltas/naive datetimes compared with a time-based tolerance
"""

from datetime import datetime, timedelta
from .base import ChainComparer


def _is_aware(obj):
    return isinstance(obj, datetime) and obj.utcoffset() is not None


def _is_naive(obj):
    return isinstance(obj, datetime) and obj.utcoffset() is None


class DateTimeOffsetsComparer(ChainComparer):
    """
    Compares the instants two aware datetimes refer to, so the same moment expressed in two timezones is equal. A
        time-based tolerance is applied to the time between them. With the engine's `with_same_offset` flag, their
        UTC offsets must also match (and tolerances are not allowed).
    """

    def attempt(self, left, right, tolerance, state):
        if not (_is_aware(left) and _is_aware(right)):
            return None

        if tolerance.is_time_based:
            equal = abs(left - right) <= tolerance.amount
        else:
            equal = left == right

        if equal and self.engine.with_same_offset:
            return left.utcoffset() == right.utcoffset()
        return equal


class TimeSpanToleranceComparer(ChainComparer):
    """Timedeltas, and naive datetimes, within a time-based tolerance. Declines when the tolerance is not time-based"""

    def attempt(self, left, right, tolerance, state):
        if not tolerance.is_time_based:
            return None

        both_timedeltas = isinstance(left, timedelta) and isinstance(right, timedelta)
        if both_timedeltas or (_is_naive(left) and _is_naive(right)):
            return abs(left - right) <= tolerance.amount
        return None
