"""
Failure points: where, inside a nested structure, two compared values first differed
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Iterable


_MAX_STR_LEN = 1000


@dataclass(frozen=True)
class FailurePoint:
    """
    One level of a failure trail.

    The `*_has_data` flags tell apart "this side had no value at `position`" (eg: a shorter sequence, a missing
        key) from "this side had a value, but it differed". When a side has no data, its value is None.
    """
    position: 'Any'
    expected_value: 'Any' = None
    actual_value: 'Any' = None
    expected_has_data: bool = True
    actual_has_data: bool = True


def limit_str(obj: 'Any', limit: int = _MAX_STR_LEN) -> str:
    """repr() of obj, cut down to at most `limit` characters"""
    obj_str = repr(obj)
    return obj_str if len(obj_str) < limit else (obj_str[:limit] + '...')


def describe_failure_points(points: 'Iterable[FailurePoint]') -> str:
    """Renders a failure trail outermost-first, one indented line per nesting level"""
    lines = []
    for depth, point in enumerate(points):
        expected = limit_str(point.expected_value) if point.expected_has_data else '<no data>'
        actual = limit_str(point.actual_value) if point.actual_has_data else '<no data>'
        lines.append('%sat %s: expected %s, actual %s' % ('  ' * depth, limit_str(point.position), expected, actual))
    return '\n'.join(lines)
