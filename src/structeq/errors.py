"""
Errors raised by structeq
"""

from .failure import describe_failure_points, limit_str
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Optional, Sequence
    from .failure import FailurePoint


class EqualityError(AssertionError):
    """Error raised whenever an :func:`~structeq.equality.equal` check returns false and `raise_err=True`"""

    def __init__(self, a: 'Any', b: 'Any', failure_points: 'Sequence[FailurePoint]' = (),
        message: 'Optional[str]' = None) -> None:
        self.failure_points = tuple(failure_points)
        message = "Values are not equal" if message is None else message
        if self.failure_points:
            message += "\nFirst difference:\n%s" % describe_failure_points(self.failure_points)
        super().__init__("Object a (%s) is not equal to object b (%s)\na: %s\nb: %s\nMessage: %s" % \
            (repr(type(a).__name__), repr(type(b).__name__), limit_str(a), limit_str(b), message))


class EqualityCheckingError(Exception):
    """Error raised whenever there is an unexpected problem attempting to check equality between two objects"""
