"""
Per-comparison state: the cycle guard and the failure trail
"""

import logging
from .failure import FailurePoint
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Dict, List, Tuple


_logger = logging.getLogger(__name__)


class ComparisonState:
    """
    State of one top-level comparison. Never shared between comparisons.

    Tracks the (left, right) pairs currently being compared on the active recursion path. Pairs are keyed on the
        identity of both objects, so two distinct containers that merely look alike are different entries. A pair
        that shows up again while it is still in progress means the structures are cyclic.

    Also accumulates the failure trail. Comparers record a failure point as the recursion unwinds, so each new
        point is inserted at the front and the finished trail reads outermost-first.
    """

    def __init__(self) -> None:
        # Objects are kept alongside their ids so those ids can't be recycled while a pair is in progress
        self._in_progress: 'Dict[Tuple[int, int], Tuple[Any, Any]]' = {}
        self._failure_points: 'List[FailurePoint]' = []

    ###############
    # Cycle guard #
    ###############

    def enter(self, left: 'Any', right: 'Any') -> bool:
        """
        Marks the pair as in progress.

        :return: True if the pair was newly entered, False if it was already in progress (a cycle). On False, the
            caller must treat the pair as unequal and not descend any further, nor call exit()
        """
        key = (id(left), id(right))
        if key in self._in_progress:
            _logger.debug("Cycle detected comparing %s and %s objects", type(left).__name__, type(right).__name__)
            return False
        self._in_progress[key] = (left, right)
        return True

    def exit(self, left: 'Any', right: 'Any') -> None:
        """Removes a pair previously entered with enter()"""
        del self._in_progress[(id(left), id(right))]

    @property
    def depth(self) -> int:
        """Number of pairs currently in progress"""
        return len(self._in_progress)

    #################
    # Failure trail #
    #################

    def record_failure(self, position: 'Any', expected_value: 'Any' = None, actual_value: 'Any' = None,
        expected_has_data: bool = True, actual_has_data: bool = True) -> None:
        self._failure_points.insert(0, FailurePoint(position, expected_value, actual_value, expected_has_data,
            actual_has_data))

    @property
    def failure_points(self) -> 'Tuple[FailurePoint, ...]':
        return tuple(self._failure_points)

    def probe(self) -> '_Probe':
        """
        Context manager for trial comparisons whose result does not decide the outcome by itself (eg: looking for
            a matching key). Any failure points recorded inside the block are thrown away on exit.
        """
        return _Probe(self._failure_points)


class _Probe:
    def __init__(self, failure_points):
        self.failure_points = failure_points
        self.mark = None
    def __enter__(self):
        self.mark = len(self.failure_points)
        return self
    def __exit__(self, *args):
        # New points were inserted at the front, so drop from the front
        del self.failure_points[:len(self.failure_points) - self.mark]
