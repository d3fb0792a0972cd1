"""
Utils for determining equality of objects

Handled types, in the order they are tried:
    - external comparers registered by the caller (always first)
    - numpy ndarray, array.array (same shape, or flattened with `compare_as_collection`)
    - mappings (order independent, keys matched through the engine)
    - key/value entries (objects with `key` and `value` attributes)
    - str (casefolded with `ignore_case`)
    - binary streams (byte-for-byte from the current positions)
    - single characters
    - pathlib.Path directories (same tree, same file contents)
    - int, float, complex, Decimal, Fraction, np.number (within a Tolerance)
    - timezone-aware datetimes (same instant, optionally same UTC offset)
    - timedelta, naive datetimes (only with a time-based Tolerance)
    - tuple, namedtuple
    - dataclasses (field by field)
    - objects with their own __eq__
    - any other ordered iterable (list, range, generators, deque, bytes, ...)
    - falls back on built-in __eq__ (sets, singletons, ...)

Every comparison also returns a failure trail: one FailurePoint per nesting level, outermost first, describing where
    the two objects first differed.
"""

import logging
from .comparers import build_chain
from .errors import EqualityCheckingError, EqualityError
from .failure import limit_str
from .state import ComparisonState
from .tolerance import Tolerance, ToleranceError
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Iterable, List, Optional, Tuple
    from .external import EqualityAdapter
    from .failure import FailurePoint


_logger = logging.getLogger(__name__)


class ComparisonResult:
    """Outcome of one top-level comparison: the verdict, and the failure trail if the objects were unequal"""

    __slots__ = ('equal', 'failure_points')

    def __init__(self, equal: bool, failure_points: 'Tuple[FailurePoint, ...]' = ()) -> None:
        self.equal = equal
        self.failure_points = failure_points

    def __bool__(self) -> bool:
        return self.equal

    def __repr__(self) -> str:
        return 'ComparisonResult(equal=%s, failure_points=%r)' % (self.equal, self.failure_points)


class ComparisonEngine:
    """
    Decides whether two objects are equal for testing purposes.

    Configuration (flags and external comparers) is expected to be set before comparing, and left alone while a
        comparison is running. Each call to compare() gets its own ComparisonState, so the engine itself can be reused
        for any number of comparisons.
    """

    def __init__(self, ignore_case: bool = False, compare_as_collection: bool = False, with_same_offset: bool = False,
        external_comparers: 'Optional[Iterable[EqualityAdapter]]' = None) -> None:
        """
        :param ignore_case: if True, strings and characters are compared ignoring case
        :param compare_as_collection: if True, arrays are compared as flat sequences regardless of their shapes
        :param with_same_offset: if True, aware datetimes must also have the same UTC offset to be equal. Cannot be
            used along with a tolerance
        :param external_comparers: EqualityAdapter's to try before any built-in logic, first match wins
        """
        self.ignore_case = ignore_case
        self.compare_as_collection = compare_as_collection
        self.with_same_offset = with_same_offset
        self._external_comparers: 'List[EqualityAdapter]' = list(external_comparers or [])
        self._chain = build_chain(self)
        self._last_failure_points: 'Tuple[FailurePoint, ...]' = ()

    @property
    def external_comparers(self) -> 'List[EqualityAdapter]':
        """The (mutable) list of external comparers, in the order they are tried"""
        return self._external_comparers

    def add_external_comparer(self, adapter: 'EqualityAdapter') -> 'ComparisonEngine':
        self._external_comparers.append(adapter)
        return self

    @property
    def failure_points(self) -> 'Tuple[FailurePoint, ...]':
        """
        The failure trail of the last call to compare() on this engine.

        NOTE: this is shared by every caller of the engine. The ComparisonResult returned by compare() holds the
            same trail and is safe to use from multiple threads
        """
        return self._last_failure_points

    def compare(self, left: 'Any', right: 'Any', tolerance: 'Optional[Tolerance]' = None) -> 'ComparisonResult':
        """
        Compares two objects.

        Args:
            left (Any): the expected object
            right (Any): the actual object
            tolerance (Optional[Tolerance]): tolerance for numbers and datetimes at any depth. Defaults to
                Tolerance.EXACT

        Raises:
            ToleranceError: if the tolerance is invalid, or is used along with `with_same_offset`
            Exception: anything raised by an object's own __eq__ (or by an external comparer) propagates as is

        Returns:
            ComparisonResult: truthy if the objects are equal. Holds the failure trail otherwise
        """
        if tolerance is None:
            tolerance = Tolerance.EXACT
        elif not isinstance(tolerance, Tolerance):
            raise ToleranceError("`tolerance` must be a Tolerance or None, not %s" % repr(type(tolerance).__name__))

        if self.with_same_offset and tolerance.has_variance:
            raise ToleranceError("A tolerance cannot be used along with `with_same_offset`: %r" % tolerance)

        state = ComparisonState()
        result = ComparisonResult(self.are_equal(left, right, tolerance, state), state.failure_points)
        self._last_failure_points = result.failure_points

        if not result.equal and result.failure_points:
            first = result.failure_points[-1]
            _logger.debug("Objects differ %d level(s) deep, at position %s", len(result.failure_points),
                limit_str(first.position))
        return result

    def are_equal(self, left: 'Any', right: 'Any', tolerance: 'Optional[Tolerance]' = None,
        state: 'Optional[ComparisonState]' = None) -> bool:
        """
        Determines whether left and right are equal.

        Without a `state`, this is a top-level comparison and the same as `bool(compare(left, right, tolerance))`.
            Comparers pass the state of the comparison they are part of when recursing into child objects.
        """
        if state is None:
            return self.compare(left, right, tolerance).equal

        if left is None and right is None:
            return True
        if left is None or right is None:
            return False

        # Identical objects are always equal, no matter what
        if left is right:
            return True

        # Cyclic structures are never judged equal
        if not state.enter(left, right):
            return False

        try:
            external = self._get_external_comparer(left, right)
            if external is not None:
                _logger.debug("Using external comparer %r for %s and %s objects", external, type(left).__name__,
                    type(right).__name__)
                return bool(external.are_equal(left, right))

            for comparer in self._chain:
                result = comparer.attempt(left, right, tolerance, state)
                if result is not None:
                    return result

            _logger.debug("No comparer applies to %s and %s objects, using built-in __eq__", type(left).__name__,
                type(right).__name__)
            return bool(left == right)

        finally:
            state.exit(left, right)

    def _get_external_comparer(self, left: 'Any', right: 'Any') -> 'Optional[EqualityAdapter]':
        for adapter in self._external_comparers:
            if adapter.can_compare(left, right):
                return adapter
        return None

    def __repr__(self) -> str:
        return 'ComparisonEngine(ignore_case=%s, compare_as_collection=%s, with_same_offset=%s, external_comparers=%d)' \
            % (self.ignore_case, self.compare_as_collection, self.with_same_offset, len(self._external_comparers))


def equal(a: 'Any', b: 'Any', tolerance: 'Optional[Tolerance]' = None, ignore_case: bool = False,
    compare_as_collection: bool = False, with_same_offset: bool = False,
    external_comparers: 'Optional[Iterable[EqualityAdapter]]' = None, raise_err: bool = False) -> bool:
    """
    Determines whether a == b, generalizing for more objects and capabilities than default __eq__() method.

        1. equal(a, a) is always True                       (reflexivity)
        2. equal(a, b) implies equal(b, a)                  (symmetric, except with PERCENT tolerances, which are
                                                             taken from `a`)

    NOTE: This method is not meant to be very fast. It builds a new ComparisonEngine on every call, so build one
    yourself when doing many comparisons with the same configuration.

    NOTE: `tolerance` applies at every depth: to numbers and datetimes nested anywhere inside a and b.

    Args:
        a (Any): expected object
        b (Any): actual object
        tolerance (Optional[Tolerance]): the tolerance for numbers and datetimes. Defaults to None (exact)
        ignore_case (bool): if True, strings and characters are compared ignoring case. Defaults to False.
        compare_as_collection (bool): if True, arrays are compared as flat sequences, ignoring their shapes.
            Defaults to False.
        with_same_offset (bool): if True, aware datetimes must also have the same UTC offset. Defaults to False.
        external_comparers (Optional[Iterable[EqualityAdapter]]): comparers to try before the built-in ones.
        raise_err (bool): if True, then an ``EqualityError`` will be raised whenever `a` and `b` are unequal, along
            with an informative trail of where they first differed. Defaults to False.
    """
    engine = ComparisonEngine(ignore_case=ignore_case, compare_as_collection=compare_as_collection,
        with_same_offset=with_same_offset, external_comparers=external_comparers)
    result = engine.compare(a, b, tolerance)

    if not result.equal and raise_err:
        raise EqualityError(a, b, result.failure_points)
    return result.equal


__all__ = ['ComparisonEngine', 'ComparisonResult', 'EqualityCheckingError', 'EqualityError', 'equal']
