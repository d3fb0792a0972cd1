"""
External comparers: caller-registered overrides that fully decide equality for the pairs they accept.

They are consulted before any built-in logic, at every depth of a comparison (so they also apply to the members
    of collections). When more than one accepts a pair, the first registered wins.
"""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Callable, Tuple


class EqualityAdapter:
    """
    Base class for external comparers. Subclass and override both methods, or use one of the factories:

        - EqualityAdapter.for_predicate(func, *types): func(left, right) -> bool
        - EqualityAdapter.for_comparison(func, *types): func(left, right) -> int, where 0 means equal
        - EqualityAdapter.for_key(func, *types): equal if func(left) == func(right)

    When `types` are given, the adapter only accepts pairs where both objects are instances of one of them.
    """

    def can_compare(self, left: 'Any', right: 'Any') -> bool:
        raise NotImplementedError

    def are_equal(self, left: 'Any', right: 'Any') -> bool:
        raise NotImplementedError

    @classmethod
    def for_predicate(cls, func: 'Callable[[Any, Any], bool]', *types: type) -> 'EqualityAdapter':
        return _FunctionAdapter(lambda l, r: bool(func(l, r)), types)

    @classmethod
    def for_comparison(cls, func: 'Callable[[Any, Any], int]', *types: type) -> 'EqualityAdapter':
        return _FunctionAdapter(lambda l, r: func(l, r) == 0, types)

    @classmethod
    def for_key(cls, func: 'Callable[[Any], Any]', *types: type) -> 'EqualityAdapter':
        return _FunctionAdapter(lambda l, r: bool(func(l) == func(r)), types)


class _FunctionAdapter(EqualityAdapter):
    def __init__(self, func: 'Callable[[Any, Any], bool]', types: 'Tuple[type, ...]') -> None:
        self._func = func
        self._types = types

    def can_compare(self, left, right):
        if not self._types:
            return True
        return isinstance(left, self._types) and isinstance(right, self._types)

    def are_equal(self, left, right):
        return self._func(left, right)

    def __repr__(self):
        return '%s(types=%s)' % (type(self).__name__, tuple(t.__name__ for t in self._types))
