"""
Base class of every comparer in the built-in chain
"""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Optional
    from ..equality import ComparisonEngine
    from ..state import ComparisonState
    from ..tolerance import Tolerance


class ChainComparer:
    """
    One link of the chain. Specialized to one family of objects, it either declines a pair (returns None) or gives
        a definitive verdict on it (True/False).

    Comparers recurse into child values through `self.engine.are_equal()` so that cycle detection, external comparers
        and tolerances apply the same way at every depth.
    """

    def __init__(self, engine: 'ComparisonEngine') -> None:
        self.engine = engine

    def attempt(self, left: 'Any', right: 'Any', tolerance: 'Tolerance', state: 'ComparisonState') -> 'Optional[bool]':
        raise NotImplementedError

    def __repr__(self) -> str:
        return '%s()' % type(self).__name__
