from .equality import ComparisonEngine, ComparisonResult, equal
from .errors import EqualityCheckingError, EqualityError
from .external import EqualityAdapter
from .failure import FailurePoint, describe_failure_points
from .state import ComparisonState
from .tolerance import Tolerance, ToleranceError, ToleranceMode

__all__ = [
    'ComparisonEngine', 'ComparisonResult', 'ComparisonState', 'EqualityAdapter', 'EqualityCheckingError',
    'EqualityError', 'FailurePoint', 'Tolerance', 'ToleranceError', 'ToleranceMode', 'describe_failure_points',
    'equal',
]
