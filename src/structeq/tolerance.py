"""
Tolerances for approximate equality of numbers, datetimes and timedeltas

A Tolerance is immutable. Modes:

    - EXACT: no variance allowed
    - LINEAR: absolute difference, either a number or (for time-based tolerances) a timedelta
    - PERCENT: difference as a percentage of the expected (left) value
    - ULPS: distance in units-of-least-precision between two floats

Build them like::

    Tolerance(5)                # |a - b| <= 5
    Tolerance(5).percent        # |a - b| <= |a| * 5%
    Tolerance(4).ulps           # at most 4 representable floats apart
    Tolerance(2).seconds        # |a - b| <= timedelta(seconds=2)
"""

from datetime import timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any, Union
    from typing_extensions import Self


class ToleranceError(ValueError):
    """Error raised whenever a Tolerance is built or used incorrectly"""


class ToleranceMode(Enum):
    EXACT = 'exact'
    LINEAR = 'linear'
    PERCENT = 'percent'
    ULPS = 'ulps'


class Tolerance:
    """
    Acceptable deviation between two values being compared. Applies at every depth of a comparison where a
        numeric or temporal comparer gets invoked.
    """

    __slots__ = ('_amount', '_mode')

    EXACT: 'Tolerance'

    def __init__(self, amount: 'Union[int, float, Decimal, Fraction, timedelta]' = 0,
        mode: 'ToleranceMode' = ToleranceMode.LINEAR) -> None:
        """
        :param amount: the allowed deviation. Must be a non-negative number, or a non-negative timedelta for a
            time-based tolerance
        :param mode: the ToleranceMode to interpret `amount` with
        """
        if not isinstance(mode, ToleranceMode):
            raise ToleranceError("`mode` must be a ToleranceMode, not %s" % repr(type(mode).__name__))

        if isinstance(amount, timedelta):
            if mode is not ToleranceMode.LINEAR:
                raise ToleranceError("A time-based tolerance can only be used in LINEAR mode, not %s" % mode.name)
            if amount < timedelta(0):
                raise ToleranceError("Tolerance amount cannot be negative: %s" % repr(amount))
        elif isinstance(amount, (int, float, Decimal, Fraction)) and not isinstance(amount, bool):
            if amount != amount or amount < 0:
                raise ToleranceError("Tolerance amount must be a non-negative number: %s" % repr(amount))
        else:
            raise ToleranceError("Tolerance amount must be a number or a timedelta, not %s" % repr(type(amount).__name__))

        object.__setattr__(self, '_amount', amount)
        object.__setattr__(self, '_mode', mode)

    def __setattr__(self, name: str, value: 'Any') -> None:
        raise AttributeError("Tolerance objects are immutable")

    @property
    def amount(self) -> 'Union[int, float, Decimal, Fraction, timedelta]':
        return self._amount

    @property
    def mode(self) -> 'ToleranceMode':
        return self._mode

    @property
    def is_time_based(self) -> bool:
        return isinstance(self._amount, timedelta)

    @property
    def has_variance(self) -> bool:
        """False if this tolerance only ever accepts exactly equal values"""
        if self._mode is ToleranceMode.EXACT:
            return False
        if self.is_time_based:
            return self._amount > timedelta(0)
        return self._amount > 0

    ################
    # Mode changes #
    ################

    def _convert_numeric(self, mode: 'ToleranceMode') -> 'Self':
        if self._mode is not ToleranceMode.LINEAR:
            raise ToleranceError("Cannot convert a %s tolerance into %s mode" % (self._mode.name, mode.name))
        if self.is_time_based:
            raise ToleranceError("Cannot convert a time-based tolerance into %s mode" % mode.name)
        return type(self)(self._amount, mode)

    def _convert_time(self, unit: str) -> 'Self':
        if self._mode is not ToleranceMode.LINEAR or self.is_time_based:
            raise ToleranceError("Only a numeric LINEAR tolerance can be given a time unit, not %r" % self)
        return type(self)(timedelta(**{unit: float(self._amount)}))

    @property
    def percent(self) -> 'Self':
        return self._convert_numeric(ToleranceMode.PERCENT)

    @property
    def ulps(self) -> 'Self':
        converted = self._convert_numeric(ToleranceMode.ULPS)
        if int(self._amount) != self._amount:
            raise ToleranceError("ULPS tolerance must be a whole number: %s" % repr(self._amount))
        return converted

    @property
    def days(self) -> 'Self':
        return self._convert_time('days')

    @property
    def hours(self) -> 'Self':
        return self._convert_time('hours')

    @property
    def minutes(self) -> 'Self':
        return self._convert_time('minutes')

    @property
    def seconds(self) -> 'Self':
        return self._convert_time('seconds')

    @property
    def milliseconds(self) -> 'Self':
        return self._convert_time('milliseconds')

    ###########
    # Dunders #
    ###########

    def __eq__(self, other: 'Any') -> bool:
        if not isinstance(other, Tolerance):
            return NotImplemented
        return self._mode is other._mode and self._amount == other._amount

    def __hash__(self) -> int:
        return hash((self._mode, self._amount))

    def __repr__(self) -> str:
        if self._mode is ToleranceMode.EXACT:
            return 'Tolerance.EXACT'
        return 'Tolerance(%r, %s)' % (self._amount, self._mode.name)


Tolerance.EXACT = Tolerance(0, ToleranceMode.EXACT)
