"""
Tests for the structeq.tolerance file
"""

import pytest
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction
from structeq import Tolerance, ToleranceError, ToleranceMode


def test_construction():
    assert Tolerance(5).amount == 5
    assert Tolerance(5).mode is ToleranceMode.LINEAR
    assert Tolerance(Decimal('0.5')).amount == Decimal('0.5')
    assert Tolerance(Fraction(1, 3)).amount == Fraction(1, 3)
    assert Tolerance(timedelta(seconds=1)).is_time_based


def test_bad_construction():
    for amount in [-1, -0.5, float('nan'), 'a', None, True, [1]]:
        with pytest.raises(ToleranceError):
            Tolerance(amount)
    with pytest.raises(ToleranceError):
        Tolerance(timedelta(seconds=-1))
    with pytest.raises(ToleranceError):
        Tolerance(timedelta(seconds=1), ToleranceMode.PERCENT)
    with pytest.raises(ToleranceError):
        Tolerance(1, 'linear')


def test_mode_conversions():
    assert Tolerance(5).percent == Tolerance(5, ToleranceMode.PERCENT)
    assert Tolerance(3).ulps.mode is ToleranceMode.ULPS
    assert Tolerance(2).seconds == Tolerance(timedelta(seconds=2))
    assert Tolerance(1.5).minutes.amount == timedelta(seconds=90)
    assert Tolerance(1).days.amount == timedelta(days=1)
    assert Tolerance(1).hours.amount == timedelta(hours=1)
    assert Tolerance(250).milliseconds.amount == timedelta(milliseconds=250)


def test_bad_mode_conversions():
    with pytest.raises(ToleranceError):
        Tolerance(5).percent.percent
    with pytest.raises(ToleranceError):
        Tolerance(5).percent.seconds
    with pytest.raises(ToleranceError):
        Tolerance(2).seconds.percent
    with pytest.raises(ToleranceError):
        Tolerance(2).seconds.seconds
    with pytest.raises(ToleranceError):
        Tolerance(1.5).ulps
    with pytest.raises(ToleranceError):
        Tolerance.EXACT.percent


def test_has_variance():
    assert not Tolerance.EXACT.has_variance
    assert not Tolerance(0).has_variance
    assert not Tolerance(0).seconds.has_variance
    assert Tolerance(1).has_variance
    assert Tolerance(1).percent.has_variance
    assert Tolerance(1).seconds.has_variance


def test_immutable():
    tol = Tolerance(1)
    with pytest.raises(AttributeError):
        tol.amount = 2
    with pytest.raises(AttributeError):
        tol._mode = ToleranceMode.PERCENT
    assert tol.amount == 1


def test_dunders():
    assert Tolerance(1) == Tolerance(1)
    assert Tolerance(1) != Tolerance(1).percent
    assert len({Tolerance(1), Tolerance(1), Tolerance(2)}) == 2
    assert repr(Tolerance.EXACT) == 'Tolerance.EXACT'
    assert repr(Tolerance(5).percent) == 'Tolerance(5, PERCENT)'
