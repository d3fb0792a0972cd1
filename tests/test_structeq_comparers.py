"""
Tests for the comparers in structeq.comparers, through the engine
"""

import array
import io
import pytest
import numpy as np
from collections import namedtuple
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from structeq import ComparisonEngine, EqualityCheckingError, FailurePoint, Tolerance, ToleranceError, equal
from structeq.comparers import (ArraysComparer, EnumerablesComparer, NumericsComparer, StringsComparer,
    TuplesComparer, build_chain)
from structeq.state import ComparisonState


_Point = namedtuple('_Point', ['x', 'y'])
_Other = namedtuple('_Other', ['a', 'b'])


class _Entry:
    def __init__(self, key, value):
        self.key = key
        self.value = value


@dataclass
class _Pair:
    first: object
    note: str = field(default='', compare=False)


@dataclass
class _Tag:
    name: str

    def __eq__(self, other):
        return isinstance(other, _Tag) and self.name.lower() == other.name.lower()


def _compare(left, right, tolerance=None, **kwargs):
    return ComparisonEngine(**kwargs).compare(left, right, tolerance)


def test_chain_order():
    names = [type(c).__name__ for c in build_chain(ComparisonEngine())]
    assert names == [
        'ArraysComparer', 'DictionariesComparer', 'KeyValuePairsComparer', 'StringsComparer', 'StreamsComparer',
        'CharsComparer', 'DirectoriesComparer', 'NumericsComparer', 'DateTimeOffsetsComparer',
        'TimeSpanToleranceComparer', 'TuplesComparer', 'StructuralComparer', 'EquatablesComparer',
        'EnumerablesComparer',
    ]


def test_comparers_decline():
    """Comparers return None for objects they don't handle"""
    engine, state = ComparisonEngine(), ComparisonState()
    tol = Tolerance.EXACT
    assert StringsComparer(engine).attempt('abc', 1, tol, state) is None
    assert NumericsComparer(engine).attempt('1', 1, tol, state) is None
    assert TuplesComparer(engine).attempt((1, 2), (1, 2, 3), tol, state) is None
    assert EnumerablesComparer(engine).attempt('abc', 'abc', tol, state) is None
    assert ArraysComparer(engine, EnumerablesComparer(engine)).attempt([1], [1], tol, state) is None


##########
# Arrays #
##########


def test_arrays_shape():
    arr = np.arange(6).reshape(2, 3)
    assert equal(arr, [[0, 1, 2], [3, 4, 5]])
    assert equal(arr, arr.copy())

    result = _compare(arr, list(range(6)))
    assert not result
    assert result.failure_points == (FailurePoint('shape', (2, 3), (6,)),)

    assert not equal(arr, arr.reshape(3, 2))
    assert equal(arr, arr.reshape(3, 2), compare_as_collection=True)
    assert equal(arr, list(range(6)), compare_as_collection=True)
    assert not equal(arr, list(range(5)), compare_as_collection=True)


def test_arrays_failure_position():
    result = _compare(np.zeros((2, 2, 2)), np.array([[[0, 0], [0, 0]], [[0, 1], [0, 0]]]))
    assert not result
    assert len(result.failure_points) == 1
    point = result.failure_points[0]
    assert point.position == (1, 0, 1)
    assert point.expected_value == 0 and point.actual_value == 1


def test_arrays_flat_failure_position():
    result = _compare(np.arange(4).reshape(2, 2), [0, 1, 2, 5], compare_as_collection=True)
    assert [p.position for p in result.failure_points] == [3]


def test_arrays_other_types():
    assert equal(array.array('i', [1, 2, 3]), [1, 2, 3])
    assert equal(array.array('d', [1.0, 2.0]), np.array([1, 2]))
    assert equal(np.array(['a', 'B']), ['A', 'b'], ignore_case=True)
    assert equal(np.array([1.0, 2.0]), [1.2, 2.0], tolerance=Tolerance(0.25))
    assert not equal(np.array([1, 2]), 1)


################
# Dictionaries #
################


def test_dictionaries_missing_key():
    result = _compare({'a': 1, 'b': 2}, {'a': 1, 'c': 2})
    assert result.failure_points == (FailurePoint('b', 2, None, actual_has_data=False),)


def test_dictionaries_extra_key():
    result = _compare({'a': 1}, {'a': 1, 'b': 2})
    assert result.failure_points == (FailurePoint('b', None, 2, expected_has_data=False),)


def test_dictionaries_value_mismatch():
    result = _compare({'a': 1, 'b': [1, 2]}, {'b': [1, 3], 'a': 1})
    assert [p.position for p in result.failure_points] == ['b', 1]


def test_dictionaries_keys_use_engine():
    """Keys are matched with the engine's rules when a plain lookup fails"""
    assert equal({'Key': 1}, {'key': 1}, ignore_case=True)
    assert not equal({'Key': 1}, {'key': 1})
    assert equal({1.0: 'a', 2.0: 'b'}, {1.05: 'a', 2.0: 'b'}, tolerance=Tolerance(0.1))

    # Probing keys does not leave anything behind in the trail
    result = _compare({'x': 1, 'y': 2}, {'y': 2, 'x': 3})
    assert result.failure_points == (FailurePoint('x', 1, 3),)


def test_dictionaries_keys_matched_once():
    """Two keys can't both match the same key of the other mapping"""
    result = _compare({'a': 1, 'A': 1}, {'a': 1, 'b': 1}, ignore_case=True)
    assert result.failure_points == (FailurePoint('A', 1, None, actual_has_data=False),)
    result = _compare({'a': 1, 'b': 1}, {'a': 1, 'A': 1}, ignore_case=True)
    assert result.failure_points == (FailurePoint('b', 1, None, actual_has_data=False),)

    tol = Tolerance(0.1)
    assert not equal({1.0: 'x', 1.05: 'x'}, {1.0: 'x', 5.0: 'x'}, tolerance=tol)
    assert not equal({1.0: 'x', 5.0: 'x'}, {1.0: 'x', 1.05: 'x'}, tolerance=tol)
    assert equal({1.0: 'x', 1.05: 'x'}, {1.02: 'x', 1.0: 'x'}, tolerance=tol)


def test_dictionaries_hashing_is_not_equality():
    """1 and True hash the same, but are different keys"""
    assert not equal({1: 'a'}, {True: 'a'})
    assert not equal({True: 'a'}, {1: 'a'})
    assert equal({1: 'a'}, {1.0: 'a'})

    result = _compare({1: 'a'}, {True: 'a'})
    assert result.failure_points == (FailurePoint(1, 'a', None, actual_has_data=False),)


def test_key_value_pairs():
    assert equal(_Entry('a', [1, 2]), _Entry('a', [1, 2]))
    assert equal(_Entry('a', 1), _Entry('A', 1), ignore_case=True)
    result = _compare(_Entry('a', 1), _Entry('a', 2))
    assert result.failure_points == (FailurePoint('value', 1, 2),)


###################
# Strings & chars #
###################


def test_strings():
    assert not equal('Abc', 'abc')
    assert equal('Abc', 'abc', ignore_case=True)
    assert equal('Straße', 'STRASSE', ignore_case=True)
    assert not equal('abc', 'abd', ignore_case=True)


def test_chars():
    assert not equal('A', 'a')
    assert equal('A', 'a', ignore_case=True)
    assert not equal('a', 'b', ignore_case=True)
    assert not equal('a', 'ab')


###########
# Streams #
###########


def test_streams_equal():
    assert equal(io.BytesIO(b'abc' * 5000), io.BytesIO(b'abc' * 5000))
    assert equal(io.BytesIO(b''), io.BytesIO(b''))


def test_streams_first_difference():
    result = _compare(io.BytesIO(b'abcdef'), io.BytesIO(b'abXdef'))
    assert result.failure_points == (FailurePoint(2, ord('c'), ord('X')),)

    # Difference past the first chunk
    result = _compare(io.BytesIO(b'a' * 5000 + b'b'), io.BytesIO(b'a' * 5000 + b'c'))
    assert result.failure_points[0].position == 5000


def test_streams_lengths():
    result = _compare(io.BytesIO(b'abc'), io.BytesIO(b'ab'))
    assert result.failure_points == (FailurePoint(2, ord('c'), None, actual_has_data=False),)


def test_streams_positions():
    """Compared from the current positions, which are restored afterwards"""
    left, right = io.BytesIO(b'xxabc'), io.BytesIO(b'abc')
    left.seek(2)
    assert equal(left, right)
    assert left.tell() == 2 and right.tell() == 0


class _Trickle(io.RawIOBase):
    """Raw stream returning at most 3 bytes per read"""
    def __init__(self, data):
        super().__init__()
        self._data = data
        self._pos = 0

    def readable(self):
        return True

    def seekable(self):
        return True

    def tell(self):
        return self._pos

    def seek(self, offset, whence=io.SEEK_SET):
        self._pos = offset if whence == io.SEEK_SET else self._pos + offset
        return self._pos

    def readinto(self, buffer):
        chunk = self._data[self._pos:self._pos + min(3, len(buffer))]
        buffer[:len(chunk)] = chunk
        self._pos += len(chunk)
        return len(chunk)


def test_streams_short_reads():
    """Raw streams returning fewer bytes than asked for are still compared byte for byte"""
    data = bytes(range(100)) * 50
    assert equal(io.BytesIO(data), _Trickle(data))
    assert equal(_Trickle(data), io.BytesIO(data))

    result = _compare(io.BytesIO(data), _Trickle(data[:-1] + b'\x00'))
    assert result.failure_points == (FailurePoint(len(data) - 1, 99, 0),)

    result = _compare(_Trickle(data), io.BytesIO(data[:-1]))
    assert result.failure_points == (FailurePoint(len(data) - 1, 99, None, actual_has_data=False),)


def test_streams_unreadable(tmp_path):
    with open(tmp_path / 'a.bin', 'wb') as a, open(tmp_path / 'b.bin', 'wb') as b:
        with pytest.raises(EqualityCheckingError):
            equal(a, b)


###############
# Directories #
###############


def _make_tree(root, files):
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    return root


def test_directories(tmp_path):
    files = {'a.txt': b'a', 'sub/b.txt': b'b', 'sub/deeper/c.txt': b'c'}
    left = _make_tree(tmp_path / 'left', files)
    right = _make_tree(tmp_path / 'right', files)
    assert equal(left, right)

    (right / 'sub' / 'b.txt').write_bytes(b'changed')
    result = _compare(left, right)
    assert not result
    assert result.failure_points[0].position == 'sub/b.txt'


def test_directories_membership(tmp_path):
    left = _make_tree(tmp_path / 'left', {'a.txt': b'a'})
    right = _make_tree(tmp_path / 'right', {'a.txt': b'a', 'extra.txt': b''})
    result = _compare(left, right)
    point = result.failure_points[0]
    assert point.position == 'extra.txt'
    assert not point.expected_has_data and point.actual_has_data

    # Same name, different kinds
    (left / 'extra.txt').mkdir()
    assert not equal(left, right)


def test_files_are_not_directories(tmp_path):
    a = _make_tree(tmp_path, {'a.txt': b'x', 'b.txt': b'x'})
    assert not equal(a / 'a.txt', a / 'b.txt')


#############
# Datetimes #
#############


_UTC_NOON = datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
_PLUS_2 = timezone(timedelta(hours=2))


def test_datetime_offsets():
    same_instant = datetime(2020, 1, 1, 14, 0, 0, tzinfo=_PLUS_2)
    assert equal(_UTC_NOON, same_instant)
    assert not equal(_UTC_NOON, same_instant, with_same_offset=True)
    assert equal(_UTC_NOON, _UTC_NOON.replace(), with_same_offset=True)


def test_datetime_offsets_tolerance():
    assert equal(_UTC_NOON, _UTC_NOON + timedelta(seconds=2), tolerance=Tolerance(2).seconds)
    assert not equal(_UTC_NOON, _UTC_NOON + timedelta(seconds=3), tolerance=Tolerance(2).seconds)
    assert not equal(_UTC_NOON, _UTC_NOON + timedelta(seconds=2))


def test_same_offset_excludes_tolerance():
    engine = ComparisonEngine(with_same_offset=True)
    with pytest.raises(ToleranceError):
        engine.compare(_UTC_NOON, _UTC_NOON, Tolerance(1).seconds)
    with pytest.raises(ToleranceError):
        engine.compare(1, 1, Tolerance(1))


def test_timespans():
    assert equal(timedelta(seconds=10), timedelta(seconds=11), tolerance=Tolerance(1).seconds)
    assert not equal(timedelta(seconds=10), timedelta(seconds=11))
    assert not equal(timedelta(seconds=10), timedelta(seconds=12), tolerance=Tolerance(1).seconds)

    naive = datetime(2020, 1, 1)
    assert equal(naive, naive + timedelta(minutes=1), tolerance=Tolerance(1).minutes)
    assert not equal(naive, naive + timedelta(minutes=1))
    assert not equal(naive, naive.replace(tzinfo=timezone.utc), tolerance=Tolerance(1).days)


##########
# Tuples #
##########


def test_tuples():
    assert equal((1, 'a', [2]), (1.0, 'A', [2]), ignore_case=True)
    assert equal(_Point(1, 2), (1, 2))
    assert not equal(_Point(1, 2), _Other(1, 2))

    result = _compare(_Point(1, 2), _Point(1, 3))
    assert result.failure_points == (FailurePoint('y', 2, 3),)

    result = _compare((1, 2), (1, 2, 3))
    assert result.failure_points == (FailurePoint(2, None, 3, expected_has_data=False),)


##############
# Structural #
##############


def test_dataclasses():
    assert equal(_Pair([1, 2], note='x'), _Pair([1, 2.0], note='y'))
    assert equal(_Pair(1.0), _Pair(1.05), tolerance=Tolerance(0.1))

    result = _compare(_Pair([1, 2]), _Pair([1, 3]))
    assert [p.position for p in result.failure_points] == ['first', 1]


def test_dataclass_own_eq():
    """A hand-written __eq__ on a dataclass is used instead of walking its fields"""
    assert equal(_Tag('Abc'), _Tag('aBC'))
    assert not equal(_Tag('Abc'), _Tag('abd'))
