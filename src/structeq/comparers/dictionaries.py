"""
Mappings, and the key/value entries they are made of
"""

from collections.abc import Mapping
from .base import ChainComparer


def _index_keys(keys):
    """Maps each hashable key to its position in `keys`"""
    index = {}
    for position, key in enumerate(keys):
        try:
            index.setdefault(key, position)
        except TypeError:
            pass
    return index


class DictionariesComparer(ChainComparer):
    """
    Compares two mappings regardless of their order. Every key of either mapping must be matched with exactly one key
        of the other, and the values under matched keys must be equal.

    Keys are matched through the engine so that its rules (ignoring case, tolerances, external comparers) apply to
        keys as well. A hash lookup only picks the first candidate to try: `1` and `True` hash the same, but are
        different keys.
    """

    def attempt(self, left, right, tolerance, state):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return None

        right_keys = list(right)
        index = _index_keys(right_keys)
        matched = set()

        for key, left_value in left.items():
            position = self._find_key(key, right_keys, index, matched, tolerance, state)
            if position is None:
                state.record_failure(key, left_value, None, actual_has_data=False)
                return False
            matched.add(position)

            right_value = right[right_keys[position]]
            if not self.engine.are_equal(left_value, right_value, tolerance, state):
                state.record_failure(key, left_value, right_value)
                return False

        for position, key in enumerate(right_keys):
            if position not in matched:
                state.record_failure(key, None, right[key], expected_has_data=False)
                return False

        return True

    def _find_key(self, key, right_keys, index, matched, tolerance, state):
        """Returns the position of the first not-yet-matched key of `right_keys` equal to `key`, or None"""
        try:
            hashed = index.get(key)
        except TypeError:
            hashed = None

        with state.probe():
            if hashed is not None and hashed not in matched \
                    and self.engine.are_equal(key, right_keys[hashed], tolerance, state):
                return hashed

            for position, candidate in enumerate(right_keys):
                if position == hashed or position in matched:
                    continue
                if self.engine.are_equal(key, candidate, tolerance, state):
                    return position

        return None


def _is_entry(obj):
    return not isinstance(obj, Mapping) and hasattr(obj, 'key') and hasattr(obj, 'value')


class KeyValuePairsComparer(ChainComparer):
    """Single key/value entries: any two objects exposing `key` and `value` attributes. Both parts must be equal"""

    def attempt(self, left, right, tolerance, state):
        if not (_is_entry(left) and _is_entry(right)):
            return None

        for part in ('key', 'value'):
            left_part, right_part = getattr(left, part), getattr(right, part)
            if not self.engine.are_equal(left_part, right_part, tolerance, state):
                state.record_failure(part, left_part, right_part)
                return False

        return True
