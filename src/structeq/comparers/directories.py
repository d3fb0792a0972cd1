"""
Filesystem directory trees
"""

import filecmp
from pathlib import Path, PurePosixPath
from .base import ChainComparer


def _is_dir(obj):
    return isinstance(obj, Path) and obj.is_dir()


class DirectoriesComparer(ChainComparer):
    """
    Two directories are equal if, at every level, they hold entries with the same names and kinds, and every pair of
        files holds the same bytes. The failure position is the path of the first differing entry, relative to the
        compared directories.
    """

    def attempt(self, left, right, tolerance, state):
        if not (_is_dir(left) and _is_dir(right)):
            return None
        return self._compare_trees(left, right, PurePosixPath(), state, set())

    def _compare_trees(self, left, right, relative, state, visited):
        # Symlinked directories can loop back on themselves
        key = (left.resolve(), right.resolve())
        if key in visited:
            return True
        visited.add(key)

        left_entries = {p.name: p for p in left.iterdir()}
        right_entries = {p.name: p for p in right.iterdir()}

        for name in sorted(set(left_entries) | set(right_entries)):
            position = str(relative / name)
            left_entry, right_entry = left_entries.get(name), right_entries.get(name)

            if left_entry is None or right_entry is None:
                state.record_failure(position, left_entry, right_entry, expected_has_data=left_entry is not None,
                    actual_has_data=right_entry is not None)
                return False

            if left_entry.is_dir() != right_entry.is_dir():
                state.record_failure(position, left_entry, right_entry)
                return False

            if left_entry.is_dir():
                if not self._compare_trees(left_entry, right_entry, relative / name, state, visited):
                    return False
            elif not filecmp.cmp(left_entry, right_entry, shallow=False):
                state.record_failure(position, left_entry, right_entry)
                return False

        return True
