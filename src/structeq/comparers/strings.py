"""
Strings and single characters
"""

from .base import ChainComparer
from ..pytypes import is_single_char


class StringsComparer(ChainComparer):
    """Case-sensitive by default. With the engine's `ignore_case` flag, strings are compared casefolded"""

    def attempt(self, left, right, tolerance, state):
        if not (isinstance(left, str) and isinstance(right, str)):
            return None
        if is_single_char(left) and is_single_char(right):
            return None

        if self.engine.ignore_case:
            return left.casefold() == right.casefold()
        return str.__eq__(left, right)


class CharsComparer(ChainComparer):
    """Single characters. Ignores case the same way StringsComparer does"""

    def attempt(self, left, right, tolerance, state):
        if not (is_single_char(left) and is_single_char(right)):
            return None

        if self.engine.ignore_case:
            return left.casefold() == right.casefold()
        return ord(left) == ord(right)
