"""
Binary streams
"""

from .base import ChainComparer
from ..errors import EqualityCheckingError
from ..pytypes import is_stream


_CHUNK_SIZE = 4096


def _check_stream(stream, name):
    readable = getattr(stream, 'readable', None)
    if readable is not None and not readable():
        raise EqualityCheckingError("Cannot compare streams: %s stream is not readable" % name)
    seekable = getattr(stream, 'seekable', None)
    if seekable is not None and not seekable():
        raise EqualityCheckingError("Cannot compare streams: %s stream is not seekable" % name)


def _read_chunk(stream):
    """Reads a full chunk, or less only at the end of the stream. Raw streams may return fewer bytes per read"""
    chunk = bytearray()
    while len(chunk) < _CHUNK_SIZE:
        data = stream.read(_CHUNK_SIZE - len(chunk))
        if not data:
            break
        chunk.extend(data)
    return bytes(chunk)


class StreamsComparer(ChainComparer):
    """
    Compares the bytes of two streams, from their current positions to their ends. Both positions are restored
        afterwards. The failure position is the offset (from the starting positions) of the first differing byte, or
        the length of the shorter stream if one is a prefix of the other.
    """

    def attempt(self, left, right, tolerance, state):
        if not (is_stream(left) and is_stream(right)):
            return None

        _check_stream(left, 'expected')
        _check_stream(right, 'actual')

        left_start, right_start = left.tell(), right.tell()
        try:
            return self._compare_bytes(left, right, state)
        finally:
            left.seek(left_start)
            right.seek(right_start)

    def _compare_bytes(self, left, right, state):
        offset = 0
        while True:
            left_chunk, right_chunk = _read_chunk(left), _read_chunk(right)

            if left_chunk != right_chunk:
                for i, (left_byte, right_byte) in enumerate(zip(left_chunk, right_chunk)):
                    if left_byte != right_byte:
                        state.record_failure(offset + i, left_byte, right_byte)
                        return False

                # One chunk is a prefix of the other, so one stream ended early
                shorter = min(len(left_chunk), len(right_chunk))
                left_has_data, right_has_data = len(left_chunk) > shorter, len(right_chunk) > shorter
                state.record_failure(offset + shorter,
                    left_chunk[shorter] if left_has_data else None,
                    right_chunk[shorter] if right_has_data else None,
                    expected_has_data=left_has_data, actual_has_data=right_has_data)
                return False

            if not left_chunk:
                return True
            offset += len(left_chunk)
