"""
The built-in chain of comparers, in the fixed order the engine tries them
"""

from .arrays import ArraysComparer
from .base import ChainComparer
from .datetimes import DateTimeOffsetsComparer, TimeSpanToleranceComparer
from .dictionaries import DictionariesComparer, KeyValuePairsComparer
from .directories import DirectoriesComparer
from .enumerables import EnumerablesComparer
from .numerics import NumericsComparer
from .streams import StreamsComparer
from .strings import CharsComparer, StringsComparer
from .structural import EquatablesComparer, StructuralComparer
from .tuples import TuplesComparer
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import List
    from ..equality import ComparisonEngine


def build_chain(engine: 'ComparisonEngine') -> 'List[ChainComparer]':
    """Builds the chain for `engine`. Every comparer recurses through that same engine"""
    enumerables = EnumerablesComparer(engine)
    return [
        ArraysComparer(engine, enumerables),
        DictionariesComparer(engine),
        KeyValuePairsComparer(engine),
        StringsComparer(engine),
        StreamsComparer(engine),
        CharsComparer(engine),
        DirectoriesComparer(engine),
        NumericsComparer(engine),
        DateTimeOffsetsComparer(engine),
        TimeSpanToleranceComparer(engine),
        TuplesComparer(engine),
        StructuralComparer(engine),
        EquatablesComparer(engine),
        enumerables,
    ]


__all__ = [
    'ArraysComparer', 'ChainComparer', 'CharsComparer', 'DateTimeOffsetsComparer', 'DictionariesComparer',
    'DirectoriesComparer', 'EnumerablesComparer', 'EquatablesComparer', 'KeyValuePairsComparer', 'NumericsComparer',
    'StreamsComparer', 'StringsComparer', 'StructuralComparer', 'TimeSpanToleranceComparer', 'TuplesComparer',
    'build_chain',
]
