# This file makes the 'nouncount' directory a Python package.

from nouncount.segment import Segment, SegmentKind
from nouncount.parser import Sentence, Rule, parse
from nouncount.dictionary import Dictionary, split_components
from nouncount.trace import ParseTrace

__all__ = [
    'Segment',
    'SegmentKind',
    'Sentence',
    'Rule',
    'parse',
    'Dictionary',
    'split_components',
    'ParseTrace',
]
