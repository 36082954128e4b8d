"""
Noun occurrence dictionary.

Collects parsed sentences and counts how often each noun phrase occurs
across all of them.

Usage:
    dictionary = Dictionary()
    for paragraph in paragraphs:
        dictionary.add_paragraph(paragraph)

    for noun, count in dictionary.most_common(10):
        print(noun, count)
"""

import json
import logging
import re
import threading
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from nouncount.parser import Sentence
from nouncount.segment import Segment, SegmentKind

logger = logging.getLogger(__name__)

# Innermost parenthesised group; applied until nothing matches, which removes
# nested groups from the inside out.
_PARENTHESES = re.compile(r"\([^()]*\)")
_BRACKETS = re.compile(r"\[[^\]]*\]")
_QUOTES = ('"', '“', '”')


def split_components(text: str = '') -> List[str]:
    """
    Split a paragraph into candidate sentences.

    Parenthesised and bracketed asides are removed along with their content,
    double quotes are dropped, and what is left is split on full stops.
    Components are returned untrimmed.
    """
    previous = None
    while previous != text:
        previous = text
        text = _PARENTHESES.sub('', text)

    text = _BRACKETS.sub('', text)
    for quote in _QUOTES:
        text = text.replace(quote, '')

    return text.split('.')


class Dictionary:
    """
    Thread-safe collection of parsed sentences.

    Sentences are parsed by the caller's thread; only the append to the
    shared sentence list is serialized. Noun counts are derived from the
    stored sentences whenever they are requested.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._sentences: List[Sentence] = []

    split_components = staticmethod(split_components)

    def add_paragraph(self, paragraph: str = '') -> "Dictionary":
        """Parse every sentence of a paragraph and register it."""
        components = split_components(paragraph)
        for component in components:
            self.add_sentence(Sentence(component))
        logger.debug(f"Added paragraph with {len(components)} component(s)")
        return self

    def add_paragraphs(self, paragraphs: Iterable[str]) -> "Dictionary":
        for paragraph in paragraphs:
            self.add_paragraph(paragraph)
        return self

    def add_sentence(self, sentence: Sentence) -> "Dictionary":
        """
        Register a parsed sentence.

        Sentences without content are ignored.

        Raises:
            TypeError: If the argument is not a Sentence.
        """
        if not isinstance(sentence, Sentence):
            raise TypeError(f"Expected a Sentence, got {type(sentence).__name__}")

        if not sentence.content:
            return self

        with self._lock:
            self._sentences.append(sentence)
        return self

    @property
    def sentences(self) -> Tuple[Sentence, ...]:
        with self._lock:
            return tuple(self._sentences)

    def nouns(self) -> List[Segment]:
        """All noun segments, in sentence order."""
        return [
            segment
            for sentence in self.sentences
            for segment in sentence.segments
            if segment.kind is SegmentKind.NOUN
        ]

    def noun_occurrences(self) -> Counter:
        """Map each noun phrase text to the number of times it occurs."""
        return Counter(segment.text() for segment in self.nouns())

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        return self.noun_occurrences().most_common(n)

    def to_json(self, indent=2) -> str:
        return json.dumps(dict(self.most_common()), indent=indent, ensure_ascii=False)

    def save(self, path) -> Path:
        """
        Write the noun occurrence table to a JSON file.

        Args:
            path: Destination file

        Returns:
            The path written to
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json())
        logger.info(f"Saved {len(self.noun_occurrences())} noun phrase(s) to {path}")
        return path

    def __len__(self) -> int:
        with self._lock:
            return len(self._sentences)
