"""
Grammatical segments produced by the sentence parser.

A segment is an ordered run of words tagged with one part of speech. The
parser owns the single open segment while it is being built; everything it
finalizes is a copy, so later edits to the open segment never leak into the
results.
"""
from enum import Enum
from typing import Iterable, List, Optional


def _is_blank(word: str) -> bool:
    # A bare "0" is treated as an empty word
    return not word or not word.strip() or word.strip() == "0"


class SegmentKind(Enum):
    """Part of speech carried by a segment"""
    NOUN = "noun"
    VERB = "verb"
    ADVERB = "adverb"
    ADJECTIVE = "adjective"


class Segment:
    """A tagged, ordered accumulator of words."""

    def __init__(self, kind: SegmentKind, words: Optional[Iterable[str]] = None):
        self.kind = kind
        self._words: List[str] = []
        for word in words or ():
            self.add_word(word)

    @classmethod
    def noun(cls, *words: str) -> "Segment":
        return cls(SegmentKind.NOUN, words)

    @classmethod
    def verb(cls, *words: str) -> "Segment":
        return cls(SegmentKind.VERB, words)

    @classmethod
    def adverb(cls, *words: str) -> "Segment":
        return cls(SegmentKind.ADVERB, words)

    @classmethod
    def adjective(cls, *words: str) -> "Segment":
        return cls(SegmentKind.ADJECTIVE, words)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def add_word(self, word: str) -> "Segment":
        """Append a word. Blank words and a bare "0" are ignored."""
        if _is_blank(word):
            return self
        self._words.append(word)
        return self

    def pop_word(self) -> "Segment":
        """Remove the most recently added word, if there is one."""
        if self._words:
            self._words.pop()
        return self

    def is_empty(self) -> bool:
        return not self._words

    def copy(self) -> "Segment":
        return Segment(self.kind, self._words)

    def text(self) -> str:
        """The segment's words joined by single spaces."""
        return " ".join(word for word in self._words if not _is_blank(word))

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "words": self.words, "text": self.text()}

    def __len__(self) -> int:
        return len(self._words)

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        return f"Segment({self.kind.name}, {self._words!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.kind is other.kind and self._words == other._words

    __hash__ = None
