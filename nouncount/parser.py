"""A rule-and-heuristic sentence parser for English noun phrase extraction.

The parser does not use a tagger, a trained model or a grammar library. It
walks the words of one sentence from left to right, classifies each word with
the closed lists and suffix guesses in `nouncount.lexicon`, and keeps at most
one open noun segment that grows until a function word, a comma or a guessed
verb/adverb closes it.

Rules are tried in a fixed order and the first match wins:

    quantifier > possessive > clause boundary > guessed verb > guessed adverb
    > guessed adjective > (open segment) conjunction / boundary / accumulate
    > (no open segment) open / subject / drop

A guessed adjective ends the whole parse: nothing after it is examined.
"""
import logging
from enum import Enum
from typing import List, Optional

from nouncount import lexicon
from nouncount.logging_config import log_with_context
from nouncount.segment import Segment, SegmentKind
from nouncount.trace import ParseTrace

logger = logging.getLogger(__name__)


class Rule(Enum):
    """The parser rules, in precedence order"""
    QUANTIFIER = "quantifier"
    POSSESSIVE = "possessive"
    CLAUSE_BOUNDARY = "clause_boundary"
    GUESSED_VERB = "guessed_verb"
    GUESSED_ADVERB = "guessed_adverb"
    GUESSED_ADJECTIVE = "guessed_adjective"
    # Only reachable while a segment is open
    CONJUNCTION = "conjunction"
    BOUNDARY = "boundary"
    ACCUMULATE = "accumulate"
    # Only reachable while no segment is open
    OPEN = "open"
    SUBJECT = "subject"
    DROP = "drop"


# Rules after which no further words are examined
TERMINAL_RULES = {Rule.GUESSED_ADJECTIVE}


class Sentence:
    """
    A single sentence and the segments parsed out of it.

    The sentence is parsed on construction. All parse state (cursor, open
    segment, finalized segments) belongs to this object alone, so separate
    sentences can be parsed independently.
    """

    def __init__(self, content: str = '', trace: Optional[ParseTrace] = None):
        content = content.strip()
        self.content = content
        # Split on single spaces only; runs of spaces give empty tokens
        self.words = content.lower().split(' ')
        self.position = -1
        self.open_segment: Optional[Segment] = None
        self.segments: List[Segment] = []
        self.trace = trace
        self._parsed = False

        self._handlers = {
            Rule.QUANTIFIER: self._skip,
            Rule.POSSESSIVE: self._skip,
            Rule.CLAUSE_BOUNDARY: self._split_clause,
            Rule.GUESSED_VERB: self._emit_verb,
            Rule.GUESSED_ADVERB: self._emit_adverb,
            Rule.GUESSED_ADJECTIVE: self._emit_adjective,
            Rule.CONJUNCTION: self._close_on_conjunction,
            Rule.BOUNDARY: self._close_on_boundary,
            Rule.ACCUMULATE: self._accumulate,
            Rule.OPEN: self._open,
            Rule.SUBJECT: self._open_subject,
            Rule.DROP: self._drop,
        }

        self.parse()

    # -------------------------------------------------------------------------
    # --- Cursor access
    # -------------------------------------------------------------------------

    @property
    def raw_word(self) -> str:
        """The current token, punctuation included."""
        return self.words[self.position]

    @property
    def word(self) -> str:
        """The current token with commas removed."""
        return lexicon.strip_commas(self.raw_word)

    @property
    def previous_word(self) -> Optional[str]:
        """The raw token before the cursor, or None at the start of the sentence."""
        if self.position < 1:
            return None
        return self.words[self.position - 1]

    def is_first_word(self) -> bool:
        return self.position == 0

    def add_segment(self, segment: Optional[Segment]) -> "Sentence":
        """Finalize a copy of the segment. Missing or empty segments are ignored."""
        if segment is None or segment.is_empty():
            return self
        self.segments.append(segment.copy())
        return self

    # -------------------------------------------------------------------------
    # --- Classification
    # -------------------------------------------------------------------------

    def classify(self) -> Rule:
        """Pick the rule for the word under the cursor."""
        word = self.word
        raw_word = self.raw_word

        if lexicon.is_quantifier(word):
            return Rule.QUANTIFIER
        if lexicon.is_possessive(word):
            return Rule.POSSESSIVE
        if lexicon.is_clause_trigger(word):
            return Rule.CLAUSE_BOUNDARY
        if lexicon.is_guessed_verb(word):
            return Rule.GUESSED_VERB
        if lexicon.is_guessed_adverb(word):
            return Rule.GUESSED_ADVERB
        if lexicon.is_guessed_adjective(word):
            return Rule.GUESSED_ADJECTIVE

        if self.open_segment is not None:
            if lexicon.is_conjunction(word):
                return Rule.CONJUNCTION
            if lexicon.is_phrase_boundary(word, raw_word):
                return Rule.BOUNDARY
            return Rule.ACCUMULATE

        if lexicon.is_phrase_boundary(word, raw_word):
            return Rule.OPEN
        if self.is_first_word():
            return Rule.SUBJECT
        return Rule.DROP

    # -------------------------------------------------------------------------
    # --- Rule handlers (each returns a short description for the trace)
    # -------------------------------------------------------------------------

    def _skip(self) -> str:
        return "ignored"

    def _split_clause(self) -> str:
        # "when"/"if" usually follows the verb of the previous clause, which
        # plain accumulation has already swallowed into the open noun.
        previous = self.previous_word
        if previous is None:
            return "ignored at sentence start"
        if lexicon.is_preposition(previous):
            return "ignored after preposition"

        verb = Segment.verb(previous)
        if self.open_segment is not None and not self.open_segment.is_empty():
            # Pops whatever word is last, even if it is not the previous token
            self.open_segment.pop_word()
            self.add_segment(self.open_segment)
            self.open_segment = Segment.noun()

        self.add_segment(verb)
        return f"re-tagged {previous!r} as verb"

    def _emit_single(self, kind: SegmentKind) -> str:
        self.add_segment(self.open_segment)
        self.add_segment(Segment(kind, [self.word]))
        self.open_segment = Segment.noun()
        return f"emitted {kind.value}"

    def _emit_verb(self) -> str:
        return self._emit_single(SegmentKind.VERB)

    def _emit_adverb(self) -> str:
        return self._emit_single(SegmentKind.ADVERB)

    def _emit_adjective(self) -> str:
        # The open segment is abandoned, not flushed
        self.add_segment(Segment.adjective(self.word))
        self.open_segment = Segment.noun()
        return "emitted adjective, parse stopped"

    def _close_on_conjunction(self) -> str:
        self.add_segment(self.open_segment)
        self.open_segment = Segment.noun()
        return "closed noun"

    def _close_on_boundary(self) -> str:
        if lexicon.has_trailing_comma(self.raw_word):
            self.open_segment.add_word(self.word)
        self.add_segment(self.open_segment)
        self.open_segment = Segment.noun()
        return "closed noun"

    def _accumulate(self) -> str:
        self.open_segment.add_word(self.word)
        return "appended to noun"

    def _open(self) -> str:
        self.open_segment = Segment.noun()
        if self.is_first_word() and lexicon.has_trailing_comma(self.raw_word):
            self.open_segment.add_word(self.word)
        return "opened noun"

    def _open_subject(self) -> str:
        self.open_segment = Segment.noun(self.word)
        return "opened noun with subject"

    def _drop(self) -> str:
        return "dropped"

    # -------------------------------------------------------------------------
    # --- Driver
    # -------------------------------------------------------------------------

    def parse(self) -> "Sentence":
        """
        Run the state machine over every word of the sentence.

        Parsing happens once; calling this again is a no-op.
        """
        if self._parsed:
            return self
        self._parsed = True

        while self.position < len(self.words) - 1:
            self.position += 1
            rule = self.classify()
            action = self._handlers[rule]()

            if self.trace is not None:
                self.trace.add_step(self.position, self.raw_word, rule.value, action)

            if rule in TERMINAL_RULES:
                break

        # Add the remaining segment, if applicable
        if self.open_segment is not None and not self.open_segment.is_empty():
            self.add_segment(self.open_segment)
            self.open_segment = None

        if self.trace is not None:
            self.trace.set_result(self.segments)

        if logger.isEnabledFor(logging.DEBUG):
            log_with_context(
                f"Parsed sentence into {len(self.segments)} segment(s)",
                context={
                    "content": self.content,
                    "segments": [f"{s.kind.value}: {s}" for s in self.segments],
                },
                logger=logger,
            )

        return self

    def nouns(self) -> List[Segment]:
        return [segment for segment in self.segments if segment.kind is SegmentKind.NOUN]

    def debug_lines(self) -> List[str]:
        """The content followed by the text of each segment."""
        return [self.content] + [str(segment) for segment in self.segments]


def parse(text: str) -> List[Segment]:
    """
    Parses one sentence and returns its segments in order.

    Never raises for string input; empty or blank text gives an empty list.
    """
    return Sentence(text).segments
