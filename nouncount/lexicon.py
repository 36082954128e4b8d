"""Closed word lists and suffix heuristics for English word classification.

Every predicate here is a pure function of a single, already lowercased word.
Nothing is looked up in a dictionary: membership in a small hand-authored
list, or a suffix pattern, is all the evidence the parser gets.
"""
import re

# -----------------------------------------------------------------------------
# --- Closed Word Lists (Lexicon)
# -----------------------------------------------------------------------------

# Quantity terms. These never end up inside a segment.
QUANTIFIERS = {
    "any", "all", "many", "much", "most", "some", "few", "lot", "more",
    "little", "large", "none", "other", "another", "often", "multiple",
}

ARTICLES = {"a", "an", "the"}

# Auxiliary (helping) verbs, plus the negation that usually travels with them
AUXILIARY_VERBS = {
    "be", "am", "are", "is", "was", "were", "being",
    "can", "could",
    "do", "did", "does", "doing",
    "have", "had", "has", "having",
    "may", "might", "must", "shall", "should", "will", "would",
    "not",
}

PREPOSITIONS = {
    "aboard", "about", "above", "across", "after", "against", "along",
    "amid", "among", "anti", "around", "as", "at", "before", "behind",
    "below", "beneath", "beside", "besides", "between", "beyond", "but",
    "by", "concerning", "considering", "despite", "down", "during", "except",
    "excepting", "excluding", "following", "for", "from", "in", "inside",
    "into", "like", "minus", "near", "of", "off", "on", "onto", "opposite",
    "outside", "over", "past", "per", "plus", "regarding", "round", "save",
    "since", "than", "through", "to", "toward", "towards", "under",
    "underneath", "unlike", "until", "up", "upon", "versus", "via", "with",
    "within", "without",
    "because",  # not a preposition, but it closes a phrase the same way
}

# Determiners, with a few adverbs and linking verbs that behave like them
DETERMINERS = {
    "also", "too",
    "this", "that", "these", "those",
    "my", "your", "his", "her", "its", "our", "their",
    "all", "both", "half", "either", "neither", "each", "every",
    "other", "another", "such", "what", "which", "rather", "quite",
    "became", "become", "becoming",
}

CONJUNCTIONS = {"and", "or"}

# Words that introduce a subordinate clause. The word before them is taken
# to be the verb of the previous clause.
CLAUSE_TRIGGERS = {"when", "if"}

# Numeric tokens: optional surrounding ASCII whitespace, sign,
# ASCII integer or decimal part and an optional exponent.
_NUMERIC_PATTERN = re.compile(
    r"^[ \t\n\r\v\f]*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?[ \t\n\r\v\f]*$"
)


def strip_commas(word: str) -> str:
    """Return the word with every comma removed."""
    return word.replace(",", "")


def is_numeric(word: str) -> bool:
    return bool(_NUMERIC_PATTERN.match(word))


def is_quantifier(word: str) -> bool:
    return word in QUANTIFIERS or is_numeric(word)


def is_possessive(word: str) -> bool:
    return "'" in word


def is_article(word: str) -> bool:
    return word in ARTICLES


def is_auxiliary_verb(word: str) -> bool:
    return word in AUXILIARY_VERBS


def is_preposition(word: str, exceptions=()) -> bool:
    """
    Check preposition membership.

    Args:
        word: The word to test.
        exceptions: Prepositions that should not count as one for this call.
    """
    return word in PREPOSITIONS and word not in exceptions


def is_determiner(word: str) -> bool:
    return word in DETERMINERS


def is_conjunction(word: str) -> bool:
    return word in CONJUNCTIONS


def is_clause_trigger(word: str) -> bool:
    return word in CLAUSE_TRIGGERS


def has_trailing_comma(raw_word: str) -> bool:
    """Check the raw token (commas not stripped) for a trailing comma."""
    return raw_word.endswith(",")


# -----------------------------------------------------------------------------
# --- Suffix Heuristics
# -----------------------------------------------------------------------------

def is_guessed_verb(word: str) -> bool:
    """Past tense "-ed" (but not "-eed"/"-ied") or a "-ize" verb."""
    if word.endswith("ed") and not word.endswith(("eed", "ied")):
        return True
    return word.endswith("ize")


def is_guessed_adverb(word: str) -> bool:
    return word.endswith("ly")


def is_guessed_adjective(word: str) -> bool:
    """"-ional" words, or "-ing" words longer than five bytes (UTF-8)."""
    return word.endswith("ional") or (len(word.encode("utf-8")) > 5 and word.endswith("ing"))


def is_phrase_boundary(word: str, raw_word: str) -> bool:
    """
    Function words and commas close (or open) a noun phrase.

    Args:
        word: The comma-stripped word.
        raw_word: The token as it appeared in the sentence.
    """
    return (
        is_article(word)
        or is_auxiliary_verb(word)
        or is_preposition(word)
        or is_determiner(word)
        or has_trailing_comma(raw_word)
    )
