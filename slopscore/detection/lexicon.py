"""Module with lexicon-based sub-scores: overused words and trigrams."""

from collections import Counter
from collections.abc import Iterator, Sequence, Set

# Rates are expressed as hits per 1000 units.
RATE_MULTIPLIER = 1000


def iter_trigrams(tokens: Sequence[str]) -> Iterator[str]:
    """
    Slide a window of three consecutive tokens over a token sequence.

    Args:
        tokens (Sequence[str]): Lowercase word tokens.

    Yields:
        str: Tokens of each window joined with a single space.
    """
    for index in range(len(tokens) - 2):
        yield f"{tokens[index]} {tokens[index + 1]} {tokens[index + 2]}"


def count_word_hits(tokens: Sequence[str], word_set: Set[str]) -> Counter[str]:
    """
    Count tokens present in the overused word lexicon.

    Args:
        tokens (Sequence[str]): Lowercase word tokens.
        word_set (Set[str]): The overused word lexicon.

    Returns:
        Counter[str]: Number of occurrences of every matched word.
    """
    return Counter(token for token in tokens if token in word_set)


def count_trigram_hits(tokens: Sequence[str], trigram_set: Set[str]) -> Counter[str]:
    """
    Count trigram windows present in the overused trigram lexicon.

    Args:
        tokens (Sequence[str]): Lowercase word tokens.
        trigram_set (Set[str]): The overused trigram lexicon.

    Returns:
        Counter[str]: Number of occurrences of every matched trigram.
    """
    return Counter(
        trigram for trigram in iter_trigrams(tokens) if trigram in trigram_set
    )


def hits_per_1k(hits: int, units: int) -> float:
    """Express a number of hits per 1000 units, treating no units as one."""
    return hits / max(1, units) * RATE_MULTIPLIER


def word_score(tokens: Sequence[str], word_set: Set[str]) -> float:
    """
    Calculate the overused word rate of a token sequence.

    Args:
        tokens (Sequence[str]): Lowercase word tokens.
        word_set (Set[str]): The overused word lexicon.

    Returns:
        float: Matched words per 1000 words. 0.0 for an empty sequence.
    """
    hits = sum(count_word_hits(tokens, word_set).values())
    return hits_per_1k(hits, len(tokens))


def trigram_score(tokens: Sequence[str], trigram_set: Set[str]) -> float:
    """
    Calculate the overused trigram rate of a token sequence.

    Args:
        tokens (Sequence[str]): Lowercase word tokens.
        trigram_set (Set[str]): The overused trigram lexicon.

    Returns:
        float: Matched trigram windows per 1000 windows. 0.0 if there are fewer
            than three tokens.
    """
    hits = sum(count_trigram_hits(tokens, trigram_set).values())
    return hits_per_1k(hits, max(0, len(tokens) - 2))
