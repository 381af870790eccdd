"""Module for splitting a text into sentences."""

import re
from abc import ABC, abstractmethod
from typing_extensions import override

from slopscore.data_models import SentenceSpan


class SentenceSplitter(ABC):
    """Interface for splitting a text into sentences."""

    @abstractmethod
    def split_into_spans(self, text: str) -> list[SentenceSpan]:
        """
        Split a text into sentences given as character offsets.

        Args:
            text (str): Text to be split.

        Returns:
            list[SentenceSpan]: Sorted, non-overlapping (start, end) offsets
                covering the whole text.
        """


class TerminatorSentenceSplitter(SentenceSplitter):
    """Splitter cutting a text after every `.`, `!` and `?`."""

    # No lookahead for abbreviations or decimal points.
    _SENTENCE = re.compile(r"[^.!?]*[.!?]", flags=re.DOTALL)

    @override
    def split_into_spans(self, text: str) -> list[SentenceSpan]:
        spans: list[SentenceSpan] = []
        last_end = 0
        for match in self._SENTENCE.finditer(text):
            spans.append((match.start(), match.end()))
            last_end = match.end()

        # Trailing text without a terminator is a sentence as well.
        if last_end < len(text):
            spans.append((last_end, len(text)))
        return spans
