"""Module with natural language tokenisers."""

import re
from abc import ABC, abstractmethod
from typing_extensions import override

from slopscore.nlp.normaliser import normalise_quotes


class Tokeniser(ABC):
    """An interface of a natural language tokeniser."""

    @abstractmethod
    def tokenise(self, text: str) -> list[str]:
        """
        Split a text into textual tokens.

        Args:
            text (str): A text to be split.

        Returns:
            list[str]: A list of resulting textual tokens.

        """


class SlopTokeniser(Tokeniser):
    """Lowercase word tokeniser matching the tokenisation of the slop lexicons."""

    _WORD_RUN = re.compile(r"[a-z']+")
    _ALPHA_TOKEN = re.compile(r"[a-z]+(?:'[a-z]+)?")

    def words_only_lower(self, text: str) -> list[str]:
        """
        Extract runs of letters and apostrophes from a lowercased text.

        Args:
            text (str): A text to be split.

        Returns:
            list[str]: Non-empty runs without leading or trailing apostrophes.
        """
        runs = self._WORD_RUN.findall(normalise_quotes(text.lower()))
        stripped = (run.strip("'") for run in runs)
        return [token for token in stripped if token]

    def alpha_tokens(self, tokens: list[str]) -> list[str]:
        """
        Keep only words and words with a single inner apostrophe.

        Args:
            tokens (list[str]): Tokens returned by `words_only_lower()`.

        Returns:
            list[str]: Tokens such as `delve` or `it's`, but not `rock'n'roll`.
        """
        return [token for token in tokens if self._ALPHA_TOKEN.fullmatch(token)]

    @override
    def tokenise(self, text: str) -> list[str]:
        return self.alpha_tokens(self.words_only_lower(text))
