"""Module with part-of-speech taggers used by the structural contrast rules."""

import threading
from abc import ABC, abstractmethod
from typing_extensions import override

import nltk
from loguru import logger
from nltk.tokenize import RegexpTokenizer

from slopscore.configuration import config
from slopscore.errors import TaggingUnavailableError

# (surface value, Penn Treebank tag).
TaggedToken = tuple[str, str]


class PosTagger(ABC):
    """Interface of a part-of-speech tagger working on single sentences."""

    @abstractmethod
    def tag(self, sentence: str) -> list[TaggedToken]:
        """
        Tag words of a sentence with their parts of speech.

        Args:
            sentence (str): A sentence to be tagged.

        Returns:
            list[TaggedToken]: Pairs of a surface value and its Penn Treebank tag,
                in the order in which values appear in the sentence.

        Raises:
            TaggingUnavailableError: Raised if the sentence cannot be tagged.
        """


class NLTKPosTagger(PosTagger):
    """NLTK averaged perceptron tagger."""

    def __init__(self, resource: str = config.nltk_tagger_resource) -> None:
        """
        Prepare a tokeniser keeping contractions such as `doesn't` intact.

        Args:
            resource (str, optional): Name of the NLTK tagger model.
                Defaults to the value from the configuration.
        """
        self._resource = resource
        self._tokeniser = RegexpTokenizer(r"\w+(?:'\w+)*|[^\w\s]")
        self._lock = threading.Lock()
        self._ready = False

    def _ensure_model(self) -> None:
        if self._ready:
            return
        with self._lock:
            if self._ready:
                return
            try:
                nltk.data.find(f"taggers/{self._resource}")
            except LookupError:
                logger.info(f"Downloading NLTK resource `{self._resource}`...")
                if not nltk.download(self._resource, quiet=True):
                    raise TaggingUnavailableError(
                        f"NLTK resource `{self._resource}` could not be downloaded."
                    ) from None
            self._ready = True

    @override
    def tag(self, sentence: str) -> list[TaggedToken]:
        self._ensure_model()
        tokens = self._tokeniser.tokenize(sentence)
        if not tokens:
            return []
        try:
            return [(value, tag) for value, tag in nltk.pos_tag(tokens, lang="eng")]
        except (LookupError, ValueError) as exception:
            raise TaggingUnavailableError(
                f"NLTK failed to tag a sentence: {exception}"
            ) from exception
