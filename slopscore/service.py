"""Module with the service scoring user-submitted texts."""

import time

from loguru import logger
from pydantic import BaseModel, ConfigDict

from slopscore.assets import AssetProvider
from slopscore.configuration import config
from slopscore.data_models import SUPPORTED_LANGUAGE, ScoreResult
from slopscore.detection.contrast.detector import ContrastDetector
from slopscore.errors import (
    InputTooLargeError,
    InsufficientTextError,
    UnsupportedLanguageError,
)
from slopscore.nlp.sanitiser import sanitise
from slopscore.scoring import compute_score, get_default_detector


class ServiceScore(BaseModel):
    """A score along with the time it took to compute it."""

    result: ScoreResult
    compute_ms: float

    model_config = ConfigDict(frozen=True)


class SlopScoreService:
    """Entry point for scoring raw texts coming from users."""

    def __init__(
        self,
        asset_provider: AssetProvider | None = None,
        detector: ContrastDetector | None = None,
        max_words: int = config.max_words,
        degrade_on_tagging_failure: bool = config.degrade_on_tagging_failure,
    ) -> None:
        """
        Set up the service.

        Args:
            asset_provider (AssetProvider | None, optional): Source of lexicons
                and benchmark ranges. Defaults to the bundled assets.
            detector (ContrastDetector | None, optional): Detector of contrast
                patterns. Defaults to the one described by the configuration.
            max_words (int, optional): The maximum number of words in a text.
                Defaults to the value from the configuration.
            degrade_on_tagging_failure (bool, optional): Whether to score without
                the contrast signal when the tagger fails.
                Defaults to the value from the configuration.
        """
        self.asset_provider = asset_provider or AssetProvider()
        self.detector = detector or get_default_detector()
        self.max_words = max_words
        self.degrade_on_tagging_failure = degrade_on_tagging_failure

    def compute_score_from_text(
        self, text: str, language: str = SUPPORTED_LANGUAGE
    ) -> ServiceScore:
        """
        Clean up a text of markup and score it.

        Args:
            text (str): Plain, Markdown or HTML text.
            language (str, optional): Language of the text. Defaults to "english".

        Raises:
            UnsupportedLanguageError: Raised for a language other than English.
            InputTooLargeError: Raised if the text has too many words.
            InsufficientTextError: Raised if nothing is left after removing markup.
            AssetsUnavailableError: Raised if the assets cannot be loaded.
            TaggingUnavailableError: Raised if the tagger fails and degrading
                is not allowed.

        Returns:
            ServiceScore: The score and the computation time in milliseconds.
        """
        if language.lower() != SUPPORTED_LANGUAGE:
            raise UnsupportedLanguageError(language)

        started = time.perf_counter()
        cleaned = sanitise(text)
        word_count = len(cleaned.split())
        if word_count > self.max_words:
            raise InputTooLargeError(actual=word_count, maximum=self.max_words)
        if not cleaned:
            raise InsufficientTextError("The text is empty after removing markup.")

        logger.debug(f"Scoring a text of {word_count} words.")
        result = compute_score(
            cleaned,
            self.asset_provider.get(),
            detector=self.detector,
            degrade_on_tagging_failure=self.degrade_on_tagging_failure,
            weights=config.weights,
        )
        compute_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            f"Scored the text at {result.slop_score} in {compute_ms:.1f} ms."
        )
        return ServiceScore(result=result, compute_ms=compute_ms)
