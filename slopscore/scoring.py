"""Module with the slop scoring pipeline."""

from functools import cache

from loguru import logger

from slopscore.configuration import Configuration, config
from slopscore.data_models import (
    ContrastMatch,
    ContrastStatus,
    ScoreDetails,
    ScoreMetrics,
    ScoreResult,
    ScoreWeights,
    SlopAssets,
)
from slopscore.detection import composite
from slopscore.detection.contrast.detector import ContrastDetector
from slopscore.detection.lexicon import (
    count_trigram_hits,
    count_word_hits,
    trigram_score,
    word_score,
)
from slopscore.errors import TaggingUnavailableError
from slopscore.nlp.normaliser import normalise
from slopscore.nlp.pos_tagger import NLTKPosTagger


def build_detector(configuration: Configuration = config) -> ContrastDetector:
    """
    Create the contrast detector described by the configuration.

    Args:
        configuration (Configuration, optional): Settings of the application.
            Defaults to the loaded configuration.

    Returns:
        ContrastDetector: A detector running the structural stage with the NLTK
            tagger, or a surface-only one if the structural stage is disabled.
    """
    tagger = (
        NLTKPosTagger(resource=configuration.nltk_tagger_resource)
        if configuration.stage2_enabled
        else None
    )
    return ContrastDetector(
        tagger=tagger, placeholder_mode=configuration.placeholder_mode
    )


@cache
def get_default_detector() -> ContrastDetector:
    """
    Get the detector shared by scorers not given one explicitly.

    Returns:
        ContrastDetector: The detector described by the loaded configuration.
    """
    return build_detector()


def compute_score(
    text: str,
    assets: SlopAssets,
    *,
    detector: ContrastDetector | None = None,
    degrade_on_tagging_failure: bool = False,
    weights: ScoreWeights = composite.DEFAULT_WEIGHTS,
) -> ScoreResult:
    """
    Score how strongly a text shows patterns typical of AI-generated prose.

    Args:
        text (str): Plain text to be scored.
        assets (SlopAssets): Lexicons and benchmark ranges.
        detector (ContrastDetector | None, optional): Detector of contrast
            patterns. Defaults to the detector described by the configuration.
            Pass `ContrastDetector(tagger=None)` to check surface rules only.
        degrade_on_tagging_failure (bool, optional): Whether to score without the
            contrast signal when the tagger fails, instead of raising.
            Defaults to False.
        weights (ScoreWeights, optional): Weights of the sub-scores.
            Defaults to the standard weights.

    Raises:
        TaggingUnavailableError: Raised if the tagger fails and
            `degrade_on_tagging_failure` is not set.

    Returns:
        ScoreResult: The score with its metrics and evidence.
    """
    if detector is None:
        detector = get_default_detector()

    normalized = normalise(text)
    tokens = normalized.tokens

    word_hits = count_word_hits(tokens, assets.words)
    trigram_hits = count_trigram_hits(tokens, assets.trigrams)
    word_rate = word_score(tokens, assets.words)
    trigram_rate = trigram_score(tokens, assets.trigrams)

    contrast_matches: list[ContrastMatch] = []
    contrast_rate: float | None
    status = detector.status
    try:
        contrast_matches = detector.detect(normalized)
        contrast_rate = detector.rate_per_1k(contrast_matches, normalized.char_count)
    except TaggingUnavailableError as exception:
        if not degrade_on_tagging_failure:
            raise
        logger.warning(
            f"Contrast detection unavailable, scoring without it: {exception}"
        )
        contrast_rate = None
        status = ContrastStatus.UNAVAILABLE

    slop_score = composite.score(
        word_rate=word_rate,
        trigram_rate=trigram_rate,
        contrast_rate=contrast_rate,
        ranges=assets.normalization_ranges,
        weights=weights,
    )
    logger.debug(
        f"Scored {normalized.word_count} words: words={word_rate:.2f}/1k, "
        f"trigrams={trigram_rate:.2f}/1k, contrast={contrast_rate}/1k chars, "
        f"score={slop_score}."
    )

    return ScoreResult(
        slop_score=slop_score,
        word_count=normalized.word_count,
        char_count=normalized.char_count,
        metrics=ScoreMetrics(
            word_rate_per_1k=word_rate,
            trigram_rate_per_1k=trigram_rate,
            contrast_rate_per_1k=contrast_rate,
        ),
        details=ScoreDetails(
            word_hits=word_hits.most_common(),
            trigram_hits=trigram_hits.most_common(),
            contrast_matches=contrast_matches,
            contrast_status=status,
        ),
    )


class SlopScorer:
    """Scorer reusing the same assets and detector for many texts."""

    def __init__(
        self,
        assets: SlopAssets,
        detector: ContrastDetector | None = None,
        degrade_on_tagging_failure: bool = False,
        weights: ScoreWeights = composite.DEFAULT_WEIGHTS,
    ) -> None:
        """
        Set up the scorer.

        Args:
            assets (SlopAssets): Lexicons and benchmark ranges.
            detector (ContrastDetector | None, optional): Detector of contrast
                patterns. Defaults to the detector described by the configuration.
            degrade_on_tagging_failure (bool, optional): Whether to score without
                the contrast signal when the tagger fails. Defaults to False.
            weights (ScoreWeights, optional): Weights of the sub-scores.
                Defaults to the standard weights.
        """
        self.assets = assets
        self.detector = detector or get_default_detector()
        self.degrade_on_tagging_failure = degrade_on_tagging_failure
        self.weights = weights

    def score(self, text: str) -> ScoreResult:
        """
        Score a plain text.

        Args:
            text (str): Plain text to be scored.

        Returns:
            ScoreResult: The score with its metrics and evidence.
        """
        return compute_score(
            text,
            self.assets,
            detector=self.detector,
            degrade_on_tagging_failure=self.degrade_on_tagging_failure,
            weights=self.weights,
        )
