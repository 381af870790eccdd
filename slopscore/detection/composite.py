"""Module combining the normalised sub-scores into the slop score."""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from slopscore.data_models import NormalizationRange, ScoreWeights

WORDS_METRIC = "slop_words"
TRIGRAMS_METRIC = "slop_trigrams"
CONTRAST_METRIC = "contrast"

DEFAULT_WEIGHTS = ScoreWeights()


def normalise_rate(rate: float, value_range: NormalizationRange | None) -> float:
    """
    Map a raw rate linearly onto [0, 1] using a calibrated range.

    Args:
        rate (float): A raw rate, e.g. hits per 1000 words.
        value_range (NormalizationRange | None): The calibrated range.

    Returns:
        float: The clamped normalised value. 0.0 for a missing or empty range.
    """
    if value_range is None or value_range.span == 0:
        return 0.0
    normalised = (rate - value_range.min) / value_range.span
    return max(0.0, min(1.0, normalised))


def round_half_away_from_zero(value: float, digits: int = 1) -> float:
    """
    Round a value, moving ties away from zero.

    Args:
        value (float): A value to be rounded.
        digits (int, optional): Number of decimal places. Defaults to 1.

    Returns:
        float: The rounded value.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def composite_score(
    normalised_word: float,
    normalised_trigram: float,
    normalised_contrast: float,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    Weigh normalised sub-scores into a 0-100 slop score.

    Args:
        normalised_word (float): Normalised overused word rate.
        normalised_trigram (float): Normalised overused trigram rate.
        normalised_contrast (float): Normalised contrast pattern rate.
        weights (ScoreWeights, optional): Weights of the sub-scores.
            Defaults to 0.60 for words, 0.25 for contrast and 0.15 for trigrams.

    Returns:
        float: The slop score rounded to one decimal place.
    """
    raw = (
        normalised_word * weights.word
        + normalised_contrast * weights.contrast
        + normalised_trigram * weights.trigram
    ) * 100
    return round_half_away_from_zero(raw, digits=1)


def score(
    word_rate: float,
    trigram_rate: float,
    contrast_rate: float | None,
    ranges: Mapping[str, NormalizationRange],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    Normalise raw rates against benchmark ranges and combine them.

    Args:
        word_rate (float): Overused words per 1000 words.
        trigram_rate (float): Overused trigrams per 1000 windows.
        contrast_rate (float | None): Contrast patterns per 1000 characters.
            None if the contrast detection was unavailable; it contributes 0.
        ranges (Mapping[str, NormalizationRange]): Benchmark ranges by metric.
        weights (ScoreWeights, optional): Weights of the sub-scores.
            Defaults to the standard weights.

    Returns:
        float: The slop score rounded to one decimal place.
    """
    normalised_contrast = (
        0.0
        if contrast_rate is None
        else normalise_rate(contrast_rate, ranges.get(CONTRAST_METRIC))
    )
    return composite_score(
        normalised_word=normalise_rate(word_rate, ranges.get(WORDS_METRIC)),
        normalised_trigram=normalise_rate(trigram_rate, ranges.get(TRIGRAMS_METRIC)),
        normalised_contrast=normalised_contrast,
        weights=weights,
    )
