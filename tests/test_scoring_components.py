import pytest
from pydantic import ValidationError

from slopscore.data_models import NormalizationRange, ScoreWeights
from slopscore.detection.composite import (
    CONTRAST_METRIC,
    TRIGRAMS_METRIC,
    WORDS_METRIC,
    composite_score,
    normalise_rate,
    round_half_away_from_zero,
    score,
)
from slopscore.detection.lexicon import (
    count_trigram_hits,
    count_word_hits,
    iter_trigrams,
    trigram_score,
    word_score,
)

RANGES = {
    WORDS_METRIC: NormalizationRange(min=0.0, max=100.0),
    TRIGRAMS_METRIC: NormalizationRange(min=0.0, max=10.0),
    CONTRAST_METRIC: NormalizationRange(min=0.0, max=2.0),
}


def test_iter_trigrams():
    """Windows of three consecutive tokens are joined with spaces."""
    assert list(iter_trigrams(["a", "b", "c", "d"])) == ["a b c", "b c d"]
    assert list(iter_trigrams(["a", "b"])) == []


def test_word_hits_and_rate():
    """Every occurrence of a lexicon word counts."""
    tokens = ["delve", "into", "the", "delve"]
    assert count_word_hits(tokens, {"delve"}) == {"delve": 2}
    assert word_score(tokens, {"delve"}) == pytest.approx(500.0)


def test_trigram_rate_uses_number_of_windows():
    """The trigram rate is relative to the number of windows."""
    tokens = ["it", "is", "important", "to", "note"]
    lexicon = {"it is important", "important to note"}
    assert count_trigram_hits(tokens, lexicon) == {
        "it is important": 1,
        "important to note": 1,
    }
    assert trigram_score(tokens, lexicon) == pytest.approx(2 / 3 * 1000)


def test_rates_of_short_inputs_are_zero():
    """Too short inputs never divide by zero."""
    assert word_score([], {"delve"}) == 0.0
    assert trigram_score(["it", "is"], {"it is important"}) == 0.0


def test_normalise_rate_clamps():
    """Rates outside of the range are clamped to [0, 1]."""
    value_range = NormalizationRange(min=10.0, max=20.0)
    assert normalise_rate(15.0, value_range) == pytest.approx(0.5)
    assert normalise_rate(5.0, value_range) == 0.0
    assert normalise_rate(25.0, value_range) == 1.0


def test_normalise_rate_of_missing_or_empty_range():
    """A missing or zero-width range contributes nothing."""
    assert normalise_rate(5.0, None) == 0.0
    assert normalise_rate(5.0, NormalizationRange(min=3.0, max=3.0)) == 0.0


def test_round_half_away_from_zero():
    """Ties are rounded away from zero."""
    assert round_half_away_from_zero(0.25) == 0.3
    assert round_half_away_from_zero(2.45) == 2.5
    assert round_half_away_from_zero(-0.25) == -0.3
    assert round_half_away_from_zero(12.34) == 12.3


def test_composite_score_weights():
    """Saturated signals add up to their weights."""
    assert composite_score(1.0, 1.0, 1.0) == 100.0
    assert composite_score(1.0, 0.0, 0.0) == 60.0
    assert composite_score(0.0, 1.0, 0.0) == 15.0
    assert composite_score(0.0, 0.0, 1.0) == 25.0
    assert composite_score(0.0, 0.0, 0.0) == 0.0


def test_score_ignores_unavailable_contrast():
    """A missing contrast rate contributes zero."""
    assert score(200.0, 0.0, None, RANGES) == 60.0
    assert score(0.0, 0.0, 1.0, RANGES) == 12.5


def test_weights_have_to_sum_up_to_one():
    """Weights summing up to anything else than 1.0 are rejected."""
    with pytest.raises(ValidationError):
        ScoreWeights(word=0.5, contrast=0.25, trigram=0.15)
    assert ScoreWeights(word=0.5, contrast=0.35, trigram=0.15).word == 0.5


def test_weights_cannot_be_negative():
    """Negative weights are rejected even if they sum up to 1.0."""
    with pytest.raises(ValidationError):
        ScoreWeights(word=1.5, contrast=-0.5, trigram=0.0)
