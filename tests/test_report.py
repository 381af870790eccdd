import pytest

from slopscore.data_models import SlopAssets
from slopscore.report import get_interpretation, render_score_output
from slopscore.scoring import compute_score
from tests.utils import HIGH_SLOP_TEXT, LOW_SLOP_TEXT


@pytest.mark.parametrize(
    ("slop_score", "expected"),
    [
        (0, "Very human-like, natural writing"),
        (19.9, "Very human-like, natural writing"),
        (20, "Mostly human with some AI characteristics"),
        (45, "Mixed characteristics, unclear origin"),
        (79.9, "Likely AI-generated with some editing"),
        (80, "Strong AI signature, minimal human intervention"),
        (100, "Strong AI signature, minimal human intervention"),
    ],
)
def test_get_interpretation(slop_score: float, expected: str):
    """Scores map onto bands of 20 points."""
    assert get_interpretation(slop_score) == expected


def test_render_score_output(assets: SlopAssets, surface_detector):
    """The report lists the score, the evidence and the verdict."""
    result = compute_score(HIGH_SLOP_TEXT, assets, detector=surface_detector)
    report = render_score_output(result)
    assert "=== SLOP Score Analysis ===" in report
    assert "Final Score: 100.0/100" in report
    assert '"delve": 1x' in report
    assert "Top Slop Trigrams:" in report
    assert "Pattern: S1_RE_NOT_BUT" in report
    assert "Interpretation: Strong AI signature" in report


def test_render_score_output_without_evidence(
    assets: SlopAssets, surface_detector
):
    """Empty evidence sections are left out."""
    report = render_score_output(
        compute_score(LOW_SLOP_TEXT, assets, detector=surface_detector)
    )
    assert "Top Slop Words:" not in report
    assert "Contrast Patterns Found:" not in report
    assert "Interpretation: Very human-like, natural writing" in report


def test_render_score_output_skips_long_sentences(
    assets: SlopAssets, surface_detector
):
    """Sentences of 150 or more characters are not quoted."""
    long_sentence = (
        "The committee was not convinced by the first draft of the plan, which ran "
        "to many pages and covered every region in detail, but the second draft "
        "was approved."
    )
    report = render_score_output(
        compute_score(long_sentence, assets, detector=surface_detector)
    )
    assert "Pattern: S1_RE_NOT_BUT" in report
    assert "Sentence:" not in report
