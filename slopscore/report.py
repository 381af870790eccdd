"""Module rendering human-readable reports of slop scores."""

from slopscore.data_models import ContrastStatus, ScoreResult

TOP_WORDS = 10
TOP_TRIGRAMS = 5
TOP_CONTRAST_MATCHES = 5
# Longer sentences are left out of the report to keep it readable.
MAX_SENTENCE_LENGTH = 150

INTERPRETATION_BANDS: list[tuple[float, str]] = [
    (20, "Very human-like, natural writing"),
    (40, "Mostly human with some AI characteristics"),
    (60, "Mixed characteristics, unclear origin"),
    (80, "Likely AI-generated with some editing"),
]
STRONGEST_INTERPRETATION = "Strong AI signature, minimal human intervention"


def get_interpretation(slop_score: float) -> str:
    """
    Describe what a slop score means.

    Args:
        slop_score (float): A score in the range [0, 100].

    Returns:
        str: A short verdict for the score.
    """
    for upper_bound, interpretation in INTERPRETATION_BANDS:
        if slop_score < upper_bound:
            return interpretation
    return STRONGEST_INTERPRETATION


def render_score_output(result: ScoreResult) -> str:
    """
    Render a score as a plain text report.

    Args:
        result (ScoreResult): The score to be presented.

    Returns:
        str: A multi-line report with metrics, evidence and the interpretation.
    """
    metrics = result.metrics
    details = result.details
    contrast_rate = (
        "unavailable"
        if metrics.contrast_rate_per_1k is None
        else f"{metrics.contrast_rate_per_1k:.2f} per 1k chars"
    )

    lines = [
        "",
        "=== SLOP Score Analysis ===",
        "",
        f"Final Score: {result.slop_score}/100",
        f"Word Count: {result.word_count}",
        f"Character Count: {result.char_count}",
        "",
        "Component Metrics:",
        f"  Word Score: {metrics.word_rate_per_1k:.2f} per 1k words",
        f"  Trigram Score: {metrics.trigram_rate_per_1k:.2f} per 1k trigrams",
        f"  Contrast Pattern Score: {contrast_rate}",
    ]
    if details.contrast_status == ContrastStatus.SURFACE_ONLY:
        lines.append("  (structural contrast patterns were not checked)")

    if details.word_hits:
        lines += ["", "Top Slop Words:"]
        lines += [
            f'  "{word}": {count}x' for word, count in details.word_hits[:TOP_WORDS]
        ]

    if details.trigram_hits:
        lines += ["", "Top Slop Trigrams:"]
        lines += [
            f'  "{trigram}": {count}x'
            for trigram, count in details.trigram_hits[:TOP_TRIGRAMS]
        ]

    if details.contrast_matches:
        lines += ["", "Contrast Patterns Found:"]
        for match in details.contrast_matches[:TOP_CONTRAST_MATCHES]:
            lines.append(f"  Pattern: {match.pattern_name}")
            lines.append(f'  Match: "{match.match_text}"')
            if match.sentence and len(match.sentence) < MAX_SENTENCE_LENGTH:
                lines.append(f'  Sentence: "{match.sentence}"')
            lines.append("")

    lines += ["---", "", f"Interpretation: {get_interpretation(result.slop_score)}", ""]
    return "\n".join(lines)
