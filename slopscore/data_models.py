"""Module with project-wide data models."""

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

SUPPORTED_LANGUAGE = "english"

# (start, end) character offsets of a sentence in a normalised text.
SentenceSpan = tuple[int, int]
# (stream_start, stream_end, raw_start, raw_end).
StreamPiece = tuple[int, int, int, int]
# A word or a trigram with the number of its occurrences.
Hit = tuple[str, int]


class NormalizedText(BaseModel):
    """A text prepared for scoring along with its word tokens."""

    text: str
    char_count: int
    word_count: int
    tokens: tuple[str, ...]

    model_config = ConfigDict(frozen=True)


class Candidate(BaseModel):
    """A single match of a contrast rule, resolved to the sentences it covers."""

    sentence_lo: int
    sentence_hi: int
    raw_start: int
    raw_end: int
    pattern_name: str
    match_text: str


class ContrastMatch(BaseModel):
    """A rhetorical contrast found in a text, aligned to whole sentences."""

    sentence: str
    pattern_name: str
    match_text: str
    sentence_count: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class ContrastStatus(str, Enum):
    """How much of the contrast detection could be carried out."""

    COMPLETE = "complete"
    SURFACE_ONLY = "surface_only"
    UNAVAILABLE = "unavailable"


class NormalizationRange(BaseModel):
    """Calibrated range of a raw rate mapped onto [0, 1]."""

    min: float
    max: float

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> float:
        """Distance between both ends of the range."""
        return self.max - self.min


class SlopAssets(BaseModel):
    """Lexicons and benchmark ranges shared by all scoring calls."""

    words: frozenset[str]
    trigrams: frozenset[str]
    normalization_ranges: Mapping[str, NormalizationRange]

    model_config = ConfigDict(frozen=True)


class ScoreWeights(BaseModel):
    """Weights of the sub-scores in the composite slop score."""

    word: float = Field(0.60, ge=0.0, le=1.0)
    contrast: float = Field(0.25, ge=0.0, le=1.0)
    trigram: float = Field(0.15, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_weights_sum(self) -> Self:
        """Validate whether weights sum up to 1.0."""
        total = sum(
            (
                Decimal(str(self.word)),
                Decimal(str(self.contrast)),
                Decimal(str(self.trigram)),
            )
        )
        if total != 1:
            raise ValueError(
                f"Weights of the sub-scores have to sum up to 1.0 but they sum up "
                f"to {total}."
            )

        return self


class ScoreMetrics(BaseModel):
    """Raw rates of the three slop signals."""

    word_rate_per_1k: float
    trigram_rate_per_1k: float
    # None only if the contrast detection was unavailable.
    contrast_rate_per_1k: float | None

    model_config = ConfigDict(frozen=True)


class ScoreDetails(BaseModel):
    """Evidence behind the slop score."""

    word_hits: list[Hit]
    trigram_hits: list[Hit]
    contrast_matches: list[ContrastMatch]
    contrast_status: ContrastStatus

    model_config = ConfigDict(frozen=True)


class ScoreResult(BaseModel):
    """Outcome of scoring a single text."""

    slop_score: float = Field(..., ge=0.0, le=100.0)
    word_count: int
    char_count: int
    metrics: ScoreMetrics
    details: ScoreDetails

    model_config = ConfigDict(frozen=True)
