"""Package with data models for the API."""

from pydantic import BaseModel, Field

from slopscore.data_models import SUPPORTED_LANGUAGE, ScoreDetails, ScoreMetrics


class HealthcheckResponse(BaseModel):
    """Response from the healthcheck endpoint indicating the status of the system."""

    is_healthy: bool


class ScoreRequest(BaseModel):
    """API request for scoring a text."""

    text: str
    language: str = SUPPORTED_LANGUAGE


class ScoreResponse(BaseModel):
    """Response sent when a client requests a slop score of a text."""

    slop_score: float = Field(..., ge=0.0, le=100.0)
    interpretation: str
    word_count: int
    char_count: int
    metrics: ScoreMetrics
    details: ScoreDetails
    compute_ms: float
