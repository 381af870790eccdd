"""Module with endpoints of the slop scoring API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import cache
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Request
from loguru import logger

from slopscore.api.data_models import HealthcheckResponse, ScoreRequest, ScoreResponse
from slopscore.api.rate_limiter import RateLimiter
from slopscore.api.utils import get_ip_address_or_raise, to_http_exception
from slopscore.errors import AssetsUnavailableError, SlopScoreError
from slopscore.report import get_interpretation
from slopscore.service import SlopScoreService

router = APIRouter()


@cache
def get_service() -> SlopScoreService:
    """
    Get the service shared by all requests.

    Returns:
        SlopScoreService: The service configured from the configuration.
    """
    return SlopScoreService()


@cache
def get_rate_limiter() -> RateLimiter:
    """
    Get the rate limiter shared by all requests.

    Returns:
        RateLimiter: The rate limiter configured from the configuration.
    """
    return RateLimiter()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Load the assets before the first request is served.

    Args:
        app (FastAPI): The application being started.
    """
    service = app.dependency_overrides.get(get_service, get_service)()
    try:
        service.asset_provider.get()
    except AssetsUnavailableError as exception:
        logger.error(f"Assets are unavailable on startup: {exception}")
    logger.info("The slop scoring API is ready.")
    yield


@router.get("/health")
def healthcheck(
    service: Annotated[SlopScoreService, Depends(get_service)],
) -> HealthcheckResponse:
    """
    Check whether the API is able to score texts.

    Returns:
        HealthcheckResponse: Status of the system.
    """
    try:
        service.asset_provider.get()
    except AssetsUnavailableError:
        return HealthcheckResponse(is_healthy=False)
    return HealthcheckResponse(is_healthy=True)


@router.post("/score")
def score_text(
    fastapi_request: Request,
    request: ScoreRequest,
    service: Annotated[SlopScoreService, Depends(get_service)],
    rate_limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
) -> ScoreResponse:
    """
    Score how strongly a text shows patterns typical of AI-generated prose.

    Returns:
        ScoreResponse: The slop score with its metrics and evidence.
    """
    rate_limiter(get_ip_address_or_raise(fastapi_request))
    try:
        scored = service.compute_score_from_text(request.text, request.language)
    except SlopScoreError as exception:
        logger.info(f"Rejected a scoring request: {exception}")
        raise to_http_exception(exception) from exception

    result = scored.result
    return ScoreResponse(
        slop_score=result.slop_score,
        interpretation=get_interpretation(result.slop_score),
        word_count=result.word_count,
        char_count=result.char_count,
        metrics=result.metrics,
        details=result.details,
        compute_ms=scored.compute_ms,
    )
